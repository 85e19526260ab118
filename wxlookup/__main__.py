import sys

from wxlookup.cli import main

sys.exit(main())
