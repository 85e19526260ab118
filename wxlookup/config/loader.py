"""YAML config loader and dotted-key lookup."""

import logging
from pathlib import Path
from typing import Any

import yaml
from pydantic import BaseModel

from wxlookup.config.schema import AppConfig

logger = logging.getLogger(__name__)


def load_config(path: str | Path | None = None) -> AppConfig:
    """Load and validate config from a YAML file.

    A missing path or file yields the defaults.
    """
    if path is None:
        return AppConfig()
    path = Path(path)
    if not path.exists():
        logger.debug("Config %s not found, using defaults", path)
        return AppConfig()
    with open(path) as f:
        raw = yaml.safe_load(f) or {}
    return AppConfig(**raw)


def get_config_value(config: AppConfig, dotted_key: str) -> Any:
    """Get a config value by dotted key path. E.g. 'geolocation.timeout_s'."""
    obj: Any = config
    for part in dotted_key.split("."):
        if isinstance(obj, BaseModel) and part in type(obj).model_fields:
            obj = getattr(obj, part)
        elif isinstance(obj, dict) and part in obj:
            obj = obj[part]
        else:
            raise KeyError(f"Config key not found: {dotted_key}")
    return obj
