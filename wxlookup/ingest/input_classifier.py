"""Classify user input as a coordinate pair or a place-name query."""

import re
from dataclasses import dataclass

# latitude then longitude, separated by a comma and/or whitespace; ASCII digits only
COORDINATE_PATTERN = re.compile(
    r"^(-?[0-9]{1,2}(?:\.[0-9]+)?)[,\s]+(-?[0-9]{1,3}(?:\.[0-9]+)?)$"
)


@dataclass(frozen=True)
class CoordinateInput:
    lat: float
    lon: float


@dataclass(frozen=True)
class FreeTextInput:
    text: str


ClassifiedInput = CoordinateInput | FreeTextInput


def classify(text: str) -> ClassifiedInput:
    """Return CoordinateInput for an in-range "lat, lon" pair, else FreeTextInput.

    Out-of-range pairs such as "95, 10" fall through to free text and are
    geocoded like any other query.
    """
    stripped = text.strip()
    match = COORDINATE_PATTERN.match(stripped)
    if match is None:
        return FreeTextInput(stripped)
    lat = float(match.group(1))
    lon = float(match.group(2))
    if abs(lat) > 90 or abs(lon) > 180:
        return FreeTextInput(stripped)
    return CoordinateInput(lat, lon)


def is_coordinate_input(text: str) -> bool:
    return isinstance(classify(text), CoordinateInput)
