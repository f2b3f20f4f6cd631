"""
Numeric and unit conversion helpers used by the argument parsers.
"""

import math
import re

# Altitudes are typed in hundreds of feet ("050" -> 5,000 ft)
ALTITUDE_SCALE = 100

# Hold legs are measured in minutes or nautical miles
LEG_LENGTH_UNITS = ("min", "nm")

LEG_LENGTH_PATTERN = re.compile(rf"^\d+(\.\d+)?({'|'.join(LEG_LENGTH_UNITS)})$")

TURN_DIRECTIONS = {
    "l": "left",
    "left": "left",
    "r": "right",
    "right": "right",
}

_NUMBER_PATTERN = re.compile(r"^[+-]?(\d+(\.\d*)?|\.\d+)$")


def is_numeric(value: str) -> bool:
    """Check whether a token is a plain decimal number."""
    return bool(_NUMBER_PATTERN.match(value))


def convert_string_to_number(value: str) -> int | float:
    """
    Convert a numeric token to an int, or a float when it has a fraction.

    Leading zeros are accepted, so headings such as "030" convert to 30.
    Integer tokens keep their exact value at any length.

    Params:
        value: Token to convert

    Returns:
        The numeric value

    Raises:
        ValueError: If the token is not a plain decimal number, or a
            fractional token is too large to represent as a finite float
    """
    if not is_numeric(value):
        raise ValueError(f"'{value}' is not a number")

    if "." not in value:
        return int(value)

    number = float(value)
    if not math.isfinite(number):
        raise ValueError(f"'{value}' is out of range")
    return number


def to_altitude(value: str) -> int | float:
    """Convert an altitude token in hundreds of feet to feet."""
    return convert_string_to_number(value) * ALTITUDE_SCALE


def normalize_turn_direction(value: str) -> str | None:
    """Map l/left/r/right to 'left' or 'right'; None when not a direction."""
    return TURN_DIRECTIONS.get(value)
