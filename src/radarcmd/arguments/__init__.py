"""
Argument parsing and validation for console commands.

This package holds the pure functions each command definition points at:
parsers that turn tokens into typed arguments, validators that check arity and
ranges, and the conversion helpers they share.
"""

from radarcmd.arguments.conversions import (
    convert_string_to_number,
    is_numeric,
    normalize_turn_direction,
    to_altitude,
)
from radarcmd.arguments.validators import identity

__all__ = [
    "convert_string_to_number",
    "is_numeric",
    "normalize_turn_direction",
    "to_altitude",
    "identity",
]
