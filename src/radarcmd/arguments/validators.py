"""
Argument validators for console commands.

Each validator receives the argument list produced by the command's parser and
returns it unchanged when valid. Failures raise ValidationError (or ArityError
for a wrong argument count); the dispatcher attaches location context.
"""

import re

from radarcmd.arguments.conversions import LEG_LENGTH_PATTERN
from radarcmd.core.types import ParsedArguments
from radarcmd.exceptions import ArityError, ValidationError

MAX_HEADING = 360

SQUAWK_PATTERN = re.compile(r"^[0-7]{4}$")


def identity(value):
    """Return the value unchanged; used by pass-through commands."""
    return value


def _require_count(args: ParsedArguments, minimum: int, maximum: int, expected: str) -> None:
    if not minimum <= len(args) <= maximum:
        raise ArityError(expected, len(args))


def _require_number(value, description: str) -> None:
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise ValidationError(f"Invalid {description} '{value}', expected a number")


def zero_arguments_validator(args: ParsedArguments) -> ParsedArguments:
    _require_count(args, 0, 0, "zero")
    return args


def single_argument_validator(args: ParsedArguments) -> ParsedArguments:
    _require_count(args, 1, 1, "exactly one")
    return args


def zero_or_one_argument_validator(args: ParsedArguments) -> ParsedArguments:
    _require_count(args, 0, 1, "zero or one")
    return args


def optional_altitude_validator(args: ParsedArguments) -> ParsedArguments:
    _require_count(args, 0, 1, "zero or one")
    if args:
        _require_number(args[0], "altitude")
    return args


def altitude_validator(args: ParsedArguments) -> ParsedArguments:
    """
    Validate `[altitude_feet, expedite]` as produced by altitude_parser.

    Raises:
        ArityError: When no altitude was given
        ValidationError: When the altitude is negative or not numeric
    """
    _require_count(args, 2, 2, "one or two")

    altitude, expedite = args
    _require_number(altitude, "altitude")
    if altitude < 0:
        raise ValidationError(f"Invalid altitude '{altitude}', must not be negative")
    if not isinstance(expedite, bool):
        raise ValidationError(f"Invalid expedite flag '{expedite}'")
    return args


def heading_validator(args: ParsedArguments) -> ParsedArguments:
    """
    Validate `[direction, heading, incremental]` as produced by heading_parser.

    Direction may be None (shortest turn), 'left' or 'right'. An incremental
    turn requires an explicit direction.
    """
    if len(args) == 1:
        raise ValidationError(f"Turn direction '{args[0]}' requires a heading")
    if len(args) != 3:
        raise ArityError("one or two", len(args))

    direction, heading, incremental = args
    if direction not in (None, "left", "right"):
        raise ValidationError(f"Invalid turn direction '{direction}'")
    _require_number(heading, "heading")
    if not 0 <= heading <= MAX_HEADING:
        raise ValidationError(
            f"Invalid heading '{heading}', must be between 0 and {MAX_HEADING}"
        )
    if incremental and direction is None:
        raise ValidationError("Incremental turns require a turn direction")
    return args


def hold_validator(args: ParsedArguments) -> ParsedArguments:
    """Validate `[turn_direction, leg_length, fix_name]` as produced by hold_parser."""
    _require_count(args, 3, 3, "zero to three")

    turn_direction, leg_length, _fix_name = args
    if turn_direction not in ("left", "right"):
        raise ValidationError(f"Invalid hold turn direction '{turn_direction}'")
    if not LEG_LENGTH_PATTERN.match(str(leg_length)):
        raise ValidationError(
            f"Invalid hold leg length '{leg_length}', expected e.g. '2min' or '5nm'"
        )
    return args


def crossing_validator(args: ParsedArguments) -> ParsedArguments:
    """Validate `[fix_name, altitude, speed]`; at least one restriction is required."""
    _require_count(args, 3, 3, "two or three")

    fix_name, altitude, speed = args
    if not fix_name:
        raise ValidationError("Crossing restriction requires a fix name")
    if altitude is None and speed is None:
        raise ValidationError(
            f"Crossing restriction at '{fix_name}' requires an altitude or a speed"
        )
    if altitude is not None:
        _require_number(altitude, "crossing altitude")
    if speed is not None:
        _require_number(speed, "crossing speed")
    return args


def fix_validator(args: ParsedArguments) -> ParsedArguments:
    if not args:
        raise ArityError("one or more", 0)
    for fix_name in args:
        if not fix_name:
            raise ValidationError("Fix names must not be empty")
    return args


def squawk_validator(args: ParsedArguments) -> ParsedArguments:
    _require_count(args, 1, 1, "exactly one")
    code = args[0]
    if not SQUAWK_PATTERN.match(str(code)):
        raise ValidationError(
            f"Invalid squawk '{code}', expected four octal digits (0-7)"
        )
    return args


def speed_validator(args: ParsedArguments) -> ParsedArguments:
    _require_count(args, 1, 1, "exactly one")
    _require_number(args[0], "speed")
    if args[0] <= 0:
        raise ValidationError(f"Invalid speed '{args[0]}', must be positive")
    return args


def approach_validator(args: ParsedArguments) -> ParsedArguments:
    """Validate `[approach_type, runway]` as produced by approach_parser."""
    _require_count(args, 2, 2, "exactly one")
    if not args[1]:
        raise ValidationError("Approach clearance requires a runway")
    return args
