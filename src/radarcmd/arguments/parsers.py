"""
Argument parsers for console commands.

System command parsers receive every token after the command word and return
the parsed argument list.

Aircraft command parsers receive the tokens following their command word and
return `(parsed_args, remaining_tokens)`. Each parser decides how many tokens
it consumes; the remainder is handed back untouched so the dispatcher can
continue with the next chained command. The dispatcher passes every aircraft
parser an `is_command` predicate that recognises the aliases of the registry
in use: parsers with an open-ended argument count stop at the first token for
which it is true, fixed-arity parsers ignore it.

Parsers convert but never judge arity: a short argument list is returned as-is
and rejected by the matching validator.
"""

import re

from radarcmd.arguments.conversions import (
    LEG_LENGTH_PATTERN,
    convert_string_to_number,
    is_numeric,
    normalize_turn_direction,
    to_altitude,
)
from radarcmd.core.types import CommandPredicate, ParsedArguments, TokenStream
from radarcmd.exceptions import ValidationError

EXPEDITE_WORDS = frozenset({"ex", "expedite"})

DEFAULT_HOLD_TURN_DIRECTION = "right"
DEFAULT_HOLD_LEG_LENGTH = "1min"

_CROSSING_RESTRICTION_PATTERN = re.compile(r"^(?P<kind>[as])(?P<value>\d+)$")


def _never_command(token: str) -> bool:
    return False


def _to_number(token: str, description: str) -> int | float:
    try:
        return convert_string_to_number(token)
    except ValueError:
        raise ValidationError(f"Invalid {description} '{token}', expected a number")


def _to_altitude(token: str) -> int | float:
    try:
        return to_altitude(token)
    except ValueError:
        raise ValidationError(f"Invalid altitude '{token}', expected a number")


# System command parsers


def passthrough_parser(tokens: TokenStream) -> ParsedArguments:
    return list(tokens)


def timewarp_parser(tokens: TokenStream) -> ParsedArguments:
    """
    Parse the timewarp rate.

    No argument yields `[0]`, which the simulation treats as a reset to real
    time.
    """
    if not tokens:
        return [0]
    return [_to_number(token, "timewarp rate") for token in tokens]


def rate_parser(tokens: TokenStream) -> ParsedArguments:
    return [_to_number(token, "simulation rate") for token in tokens]


# Aircraft command consumers


def consume_none(
    tokens: TokenStream, *, is_command: CommandPredicate = _never_command
) -> tuple[ParsedArguments, TokenStream]:
    return [], tokens


def consume_single(
    tokens: TokenStream, *, is_command: CommandPredicate = _never_command
) -> tuple[ParsedArguments, TokenStream]:
    return list(tokens[:1]), tokens[1:]


def consume_optional(
    tokens: TokenStream, *, is_command: CommandPredicate = _never_command
) -> tuple[ParsedArguments, TokenStream]:
    """Consume the next token unless it starts another command."""
    if tokens and not is_command(tokens[0]):
        return [tokens[0]], tokens[1:]
    return [], tokens


def consume_until_command(
    tokens: TokenStream,
    *,
    is_command: CommandPredicate = _never_command,
    limit: int | None = None,
) -> tuple[ParsedArguments, TokenStream]:
    """
    Consume tokens up to the next command word.

    Params:
        tokens: Tokens following the command word
        is_command: Predicate recognising the start of the next command
        limit: Maximum number of tokens to consume, unbounded when None

    Returns:
        Consumed tokens and the untouched remainder
    """
    count = 0
    for token in tokens:
        if is_command(token) or (limit is not None and count >= limit):
            break
        count += 1
    return list(tokens[:count]), tokens[count:]


def altitude_parser(
    tokens: TokenStream, *, is_command: CommandPredicate = _never_command
) -> tuple[ParsedArguments, TokenStream]:
    """
    Parse `<altitude> [expedite]` into `[altitude_feet, expedite]`.

    The altitude is given in hundreds of feet.
    """
    if not tokens:
        return [], tokens

    altitude = _to_altitude(tokens[0])
    remaining = tokens[1:]
    expedite = bool(remaining) and remaining[0] in EXPEDITE_WORDS
    if expedite:
        remaining = remaining[1:]
    return [altitude, expedite], remaining


def optional_altitude_parser(
    tokens: TokenStream, *, is_command: CommandPredicate = _never_command
) -> tuple[ParsedArguments, TokenStream]:
    """Consume an altitude only when the next token is numeric."""
    if tokens and is_numeric(tokens[0]):
        return [_to_altitude(tokens[0])], tokens[1:]
    return [], tokens


def heading_parser(
    tokens: TokenStream, *, is_command: CommandPredicate = _never_command
) -> tuple[ParsedArguments, TokenStream]:
    """
    Parse `[direction] <heading>` into `[direction, heading, incremental]`.

    A one or two digit value after an explicit direction is a relative turn
    by that many degrees ("t l 30"); three digits are an absolute heading.
    """
    if not tokens:
        return [], tokens

    direction = normalize_turn_direction(tokens[0])
    if direction is None:
        return [None, _to_number(tokens[0], "heading"), False], tokens[1:]

    if len(tokens) < 2:
        return [direction], tokens[1:]

    heading_token = tokens[1]
    heading = _to_number(heading_token, "heading")
    incremental = len(heading_token) < 3
    return [direction, heading, incremental], tokens[2:]


def hold_parser(
    tokens: TokenStream, *, is_command: CommandPredicate = _never_command
) -> tuple[ParsedArguments, TokenStream]:
    """
    Parse up to three hold arguments in any order.

    Returns `[turn_direction, leg_length, fix_name]`. A missing fix means
    holding at the present position.

    Raises:
        ValidationError: When the same kind of argument is given twice
    """
    consumed, remaining = consume_until_command(tokens, is_command=is_command, limit=3)

    turn_direction = None
    leg_length = None
    fix_name = None
    for token in consumed:
        direction = normalize_turn_direction(token)
        if direction is not None:
            if turn_direction is not None:
                raise ValidationError(f"Hold turn direction given twice ('{token}')")
            turn_direction = direction
        elif LEG_LENGTH_PATTERN.match(token):
            if leg_length is not None:
                raise ValidationError(f"Hold leg length given twice ('{token}')")
            leg_length = token
        else:
            if fix_name is not None:
                raise ValidationError(
                    f"Hold accepts a single fix, got '{fix_name}' and '{token}'"
                )
            fix_name = token

    return [
        turn_direction or DEFAULT_HOLD_TURN_DIRECTION,
        leg_length or DEFAULT_HOLD_LEG_LENGTH,
        fix_name,
    ], remaining


def crossing_parser(
    tokens: TokenStream, *, is_command: CommandPredicate = _never_command
) -> tuple[ParsedArguments, TokenStream]:
    """
    Parse `<fix> [aNNN] [sNNN]` into `[fix_name, altitude_feet, speed]`.

    Raises:
        ValidationError: When a restriction is malformed or given twice
    """
    consumed, remaining = consume_until_command(tokens, is_command=is_command, limit=3)
    if not consumed:
        return [], remaining

    fix_name, *restrictions = consumed
    altitude = None
    speed = None
    for token in restrictions:
        match = _CROSSING_RESTRICTION_PATTERN.match(token)
        if match is None:
            raise ValidationError(
                f"Invalid crossing restriction '{token}', expected 'aNNN' or 'sNNN'"
            )
        if match.group("kind") == "a":
            if altitude is not None:
                raise ValidationError(f"Crossing altitude given twice ('{token}')")
            altitude = _to_altitude(match.group("value"))
        else:
            if speed is not None:
                raise ValidationError(f"Crossing speed given twice ('{token}')")
            speed = _to_number(match.group("value"), "speed")
    return [fix_name, altitude, speed], remaining


def speed_parser(
    tokens: TokenStream, *, is_command: CommandPredicate = _never_command
) -> tuple[ParsedArguments, TokenStream]:
    if not tokens:
        return [], tokens
    return [_to_number(tokens[0], "speed")], tokens[1:]


def approach_parser(
    tokens: TokenStream, *, is_command: CommandPredicate = _never_command
) -> tuple[ParsedArguments, TokenStream]:
    """Parse `<runway>` into `[approach_type, runway]`; the type defaults to None."""
    if not tokens:
        return [], tokens
    return [None, tokens[0]], tokens[1:]
