"""
Commands transmitted to a specific aircraft.

Several aircraft commands may be chained on one line ("AA777 fh 030 sp 250").
Parsers with an open-ended argument count stop at the next token that is an
alias of the registry the dispatcher parses with; the dispatcher hands each
parser that check as its `is_command` argument.
"""

from radarcmd.arguments import parsers
from radarcmd.arguments.validators import (
    altitude_validator,
    approach_validator,
    crossing_validator,
    fix_validator,
    heading_validator,
    hold_validator,
    optional_altitude_validator,
    single_argument_validator,
    speed_validator,
    squawk_validator,
    zero_arguments_validator,
    zero_or_one_argument_validator,
)
from radarcmd.commands.command import CommandCategory
from radarcmd.commands.definition import CommandDefinition, CommandRegistry

AIRCRAFT_ALIASES: dict[str, tuple[str, ...]] = {
    "abort": ("abort",),
    "altitude": ("a", "altitude", "c", "climb", "d", "descend"),
    "cancel_hold": ("exithold", "cancelhold", "continue", "nohold", "xh"),
    "cleared_as_filed": ("caf", "clearedasfiled"),
    "climb_via_sid": ("climbviasid", "cvs"),
    "cross": ("cross", "cr", "x"),
    "delete": ("del", "delete", "kill"),
    "descend_via_star": ("descendviastar", "dvs"),
    "direct": ("dct", "direct", "pd"),
    "expect_arrival_runway": ("e",),
    "fix": ("f", "fix", "track"),
    "fly_present_heading": ("fph",),
    "heading": ("fh", "h", "heading", "t", "turn"),
    "hold": ("hold",),
    "ils": ("*", "i", "ils"),
    "land": ("land",),
    "move_data_block": ("`",),
    "reroute": ("reroute", "rr"),
    "route": ("route",),
    "say_altitude": ("sa",),
    "say_assigned_altitude": ("saa",),
    "say_assigned_heading": ("sah",),
    "say_assigned_speed": ("sas",),
    "say_heading": ("sh",),
    "say_indicated_airspeed": ("si",),
    "say_route": ("sr",),
    "sid": ("sid",),
    "speed": ("-", "+", "slow", "sp", "speed"),
    "squawk": ("sq", "squawk"),
    "star": ("star",),
    "takeoff": ("cto", "to", "takeoff"),
    "taxi": ("taxi", "w", "wait"),
}


# canonical name -> (parse, validate)
_ARGUMENT_HANDLERS = {
    "abort": (parsers.consume_none, zero_arguments_validator),
    "altitude": (parsers.altitude_parser, altitude_validator),
    "cancel_hold": (parsers.consume_optional, zero_or_one_argument_validator),
    "cleared_as_filed": (parsers.consume_none, zero_arguments_validator),
    "climb_via_sid": (parsers.optional_altitude_parser, optional_altitude_validator),
    "cross": (parsers.crossing_parser, crossing_validator),
    "delete": (parsers.consume_none, zero_arguments_validator),
    "descend_via_star": (parsers.optional_altitude_parser, optional_altitude_validator),
    "direct": (parsers.consume_single, single_argument_validator),
    "expect_arrival_runway": (parsers.consume_single, single_argument_validator),
    "fix": (parsers.consume_until_command, fix_validator),
    "fly_present_heading": (parsers.consume_none, zero_arguments_validator),
    "heading": (parsers.heading_parser, heading_validator),
    "hold": (parsers.hold_parser, hold_validator),
    "ils": (parsers.approach_parser, approach_validator),
    "land": (parsers.consume_optional, zero_or_one_argument_validator),
    "move_data_block": (parsers.consume_single, single_argument_validator),
    "reroute": (parsers.consume_single, single_argument_validator),
    "route": (parsers.consume_single, single_argument_validator),
    "say_altitude": (parsers.consume_none, zero_arguments_validator),
    "say_assigned_altitude": (parsers.consume_none, zero_arguments_validator),
    "say_assigned_heading": (parsers.consume_none, zero_arguments_validator),
    "say_assigned_speed": (parsers.consume_none, zero_arguments_validator),
    "say_heading": (parsers.consume_none, zero_arguments_validator),
    "say_indicated_airspeed": (parsers.consume_none, zero_arguments_validator),
    "say_route": (parsers.consume_none, zero_arguments_validator),
    "sid": (parsers.consume_single, single_argument_validator),
    "speed": (parsers.speed_parser, speed_validator),
    "squawk": (parsers.consume_single, squawk_validator),
    "star": (parsers.consume_single, single_argument_validator),
    "takeoff": (parsers.consume_none, zero_arguments_validator),
    "taxi": (parsers.consume_optional, zero_or_one_argument_validator),
}

AIRCRAFT_COMMANDS = CommandRegistry(
    CommandCategory.AIRCRAFT,
    [
        CommandDefinition(name, aliases, *_ARGUMENT_HANDLERS[name])
        for name, aliases in AIRCRAFT_ALIASES.items()
    ],
)
