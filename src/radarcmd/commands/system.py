"""
System commands that control the simulation itself.

System command aliases are exactly their canonical names, so a token is a
system command if and only if it names a command in this registry.
"""

from radarcmd.arguments.parsers import passthrough_parser, rate_parser, timewarp_parser
from radarcmd.arguments.validators import (
    identity,
    single_argument_validator,
    zero_arguments_validator,
    zero_or_one_argument_validator,
)
from radarcmd.commands.command import CommandCategory
from radarcmd.commands.definition import CommandDefinition, CommandRegistry


def _system(name, validate, parse=passthrough_parser) -> CommandDefinition:
    return CommandDefinition(name=name, aliases={name}, parse=parse, validate=validate)


SYSTEM_COMMANDS = CommandRegistry(
    CommandCategory.SYSTEM,
    [
        _system("airac", zero_arguments_validator),
        _system("airport", single_argument_validator),
        _system("auto", zero_arguments_validator),
        _system("clear", zero_arguments_validator),
        _system("debug", zero_arguments_validator),
        _system("pause", zero_arguments_validator),
        _system("rate", single_argument_validator, parse=rate_parser),
        _system("timewarp", zero_or_one_argument_validator, parse=timewarp_parser),
        _system("transmit", identity, parse=identity),
        _system("tutorial", zero_arguments_validator),
    ],
)


def is_system_command(token: str) -> bool:
    """Check whether the first token of a line names a system command."""
    return token in SYSTEM_COMMANDS
