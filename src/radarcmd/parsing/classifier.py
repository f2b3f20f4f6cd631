"""
Classification of a console line as a system or aircraft command.
"""

from radarcmd.commands.command import CommandCategory
from radarcmd.commands.definition import CommandRegistry
from radarcmd.commands.system import SYSTEM_COMMANDS


def classify(
    first_token: str, system_registry: CommandRegistry = SYSTEM_COMMANDS
) -> CommandCategory:
    """
    Decide which command category a line belongs to from its first token.

    Any token that is not a system command is taken as an aircraft callsign.
    Whether that aircraft exists is for the execution layer to decide.

    Params:
        first_token: First token of the line
        system_registry: Registry of system commands

    Returns:
        CommandCategory.SYSTEM or CommandCategory.AIRCRAFT
    """
    if first_token in system_registry:
        return CommandCategory.SYSTEM
    return CommandCategory.AIRCRAFT
