"""
Command records, definitions and the system/aircraft command registries.
"""

from radarcmd.commands.aircraft import AIRCRAFT_ALIASES, AIRCRAFT_COMMANDS
from radarcmd.commands.command import Command, CommandCategory
from radarcmd.commands.definition import CommandDefinition, CommandRegistry
from radarcmd.commands.system import SYSTEM_COMMANDS, is_system_command

__all__ = [
    "Command",
    "CommandCategory",
    "CommandDefinition",
    "CommandRegistry",
    "AIRCRAFT_ALIASES",
    "AIRCRAFT_COMMANDS",
    "SYSTEM_COMMANDS",
    "is_system_command",
]
