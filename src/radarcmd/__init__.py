"""
radarcmd - Console command parser for air traffic control simulations

radarcmd turns a line typed into the simulation console into validated,
structured commands for the simulation or for a targeted aircraft.
"""

from importlib.metadata import version

from radarcmd.commands import AIRCRAFT_COMMANDS, SYSTEM_COMMANDS, Command, CommandCategory
from radarcmd.core.settings import ChainPolicy, ParserSettings
from radarcmd.parsing import CommandParser, parse_command

__version__ = version("radarcmd")

__all__ = [
    "__version__",
    "Command",
    "CommandCategory",
    "CommandParser",
    "ParserSettings",
    "ChainPolicy",
    "AIRCRAFT_COMMANDS",
    "SYSTEM_COMMANDS",
    "parse_command",
]
