"""
Structured command records produced by the parser.
"""

from enum import Enum

from attrs import field, frozen

from radarcmd.core.types import ArgumentValue


class CommandCategory(Enum):
    """Whether a command controls the simulation or a targeted aircraft."""

    SYSTEM = "system"
    AIRCRAFT = "aircraft"


@frozen
class Command:
    """
    A validated console command, ready for the execution layer.

    Holds only the canonical command name; which alias the user typed is not
    retained. System commands carry an empty target id. Every chained aircraft
    command on a line becomes its own record addressed to the same target.
    """

    name: str
    category: CommandCategory
    target_id: str = ""
    args: tuple[ArgumentValue, ...] = field(default=(), converter=tuple)

    @property
    def name_and_args(self) -> tuple[ArgumentValue, ...]:
        """The command name followed by its arguments, as one call signature."""
        return (self.name, *self.args)

    @property
    def is_system(self) -> bool:
        return self.category is CommandCategory.SYSTEM
