"""
Command definitions and alias registries.

A definition ties one canonical command to the aliases users may type and to
the parse/validate functions for its arguments. A registry groups the
definitions of one command category and resolves aliases to canonical names.
"""

import logging
from collections.abc import Iterable, Iterator, Mapping
from types import MappingProxyType

import inflection
from attrs import field, frozen, validators

from radarcmd.commands.command import CommandCategory
from radarcmd.core.types import AircraftParser, SystemParser, Validator
from radarcmd.exceptions import DuplicateAliasError, DuplicateCommandError

logger = logging.getLogger(__name__)


def _normalize_aliases(aliases: Iterable[str]) -> frozenset[str]:
    return frozenset(alias.lower() for alias in aliases)


@frozen
class CommandDefinition:
    """
    Definition of a single canonical command.

    Both `parse` and `validate` are mandatory; commands that need neither use
    the explicit `identity` function.

    Params:
        name: Canonical command name reported to the execution layer
        aliases: Tokens that resolve to this command (stored lower-case)
        parse: Argument parser, see radarcmd.arguments.parsers for the contract
        validate: Argument validator returning the validated argument list
    """

    name: str = field(validator=validators.min_len(1))
    aliases: frozenset[str] = field(converter=_normalize_aliases)
    parse: SystemParser | AircraftParser = field(validator=validators.is_callable())
    validate: Validator = field(validator=validators.is_callable())

    @property
    def handler_name(self) -> str:
        """Name of the execution-layer method that runs this command."""
        return f"run_{inflection.underscore(self.name)}"

    @property
    def label(self) -> str:
        """Human readable command name for user-facing messages."""
        return inflection.humanize(self.name)


class CommandRegistry:
    """Read-only registry of command definitions for one command category.

    Responsibilities:
      - Refuse duplicate canonical names and aliases claimed by two commands.
      - Resolve any alias to its canonical name through an inverted index built
        once at construction.

    Notes:
      - Registries are module-level constants; there is no mutation API.
    """

    def __init__(self, category: CommandCategory, definitions: Iterable[CommandDefinition]):
        self.category = category
        commands: dict[str, CommandDefinition] = {}
        alias_index: dict[str, str] = {}

        for definition in definitions:
            if definition.name in commands:
                raise DuplicateCommandError(definition.name, category.value)
            for alias in definition.aliases:
                if alias in alias_index:
                    raise DuplicateAliasError(alias, alias_index[alias], definition.name)
                alias_index[alias] = definition.name
            commands[definition.name] = definition

        self._commands: Mapping[str, CommandDefinition] = MappingProxyType(commands)
        self._alias_index: Mapping[str, str] = MappingProxyType(alias_index)
        logger.debug(
            "Built %s registry with %d commands and %d aliases",
            category.value,
            len(commands),
            len(alias_index),
        )

    def resolve(self, alias: str) -> str | None:
        """
        Get the canonical command name for an alias.

        Params:
            alias: Token as typed (already normalized by the tokenizer)

        Returns:
            Canonical command name, or None if no command claims the alias
        """
        return self._alias_index.get(alias)

    def is_alias(self, token: str) -> bool:
        """Check whether a token starts a command in this registry."""
        return token in self._alias_index

    def get(self, name: str) -> CommandDefinition | None:
        return self._commands.get(name)

    def list_commands(self) -> list[str]:
        """List all canonical command names.

        Returns:
            Canonical names in registration order.
        """
        return list(self._commands.keys())

    @property
    def aliases(self) -> Mapping[str, str]:
        """Read-only alias -> canonical name index."""
        return self._alias_index

    def __getitem__(self, name: str) -> CommandDefinition:
        if name not in self._commands:
            raise KeyError(
                f"Command {name} is not defined in the {self.category.value} registry. "
                f"Available commands: {self.list_commands()}"
            )
        return self._commands[name]

    def __contains__(self, token: object) -> bool:
        return token in self._alias_index

    def __iter__(self) -> Iterator[CommandDefinition]:
        return iter(self._commands.values())

    def __len__(self) -> int:
        return len(self._commands)
