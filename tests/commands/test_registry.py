"""
Tests for command definitions and registries.

This module tests:
- Registry construction invariants (unique names, disjoint aliases)
- Alias resolution across the built-in registries
- Definition metadata used by the execution layer
"""

from itertools import combinations

import attrs
import pytest

from radarcmd.arguments.validators import identity
from radarcmd.commands import AIRCRAFT_ALIASES, AIRCRAFT_COMMANDS, SYSTEM_COMMANDS
from radarcmd.commands.command import CommandCategory
from radarcmd.commands.definition import CommandDefinition, CommandRegistry
from radarcmd.commands.system import is_system_command
from radarcmd.exceptions import DuplicateAliasError, DuplicateCommandError, RegistryError

BUILT_IN_REGISTRIES = [SYSTEM_COMMANDS, AIRCRAFT_COMMANDS]


class TestRegistryInvariants:
    """Test invariants that hold for every built-in registry."""

    @pytest.mark.parametrize("registry", BUILT_IN_REGISTRIES)
    def test_alias_sets_are_pairwise_disjoint(self, registry):
        for first, second in combinations(registry, 2):
            assert not first.aliases & second.aliases, (
                f"{first.name} and {second.name} share {first.aliases & second.aliases}"
            )

    @pytest.mark.parametrize("registry", BUILT_IN_REGISTRIES)
    def test_every_alias_resolves_to_its_definition(self, registry):
        for definition in registry:
            for alias in definition.aliases:
                assert registry.resolve(alias) == definition.name

    @pytest.mark.parametrize("registry", BUILT_IN_REGISTRIES)
    def test_canonical_alias_resolves_like_its_aliases(self, registry):
        for definition in registry:
            if definition.name in definition.aliases:
                resolved = {registry.resolve(alias) for alias in definition.aliases}
                assert resolved == {registry.resolve(definition.name)}

    @pytest.mark.parametrize("registry", BUILT_IN_REGISTRIES)
    def test_every_definition_has_parse_and_validate(self, registry):
        for definition in registry:
            assert callable(definition.parse)
            assert callable(definition.validate)

    @pytest.mark.parametrize("registry", BUILT_IN_REGISTRIES)
    def test_aliases_are_lowercase(self, registry):
        for alias in registry.aliases:
            assert alias == alias.lower()

    def test_system_aliases_are_canonical_names(self):
        """Classification by alias and by command name must agree."""
        for definition in SYSTEM_COMMANDS:
            assert definition.aliases == {definition.name}

    def test_aircraft_alias_table_matches_registry(self):
        assert AIRCRAFT_COMMANDS.list_commands() == list(AIRCRAFT_ALIASES)

    def test_registries_are_read_only(self):
        with pytest.raises(TypeError):
            AIRCRAFT_COMMANDS.aliases["zz"] = "heading"


class TestRegistryConstruction:
    """Test rejection of invalid registries."""

    def test_duplicate_alias_rejected(self, make_definition):
        with pytest.raises(DuplicateAliasError) as exc_info:
            CommandRegistry(
                CommandCategory.AIRCRAFT,
                [
                    make_definition("heading", {"fh", "h"}),
                    make_definition("hold", {"hold", "h"}),
                ],
            )

        error = exc_info.value
        assert error.alias == "h"
        assert error.existing == "heading"
        assert error.new == "hold"

    def test_duplicate_alias_detected_after_normalization(self, make_definition):
        with pytest.raises(DuplicateAliasError):
            CommandRegistry(
                CommandCategory.AIRCRAFT,
                [
                    make_definition("cleared_as_filed", {"CAF"}),
                    make_definition("climb", {"caf"}),
                ],
            )

    def test_duplicate_command_rejected(self, make_definition):
        with pytest.raises(DuplicateCommandError) as exc_info:
            CommandRegistry(
                CommandCategory.SYSTEM,
                [make_definition("pause", {"pause"}), make_definition("pause", {"p"})],
            )

        assert exc_info.value.registry == "system"

    def test_registry_errors_share_base(self):
        assert issubclass(DuplicateAliasError, RegistryError)
        assert issubclass(DuplicateCommandError, RegistryError)


class TestCommandDefinition:
    """Test definition fields and derived metadata."""

    def test_aliases_are_normalized(self, make_definition):
        definition = make_definition("cleared_as_filed", ["CAF", "ClearedAsFiled"])
        assert definition.aliases == frozenset({"caf", "clearedasfiled"})

    def test_validate_is_required(self):
        with pytest.raises(TypeError):
            CommandDefinition(name="pause", aliases={"pause"}, parse=identity, validate=None)

    def test_name_must_not_be_empty(self):
        with pytest.raises(ValueError):
            CommandDefinition(name="", aliases={"x"}, parse=identity, validate=identity)

    def test_definitions_are_frozen(self):
        definition = AIRCRAFT_COMMANDS["heading"]
        with pytest.raises(attrs.exceptions.FrozenInstanceError):
            definition.name = "turn"

    @pytest.mark.parametrize(
        "name,handler_name",
        [
            ("heading", "run_heading"),
            ("cleared_as_filed", "run_cleared_as_filed"),
            ("say_indicated_airspeed", "run_say_indicated_airspeed"),
        ],
    )
    def test_handler_name(self, name, handler_name):
        assert AIRCRAFT_COMMANDS[name].handler_name == handler_name

    def test_label(self):
        assert AIRCRAFT_COMMANDS["cleared_as_filed"].label == "Cleared as filed"


class TestRegistryAccess:
    """Test registry lookup helpers."""

    def test_getitem_unknown_command(self):
        with pytest.raises(KeyError, match="Available commands"):
            SYSTEM_COMMANDS["heading"]

    def test_get_unknown_command(self):
        assert SYSTEM_COMMANDS.get("heading") is None

    def test_contains_checks_aliases(self):
        assert "fh" in AIRCRAFT_COMMANDS
        assert "dance" not in AIRCRAFT_COMMANDS

    def test_is_alias(self):
        assert AIRCRAFT_COMMANDS.is_alias("sp")
        assert not AIRCRAFT_COMMANDS.is_alias("")

    def test_len(self):
        assert len(SYSTEM_COMMANDS) == 10
        assert len(AIRCRAFT_COMMANDS) == len(AIRCRAFT_ALIASES)

    def test_is_system_command(self):
        assert is_system_command("timewarp")
        assert not is_system_command("aa777")
