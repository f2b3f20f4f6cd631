"""
Tests for command classification and alias resolution.
"""

import pytest

from radarcmd.commands import AIRCRAFT_COMMANDS, SYSTEM_COMMANDS
from radarcmd.commands.command import CommandCategory
from radarcmd.exceptions import UnknownCommandError
from radarcmd.parsing.classifier import classify
from radarcmd.parsing.resolver import resolve, resolve_or_raise


class TestClassify:
    """Test system vs aircraft classification of the first token."""

    @pytest.mark.parametrize("token", ["timewarp", "pause", "airport", "transmit"])
    def test_system_commands(self, token):
        assert classify(token) is CommandCategory.SYSTEM

    @pytest.mark.parametrize("token", ["aa777", "ual123", "", "fh", "nonexistent"])
    def test_everything_else_is_a_callsign(self, token):
        """Aircraft existence is not checked; even command words become callsigns."""
        assert classify(token) is CommandCategory.AIRCRAFT

    def test_uses_given_registry(self, small_system_registry):
        assert classify("pause", small_system_registry) is CommandCategory.SYSTEM
        assert classify("timewarp", small_system_registry) is CommandCategory.AIRCRAFT


class TestResolve:
    """Test alias to canonical name resolution."""

    @pytest.mark.parametrize(
        "alias,expected",
        [
            ("fh", "heading"),
            ("t", "heading"),
            ("turn", "heading"),
            ("sp", "speed"),
            ("+", "speed"),
            ("to", "takeoff"),
            ("cto", "takeoff"),
            ("caf", "cleared_as_filed"),
            ("*", "ils"),
            ("`", "move_data_block"),
            ("x", "cross"),
            ("w", "taxi"),
        ],
    )
    def test_aircraft_aliases(self, alias, expected):
        assert resolve(AIRCRAFT_COMMANDS, alias) == expected

    def test_unknown_alias_returns_none(self):
        assert resolve(AIRCRAFT_COMMANDS, "dance") is None

    def test_aircraft_alias_not_in_system_registry(self):
        assert resolve(SYSTEM_COMMANDS, "fh") is None

    def test_resolve_or_raise_returns_definition(self):
        definition = resolve_or_raise(AIRCRAFT_COMMANDS, "sq")
        assert definition.name == "squawk"

    def test_resolve_or_raise_unknown(self):
        with pytest.raises(UnknownCommandError) as exc_info:
            resolve_or_raise(AIRCRAFT_COMMANDS, "dance")

        assert exc_info.value.token == "dance"
        assert exc_info.value.category == "aircraft"
        assert "Unknown aircraft command 'dance'" in str(exc_info.value)

    def test_resolve_or_raise_empty_token(self):
        with pytest.raises(UnknownCommandError) as exc_info:
            resolve_or_raise(AIRCRAFT_COMMANDS, "")

        assert exc_info.value.token == ""
