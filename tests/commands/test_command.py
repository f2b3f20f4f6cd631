"""Tests for the Command record."""

import attrs
import pytest

from radarcmd.commands.command import Command, CommandCategory


class TestCommand:
    """Test construction, immutability and projection."""

    def test_defaults(self):
        command = Command("pause", CommandCategory.SYSTEM)

        assert command.target_id == ""
        assert command.args == ()
        assert command.is_system

    def test_args_are_stored_as_tuple(self):
        command = Command("speed", CommandCategory.AIRCRAFT, "AA777", [250])
        assert command.args == (250,)

    def test_args_list_is_copied(self):
        args = ["dumba"]
        command = Command("fix", CommandCategory.AIRCRAFT, "AA777", args)
        args.append("boble")

        assert command.args == ("dumba",)

    def test_frozen(self):
        command = Command("pause", CommandCategory.SYSTEM)
        with pytest.raises(attrs.exceptions.FrozenInstanceError):
            command.name = "clear"

    def test_name_and_args(self):
        command = Command("heading", CommandCategory.AIRCRAFT, "AA777", (None, 30, False))
        assert command.name_and_args == ("heading", None, 30, False)

    def test_name_and_args_without_args(self):
        assert Command("pause", CommandCategory.SYSTEM).name_and_args == ("pause",)

    def test_equality_is_by_value(self):
        assert Command("speed", CommandCategory.AIRCRAFT, "AA777", (250,)) == Command(
            "speed", CommandCategory.AIRCRAFT, "AA777", [250]
        )

    def test_aircraft_command_is_not_system(self):
        assert not Command("takeoff", CommandCategory.AIRCRAFT, "AA777").is_system
