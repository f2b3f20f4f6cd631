"""
Shared test fixtures and utilities for the radarcmd test suite.
"""

import pytest

from radarcmd.arguments.validators import identity, zero_arguments_validator
from radarcmd.commands.command import CommandCategory
from radarcmd.commands.definition import CommandDefinition, CommandRegistry
from radarcmd.core.settings import ChainPolicy, ParserSettings
from radarcmd.parsing.parser import CommandParser


@pytest.fixture
def parser():
    """Parser with default settings and the built-in registries."""
    return CommandParser()


@pytest.fixture
def partial_parser():
    """Parser that reports completed commands when a chained line fails."""
    return CommandParser(settings=ParserSettings(chain_policy=ChainPolicy.PARTIAL))


@pytest.fixture
def make_definition():
    """Factory for minimal command definitions.

    Usage:
        def test_something(make_definition):
            definition = make_definition("pause", {"pause", "p"})
    """

    def _make(name, aliases, parse=identity, validate=zero_arguments_validator):
        return CommandDefinition(name=name, aliases=aliases, parse=parse, validate=validate)

    return _make


@pytest.fixture
def small_system_registry(make_definition):
    """System registry with two commands, for classifier and resolver tests."""
    return CommandRegistry(
        CommandCategory.SYSTEM,
        [
            make_definition("pause", {"pause"}),
            make_definition("clear", {"clear"}),
        ],
    )
