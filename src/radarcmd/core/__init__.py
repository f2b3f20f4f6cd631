"""
Core radarcmd components.

This package provides the shared type definitions and parser configuration.
"""

from radarcmd.core.settings import DEFAULT_SETTINGS, ChainPolicy, ParserSettings
from radarcmd.core.types import (
    AircraftParser,
    CommandPredicate,
    ArgumentValue,
    ParsedArguments,
    SystemParser,
    Token,
    TokenStream,
    Validator,
)

__all__ = [
    "ChainPolicy",
    "ParserSettings",
    "DEFAULT_SETTINGS",
    "Token",
    "TokenStream",
    "ArgumentValue",
    "ParsedArguments",
    "SystemParser",
    "AircraftParser",
    "CommandPredicate",
    "Validator",
]
