"""
Console command exception classes.

This package provides all exception types used throughout radarcmd for
consistent error handling and reporting.
"""

from radarcmd.exceptions.core import (
    ArityError,
    ChainInterruptedError,
    CommandError,
    DuplicateAliasError,
    DuplicateCommandError,
    ErrorContext,
    ErrorLevel,
    InputTypeError,
    RegistryError,
    UnknownCommandError,
    ValidationError,
)

__all__ = [
    "CommandError",
    "ErrorContext",
    "ErrorLevel",
    "InputTypeError",
    "UnknownCommandError",
    "ValidationError",
    "ArityError",
    "ChainInterruptedError",
    "RegistryError",
    "DuplicateAliasError",
    "DuplicateCommandError",
]
