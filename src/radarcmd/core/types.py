"""
Core type definitions for radarcmd.

This module contains the type aliases shared by the tokenizer, the argument
pipeline and the dispatcher.
"""

from collections.abc import Callable
from typing import Protocol

Token = str

# Immutable so that every consuming step hands back a fresh remainder
TokenStream = tuple[Token, ...]

ArgumentValue = str | int | float | bool | None

ParsedArguments = list[ArgumentValue]

CommandPredicate = Callable[[Token], bool]

SystemParser = Callable[[TokenStream], ParsedArguments]


class AircraftParser(Protocol):
    """Parser for one chained aircraft command.

    Receives the tokens after the command word and the predicate recognising
    the next command word; returns the parsed arguments and the remainder.
    """

    def __call__(
        self, tokens: TokenStream, *, is_command: CommandPredicate
    ) -> tuple[ParsedArguments, TokenStream]: ...


Validator = Callable[[ParsedArguments], ParsedArguments]
