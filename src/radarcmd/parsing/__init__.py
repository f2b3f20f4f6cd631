"""
Console line parsing components.

This package provides tokenization, command classification, alias resolution,
and the dispatcher that turns a console line into Command records.
"""

from radarcmd.parsing.classifier import classify
from radarcmd.parsing.parser import CommandParser, parse_command
from radarcmd.parsing.resolver import resolve, resolve_or_raise
from radarcmd.parsing.tokenizer import normalize, tokenize

__all__ = [
    "CommandParser",
    "parse_command",
    "classify",
    "resolve",
    "resolve_or_raise",
    "normalize",
    "tokenize",
]
