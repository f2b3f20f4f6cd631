"""
Parser configuration.

Settings are immutable once constructed so that a single parser instance can
serve any number of calls without per-call state.
"""

from enum import Enum

from pydantic import BaseModel, ConfigDict, Field

from radarcmd.exceptions import ErrorLevel


class ChainPolicy(Enum):
    """How a failure inside a chained aircraft command line is reported."""

    ATOMIC = "atomic"  # Discard every command of the line, re-raise the failure
    PARTIAL = "partial"  # Raise ChainInterruptedError carrying completed commands


class ParserSettings(BaseModel):
    """
    Tunable behaviour of the console command parser.

    Params:
        separator: Token separator; repeated separators produce empty tokens
        lowercase: Lower-case the entire line before splitting
        uppercase_target_id: Report aircraft callsigns in upper case
        chain_policy: Failure policy for chained aircraft commands
        error_level: Detail level of context attached to raised errors
    """

    model_config = ConfigDict(frozen=True)

    separator: str = Field(default=" ", min_length=1)
    lowercase: bool = True
    uppercase_target_id: bool = True
    chain_policy: ChainPolicy = ChainPolicy.ATOMIC
    error_level: ErrorLevel = ErrorLevel.USER


DEFAULT_SETTINGS = ParserSettings()
