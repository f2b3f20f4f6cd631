"""
Exception classes for console command processing.

This module defines specific exception types for the different error conditions
that can occur while tokenizing, resolving, parsing, and validating a console
command line.
"""

from dataclasses import dataclass
from enum import Enum


class ErrorLevel(Enum):
    """Error message detail level for end users vs developers."""

    USER = "user"  # Command and offending token only
    DEVELOPER = "developer"  # Full context including raw input and token position


@dataclass
class ErrorContext:
    """
    Context information for error messages.

    Captures where an error occurred in the submitted console line so that the
    input surface can compose a user-facing message without re-parsing.

    Params:
        raw_input: The original line as submitted
        token: The token that caused the error
        token_index: Position of the token within the token stream
        command_name: Canonical name of the command being parsed, if resolved
        target_id: Callsign the line was addressed to (empty for system commands)
    """

    raw_input: str | None = None
    token: str | None = None
    token_index: int | None = None
    command_name: str | None = None
    target_id: str | None = None

    def format_location(self, error_level: ErrorLevel) -> str:
        """
        Format location information based on error level.

        Params:
            error_level: Whether to show USER or DEVELOPER level details

        Returns:
            Formatted location string with appropriate detail level
        """
        lines = []

        if self.target_id:
            lines.append(f"  for {self.target_id}")

        if self.command_name:
            lines.append(f"  in command '{self.command_name}'")

        if self.token is not None:
            lines.append(f"  at token '{self.token}'")

        # Developer level: add raw input and token position
        if error_level == ErrorLevel.DEVELOPER:
            if self.token_index is not None:
                lines.append(f"  token index {self.token_index}")
            if self.raw_input is not None:
                lines.append(f"  input: {self.raw_input!r}")

        return "\n".join(lines)


class CommandError(Exception):
    """Base exception for all console command errors."""

    def __init__(self, message: str):
        self.message = message
        self.context: ErrorContext | None = None
        self.error_level = ErrorLevel.USER
        super().__init__(message)

    def attach_context(
        self, context: ErrorContext, error_level: ErrorLevel = ErrorLevel.USER
    ) -> "CommandError":
        """
        Attach location context unless the error already carries one.

        Params:
            context: Location of the failure within the console line
            error_level: Level of detail to show in the rendered message

        Returns:
            The same exception instance, for re-raising
        """
        if self.context is None:
            self.context = context
            self.error_level = error_level
        return self

    def __str__(self) -> str:
        if self.context is None:
            return self.message
        location_info = self.context.format_location(self.error_level)
        if not location_info:
            return self.message
        return f"{self.message}\n{location_info}"


class InputTypeError(CommandError, TypeError):
    """Raised when the parser receives something other than a string."""

    def __init__(self, received: object):
        """
        Initialize the exception.

        Params:
            received: The offending input value
        """
        self.received_type = type(received).__name__
        super().__init__(
            f"CommandParser expects a string but received {self.received_type}"
        )


class UnknownCommandError(CommandError):
    """Raised when a token does not resolve to any canonical command."""

    def __init__(self, token: str, category: str):
        """
        Initialize the exception.

        Params:
            token: The alias token that failed to resolve
            category: Registry category the lookup ran against
        """
        self.token = token
        self.category = category
        super().__init__(f"Unknown {category} command '{token}'")


class ValidationError(CommandError):
    """Raised when command arguments fail type or range validation."""

    pass


class ArityError(ValidationError):
    """Raised when a command receives the wrong number of arguments."""

    def __init__(self, expected: str, received: int, label: str | None = None):
        """
        Initialize the exception.

        Params:
            expected: Human readable accepted argument count (e.g. "zero or one")
            received: Number of arguments actually supplied
            label: Optional command label to prefix the message with
        """
        self.expected = expected
        self.received = received
        self.label = label
        super().__init__(self._format_message())

    def _format_message(self) -> str:
        subject = self.label or "Command"
        return f"{subject} accepts {self.expected} argument(s), received {self.received}"

    def apply_label(self, label: str) -> "ArityError":
        """
        Name the command in the message unless a label was already given.

        Validators are shared between commands and raise without a label; the
        dispatcher applies the label of the command it was validating.

        Params:
            label: Human readable command name

        Returns:
            The same exception instance, for re-raising
        """
        if self.label is None:
            self.label = label
            self.message = self._format_message()
            self.args = (self.message,)
        return self


class ChainInterruptedError(CommandError):
    """Raised when a chained aircraft command fails after earlier segments succeeded."""

    def __init__(self, commands: list, cause: CommandError):
        """
        Initialize the exception.

        Params:
            commands: Commands built for the segments preceding the failure
            cause: The error raised by the failing segment
        """
        self.commands = list(commands)
        self.cause = cause
        super().__init__(
            f"Command chain interrupted after {len(self.commands)} command(s): {cause.message}"
        )


class RegistryError(CommandError):
    """Base exception for invalid command registry construction."""

    pass


class DuplicateAliasError(RegistryError):
    """Raised when one alias is claimed by two canonical commands."""

    def __init__(self, alias: str, existing: str, new: str):
        """
        Initialize the exception.

        Params:
            alias: The alias claimed twice
            existing: Canonical command that already owns the alias
            new: Canonical command attempting to claim it
        """
        self.alias = alias
        self.existing = existing
        self.new = new
        super().__init__(
            f"Alias '{alias}' already maps to '{existing}', cannot map it to '{new}'"
        )


class DuplicateCommandError(RegistryError):
    """Raised when a canonical command name is registered twice."""

    def __init__(self, name: str, registry: str):
        self.name = name
        self.registry = registry
        super().__init__(f"Command '{name}' is already defined in the {registry} registry")
