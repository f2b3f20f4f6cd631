"""
Parser for air traffic console commands.

Everything the parser needs comes in as a single line typed into the console:

- `timewarp 50`
- `AA777 fh 270 d 050 sp 200`
- `AA777 hold dumba left 2min`

Tokens are separated by a single space; every command word must be separated
from its arguments.

There are two command categories. System commands interact with the
simulation itself (`timewarp`, `pause`). Aircraft commands are transmitted to
the aircraft whose callsign starts the line; they may take any number of
arguments and several of them may be chained on one line.

A line goes through these steps:

- tokenize (with explicit case normalization)
- classify by the first token as system command or callsign
- resolve each command word to its canonical command
- parse and validate that command's arguments
- build one immutable `Command` per command found
"""

import logging

from radarcmd.commands.aircraft import AIRCRAFT_COMMANDS
from radarcmd.commands.command import Command, CommandCategory
from radarcmd.commands.definition import CommandDefinition, CommandRegistry
from radarcmd.commands.system import SYSTEM_COMMANDS
from radarcmd.core.settings import DEFAULT_SETTINGS, ChainPolicy, ParserSettings
from radarcmd.core.types import ParsedArguments, TokenStream
from radarcmd.exceptions import (
    ArityError,
    ChainInterruptedError,
    CommandError,
    ErrorContext,
)
from radarcmd.parsing.classifier import classify
from radarcmd.parsing.resolver import resolve_or_raise
from radarcmd.parsing.tokenizer import tokenize

logger = logging.getLogger(__name__)


class CommandParser:
    """Parser turning console lines into validated Command records.

    Notes:
      - Holds no per-call state; one instance may serve any number of callers.
      - Registries default to the built-in system and aircraft commands and may
        be replaced, e.g. to test a reduced command set.
    """

    def __init__(
        self,
        settings: ParserSettings | None = None,
        system_registry: CommandRegistry = SYSTEM_COMMANDS,
        aircraft_registry: CommandRegistry = AIRCRAFT_COMMANDS,
    ):
        self.settings = settings or DEFAULT_SETTINGS
        self.system_registry = system_registry
        self.aircraft_registry = aircraft_registry

    def parse(self, raw_input: str) -> list[Command]:
        """
        Parse one console line into commands.

        Params:
            raw_input: The line as typed

        Returns:
            One command for a system line; one command per chained command for
            an aircraft line (empty when the line holds only a callsign)

        Raises:
            InputTypeError: If raw_input is not a string
            UnknownCommandError: If a command word resolves to no command
            ValidationError: If a command's arguments are invalid
            ChainInterruptedError: On any failure in an aircraft line when the
                chain policy is PARTIAL
        """
        tokens = tokenize(raw_input, self.settings)
        category = classify(tokens[0], self.system_registry)
        logger.debug("Classified %r as %s command", raw_input, category.value)

        if category is CommandCategory.SYSTEM:
            return [self._parse_system_command(tokens, raw_input)]
        return self._parse_aircraft_commands(tokens, raw_input)

    def is_system_command(self, token: str) -> bool:
        """Check whether a token names a system command."""
        return classify(token, self.system_registry) is CommandCategory.SYSTEM

    def _parse_system_command(self, tokens: TokenStream, raw_input: str) -> Command:
        """
        Build the Command for a system command line.

        The command word is the first token; every remaining token belongs to
        its argument list.
        """
        command_word = tokens[0]
        context = ErrorContext(raw_input=raw_input, token=command_word, token_index=0)
        try:
            definition = resolve_or_raise(self.system_registry, command_word)
            context.command_name = definition.name
            parsed_args = definition.parse(tokens[1:])
            validated_args = _validate(definition, parsed_args)
        except CommandError as error:
            raise error.attach_context(context, self.settings.error_level)

        command = Command(definition.name, CommandCategory.SYSTEM, "", validated_args)
        logger.debug("Built %s", command)
        return command

    def _parse_aircraft_commands(
        self, tokens: TokenStream, raw_input: str
    ) -> list[Command]:
        """
        Build one Command per chained command of an aircraft line.

        Each command's parser reports which tokens it left unconsumed; the next
        command starts at that remainder.
        """
        target_id = self._target_id(tokens[0])
        commands: list[Command] = []
        tail = tokens[1:]

        while tail:
            context = ErrorContext(
                raw_input=raw_input,
                token=tail[0],
                token_index=len(tokens) - len(tail),
                target_id=target_id,
            )
            try:
                command, tail = self._parse_aircraft_segment(tail, target_id, context)
            except CommandError as error:
                error.attach_context(context, self.settings.error_level)
                if self.settings.chain_policy is ChainPolicy.PARTIAL:
                    logger.warning(
                        "Command chain for %s interrupted after %d command(s): %s",
                        target_id,
                        len(commands),
                        error.message,
                    )
                    interrupted = ChainInterruptedError(commands, error)
                    interrupted.attach_context(context, self.settings.error_level)
                    raise interrupted from error
                raise
            commands.append(command)

        return commands

    def _parse_aircraft_segment(
        self, tail: TokenStream, target_id: str, context: ErrorContext
    ) -> tuple[Command, TokenStream]:
        definition = resolve_or_raise(self.aircraft_registry, tail[0])
        context.command_name = definition.name

        parsed_args, remaining = definition.parse(
            tail[1:], is_command=self.aircraft_registry.is_alias
        )
        validated_args = _validate(definition, parsed_args)

        command = Command(
            definition.name, CommandCategory.AIRCRAFT, target_id, validated_args
        )
        logger.debug("Built %s", command)
        return command, tuple(remaining)

    def _target_id(self, token: str) -> str:
        if self.settings.uppercase_target_id:
            return token.upper()
        return token


def _validate(
    definition: CommandDefinition, parsed_args: ParsedArguments
) -> ParsedArguments:
    try:
        return definition.validate(parsed_args)
    except ArityError as error:
        raise error.apply_label(definition.label)


def parse_command(raw_input: str) -> list[Command]:
    """
    Convenience function to parse a console line with default settings.

    Params:
        raw_input: The line as typed

    Returns:
        The commands found on the line

    Raises:
        CommandError: If the line is malformed or invalid
    """
    parser = CommandParser()
    return parser.parse(raw_input)
