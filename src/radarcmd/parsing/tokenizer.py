"""
Tokenization of raw console input.

Case normalization is a separate, explicit step: command words are
case-insensitive and, with the default settings, argument tokens such as fix
names are lower-cased along with them.

Splitting happens on every single separator. Repeated separators are kept as
empty-string tokens; they are never collapsed or trimmed, so "AA777  fh 030"
reaches the resolver with an empty token in second position.
"""

import logging

from radarcmd.core.settings import DEFAULT_SETTINGS, ParserSettings
from radarcmd.core.types import TokenStream
from radarcmd.exceptions import InputTypeError

logger = logging.getLogger(__name__)


def normalize(raw_input: str, settings: ParserSettings = DEFAULT_SETTINGS) -> str:
    """
    Apply case normalization to a console line.

    Params:
        raw_input: Line as typed
        settings: Parser settings; `lowercase` toggles normalization

    Returns:
        The normalized line
    """
    if settings.lowercase:
        return raw_input.lower()
    return raw_input


def tokenize(raw_input: str, settings: ParserSettings = DEFAULT_SETTINGS) -> TokenStream:
    """
    Split a console line into tokens.

    Params:
        raw_input: Line as typed
        settings: Parser settings providing the separator and normalization

    Returns:
        Immutable token stream; never empty (an empty line yields one empty token)

    Raises:
        InputTypeError: If raw_input is not a string
    """
    if not isinstance(raw_input, str):
        raise InputTypeError(raw_input)

    tokens = tuple(normalize(raw_input, settings).split(settings.separator))
    logger.debug("Tokenized %r into %r", raw_input, tokens)
    return tokens
