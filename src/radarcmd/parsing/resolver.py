"""
Alias to canonical command resolution.

Ambiguity cannot occur here: registries refuse an alias claimed by two
commands at construction time.
"""

from radarcmd.commands.definition import CommandDefinition, CommandRegistry
from radarcmd.exceptions import UnknownCommandError


def resolve(registry: CommandRegistry, token: str) -> str | None:
    """Get the canonical name for a token, or None when no command claims it."""
    return registry.resolve(token)


def resolve_or_raise(registry: CommandRegistry, token: str) -> CommandDefinition:
    """
    Resolve a token to the definition of its canonical command.

    Params:
        registry: Registry for the line's command category
        token: Alias token to resolve

    Returns:
        The command definition

    Raises:
        UnknownCommandError: If the token resolves to no command
    """
    name = registry.resolve(token)
    if name is None:
        raise UnknownCommandError(token, registry.category.value)
    return registry[name]
