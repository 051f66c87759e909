# core/commands.py
# This file is part of Trigpoint - A Trigger Point Expression Formatter
#
# Command table binding formatter entry points to host command names

from types import MappingProxyType
from typing import Any, Callable, Mapping

from .formatter import handle_format_request
from utils.logger import get_logger


class UnknownCommandError(KeyError):
    """Raised when a host invokes a command name that is not registered."""

    pass


COMMANDS: Mapping[str, Callable[..., Any]] = MappingProxyType(
    {
        "format": handle_format_request,
    }
)


def invoke(command: str, **arguments: Any) -> Any:
    """Dispatch a host command by name.

    Args:
        command: Registered command name, e.g. "format"
        **arguments: Keyword arguments passed to the command

    Returns:
        Whatever the command returns

    Raises:
        UnknownCommandError: If no command with that name is registered
    """
    try:
        handler = COMMANDS[command]
    except KeyError:
        raise UnknownCommandError(command) from None

    get_logger().debug(f"Invoking command '{command}'")
    return handler(**arguments)
