# core/__init__.py
# This file is part of Trigpoint - A Trigger Point Expression Formatter
#
# Core module public API for host integration

"""Host-facing entry points for trigger point formatting.

A host hands over raw document text and receives either the rendered
expression or an error message. Every call is independent: nothing is
cached and no state is kept between calls, so hosts may call concurrently.

Primary Components:
    format_trigger_point: Parse and render, raising on failure
    handle_format_request: Parse and render, returning a FormatResponse
    COMMANDS: Read-only table of host command names
    invoke: Dispatch a command from the table by name

Example:
    >>> from core import invoke
    >>> response = invoke("format", content=document_text)
    >>> print(response.output if response.ok else response.error)
"""

from .formatter import (
    FormatResponse,
    MALFORMED_DOCUMENT_MESSAGE,
    format_trigger_point,
    handle_format_request,
    select_policy,
)
from .commands import COMMANDS, UnknownCommandError, invoke

__all__ = [
    "FormatResponse",
    "MALFORMED_DOCUMENT_MESSAGE",
    "format_trigger_point",
    "handle_format_request",
    "select_policy",
    "COMMANDS",
    "UnknownCommandError",
    "invoke",
]

__version__ = "1.0.0"
__description__ = "Host integration for trigger point formatting"
