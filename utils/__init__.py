# utils/__init__.py
# This file is part of Trigpoint - A Trigger Point Expression Formatter
#
# Utility module exports

from .document_reader import (
    read_document,
    write_output,
    DocumentReadError,
    STDIN_MARKER,
)

__all__ = [
    "read_document",
    "write_output",
    "DocumentReadError",
    "STDIN_MARKER",
]
