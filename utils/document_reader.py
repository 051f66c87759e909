# utils/document_reader.py
# This file is part of Trigpoint - A Trigger Point Expression Formatter
#
# Reader for trigger point documents from files or standard input

import sys
from pathlib import Path
from typing import Optional, TextIO
from utils.logger import get_logger

STDIN_MARKER = "-"


class DocumentReadError(Exception):
    """Exception raised when a document cannot be read or is empty."""

    pass


def read_document(source: Optional[str] = None, stdin: Optional[TextIO] = None) -> str:
    """Read raw trigger point document text.

    The text is returned verbatim; interpreting it is left to the parser.

    Args:
        source: Path to the document, or "-"/None to read standard input
        stdin: Stream used instead of sys.stdin (for embedding and tests)

    Returns:
        Document text

    Raises:
        DocumentReadError: If the file is missing, unreadable or empty
    """
    logger = get_logger()

    if source is None or source == STDIN_MARKER:
        stream = stdin if stdin is not None else sys.stdin
        logger.debug("Reading trigger point document from standard input")
        content = stream.read()
        origin = "standard input"
    else:
        path = Path(source)
        if not path.is_file():
            raise DocumentReadError(f"Document file not found: {source}")

        logger.debug(f"Reading trigger point document: {source}")
        try:
            content = path.read_text(encoding="utf-8-sig")
        except (OSError, UnicodeDecodeError) as e:
            raise DocumentReadError(f"Error reading document file: {e}") from e
        origin = str(path)

    if not content.strip():
        raise DocumentReadError(f"Document from {origin} is empty")

    return content


def write_output(text: str, destination: Optional[str] = None, stdout: Optional[TextIO] = None):
    """Write a rendered expression followed by a newline.

    Args:
        text: Rendered expression
        destination: Output path, or "-"/None for standard output
        stdout: Stream used instead of sys.stdout

    Raises:
        DocumentReadError: If the output file cannot be written
    """
    if destination is None or destination == STDIN_MARKER:
        stream = stdout if stdout is not None else sys.stdout
        stream.write(text + "\n")
        return

    try:
        Path(destination).write_text(text + "\n", encoding="utf-8")
    except OSError as e:
        raise DocumentReadError(f"Cannot write output file: {e}") from e
    get_logger().debug(f"Wrote expression to {destination}")
