# core/formatter.py
# This file is part of Trigpoint - A Trigger Point Expression Formatter
#
# Stateless formatting entry points for hosts embedding the formatter

from dataclasses import dataclass
from typing import Optional

from parser import parse
from parser.exceptions import ParseError
from renderer import render
from renderer.exceptions import RenderError
from renderer.mode import MarkerPresencePolicy, ModePolicy, StrictMarkerPolicy
from utils.logger import get_logger

# Message reported to hosts for any malformed document
MALFORMED_DOCUMENT_MESSAGE = "failed to parse"


@dataclass(frozen=True, slots=True)
class FormatResponse:
    """Outcome of a format request.

    Exactly one of the two fields is set.

    Attributes:
        output: Rendered expression text on success
        error: Error message on failure
    """

    output: Optional[str] = None
    error: Optional[str] = None

    @property
    def ok(self) -> bool:
        return self.error is None


def select_policy(strict_markers: bool = False) -> ModePolicy:
    """Return the normal form policy for the given strictness."""
    return StrictMarkerPolicy() if strict_markers else MarkerPresencePolicy()


def format_trigger_point(content: str, strict_markers: bool = False) -> str:
    """Parse a trigger point document and render it as an expression.

    Args:
        content: Trigger point document text
        strict_markers: Validate condition type markers before rendering

    Returns:
        Rendered expression text

    Raises:
        ParseError: The document is malformed
        RenderError: strict_markers is set and the markers are invalid
    """
    doc = parse(content)
    return render(doc, select_policy(strict_markers))


def handle_format_request(content: str, strict_markers: bool = False) -> FormatResponse:
    """Serve one format request without raising for bad documents.

    Parse failures are reported with a fixed opaque message; the detailed
    cause only goes to the debug log.

    Args:
        content: Trigger point document text
        strict_markers: Validate condition type markers before rendering

    Returns:
        FormatResponse carrying either the expression or an error message
    """
    logger = get_logger()

    try:
        return FormatResponse(output=format_trigger_point(content, strict_markers))
    except ParseError as e:
        logger.debug(f"Format request rejected: {e}")
        return FormatResponse(error=MALFORMED_DOCUMENT_MESSAGE)
    except RenderError as e:
        logger.debug(f"Format request could not be rendered: {e}")
        return FormatResponse(error=str(e))
