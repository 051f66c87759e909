# parser/__init__.py
# This file is part of Trigpoint - A Trigger Point Expression Formatter
#
# Document parsing components for trigger point documents

"""Trigger point document parsing.

This module turns raw trigger point document text into the typed document
model consumed by the renderer. Parsing runs in two stages:

1. The markup stage tokenizes the XML subset and builds an immutable element
   tree, rejecting structurally malformed input.
2. The binding stage maps the element tree onto the pydantic document model,
   which tolerates absent optional fields but rejects missing or mistyped
   required ones.

Both stages report failures as ParseError, so callers only ever see one kind
of malformed-document error.

Core Functions:
    parse: Complete pipeline from text to TriggerPoint
    parse_tree: Markup stage only, returns the element tree

Example:
    >>> from parser import parse
    >>> doc = parse("<TriggerPoint><SPT><Group>0</Group><Method>INVITE</Method></SPT></TriggerPoint>")
    >>> doc.conditions[0].method
    'INVITE'
"""

from .exceptions import ParseError
from .grammar import _XMLParser
from .binding import bind_trigger_point
from .xml_nodes import XmlElement
from utils.logger import get_logger


def parse_tree(source: str) -> XmlElement:
    """Parse document text into its element tree.

    Uses a fresh parser instance for each invocation so that parsing stays
    stateless across calls.

    Args:
        source: Trigger point document text

    Returns:
        Root element of the document

    Raises:
        ParseError: Markup is empty or malformed
    """
    parser = _XMLParser()
    return parser.parse(source)


def parse(source: str):
    """Parse trigger point document text into a TriggerPoint.

    Args:
        source: Trigger point document text

    Returns:
        Typed trigger point document

    Raises:
        ParseError: Document is malformed or misses required fields
    """
    logger = get_logger()
    logger.debug("Parsing trigger point document")

    try:
        root = parse_tree(source)
        return bind_trigger_point(root)

    except ParseError:
        logger.debug("ParseError encountered during document parsing")
        raise

    except Exception as exc:
        logger.debug(f"Unexpected parsing error: {type(exc).__name__}: {exc}")
        raise ParseError(str(exc)) from exc


__all__ = ["parse", "parse_tree", "bind_trigger_point", "XmlElement", "ParseError"]

__version__ = "1.0.0"
__description__ = "Trigger point document parsing components"
