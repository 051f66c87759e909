# parser/grammar.py
# This file is part of Trigpoint - A Trigger Point Expression Formatter
#
# LALR(1) grammar and parser for trigger point markup using SLY

"""Markup grammar implementation using SLY parser generator.

This module builds an element tree from the tag and text tokens provided by
the lexer. It enforces the structural rules of the markup: a single root
element, properly nested and matching end tags, and no character data
outside the root.

Grammar:
    document : element
    element  : START_TAG content END_TAG
             | EMPTY_TAG
    content  : content item
             | empty
    item     : element | TEXT | CDATA
"""

from sly import Parser
from .lexer import XMLLexer
from .xml_nodes import XmlElement
from .exceptions import ParseError
from utils.logger import get_logger


class _XMLParser(Parser):
    """SLY-based LALR(1) parser for trigger point markup.

    Attributes:
        tokens: Token types from XMLLexer
    """

    tokens = XMLLexer.tokens

    @_("element")
    def document(self, p) -> XmlElement:
        """Start rule: a document is exactly one root element."""
        return p.element

    @_("START_TAG content END_TAG")
    def element(self, p) -> XmlElement:
        """Element with content; the end tag must close the start tag."""
        tag, attributes = p.START_TAG
        if p.END_TAG != tag:
            raise ParseError(
                f"Mismatched end tag </{p.END_TAG}> for <{tag}> at line {p.lineno}"
            )

        children = tuple(item for item in p.content if isinstance(item, XmlElement))
        text = "".join(item for item in p.content if isinstance(item, str))
        return XmlElement(tag, attributes, children, text)

    @_("EMPTY_TAG")
    def element(self, p) -> XmlElement:
        """Self-closing element."""
        tag, attributes = p.EMPTY_TAG
        return XmlElement(tag, attributes)

    @_("content item")
    def content(self, p) -> list:
        p.content.append(p.item)
        return p.content

    @_("empty")
    def content(self, p) -> list:
        return []

    @_("")
    def empty(self, p):
        pass

    @_("element")
    def item(self, p):
        return p.element

    @_("TEXT")
    def item(self, p) -> str:
        return p.TEXT

    @_("CDATA")
    def item(self, p) -> str:
        return p.CDATA

    def parse(self, text: str) -> XmlElement:
        """Parse markup text into an element tree.

        Args:
            text: Trigger point document text

        Returns:
            Root element of the document

        Raises:
            ParseError: If the document is empty or structurally malformed
        """
        logger = get_logger()
        logger.debug(f"Parsing markup ({len(text)} characters)")

        try:
            root = super().parse(XMLLexer().tokenize(text))

            if root is None:
                raise ParseError("Failed to parse document (no root element).")

            logger.debug(f"Successfully parsed markup with root <{root.tag}>")
            return root

        except ParseError:
            logger.debug("Parse error encountered")
            raise
        except Exception as e:
            logger.debug(f"Unexpected parsing error: {e}")
            raise ParseError(f"Parse failed: {e}") from e

    def error(self, token):
        """Handle syntax errors during parsing.

        Args:
            token: Problematic token or None for EOF errors

        Raises:
            ParseError: Always raises with detailed error information
        """
        if token:
            error_msg = (
                f"Syntax error near {token.value!r} "
                f"(type: {token.type}) at line {token.lineno}"
            )
        else:
            error_msg = "Syntax error: Unexpected end of document"

        raise ParseError(error_msg)
