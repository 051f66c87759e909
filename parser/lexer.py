# parser/lexer.py
# This file is part of Trigpoint - A Trigger Point Expression Formatter
#
# Lexical analyzer for trigger point markup using SLY

"""Lexical analyzer for trigger point documents.

Trigger point documents use a small XML subset. Each tag is emitted as one
token carrying its decoded name and attributes, so the grammar only has to
deal with nesting. Declarations, processing instructions, comments and
doctype declarations are skipped.

Supported Tokens:
- START_TAG: <Name attr="value">  -> (name, attributes)
- EMPTY_TAG: <Name attr="value"/> -> (name, attributes)
- END_TAG:   </Name>              -> name
- TEXT:      character data with entity references decoded
- CDATA:     <![CDATA[...]]> sections, content taken verbatim
"""

import re
from sly import Lexer
from utils.logger import get_logger

# Lowercase on purpose: inside a SLY class body, unknown uppercase names
# resolve to their own name as a string.
_name_pattern = r"[^\W\d][-\w.:]*"
_attribute_pattern = _name_pattern + r"""\s*=\s*(?:"[^"]*"|'[^']*')"""

_TAG_NAME_RE = re.compile(r"</?(" + _name_pattern + r")")
_ATTRIBUTE_RE = re.compile(r"(" + _name_pattern + r""")\s*=\s*(?:"([^"]*)"|'([^']*)')""")
_ENTITY_RE = re.compile(r"&(#[0-9]+;|#x[0-9A-Fa-f]+;|[A-Za-z]+;)?")

PREDEFINED_ENTITIES = {
    "lt": "<",
    "gt": ">",
    "amp": "&",
    "quot": '"',
    "apos": "'",
}


def unescape(text: str) -> str:
    """Decode predefined entities and character references.

    A bare "&" that does not start a complete reference is rejected, as in
    well-formed XML.

    Raises:
        ValueError: If the text holds a bare "&" or an undefined entity
    """

    def _replace(match: re.Match) -> str:
        ref = match.group(1)
        if ref is None:
            raise ValueError(f"Unescaped '&' in {text!r}")
        ref = ref[:-1]
        if ref.startswith("#x"):
            return chr(int(ref[2:], 16))
        if ref.startswith("#"):
            return chr(int(ref[1:]))
        try:
            return PREDEFINED_ENTITIES[ref]
        except KeyError:
            raise ValueError(f"Undefined entity '&{ref};'") from None

    return _ENTITY_RE.sub(_replace, text)


def _split_tag(raw: str) -> tuple[str, tuple[tuple[str, str], ...]]:
    """Split a raw start or empty tag into its name and decoded attributes."""
    name = _TAG_NAME_RE.match(raw).group(1)
    attributes = []
    for match in _ATTRIBUTE_RE.finditer(raw, len(name) + 1):
        double_quoted, single_quoted = match.group(2), match.group(3)
        value = double_quoted if double_quoted is not None else single_quoted
        attributes.append((match.group(1), unescape(value)))
    return name, tuple(attributes)


class XMLLexer(Lexer):
    """SLY-based lexer for trigger point markup.

    Attributes:
        tokens: Set of valid token types
        ignore: Characters to skip between tokens
    """

    tokens = {
        "START_TAG",
        "EMPTY_TAG",
        "END_TAG",
        "TEXT",
        "CDATA",
    }

    # Whitespace between tokens; newlines are tracked separately
    ignore = " \t\r"

    @_(r"\n+")
    def ignore_newline(self, t):
        self.lineno += len(t.value)

    @_(r"\ufeff")
    def ignore_bom(self, t):
        pass

    @_(r"<\?[\s\S]*?\?>")
    def ignore_instruction(self, t):
        self.lineno += t.value.count("\n")

    @_(r"<!--[\s\S]*?-->")
    def ignore_comment(self, t):
        self.lineno += t.value.count("\n")

    @_(r"<!DOCTYPE[^>]*>")
    def ignore_doctype(self, t):
        self.lineno += t.value.count("\n")

    @_(r"<!\[CDATA\[[\s\S]*?\]\]>")
    def CDATA(self, t):
        self.lineno += t.value.count("\n")
        t.value = t.value[len("<![CDATA[") : -len("]]>")]
        return t

    @_(r"</" + _name_pattern + r"\s*>")
    def END_TAG(self, t):
        self.lineno += t.value.count("\n")
        t.value = _TAG_NAME_RE.match(t.value).group(1)
        return t

    @_(r"<" + _name_pattern + r"(?:\s+" + _attribute_pattern + r")*\s*/>")
    def EMPTY_TAG(self, t):
        self.lineno += t.value.count("\n")
        t.value = _split_tag(t.value)
        return t

    @_(r"<" + _name_pattern + r"(?:\s+" + _attribute_pattern + r")*\s*>")
    def START_TAG(self, t):
        self.lineno += t.value.count("\n")
        t.value = _split_tag(t.value)
        return t

    @_(r"[^<]+")
    def TEXT(self, t):
        self.lineno += t.value.count("\n")
        t.value = unescape(t.value)
        return t

    def error(self, t):
        """Handle markup that matches no token pattern.

        Args:
            t: SLY token object containing error context

        Raises:
            ValueError: Always raised with character and line information
        """
        logger = get_logger()

        illegal_char = t.value[0]
        error_line = self.lineno

        logger.debug(f"Illegal markup '{t.value[:20]}' at line {error_line}")

        # Skip the illegal character
        self.index += 1

        raise ValueError(
            f"Illegal character '{illegal_char}' encountered at line {error_line}"
        )
