# parser/xml_nodes.py
# This file is part of Trigpoint - A Trigger Point Expression Formatter
#
# Element tree node classes for parsed trigger point markup

"""Immutable element tree produced by the markup grammar.

The tree keeps only what the binding stage needs: element names, attributes,
child elements in document order and the concatenated character data of each
element. Comments, processing instructions and doctype declarations are
dropped by the lexer and never appear here.
"""

from __future__ import annotations
from dataclasses import dataclass
from typing import Iterator, Optional


def is_namespace_declaration(name: str) -> bool:
    """True for an xmlns or xmlns:prefix attribute name."""
    return name == "xmlns" or name.startswith("xmlns:")


@dataclass(frozen=True, slots=True)
class XmlElement:
    """Single markup element.

    Attributes:
        tag: Element name
        attributes: Attribute name/value pairs in document order
        children: Child elements in document order
        text: Concatenated character data directly inside the element
    """

    tag: str
    attributes: tuple[tuple[str, str], ...] = ()
    children: tuple[XmlElement, ...] = ()
    text: str = ""

    def get(self, name: str, default: Optional[str] = None) -> Optional[str]:
        """Return an attribute value by name."""
        for key, value in self.attributes:
            if key == name:
                return value
        return default

    def iter_children(self, tag: str) -> Iterator[XmlElement]:
        """Yield child elements with the given name."""
        return (child for child in self.children if child.tag == tag)

    def find(self, tag: str) -> Optional[XmlElement]:
        """Return the first child element with the given name."""
        return next(self.iter_children(tag), None)

    def is_leaf(self) -> bool:
        """True when the element has no children and no attributes other than xmlns."""
        return not self.children and all(
            is_namespace_declaration(name) for name, _ in self.attributes
        )

    def __str__(self) -> str:
        attrs = "".join(f' {key}="{value}"' for key, value in self.attributes)
        if not self.children and not self.text:
            return f"<{self.tag}{attrs}/>"
        inner = self.text + "".join(str(child) for child in self.children)
        return f"<{self.tag}{attrs}>{inner}</{self.tag}>"
