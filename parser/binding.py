# parser/binding.py
# This file is part of Trigpoint - A Trigger Point Expression Formatter
#
# Binding of parsed element trees onto the trigger point document model

"""Maps an element tree onto the typed trigger point model.

Elements and attributes are treated alike as named fields. An element without
children or attributes binds as its trimmed text; any other element binds as
a mapping of its own fields. A field name seen more than once collects its
values into a list, which is how repeated SPT conditions form a sequence and
how duplicated scalar fields get rejected by the model.

Namespace prefixes are dropped, so <tp:Group> binds as Group, and xmlns
declarations are not fields. Unknown fields are ignored; the model decides
what is required.
"""

from __future__ import annotations
from typing import Any, Dict

from pydantic import ValidationError

from model import TriggerPoint
from .xml_nodes import XmlElement, is_namespace_declaration
from .exceptions import ParseError
from utils.logger import get_logger


def local_name(name: str) -> str:
    """Strip a namespace prefix from an element or attribute name."""
    return name.rpartition(":")[2]


class _Repeated(list):
    """Values collected for a field that occurs more than once."""


def element_to_value(element: XmlElement) -> Any:
    """Convert one element into a text value or a field mapping."""
    if element.is_leaf():
        return element.text.strip()
    return element_to_mapping(element)


def element_to_mapping(element: XmlElement) -> Dict[str, Any]:
    """Convert an element's attributes and children into a field mapping."""
    fields: Dict[str, Any] = {}

    def _add(name: str, value: Any):
        if name not in fields:
            fields[name] = value
        elif isinstance(fields[name], _Repeated):
            fields[name].append(value)
        else:
            fields[name] = _Repeated([fields[name], value])

    for name, value in element.attributes:
        if is_namespace_declaration(name):
            continue
        _add(local_name(name), value.strip())
    for child in element.children:
        _add(local_name(child.tag), element_to_value(child))

    return {name: list(value) if isinstance(value, _Repeated) else value
            for name, value in fields.items()}


def bind_trigger_point(root: XmlElement) -> TriggerPoint:
    """Bind a root element onto a TriggerPoint.

    The root element's own name is not checked.

    Args:
        root: Root element produced by the markup grammar

    Returns:
        Validated trigger point document

    Raises:
        ParseError: If required fields are missing or fields have the wrong shape
    """
    logger = get_logger()
    data = element_to_mapping(root)
    logger.debug(f"Binding <{root.tag}> with fields: {sorted(data)}")

    try:
        document = TriggerPoint.model_validate(data)
    except ValidationError as exc:
        logger.debug(f"Document binding failed with {exc.error_count()} error(s)")
        raise ParseError(f"Invalid trigger point document: {exc}") from exc

    logger.document_parsed(len(document.conditions), document.group_keys())
    return document
