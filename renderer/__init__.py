# renderer/__init__.py
# This file is part of Trigpoint - A Trigger Point Expression Formatter
#
# Expression rendering components for trigger point documents

"""Rendering of trigger point documents as English boolean expressions.

The renderer turns a parsed TriggerPoint into nested, indented text that
keeps the document's normal form visible: in CNF the groups are joined by
"and" and the conditions inside each group by "or"; in DNF the other way
round. Rendering happens in two steps, building an expression tree and then
laying it out, so that tree construction can be inspected independently of
the final text layout.

Core Functions:
    render: Complete pipeline from TriggerPoint to text
    build_expression: Tree construction only

Example:
    >>> from parser import parse
    >>> from renderer import render
    >>> print(render(parse(document_text)))
"""

from typing import Optional

from model import TriggerPoint
from .builder import ExpressionBuilder, group_conditions
from .exceptions import RenderError
from .expression_nodes import ConditionNode, ExpressionNode, GroupNode
from .layout import serialize
from .mode import (
    DEFAULT_POLICY,
    MarkerPresencePolicy,
    ModePolicy,
    NormalForm,
    StrictMarkerPolicy,
)
from .phrasing import describe_condition
from utils.logger import get_logger


def build_expression(doc: TriggerPoint, policy: Optional[ModePolicy] = None) -> ExpressionNode:
    """Build the expression tree for a document.

    Args:
        doc: Parsed trigger point document
        policy: Normal form selection policy, MarkerPresencePolicy by default

    Returns:
        Expression tree with groups in ascending key order

    Raises:
        RenderError: If the policy rejects the document
    """
    return ExpressionBuilder(policy).build(doc)


def render(doc: TriggerPoint, policy: Optional[ModePolicy] = None) -> str:
    """Render a trigger point document as an English boolean expression.

    With the default policy rendering cannot fail for a parsed document.

    Args:
        doc: Parsed trigger point document
        policy: Normal form selection policy, MarkerPresencePolicy by default

    Returns:
        Newline-separated expression text without a trailing newline

    Raises:
        RenderError: If a non-default policy rejects the document
    """
    logger = get_logger()
    logger.debug(f"Rendering trigger point with {len(doc.conditions)} condition(s)")

    text = serialize(build_expression(doc, policy))

    logger.debug(f"Rendered expression spans {len(text.splitlines())} line(s)")
    return text


__all__ = [
    "render",
    "build_expression",
    "describe_condition",
    "group_conditions",
    "ExpressionBuilder",
    "ConditionNode",
    "GroupNode",
    "ExpressionNode",
    "NormalForm",
    "ModePolicy",
    "MarkerPresencePolicy",
    "StrictMarkerPolicy",
    "DEFAULT_POLICY",
    "RenderError",
]
