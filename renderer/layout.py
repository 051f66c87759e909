# renderer/layout.py
# This file is part of Trigpoint - A Trigger Point Expression Formatter
#
# Line layout for rendered trigger point expressions

"""Lays an expression tree out as indented lines.

Each group opens and closes with a bare parenthesis line. Conditions sit on
their own lines inside the group, indented and parenthesised, separated by
the group connective on an indented line of its own. Groups are separated by
the expression connective on an unindented line. Lines are joined once, at
the end, with no trailing newline.

Example (CNF, two groups):
    (
      (method is INVITE)
    )
    and
    (
      (session case is mobile originated)
      or
      (not (request URI is sip:test@example.com))
    )
"""

from __future__ import annotations
from typing import List

from . import expression_nodes as nodes

INDENT = "  "
LINE_SEPARATOR = "\n"


class LayoutVisitor(nodes.Visitor):
    """Produces the line fragments for an expression tree.

    Attributes:
        indent: Indentation placed before condition and connective lines
    """

    def __init__(self, indent: str = INDENT):
        self.indent = indent

    def visit_condition(self, n: nodes.ConditionNode) -> List[str]:
        return [f"{self.indent}{n}"]

    def visit_group(self, n: nodes.GroupNode) -> List[str]:
        lines = ["("]
        for i, condition in enumerate(n.conditions):
            if i > 0:
                lines.append(f"{self.indent}{n.connective}")
            lines.extend(condition.accept(self))
        lines.append(")")
        return lines

    def visit_expression(self, n: nodes.ExpressionNode) -> List[str]:
        lines: List[str] = []
        for i, group in enumerate(n.groups):
            if i > 0:
                lines.append(n.connective)
            lines.extend(group.accept(self))
        return lines


def layout_lines(expression: nodes.ExpressionNode, indent: str = INDENT) -> List[str]:
    """Return the line fragments for an expression tree."""
    return expression.accept(LayoutVisitor(indent))


def serialize(expression: nodes.ExpressionNode, indent: str = INDENT) -> str:
    """Serialize an expression tree into its final text."""
    return LINE_SEPARATOR.join(layout_lines(expression, indent))
