# renderer/expression_nodes.py
# This file is part of Trigpoint - A Trigger Point Expression Formatter
#
# Expression tree node classes for rendered trigger point expressions

"""Expression tree for a trigger point in normal form.

The tree has exactly three levels: the whole expression joins groups, each
group joins conditions, and each condition is a conjunction of attribute
clauses, optionally negated. Building the tree is separate from laying it
out as text, so grouping and phrasing can be checked on the tree alone.

Node Types:
    ConditionNode: One SPT as a list of clauses
    GroupNode: Conditions of one group and their connective
    ExpressionNode: All groups and the connective between them

All nodes support the visitor design pattern for traversal.
"""

from __future__ import annotations
from dataclasses import dataclass
from typing import Protocol

from .phrasing import join_clauses


class Visitor(Protocol):
    """Interface for expression tree visitors."""

    def visit_condition(self, n: ConditionNode): ...

    def visit_group(self, n: GroupNode): ...

    def visit_expression(self, n: ExpressionNode): ...


@dataclass(frozen=True, slots=True)
class Node:
    """Base class for expression tree nodes."""

    def accept(self, v: Visitor):
        """Dispatch to the appropriate visitor method.

        Args:
            v: Visitor instance to process this node

        Raises:
            NotImplementedError: Must be implemented by subclasses
        """
        raise NotImplementedError


@dataclass(frozen=True, slots=True)
class ConditionNode(Node):
    """Single condition rendered as a conjunction of clauses.

    Attributes:
        clauses: Attribute clauses in rendering order
        negated: Whether the whole conjunction is negated
    """

    clauses: tuple[str, ...]
    negated: bool = False

    @property
    def phrase(self) -> str:
        """Condition phrase without the surrounding parentheses."""
        return join_clauses(list(self.clauses), self.negated)

    def accept(self, v: Visitor):
        return v.visit_condition(self)

    def __str__(self) -> str:
        return f"({self.phrase})"


@dataclass(frozen=True, slots=True)
class GroupNode(Node):
    """Conditions sharing one group number.

    Attributes:
        key: Group number
        conditions: Conditions in document order
        connective: Word joining the conditions
    """

    key: int
    conditions: tuple[ConditionNode, ...]
    connective: str

    def accept(self, v: Visitor):
        return v.visit_group(self)

    def __str__(self) -> str:
        joined = f" {self.connective} ".join(str(c) for c in self.conditions)
        return f"({joined})"


@dataclass(frozen=True, slots=True)
class ExpressionNode(Node):
    """Complete expression over all groups.

    Attributes:
        groups: Groups in ascending key order
        connective: Word joining the groups
    """

    groups: tuple[GroupNode, ...]
    connective: str

    def accept(self, v: Visitor):
        return v.visit_expression(self)

    def __str__(self) -> str:
        return f" {self.connective} ".join(str(g) for g in self.groups)
