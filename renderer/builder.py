# renderer/builder.py
# This file is part of Trigpoint - A Trigger Point Expression Formatter
#
# Construction of expression trees from trigger point documents

"""Builds the expression tree for a trigger point document.

Conditions are partitioned by group number, keeping document order inside
each group. Groups are emitted in ascending numeric order of their keys,
not in the order they first appear. The connectives come from the normal
form chosen by the mode policy.
"""

from __future__ import annotations
from typing import Dict, List, Optional

from model import SPT, TriggerPoint
from .expression_nodes import ConditionNode, ExpressionNode, GroupNode
from .mode import DEFAULT_POLICY, ModePolicy, NormalForm
from .phrasing import condition_clauses
from utils.logger import get_logger


def group_conditions(conditions) -> Dict[int, List[SPT]]:
    """Partition conditions by group number, preserving order within groups."""
    groups: Dict[int, List[SPT]] = {}
    for spt in conditions:
        groups.setdefault(spt.group, []).append(spt)
    return groups


class ExpressionBuilder:
    """Turns a TriggerPoint into an ExpressionNode.

    Attributes:
        policy: Normal form selection policy
    """

    def __init__(self, policy: Optional[ModePolicy] = None):
        self.policy = policy if policy is not None else DEFAULT_POLICY

    def build(self, doc: TriggerPoint) -> ExpressionNode:
        """Build the expression tree for a document.

        Args:
            doc: Parsed trigger point document

        Returns:
            Expression tree with groups in ascending key order

        Raises:
            RenderError: If the policy rejects the document's markers
        """
        logger = get_logger()

        mode = self.policy.select(doc)
        groups = group_conditions(doc.conditions)

        group_nodes = []
        for key in sorted(groups):
            group_nodes.append(self.build_group(key, groups[key], mode))
            logger.group_rendered(key, len(groups[key]), mode.intra_connective)

        expression = ExpressionNode(tuple(group_nodes), mode.inter_connective)
        logger.debug(f"Expression tree: {expression}")
        return expression

    def build_group(self, key: int, conditions: List[SPT], mode: NormalForm) -> GroupNode:
        return GroupNode(
            key,
            tuple(self.build_condition(spt) for spt in conditions),
            mode.intra_connective,
        )

    @staticmethod
    def build_condition(spt: SPT) -> ConditionNode:
        return ConditionNode(tuple(condition_clauses(spt)), spt.negated)
