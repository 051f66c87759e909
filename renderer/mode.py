# renderer/mode.py
# This file is part of Trigpoint - A Trigger Point Expression Formatter
#
# Normal form selection for trigger point rendering

"""Selection of the normal form a document is rendered in.

A trigger point is either in conjunctive normal form (an AND of OR-groups)
or in disjunctive normal form (an OR of AND-groups). The form decides both
connectives used by the renderer. Which form a document declares is decided
by a ModePolicy, so the decision rule can be replaced without touching the
rendering code.

Policies:
    MarkerPresencePolicy: CNF whenever the CNF marker is present (default)
    StrictMarkerPolicy: exactly one marker, and it must carry the value 1
"""

from enum import Enum
from typing import Protocol

from model import TriggerPoint
from .exceptions import RenderError
from utils.logger import get_logger

# Value a condition type marker is expected to carry
MARKER_SENTINEL = 1


class NormalForm(Enum):
    """Normal form of a trigger point expression.

    Values:
        CNF: Conjunction of groups, conditions inside a group are alternatives
        DNF: Disjunction of groups, conditions inside a group must all hold
    """

    CNF = "CNF"
    DNF = "DNF"

    def __str__(self) -> str:
        return self.value

    @property
    def intra_connective(self) -> str:
        """Connective joining conditions inside one group."""
        return "or" if self is NormalForm.CNF else "and"

    @property
    def inter_connective(self) -> str:
        """Connective joining groups."""
        return "and" if self is NormalForm.CNF else "or"


class ModePolicy(Protocol):
    """Interface for normal form selection policies."""

    def select(self, doc: TriggerPoint) -> NormalForm: ...


class MarkerPresencePolicy:
    """Select CNF when the CNF marker is present, DNF otherwise.

    The marker value is not inspected, so a CNF marker of 0 still selects
    CNF, and the DNF marker is never consulted.
    """

    def select(self, doc: TriggerPoint) -> NormalForm:
        if doc.is_cnf:
            mode = NormalForm.CNF
            reason = f"ConditionTypeCNF present with value {doc.condition_type_cnf}"
        else:
            mode = NormalForm.DNF
            reason = "ConditionTypeCNF absent"

        get_logger().mode_selected(str(mode), reason)
        return mode


class StrictMarkerPolicy:
    """Require exactly one condition type marker carrying the sentinel value.

    Raises:
        RenderError: When no marker, both markers, or a marker with a value
            other than the sentinel is present
    """

    def __init__(self, sentinel: int = MARKER_SENTINEL):
        self.sentinel = sentinel

    def select(self, doc: TriggerPoint) -> NormalForm:
        markers = {
            NormalForm.CNF: doc.condition_type_cnf,
            NormalForm.DNF: doc.condition_type_dnf,
        }
        present = {mode: value for mode, value in markers.items() if value is not None}

        if not present:
            raise RenderError("Document declares neither ConditionTypeCNF nor ConditionTypeDNF")
        if len(present) > 1:
            raise RenderError("Document declares both ConditionTypeCNF and ConditionTypeDNF")

        (mode, value), = present.items()
        if value != self.sentinel:
            raise RenderError(
                f"ConditionType{mode.value} must be {self.sentinel}, found {value}"
            )

        get_logger().mode_selected(str(mode), f"ConditionType{mode.value} is {value}")
        return mode


DEFAULT_POLICY = MarkerPresencePolicy()
