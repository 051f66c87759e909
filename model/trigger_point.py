# model/trigger_point.py
# This file is part of Trigpoint - A Trigger Point Expression Formatter
#
# Typed document model for trigger point documents

"""Typed representation of a trigger point document.

Field aliases carry the XML element names, so a mapping produced from the
element tree validates directly. Models can also be built with the Python
field names, which is how tests and embedding code construct them.

Every descriptive SPT attribute is an independent optional field: a single
condition may carry several of them and they render as a conjunction.
"""

from __future__ import annotations
import re
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator


# Integer fields are single octets in the trigger point schema
_OCTET = {"ge": 0, "le": 255}


def _decimal_octet(value):
    """Accept integers and plain decimal digit strings only.

    Lax coercion would otherwise let "+1", "1_0" or "1.0" through.
    """
    if isinstance(value, str):
        text = value.strip()
        if not re.fullmatch(r"[0-9]+", text):
            raise ValueError(f"expected decimal digits, found {value!r}")
        return int(text)
    return value


class _DocumentModel(BaseModel):
    model_config = ConfigDict(frozen=True, populate_by_name=True, extra="ignore")


class SipHeader(_DocumentModel):
    """SIP header condition: header name and the content it must match."""

    header: str = Field(alias="Header")
    content: str = Field(alias="Content")


class SPT(_DocumentModel):
    """Service point trigger: one leaf condition belonging to one group.

    Attributes:
        group: Group number clustering this condition with others
        condition_negated: Raw negation flag; only the value 1 negates
        method: SIP request method
        extension: Extension value, ignored when empty
        session_case: Raw session case code
        request_uri: Request-URI to match
        sip_header: SIP header name/content pair
    """

    group: int = Field(alias="Group", **_OCTET)
    condition_negated: Optional[int] = Field(default=None, alias="ConditionNegated", **_OCTET)
    method: Optional[str] = Field(default=None, alias="Method")
    extension: Optional[str] = Field(default=None, alias="Extension")
    session_case: Optional[int] = Field(default=None, alias="SessionCase", **_OCTET)
    request_uri: Optional[str] = Field(default=None, alias="RequestURI")
    sip_header: Optional[SipHeader] = Field(default=None, alias="SIPHeader")

    @field_validator("group", "condition_negated", "session_case", mode="before")
    @classmethod
    def _integer_fields(cls, value):
        return _decimal_octet(value)

    @property
    def negated(self) -> bool:
        return self.condition_negated == 1


class TriggerPoint(_DocumentModel):
    """Root of a trigger point document.

    Attributes:
        condition_type_cnf: CNF marker value, None when the marker is absent
        condition_type_dnf: DNF marker value, None when the marker is absent
        conditions: SPT conditions in document order
    """

    condition_type_cnf: Optional[int] = Field(default=None, alias="ConditionTypeCNF", **_OCTET)
    condition_type_dnf: Optional[int] = Field(default=None, alias="ConditionTypeDNF", **_OCTET)
    conditions: tuple[SPT, ...] = Field(alias="SPT")

    @field_validator("condition_type_cnf", "condition_type_dnf", mode="before")
    @classmethod
    def _integer_markers(cls, value):
        return _decimal_octet(value)

    @field_validator("conditions", mode="before")
    @classmethod
    def _single_condition_as_sequence(cls, value):
        # A lone <SPT> element binds as a mapping rather than a list
        if isinstance(value, (dict, SPT)):
            return [value]
        return value

    @property
    def is_cnf(self) -> bool:
        """True when the CNF marker is present, whatever its value."""
        return self.condition_type_cnf is not None

    def group_keys(self) -> list[int]:
        """Distinct group numbers in ascending order."""
        return sorted({spt.group for spt in self.conditions})
