# model/__init__.py

"""
Domain objects for trigger point documents: the root trigger point, its
SPT conditions, SIP header conditions and session case codes. These types
carry no rendering logic.
"""

from .session_case import SessionCase
from .trigger_point import SipHeader, SPT, TriggerPoint

__all__ = [
    "SessionCase",
    "SipHeader",
    "SPT",
    "TriggerPoint",
]
