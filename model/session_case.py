# model/session_case.py
# This file is part of Trigpoint - A Trigger Point Expression Formatter
#
# Session case codes carried by SPT conditions

from enum import IntEnum


class SessionCase(IntEnum):
    """Session case codes defined for IMS initial filter criteria.

    Values:
        ORIGINATING: Request originated by a registered served user
        TERMINATING_REGISTERED: Request terminating at a registered served user
        ORIGINATING_UNREGISTERED: Request originated on behalf of an unregistered user
        TERMINATING_UNREGISTERED: Request terminating at an unregistered served user
    """

    ORIGINATING = 0
    TERMINATING_REGISTERED = 1
    ORIGINATING_UNREGISTERED = 2
    TERMINATING_UNREGISTERED = 3

    @property
    def description(self) -> str:
        return _DESCRIPTIONS[self]

    @classmethod
    def describe(cls, code: int) -> str:
        """Return the English description for a raw session case code.

        Codes outside the enumeration fall back to "session case <code>".
        """
        try:
            return cls(code).description
        except ValueError:
            return f"session case {code}"


_DESCRIPTIONS = {
    SessionCase.ORIGINATING: "mobile originated",
    SessionCase.TERMINATING_REGISTERED: "mobile terminated",
    SessionCase.ORIGINATING_UNREGISTERED: "mobile originated unregistered",
    SessionCase.TERMINATING_UNREGISTERED: "mobile terminated unregistered",
}
