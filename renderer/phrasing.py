# renderer/phrasing.py
# This file is part of Trigpoint - A Trigger Point Expression Formatter
#
# English phrasing of individual SPT conditions

from typing import List

from model import SPT, SessionCase

CLAUSE_SEPARATOR = " and "


def condition_clauses(spt: SPT) -> List[str]:
    """Collect the English clauses for every attribute present on a condition.

    Clauses follow a fixed order: method, session case, extension, request
    URI, SIP header. An empty extension produces no clause.

    Args:
        spt: Condition to describe

    Returns:
        Clauses in rendering order, empty when the condition has no attributes
    """
    clauses = []

    if spt.method is not None:
        clauses.append(f"method is {spt.method}")

    if spt.session_case is not None:
        clauses.append(f"session case is {SessionCase.describe(spt.session_case)}")

    if spt.extension:
        clauses.append(f"extension is {spt.extension}")

    if spt.request_uri is not None:
        clauses.append(f"request URI is {spt.request_uri}")

    if spt.sip_header is not None:
        header = spt.sip_header
        clauses.append(f'"{header.header}" header with "{header.content}" value')

    return clauses


def join_clauses(clauses: List[str], negated: bool = False) -> str:
    """Join clauses into one phrase, wrapping it in a negation if required."""
    text = CLAUSE_SEPARATOR.join(clauses)
    if negated:
        return f"not ({text})"
    return text


def describe_condition(spt: SPT) -> str:
    """Render one condition as an English phrase."""
    return join_clauses(condition_clauses(spt), spt.negated)
