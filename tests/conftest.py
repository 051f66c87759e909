# tests/conftest.py
# This file is part of Trigpoint - A Trigger Point Expression Formatter
#
# Test configuration and shared fixtures for pytest

"""Test configuration and shared fixtures for Trigpoint tests.

Provides module path setup and the sample trigger point documents shared by
the parser, renderer and integration suites.
"""

import sys
import pytest
from pathlib import Path

# Ensure project modules can be imported
project_root = Path(__file__).parent.parent
if str(project_root) not in sys.path:
    sys.path.insert(0, str(project_root))


@pytest.fixture(scope="session", autouse=True)
def setup_test_environment():
    """Verify that the project packages are importable before any test runs."""
    try:
        import core
        import model
        import parser
        import renderer
        import utils
    except ImportError as e:
        pytest.skip(f"Cannot import required modules: {e}")

    yield


@pytest.fixture
def cnf_document():
    """CNF document with two groups, the second one listed first."""
    return """<?xml version="1.0" encoding="UTF-8"?>
<TriggerPoint>
  <ConditionTypeCNF>1</ConditionTypeCNF>
  <SPT>
    <ConditionNegated>0</ConditionNegated>
    <Group>1</Group>
    <SessionCase>0</SessionCase>
  </SPT>
  <SPT>
    <Group>0</Group>
    <Method>INVITE</Method>
  </SPT>
  <SPT>
    <ConditionNegated>1</ConditionNegated>
    <Group>1</Group>
    <RequestURI>sip:test@example.com</RequestURI>
  </SPT>
</TriggerPoint>
"""


@pytest.fixture
def cnf_expression():
    """Expected rendering of cnf_document."""
    return (
        "(\n"
        "  (method is INVITE)\n"
        ")\n"
        "and\n"
        "(\n"
        "  (session case is mobile originated)\n"
        "  or\n"
        "  (not (request URI is sip:test@example.com))\n"
        ")"
    )


@pytest.fixture
def dnf_document():
    """DNF document with a SIP header condition and a multi-attribute SPT."""
    return """<TriggerPoint>
  <ConditionTypeDNF>1</ConditionTypeDNF>
  <SPT>
    <Group>0</Group>
    <Method>REGISTER</Method>
    <Extension></Extension>
  </SPT>
  <SPT>
    <Group>0</Group>
    <SIPHeader>
      <Header>From</Header>
      <Content>"Alice"</Content>
    </SIPHeader>
  </SPT>
  <SPT>
    <Group>2</Group>
    <Method>MESSAGE</Method>
    <SessionCase>3</SessionCase>
  </SPT>
</TriggerPoint>"""


@pytest.fixture
def dnf_expression():
    """Expected rendering of dnf_document."""
    return (
        "(\n"
        "  (method is REGISTER)\n"
        "  and\n"
        '  ("From" header with ""Alice"" value)\n'
        ")\n"
        "or\n"
        "(\n"
        "  (method is MESSAGE and session case is mobile terminated unregistered)\n"
        ")"
    )
