# tests/integration_tests/test_format_pipeline.py
# This file is part of Trigpoint - A Trigger Point Expression Formatter
#
# End-to-end tests from document text to rendered expression

"""End-to-end tests for the host-facing formatting entry points.

Documents go in as raw text, exactly as a host would pass them, and the
rendered text or error message comes back.
"""

import pytest
from core import (
    COMMANDS,
    MALFORMED_DOCUMENT_MESSAGE,
    FormatResponse,
    UnknownCommandError,
    format_trigger_point,
    handle_format_request,
    invoke,
)
from parser import ParseError
from renderer import RenderError
from utils.logger import get_logger


class TestFormatTriggerPoint:
    """Test cases for format_trigger_point."""

    def setup_method(self):
        self.logger = get_logger()

    def test_cnf_document(self, cnf_document, cnf_expression):
        assert format_trigger_point(cnf_document) == cnf_expression

    def test_dnf_document(self, dnf_document, dnf_expression):
        assert format_trigger_point(dnf_document) == dnf_expression

    def test_minimal_document(self):
        text = "<TriggerPoint><SPT><Group>0</Group><Method>INVITE</Method></SPT></TriggerPoint>"

        assert format_trigger_point(text) == "(\n  (method is INVITE)\n)"

    def test_attribute_only_document(self):
        text = '<TriggerPoint ConditionTypeCNF="1"><SPT Group="0" Method="BYE"/></TriggerPoint>'

        assert format_trigger_point(text) == "(\n  (method is BYE)\n)"

    def test_prefixed_document_with_byte_order_mark(self):
        text = (
            '\ufeff<?xml version="1.0" encoding="UTF-8"?>\n'
            '<tp:TriggerPoint xmlns:tp="urn:ims:ifc">'
            "<tp:ConditionTypeCNF>1</tp:ConditionTypeCNF>"
            "<tp:SPT><tp:Group>0</tp:Group><tp:Method>INVITE</tp:Method></tp:SPT>"
            "<tp:SPT><tp:Group>1</tp:Group><tp:Method>BYE</tp:Method></tp:SPT>"
            "</tp:TriggerPoint>"
        )

        assert format_trigger_point(text) == (
            "(\n  (method is INVITE)\n)\nand\n(\n  (method is BYE)\n)"
        )

    def test_group_order_independent_of_document_order(self):
        forward = (
            "<TriggerPoint><ConditionTypeCNF>1</ConditionTypeCNF>"
            "<SPT><Group>0</Group><Method>A</Method></SPT>"
            "<SPT><Group>3</Group><Method>B</Method></SPT>"
            "</TriggerPoint>"
        )
        backward = (
            "<TriggerPoint><ConditionTypeCNF>1</ConditionTypeCNF>"
            "<SPT><Group>3</Group><Method>B</Method></SPT>"
            "<SPT><Group>0</Group><Method>A</Method></SPT>"
            "</TriggerPoint>"
        )

        assert format_trigger_point(forward) == format_trigger_point(backward)

    def test_unknown_session_case_fallback(self):
        text = (
            "<TriggerPoint><SPT><Group>0</Group>"
            "<SessionCase>7</SessionCase></SPT></TriggerPoint>"
        )

        assert format_trigger_point(text) == "(\n  (session case is session case 7)\n)"

    def test_negated_sip_header(self):
        text = """<TriggerPoint>
  <ConditionTypeCNF>1</ConditionTypeCNF>
  <SPT>
    <ConditionNegated>1</ConditionNegated>
    <Group>0</Group>
    <SIPHeader>
      <Header>Accept-Contact</Header>
      <Content>*;+g.3gpp.icsi-ref</Content>
    </SIPHeader>
  </SPT>
</TriggerPoint>"""

        assert format_trigger_point(text) == (
            '(\n  (not ("Accept-Contact" header with "*;+g.3gpp.icsi-ref" value))\n)'
        )

    def test_repeated_calls_are_identical(self, cnf_document):
        results = {format_trigger_point(cnf_document) for _ in range(5)}

        assert len(results) == 1

    def test_malformed_document_raises_parse_error(self):
        with pytest.raises(ParseError):
            format_trigger_point("<TriggerPoint><SPT><Group>0</Group>")

    def test_strict_markers_rejects_zero_marker(self):
        text = (
            "<TriggerPoint><ConditionTypeCNF>0</ConditionTypeCNF>"
            "<SPT><Group>0</Group></SPT></TriggerPoint>"
        )

        assert format_trigger_point(text) == "(\n  ()\n)"
        with pytest.raises(RenderError):
            format_trigger_point(text, strict_markers=True)


class TestHandleFormatRequest:
    """Test cases for the non-raising request handler and command table."""

    def test_success_response(self, cnf_document, cnf_expression):
        response = handle_format_request(cnf_document)

        assert response == FormatResponse(output=cnf_expression)
        assert response.ok

    @pytest.mark.parametrize(
        "content",
        [
            "",
            "garbage",
            "<TriggerPoint>",
            "<TriggerPoint><SPT><Method>INVITE</Method></SPT></TriggerPoint>",
        ],
    )
    def test_malformed_documents_get_opaque_error(self, content):
        response = handle_format_request(content)

        assert response == FormatResponse(error=MALFORMED_DOCUMENT_MESSAGE)
        assert not response.ok
        assert response.output is None

    def test_render_error_message_is_returned(self):
        text = "<TriggerPoint><SPT><Group>0</Group></SPT></TriggerPoint>"

        response = handle_format_request(text, strict_markers=True)

        assert not response.ok
        assert "neither" in response.error

    def test_invoke_format_command(self, dnf_document, dnf_expression):
        assert "format" in COMMANDS
        assert invoke("format", content=dnf_document).output == dnf_expression

    def test_invoke_unknown_command(self):
        with pytest.raises(UnknownCommandError):
            invoke("greet", name="world")

    def test_command_table_is_read_only(self):
        with pytest.raises(TypeError):
            COMMANDS["other"] = handle_format_request
