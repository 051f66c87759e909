# tests/integration_tests/test_cli.py
# This file is part of Trigpoint - A Trigger Point Expression Formatter
#
# Tests for the command-line front end

"""Tests for run_formatter.main exit codes and output handling."""

import io

import pytest
import run_formatter
from utils.document_reader import DocumentReadError, read_document


class TestCommandLine:
    """Test cases for the formatter CLI."""

    def test_writes_expression_to_output_file(self, tmp_path, cnf_document, cnf_expression):
        source = tmp_path / "trigger_point.xml"
        source.write_text(cnf_document, encoding="utf-8")
        target = tmp_path / "expression.txt"

        exit_code = run_formatter.main([str(source), "-o", str(target)])

        assert exit_code == run_formatter.EXIT_OK
        assert target.read_text(encoding="utf-8") == cnf_expression + "\n"

    def test_writes_expression_to_stdout(self, tmp_path, capsys, dnf_document, dnf_expression):
        source = tmp_path / "trigger_point.xml"
        source.write_text(dnf_document, encoding="utf-8")

        exit_code = run_formatter.main([str(source)])

        assert exit_code == run_formatter.EXIT_OK
        assert capsys.readouterr().out == dnf_expression + "\n"

    def test_reads_standard_input(self, monkeypatch, capsys, cnf_document, cnf_expression):
        monkeypatch.setattr("sys.stdin", io.StringIO(cnf_document))

        exit_code = run_formatter.main([])

        assert exit_code == run_formatter.EXIT_OK
        assert capsys.readouterr().out == cnf_expression + "\n"

    def test_malformed_document_exit_code(self, tmp_path, capsys):
        source = tmp_path / "broken.xml"
        source.write_text("<TriggerPoint><SPT>", encoding="utf-8")

        exit_code = run_formatter.main([str(source)])

        assert exit_code == run_formatter.EXIT_PARSE_ERROR
        assert capsys.readouterr().out == ""

    def test_strict_markers_exit_code(self, tmp_path):
        source = tmp_path / "zero_marker.xml"
        source.write_text(
            "<TriggerPoint><ConditionTypeCNF>0</ConditionTypeCNF>"
            "<SPT><Group>0</Group><Method>INVITE</Method></SPT></TriggerPoint>",
            encoding="utf-8",
        )

        assert run_formatter.main([str(source), "--strict-markers"]) == run_formatter.EXIT_RENDER_ERROR

    def test_file_with_byte_order_mark(self, tmp_path, capsys, cnf_document, cnf_expression):
        source = tmp_path / "trigger_point.xml"
        source.write_text(cnf_document, encoding="utf-8-sig")

        assert run_formatter.main([str(source)]) == run_formatter.EXIT_OK
        assert capsys.readouterr().out == cnf_expression + "\n"

    def test_missing_file_exit_code(self, tmp_path):
        exit_code = run_formatter.main([str(tmp_path / "missing.xml")])

        assert exit_code == run_formatter.EXIT_FILE_ERROR

    def test_empty_file_exit_code(self, tmp_path):
        source = tmp_path / "empty.xml"
        source.write_text("  \n", encoding="utf-8")

        assert run_formatter.main([str(source)]) == run_formatter.EXIT_FILE_ERROR


class TestDocumentReader:
    """Test cases for reading documents."""

    def test_read_from_stream(self):
        assert read_document("-", stdin=io.StringIO("<A/>")) == "<A/>"

    def test_read_from_file_is_verbatim(self, tmp_path):
        source = tmp_path / "doc.xml"
        source.write_text("\n<A/>\n", encoding="utf-8")

        assert read_document(str(source)) == "\n<A/>\n"

    def test_byte_order_mark_is_dropped_from_file(self, tmp_path):
        source = tmp_path / "bom.xml"
        source.write_bytes(b"\xef\xbb\xbf<A/>")

        assert read_document(str(source)) == "<A/>"

    def test_missing_file(self, tmp_path):
        with pytest.raises(DocumentReadError, match="not found"):
            read_document(str(tmp_path / "nope.xml"))

    def test_empty_stream(self):
        with pytest.raises(DocumentReadError, match="empty"):
            read_document(None, stdin=io.StringIO(""))
