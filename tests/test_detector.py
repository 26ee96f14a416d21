"""Tests for bola_detector/detector.py"""

import logging
import os
import tempfile

import pytest

from bola_detector.detector import scan_file, scan_lines
from bola_detector.errors import SourceReadError, SourceUnavailableError


class TestScanScenarios:
    def test_second_resource_is_the_only_finding(self, make_line, numbered):
        lines = [
            make_line("tok1", 1),
            make_line("tok1", 2),
            make_line("tok1", 1),
        ]
        result = scan_lines(numbered(lines))

        assert len(result.findings) == 1
        finding = result.findings[0]
        assert finding.line == lines[1]
        assert finding.line_number == 2
        assert finding.identity == "tok1"
        assert finding.resource_id == "2"

    def test_missing_identity_and_first_resource(self, make_line, numbered):
        lines = [make_line(None, 5), make_line("tok1", 5)]
        result = scan_lines(numbered(lines))

        assert result.findings == []
        assert result.unclassifiable == 1

    def test_malformed_line_between_valid_lines(self, make_line, numbered, caplog):
        lines = [make_line("tok1", 1), '{"req": oops', make_line("tok1", 2)]
        with caplog.at_level(logging.WARNING):
            result = scan_lines(numbered(lines))

        assert len(result.diagnostics) == 1
        assert "line 2" in result.diagnostics[0]
        assert result.malformed == 1
        assert [f.line for f in result.findings] == [lines[2]]
        assert "Error parsing log entry (line 2)" in caplog.text


class TestScanProperties:
    def test_nth_distinct_resource_always_flagged(self, make_line, numbered):
        lines = [make_line("tok1", n) for n in range(1, 8)]
        result = scan_lines(numbered(lines))
        assert [f.resource_id for f in result.findings] == [str(n) for n in range(2, 8)]

    def test_findings_preserve_source_order(self, make_line, numbered):
        lines = [
            make_line("a", 1),
            make_line("b", 1),
            make_line("b", 2),
            make_line("a", 2),
            make_line("b", 3),
        ]
        result = scan_lines(numbered(lines))
        assert [f.line_number for f in result.findings] == [3, 4, 5]

    def test_rescan_on_fresh_history_is_identical(self, make_line, numbered):
        lines = numbered([make_line("a", 1), make_line("a", 2), make_line("b", 9)])
        assert scan_lines(lines).findings == scan_lines(lines).findings

    def test_shared_history_carries_state(self, make_line, numbered, history):
        scan_lines(numbered([make_line("a", 1)]), history=history)
        result = scan_lines(numbered([make_line("a", 2)]), history=history)
        assert len(result.findings) == 1

    def test_unclassifiable_records_never_enter_history(self, make_line, numbered, history):
        lines = [make_line(None, 1), make_line("tok1", None), make_line("tok1", 3)]
        result = scan_lines(numbered(lines), history=history)

        assert result.findings == []
        assert list(history.callers()) == ["tok1"]
        assert history.resources_for("tok1") == frozenset({"3"})

    def test_blank_lines_ignored(self, make_line, numbered):
        lines = ["", make_line("a", 1), "   ", make_line("a", 2)]
        result = scan_lines(numbered(lines))

        assert result.total_lines == 2
        assert result.diagnostics == []
        assert result.findings[0].line_number == 4

    def test_counters(self, make_line, numbered):
        lines = [make_line("a", 1), "garbage", make_line(None, 2), make_line("a", 2)]
        result = scan_lines(numbered(lines))

        assert result.total_lines == 4
        assert result.parsed == 3
        assert result.malformed == 1
        assert result.unclassifiable == 1
        assert result.read_error is None


class TestReadFailures:
    def test_read_error_keeps_findings(self, make_line):
        def source():
            yield 1, make_line("a", 1)
            yield 2, make_line("a", 2)
            raise SourceReadError("access.log", 2, "device error")

        result = scan_lines(source())

        assert len(result.findings) == 1
        assert isinstance(result.read_error, SourceReadError)

    def test_read_error_logged_once(self, make_line, caplog):
        def source():
            yield 1, make_line("a", 1)
            raise SourceReadError("access.log", 1, "device error")

        with caplog.at_level(logging.ERROR):
            scan_lines(source())

        errors = [r for r in caplog.records if "Error reading log file" in r.getMessage()]
        assert len(errors) == 1


class TestScanFile:
    def test_scans_file(self, make_line):
        tmpdir = tempfile.mkdtemp()
        path = os.path.join(tmpdir, "access.log")
        with open(path, "w") as f:
            f.write(make_line("a", 1) + "\n")
            f.write(make_line("a", 2) + "\n")

        result = scan_file(path)
        assert [f.line_number for f in result.findings] == [2]

    def test_undecodable_bytes_do_not_end_scan(self, make_line):
        tmpdir = tempfile.mkdtemp()
        path = os.path.join(tmpdir, "access.log")
        bad = make_line("c", 9).encode().replace(b"Host", b"caf\xe9")
        with open(path, "wb") as f:
            f.write(make_line("a", 1).encode() + b"\n")
            f.write(make_line("a", 2).encode() + b"\n")
            f.write(bad + b"\n")
            f.write(make_line("b", 1).encode() + b"\n")
            f.write(make_line("b", 2).encode() + b"\n")

        result = scan_file(path)
        assert [f.line_number for f in result.findings] == [2, 5]
        assert result.read_error is None
        assert result.malformed == 0

    def test_missing_file_is_fatal(self):
        with pytest.raises(SourceUnavailableError):
            scan_file("/nonexistent/access.log")
