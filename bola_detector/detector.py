"""Scan pipeline: lines -> records -> extracted fields -> findings."""

import logging
from dataclasses import dataclass, field
from typing import Iterable

from bola_detector.errors import RecordParseError, SourceReadError
from bola_detector.extractor import extract_caller_identity, extract_resource_identifier
from bola_detector.models import Finding
from bola_detector.parser import parse_line
from bola_detector.reader import read_lines
from bola_detector.tracker import AccessHistory

logger = logging.getLogger(__name__)


@dataclass
class ScanResult:
    findings: list[Finding] = field(default_factory=list)
    diagnostics: list[str] = field(default_factory=list)
    total_lines: int = 0
    parsed: int = 0
    malformed: int = 0
    unclassifiable: int = 0
    read_error: SourceReadError | None = None


def scan_lines(
    lines: Iterable[tuple[int, str]],
    history: AccessHistory | None = None,
) -> ScanResult:
    """Classify (line_number, line) pairs in order and collect the findings.

    Blank lines are ignored. Malformed lines are skipped with a diagnostic.
    A SourceReadError from the line source ends the scan but keeps what was
    found before it.
    """
    if history is None:
        history = AccessHistory()
    result = ScanResult()

    try:
        for line_number, line in lines:
            stripped = line.strip()
            if not stripped:
                continue
            result.total_lines += 1

            try:
                record = parse_line(stripped, line_number=line_number)
            except RecordParseError as e:
                result.malformed += 1
                message = f"Error parsing log entry (line {line_number}): {e.reason}"
                result.diagnostics.append(message)
                logger.warning(message)
                continue
            result.parsed += 1

            identity = extract_caller_identity(record.headers)
            resource_id = extract_resource_identifier(record.url)
            if not identity or not resource_id:
                result.unclassifiable += 1
                continue

            if history.classify(identity, resource_id):
                result.findings.append(Finding(
                    line=record.raw,
                    line_number=line_number,
                    identity=identity,
                    resource_id=resource_id,
                ))
    except SourceReadError as e:
        result.read_error = e
        logger.error("Error reading log file: %s", e)

    logger.info("Scanned %d lines: %d findings, %d malformed, %d unclassifiable",
                result.total_lines, len(result.findings), result.malformed,
                result.unclassifiable)
    return result


def scan_file(path: str, history: AccessHistory | None = None) -> ScanResult:
    """Scan a log file. Raises SourceUnavailableError if it cannot be opened."""
    logger.info("Scanning %s", path)
    return scan_lines(read_lines(path), history=history)
