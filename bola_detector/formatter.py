"""Report output: plain text or NDJSON findings."""

import json
from typing import Callable, Iterable

from bola_detector.models import Finding, finding_to_dict

REPORT_HEADER = "Suspicious Access Attempts Detected:"
OUTPUT_FORMATS = ("text", "json")


def format_text(finding: Finding) -> str:
    """Return the original log line."""
    return finding.line


def format_json(finding: Finding) -> str:
    """Return NDJSON, one object per finding."""
    return json.dumps(finding_to_dict(finding))


def get_formatter(output_format: str = "text") -> Callable[[Finding], str]:
    if output_format == "json":
        return format_json
    return format_text


def render_report(findings: Iterable[Finding], output_format: str = "text") -> str:
    """Render all findings. Text output starts with the fixed header line."""
    formatter = get_formatter(output_format)
    lines = [formatter(f) for f in findings]
    if output_format != "json":
        lines.insert(0, REPORT_HEADER)
    return "\n".join(lines)
