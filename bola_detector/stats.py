"""Scan statistics: line counters and caller totals."""

import json
from dataclasses import dataclass, asdict

from bola_detector.detector import ScanResult
from bola_detector.tracker import AccessHistory


@dataclass
class ScanStats:
    total_lines: int = 0
    parsed: int = 0
    malformed: int = 0
    unclassifiable: int = 0
    findings: int = 0
    callers: int = 0
    flagged_callers: int = 0


def compute_stats(result: ScanResult, history: AccessHistory) -> ScanStats:
    """Summarize one run from its result and the history it filled."""
    flagged = {f.identity for f in result.findings}
    return ScanStats(
        total_lines=result.total_lines,
        parsed=result.parsed,
        malformed=result.malformed,
        unclassifiable=result.unclassifiable,
        findings=len(result.findings),
        callers=len(history),
        flagged_callers=len(flagged),
    )


def format_stats_text(stats: ScanStats) -> str:
    """Human-readable stats summary."""
    lines = []
    lines.append(f"Total lines:      {stats.total_lines}")
    lines.append(f"Parsed records:   {stats.parsed}")
    lines.append(f"Malformed lines:  {stats.malformed}")
    lines.append(f"Unclassifiable:   {stats.unclassifiable}")
    lines.append(f"Callers seen:     {stats.callers}")
    lines.append(f"Flagged callers:  {stats.flagged_callers}")
    lines.append(f"Findings:         {stats.findings}")
    return "\n".join(lines)


def format_stats_json(stats: ScanStats) -> str:
    return json.dumps(asdict(stats), indent=2)
