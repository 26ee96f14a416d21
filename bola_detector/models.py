"""Access-log record and finding dataclasses."""

from dataclasses import dataclass, asdict
from typing import Any


@dataclass(frozen=True)
class LogRecord:
    url: str
    query: str
    headers: str  # raw "Key: value" block, not parsed
    req_body_len: int
    status_class: str  # "2xx", "4xx", ...
    rsp_body_len: int
    raw: str
    line_number: int = 0


@dataclass(frozen=True)
class Finding:
    line: str
    line_number: int
    identity: str
    resource_id: str


def finding_to_dict(finding: Finding) -> dict[str, Any]:
    """Convert a Finding to a plain dict for JSON output."""
    return asdict(finding)
