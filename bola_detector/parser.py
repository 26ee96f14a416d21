"""JSON access-log line parser."""

import json

from bola_detector.errors import RecordParseError
from bola_detector.models import LogRecord

# (key, type) pairs read from each group
REQUEST_FIELDS = (
    ("url", str),
    ("qs_params", str),
    ("headers", str),
    ("req_body_len", int),
)
RESPONSE_FIELDS = (
    ("status_class", str),
    ("rsp_body_len", int),
)
TYPE_NAMES = {str: "a string", int: "an integer"}


def _group(data: dict, name: str, line_number: int) -> dict:
    value = data.get(name)
    if value is None:
        return {}
    if not isinstance(value, dict):
        raise RecordParseError(line_number, f'"{name}" must be an object')
    return value


def _fields(group: dict, group_name: str, known, line_number: int) -> dict:
    """Type-check the known keys of a group. Missing or null keys get zero values."""
    values = {}
    for key, kind in known:
        value = group.get(key)
        if value is None:
            values[key] = kind()
            continue
        # bool is an int subclass but never a valid length
        if not isinstance(value, kind) or isinstance(value, bool):
            raise RecordParseError(
                line_number,
                f'"{group_name}.{key}" must be {TYPE_NAMES[kind]}',
            )
        values[key] = value
    return values


def parse_line(line: str, line_number: int = 0) -> LogRecord:
    """Parse one JSON log line into a LogRecord.

    Expected shape:
        {"req": {"url": ..., "qs_params": ..., "headers": ..., "req_body_len": ...},
         "rsp": {"status_class": ..., "rsp_body_len": ...}}

    Raises RecordParseError if the line is not a JSON object or a field has
    the wrong type.
    """
    stripped = line.strip()
    try:
        data = json.loads(stripped)
    except json.JSONDecodeError as e:
        raise RecordParseError(line_number, f"invalid JSON: {e}") from e

    # a bare null decodes to an empty record
    if data is None:
        data = {}
    if not isinstance(data, dict):
        raise RecordParseError(line_number, "record must be a JSON object")

    req = _fields(_group(data, "req", line_number), "req", REQUEST_FIELDS, line_number)
    rsp = _fields(_group(data, "rsp", line_number), "rsp", RESPONSE_FIELDS, line_number)

    return LogRecord(
        url=req["url"],
        query=req["qs_params"],
        headers=req["headers"],
        req_body_len=req["req_body_len"],
        status_class=rsp["status_class"],
        rsp_body_len=rsp["rsp_body_len"],
        raw=stripped,
        line_number=line_number,
    )
