"""Caller identity and resource identifier extraction.

Both lookups are single fixed patterns, not full header or query parsing.
A credential or id in any other encoding (different key name, different
casing, URL-encoded digits) is not seen.
"""

import re

# re.ASCII keeps \w, \s and \d to their ASCII classes
BEARER_MARKER = re.compile(r"Authorization:\s*Bearer\s*", re.ASCII)
TOKEN_PATTERN = re.compile(r"[\w-]+", re.ASCII)
USER_ID_PATTERN = re.compile(r"user_id=(\d+)", re.ASCII)


def extract_caller_identity(headers: str) -> str:
    """Return the token following the first "Authorization: Bearer" marker.

    Only the first marker counts: if it is not followed by a token the
    result is "" even when a later marker carries one.
    """
    marker = BEARER_MARKER.search(headers)
    if not marker:
        return ""
    token = TOKEN_PATTERN.match(headers, marker.end())
    if token:
        return token.group(0)
    return ""


def extract_resource_identifier(url: str) -> str:
    """Return the digits of the first user_id=<digits> assignment, or ""."""
    match = USER_ID_PATTERN.search(url)
    if match:
        return match.group(1)
    return ""
