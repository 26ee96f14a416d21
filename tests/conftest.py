import json

import pytest

from bola_detector.tracker import AccessHistory


def build_line(token=None, user_id=None, path="/api/v1/accounts", status_class="2xx"):
    """Build one JSON access-log line with an optional bearer token and user_id."""
    url = f"{path}?user_id={user_id}" if user_id is not None else path
    headers = "Host: api.example.com"
    if token is not None:
        headers += f"\r\nAuthorization: Bearer {token}"
    return json.dumps({
        "req": {
            "url": url,
            "qs_params": url.partition("?")[2],
            "headers": headers,
            "req_body_len": 0,
        },
        "rsp": {"status_class": status_class, "rsp_body_len": 128},
    })


@pytest.fixture
def make_line():
    return build_line


@pytest.fixture
def history():
    return AccessHistory()


@pytest.fixture
def numbered():
    """Turn a list of raw lines into (line_number, line) pairs."""
    def _numbered(lines):
        return list(enumerate(lines, start=1))
    return _numbered
