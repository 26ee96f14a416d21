"""Generator-based access-log reading."""

import sys
from typing import Generator, TextIO

from bola_detector.errors import SourceReadError, SourceUnavailableError

STDIN_PATH = "-"
PATH_PROMPT = "Enter the full path of the access log file:"


def _numbered(stream: TextIO, path: str) -> Generator[tuple[int, str], None, None]:
    line_number = 0
    try:
        for line in stream:
            line_number += 1
            yield line_number, line
    except OSError as e:
        raise SourceReadError(path, line_number, str(e)) from e


def read_lines(path: str) -> Generator[tuple[int, str], None, None]:
    """Yield (line_number, line) for each line of path, numbered from 1.

    The file is opened on first iteration. Raises SourceUnavailableError if
    it cannot be opened, SourceReadError if reading fails part way through.
    Undecodable bytes become U+FFFD so one bad record cannot end the scan.
    """
    if path == STDIN_PATH:
        if hasattr(sys.stdin, "reconfigure"):
            sys.stdin.reconfigure(errors="replace")
        yield from _numbered(sys.stdin, path)
        return

    try:
        f = open(path, "r", encoding="utf-8", errors="replace")
    except OSError as e:
        raise SourceUnavailableError(path, e.strerror or str(e)) from e

    with f:
        yield from _numbered(f, path)


def prompt_for_path(stdin: TextIO | None = None, stdout: TextIO | None = None) -> str:
    """Ask for the log file path on stdout and read one line from stdin."""
    stdin = stdin or sys.stdin
    stdout = stdout or sys.stdout
    print(PATH_PROMPT, file=stdout, flush=True)
    return stdin.readline().strip()
