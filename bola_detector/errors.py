"""Exception types raised while scanning an access log."""


class BolaScanError(Exception):
    """Base class for every error raised by bola_detector."""


class ConfigError(BolaScanError):
    """Invalid configuration value or unreadable YAML config."""


class SourceUnavailableError(BolaScanError):
    """The log source could not be opened at all."""

    def __init__(self, path: str, reason: str):
        super().__init__(f"Unable to open file in path {path} - {reason}")
        self.path = path
        self.reason = reason


class SourceReadError(BolaScanError):
    """Reading failed after the source was opened successfully."""

    def __init__(self, path: str, line_number: int, reason: str):
        super().__init__(f"{reason} (after line {line_number})")
        self.path = path
        self.line_number = line_number
        self.reason = reason


class RecordParseError(BolaScanError):
    """A single line is not a well-formed access-log record."""

    def __init__(self, line_number: int, reason: str):
        super().__init__(f"line {line_number}: {reason}")
        self.line_number = line_number
        self.reason = reason
