"""Custom exceptions for mdparse."""


class MdparseError(Exception):
    """Base exception for mdparse operations."""


class SourceNotFoundError(MdparseError, FileNotFoundError):
    """Input markdown file does not exist."""

    def __init__(self, path: str) -> None:
        super().__init__(f"File not found: {path}")
        self.path = path


class ConfigError(MdparseError):
    """Explicitly requested configuration could not be loaded."""


class SourceDecodeError(MdparseError, ValueError):
    """Input markdown file is not valid UTF-8."""

    def __init__(self, path: str, reason: str) -> None:
        super().__init__(f"Cannot decode {path} as UTF-8: {reason}")
        self.path = path
