"""Error types raised across textr layers."""

from __future__ import annotations


class TextrError(Exception):
    """Base class for errors reported to the user by the CLI."""

    pass


class ArgumentError(TextrError):
    """Invalid option value or conflicting options."""

    pass


class SourceError(TextrError):
    """An input could not be opened or read.

    The message always starts with the input name so that a bare
    "Permission denied" never reaches the user without context.
    """

    def __init__(self, name: str, reason: str):
        self.name = name
        self.reason = reason
        super().__init__(f"{name}: {reason}")


class SourceNotFoundError(SourceError):
    """The named input file does not exist."""

    pass


class SinkError(TextrError):
    """The output destination could not be created or written."""

    def __init__(self, name: str, reason: str):
        self.name = name
        self.reason = reason
        super().__init__(f"{name}: {reason}")


def describe_os_error(exc: OSError) -> str:
    """Return the OS error text without errno noise."""
    return exc.strerror or str(exc)


__all__ = [
    "ArgumentError",
    "SinkError",
    "SourceError",
    "SourceNotFoundError",
    "TextrError",
    "describe_os_error",
]
