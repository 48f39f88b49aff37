"""initgen exception hierarchy.

All exceptions inherit from InitgenError so callers can catch the base
class when they want to handle any generator failure uniformly.
"""

from __future__ import annotations

from pathlib import Path


class InitgenError(Exception):
    """Base exception for all initgen errors."""


class ConfigError(InitgenError):
    """Invalid configuration (bad Python version, malformed settings, etc.)."""


class PathError(InitgenError):
    """An error tied to a specific filesystem path."""

    def __init__(self, message: str, path: Path) -> None:
        super().__init__(message)
        self.path = path


class PathMissingError(PathError):
    """The root, or a descendant visited mid-traversal, does not exist."""


class UnsupportedEntryError(PathError):
    """The root is neither a directory nor a Python source file."""


class ParseFailedError(PathError):
    """The parser rejected a source file."""


class ReadFailedError(PathError):
    """A source file or directory listing could not be read."""


class WriteFailedError(PathError):
    """An index file could not be written."""
