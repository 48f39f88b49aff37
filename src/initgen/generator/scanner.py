"""Depth-one directory walker used by the generator."""

from __future__ import annotations

import fnmatch
import os
from collections.abc import Iterator
from dataclasses import dataclass
from pathlib import Path

from initgen.exceptions import PathMissingError, ReadFailedError


@dataclass(frozen=True, slots=True)
class Entry:
    """A single child of a scanned directory.

    Attributes:
        path: Full path to the entry.
        is_dir: True for directories, False for regular files.
    """

    path: Path
    is_dir: bool

    @property
    def name(self) -> str:
        return self.path.name


class DirectoryScanner:
    """Lists the immediate children of a directory in discovery order.

    Usage::

        scanner = DirectoryScanner(exclude=("tests",))
        for entry in scanner.scan(Path("/my/pkg")):
            ...
    """

    def __init__(self, exclude: tuple[str, ...] = ()) -> None:
        """Initialize the scanner.

        Args:
            exclude: Glob patterns matched against entry names to skip.
        """
        self._exclude = exclude

    def scan(self, directory: Path) -> Iterator[Entry]:
        """Yield the files and directories directly under ``directory``.

        Symlinked directories are not reported, so recursion never loops.
        Anything that is neither a regular file nor a directory is dropped.

        Raises:
            PathMissingError: If the directory vanished.
            ReadFailedError: If the directory cannot be listed.
        """
        try:
            with os.scandir(directory) as it:
                entries = list(it)
        except FileNotFoundError as exc:
            raise PathMissingError(f"Path {directory} does not exist", directory) from exc
        except OSError as exc:
            raise ReadFailedError(f"Cannot list {directory}: {exc}", directory) from exc

        for entry in entries:
            if self._is_excluded(entry.name):
                continue
            try:
                if entry.is_dir(follow_symlinks=False):
                    yield Entry(path=Path(entry.path), is_dir=True)
                elif entry.is_file():
                    yield Entry(path=Path(entry.path), is_dir=False)
            except OSError:
                continue

    def _is_excluded(self, name: str) -> bool:
        return any(fnmatch.fnmatch(name, pattern) for pattern in self._exclude)
