"""Configuration management for initgen.

Settings are resolved from three sources in order of priority:
1. Explicit values (command-line options, highest priority)
2. Project-level config: the [tool.initgen] table of pyproject.toml
3. Built-in defaults (lowest priority)
"""

from __future__ import annotations

import re
import tomllib
from dataclasses import dataclass, replace
from pathlib import Path
from typing import Any

from rich.console import Console
from rich.markup import escape

from initgen.exceptions import ConfigError

console = Console(stderr=True)

DEFAULT_PYTHON_VERSION = "3.12"

_VERSION_RE = re.compile(r"^(\d+)\.(\d+)$")
_MIN_MINOR = 7


@dataclass(frozen=True)
class GeneratorConfig:
    """Generator configuration, shared unchanged across the whole traversal.

    Attributes:
        root: Directory (or single source file) the traversal starts at.
        python_version: Target (major, minor) grammar handed to the parser.
        respect_all: Honor a module's literal ``__all__`` list when present.
        sort: Emit imports and ``__all__`` entries in lexicographic order.
        verbose: Print diagnostics while generating.
        exclude: Glob patterns for entry names the walker should ignore.
    """

    root: Path
    python_version: tuple[int, int] = (3, 12)
    respect_all: bool = True
    sort: bool = True
    verbose: bool = False
    exclude: tuple[str, ...] = ()

    def with_root(self, root: Path) -> GeneratorConfig:
        """Return a copy of this config rooted at ``root``."""
        return replace(self, root=root)


def parse_python_version(text: str) -> tuple[int, int]:
    """Parse a ``MAJOR.MINOR`` version string.

    Args:
        text: Version string such as "3.12".

    Returns:
        A (major, minor) tuple suitable for ``ast.parse(feature_version=...)``.

    Raises:
        ConfigError: If the string is malformed or names an unsupported version.
    """
    match = _VERSION_RE.match(text.strip())
    if match is None:
        raise ConfigError(f"Python version {text} is not valid")
    major, minor = int(match.group(1)), int(match.group(2))
    if major != 3 or minor < _MIN_MINOR:
        raise ConfigError(f"Python version {text} is not valid")
    return major, minor


def load_config(
    root: Path,
    project_dir: Path | None = None,
    *,
    python_version: str | None = None,
    respect_all: bool | None = None,
    sort: bool | None = None,
    verbose: bool | None = None,
    exclude: list[str] | None = None,
) -> GeneratorConfig:
    """Resolve a GeneratorConfig from defaults, pyproject.toml and overrides.

    Args:
        root: Directory to generate index files for.
        project_dir: Directory holding pyproject.toml. Defaults to ``root``.
        python_version: Explicit target version string.
        respect_all: Explicit ``__all__`` handling.
        sort: Explicit sort flag.
        verbose: Explicit verbosity.
        exclude: Explicit exclusion patterns.

    Returns:
        A fully resolved GeneratorConfig.

    Raises:
        ConfigError: If a setting has the wrong type or the version is invalid.
    """
    settings = _load_pyproject((project_dir or root) / "pyproject.toml")

    # Explicit values win over pyproject settings
    explicit: dict[str, Any] = {
        "python-version": python_version,
        "respect-all": respect_all,
        "sort": sort,
        "verbose": verbose,
        "exclude": exclude,
    }
    for key, value in explicit.items():
        if value is not None:
            settings[key] = value

    version_text = settings.get("python-version", DEFAULT_PYTHON_VERSION)
    if not isinstance(version_text, str):
        raise ConfigError(
            f"python-version must be a quoted string such as '3.12', got {version_text!r}"
        )
    patterns = settings.get("exclude", [])
    if isinstance(patterns, str) or not all(isinstance(p, str) for p in patterns):
        raise ConfigError("exclude must be a list of glob patterns")

    return GeneratorConfig(
        root=root,
        python_version=parse_python_version(version_text),
        respect_all=_as_bool(settings, "respect-all", True),
        sort=_as_bool(settings, "sort", True),
        verbose=_as_bool(settings, "verbose", False),
        exclude=tuple(patterns),
    )


def _load_pyproject(path: Path) -> dict[str, Any]:
    """Return the [tool.initgen] table, or an empty dict if missing or invalid."""
    if not path.is_file():
        return {}
    try:
        data = tomllib.loads(path.read_text(encoding="utf-8"))
    except (tomllib.TOMLDecodeError, OSError, UnicodeDecodeError) as exc:
        console.print(
            f"[yellow]Warning:[/yellow] Could not parse {escape(str(path))}: {escape(str(exc))}"
        )
        return {}
    table = data.get("tool", {}).get("initgen", {})
    if not isinstance(table, dict):
        console.print(
            f"[yellow]Warning:[/yellow] Ignoring non-table \\[tool.initgen] in {escape(str(path))}"
        )
        return {}
    return dict(table)


def _as_bool(settings: dict[str, Any], key: str, default: bool) -> bool:
    value = settings.get(key, default)
    if not isinstance(value, bool):
        raise ConfigError(f"{key} must be true or false, got {value!r}")
    return value
