"""Shared test fixtures."""

from __future__ import annotations

from collections.abc import Callable
from pathlib import Path

import pytest

from initgen.config import GeneratorConfig


@pytest.fixture
def make_tree(tmp_path: Path) -> Callable[[dict[str, str]], Path]:
    """Return a helper that writes {relative_path: source} under tmp_path/pkg.

    A path ending in "/" creates an empty directory.
    """

    def _make(files: dict[str, str]) -> Path:
        root = tmp_path / "pkg"
        root.mkdir(exist_ok=True)
        for rel, source in files.items():
            target = root / rel
            if rel.endswith("/"):
                target.mkdir(parents=True, exist_ok=True)
                continue
            target.parent.mkdir(parents=True, exist_ok=True)
            target.write_text(source, encoding="utf-8")
        return root

    return _make


@pytest.fixture
def unsorted_config(tmp_path: Path) -> GeneratorConfig:
    """Config that keeps discovery order."""
    return GeneratorConfig(root=tmp_path / "pkg", sort=False)
