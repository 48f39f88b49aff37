"""AST-based discovery of the public names a Python module exposes."""

from __future__ import annotations

import ast
from pathlib import Path

from initgen.exceptions import ParseFailedError, ReadFailedError

_ALL = "__all__"


def parse_module(file_path: Path, python_version: tuple[int, int]) -> ast.AST:
    """Read and parse a Python source file.

    Args:
        file_path: Path to a ``.py`` file.
        python_version: Target (major, minor) grammar version.

    Returns:
        The parsed syntax tree.

    Raises:
        ReadFailedError: If the file cannot be read or decoded.
        ParseFailedError: If the source is not valid for the target version.
    """
    try:
        source = file_path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as exc:
        raise ReadFailedError(f"Failed to read file {file_path}: {exc}", file_path) from exc

    try:
        return ast.parse(source, filename=str(file_path), feature_version=python_version)
    except (SyntaxError, ValueError) as exc:
        raise ParseFailedError(f"Failed to parse {file_path}: {exc}", file_path) from exc


def exposed_names(tree: ast.AST, respect_all: bool) -> list[str]:
    """Return the names a module exposes, in source order.

    Top-level functions, classes and assignment targets (bare names and
    the names inside tuple targets) are candidates. If ``respect_all`` is
    set and the module assigns a literal list to ``__all__``, only the
    string entries of that list are kept; otherwise names starting with
    an underscore are dropped.

    Args:
        tree: A parsed syntax tree.
        respect_all: Honor a literal ``__all__`` list when present.

    Returns:
        Exposed names in discovery order; duplicates are preserved.
    """
    if not isinstance(tree, ast.Module):
        return []

    declared = _declared_all(tree.body) if respect_all else None

    def keep(name: str) -> bool:
        if declared is None:
            return not name.startswith("_")
        return name in declared

    return [name for name in _candidate_names(tree.body) if keep(name)]


def _declared_all(body: list[ast.stmt]) -> set[str] | None:
    """Find the first ``__all__ = [...]`` assignment and collect its strings."""
    for stmt in body:
        if not isinstance(stmt, ast.Assign) or len(stmt.targets) != 1:
            continue
        target = stmt.targets[0]
        if not isinstance(target, ast.Name) or target.id != _ALL:
            continue
        if not isinstance(stmt.value, ast.List):
            return None
        return {
            elt.value
            for elt in stmt.value.elts
            if isinstance(elt, ast.Constant) and isinstance(elt.value, str)
        }
    return None


def _candidate_names(body: list[ast.stmt]) -> list[str]:
    names: list[str] = []
    for stmt in body:
        if isinstance(stmt, (ast.FunctionDef, ast.AsyncFunctionDef, ast.ClassDef)):
            names.append(stmt.name)
        elif isinstance(stmt, ast.Assign) and stmt.targets:
            target = stmt.targets[0]
            if isinstance(target, ast.Name):
                names.append(target.id)
            elif isinstance(target, ast.Tuple):
                # Starred and attribute elements are not bare names
                names.extend(elt.id for elt in target.elts if isinstance(elt, ast.Name))
    return names
