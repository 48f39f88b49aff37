"""Rendering of generated ``__init__.py`` files."""

from __future__ import annotations

from collections.abc import Iterable
from pathlib import Path

from initgen.exceptions import WriteFailedError
from initgen.generator.statements import FromModule, ImportModule, Statement


def render_init(statements: Iterable[Statement], sort: bool) -> str:
    """Render the text of an index file.

    The file holds one ``from . import m`` line per submodule, a
    parenthesized ``from .m import (...)`` group per re-exporting
    submodule, and an ``__all__`` list naming everything imported.

    Args:
        statements: Aggregated statements for one directory.
        sort: Emit lines in lexicographic order instead of discovery order.

    Returns:
        The file contents, ending with a newline.
    """
    statements = list(statements)
    imports = [s.name for s in statements if isinstance(s, ImportModule)]
    from_imports = [(s.module, s.attr) for s in statements if isinstance(s, FromModule)]

    if sort:
        imports.sort()
        from_imports.sort()

    groups: dict[str, list[str]] = {}
    for module, attr in from_imports:
        groups.setdefault(module, []).append(attr)

    lines: list[str] = []
    public: list[str] = []

    for module in imports:
        lines.append(f"from . import {module}")
        public.append(module)
    lines.append("")

    modules = sorted(groups) if sort else list(groups)
    for module in modules:
        lines.append(f"from .{module} import (")
        for attr in groups[module]:
            lines.append(f"    {attr},")
            public.append(attr)
        lines.append(")")

    lines.append("")
    lines.append("__all__ = [")
    # dict keeps first-occurrence order
    for name in dict.fromkeys(public):
        lines.append(f'    "{name}",')
    lines.append("]")

    return "\n".join(lines) + "\n"


def write_init(statements: Iterable[Statement], sort: bool, destination: Path) -> None:
    """Render an index file and write it to ``destination``, replacing it.

    Raises:
        WriteFailedError: If the file cannot be written.
    """
    contents = render_init(statements, sort)
    try:
        destination.write_text(contents, encoding="utf-8")
    except OSError as exc:
        raise WriteFailedError(f"Cannot write {destination}: {exc}", destination) from exc
