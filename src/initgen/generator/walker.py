"""Recursive generation of ``__init__.py`` files for a package tree."""

from __future__ import annotations

from pathlib import Path

from rich.console import Console
from rich.markup import escape

from initgen.config import GeneratorConfig
from initgen.exceptions import PathMissingError, UnsupportedEntryError
from initgen.generator.parser import exposed_names, parse_module
from initgen.generator.render import write_init
from initgen.generator.scanner import DirectoryScanner
from initgen.generator.statements import FromModule, ImportModule, Statement

console = Console(stderr=True)

INIT_FILE = "__init__.py"
_SOURCE_SUFFIX = ".py"


class InitGenerator:
    """Walks a directory tree and writes a re-exporting index per package.

    Every directory with at least one exposable descendant receives an
    ``__init__.py`` that imports each submodule and re-exports the names
    that submodule exposes. Children are always written before parents.

    Usage::

        generator = InitGenerator(GeneratorConfig(root=Path("src/mypkg")))
        generator.generate()
        print(generator.written)
    """

    def __init__(self, config: GeneratorConfig) -> None:
        """Initialize the generator.

        Args:
            config: Configuration whose ``root`` is where the walk starts.
        """
        self.config = config
        self.written: list[Path] = []
        self._scanner = DirectoryScanner(config.exclude)

    def generate(self) -> list[Statement]:
        """Generate index files below ``config.root``.

        Returns:
            The statements the root exposes to a would-be parent package.

        Raises:
            InitgenError: On the first missing path, unsupported root,
                read, parse or write failure. Files already written stay.
        """
        self.written = []
        return self._visit(self.config)

    def _visit(self, config: GeneratorConfig) -> list[Statement]:
        root = config.root
        if not root.exists():
            raise PathMissingError(f"Path {root} does not exist", root)

        if root.is_dir():
            return self._visit_package(config)
        if root.is_file() and root.suffix == _SOURCE_SUFFIX:
            return self._visit_module(config)
        raise UnsupportedEntryError(
            f"Path {root} is not a directory or Python source file", root
        )

    def _visit_module(self, config: GeneratorConfig) -> list[Statement]:
        tree = parse_module(config.root, config.python_version)
        names = exposed_names(tree, config.respect_all)
        if config.verbose:
            console.print(
                f"[dim]Parsed[/dim] {escape(str(config.root))} "
                f"([bold]{len(names)}[/bold] exposed)"
            )
        return [ImportModule(name) for name in names]

    def _visit_package(self, config: GeneratorConfig) -> list[Statement]:
        result: list[Statement] = []

        for entry in self._scanner.scan(config.root):
            if not entry.is_dir and entry.path.suffix != _SOURCE_SUFFIX:
                continue
            # Index files are emitted, never read back as modules
            if entry.name == INIT_FILE:
                continue

            stem = entry.name if entry.is_dir else entry.path.stem
            child = self._visit(config.with_root(entry.path))

            if entry.is_dir and not child:
                if config.verbose:
                    console.print(f"[dim]Skipping empty[/dim] {escape(str(entry.path))}")
                continue

            result.append(ImportModule(stem))
            for statement in child:
                attr = statement.name if isinstance(statement, ImportModule) else statement.attr
                result.append(FromModule(stem, attr))

        if result:
            destination = config.root / INIT_FILE
            write_init(result, config.sort, destination)
            self.written.append(destination)
            if config.verbose:
                console.print(f"[green]Wrote[/green] {escape(str(destination))}")

        return result
