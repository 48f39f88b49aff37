"""Index generator: directory walking, AST inspection and rendering."""

from __future__ import annotations

from initgen.generator.parser import exposed_names, parse_module
from initgen.generator.render import render_init, write_init
from initgen.generator.scanner import DirectoryScanner, Entry
from initgen.generator.statements import FromModule, ImportModule, Statement
from initgen.generator.walker import InitGenerator

__all__ = [
    "DirectoryScanner",
    "Entry",
    "FromModule",
    "ImportModule",
    "InitGenerator",
    "Statement",
    "exposed_names",
    "parse_module",
    "render_init",
    "write_init",
]
