"""Import statements aggregated while walking a package tree."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class ImportModule:
    """Expose a submodule: ``from . import name``.

    Attributes:
        name: Submodule (or, from a leaf file, attribute) name.
    """

    name: str


@dataclass(frozen=True, slots=True)
class FromModule:
    """Expose an attribute of a submodule: ``from .module import attr``.

    Attributes:
        module: Submodule the attribute is re-exported from.
        attr: Re-exported attribute name.
    """

    module: str
    attr: str


Statement = ImportModule | FromModule
