"""Shared constants for the generated docs index."""

from __future__ import annotations

from dataclasses import dataclass
from operator import attrgetter
from typing import Callable, Sequence

from ..models import DocsConfigSet, ModuleDocsConfig

GENERATED_MARKER = "<!-- generated by `gasket docs` -->"
LINKS_MARKER = "<!-- LINKS -->"
INDEX_FILENAME = "README.md"


@dataclass(frozen=True)
class Category:
    """A group of entries rendered as an optional section of the index."""

    name: str
    title: str
    include_version: bool
    entries: Callable[[DocsConfigSet], Sequence[ModuleDocsConfig]]


# Section order of the rendered index. Transforms are never rendered.
CATEGORIES: tuple[Category, ...] = (
    Category("plugins", "Plugins", True, attrgetter("plugins")),
    Category("presets", "Presets", True, attrgetter("presets")),
    Category("modules", "Modules", True, attrgetter("modules")),
    Category("commands", "Commands", False, attrgetter("commands")),
    Category("lifecycles", "Lifecycles", False, attrgetter("lifecycles")),
    Category("structures", "Structures", False, attrgetter("structures")),
)


__all__ = ["CATEGORIES", "Category", "GENERATED_MARKER", "INDEX_FILENAME", "LINKS_MARKER"]
