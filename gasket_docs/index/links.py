"""Reference-style link helpers for the docs index."""

from __future__ import annotations

import os
from typing import List, Tuple

from ..models import DocsConfig
from .constants import LINKS_MARKER

_EXTERNAL_PREFIXES = ("http://", "https://", "mailto:")


def resolve_link(link: str, *, target_root: str, docs_root: str) -> str:
    """Return ``link`` as a target relative to ``docs_root``.

    ``link`` is resolved against ``target_root``; an absolute ``link`` is used
    as the target directly. Any ``#anchor`` is kept as-is and only the path
    portion is relativized. URLs are returned unchanged.
    """
    if link.startswith(_EXTERNAL_PREFIXES):
        return link
    path, hash_sign, anchor = link.partition("#")
    target = os.path.join(target_root, path)
    relative = os.path.relpath(target, docs_root).replace(os.sep, "/")
    return f"{relative}{hash_sign}{anchor}"


class ReferenceLinks:
    """Collects link definitions in the order entries are rendered."""

    def __init__(self, docs_root: str) -> None:
        # Links resolve against docs_root, never the working directory.
        self.docs_root = os.fspath(docs_root)
        if not self.docs_root:
            raise ValueError("docs_root is required to resolve links")
        self._definitions: List[Tuple[str, str]] = []

    def label(self, entry: DocsConfig) -> str:
        """Return the display label for ``entry``, recording its link if it has one."""
        if not entry.link:
            return entry.name
        target = resolve_link(entry.link, target_root=entry.target_root, docs_root=self.docs_root)
        self._definitions.append((entry.name, target))
        return f"[{entry.name}]"

    def render(self) -> List[str]:
        """Return the marker and definition lines, or nothing when no entry linked."""
        if not self._definitions:
            return []
        lines = [LINKS_MARKER]
        lines.extend(f"[{name}]: {target}" for name, target in self._definitions)
        return lines


__all__ = ["ReferenceLinks", "resolve_link"]
