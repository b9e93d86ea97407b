"""Markdown content for the generated docs index."""

from __future__ import annotations

from typing import List, Optional, Sequence

from ..models import DocsConfig, DocsConfigSet, ModuleDocsConfig
from .constants import CATEGORIES, GENERATED_MARKER, Category
from .links import ReferenceLinks


def generate_content(config_set: DocsConfigSet) -> str:
    """Render the index document for ``config_set``.

    The result holds the generated marker, the app section, one table per
    non-empty category and a trailing reference-link block when any entry
    declares a link. No I/O happens here.
    """
    app = config_set.app
    references = ReferenceLinks(config_set.docs_root)

    lines: List[str] = [GENERATED_MARKER, ""]
    lines.extend(_app_section(app, references))
    for category in CATEGORIES:
        entries = category.entries(config_set)
        if len(entries) == 0:
            continue
        lines.extend(_category_section(category, entries, references))

    link_lines = references.render()
    if link_lines:
        lines.extend(link_lines)
        lines.append("")

    return "\n".join(lines)


def _app_section(app: DocsConfig, references: ReferenceLinks) -> List[str]:
    lines = ["# App", "", f"**{references.label(app)}**", ""]
    if app.description:
        lines.extend([app.description.strip(), ""])
    return lines


def _category_section(
    category: Category,
    entries: Sequence[ModuleDocsConfig],
    references: ReferenceLinks,
) -> List[str]:
    headers = ["Name", "Description"]
    if category.include_version:
        headers.append("Version")

    lines = [f"## {category.title}", ""]
    lines.append(_row(headers))
    lines.append(_row(["-" * len(header) for header in headers]))
    for entry in entries:
        cells = [references.label(entry), _text(entry.description)]
        if category.include_version:
            cells.append(_text(entry.version))
        lines.append(_row([_cell(value) for value in cells]))
    lines.append("")
    return lines


def _row(cells: Sequence[str]) -> str:
    return "| " + " | ".join(cells) + " |"


def _cell(value: str) -> str:
    # A raw pipe or line break would split the row.
    collapsed = " ".join(value.split())
    return collapsed.replace("|", "\\|")


def _text(value: Optional[object]) -> str:
    return "" if value is None else str(value)


__all__ = ["generate_content"]
