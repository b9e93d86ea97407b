"""Writes the generated docs index to disk."""

from __future__ import annotations

from pathlib import Path

from ..logging import get_logger
from ..models import DocsConfigSet
from .constants import INDEX_FILENAME
from .content import generate_content

logger = get_logger("index")


def generate_index(config_set: DocsConfigSet) -> Path:
    """Write the index for ``config_set`` to ``<docs_root>/README.md``.

    Any existing file is overwritten. Write errors propagate to the caller.
    """
    target = Path(config_set.docs_root) / INDEX_FILENAME
    content = generate_content(config_set)
    logger.info("Writing docs index to %s", target)
    target.write_text(content, encoding="utf-8")
    logger.debug("Docs index holds %d characters", len(content))
    return target


__all__ = ["generate_index"]
