"""Docs index content and writer."""

from .constants import CATEGORIES, GENERATED_MARKER, INDEX_FILENAME, LINKS_MARKER
from .content import generate_content
from .links import ReferenceLinks, resolve_link
from .writer import generate_index

__all__ = [
    "CATEGORIES",
    "GENERATED_MARKER",
    "INDEX_FILENAME",
    "LINKS_MARKER",
    "ReferenceLinks",
    "generate_content",
    "generate_index",
    "resolve_link",
]
