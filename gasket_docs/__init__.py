"""Markdown index generation for gasket app docs."""

from .index import generate_content, generate_index
from .models import DocsConfig, DocsConfigSet, ModuleDocsConfig

__all__ = [
    "DocsConfig",
    "DocsConfigSet",
    "ModuleDocsConfig",
    "generate_content",
    "generate_index",
]
