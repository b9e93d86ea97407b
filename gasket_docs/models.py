"""Core data models describing the docs of an app and its parts."""

from dataclasses import dataclass, field
from typing import List, Optional


@dataclass
class DocsConfig:
    """Docs details for a single documented entity."""

    name: str
    target_root: str
    description: Optional[str] = None
    link: Optional[str] = None


@dataclass
class ModuleDocsConfig(DocsConfig):
    """Docs details for a plugin, preset, module or other listed entry."""

    version: Optional[str] = None


@dataclass
class DocsConfigSet:
    """Everything the index generator knows about an app and its parts."""

    app: DocsConfig
    docs_root: str
    plugins: List[ModuleDocsConfig]
    presets: List[ModuleDocsConfig]
    modules: List[ModuleDocsConfig]
    structures: List[ModuleDocsConfig]
    commands: List[ModuleDocsConfig]
    lifecycles: List[ModuleDocsConfig]
    # Accepted for callers but never rendered.
    transforms: List[ModuleDocsConfig] = field(default_factory=list)
    root: Optional[str] = None
