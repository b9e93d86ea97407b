"""Loading of docs config sets from YAML or JSON files."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any, Dict, List, Mapping, Optional

import yaml

from .models import DocsConfig, DocsConfigSet, ModuleDocsConfig


class ConfigError(RuntimeError):
    """Raised when a docs config set is missing required structure."""


# Categories that must be present; transforms are optional.
_REQUIRED_CATEGORIES: tuple[str, ...] = (
    "plugins",
    "presets",
    "modules",
    "structures",
    "commands",
    "lifecycles",
)

_ALIASES: Dict[str, str] = {
    "docs_root": "docsRoot",
    "target_root": "targetRoot",
}


def load_config_set(config_path: Path) -> DocsConfigSet:
    """Load a docs config set from a YAML or JSON file.

    Relative paths inside the file resolve against the file's directory.
    """
    config_file = config_path.expanduser().resolve()
    data = _read_config(config_file)
    return build_config_set(data, base_dir=config_file.parent)


def build_config_set(data: Any, *, base_dir: Optional[Path] = None) -> DocsConfigSet:
    """Build a :class:`DocsConfigSet` from a plain mapping."""
    if not isinstance(data, Mapping):
        raise ConfigError("Docs config set must be a mapping at the root")

    app_data = data.get("app")
    if app_data is None:
        raise ConfigError("Docs config set is missing 'app'")
    docs_root = _as_str(_lookup(data, "docs_root"))
    if not docs_root:
        raise ConfigError("Docs config set is missing 'docs_root'")

    categories: Dict[str, List[ModuleDocsConfig]] = {}
    for name in _REQUIRED_CATEGORIES:
        if name not in data:
            raise ConfigError(f"Docs config set is missing '{name}'")
        categories[name] = _build_entries(name, data[name], base_dir)
    categories["transforms"] = _build_entries("transforms", data.get("transforms") or [], base_dir)

    root = _as_str(data.get("root"))
    return DocsConfigSet(
        app=_build_app(app_data, base_dir),
        docs_root=_resolve(docs_root, base_dir),
        root=_resolve(root, base_dir) if root else None,
        **categories,
    )


def _read_config(path: Path) -> Any:
    text = path.read_text(encoding="utf-8")
    if not text.strip():
        raise ConfigError(f"{path.name} is empty")

    if path.suffix.lower() == ".json":
        try:
            return json.loads(text)
        except json.JSONDecodeError as exc:
            raise ConfigError(f"Failed to parse {path.name}: {exc}") from exc

    try:
        return yaml.safe_load(text)
    except yaml.YAMLError as exc:
        raise ConfigError(f"Failed to parse {path.name}: {exc}") from exc


def _build_app(data: Any, base_dir: Optional[Path]) -> DocsConfig:
    fields = _entry_fields("app", data, base_dir)
    return DocsConfig(**fields)


def _build_entries(category: str, value: Any, base_dir: Optional[Path]) -> List[ModuleDocsConfig]:
    if not isinstance(value, list):
        raise ConfigError(f"'{category}' must be a list")
    entries: List[ModuleDocsConfig] = []
    for index, item in enumerate(value):
        fields = _entry_fields(f"{category}[{index}]", item, base_dir)
        fields["version"] = _as_str(item.get("version"))
        entries.append(ModuleDocsConfig(**fields))
    return entries


def _entry_fields(label: str, data: Any, base_dir: Optional[Path]) -> Dict[str, Any]:
    if not isinstance(data, Mapping):
        raise ConfigError(f"'{label}' must be a mapping")
    name = _as_str(data.get("name"))
    if not name:
        raise ConfigError(f"'{label}' is missing 'name'")
    target_root = _as_str(_lookup(data, "target_root"))
    if not target_root:
        raise ConfigError(f"'{label}' is missing 'target_root'")
    if isinstance(data.get("link"), bool):
        raise ConfigError(f"'{label}' has a non-path 'link'")
    return {
        "name": name,
        "target_root": _resolve(target_root, base_dir),
        "description": _as_str(data.get("description")),
        "link": _as_str(data.get("link")),
    }


def _lookup(data: Mapping[str, Any], key: str) -> Any:
    if key in data:
        return data[key]
    return data.get(_ALIASES.get(key, key))


def _resolve(value: str, base_dir: Optional[Path]) -> str:
    path = Path(value).expanduser()
    if base_dir is not None and not path.is_absolute():
        path = base_dir / path
    return str(path)


def _as_str(value: Any) -> Optional[str]:
    # bool is an int subclass.
    if isinstance(value, bool):
        return None
    return str(value) if isinstance(value, (str, int, float)) else None


__all__ = ["ConfigError", "build_config_set", "load_config_set"]
