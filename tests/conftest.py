from __future__ import annotations

import pytest

from gasket_docs.models import DocsConfig, DocsConfigSet, ModuleDocsConfig

DOCS_ROOT = "/path/to/app/.docs"
PLUGIN_ROOT = "/path/to/app/.docs/test-app/plugins/example-plugin"


def _app() -> DocsConfig:
    return DocsConfig(
        name="test-app",
        description="Some test app",
        link="README.md#overview",
        target_root="/path/to/app/.docs/test-app",
    )


@pytest.fixture
def empty_config_set() -> DocsConfigSet:
    """A config set for an app without any plugins or other entries."""
    return DocsConfigSet(
        app=_app(),
        plugins=[],
        presets=[],
        modules=[],
        structures=[],
        commands=[],
        lifecycles=[],
        root="/path/to/app",
        docs_root=DOCS_ROOT,
    )


@pytest.fixture
def full_config_set() -> DocsConfigSet:
    """A config set with one linked entry per category and an unlinked structure."""
    return DocsConfigSet(
        app=_app(),
        plugins=[
            ModuleDocsConfig(
                name="example-plugin",
                link="README.md",
                version="1.2.0",
                target_root=PLUGIN_ROOT,
            )
        ],
        presets=[
            ModuleDocsConfig(
                name="example-preset",
                link="README.md",
                target_root="/path/to/app/.docs/test-app/presets/example-preset",
            )
        ],
        modules=[
            ModuleDocsConfig(
                name="example-module",
                description="Example module",
                link="README.md",
                target_root="/path/to/app/.docs/test-app/modules/example-module",
            )
        ],
        structures=[
            ModuleDocsConfig(
                name="example-structure",
                link="README.md#structures",
                target_root=PLUGIN_ROOT,
            ),
            ModuleDocsConfig(name="example-structure-no-link", target_root=PLUGIN_ROOT),
        ],
        commands=[
            ModuleDocsConfig(
                name="example-command",
                link="README.md#commands",
                target_root=PLUGIN_ROOT,
            )
        ],
        lifecycles=[
            ModuleDocsConfig(
                name="example-lifecycle",
                link="README.md#lifecycles",
                target_root=PLUGIN_ROOT,
            )
        ],
        root="/path/to/app",
        docs_root=DOCS_ROOT,
    )
