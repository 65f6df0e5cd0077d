"""Shared pytest configuration and fixtures for all tests."""

from pathlib import Path

import pytest


def pytest_configure(config):
    config.addinivalue_line("markers", "unit: fast tests of single modules")
    config.addinivalue_line("markers", "integration: end-to-end CLI tests")


def pytest_collection_modifyitems(config, items):
    """Automatically apply markers based on test file location."""
    for item in items:
        path_str = str(item.fspath)
        if "/unit/" in path_str:
            item.add_marker(pytest.mark.unit)
        elif "/integration/" in path_str:
            item.add_marker(pytest.mark.integration)


# =============================================================================
# Helpers
# =============================================================================


def run_cmd(cmd_func, *args, **kwargs):
    """Execute a cmd function and return the result with progress_callback executed."""
    result = cmd_func(*args, **kwargs)
    list(result.progress_callback(result))
    return result


def write_tree(root: Path, files: dict[str, str]) -> Path:
    """Create ``files`` (relative path -> content) under ``root`` and return root."""
    for rel, content in files.items():
        path = root / rel
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(content, encoding="utf-8")
    return root


@pytest.fixture(autouse=True)
def _isolate_config_env(monkeypatch):
    """Keep a developer's DOCLINKS_CONFIG out of the tests."""
    monkeypatch.delenv("DOCLINKS_CONFIG", raising=False)


@pytest.fixture
def project(tmp_path):
    """Project root with a small, fully valid docs tree."""
    return write_tree(
        tmp_path,
        {
            "docs/index.md": "# Home\n\n[Guide](/guide/) and [Setup](./setup)\n",
            "docs/setup.md": "[Home](./index) [Top](#top) [Site](https://example.com)\n",
            "docs/guide/index.md": "[Back](../index) [Install](install.md)\n",
            "docs/guide/install.md": "![logo](../logo.png)\n",
            "docs/logo.png": "png",
        },
    )
