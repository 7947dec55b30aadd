"""Shared pytest configuration, marker assignment and build fixtures."""

from __future__ import annotations

import json
from collections.abc import Callable, Iterable
from pathlib import Path

import pytest


def pytest_collection_modifyitems(
    config: pytest.Config, items: list[pytest.Item]
) -> None:
    """Attach suite markers based on test file path."""
    del config
    for item in items:
        parts = set(Path(str(item.fspath)).parts)
        if "e2e_tests" in parts:
            item.add_marker(pytest.mark.e2e)
        elif "integration_tests" in parts:
            item.add_marker(pytest.mark.integration)
        elif "unit_tests" in parts:
            item.add_marker(pytest.mark.unit)


type BuildTree = Callable[[Iterable[str]], Path]


@pytest.fixture
def build_tree(tmp_path: Path) -> BuildTree:
    """Create a package root with ``dist/`` holding the given relative files."""

    def _make(files: Iterable[str]) -> Path:
        out_dir = tmp_path / "dist"
        out_dir.mkdir(exist_ok=True)
        for name in files:
            target = out_dir / name
            target.parent.mkdir(parents=True, exist_ok=True)
            target.write_text("export {};\n", encoding="utf-8")
        return out_dir

    return _make


@pytest.fixture
def manifest_path(tmp_path: Path) -> Path:
    """Write a minimal ``package.json`` next to ``dist/``."""
    path = tmp_path / "package.json"
    path.write_text(
        json.dumps(
            {"name": "demo", "version": "1.0.0", "type": "module", "files": ["dist"]},
            indent=2,
        )
        + "\n",
        encoding="utf-8",
    )
    return path
