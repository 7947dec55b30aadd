"""Unit tests for application use-case contracts."""

from __future__ import annotations

from collections.abc import Mapping
from pathlib import Path

import pytest

from pkg_exports.application.options import GenerationOptions
from pkg_exports.application.use_cases import (
    build_generation_options,
    generate_manifest_exports,
    merge_exports,
)
from pkg_exports.core.generator import BuildEntry
from pkg_exports.errors import ConfigError


class _Source:
    def __init__(self, entries: list[BuildEntry]) -> None:
        self._entries = entries
        self.calls = 0

    def entries(self) -> list[BuildEntry]:
        self.calls += 1
        return list(self._entries)


class _Store:
    def __init__(self, manifest: dict[str, object]) -> None:
        self.manifest = manifest
        self.saved: list[tuple[Path, dict[str, object]]] = []

    def load(self, path: Path) -> dict[str, object]:
        del path
        return dict(self.manifest)

    def save(self, path: Path, manifest: Mapping[str, object]) -> None:
        self.saved.append((path, dict(manifest)))


def test_build_options_normalizes_values() -> None:
    options = build_generation_options(out_dir="./dist/", mode=[" plugins "], write=True)
    assert options == GenerationOptions(out_dir="dist", mode=("plugins",), write=True)


@pytest.mark.parametrize(
    ("out_dir", "mode"),
    [
        ("", True),
        ("/abs/dist", True),
        ("../dist", True),
        ("dist", ["plugins", " "]),
        ("dist", ["plugins/vite"]),
    ],
)
def test_build_options_rejects_invalid_values(out_dir: str, mode: bool | list[str]) -> None:
    with pytest.raises(ConfigError, match="Invalid exports generation options"):
        build_generation_options(out_dir=out_dir, mode=mode)


def test_merge_exports_none_leaves_manifest_untouched() -> None:
    manifest = {"name": "demo", "exports": {".": "./old.mjs"}}
    assert merge_exports(manifest, None) == manifest


def test_merge_exports_empty_mapping_clears_exports() -> None:
    manifest = {"name": "demo", "exports": {".": "./old.mjs"}}
    merged = merge_exports(manifest, {})
    assert merged == {"name": "demo", "exports": {}}
    assert manifest["exports"] == {".": "./old.mjs"}


def test_use_case_generates_and_writes(tmp_path: Path) -> None:
    """Verify the use-case reads, generates, merges and persists."""
    manifest_path = tmp_path / "package.json"
    source = _Source([BuildEntry("index.mjs"), BuildEntry("index.d.ts")])
    store = _Store({"name": "demo"})

    result = generate_manifest_exports(
        source=source,
        options=GenerationOptions(out_dir="dist", mode=True, write=True),
        manifest_path=manifest_path,
        store=store,
    )

    expected = {
        ".": {
            "types": "./dist/index.d.ts",
            "import": {"types": "./dist/index.d.ts", "default": "./dist/index.mjs"},
        }
    }
    assert source.calls == 1
    assert result.exports == expected
    assert result.entry_count == 2
    assert result.written is True
    assert store.saved == [(manifest_path, {"name": "demo", "exports": expected})]


def test_use_case_does_not_write_when_disabled(tmp_path: Path) -> None:
    """A disabled run keeps the existing exports field and the file intact."""
    store = _Store({"name": "demo", "exports": "./index.js"})
    result = generate_manifest_exports(
        source=_Source([BuildEntry("index.mjs")]),
        options=GenerationOptions(out_dir="dist", mode=False, write=True),
        manifest_path=tmp_path / "package.json",
        store=store,
    )
    assert result.exports is None
    assert result.manifest == {"name": "demo", "exports": "./index.js"}
    assert result.written is False
    assert store.saved == []


def test_use_case_without_manifest() -> None:
    result = generate_manifest_exports(
        source=_Source([BuildEntry("index.mjs")]),
        options=GenerationOptions(out_dir="dist"),
    )
    assert result.manifest == {"exports": {".": "./dist/index.mjs"}}
    assert result.manifest_path is None


def test_use_case_write_requires_manifest_path() -> None:
    with pytest.raises(ConfigError, match="manifest path"):
        generate_manifest_exports(
            source=_Source([]),
            options=GenerationOptions(write=True),
        )
