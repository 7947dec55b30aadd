"""Unit tests for pydantic input schemas."""

from __future__ import annotations

import pytest
from pydantic import ValidationError

from pkg_exports.core.generator import BuildEntry
from pkg_exports.schemas import BuildEntryModel, ExportsGenerationConfig


def test_build_entry_model_normalizes_separators() -> None:
    model = BuildEntryModel(path=".\\plugins\\vite.mjs", chunk=True)
    assert model.to_entry() == BuildEntry("plugins/vite.mjs", chunk=True)


def test_build_entry_model_forbids_extra_fields() -> None:
    with pytest.raises(ValidationError):
        BuildEntryModel(path="index.mjs", size=10)


@pytest.mark.parametrize(
    ("mode", "expected"),
    [(True, True), (False, False), ([], []), (["plugins"], ["plugins"])],
)
def test_generation_config_modes(mode: bool | list[str], expected: bool | list[str]) -> None:
    assert ExportsGenerationConfig(out_dir="dist", mode=mode).mode == expected


def test_generation_config_defaults_to_disabled() -> None:
    assert ExportsGenerationConfig(out_dir="lib").mode is False


@pytest.mark.parametrize("out_dir", ["", ".", "./", "/dist", "a/../b"])
def test_generation_config_rejects_out_dir(out_dir: str) -> None:
    with pytest.raises(ValidationError):
        ExportsGenerationConfig(out_dir=out_dir)


def test_generation_config_keeps_nested_out_dir() -> None:
    assert ExportsGenerationConfig(out_dir="build/dist/").out_dir == "build/dist"
