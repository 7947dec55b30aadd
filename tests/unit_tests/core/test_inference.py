"""Unit tests for export-type inference and manifest export extraction."""

from __future__ import annotations

import pytest

from pkg_exports.core.inference import (
    OutputDescriptor,
    extract_export_filenames,
    infer_export_type,
)


@pytest.mark.parametrize(
    ("condition", "expected"),
    [
        ("import", "esm"),
        ("require", "cjs"),
        ("node", "esm"),
        ("some_unknown_condition", "esm"),
        ("", "esm"),
    ],
)
def test_infers_by_condition(condition: str, expected: str) -> None:
    """Recognised conditions decide directly; unknown ones default to esm."""
    assert infer_export_type(condition) == expected


@pytest.mark.parametrize(
    ("condition", "previous", "expected"),
    [
        ("import", ["require"], "esm"),
        ("require", ["import"], "cjs"),
        ("node", ["require"], "cjs"),
        ("node", ["import"], "esm"),
        ("node", ["unknown", "require"], "cjs"),
        ("node", ["unknown", "other"], "esm"),
    ],
)
def test_infers_from_enclosing_conditions(
    condition: str, previous: list[str], expected: str
) -> None:
    """Unknown conditions walk the enclosing chain until one resolves."""
    assert infer_export_type(condition, previous) == expected


@pytest.mark.parametrize(
    ("condition", "filename", "expected"),
    [
        ("require", "x.mjs", "esm"),
        ("require", "types/x.d.ts", "esm"),
        ("import", "x.cjs", "cjs"),
        ("node", "x.js", "esm"),
        ("require", "x.js", "cjs"),
    ],
)
def test_filename_suffix_dominates_condition(
    condition: str, filename: str, expected: str
) -> None:
    """Known filename suffixes win over condition names."""
    assert infer_export_type(condition, [], filename) == expected


def test_does_not_mutate_previous_conditions() -> None:
    """The caller's chain is read-only."""
    chain = ["unknown", "require"]
    infer_export_type("node", chain)
    assert chain == ["unknown", "require"]


def test_extract_handles_missing_exports() -> None:
    assert extract_export_filenames(None) == []


def test_extract_handles_strings() -> None:
    """A bare string export is treated as ESM."""
    assert extract_export_filenames("test") == [OutputDescriptor(file="test", type="esm")]


def test_extract_handles_nested_objects() -> None:
    """Nested conditions inherit their enclosing chain."""
    assert extract_export_filenames({"require": "test"}) == [
        OutputDescriptor(file="test", type="cjs")
    ]
    assert extract_export_filenames(
        {"require": {"node": "test", "other": {"import": "this", "require": "that"}}}
    ) == [
        OutputDescriptor(file="test", type="cjs"),
        OutputDescriptor(file="this", type="esm"),
        OutputDescriptor(file="that", type="cjs"),
    ]


def test_extract_skips_json_subpaths_and_uses_suffixes() -> None:
    """Manifest subpaths are ignored and file suffixes override conditions."""
    exports = {
        ".": {
            "types": "./dist/index.d.ts",
            "import": "./dist/index.mjs",
            "require": "./dist/index.cjs",
        },
        "./package.json": "./package.json",
        "./cli": {"default": "./dist/cli.cjs"},
    }
    assert extract_export_filenames(exports) == [
        OutputDescriptor(file="./dist/index.d.ts", type="esm"),
        OutputDescriptor(file="./dist/index.mjs", type="esm"),
        OutputDescriptor(file="./dist/index.cjs", type="cjs"),
        OutputDescriptor(file="./dist/cli.cjs", type="cjs"),
    ]


def test_extract_walks_fallback_arrays() -> None:
    """Array elements resolve through the condition that holds the array."""
    assert extract_export_filenames({".": {"require": ["./a.cjs", "./b.js"]}}) == [
        OutputDescriptor(file="./a.cjs", type="cjs"),
        OutputDescriptor(file="./b.js", type="cjs"),
    ]


def test_extract_walks_nested_objects_inside_arrays() -> None:
    assert extract_export_filenames(
        {"./feature": [{"import": "./f.js", "require": "./f.js"}, "./f.cjs"]}
    ) == [
        OutputDescriptor(file="./f.js", type="esm"),
        OutputDescriptor(file="./f.js", type="cjs"),
        OutputDescriptor(file="./f.cjs", type="cjs"),
    ]


def test_extract_top_level_array_defaults_to_esm() -> None:
    assert extract_export_filenames(["./index.js", "./index.cjs"]) == [
        OutputDescriptor(file="./index.js", type="esm"),
        OutputDescriptor(file="./index.cjs", type="cjs"),
    ]
