#!/usr/bin/env python3
"""Architecture boundary checks."""

from __future__ import annotations

from pathlib import Path

ROOT = Path(__file__).resolve().parents[1]
PACKAGE = ROOT / "src/pkg_exports"


def _read(path: Path) -> str:
    return path.read_text(encoding="utf-8")


def _assert_no_imports(path: Path, banned: list[str]) -> None:
    text = _read(path)
    for token in banned:
        if token in text:
            raise SystemExit(f"Architecture violation in {path}: found '{token}'")


def main() -> None:
    """Run repository architecture boundary checks."""
    # The inference core stays pure: no I/O, no framework imports.
    for path in (PACKAGE / "core").glob("*.py"):
        _assert_no_imports(
            path,
            [
                "import typer",
                "from typer",
                "import pydantic",
                "from pydantic",
                "import json",
                "import os",
                "from pathlib",
                "pkg_exports.adapters",
                "pkg_exports.application",
            ],
        )

    for path in (PACKAGE / "application").glob("*.py"):
        _assert_no_imports(path, ["import typer", "from typer"])

    print("Architecture checks passed.")


if __name__ == "__main__":
    main()
