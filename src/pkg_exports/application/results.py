"""Application-layer result objects."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from pathlib import Path

from pkg_exports.types import ExportsMap


@dataclass(frozen=True)
class ExportsResult:
    """Structured exports generation outcome."""

    exports: ExportsMap | None
    manifest: Mapping[str, object]
    entry_count: int
    manifest_path: Path | None = None
    written: bool = False
