"""Application ports for clean architecture boundaries."""

from __future__ import annotations

from collections.abc import Mapping
from pathlib import Path
from typing import Protocol

from pkg_exports.core.generator import BuildEntry


class EntrySource(Protocol):
    """Supply the build outputs of a finished build."""

    def entries(self) -> list[BuildEntry]:
        """Return build entries relative to the output directory."""


class ManifestStore(Protocol):
    """Read and persist package manifests."""

    def load(self, path: Path) -> dict[str, object]:
        """Load manifest from path."""

    def save(self, path: Path, manifest: Mapping[str, object]) -> None:
        """Persist manifest to path."""
