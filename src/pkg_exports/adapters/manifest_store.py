"""JSON-backed package manifest store."""

from __future__ import annotations

import json
import logging
from collections.abc import Mapping
from pathlib import Path

from pkg_exports.errors import ManifestError

logger = logging.getLogger(__name__)


class JsonManifestStore:
    """Read and write ``package.json`` files."""

    def __init__(self, indent: int = 2) -> None:
        self.indent = indent

    def load(self, path: Path) -> dict[str, object]:
        """Load a manifest, preserving key order.

        Raises
        ------
        ManifestError
            If the file is missing, unreadable, not JSON or not an object.
        """
        try:
            text = path.read_text(encoding="utf-8")
        except OSError as exc:
            raise ManifestError(f"Cannot read manifest {path}: {exc}") from exc
        try:
            data = json.loads(text)
        except json.JSONDecodeError as exc:
            raise ManifestError(f"Manifest {path} is not valid JSON: {exc}") from exc
        if not isinstance(data, dict):
            raise ManifestError(f"Manifest {path} must contain a JSON object.")
        return data

    def save(self, path: Path, manifest: Mapping[str, object]) -> None:
        """Write a manifest with a trailing newline.

        Raises
        ------
        ManifestError
            If the file cannot be written.
        """
        payload = json.dumps(dict(manifest), indent=self.indent, ensure_ascii=False) + "\n"
        try:
            path.write_text(payload, encoding="utf-8")
        except OSError as exc:
            raise ManifestError(f"Cannot write manifest {path}: {exc}") from exc
        logger.info("updated exports in %s", path)
