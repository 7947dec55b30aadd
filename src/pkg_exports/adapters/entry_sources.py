"""Build entry sources backed by the filesystem."""

from __future__ import annotations

import json
import logging
import os
from collections.abc import Sequence
from fnmatch import fnmatchcase
from pathlib import Path

from pydantic import TypeAdapter, ValidationError

from pkg_exports.core.generator import BuildEntry
from pkg_exports.errors import EntrySourceError
from pkg_exports.schemas import BuildEntryModel

logger = logging.getLogger(__name__)

# Rollup-style shared chunk locations.
DEFAULT_CHUNK_PATTERNS = ("shared/*", "chunks/*", "chunk-*", "*/chunk-*", "*.chunk.*")
DEFAULT_IGNORE_PATTERNS = ("*.map",)

_ENTRY_LIST = TypeAdapter(list[BuildEntryModel])


def list_recursively(path: Path) -> list[str]:
    """List every file and directory below ``path``.

    Parameters
    ----------
    path : Path
        Directory to walk.

    Returns
    -------
    list[str]
        Absolute paths, sorted per directory. Directories carry a trailing
        ``/`` and precede their contents.
    """
    found: list[str] = []

    def walk(directory: Path) -> None:
        with os.scandir(directory) as it:
            children = sorted(it, key=lambda item: item.name)
        for child in children:
            full_path = Path(child.path)
            if child.is_dir():
                found.append(f"{full_path}/")
                walk(full_path)
            else:
                found.append(str(full_path))

    walk(path.resolve())
    return found


def _matches(relative_path: str, patterns: Sequence[str]) -> bool:
    return any(fnmatchcase(relative_path, pattern) for pattern in patterns)


class DirectoryEntrySource:
    """Collect build entries by walking an output directory."""

    def __init__(
        self,
        root: Path,
        chunk_patterns: Sequence[str] = DEFAULT_CHUNK_PATTERNS,
        ignore_patterns: Sequence[str] = DEFAULT_IGNORE_PATTERNS,
    ) -> None:
        self.root = root
        self.chunk_patterns = tuple(chunk_patterns)
        self.ignore_patterns = tuple(ignore_patterns)

    def entries(self) -> list[BuildEntry]:
        """Return build entries relative to the output directory.

        Raises
        ------
        EntrySourceError
            If the output directory does not exist or cannot be read.
        """
        if not self.root.is_dir():
            raise EntrySourceError(f"Output directory not found: {self.root}")

        root = self.root.resolve()
        try:
            listing = list_recursively(root)
        except OSError as exc:
            raise EntrySourceError(f"Cannot list output directory {root}: {exc}") from exc

        entries: list[BuildEntry] = []
        for item in listing:
            if item.endswith("/"):
                continue
            relative = Path(item).relative_to(root).as_posix()
            if _matches(relative, self.ignore_patterns):
                logger.debug("ignoring %s", relative)
                continue
            entries.append(
                BuildEntry(path=relative, chunk=_matches(relative, self.chunk_patterns))
            )
        logger.debug("collected %d build entries from %s", len(entries), root)
        return entries


class JsonEntrySource:
    """Read build entries from a JSON array of ``{"path", "chunk"}`` objects."""

    def __init__(self, path: Path) -> None:
        self.path = path

    def entries(self) -> list[BuildEntry]:
        """Return validated build entries.

        Raises
        ------
        EntrySourceError
            If the file cannot be read, parsed or validated.
        """
        try:
            raw = json.loads(self.path.read_text(encoding="utf-8"))
        except OSError as exc:
            raise EntrySourceError(f"Cannot read entry list {self.path}: {exc}") from exc
        except json.JSONDecodeError as exc:
            raise EntrySourceError(f"Entry list {self.path} is not valid JSON: {exc}") from exc

        try:
            models = _ENTRY_LIST.validate_python(raw)
        except ValidationError as exc:
            raise EntrySourceError(f"Invalid entry list {self.path}: {exc}") from exc
        return [model.to_entry() for model in models]
