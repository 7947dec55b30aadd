"""Top-level API for package exports inference."""

from __future__ import annotations

from collections.abc import Sequence
from pathlib import Path

from pkg_exports.application.results import ExportsResult
from pkg_exports.core import (
    BuildEntry,
    OutputDescriptor,
    extract_export_filenames,
    generate_package_exports,
    infer_export_type,
    infer_pkg_externals,
)

__version__ = "0.1.0"


def generate_exports_for_directory(
    out_dir_path: Path,
    manifest_path: Path | None = None,
    *,
    mode: bool | Sequence[str] = True,
    out_dir_name: str | None = None,
    entries_path: Path | None = None,
    chunk_patterns: Sequence[str] | None = None,
    write: bool = False,
) -> ExportsResult:
    """Infer exports for a build output directory.

    Parameters
    ----------
    out_dir_path : Path
        Directory holding the build outputs.
    manifest_path : Path | None, default=None
        ``package.json`` to merge into. Required when ``write`` is set.
    mode : bool | Sequence[str], default=True
        ``False`` disables generation; a non-empty sequence restricts exports
        to those top-level folders.
    out_dir_name : str | None, default=None
        Prefix used in emitted paths. Defaults to ``out_dir_path`` relative
        to the manifest directory.
    entries_path : Path | None, default=None
        JSON list of ``{"path", "chunk"}`` entries used instead of walking
        ``out_dir_path``.
    chunk_patterns : Sequence[str] | None, default=None
        Globs marking shared chunks during the walk. Defaults to
        ``DEFAULT_CHUNK_PATTERNS``.
    write : bool, default=False
        Whether to persist the merged manifest.

    Returns
    -------
    ExportsResult
        Generated exports and the merged manifest.
    """
    from .adapters.entry_sources import DEFAULT_CHUNK_PATTERNS
    from .api import generate_exports_for_directory as _impl

    return _impl(
        out_dir_path,
        manifest_path,
        mode=mode,
        out_dir_name=out_dir_name,
        entries_path=entries_path,
        chunk_patterns=DEFAULT_CHUNK_PATTERNS if chunk_patterns is None else chunk_patterns,
        write=write,
    )


__all__ = [
    "BuildEntry",
    "ExportsResult",
    "OutputDescriptor",
    "extract_export_filenames",
    "generate_exports_for_directory",
    "generate_package_exports",
    "infer_export_type",
    "infer_pkg_externals",
]
