"""Public file-based API (delegates to application use-cases)."""

from __future__ import annotations

from pathlib import Path
from typing import Optional, Sequence, Union

from pkg_exports.adapters.entry_sources import (
    DEFAULT_CHUNK_PATTERNS,
    DirectoryEntrySource,
    JsonEntrySource,
)
from pkg_exports.application.results import ExportsResult
from pkg_exports.application.use_cases import build_generation_options
from pkg_exports.application.use_cases import generate_manifest_exports
from pkg_exports.errors import ConfigError


def resolve_out_dir_name(out_dir_path: Path, manifest_path: Optional[Path] = None) -> str:
    """Name ``out_dir_path`` as it should appear in manifest export paths.

    Relative to the manifest's directory when inside it, otherwise the bare
    directory name.

    Raises
    ------
    ConfigError
        If ``out_dir_path`` is the manifest's own directory.
    """
    if manifest_path is not None:
        try:
            relative = out_dir_path.resolve().relative_to(manifest_path.resolve().parent)
        except ValueError:
            pass
        else:
            if not relative.parts:
                raise ConfigError(
                    f"Output directory {out_dir_path} is the package root; "
                    "build outputs must live in a subdirectory."
                )
            return relative.as_posix()
    return out_dir_path.resolve().name


def generate_exports_for_directory(
    out_dir_path: Path,
    manifest_path: Optional[Path] = None,
    *,
    mode: Union[bool, Sequence[str]] = True,
    out_dir_name: Optional[str] = None,
    entries_path: Optional[Path] = None,
    chunk_patterns: Sequence[str] = DEFAULT_CHUNK_PATTERNS,
    write: bool = False,
) -> ExportsResult:
    """Infer exports for a build output directory.

    Build entries come from ``entries_path`` when given, otherwise from
    walking ``out_dir_path``.
    """
    options = build_generation_options(
        out_dir=out_dir_name or resolve_out_dir_name(out_dir_path, manifest_path),
        mode=mode,
        write=write,
    )
    if entries_path is not None:
        source = JsonEntrySource(entries_path)
    else:
        source = DirectoryEntrySource(out_dir_path, chunk_patterns=chunk_patterns)
    return generate_manifest_exports(
        source=source,
        options=options,
        manifest_path=manifest_path,
    )
