"""Application-layer use-cases and option objects."""

from __future__ import annotations

from collections.abc import Sequence
from pathlib import Path

from pkg_exports.application.options import GenerationOptions
from pkg_exports.application.ports import EntrySource, ManifestStore
from pkg_exports.application.results import ExportsResult


def build_generation_options(
    *,
    out_dir: str = "dist",
    mode: bool | Sequence[str] = True,
    write: bool = False,
) -> GenerationOptions:
    """Build typed generation options via lazy use-case import."""
    from pkg_exports.application.use_cases import build_generation_options as _impl

    return _impl(out_dir=out_dir, mode=mode, write=write)


def generate_manifest_exports(
    *,
    source: EntrySource,
    options: GenerationOptions,
    manifest_path: Path | None = None,
    store: ManifestStore | None = None,
) -> ExportsResult:
    """Generate and merge manifest exports via lazy use-case import."""
    from pkg_exports.application.use_cases import generate_manifest_exports as _impl

    return _impl(
        source=source,
        options=options,
        manifest_path=manifest_path,
        store=store,
    )


__all__ = [
    "EntrySource",
    "ExportsResult",
    "GenerationOptions",
    "ManifestStore",
    "build_generation_options",
    "generate_manifest_exports",
]
