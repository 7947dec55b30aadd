"""Application use-cases orchestrating exports generation."""

from __future__ import annotations

import logging
from collections.abc import Mapping, Sequence
from pathlib import Path

from pydantic import ValidationError

from pkg_exports.adapters.manifest_store import JsonManifestStore
from pkg_exports.application.options import GenerationOptions
from pkg_exports.application.ports import EntrySource, ManifestStore
from pkg_exports.application.results import ExportsResult
from pkg_exports.core.generator import generate_package_exports
from pkg_exports.errors import ConfigError
from pkg_exports.schemas import ExportsGenerationConfig
from pkg_exports.types import ExportsMap

logger = logging.getLogger(__name__)


def build_generation_options(
    *,
    out_dir: str = "dist",
    mode: bool | Sequence[str] = True,
    write: bool = False,
) -> GenerationOptions:
    """Validate raw options into a ``GenerationOptions`` object.

    Raises
    ------
    ConfigError
        If the output directory or folder list is invalid.
    """
    try:
        config = ExportsGenerationConfig(
            out_dir=out_dir,
            mode=mode if isinstance(mode, bool) else list(mode),
        )
    except ValidationError as exc:
        raise ConfigError(f"Invalid exports generation options: {exc}") from exc

    resolved_mode = config.mode if isinstance(config.mode, bool) else tuple(config.mode)
    return GenerationOptions(out_dir=config.out_dir, mode=resolved_mode, write=write)


def merge_exports(
    manifest: Mapping[str, object], exports: ExportsMap | None
) -> dict[str, object]:
    """Return a copy of ``manifest`` carrying ``exports``.

    ``None`` leaves any existing ``exports`` field untouched; a mapping, even
    an empty one, replaces it.
    """
    merged = dict(manifest)
    if exports is not None:
        merged["exports"] = exports
    return merged


def generate_manifest_exports(
    *,
    source: EntrySource,
    options: GenerationOptions,
    manifest_path: Path | None = None,
    store: ManifestStore | None = None,
) -> ExportsResult:
    """Use-case: infer exports for a build and merge them into its manifest.

    Raises
    ------
    ConfigError
        If writing is requested without a manifest path.
    ManifestError
        If the manifest cannot be read or written.
    EntrySourceError
        If build entries cannot be collected.
    """
    if options.write and manifest_path is None:
        raise ConfigError("Writing exports requires a manifest path.")

    store = store or JsonManifestStore()
    manifest = store.load(manifest_path) if manifest_path is not None else {}

    entries = source.entries()
    exports = generate_package_exports(entries, options.out_dir, options.mode, manifest)
    if exports is None:
        logger.info("no exports generated from %d build entries", len(entries))

    merged = merge_exports(manifest, exports)
    written = False
    if options.write and manifest_path is not None and exports is not None:
        store.save(manifest_path, merged)
        written = True

    return ExportsResult(
        exports=exports,
        manifest=merged,
        entry_count=len(entries),
        manifest_path=manifest_path,
        written=written,
    )
