"""Pure exports-map and module-format inference."""

from __future__ import annotations

from pkg_exports.core.externals import array_includes, infer_pkg_externals
from pkg_exports.core.generator import (
    BuildEntry,
    ExportGroup,
    FileKind,
    GroupKind,
    generate_package_exports,
)
from pkg_exports.core.inference import (
    OutputDescriptor,
    extract_export_filenames,
    infer_export_type,
)
from pkg_exports.core.paths import getpkg, remove_extension, with_trailing_slash

__all__ = [
    "BuildEntry",
    "ExportGroup",
    "FileKind",
    "GroupKind",
    "OutputDescriptor",
    "array_includes",
    "extract_export_filenames",
    "generate_package_exports",
    "getpkg",
    "infer_export_type",
    "infer_pkg_externals",
    "remove_extension",
    "with_trailing_slash",
]
