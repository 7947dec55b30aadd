"""Module-format inference for package export conditions."""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from dataclasses import dataclass

from pkg_exports.types import ExportType, ManifestExports

_ESM_SUFFIXES = (".d.ts", ".mjs")
_CJS_SUFFIXES = (".cjs",)
_CONDITION_TYPES: dict[str, ExportType] = {
    "import": "esm",
    "require": "cjs",
}


@dataclass(frozen=True)
class OutputDescriptor:
    """File referenced by a manifest export and its inferred module format."""

    file: str
    type: ExportType


def infer_export_type(
    condition: str,
    previous_conditions: Sequence[str] = (),
    filename: str = "",
) -> ExportType:
    """Infer whether an export target is ESM or CommonJS.

    Parameters
    ----------
    condition : str
        Condition name the target sits under (``import``, ``require``,
        ``node``, ...).
    previous_conditions : Sequence[str], default=()
        Enclosing condition names, consulted in order when ``condition``
        itself is not recognised.
    filename : str, default=""
        Target filename. A known suffix decides before any condition.

    Returns
    -------
    {"esm", "cjs"}
        Inferred module format. Unresolvable chains default to ``"esm"``.
    """
    if filename:
        if filename.endswith(_ESM_SUFFIXES):
            return "esm"
        if filename.endswith(_CJS_SUFFIXES):
            return "cjs"

    remaining = list(previous_conditions)
    while True:
        inferred = _CONDITION_TYPES.get(condition)
        if inferred is not None:
            return inferred
        if not remaining:
            # No signal left; the package "type" field is not consulted.
            return "esm"
        condition = remaining.pop(0)


def extract_export_filenames(
    exports: ManifestExports,
    conditions: Sequence[str] = (),
) -> list[OutputDescriptor]:
    """Flatten a manifest ``exports`` declaration into typed file references.

    Parameters
    ----------
    exports : str | Mapping | Sequence | None
        Value of a package manifest ``exports`` field, or a nested part of it.
    conditions : Sequence[str], default=()
        Condition chain leading to ``exports``.

    Returns
    -------
    list[OutputDescriptor]
        One descriptor per string target, in declaration order. Subpaths
        ending in ``.json`` (e.g. ``./package.json``) are skipped.
    """
    if not exports:
        return []
    if isinstance(exports, str):
        return [OutputDescriptor(file=exports, type="esm")]
    if isinstance(exports, Mapping):
        items = [(str(key), value) for key, value in exports.items()]
    elif isinstance(exports, Sequence):
        # Fallback arrays: each element sits under its index.
        items = [(str(index), value) for index, value in enumerate(exports)]
    else:
        return []

    descriptors: list[OutputDescriptor] = []
    for key, value in items:
        if key.endswith(".json"):
            continue
        if isinstance(value, str):
            descriptors.append(
                OutputDescriptor(
                    file=value,
                    type=infer_export_type(key, conditions, value),
                )
            )
        else:
            descriptors.extend(extract_export_filenames(value, [*conditions, key]))
    return descriptors
