"""Shared type aliases for exports inference."""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from typing import Literal

type ExportType = Literal["esm", "cjs"]

type ExportCondition = dict[str, "str | ExportCondition"]
type ExportsMap = dict[str, "str | ExportCondition"]

# ``False`` disables generation, ``True`` or an empty sequence includes
# everything, a non-empty sequence restricts to those top-level folders.
type ExportsMode = bool | Sequence[str]

type ManifestExports = (
    str | Mapping[str, "ManifestExports"] | Sequence["ManifestExports"] | None
)
type Manifest = Mapping[str, object]
