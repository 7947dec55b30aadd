"""Exports-map inference from build output entries."""

from __future__ import annotations

import enum
import logging
from collections.abc import Callable, Iterable, Mapping
from dataclasses import dataclass

from pkg_exports.core.paths import entry_name, remove_extension
from pkg_exports.types import ExportCondition, ExportsMap, ExportsMode, Manifest

logger = logging.getLogger(__name__)

ROOT_KEY = "."
_DECLARATION_INFIX = ".d."


@dataclass(frozen=True)
class BuildEntry:
    """Build output reported by the bundler.

    Parameters
    ----------
    path : str
        Output path relative to the output directory, e.g. ``plugins/vite.mjs``.
    chunk : bool, default=False
        Whether the file is a shared chunk rather than an entry point.
    """

    path: str
    chunk: bool = False


type EntryLike = BuildEntry | Mapping[str, object]


class FileKind(enum.Enum):
    """Suffix classes that take part in export conditions."""

    DTS = ".d.ts"
    DMTS = ".d.mts"
    DCTS = ".d.cts"
    MJS = ".mjs"
    CJS = ".cjs"

    @property
    def suffix(self) -> str:
        return self.value

    @property
    def is_declaration(self) -> bool:
        return self in DECLARATION_KINDS


DECLARATION_KINDS = frozenset({FileKind.DTS, FileKind.DMTS, FileKind.DCTS})

# First present wins.
TOP_LEVEL_TYPES_PRIORITY = (FileKind.DTS, FileKind.DMTS, FileKind.DCTS)
IMPORT_TYPES_PRIORITY = (FileKind.DMTS, FileKind.DTS)
REQUIRE_TYPES_PRIORITY = (FileKind.DCTS, FileKind.DTS)


def classify_file(path: str) -> FileKind | None:
    """Return the suffix class of ``path``, or ``None`` if it has none."""
    for kind in FileKind:
        if path.endswith(kind.suffix):
            return kind
    return None


type FilesByKind = dict[FileKind, list[str]]
type PathRenderer = Callable[[FileKind], str]


def group_files_by_kind(files: Iterable[str]) -> FilesByKind:
    """Bucket files by suffix class, keeping order; unclassified files drop out."""
    by_kind: FilesByKind = {}
    for path in files:
        kind = classify_file(path)
        if kind is not None:
            by_kind.setdefault(kind, []).append(path)
    return by_kind


def _first_present(
    by_kind: FilesByKind, priority: Iterable[FileKind]
) -> FileKind | None:
    for kind in priority:
        if kind in by_kind:
            return kind
    return None


def _module_condition(
    by_kind: FilesByKind,
    module_kind: FileKind,
    types_priority: Iterable[FileKind],
    render: PathRenderer,
) -> ExportCondition:
    condition: ExportCondition = {}
    types_kind = _first_present(by_kind, types_priority)
    if types_kind is not None:
        condition["types"] = render(types_kind)
    condition["default"] = render(module_kind)
    return condition


def build_conditions(by_kind: FilesByKind, render: PathRenderer) -> ExportCondition:
    """Build the conditional export object for one group of files.

    Parameters
    ----------
    by_kind : FilesByKind
        Group members bucketed by suffix class.
    render : Callable[[FileKind], str]
        Produces the emitted path for a suffix class (a literal file or a
        wildcard pattern).

    Returns
    -------
    ExportCondition
        Possibly empty mapping with ``types``, ``import`` and ``require`` keys.
    """
    conditions: ExportCondition = {}

    types_kind = _first_present(by_kind, TOP_LEVEL_TYPES_PRIORITY)
    if types_kind is not None:
        conditions["types"] = render(types_kind)

    has_esm = FileKind.MJS in by_kind
    has_cjs = FileKind.CJS in by_kind
    if has_esm:
        conditions["import"] = _module_condition(
            by_kind, FileKind.MJS, IMPORT_TYPES_PRIORITY, render
        )
    if has_cjs:
        conditions["require"] = _module_condition(
            by_kind, FileKind.CJS, REQUIRE_TYPES_PRIORITY, render
        )

    if types_kind is not None and not has_esm and not has_cjs:
        if FileKind.DMTS in by_kind:
            conditions["import"] = {"types": render(FileKind.DMTS)}
        if FileKind.DCTS in by_kind:
            conditions["require"] = {"types": render(FileKind.DCTS)}
        if (
            FileKind.DTS in by_kind
            and "import" not in conditions
            and "require" not in conditions
        ):
            conditions["types"] = render(FileKind.DTS)

    return conditions


def literal_conditions(files: list[str], out_dir: str) -> str | ExportCondition:
    """Build conditions addressing concrete files.

    A lone non-declaration file without declarations collapses to a bare
    ``./<out_dir>/<file>`` string.
    """
    by_kind = group_files_by_kind(files)
    has_declarations = any(kind.is_declaration for kind in by_kind)
    if len(files) == 1 and not has_declarations and _DECLARATION_INFIX not in files[0]:
        return f"./{out_dir}/{files[0]}"

    return build_conditions(by_kind, lambda kind: f"./{out_dir}/{by_kind[kind][0]}")


def wildcard_conditions(files: list[str], out_dir: str, folder: str) -> ExportCondition:
    """Build conditions addressing a whole folder by ``*`` patterns."""
    by_kind = group_files_by_kind(files)
    return build_conditions(by_kind, lambda kind: f"./{out_dir}/{folder}/*{kind.suffix}")


class GroupKind(enum.Enum):
    """How an export group is keyed and addressed."""

    ROOT = "root"
    FOLDER = "folder"
    SINGLE = "single"


@dataclass(frozen=True)
class ExportGroup:
    """Build outputs sharing one export key.

    Parameters
    ----------
    key : str
        ``"."`` for root-level outputs, otherwise ``"./<first segment>"``.
    files : tuple[str, ...]
        Original output paths, in discovery order.
    """

    key: str
    files: tuple[str, ...]

    @property
    def kind(self) -> GroupKind:
        if self.key == ROOT_KEY:
            return GroupKind.ROOT
        if any("/" in path for path in self.files):
            return GroupKind.FOLDER
        return GroupKind.SINGLE

    @property
    def folder(self) -> str:
        return self.key[2:]

    @property
    def export_key(self) -> str:
        if self.kind is GroupKind.FOLDER:
            return f"{self.key}/*"
        return self.key

    def selected_files(self) -> list[str]:
        """Members that contribute to the group's conditions."""
        if self.kind is GroupKind.ROOT:
            return [
                path
                for path in self.files
                if remove_extension(path) == "index" or "/" not in path
            ]
        return list(self.files)

    def conditions(self, out_dir: str) -> str | ExportCondition:
        """Export value for this group; empty when nothing is addressable."""
        files = self.selected_files()
        if not files:
            return {}
        if self.kind is GroupKind.FOLDER:
            return wildcard_conditions(files, out_dir, self.folder)
        return literal_conditions(files, out_dir)


def _entry_fields(entry: EntryLike) -> tuple[str, bool]:
    if isinstance(entry, BuildEntry):
        return entry.path, entry.chunk
    return str(entry.get("path") or ""), bool(entry.get("chunk", False))


def _folder_filter(mode: ExportsMode) -> frozenset[str] | None:
    if mode is True:
        return None
    if isinstance(mode, str):
        return frozenset({mode})
    folders = frozenset(mode)
    return folders or None


def group_entries(
    entries: Iterable[EntryLike],
    folders: frozenset[str] | None = None,
) -> list[ExportGroup]:
    """Group eligible build entries by export key.

    Parameters
    ----------
    entries : Iterable[BuildEntry | Mapping]
        Build outputs, as dataclasses or ``{"path", "chunk"}`` mappings.
    folders : frozenset[str] | None, default=None
        When given, only entries whose first path segment is listed are kept.

    Returns
    -------
    list[ExportGroup]
        Groups in order of first appearance.
    """
    grouped: dict[str, list[str]] = {}
    for entry in entries:
        path, chunk = _entry_fields(entry)
        if not path:
            continue
        if chunk and _DECLARATION_INFIX not in path:
            logger.debug("skipping chunk %s", path)
            continue

        parts = entry_name(path).split("/")
        key = ROOT_KEY if len(parts) == 1 else f"./{parts[0]}"
        if folders is not None and parts[0] not in folders:
            continue
        grouped.setdefault(key, []).append(path)

    return [ExportGroup(key=key, files=tuple(files)) for key, files in grouped.items()]


def generate_package_exports(
    entries: Iterable[EntryLike],
    out_dir: str,
    mode: ExportsMode = False,
    manifest: Manifest | None = None,
) -> ExportsMap | None:
    """Infer a package ``exports`` map from build outputs.

    Parameters
    ----------
    entries : Iterable[BuildEntry | Mapping]
        Build outputs relative to ``out_dir``.
    out_dir : str
        Output directory name, used verbatim as the path prefix.
    mode : bool | Sequence[str], default=False
        ``False`` disables generation. ``True`` or an empty sequence exports
        every group; a non-empty sequence exports only those top-level folders.
    manifest : Mapping, optional
        Current package manifest. Read-only; accepted so callers can pass
        their manifest through unchanged.

    Returns
    -------
    dict | None
        Exports map, or ``None`` when disabled or when nothing was exported.
        ``None`` means "leave the manifest's exports alone".
    """
    del manifest
    if mode is False:
        return None

    exports: ExportsMap = {}
    for group in group_entries(entries, _folder_filter(mode)):
        value = group.conditions(out_dir)
        if not value:
            logger.debug("group %s produced no export conditions", group.key)
            continue
        exports[group.export_key] = value

    return exports or None
