"""Infer which module ids a bundle should leave external."""

from __future__ import annotations

import re
from collections.abc import Iterable, Mapping

from pkg_exports.types import Manifest

type External = str | re.Pattern[str]

_DEPENDENCY_FIELDS = ("dependencies", "peerDependencies")
_TYPES_SCOPE = "@types/"


def _field_keys(manifest: Manifest, field: str) -> list[str]:
    value = manifest.get(field)
    if isinstance(value, Mapping):
        return [str(key) for key in value]
    return []


def path_to_pattern(path: str) -> External:
    """Return ``path`` as-is, or an anchored regex if it contains ``*``."""
    if "*" not in path:
        return path
    return re.compile("^" + path.replace(".", r"\.").replace("*", ".*") + "$")


def infer_pkg_externals(manifest: Manifest) -> list[External]:
    """Collect externals declared by a package manifest.

    Parameters
    ----------
    manifest : Mapping
        Parsed ``package.json``.

    Returns
    -------
    list[str | re.Pattern]
        Runtime dependencies, peer dependencies, ``@types/*`` dev
        dependencies, optional dependencies, the package itself and its
        ``./`` subpaths, then ``#`` imports. Duplicates are dropped, first
        occurrence wins.
    """
    externals: list[External] = []
    for field in _DEPENDENCY_FIELDS:
        externals.extend(_field_keys(manifest, field))
    externals.extend(
        dep for dep in _field_keys(manifest, "devDependencies") if dep.startswith(_TYPES_SCOPE)
    )
    externals.extend(_field_keys(manifest, "optionalDependencies"))

    name = manifest.get("name")
    if isinstance(name, str) and name:
        externals.append(name)
        for subpath in _field_keys(manifest, "exports"):
            if subpath.startswith("./"):
                externals.append(path_to_pattern(f"{name}/{subpath[2:]}"))

    for import_name in _field_keys(manifest, "imports"):
        if import_name.startswith("#"):
            externals.append(path_to_pattern(import_name))

    return list(dict.fromkeys(externals))


def array_includes(patterns: Iterable[External], value: str) -> bool:
    """Whether ``value`` equals a string entry or matches a regex entry."""
    return any(
        pattern.search(value) is not None
        if isinstance(pattern, re.Pattern)
        else pattern == value
        for pattern in patterns
    )
