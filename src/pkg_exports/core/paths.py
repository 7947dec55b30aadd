"""Path helpers for build output names and module ids."""

from __future__ import annotations

import re

_EXTENSION_RE = re.compile(r"\.(?:js|mjs|cjs|ts|mts|cts|json|jsx|tsx)$")
_DECLARATION_MARKER = ".d"


def remove_extension(filename: str) -> str:
    """Strip one trailing script/declaration/json extension.

    Examples
    --------
    >>> remove_extension("plugins/vite.mjs")
    'plugins/vite'
    >>> remove_extension("index.d.mts")
    'index.d'
    >>> remove_extension("styles.css")
    'styles.css'
    """
    return _EXTENSION_RE.sub("", filename)


def entry_name(path: str) -> str:
    """Return the logical entry name of a build output path.

    Declaration files collapse onto the module they describe, so
    ``index.d.mts`` and ``index.mjs`` both yield ``index``.
    """
    name = remove_extension(path)
    if name.endswith(_DECLARATION_MARKER):
        name = name[: -len(_DECLARATION_MARKER)]
    return name


def with_trailing_slash(path: str) -> str:
    """Append ``/`` unless the path already ends with one."""
    return path if path.endswith("/") else f"{path}/"


def getpkg(module_id: str = "") -> str:
    """Return the package name of a bare module id.

    Scoped ids keep their scope: ``@scope/name/sub`` -> ``@scope/name``.
    """
    parts = module_id.split("/")
    if parts[0].startswith("@") and len(parts) > 1:
        return f"{parts[0]}/{parts[1]}"
    return parts[0]
