"""Generate exports for a typical dual ESM/CJS build in three modes.

Run from anywhere:

    python examples/export_generation_example.py
"""

from __future__ import annotations

import json

from pkg_exports import BuildEntry, generate_package_exports

BUILD = [
    BuildEntry("index.mjs"),
    BuildEntry("index.cjs"),
    BuildEntry("index.d.mts"),
    BuildEntry("index.d.cts"),
    BuildEntry("plugins/vite.mjs"),
    BuildEntry("plugins/vite.cjs"),
    BuildEntry("plugins/vite.d.mts"),
    BuildEntry("plugins/webpack.mjs"),
    BuildEntry("plugins/webpack.cjs"),
    BuildEntry("plugins/webpack.d.mts"),
    BuildEntry("utils/helper.mjs"),
    BuildEntry("utils/helper.cjs"),
    BuildEntry("shared/helper.Dk3a.mjs", chunk=True),
]


def main() -> None:
    """Print the exports map for each generation mode."""
    for label, mode in [("all", True), ("selective", ["plugins"]), ("disabled", False)]:
        exports = generate_package_exports(BUILD, "dist", mode)
        print(f"# {label}")
        print(json.dumps(exports, indent=2) if exports is not None else "(exports left untouched)")


if __name__ == "__main__":
    main()
