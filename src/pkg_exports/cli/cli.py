#!/usr/bin/env python3
"""
pkg_exports.cli.cli

Typer-based CLI for inferring ``package.json`` exports from build outputs.

Examples
--------
Print the exports map for a build directory:

    pkg-exports generate dist --manifest package.json

Only export the ``plugins`` folder and write the manifest in place:

    pkg-exports generate dist -m package.json --folder plugins --write
"""

from __future__ import annotations

import json
import logging
import re
import sys
import traceback
from pathlib import Path

import typer

from pkg_exports.errors import ExportsError

app = typer.Typer(
    name="pkg-exports",
    help="Infer package.json exports maps from build outputs.",
    no_args_is_help=True,
)

MANIFEST_HELP = "Path to package.json."
LOG_FORMAT = "%(levelname)s %(name)s: %(message)s"


def _print_error(exc: Exception, debug: bool) -> int:
    """Print a user-friendly error.

    Parameters
    ----------
    exc : Exception
        Exception raised by the command.
    debug : bool
        Whether to include traceback details.

    Returns
    -------
    int
        Process exit code.
    """
    typer.echo(f"[red]✗ {type(exc).__name__}:[/red] {exc}", err=True)
    if debug:
        typer.echo("\n[dim]Traceback:[/dim]", err=True)
        typer.echo("".join(traceback.format_exception(type(exc), exc, exc.__traceback__)), err=True)
    code = getattr(exc, "exit_code", None)
    if isinstance(code, int) and code > 0:
        return code
    return 1


def _resolve_mode(folders: list[str] | None, disabled: bool) -> bool | list[str]:
    """Map CLI flags onto a generation mode."""
    if disabled:
        if folders:
            raise typer.BadParameter("--disabled cannot be combined with --folder.")
        return False
    if folders:
        return folders
    return True


def _format_external(external: str | re.Pattern[str]) -> str:
    if isinstance(external, re.Pattern):
        return f"/{external.pattern}/"
    return external


def _debug(ctx: typer.Context) -> bool:
    return bool((ctx.obj or {}).get("debug", False))


# -----------------------------
# Global options
# -----------------------------
@app.callback()
def _main(
    ctx: typer.Context,
    debug: bool = typer.Option(False, "--debug", help="Show debug logs and full tracebacks."),
) -> None:
    """Initialize shared CLI state.

    Parameters
    ----------
    ctx : typer.Context
        Typer context object used to store shared state.
    debug : bool, default=False
        Whether to enable debug logging and error output.
    """
    logging.basicConfig(
        level=logging.DEBUG if debug else logging.WARNING,
        format=LOG_FORMAT,
    )
    ctx.obj = {"debug": debug}


# -----------------------------
# Commands
# -----------------------------
@app.command("generate")
def generate_cmd(
    ctx: typer.Context,
    out_dir: Path = typer.Argument(
        ...,
        exists=True,
        file_okay=False,
        help="Build output directory.",
    ),
    manifest: Path | None = typer.Option(
        None, "--manifest", "-m", exists=True, dir_okay=False, help=MANIFEST_HELP
    ),
    entries: Path | None = typer.Option(
        None,
        "--entries",
        exists=True,
        dir_okay=False,
        help="JSON list of {path, chunk} build entries; skips walking OUT_DIR.",
    ),
    folder: list[str] | None = typer.Option(
        None, "--folder", help="Only export this top-level folder (repeatable)."
    ),
    disabled: bool = typer.Option(
        False, "--disabled", help="Disable generation; the manifest is left untouched."
    ),
    out_dir_name: str | None = typer.Option(
        None,
        "--out-dir-name",
        help="Prefix for emitted paths. Defaults to OUT_DIR relative to the manifest.",
    ),
    chunk_pattern: list[str] | None = typer.Option(
        None,
        "--chunk-pattern",
        help="Glob (relative to OUT_DIR) marking shared chunks (repeatable).",
    ),
    write: bool = typer.Option(
        False, "--write", help="Write the merged exports back into the manifest."
    ),
) -> None:
    """Infer the exports map for OUT_DIR and print it as JSON.

    Notes
    -----
    - Nothing is printed to stdout when no exports are generated.
    - ``--write`` requires ``--manifest``.
    """
    debug = _debug(ctx)
    mode = _resolve_mode(folder, disabled)
    if write and manifest is None:
        raise typer.BadParameter("--write requires --manifest.")

    try:
        from pkg_exports.adapters.entry_sources import DEFAULT_CHUNK_PATTERNS
        from pkg_exports.api import generate_exports_for_directory

        result = generate_exports_for_directory(
            out_dir,
            manifest,
            mode=mode,
            out_dir_name=out_dir_name,
            entries_path=entries,
            chunk_patterns=chunk_pattern or DEFAULT_CHUNK_PATTERNS,
            write=write,
        )
    except ExportsError as exc:
        raise typer.Exit(code=_print_error(exc, debug))
    except Exception as exc:
        raise typer.Exit(code=_print_error(exc, debug))

    if result.exports is None:
        typer.echo("[yellow]No exports generated.[/yellow]", err=True)
        return
    typer.echo(json.dumps(result.exports, indent=2))
    if result.written:
        typer.echo(f"[green]✓ Updated:[/green] {result.manifest_path}", err=True)


@app.command("infer-type")
def infer_type_cmd(
    condition: str = typer.Argument(..., help="Condition name, e.g. import or node."),
    previous: list[str] | None = typer.Option(
        None, "--previous", help="Enclosing condition name (repeatable, outermost first)."
    ),
    filename: str = typer.Option("", "--filename", help="Target filename."),
) -> None:
    """Print the inferred module format (esm or cjs)."""
    from pkg_exports.core.inference import infer_export_type

    typer.echo(infer_export_type(condition, previous or [], filename))


@app.command("list-exports")
def list_exports_cmd(
    ctx: typer.Context,
    manifest: Path = typer.Argument(..., exists=True, dir_okay=False, help=MANIFEST_HELP),
) -> None:
    """List files declared by a manifest's exports with their module format."""
    debug = _debug(ctx)
    try:
        from pkg_exports.adapters.manifest_store import JsonManifestStore
        from pkg_exports.core.inference import extract_export_filenames

        data = JsonManifestStore().load(manifest)
    except ExportsError as exc:
        raise typer.Exit(code=_print_error(exc, debug))

    for descriptor in extract_export_filenames(data.get("exports")):
        typer.echo(f"{descriptor.type}\t{descriptor.file}")


@app.command("externals")
def externals_cmd(
    ctx: typer.Context,
    manifest: Path = typer.Argument(..., exists=True, dir_okay=False, help=MANIFEST_HELP),
) -> None:
    """List module ids a bundle of this package should keep external."""
    debug = _debug(ctx)
    try:
        from pkg_exports.adapters.manifest_store import JsonManifestStore
        from pkg_exports.core.externals import infer_pkg_externals

        data = JsonManifestStore().load(manifest)
    except ExportsError as exc:
        raise typer.Exit(code=_print_error(exc, debug))

    for external in infer_pkg_externals(data):
        typer.echo(_format_external(external))


@app.command("doctor")
def doctor_cmd() -> None:
    """Print installed toolchain versions."""
    import importlib.metadata as metadata

    typer.echo(f"Python: {sys.version.split()[0]}")
    for module in ["pkg-exports", "pydantic", "typer"]:
        try:
            version = metadata.version(module)
            typer.echo(f"{module}: {version}")
        except metadata.PackageNotFoundError:
            typer.echo(f"{module}: <not installed>")


if __name__ == "__main__":
    app()
