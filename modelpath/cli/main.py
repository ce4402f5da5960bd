# modelpath/cli/main.py
from __future__ import annotations

from pathlib import Path
from typing import Optional

import typer

from modelpath import __version__
from modelpath.cli.resolve import cmd_blob, cmd_manifest, cmd_parse
from modelpath.cli.store import app as store_app
from modelpath.constants.cli_constants import DebugMode
from modelpath.core.config import set_store_root
from modelpath.logging import set_global_level

app = typer.Typer(
    name="modelpath",
    add_completion=False,
    help="Resolve model identifiers to canonical names and local model store paths.",
)


def version_callback(value: bool) -> None:
    """Show version and exit."""
    if value:
        typer.echo(f"modelpath version {__version__}")
        raise typer.Exit()


@app.callback()
def main(
    version: bool = typer.Option(
        None,
        "--version",
        "-v",
        callback=version_callback,
        is_eager=True,
        help="Show version and exit.",
    ),
    store_root: Optional[Path] = typer.Option(
        None,
        "--store-root",
        help="Model store root for this invocation (default: $OLLAMA_MODELS or ~/.ollama/models).",
    ),
    log_level: Optional[DebugMode] = typer.Option(None, "--log-level", help="Logging level."),
) -> None:
    """modelpath CLI main callback."""
    if log_level is not None:
        set_global_level(log_level.value)
    if store_root is not None:
        set_store_root(store_root)


app.command("parse")(cmd_parse)
app.command("manifest")(cmd_manifest)
app.command("blob")(cmd_blob)

app.add_typer(
    store_app,
    name="store",
    help="Inspect the local model store (path, ls, stats).",
)

if __name__ == "__main__":
    app()
