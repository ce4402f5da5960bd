"""modelpath/cli/resolve.py

Commands that parse identifiers and print store locations.
"""

from __future__ import annotations

import json

import typer

from modelpath.core.model_address import parse_model_address
from modelpath.core.path_resolver import PathResolver
from modelpath.errors import ModelPathError


def _fail(exc: Exception) -> None:
    typer.echo(f"Error: {exc}", err=True)
    raise typer.Exit(code=1)


def cmd_parse(
    name: str = typer.Argument(..., help="Model identifier, e.g. 'llama3:8b' or 'example.com/ns/repo:v1'."),
    json_out: bool = typer.Option(False, "--json", help="Output JSON instead of a table."),
) -> None:
    """Parse and validate a model identifier, then show its canonical forms."""
    addr = parse_model_address(name)
    try:
        addr.validate()
    except ModelPathError as exc:
        _fail(exc)

    fields = {
        "scheme": addr.scheme,
        "registry": addr.registry,
        "namespace": addr.namespace,
        "repository": addr.repository,
        "tag": addr.tag,
        "short_name": addr.short_name(),
        "full_name": addr.full_name(),
    }
    if json_out:
        typer.echo(json.dumps(fields, ensure_ascii=False, indent=2))
        return

    from modelpath.cli.store import _console, _table

    Table, box = _table()
    con = _console()
    if con and Table and box:
        table = Table(title=None, box=box.SIMPLE_HEAVY, show_header=False)
        table.add_column("Field", style="bold")
        table.add_column("Value", overflow="fold")
        for key, value in fields.items():
            table.add_row(key, value)
        con.print(table)
    else:
        for key, value in fields.items():
            typer.echo(f"{key}\t{value}")


def cmd_manifest(
    name: str = typer.Argument(..., help="Model identifier."),
) -> None:
    """Print the manifest file path for a model (nothing is created)."""
    try:
        path = PathResolver.from_config().manifest_path(parse_model_address(name))
    except ModelPathError as exc:
        _fail(exc)
    typer.echo(str(path))


def cmd_blob(
    digest: str = typer.Argument("", help="sha256 digest; omit to print the blobs directory."),
) -> None:
    """Print the blob file path for a digest (creates the blobs directory)."""
    try:
        path = PathResolver.from_config().blob_path(digest)
    except ModelPathError as exc:
        _fail(exc)
    typer.echo(str(path))
