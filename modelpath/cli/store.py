"""modelpath/cli/store.py

Inspect the local model store (path, ls, stats). Read-only.
"""

from __future__ import annotations

import json

import typer

from modelpath.constants.cli_constants import SortOption
from modelpath.constants.tool_constants import STORE_ROOT_ENV
from modelpath.core.store import ManifestEntry, ModelStore

# ----------------------------
# Typer Application
# ----------------------------
app = typer.Typer(
    name="store",
    help="Inspect the local model store (path, ls, stats).",
    no_args_is_help=True,
)


def _human_size(num_bytes: int) -> str:
    for unit, factor in (("TB", 1024**4), ("GB", 1024**3), ("MB", 1024**2), ("KB", 1024), ("B", 1)):
        if num_bytes >= factor:
            return f"{num_bytes} B" if unit == "B" else f"{num_bytes / factor:.2f} {unit}"
    return "0 B"


# ----------------------------
# Lazy helpers (keep CLI startup fast)
# ----------------------------
def _console():
    """Return a rich Console if available, else None (lazy import)."""
    try:
        from rich.console import Console
    except ImportError:
        return None
    return Console(stderr=False)


def _table():
    """Return (Table, box) lazily if rich is available, else (None, None)."""
    try:
        from rich import box
        from rich.table import Table
    except ImportError:
        return None, None
    return Table, box


def _print_kv(con, key: str, value: str) -> None:
    if con:
        con.print(f"[bold]{key}[/bold] {value}", highlight=False)
    else:
        typer.echo(f"{key} {value}")


def _sort_entries(entries: list[ManifestEntry], sort: SortOption, reverse: bool) -> list[ManifestEntry]:
    key = {
        SortOption.name: lambda e: e.address.short_name().lower(),
        SortOption.size: lambda e: e.size,
        SortOption.mtime: lambda e: e.mtime,
    }[sort]
    return sorted(entries, key=key, reverse=reverse)


# ----------------------------
# Commands
# ----------------------------
@app.command("path")
def cmd_path() -> None:
    """Print the store root."""
    typer.echo(str(ModelStore().root))


@app.command("ls")
def cmd_ls(
    sort: SortOption = typer.Option(SortOption.name, "--sort", case_sensitive=False, help="Sort by: name | size | mtime"),
    reverse: bool = typer.Option(False, "--reverse", help="Reverse sort order."),
    full: bool = typer.Option(False, "--full", help="Show full names instead of short names."),
    json_out: bool = typer.Option(False, "--json", help="Output JSON instead of a table."),
) -> None:
    """List models that have a manifest in the store."""
    store = ModelStore()
    entries = _sort_entries(list(store.iter_manifests()), sort, reverse)

    def _name(e: ManifestEntry) -> str:
        return e.address.full_name() if full else e.address.short_name()

    if json_out:
        payload = [
            {"name": _name(e), "path": str(e.path), "size": e.size, "mtime": e.mtime_dt.isoformat()}
            for e in entries
        ]
        typer.echo(json.dumps(payload, ensure_ascii=False, indent=2))
        return

    Table, box = _table()
    con = _console()
    if con and Table and box:
        table = Table(title=None, box=box.SIMPLE_HEAVY)
        table.add_column("Name", overflow="fold")
        table.add_column("Size", justify="right")
        table.add_column("Modified", justify="left")
        for e in entries:
            table.add_row(_name(e), _human_size(e.size), e.mtime_dt.strftime("%Y-%m-%d %H:%M"))
        con.print(table)
    else:
        for e in entries:
            typer.echo(f"{_name(e)}\t{_human_size(e.size)}\t{e.mtime_dt:%Y-%m-%d %H:%M}")


@app.command("stats")
def cmd_stats() -> None:
    """Show manifest and blob counts and the total size."""
    store = ModelStore()
    manifests = list(store.iter_manifests())
    blobs = list(store.iter_blobs())
    files = len(manifests) + len(blobs)
    total = sum(e.size for e in (*manifests, *blobs))

    con = _console()
    _print_kv(con, "Store:", f"{store.root}  (set {STORE_ROOT_ENV} to override)")
    _print_kv(con, "Manifests:", str(len(manifests)))
    _print_kv(con, "Blobs:", str(len(blobs)))
    _print_kv(con, "Total size:", f"{_human_size(total)} ({total} B in {files} files)")
