"""vfdwrap undo command."""

from __future__ import annotations

from pathlib import Path

import click

from vfdwrap.core.output import console, print_write_result
from vfdwrap.fix.undo import UndoManager


@click.command()
@click.argument("file", required=False, type=click.Path(path_type=Path))
@click.option("--last", is_flag=True, help="Undo every rewrite from the last session")
@click.option("--list", "list_all", is_flag=True, help="List all undoable rewrites")
def undo(file: Path | None, last: bool, list_all: bool):
    """Restore files rewritten by `vfdwrap transform --write`.

    Pass a FILE to restore its latest backup, or use --last to undo
    the entire last session.
    """
    project_path = Path.cwd()
    manager = UndoManager(project_path)

    if list_all:
        entries = manager.list_undoable()
        if not entries:
            console.print("\n  No undoable rewrites found.\n")
            return

        console.print("\n  [bold]Undoable Rewrites[/bold]\n")
        for entry in entries:
            console.print(f"  {entry.file}  \\[{entry.timestamp}]")
        console.print()
        return

    if last:
        results = manager.undo_last_session()
        if not results:
            console.print("\n  No recent session to undo.\n")
            return

        console.print("\n  [bold]Undoing last session:[/bold]\n")
        for result in results:
            print_write_result(result)
        console.print()
        return

    if file:
        print_write_result(manager.undo(file))
        return

    console.print("\n  Usage: vfdwrap undo <FILE> or vfdwrap undo --last")
    console.print("  Run `vfdwrap undo --list` to see available undos.\n")
