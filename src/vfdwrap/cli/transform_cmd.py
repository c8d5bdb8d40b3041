"""vfdwrap transform command."""

from __future__ import annotations

import sys
from pathlib import Path

import click
from rich.markup import escape

from vfdwrap.core.config import ensure_gitignore, load_config
from vfdwrap.core.output import console, error_console, print_write_result, print_write_summary
from vfdwrap.fix.applier import TransformApplier
from vfdwrap.fix.rewriter import transform_result
from vfdwrap.scanner.engine import Scanner


@click.command()
@click.argument("paths", nargs=-1, type=click.Path(allow_dash=True, path_type=Path))
@click.option("--write", "-w", is_flag=True, help="Rewrite matching files in place (with backups)")
@click.option("--check", is_flag=True, help="Exit with status 1 if any file would change")
def transform(paths: tuple[Path, ...], write: bool, check: bool):
    """Wrap compiled class components with toNative.

    Reads from stdin when no PATHS (or `-`) are given and prints the
    result to stdout. With --write, every matching file under PATHS is
    rewritten in place.
    """
    if not paths or paths == (Path("-"),):
        code = sys.stdin.read()
        result = transform_result(code)
        click.echo(result.code, nl=False)
        if check and result.changed:
            sys.exit(1)
        return

    project_path = Path.cwd()
    config = load_config(project_path)
    scanner = Scanner(project_path, config)

    files: list[Path] = []
    for path in paths:
        if not path.exists():
            raise click.BadParameter(f"Path does not exist: {path}", param_hint="PATHS")
        # Explicitly named files are taken as-is; directories are filtered.
        files.extend([path] if path.is_file() else scanner.collect_files(path))

    if check:
        pending = []
        for f in files:
            code = _read_source(f)
            if code is not None and transform_result(code).changed:
                pending.append(f)
        for f in pending:
            console.print(f"  would wrap {f}")
        if pending:
            sys.exit(1)
        return

    if write:
        ensure_gitignore(project_path)
        applier = TransformApplier(
            project_path,
            backup=config.write.backup_before_write,
        )
        results = applier.apply_all([f.resolve() for f in files])
        for result in results:
            print_write_result(result)
        print_write_summary(results)
        return

    for f in files:
        code = _read_source(f)
        if code is not None:
            click.echo(transform_result(code).code, nl=False)


def _read_source(path: Path) -> str | None:
    """Read a file as UTF-8, reporting it on stderr when that fails."""
    try:
        return path.read_bytes().decode("utf-8")
    except (OSError, UnicodeDecodeError) as exc:
        error_console.print(
            f"  [yellow]skipped unreadable file {path}[/yellow] [dim]({escape(str(exc))})[/dim]"
        )
        return None
