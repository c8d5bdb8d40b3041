"""vfdwrap scan command."""

from __future__ import annotations

import json
from pathlib import Path

import click

from vfdwrap.core.config import load_config
from vfdwrap.core.output import console, print_scan_report, report_to_dict
from vfdwrap.scanner.engine import Scanner


@click.command()
@click.argument("target", default=".", type=click.Path(exists=True, path_type=Path))
@click.option("--json", "as_json", is_flag=True, help="Print the report as JSON")
@click.option("--verbose", "-v", is_flag=True, help="Show which rules fired for each file")
def scan(target: Path, as_json: bool, verbose: bool):
    """Classify component files as class-style or options-style.

    TARGET can be a directory or a single file.
    """
    project_path = Path.cwd()
    config = load_config(project_path)

    scanner = Scanner(project_path, config)
    report = scanner.scan(target)

    if as_json:
        click.echo(json.dumps(report_to_dict(report), indent=2))
        return

    if not report.verdicts:
        console.print("\n  No matching component files found.\n")
        return

    print_scan_report(report, verbose=verbose or config.scan.verbose)
