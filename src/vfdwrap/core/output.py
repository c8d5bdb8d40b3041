"""Rich terminal formatting for vfdwrap output."""

from __future__ import annotations

from rich.console import Console
from rich.panel import Panel
from rich.table import Table

from vfdwrap.core.models import THRESHOLD, FileVerdict, ScanReport, WriteResult

console = Console()
error_console = Console(stderr=True)


def score_color(score: int) -> str:
    """Return color name based on score."""
    if score > THRESHOLD:
        return "green"
    elif score == THRESHOLD:
        return "yellow"
    return "dim"


def verdict_label(verdict: FileVerdict) -> str:
    if not verdict.passes_preflight:
        return "[dim]skipped (preflight)[/dim]"
    if verdict.is_class_component:
        return "[green]class component[/green]"
    return "[blue]options component[/blue]"


def format_rules(verdict: FileVerdict) -> str:
    parts = []
    for hit in verdict.report.hits:
        sign = "+" if hit.weight >= 0 else ""
        parts.append(f"{hit.rule.value} {sign}{hit.weight}")
    if verdict.report.early_exit:
        parts.append("[dim](early exit)[/dim]")
    return ", ".join(parts)


def print_scan_report(report: ScanReport, verbose: bool = False) -> None:
    """Print the classification table for every scanned file."""
    table = Table(show_header=True, header_style="bold", box=None, padding=(0, 2))
    table.add_column("File")
    table.add_column("Score", justify="right")
    table.add_column("Verdict")
    if verbose:
        table.add_column("Rules")

    for v in report.verdicts:
        color = score_color(v.report.score)
        row = [str(v.file), f"[{color}]{v.report.score}[/{color}]", verdict_label(v)]
        if verbose:
            row.append(format_rules(v))
        table.add_row(*row)

    lines = [
        "",
        f"  {report.total_files} files | "
        f"{report.class_component_count} class components | "
        f"{report.preflight_rejected_count} skipped by preflight",
    ]
    if report.skipped:
        lines.append(f"  [yellow]{len(report.skipped)} unreadable files ignored[/yellow]")
    lines.append("")

    title = "vfdwrap Scan"
    if report.project_name:
        title += f"  {report.project_name}"

    console.print(table)
    console.print(Panel(
        "\n".join(lines),
        title=f"[bold]{title}[/bold]",
        border_style="green" if report.class_component_count else "blue",
        padding=(0, 1),
    ))


def print_write_result(result: WriteResult) -> None:
    """Print a single write or undo result."""
    if result.success:
        console.print(f"  [green]✅ {result.file}[/green]  {result.message}")
    else:
        console.print(f"  [yellow]- {result.file}[/yellow]  [dim]{result.message}[/dim]")


def print_write_summary(results: list[WriteResult]) -> None:
    """Print summary after rewriting multiple files."""
    success = sum(1 for r in results if r.success)

    console.print()
    console.print(f"  [green]{success} files wrapped.[/green]  {len(results) - success} unchanged.")
    if success:
        console.print("  [dim]Run `vfdwrap undo --last` to revert.[/dim]")
    console.print()


def report_to_dict(report: ScanReport) -> dict:
    """Convert ScanReport to a JSON-serializable dict."""
    return {
        "project_name": report.project_name,
        "scanned_at": str(report.scanned_at),
        "total_files": report.total_files,
        "class_components": report.class_component_count,
        "files": [
            {
                "file": str(v.file),
                "passes_preflight": v.passes_preflight,
                "score": v.report.score,
                "early_exit": v.report.early_exit,
                "rules": [h.rule.value for h in v.report.hits],
                "is_class_component": v.is_class_component,
            }
            for v in report.verdicts
        ],
        "skipped": [str(p) for p in report.skipped],
    }
