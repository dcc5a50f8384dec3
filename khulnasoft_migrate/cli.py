"""CLI entry point: khulnasoft-migrate.

Run inside a JavaScript project that depends on ``khulnasoft``:
    khulnasoft-migrate                       # migrate the current directory
    khulnasoft-migrate --project-dir ./app   # migrate another directory
    khulnasoft-migrate -v --summary          # debug logs + per-step summary
"""

from __future__ import annotations

import asyncio
import sys
from pathlib import Path

import click

from khulnasoft_migrate.core.logging import setup_logging
from khulnasoft_migrate.exceptions import MigrationError
from khulnasoft_migrate.migrator import Migrator
from khulnasoft_migrate.progress import ProgressTracker

_STATUS_ICONS = {
    "completed": "+",
    "failed": "!",
    "skipped": "-",
    "running": "~",
    "pending": ".",
}


def _print_summary(progress: ProgressTracker) -> None:
    summary = progress.get_summary()
    click.echo(f"\nMigration summary (total: {summary['total_duration']}s):", err=True)
    for p in summary["steps"]:
        icon = _STATUS_ICONS.get(p["status"], "?")
        duration = f" ({p['duration']}s)" if p["duration"] else ""
        detail = f" - {p['detail']}" if p["detail"] else ""
        error = f" - {p['error']}" if p["error"] else ""
        click.echo(f"  [{icon}] {p['step']}{duration}{detail}{error}", err=True)


@click.command()
@click.option(
    "--project-dir",
    type=click.Path(exists=True, file_okay=False, path_type=Path),
    default=".",
    show_default=True,
    help="JavaScript project to migrate",
)
@click.option("-v", "--verbose", is_flag=True, help="Verbose logging")
@click.option(
    "--log-format",
    type=click.Choice(["console", "json"]),
    default=None,
    help="Log renderer (default: $KHULNASOFT_MIGRATE_LOG_FORMAT or console)",
)
@click.option("--summary", is_flag=True, help="Print per-step summary to stderr")
def main(project_dir: Path, verbose: bool, log_format: str | None, summary: bool) -> None:
    """Migrate a project from `khulnasoft` to `@khulnasoft/protect`."""
    setup_logging(level="DEBUG" if verbose else None, fmt=log_format)

    migrator = Migrator(project_dir.resolve())
    try:
        result = asyncio.run(migrator.run())
    except MigrationError as e:
        if summary:
            _print_summary(migrator.progress)
        click.echo(f"Error: {e}", err=True)
        sys.exit(1)

    if summary:
        _print_summary(migrator.progress)
    click.echo(result.message)
    sys.exit(result.exit_code)


if __name__ == "__main__":
    main()
