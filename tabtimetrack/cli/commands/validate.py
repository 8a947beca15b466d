"""Validate command."""

import datetime as dt
import sys
from pathlib import Path

import click

from tabtimetrack.cli.error_handlers import ISSUES_EXIT_CODE, with_error_handling
from tabtimetrack.cli.utils.formatters import (
    format_info,
    format_issues,
    format_success,
)
from tabtimetrack.config.settings import get_config
from tabtimetrack.pipeline import process_timesheet
from tabtimetrack.utils.logging_utils import LogContext


@click.command(name="validate")
@click.option(
    "-f",
    "--file",
    "file_path",
    type=click.Path(dir_okay=False, path_type=Path),
    required=True,
    help="Timesheet file to validate",
)
@click.option("--debug", is_flag=True, help="Show full stack traces on errors")
def validate(file_path: Path, debug: bool):
    """Check a timesheet for structural errors, overlaps and conflicts.

    Exit codes: 0 when clean, 1 when overlaps or breakout conflicts are
    found, 3 when the file cannot be parsed.

    Example:
        tabtimetrack validate -f august.txt
    """
    with with_error_handling(debug) as handler:
        settings = get_config()
        handler.show_debug = debug or settings.debug
        click.echo(format_info(f"Validating {file_path}..."))

        with LogContext(source=str(file_path)):
            processed = process_timesheet(
                file_path.read_bytes(),
                max_line_duration=dt.timedelta(hours=settings.max_line_hours),
            )

        file = processed.file
        click.echo()
        click.echo("=" * 60)
        click.echo("Validation Summary")
        click.echo("=" * 60)
        click.echo(f"Title:            {file.title}")
        click.echo(f"Time lines:       {len(file.lines)}")
        click.echo(f"Breakout tasks:   {len(file.breakout)}")
        click.echo(f"Buckets:          {len(processed.summary.sum_lines)}")
        click.echo(f"Issues:           {len(processed.report.issues)}")
        click.echo()

        issues = processed.report
        if issues.has_issues():
            click.echo(format_issues(issues))
        else:
            click.echo(format_success("Timesheet is valid"))

    if issues.has_issues():
        sys.exit(ISSUES_EXIT_CODE)
