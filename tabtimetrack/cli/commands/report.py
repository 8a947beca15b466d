"""Report command."""

import datetime as dt
import logging
import sys
from fractions import Fraction
from pathlib import Path
from typing import Optional

import click

from tabtimetrack.calculators.time_utils import RateParseError, parse_rate
from tabtimetrack.cli.error_handlers import (
    ISSUES_EXIT_CODE,
    ConfigurationError,
    with_error_handling,
)
from tabtimetrack.cli.utils.formatters import format_issues
from tabtimetrack.config.settings import TabTimeTrackConfig, get_config
from tabtimetrack.models.timesheet import TimesheetFile
from tabtimetrack.pipeline import process_timesheet
from tabtimetrack.utils.logging_utils import LogContext
from tabtimetrack.writers.report_writer import (
    OUTPUT_FORMATS,
    ReportWriter,
    build_report_rows,
)

logger = logging.getLogger(__name__)


def resolve_rate(
    override: Optional[str], file: TimesheetFile, settings: TabTimeTrackConfig
) -> Optional[Fraction]:
    """Pick the hourly rate for a report.

    Precedence: the --rate option, then the file's @rate directive, then
    the DEFAULT_RATE setting.

    Raises:
        ConfigurationError: If the override is malformed
    """
    if override:
        try:
            return parse_rate(override)
        except RateParseError as e:
            raise ConfigurationError(
                f"Invalid --rate value: {e}",
                recovery_hint="Use a decimal (85.50) or fraction (171/2)",
            ) from e
    if file.rate is not None:
        return file.rate
    if settings.default_rate:
        return parse_rate(settings.default_rate)
    return None


@click.command(name="report")
@click.option(
    "-f",
    "--file",
    "file_path",
    type=click.Path(dir_okay=False, path_type=Path),
    required=True,
    help="Timesheet file to report on",
)
@click.option(
    "--rate",
    type=str,
    default=None,
    help="Hourly rate overriding the file's @rate (e.g. 85.50 or 171/2)",
)
@click.option(
    "--format",
    "output_format",
    type=click.Choice(OUTPUT_FORMATS, case_sensitive=False),
    default=None,
    help="Output format (default: OUTPUT_FORMAT setting, table)",
)
@click.option(
    "--limit",
    type=int,
    default=None,
    help="Truncate descriptions to this many characters (0 disables)",
)
@click.option("--debug", is_flag=True, help="Show full stack traces on errors")
def report(
    file_path: Path,
    rate: Optional[str],
    output_format: Optional[str],
    limit: Optional[int],
    debug: bool,
):
    """Summarize a timesheet by day, week, month, year and breakout task.

    Prints one row per bucket with its duration, hours, amount (when a rate
    is known) and task descriptions. Overlapping lines and ambiguous
    breakout references are listed after the report and make the command
    exit with code 1.

    Example:
        tabtimetrack report -f august.txt
        tabtimetrack report -f august.txt --rate 85.50 --format csv
    """
    with with_error_handling(debug) as handler:
        settings = get_config()
        handler.show_debug = debug or settings.debug
        with LogContext(source=str(file_path)):
            data = file_path.read_bytes()
            processed = process_timesheet(
                data, max_line_duration=dt.timedelta(hours=settings.max_line_hours)
            )
            hourly_rate = resolve_rate(rate, processed.file, settings)

            rows = build_report_rows(
                processed.summary.sum_lines,
                rate=hourly_rate,
                description_limit=(
                    limit if limit is not None else settings.description_limit
                ),
            )
            writer = ReportWriter((output_format or settings.output_format).lower())
            click.echo(writer.render(processed.file.title, rows), nl=False)

            issues = processed.report
            if issues.has_issues():
                logger.warning(f"Report for {file_path} has issues: {issues.summary()}")
                click.echo(format_issues(issues), err=True)

    if issues.has_issues():
        sys.exit(ISSUES_EXIT_CODE)
