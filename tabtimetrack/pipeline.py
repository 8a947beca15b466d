"""End-to-end processing of one timesheet.

Parses the raw content, aggregates the lines with the default coder for
the file, and collects every non-fatal issue (overlaps, breakout
conflicts) into a single report.
"""

import datetime as dt
import logging
from dataclasses import dataclass
from typing import Optional, Union

from tabtimetrack.aggregators.summary_aggregator import SummaryResult, sum_lines
from tabtimetrack.coders import Coder, coder_for
from tabtimetrack.models.timesheet import TimesheetFile
from tabtimetrack.readers.timesheet_parser import MAX_LINE_DURATION, parse
from tabtimetrack.validators.validation_report import ValidationReport

logger = logging.getLogger(__name__)


@dataclass
class ProcessedTimesheet:
    """Container for a parsed and aggregated timesheet.

    Attributes:
        file: The parsed timesheet
        summary: Aggregated buckets
        report: Overlap issues followed by coding issues
    """

    file: TimesheetFile
    summary: SummaryResult
    report: ValidationReport


def process_timesheet(
    data: Union[bytes, str],
    max_line_duration: dt.timedelta = MAX_LINE_DURATION,
    coder: Optional[Coder] = None,
) -> ProcessedTimesheet:
    """Parse and aggregate a timesheet.

    Args:
        data: Raw timesheet content
        max_line_duration: Longest duration accepted for a single line
        coder: Classification strategy (default: chosen by coder_for)

    Returns:
        ProcessedTimesheet with the file, buckets and joined issues

    Raises:
        TimesheetParseError: On a structural error in the timesheet
    """
    parsed = parse(data, max_line_duration=max_line_duration)
    coder = coder or coder_for(parsed.file)
    logger.debug(f"Aggregating with {type(coder).__name__}")
    summary = sum_lines(parsed.file.lines, coder)

    report = ValidationReport()
    report.merge(parsed.report)
    report.merge(summary.report)

    return ProcessedTimesheet(file=parsed.file, summary=summary, report=report)
