"""Overlap validation for chronologically sorted time lines.

Two entries on the same date overlap when the earlier one stops at or
after the moment the next one starts. Start and stop are inclusive, so a
shared boundary (09:00 to 09:00) is an overlap.
"""

import logging
from typing import Sequence

from tabtimetrack.models.timesheet import Line
from tabtimetrack.validators.validation_report import ValidationReport

logger = logging.getLogger(__name__)


def find_overlaps(lines: Sequence[Line]) -> ValidationReport:
    """Report every adjacent pair of same-date lines that overlap.

    The lines must already be sorted by (date, start, stop). Pairs on
    different dates are never compared. Each overlapping pair is reported
    exactly once and scanning always covers the whole list.

    Args:
        lines: Lines in chronological order

    Returns:
        ValidationReport with one error per overlapping pair

    Example:
        >>> report = find_overlaps(parsed.file.lines)
        >>> report.messages()
        ['line 2 overlaps line 3, ensure start and stop are not the same']
    """
    report = ValidationReport()

    for prev, item in zip(lines, lines[1:]):
        if item.date != prev.date:
            continue
        if prev.stop >= item.start:
            report.add_error(
                "overlap",
                f"line {prev.number} overlaps line {item.number}, "
                "ensure start and stop are not the same",
                item.start,
                context={"line": prev.number, "next_line": item.number},
            )

    if report.has_errors():
        logger.warning(f"Found {report.error_count} overlapping line pair(s)")
    return report
