"""Coding strategies that map time lines to aggregation buckets."""

from tabtimetrack.coders.base import Coder, CodeType, SplitResult
from tabtimetrack.coders.breakout_coder import BreakoutCoder
from tabtimetrack.coders.calendar_coder import CalendarCoder
from tabtimetrack.models.timesheet import TimesheetFile


def coder_for(file: TimesheetFile) -> Coder:
    """Pick the default coder for a parsed file.

    Files that declare breakout tasks get a BreakoutCoder, all others a
    CalendarCoder.
    """
    if file.breakout:
        return BreakoutCoder(file.breakout)
    return CalendarCoder()


__all__ = [
    "BreakoutCoder",
    "CalendarCoder",
    "Coder",
    "CodeType",
    "SplitResult",
    "coder_for",
]
