"""tabtimetrack: aggregate tab-delimited timesheets into billable reports.

Typical use:

    >>> from tabtimetrack import parse, sum_lines, coder_for
    >>> parsed = parse(data)
    >>> summary = sum_lines(parsed.file.lines, coder_for(parsed.file))
"""

from tabtimetrack.aggregators import SummaryResult, sort_deduplicate, sum_lines
from tabtimetrack.coders import BreakoutCoder, CalendarCoder, Coder, coder_for
from tabtimetrack.models import Code, Line, SumLine, Task, TimesheetFile
from tabtimetrack.readers import ParseResult, TimesheetParseError, parse

__version__ = "1.0.0"

__all__ = [
    "BreakoutCoder",
    "CalendarCoder",
    "Code",
    "Coder",
    "Line",
    "ParseResult",
    "SumLine",
    "SummaryResult",
    "Task",
    "TimesheetFile",
    "TimesheetParseError",
    "coder_for",
    "parse",
    "sort_deduplicate",
    "sum_lines",
]
