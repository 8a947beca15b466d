"""
Readers for turning timesheet text into parsed models.
"""

from .description_splitter import StopPolicy, split_description
from .timesheet_parser import (
    ParseResult,
    TimesheetParseError,
    TimesheetParser,
    parse,
)

__all__ = [
    "ParseResult",
    "StopPolicy",
    "TimesheetParseError",
    "TimesheetParser",
    "parse",
    "split_description",
]
