"""Data models for tabtimetrack.

This package contains Pydantic models for the parsed timesheet and the
aggregation results:
- BaseDataModel: Base class with common configuration
- Task: Annotated sentence of a line description
- Line: Validated time entry
- TimesheetFile: Parsed document
- Code: Aggregation bucket key
- SumLine: Per-bucket accumulator
"""

from tabtimetrack.models.base import BaseDataModel
from tabtimetrack.models.summary import Code, SumLine
from tabtimetrack.models.timesheet import Line, Task, TimesheetFile

__all__ = [
    "BaseDataModel",
    "Task",
    "Line",
    "TimesheetFile",
    "Code",
    "SumLine",
]
