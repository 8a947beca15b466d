"""Breakout coder: route lines tagged with a declared reference to its bucket.

A file may declare breakout tasks:

    @breakout	[42] Migration project. [43] Audit

Any line carrying a task with reference "42" is then counted in the grand
total and in the "Migration project" bucket only, instead of the calendar
buckets.
"""

import datetime as dt
import logging
from typing import Dict, Optional, Sequence

from tabtimetrack.coders.base import Coder, CodeType, SplitResult
from tabtimetrack.coders.calendar_coder import CalendarCoder
from tabtimetrack.models.summary import Code
from tabtimetrack.models.timesheet import Task

logger = logging.getLogger(__name__)

CONFLICT_MESSAGE = (
    "multiple different breakout references on same time line cannot be split"
)


class BreakoutCoder(Coder):
    """Calendar coder extended with breakout task buckets.

    Breakout tasks get dense ordinals from 1 in declaration order. Tasks
    without a reference cannot be matched and get no ordinal. Both lookup
    tables are built once here and never changed.

    When a line references two different breakout tasks it is counted in
    the first one seen and the split result carries a conflict error.

    Attributes:
        calendar: Coder used for lines without a breakout reference

    Example:
        >>> coder = BreakoutCoder([Task(reference="42", description="Migration")])
        >>> result = coder.split(dt.date(2023, 8, 1), [Task(reference="42")])
        >>> [coder.describe(code) for code in result.codes]
        ['Sum', 'Migration']
    """

    def __init__(
        self, breakout: Sequence[Task], calendar: Optional[Coder] = None
    ):
        self.calendar = calendar or CalendarCoder()
        self._ordinals: Dict[str, int] = {}
        self._tasks: Dict[int, Task] = {}

        for task in breakout:
            if not task.reference or task.reference in self._ordinals:
                continue
            ordinal = len(self._ordinals) + 1
            self._ordinals[task.reference] = ordinal
            self._tasks[ordinal] = task

        logger.debug(f"Assigned {len(self._ordinals)} breakout code(s)")

    def ordinal(self, reference: str) -> Optional[int]:
        """Get the ordinal assigned to a breakout reference."""
        return self._ordinals.get(reference)

    def split(self, date: dt.date, tasks: Sequence[Task]) -> SplitResult:
        selected: Optional[int] = None
        error: Optional[str] = None

        for task in tasks:
            ordinal = self._ordinals.get(task.reference) if task.reference else None
            if ordinal is None:
                continue
            if selected is None:
                selected = ordinal
            elif ordinal != selected:
                error = CONFLICT_MESSAGE

        if selected is None:
            return self.calendar.split(date, tasks)

        return SplitResult(
            codes=[
                Code(type=CodeType.ALL, value=0),
                Code(type=CodeType.BREAKOUT, value=selected),
            ],
            error=error,
        )

    def describe(self, code: Code) -> str:
        if code.type != CodeType.BREAKOUT:
            return self.calendar.describe(code)

        task = self._tasks.get(code.value)
        if task is None:
            return f"unknown breakout code {code.value}"
        return task.description or task.reference
