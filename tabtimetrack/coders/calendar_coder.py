"""Calendar coder: day, ISO week, month, year and grand total buckets."""

import datetime as dt
from typing import Sequence

from tabtimetrack.coders.base import Coder, CodeType, SplitResult
from tabtimetrack.models.summary import Code
from tabtimetrack.models.timesheet import Task

TOTAL_LABEL = "Sum"


class CalendarCoder(Coder):
    """Assign every line to the grand total and its calendar buckets.

    Bucket values encode the period as a single integer:
    - DAY: YYYYMMDD
    - WEEK: ISO year * 100 + ISO week (the week belongs to the year that
      owns its Thursday)
    - MONTH: YYYYMM
    - YEAR: YYYY
    - ALL: 0

    Tasks are ignored.

    Example:
        >>> coder = CalendarCoder()
        >>> result = coder.split(dt.date(2024, 12, 30), [])
        >>> [coder.describe(code) for code in result.codes]
        ['Sum', '2024-12-30', '2025-wk01', '2024-mo12', '2024']
    """

    def split(self, date: dt.date, tasks: Sequence[Task]) -> SplitResult:
        iso_year, iso_week, _ = date.isocalendar()
        return SplitResult(
            codes=[
                Code(type=CodeType.ALL, value=0),
                Code(
                    type=CodeType.DAY,
                    value=date.year * 10000 + date.month * 100 + date.day,
                ),
                Code(type=CodeType.WEEK, value=iso_year * 100 + iso_week),
                Code(type=CodeType.MONTH, value=date.year * 100 + date.month),
                Code(type=CodeType.YEAR, value=date.year),
            ]
        )

    def describe(self, code: Code) -> str:
        value = code.value
        if code.type == CodeType.ALL:
            return TOTAL_LABEL
        if code.type == CodeType.DAY:
            year, month_day = divmod(value, 10000)
            month, day = divmod(month_day, 100)
            return f"{year:04d}-{month:02d}-{day:02d}"
        if code.type == CodeType.WEEK:
            year, week = divmod(value, 100)
            return f"{year:04d}-wk{week:02d}"
        if code.type == CodeType.MONTH:
            year, month = divmod(value, 100)
            return f"{year:04d}-mo{month:02d}"
        if code.type == CodeType.YEAR:
            return f"{value:04d}"
        return ""
