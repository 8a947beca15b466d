"""Coder strategy interface.

A coder classifies a time line (its date and tasks) into one or more
aggregation buckets and renders a human label for each bucket. The
aggregator only talks to this interface, so bucketing can be customized
without touching the aggregation itself.
"""

import datetime as dt
from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from enum import IntEnum
from typing import List, Optional, Sequence

from tabtimetrack.models.summary import Code
from tabtimetrack.models.timesheet import Task


class CodeType(IntEnum):
    """Bucket type tags used by the built-in coders.

    Buckets sort by type first, so days come before weeks, months, years,
    the grand total and finally the breakout tasks.
    """

    DAY = 1
    WEEK = 2
    MONTH = 3
    YEAR = 4
    ALL = 5
    BREAKOUT = 6


@dataclass
class SplitResult:
    """Buckets a single line contributes to.

    Attributes:
        codes: Every bucket the line contributes to
        error: Non-fatal classification problem, if any. The codes are
            still usable when it is set.
    """

    codes: List[Code] = field(default_factory=list)
    error: Optional[str] = None


class Coder(ABC):
    """Classification strategy for the summary aggregator.

    Implementations must be deterministic for the duration of one
    aggregation run: any lookup tables are built in the constructor and
    not changed afterwards.
    """

    @abstractmethod
    def split(self, date: dt.date, tasks: Sequence[Task]) -> SplitResult:
        """Return every bucket a line with this date and these tasks feeds.

        Args:
            date: Calendar date of the line
            tasks: Tasks split from the line description

        Returns:
            SplitResult with the bucket codes and an optional error
        """

    @abstractmethod
    def describe(self, code: Code) -> str:
        """Render a human label for a bucket."""
