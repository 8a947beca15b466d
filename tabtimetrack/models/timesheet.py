"""Timesheet data models.

This module defines the records produced by the timesheet parser:

- Task: one annotated sentence of a line description
- Line: one validated time entry
- TimesheetFile: a fully parsed document
"""

import datetime as dt
from fractions import Fraction
from typing import List, Optional, Tuple

from pydantic import ConfigDict, Field, model_validator

from tabtimetrack.models.base import BaseDataModel


class Task(BaseDataModel):
    """A single annotated sub-item of a line description.

    Attributes:
        reference: Optional bracketed code, without the brackets (e.g. "123")
        description: The remaining sentence text

    Example:
        >>> task = Task(reference="123", description="Fix login form.")
        >>> task.reference
        '123'
    """

    model_config = ConfigDict(frozen=True)

    reference: str = Field("", description="Task reference code")
    description: str = Field("", description="Task sentence")


class Line(BaseDataModel):
    """Represents one validated time entry.

    Start and stop are inclusive bounds on the same calendar date, kept as
    field-wise offsets since midnight so that "24:00" closes a day. The
    duration is stop - start and is never negative.

    Attributes:
        number: 1-based source line number
        date: Calendar date of the entry
        start: Start time as offset since midnight
        stop: Stop time as offset since midnight
        duration: stop - start
        description: Raw description cell
        task_list: Tasks split from the description

    Example:
        >>> line = Line(
        ...     number=2,
        ...     date=dt.date(2023, 8, 1),
        ...     start=dt.timedelta(hours=8),
        ...     stop=dt.timedelta(hours=9, minutes=30),
        ...     duration=dt.timedelta(hours=1, minutes=30),
        ... )
        >>> line.sort_key[1] < line.sort_key[2]
        True
    """

    model_config = ConfigDict(frozen=True)

    number: int = Field(..., ge=1, description="1-based source line number")
    date: dt.date = Field(..., description="Date of work")
    start: dt.timedelta = Field(..., description="Start offset (inclusive)")
    stop: dt.timedelta = Field(..., description="Stop offset (inclusive)")
    duration: dt.timedelta = Field(..., description="Stop minus start")
    description: str = Field("", description="Raw description text")
    task_list: List[Task] = Field(default_factory=list, description="Tasks")

    @model_validator(mode="after")
    def validate_duration(self) -> "Line":
        """Validate that the duration matches the start and stop times.

        Raises:
            ValueError: If the duration is negative or inconsistent
        """
        if self.duration < dt.timedelta(0):
            raise ValueError(f"duration ({self.duration}) must not be negative")
        expected = self.stop - self.start
        if self.duration != expected:
            raise ValueError(
                f"duration ({self.duration}) does not match stop - start "
                f"({expected})"
            )
        return self

    @property
    def sort_key(self) -> Tuple[dt.date, dt.timedelta, dt.timedelta]:
        """Chronological ordering key: (date, start, stop)."""
        return (self.date, self.start, self.stop)


class TimesheetFile(BaseDataModel):
    """One fully parsed timesheet document.

    Attributes:
        title: Title from the first line, empty if the file has none
        lines: Time entries in chronological order
        breakout: Declared breakout tasks, unique by reference
        rate: Hourly rate declared with @rate, if any
    """

    model_config = ConfigDict(frozen=True)

    title: str = ""
    lines: List[Line] = Field(default_factory=list)
    breakout: List[Task] = Field(default_factory=list)
    rate: Optional[Fraction] = None

    @property
    def total_duration(self) -> dt.timedelta:
        """Sum of all line durations."""
        return sum((line.duration for line in self.lines), dt.timedelta(0))
