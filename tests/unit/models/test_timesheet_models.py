"""Unit tests for the Task, Line and TimesheetFile models."""

import datetime as dt
from fractions import Fraction

import pytest
from pydantic import ValidationError

from tabtimetrack.models.timesheet import Line, Task, TimesheetFile


def offset(hours, minutes=0, seconds=0):
    return dt.timedelta(hours=hours, minutes=minutes, seconds=seconds)


def make_line(number=1, date=dt.date(2023, 8, 1), start=(8, 0), stop=(9, 0), **kwargs):
    start_time = offset(*start)
    stop_time = offset(*stop)
    duration = stop_time - start_time
    return Line(
        number=number,
        date=date,
        start=start_time,
        stop=stop_time,
        duration=duration,
        **kwargs,
    )


class TestTask:
    """Test the Task model."""

    def test_defaults_are_empty(self):
        """Test that reference and description default to empty strings."""
        task = Task()
        assert task.reference == ""
        assert task.description == ""

    def test_task_is_immutable(self):
        """Test that a task cannot be changed after creation."""
        task = Task(reference="123", description="Fix login form.")
        with pytest.raises(ValidationError):
            task.reference = "456"

    def test_tasks_compare_by_value(self):
        """Test structural equality of tasks."""
        assert Task(reference="1", description="a.") == Task(
            reference="1", description="a."
        )


class TestLine:
    """Test the Line model."""

    def test_valid_line(self):
        """Test creating a valid line."""
        line = make_line(description="Work.", task_list=[Task(description="Work.")])
        assert line.number == 1
        assert line.duration == dt.timedelta(hours=1)
        assert line.task_list[0].description == "Work."

    def test_zero_duration_is_allowed(self):
        """Test that start == stop gives a zero duration line."""
        line = make_line(start=(9, 0), stop=(9, 0))
        assert line.duration == dt.timedelta(0)

    def test_negative_duration_rejected(self):
        """Test that a negative duration is rejected."""
        with pytest.raises(ValidationError, match="must not be negative"):
            Line(
                number=1,
                date=dt.date(2023, 8, 1),
                start=offset(10),
                stop=offset(9),
                duration=dt.timedelta(hours=-1),
            )

    def test_inconsistent_duration_rejected(self):
        """Test that the duration must match stop - start."""
        with pytest.raises(ValidationError, match="does not match"):
            Line(
                number=1,
                date=dt.date(2023, 8, 1),
                start=offset(8),
                stop=offset(9),
                duration=dt.timedelta(hours=2),
            )

    def test_end_of_day_stop(self):
        """Test that a stop offset of 24 hours is a valid end of day."""
        line = make_line(start=(20, 0), stop=(24, 0))
        assert line.duration == dt.timedelta(hours=4)

    def test_line_number_must_be_positive(self):
        """Test that line numbers are 1-based."""
        with pytest.raises(ValidationError):
            make_line(number=0)

    def test_sort_key(self):
        """Test the chronological sort key."""
        line = make_line(start=(8, 0), stop=(9, 30))
        assert line.sort_key == (dt.date(2023, 8, 1), offset(8), offset(9, 30))

    def test_line_is_immutable(self):
        """Test that a line cannot be changed after creation."""
        line = make_line()
        with pytest.raises(ValidationError):
            line.description = "changed"


class TestTimesheetFile:
    """Test the TimesheetFile model."""

    def test_defaults(self):
        """Test an empty file."""
        file = TimesheetFile()
        assert file.title == ""
        assert file.lines == []
        assert file.breakout == []
        assert file.rate is None

    def test_rate_is_fraction(self):
        """Test that the rate keeps its exact value."""
        file = TimesheetFile(rate=Fraction(171, 2))
        assert file.rate == Fraction(171, 2)

    def test_total_duration(self):
        """Test summing the durations of all lines."""
        file = TimesheetFile(
            lines=[
                make_line(number=1, start=(8, 0), stop=(9, 0)),
                make_line(number=2, start=(10, 0), stop=(10, 30)),
            ]
        )
        assert file.total_duration == dt.timedelta(hours=1, minutes=30)
