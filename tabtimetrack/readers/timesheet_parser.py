"""Timesheet parser for tab-delimited plain-text timesheets.

This module turns raw timesheet bytes into a TimesheetFile of chronologically
ordered, validated Line objects.

The expected file format:
- Line 1: Title (only when the line has no tab)
- Data lines: date, start time, stop time and an optional description,
  separated by tabs
- Directive lines, whose first cell starts with "@":
  - @rem: comment, ignored
  - @breakout: declares breakout tasks ("[ref] text. [ref] text.")
  - @rate: hourly rate as a decimal or fraction ("85.50", "171/2")

Example file:

    Client work
    @rate	85.50
    @breakout	[42] Migration project
    2023-08-01	08:00	09:30	[123] Fix login form. Review.
    2023-08-01	10:00	12:00	[42] Schema changes.
"""

import datetime as dt
import logging
import re
from dataclasses import dataclass, field
from fractions import Fraction
from typing import List, Optional, Set, Union

from tabtimetrack.calculators.time_utils import (
    RateParseError,
    TimeParseError,
    parse_rate,
    parse_time_of_day,
)
from tabtimetrack.models.timesheet import Line, Task, TimesheetFile
from tabtimetrack.readers.description_splitter import (
    DEFAULT_STOP,
    StopPolicy,
    split_description,
)
from tabtimetrack.validators.overlap_validator import find_overlaps
from tabtimetrack.validators.validation_report import ValidationReport

logger = logging.getLogger(__name__)

# Longer lines are almost always transposed or mistyped times.
MAX_LINE_DURATION = dt.timedelta(hours=10)

_DATE_PATTERN = re.compile(r"[0-9]{4}-[0-9]{2}-[0-9]{2}")


class TimesheetParseError(ValueError):
    """Fatal structural error in a timesheet, tagged with its source line.

    Attributes:
        line_number: 1-based source line number
        message: Human-readable cause
    """

    def __init__(self, line_number: int, message: str):
        self.line_number = line_number
        self.message = message
        super().__init__(f"line {line_number}: {message}")


@dataclass
class ParseResult:
    """Result of parsing a timesheet.

    The file is usable even when the report holds overlap errors.

    Attributes:
        file: The parsed timesheet
        report: Non-fatal overlap issues found across the whole file
    """

    file: TimesheetFile
    report: ValidationReport = field(default_factory=ValidationReport)


def _split_lines(data: Union[bytes, str]) -> List[str]:
    """Split content into physical lines, decoding bytes one line at a time."""
    if isinstance(data, str):
        return data.split("\n")

    lines = []
    for index, raw in enumerate(data.split(b"\n")):
        try:
            lines.append(raw.decode("utf-8"))
        except UnicodeDecodeError as e:
            logger.warning(
                f"Line {index + 1} is not valid UTF-8 ({e.reason} at byte "
                f"{e.start}), undecodable bytes replaced"
            )
            lines.append(raw.decode("utf-8", errors="replace"))
    return lines


class TimesheetParser:
    """Parser for tab-delimited timesheets.

    The parser reads every physical line, handles directives, builds Line
    objects for data lines, sorts them chronologically and finally checks
    same-day lines for overlaps.

    Structural problems (bad date or time, missing cells, unknown directive,
    duplicate @rate, malformed rate, negative or implausibly long duration)
    abort parsing with a TimesheetParseError. Overlaps are collected in the
    returned report instead.

    Attributes:
        max_line_duration: Longest duration accepted for a single line
        stop: Sentence stop marker for descriptions

    Example:
        >>> parser = TimesheetParser()
        >>> result = parser.parse(b"Title\\n2023-08-01\\t08:00\\t09:00\\n")
        >>> result.file.title
        'Title'
        >>> len(result.file.lines)
        1
    """

    def __init__(
        self,
        max_line_duration: dt.timedelta = MAX_LINE_DURATION,
        stop: str = DEFAULT_STOP,
    ):
        self.max_line_duration = max_line_duration
        self.stop = stop

    def parse(self, data: Union[bytes, str]) -> ParseResult:
        """Parse timesheet data.

        Args:
            data: Raw timesheet content, UTF-8 bytes or text. Bytes that are
                not valid UTF-8 are replaced with U+FFFD, line by line.

        Returns:
            ParseResult with the parsed file and the overlap report

        Raises:
            TimesheetParseError: On the first structural error
        """
        title = ""
        lines: List[Line] = []
        breakout: List[Task] = []
        rate: Optional[Fraction] = None

        for index, raw in enumerate(_split_lines(data)):
            number = index + 1
            cells = raw.rstrip("\r").split("\t")

            if index == 0 and len(cells) == 1:
                title = cells[0]
                continue
            if len(cells) == 1 and not cells[0]:
                continue

            if cells[0].startswith("@"):
                command = cells[0]
                logger.debug(f"Directive {command} on line {number}")
                if command == "@rem":
                    continue
                elif command == "@breakout":
                    self._add_breakout(cells, number, breakout)
                elif command == "@rate":
                    if rate is not None:
                        raise TimesheetParseError(
                            number, "multiple rates per file not allowed"
                        )
                    rate = self._parse_rate(cells, number)
                else:
                    raise TimesheetParseError(number, f"unknown command {command}")
                continue

            lines.append(self._parse_line(cells, number))

        lines.sort(key=lambda line: line.sort_key)
        report = find_overlaps(lines)

        logger.info(
            f"Parsed {len(lines)} time lines, {len(breakout)} breakout tasks, "
            f"rate {'set' if rate is not None else 'not set'}, "
            f"{report.error_count} overlap(s)"
        )

        return ParseResult(
            file=TimesheetFile(
                title=title, lines=lines, breakout=breakout, rate=rate
            ),
            report=report,
        )

    def _add_breakout(
        self, cells: List[str], number: int, breakout: List[Task]
    ) -> None:
        """Append the tasks of a @breakout directive.

        Raises:
            TimesheetParseError: If the description is missing or a
                reference was already declared
        """
        if len(cells) != 2:
            raise TimesheetParseError(number, "missing expected breakout description")
        tasks = split_description(cells[1], self.stop, StopPolicy.ENSURE_NO_STOP)
        if not tasks:
            raise TimesheetParseError(number, "missing expected breakout description")

        declared: Set[str] = {task.reference for task in breakout if task.reference}
        for task in tasks:
            if task.reference and task.reference in declared:
                raise TimesheetParseError(
                    number, f"duplicate breakout reference [{task.reference}]"
                )
            declared.add(task.reference)
        breakout.extend(tasks)

    def _parse_rate(self, cells: List[str], number: int) -> Fraction:
        if len(cells) != 2:
            raise TimesheetParseError(number, "missing rate value")
        try:
            return parse_rate(cells[1])
        except RateParseError as e:
            raise TimesheetParseError(number, str(e)) from e

    def _parse_line(self, cells: List[str], number: int) -> Line:
        """Parse a data line into a Line.

        Raises:
            TimesheetParseError: If a cell is missing or invalid, or the
                duration is negative or too long
        """
        if len(cells) < 3:
            raise TimesheetParseError(number, "incomplete line")

        date = self._parse_date(cells[0], number)
        try:
            start = parse_time_of_day(cells[1])
        except TimeParseError as e:
            raise TimesheetParseError(number, f"start time {e}") from e
        try:
            stop = parse_time_of_day(cells[2])
        except TimeParseError as e:
            raise TimesheetParseError(number, f"end time {e}") from e

        description = cells[3] if len(cells) > 3 else ""

        duration = stop - start
        if duration < dt.timedelta(0):
            raise TimesheetParseError(
                number, "duration negative, end time before start time"
            )
        if duration > self.max_line_duration:
            raise TimesheetParseError(
                number,
                f"duration larger than {self.max_line_duration}, "
                "this must be a mistake",
            )

        return Line(
            number=number,
            date=date,
            start=start,
            stop=stop,
            duration=duration,
            description=description,
            task_list=split_description(description, self.stop, StopPolicy.ENSURE_STOP),
        )

    @staticmethod
    def _parse_date(text: str, number: int) -> dt.date:
        if not _DATE_PATTERN.fullmatch(text):
            raise TimesheetParseError(
                number, f"invalid date {text!r}, expected YYYY-MM-DD"
            )
        try:
            return dt.date.fromisoformat(text)
        except ValueError as e:
            raise TimesheetParseError(number, f"invalid date {text!r}: {e}") from e


def parse(
    data: Union[bytes, str], max_line_duration: dt.timedelta = MAX_LINE_DURATION
) -> ParseResult:
    """Parse timesheet data with the default stop marker.

    Args:
        data: Raw timesheet content
        max_line_duration: Longest duration accepted for a single line

    Returns:
        ParseResult with the parsed file and the overlap report

    Raises:
        TimesheetParseError: On the first structural error

    Example:
        >>> result = parse(
        ...     b"2023-08-01\\t08:00\\t09:00\\n2023-08-01\\t09:00\\t10:00\\n"
        ... )
        >>> result.report.messages()
        ['line 1 overlaps line 2, ensure start and stop are not the same']
    """
    return TimesheetParser(max_line_duration=max_line_duration).parse(data)
