"""Time and rational number utilities for tabtimetrack.

This module provides the low-level arithmetic the parser and aggregator
build on:
- Parsing "H[:M[:S]]" times of day
- Exact conversion of durations to Fraction hours
- Round-half-to-even rounding and fixed-point rendering of Fractions
- Parsing rate strings into exact Fractions

Durations are never computed as wall-clock differences; a time of day is
converted field by field into a timedelta since midnight and durations are
the difference of two such offsets.
"""

import datetime as dt
import re
from fractions import Fraction

_INTEGER_PATTERN = re.compile(r"[+-]?[0-9]+")
_MICROSECONDS_PER_HOUR = 3600 * 1_000_000


class TimeParseError(ValueError):
    """Raised when a time of day cannot be parsed."""


class RateParseError(ValueError):
    """Raised when a rate string is not a valid rational number."""


def parse_time_of_day(text: str) -> dt.timedelta:
    """Parse a time of day in "H", "H:M" or "H:M:S" form.

    Parts are unpadded integers; missing parts default to zero. The result
    is the field-wise offset since midnight, so values past one clock day
    stay usable: "24:00" is the end of the day and "8:90" is 9:30.

    Args:
        text: Time text from a timesheet cell

    Returns:
        Offset since midnight

    Raises:
        TimeParseError: If the text is empty, has a non-integer part, has
            more than three parts or overflows a timedelta

    Example:
        >>> parse_time_of_day("9")
        datetime.timedelta(seconds=32400)
        >>> parse_time_of_day("24:00")
        datetime.timedelta(days=1)
    """
    if not text:
        raise TimeParseError("empty time")

    parts = text.split(":")
    if len(parts) > 3:
        raise TimeParseError(f"too many time parts in {text!r}")

    values = [0, 0, 0]
    for index, part in enumerate(parts):
        if not _INTEGER_PATTERN.fullmatch(part):
            raise TimeParseError(
                f"time part {index + 1} in {text!r}: invalid integer {part!r}"
            )
        values[index] = int(part)

    hours, minutes, seconds = values
    try:
        return dt.timedelta(hours=hours, minutes=minutes, seconds=seconds)
    except OverflowError as e:
        raise TimeParseError(f"time {text!r} out of range: {e}") from e


def duration_to_hours(td: dt.timedelta) -> Fraction:
    """Convert a timedelta to an exact number of hours.

    Example:
        >>> duration_to_hours(dt.timedelta(minutes=20))
        Fraction(1, 3)
    """
    return Fraction(td // dt.timedelta(microseconds=1), _MICROSECONDS_PER_HOUR)


def round_half_even(value: Fraction, places: int) -> Fraction:
    """Round a Fraction to a number of decimal places.

    Ties go to the even neighbour (banker's rounding), which is what
    Fraction.__round__ implements.

    Example:
        >>> round_half_even(Fraction(1, 8), 2)
        Fraction(3, 25)
        >>> round_half_even(Fraction(3, 8), 2)
        Fraction(19, 50)
    """
    return round(value, places)


def format_fraction(value: Fraction, places: int = 2) -> str:
    """Render a Fraction as fixed-point text.

    The last digit is rounded to nearest, with halves rounded away from
    zero.

    Example:
        >>> format_fraction(Fraction(3, 2))
        '1.50'
        >>> format_fraction(Fraction(1, 3), 3)
        '0.333'
    """
    value = Fraction(value)
    scale = 10**places
    quotient, remainder = divmod(abs(value.numerator) * scale, value.denominator)
    if 2 * remainder >= value.denominator:
        quotient += 1

    sign = "-" if value < 0 and quotient > 0 else ""
    whole, fraction = divmod(quotient, scale)
    if places <= 0:
        return f"{sign}{whole}"
    return f"{sign}{whole}.{fraction:0{places}d}"


def format_duration(td: dt.timedelta) -> str:
    """Render a duration as hours, minutes and seconds.

    Example:
        >>> format_duration(dt.timedelta(hours=1, minutes=30))
        '1h30m0s'
        >>> format_duration(dt.timedelta(minutes=5))
        '5m0s'
        >>> format_duration(dt.timedelta(0))
        '0s'
    """
    total_microseconds = td // dt.timedelta(microseconds=1)
    sign = "-" if total_microseconds < 0 else ""
    seconds, microseconds = divmod(abs(total_microseconds), 1_000_000)
    hours, seconds = divmod(seconds, 3600)
    minutes, seconds = divmod(seconds, 60)

    second_text = str(seconds)
    if microseconds:
        second_text += f".{microseconds:06d}".rstrip("0")

    if hours:
        return f"{sign}{hours}h{minutes}m{second_text}s"
    if minutes:
        return f"{sign}{minutes}m{second_text}s"
    return f"{sign}{second_text}s"


def parse_rate(text: str) -> Fraction:
    """Parse a rate string into an exact Fraction.

    Accepts decimals ("85.50"), fractions ("171/2") and exponent notation
    ("1e2").

    Args:
        text: Rate text

    Returns:
        The rate as an exact Fraction

    Raises:
        RateParseError: If the text is not a valid rational number

    Example:
        >>> parse_rate("85.50")
        Fraction(171, 2)
    """
    if not text or text != text.strip():
        raise RateParseError(f"parse rate failed {text!r}")
    try:
        return Fraction(text)
    except (ValueError, ZeroDivisionError) as e:
        raise RateParseError(f"parse rate failed {text!r}") from e
