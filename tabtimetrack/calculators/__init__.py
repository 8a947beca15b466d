"""Calculator modules for tabtimetrack."""

from tabtimetrack.calculators.time_utils import (
    RateParseError,
    TimeParseError,
    duration_to_hours,
    format_duration,
    format_fraction,
    parse_rate,
    parse_time_of_day,
    round_half_even,
)

__all__ = [
    "RateParseError",
    "TimeParseError",
    "duration_to_hours",
    "format_duration",
    "format_fraction",
    "parse_rate",
    "parse_time_of_day",
    "round_half_even",
]
