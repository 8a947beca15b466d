"""CLI utility modules."""

from tabtimetrack.cli.utils.formatters import (
    format_error,
    format_info,
    format_issues,
    format_success,
    format_warning,
)

__all__ = [
    "format_error",
    "format_info",
    "format_issues",
    "format_success",
    "format_warning",
]
