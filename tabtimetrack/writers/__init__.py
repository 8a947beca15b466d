"""Writers for rendering aggregated timesheet reports."""

from tabtimetrack.writers.report_writer import (
    OUTPUT_FORMATS,
    ReportRow,
    ReportWriter,
    build_report_rows,
    truncate,
)

__all__ = [
    "OUTPUT_FORMATS",
    "ReportRow",
    "ReportWriter",
    "build_report_rows",
    "truncate",
]
