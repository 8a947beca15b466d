"""Validation layer for temporal consistency of parsed timesheets."""

from tabtimetrack.validators.overlap_validator import find_overlaps
from tabtimetrack.validators.validation_report import (
    ValidationIssue,
    ValidationReport,
    ValidationSeverity,
)

__all__ = [
    "find_overlaps",
    "ValidationReport",
    "ValidationIssue",
    "ValidationSeverity",
]
