"""Validation report for collecting non-fatal timesheet issues.

Overlapping lines and ambiguous breakout references do not stop parsing or
aggregation. They are collected here, across the whole file, and returned
next to a usable result so the caller can decide how to treat them.
"""

from dataclasses import dataclass
from enum import IntEnum
from typing import Any, Dict, List, Optional


class ValidationSeverity(IntEnum):
    """Severity levels for validation issues."""

    INFO = 1
    WARNING = 2
    ERROR = 3


@dataclass
class ValidationIssue:
    """Represents a single validation issue.

    Attributes:
        severity: The severity level of the issue
        field: The kind of check that produced the issue (e.g. "overlap")
        message: Human-readable description of the issue
        value: The value that caused the issue
        context: Optional context information (e.g. source line numbers)
    """

    severity: ValidationSeverity
    field: str
    message: str
    value: Any
    context: Optional[Dict[str, Any]] = None

    def __str__(self) -> str:
        """Return the issue as "[SEVERITY] field: message (context)"."""
        context_str = ""
        if self.context:
            context_parts = [f"{k}={v}" for k, v in self.context.items()]
            context_str = f" ({', '.join(context_parts)})"

        return f"[{self.severity.name}] {self.field}: {self.message}{context_str}"


class ValidationReport:
    """Collects and manages validation issues.

    Example:
        >>> report = ValidationReport()
        >>> report.add_error(
        ...     "overlap",
        ...     "line 2 overlaps line 3, ensure start and stop are not the same",
        ...     2,
        ... )
        >>> report.is_valid()
        False
        >>> report.messages()
        ['line 2 overlaps line 3, ensure start and stop are not the same']
    """

    def __init__(self) -> None:
        self.issues: List[ValidationIssue] = []

    @property
    def error_count(self) -> int:
        return sum(
            1 for issue in self.issues if issue.severity == ValidationSeverity.ERROR
        )

    @property
    def warning_count(self) -> int:
        return sum(
            1 for issue in self.issues if issue.severity == ValidationSeverity.WARNING
        )

    def is_valid(self) -> bool:
        """Check if validation passed (no errors).

        Warnings do not affect validity.
        """
        return self.error_count == 0

    def has_errors(self) -> bool:
        return self.error_count > 0

    def has_issues(self) -> bool:
        return bool(self.issues)

    def add_error(
        self,
        field: str,
        message: str,
        value: Any,
        context: Optional[Dict[str, Any]] = None,
    ) -> None:
        """Add an error to the report.

        Args:
            field: The kind of check that failed
            message: Human-readable error description
            value: The value that caused the error
            context: Optional context information
        """
        self.issues.append(
            ValidationIssue(
                severity=ValidationSeverity.ERROR,
                field=field,
                message=message,
                value=value,
                context=context,
            )
        )

    def add_warning(
        self,
        field: str,
        message: str,
        value: Any,
        context: Optional[Dict[str, Any]] = None,
    ) -> None:
        """Add a warning to the report."""
        self.issues.append(
            ValidationIssue(
                severity=ValidationSeverity.WARNING,
                field=field,
                message=message,
                value=value,
                context=context,
            )
        )

    def get_errors(self) -> List[ValidationIssue]:
        return [
            issue for issue in self.issues if issue.severity == ValidationSeverity.ERROR
        ]

    def messages(self) -> List[str]:
        """Get the raw issue messages in the order they were recorded."""
        return [issue.message for issue in self.issues]

    def merge(self, other: "ValidationReport") -> None:
        """Merge another validation report into this one."""
        self.issues.extend(other.issues)

    def summary(self) -> str:
        """Get a summary with counts of errors and warnings."""
        parts = []
        if self.error_count > 0:
            parts.append(f"{self.error_count} error(s)")
        if self.warning_count > 0:
            parts.append(f"{self.warning_count} warning(s)")

        if not parts:
            return "No issues found"

        return ", ".join(parts)

    def format(self) -> str:
        """Format the validation report for display, one message per line."""
        if not self.issues:
            return "Validation successful - no issues found"

        lines = [f"Validation Report - {self.summary()}", "=" * 60]
        for issue in self.issues:
            lines.append(f"  - {issue.message}")
        return "\n".join(lines)
