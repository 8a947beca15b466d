"""Output formatting utilities for CLI."""

import click

from tabtimetrack.validators.validation_report import ValidationReport


def format_success(message: str) -> str:
    """Format a success message with green color."""
    return click.style(f"✓ {message}", fg="green", bold=True)


def format_error(message: str) -> str:
    """Format an error message with red color."""
    return click.style(f"✗ {message}", fg="red", bold=True)


def format_warning(message: str) -> str:
    """Format a warning message with yellow color."""
    return click.style(f"⚠ {message}", fg="yellow", bold=True)


def format_info(message: str) -> str:
    """Format an info message with blue color."""
    return click.style(f"ℹ {message}", fg="blue")


def format_issues(report: ValidationReport, max_issues: int = 20) -> str:
    """Format non-fatal issues as a trailing report.

    Args:
        report: Collected issues
        max_issues: Number of issues to list before summarizing the rest

    Returns:
        Multi-line text with a summary header and one issue per line
    """
    lines = [format_warning(f"Issues: {report.summary()}")]
    for issue in report.issues[:max_issues]:
        lines.append(format_error(f"  {issue.message}"))
    if len(report.issues) > max_issues:
        lines.append(f"  ... and {len(report.issues) - max_issues} more")
    return "\n".join(lines)
