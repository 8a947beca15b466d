"""CLI commands."""

from tabtimetrack.cli.commands.report import report
from tabtimetrack.cli.commands.validate import validate

__all__ = ["report", "validate"]
