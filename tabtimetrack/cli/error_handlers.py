"""Error handling for CLI commands."""

import sys
import traceback
from typing import Optional

import click
from pydantic import ValidationError

from tabtimetrack.calculators.time_utils import RateParseError
from tabtimetrack.cli.utils.formatters import format_error, format_warning
from tabtimetrack.readers.timesheet_parser import TimesheetParseError

# Non-fatal issues (overlaps, breakout conflicts) were found.
ISSUES_EXIT_CODE = 1


class CLIError(Exception):
    """Base exception for CLI errors with user-friendly messages."""

    def __init__(self, message: str, recovery_hint: Optional[str] = None):
        """
        Initialize CLI error.

        Args:
            message: Error message to display
            recovery_hint: Optional hint for recovering from the error
        """
        self.message = message
        self.recovery_hint = recovery_hint
        super().__init__(message)


class ConfigurationError(CLIError):
    """Error related to configuration or command options."""

    pass


def _echo_cli_error(label: str, error: CLIError) -> None:
    click.echo(format_error(f"{label}: {error.message}"), err=True)
    if error.recovery_hint:
        click.echo(format_warning(f"Hint: {error.recovery_hint}"), err=True)


def handle_cli_error(error: BaseException, debug: bool = False) -> int:
    """
    Report an error to the user and choose an exit code.

    Args:
        error: The exception that occurred
        debug: Whether to show full stack trace

    Returns:
        Exit code (2, 3 or 5 for known error types, 130 for cancellation,
        255 otherwise)
    """
    if isinstance(error, ConfigurationError):
        _echo_cli_error("Configuration Error", error)
        return 2

    # Fatal timesheet errors are shown verbatim with their line number
    elif isinstance(error, TimesheetParseError):
        click.echo(format_error(f"Parse Error: {error}"), err=True)
        return 3

    elif isinstance(error, RateParseError):
        click.echo(format_error(f"Invalid Rate: {error}"), err=True)
        click.echo(
            format_warning("Hint: Use a decimal (85.50) or fraction (171/2)"),
            err=True,
        )
        return 2

    elif isinstance(error, ValidationError):
        click.echo(format_error("Configuration Error"), err=True)
        click.echo(str(error), err=True)
        click.echo(
            format_warning("Hint: Check the environment variables and .env file"),
            err=True,
        )
        return 2

    elif isinstance(error, OSError):
        click.echo(format_error(f"File Error: {error}"), err=True)
        return 5

    elif isinstance(error, click.Abort):
        click.echo(format_warning("\nOperation cancelled by user"), err=True)
        return 130  # Standard exit code for SIGINT

    else:
        click.echo(format_error(f"Unexpected Error: {type(error).__name__}"), err=True)
        click.echo(str(error), err=True)

        if debug:
            click.echo("\nFull stack trace:", err=True)
            click.echo(
                "".join(
                    traceback.format_exception(
                        type(error), error, error.__traceback__
                    )
                ),
                err=True,
            )
        else:
            click.echo(
                format_warning("\nRun with --debug flag for full stack trace"),
                err=True,
            )

        return 255


def with_error_handling(debug: bool = False):
    """
    Context manager adding standardized error handling to CLI commands.

    Exceptions raised inside the block are reported with handle_cli_error
    and turned into the matching exit code. SystemExit passes through.

    Args:
        debug: Whether to show full stack traces

    Example:
        @click.command()
        @click.option('--debug', is_flag=True)
        def my_command(debug):
            with with_error_handling(debug):
                # Command implementation
                pass
    """

    class ErrorHandler:
        """Context manager for error handling."""

        def __init__(self, show_debug: bool):
            self.show_debug = show_debug

        def __enter__(self):
            return self

        def __exit__(self, exc_type, exc_val, exc_tb):
            if isinstance(exc_val, Exception):
                exit_code = handle_cli_error(exc_val, self.show_debug)
                sys.exit(exit_code)
            return False  # Don't suppress other exceptions

    return ErrorHandler(debug)
