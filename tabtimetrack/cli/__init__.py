"""tabtimetrack CLI.

This module provides a command-line interface for tabtimetrack. It
includes commands for reporting on and validating timesheets.
"""

from typing import Optional

import click

from tabtimetrack import __version__
from tabtimetrack.cli.commands.report import report
from tabtimetrack.cli.commands.validate import validate
from tabtimetrack.cli.error_handlers import with_error_handling
from tabtimetrack.config.logging_config import LoggingConfig, configure_logging
from tabtimetrack.config.settings import get_config


@click.group(
    help="tabtimetrack CLI - Summarize tab-delimited timesheets into reports"
)
@click.version_option(version=__version__)
@click.option(
    "--log-level",
    type=click.Choice(
        ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"], case_sensitive=False
    ),
    default=None,
    help="Logging level (default: LOG_LEVEL setting, WARNING)",
)
def cli(log_level: Optional[str]):
    """tabtimetrack CLI main entry point."""
    with with_error_handling():
        settings = get_config()
        config = LoggingConfig.from_env(default_level=settings.log_level)
        config.log_level = (log_level or settings.log_level).upper()
        configure_logging(config)


# Register commands
cli.add_command(report)
cli.add_command(validate)


def main():
    """Main entry point for the CLI."""
    cli()


if __name__ == "__main__":
    main()
