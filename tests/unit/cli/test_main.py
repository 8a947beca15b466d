"""Unit tests for CLI main entry point."""

import logging

import pytest
from click.testing import CliRunner

from tabtimetrack import __version__
from tabtimetrack.cli import cli


class TestCLIMain:
    """Test suite for CLI main entry point."""

    @pytest.fixture
    def runner(self):
        """Create a Click CLI test runner."""
        return CliRunner()

    def test_cli_group_exists(self, runner):
        """Test that CLI group exists and can be invoked."""
        result = runner.invoke(cli, ["--help"])
        assert result.exit_code == 0
        assert "Usage:" in result.output

    def test_cli_help_text(self, runner):
        """Test that CLI help text is informative."""
        result = runner.invoke(cli, ["--help"])
        assert result.exit_code == 0
        assert "tab-delimited timesheets" in result.output
        assert "Commands:" in result.output

    def test_cli_version_flag(self, runner):
        """Test that --version flag works."""
        result = runner.invoke(cli, ["--version"])
        assert result.exit_code == 0
        assert __version__ in result.output

    def test_cli_has_report_command(self, runner):
        """Test that report command is registered."""
        result = runner.invoke(cli, ["--help"])
        assert "report" in result.output

    def test_cli_has_validate_command(self, runner):
        """Test that validate command is registered."""
        result = runner.invoke(cli, ["--help"])
        assert "validate" in result.output

    def test_log_level_option(self, runner, mock_env, timesheet_file):
        """Test that --log-level configures the root logger."""
        result = runner.invoke(
            cli, ["--log-level", "error", "validate", "-f", str(timesheet_file)]
        )
        assert result.exit_code == 0
        assert logging.getLogger().level == logging.ERROR

    def test_invalid_log_level(self, runner):
        """Test that unknown levels are rejected by click."""
        result = runner.invoke(cli, ["--log-level", "VERBOSE", "report"])
        assert result.exit_code == 2

    def test_log_level_from_settings(
        self, runner, mock_env, monkeypatch, timesheet_file
    ):
        """Test that LOG_LEVEL applies when --log-level is not given."""
        monkeypatch.setenv("LOG_LEVEL", "info")
        result = runner.invoke(cli, ["validate", "-f", str(timesheet_file)])
        assert result.exit_code == 0
        assert logging.getLogger().level == logging.INFO

    def test_log_level_option_overrides_settings(
        self, runner, mock_env, monkeypatch, timesheet_file
    ):
        """Test that --log-level wins over LOG_LEVEL."""
        monkeypatch.setenv("LOG_LEVEL", "INFO")
        result = runner.invoke(
            cli, ["--log-level", "ERROR", "validate", "-f", str(timesheet_file)]
        )
        assert result.exit_code == 0
        assert logging.getLogger().level == logging.ERROR
