"""Unit tests for validate command."""

import pytest
from click.testing import CliRunner

from tabtimetrack.cli.commands.validate import validate


class TestValidateCommand:
    """Test suite for validate command."""

    @pytest.fixture
    def runner(self):
        """Create a Click CLI test runner."""
        return CliRunner()

    def test_validate_clean_timesheet(self, runner, mock_env, timesheet_file):
        """Test the summary of a timesheet without issues."""
        result = runner.invoke(validate, ["-f", str(timesheet_file)])
        assert result.exit_code == 0
        assert "Validating" in result.output
        assert "Title:            August client work" in result.output
        assert "Time lines:       4" in result.output
        assert "Breakout tasks:   1" in result.output
        assert "Buckets:          9" in result.output
        assert "Timesheet is valid" in result.output

    def test_validate_reports_overlap(self, runner, mock_env, tmp_path):
        """Test that overlapping lines fail validation."""
        path = tmp_path / "overlap.txt"
        path.write_bytes(b"2023-08-01\t08:00\t09:00\n2023-08-01\t08:30\t10:00\n")
        result = runner.invoke(validate, ["-f", str(path)])
        assert result.exit_code == 1
        assert "Issues:           1" in result.output
        assert "line 1 overlaps line 2" in result.output

    def test_validate_reports_breakout_conflict(self, runner, mock_env, tmp_path):
        """Test that mixed breakout references fail validation."""
        path = tmp_path / "conflict.txt"
        path.write_bytes(
            b"@breakout\t[1] One. [2] Two\n"
            b"2023-08-01\t08:00\t09:00\t[1] a. [2] b.\n"
        )
        result = runner.invoke(validate, ["-f", str(path)])
        assert result.exit_code == 1
        assert "sum line 2: multiple different breakout references" in result.output

    def test_validate_parse_error(self, runner, mock_env, tmp_path):
        """Test that structural errors exit with code 3."""
        path = tmp_path / "broken.txt"
        path.write_bytes(b"Title\n@foo\tbar\n")
        result = runner.invoke(validate, ["-f", str(path)])
        assert result.exit_code == 3
        assert "line 2: unknown command @foo" in result.output

    def test_validate_max_line_hours(self, runner, mock_env, monkeypatch, tmp_path):
        """Test that MAX_LINE_HOURS tightens the duration check."""
        monkeypatch.setenv("MAX_LINE_HOURS", "1")
        path = tmp_path / "long.txt"
        path.write_bytes(b"2023-08-01\t08:00\t09:30\n")
        result = runner.invoke(validate, ["-f", str(path)])
        assert result.exit_code == 3
        assert "duration larger than 1:00:00, this must be a mistake" in result.output
