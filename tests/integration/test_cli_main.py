#!/usr/bin/env python3
"""
Integration tests for CLI Main Entry Point

Tests end-to-end CLI command execution with real command invocation.
"""

import pytest
from click.testing import CliRunner

from fairs.cli.main import main


@pytest.mark.integration
class TestCLIMainIntegration:
    """Test main CLI entry point with real command execution."""

    def setup_method(self):
        """Set up test environment."""
        self.runner = CliRunner()

    def test_help_command_lists_all_subcommands(self):
        result = self.runner.invoke(main, ["--help"])

        assert result.exit_code == 0
        assert "Fairs - Expense Splitting" in result.output
        for command in ["allocate", "summary", "scan", "groups", "version", "config"]:
            assert command in result.output

    def test_version_command_shows_version_info(self):
        result = self.runner.invoke(main, ["version"])

        assert result.exit_code == 0
        assert "Fairs v" in result.output
        assert "Author:" in result.output

    def test_config_command_shows_configuration(self, tmp_path):
        result = self.runner.invoke(main, ["config"])

        assert result.exit_code == 0
        assert "Current Configuration:" in result.output
        assert "Environment: test" in result.output
        assert f"Data Directory: {tmp_path / 'fairs_data'}" in result.output
        assert "Currency: EUR (€)" in result.output
        assert "Scan Max Price: 999" in result.output
        assert "Debug Mode:" in result.output
        assert "Log Level:" in result.output

    def test_verbose_flag_enables_verbose_output(self):
        result = self.runner.invoke(main, ["--verbose", "version"])

        assert result.exit_code == 0
        assert "Environment: test" in result.output
        assert "Data directory:" in result.output

    def test_invalid_configuration_fails(self, monkeypatch):
        """Test an unknown currency code is rejected at startup."""
        monkeypatch.setenv("FAIRS_CURRENCY", "XYZ")

        result = self.runner.invoke(main, ["config"])

        assert result.exit_code != 0
        assert isinstance(result.exception, ValueError)
        assert "Unknown currency code: XYZ" in str(result.exception)

    def test_invalid_command_shows_error(self):
        result = self.runner.invoke(main, ["invalid-command"])

        assert result.exit_code != 0
        assert "No such command" in result.output
