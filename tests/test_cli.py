"""
Tests for the genpass command line.
"""

import string
from unittest.mock import patch

import pyperclip
import pytest
from click.testing import CliRunner

from genpass.__main__ import cli
from genpass.config import LENGTH_STRONG
from genpass.exceptions import RandomSourceError


@pytest.fixture
def runner():
    """Create a CLI runner, stdout and stderr are captured separately."""
    return CliRunner()


class TestGenerateCommand:
    """Test password generation from the command line."""

    def test_defaults(self, runner):
        result = runner.invoke(cli, [])

        assert result.exit_code == 0
        lines = result.stdout.splitlines()
        assert len(lines) == 1
        assert len(lines[0]) == LENGTH_STRONG

    def test_length_and_times(self, runner):
        result = runner.invoke(cli, ["-l", "10", "-n", "5"])

        assert result.exit_code == 0
        lines = result.stdout.splitlines()
        assert len(lines) == 5
        assert all(len(line) == 10 for line in lines)

    def test_long_options(self, runner):
        result = runner.invoke(cli, ["--length", "12", "--times", "3"])

        assert result.exit_code == 0
        assert [len(line) for line in result.stdout.splitlines()] == [12, 12, 12]

    def test_lowercase_only(self, runner):
        result = runner.invoke(cli, [
            "-l", "32", "--no-symbols", "--no-numbers", "--no-uppercase", "--include-similar",
        ])

        assert result.exit_code == 0
        password = result.stdout.strip()
        assert len(password) == 32
        assert all(c in string.ascii_lowercase for c in password)

    def test_uppercase_default_is_independent_of_symbols(self, runner):
        """Disabling symbols leaves uppercase letters enabled."""
        result = runner.invoke(cli, [
            "-l", "200", "--no-symbols", "--no-numbers", "--no-lowercase",
        ])

        assert result.exit_code == 0
        password = result.stdout.strip()
        assert all(c in string.ascii_uppercase for c in password)

    def test_characters_override(self, runner):
        result = runner.invoke(cli, ["--characters", "01", "-l", "16", "-n", "2"])

        assert result.exit_code == 0
        for line in result.stdout.splitlines():
            assert set(line) <= {"0", "1"}

    def test_times_zero(self, runner):
        result = runner.invoke(cli, ["-n", "0"])

        assert result.exit_code == 0
        assert result.stdout == ""

    def test_help_explains_boolean_flags(self, runner):
        """Help text points out that on/off options take no value."""
        result = runner.invoke(cli, ["--help"])

        assert result.exit_code == 0
        assert "--no-symbols" in result.stdout
        assert "--symbols=false" in result.stdout

    def test_valued_boolean_form_is_rejected(self, runner):
        result = runner.invoke(cli, ["--symbols=false"])

        assert result.exit_code == 2
        assert result.stdout == ""

    def test_show_charset(self, runner):
        result = runner.invoke(cli, ["--show-charset", "--no-symbols"])

        assert result.exit_code == 0
        assert "Character set: lowercase, uppercase, numbers (excluding similar chars)" in result.stderr
        assert len(result.stdout.splitlines()) == 1


class TestErrors:
    """Test error reporting and exit status."""

    def test_empty_configuration(self, runner):
        result = runner.invoke(cli, [
            "--no-symbols", "--no-numbers", "--no-lowercase", "--no-uppercase",
        ])

        assert result.exit_code == 1
        assert "Error: Configuration is empty" in result.stderr
        assert result.stdout == ""

    def test_negative_length(self, runner):
        result = runner.invoke(cli, ["--length=-4"])

        assert result.exit_code == 1
        assert "cannot be negative" in result.stderr

    def test_negative_times_rejected(self, runner):
        result = runner.invoke(cli, ["-n", "-1"])

        assert result.exit_code != 0
        assert result.stdout == ""

    def test_random_source_failure(self, runner):
        with patch("genpass.__main__.PasswordGenerator.generate_many",
                   side_effect=RandomSourceError("Secure random source unavailable: boom")):
            result = runner.invoke(cli, ["-n", "3"])

        assert result.exit_code == 1
        assert "Error: Secure random source unavailable" in result.stderr
        assert result.stdout == ""


class TestClipboard:
    """Test clipboard copying."""

    @patch("pyperclip.copy")
    def test_copy_passwords(self, mock_copy, runner):
        result = runner.invoke(cli, ["-n", "2", "--copy"])

        assert result.exit_code == 0
        passwords = result.stdout.splitlines()
        mock_copy.assert_called_once_with("\n".join(passwords))
        assert "copied to clipboard" in result.stderr

    @patch("pyperclip.copy", side_effect=pyperclip.PyperclipException("no clipboard"))
    def test_copy_failure_is_reported(self, mock_copy, runner):
        result = runner.invoke(cli, ["-c"])

        assert result.exit_code == 0
        assert len(result.stdout.splitlines()) == 1
        assert "Could not copy to clipboard: no clipboard" in result.stderr

    @patch("pyperclip.copy")
    def test_no_copy_by_default(self, mock_copy, runner):
        result = runner.invoke(cli, [])

        assert result.exit_code == 0
        mock_copy.assert_not_called()
