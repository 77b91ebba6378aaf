"""
Tests for the passmint command line interface.
"""

import pytest
from click.testing import CliRunner

from passmint.__main__ import cli


@pytest.fixture
def runner():
    """Create a CLI runner."""
    return CliRunner()


class TestGenerateCommand:
    """Test the generate command."""

    def test_plain_output(self, runner):
        """Test printing passwords only."""
        result = runner.invoke(cli, ["generate", "--plain", "-l", "12", "-n", "3"])

        assert result.exit_code == 0
        lines = result.output.splitlines()
        assert len(lines) == 3
        assert all(len(line) == 12 for line in lines)
        assert len(set(lines)) == 3

    def test_strength_output(self, runner):
        """Test that each password is followed by its strength."""
        result = runner.invoke(cli, ["generate", "-l", "8", "--no-numbers", "--no-uppercase"])

        assert result.exit_code == 0
        lines = result.output.splitlines()
        assert len(lines) == 5
        for line in lines:
            password, strength = line.split("  ", 1)
            assert len(password) == 8
            assert "Weak (37.60 bits)" in strength

    def test_no_character_types(self, runner):
        """Test that selecting nothing is an error."""
        result = runner.invoke(cli, ["generate", "--no-numbers", "--no-lowercase", "--no-uppercase"])

        assert result.exit_code == 1
        assert "No character types selected" in result.output

    def test_length_exceeds_alphabet(self, runner):
        """Test the duplicate-free length check."""
        result = runner.invoke(cli, ["generate", "-l", "15", "--no-lowercase",
                                     "--no-uppercase", "--no-duplicates"])

        assert result.exit_code == 1
        assert "without duplicates" in result.output

    def test_length_out_of_range(self, runner):
        """Test that click rejects lengths outside the host range."""
        result = runner.invoke(cli, ["generate", "-l", "61"])
        assert result.exit_code == 2

    def test_partial_yield_warning(self, runner):
        """Test that a partial yield still prints passwords and warns."""
        result = runner.invoke(cli, ["generate", "--plain", "-l", "6", "-n", "10",
                                     "--max-attempts", "1", "--no-lowercase",
                                     "--no-uppercase"])

        assert result.exit_code == 0
        assert "Warning: Could only generate 1 of 10" in result.output

    def test_empty_symbol_class(self, runner):
        """Test that symbols emptied by the similar filter report an error."""
        result = runner.invoke(cli, ["generate", "--no-numbers", "--no-lowercase",
                                     "--no-uppercase", "-s", "--symbol-set", "1lo",
                                     "--exclude-similar"])

        assert result.exit_code == 1
        assert isinstance(result.exception, SystemExit)
        assert "symbols character type has no characters" in result.output

    def test_no_sequential_digits_full_length(self, runner):
        """Test no-sequential digits at the longest length."""
        result = runner.invoke(cli, ["generate", "--plain", "-l", "60", "--no-lowercase",
                                     "--no-uppercase", "--no-sequential"])

        assert result.exit_code == 0
        lines = result.output.splitlines()
        assert len(lines) == 5
        assert all(len(line) == 60 for line in lines)

    def test_env_var_default(self, runner):
        """Test reading options from the environment."""
        result = runner.invoke(cli, ["generate", "--plain"],
                               env={"PASSMINT_GENERATE_LENGTH": "20"},
                               auto_envvar_prefix="PASSMINT")

        assert result.exit_code == 0
        assert all(len(line) == 20 for line in result.output.splitlines())


class TestInfoCommand:
    """Test the info command."""

    def test_all_types_exclude_similar(self, runner):
        """Test alphabet size and strength display."""
        result = runner.invoke(cli, ["info", "-l", "20", "--symbols", "--exclude-similar"])

        assert result.exit_code == 0
        assert "Alphabet size: 84" in result.output
        assert "Very Strong" in result.output
        assert "excluding similar chars" in result.output

    def test_info_notes_infeasible_length(self, runner):
        """Test that info reports a length the alphabet cannot hold."""
        result = runner.invoke(cli, ["info", "-l", "15", "--no-lowercase",
                                     "--no-uppercase", "--no-duplicates"])

        assert result.exit_code == 0
        assert "exceeds the alphabet" in result.output

    def test_info_unique_bound(self, runner):
        """Test the bound on distinct passwords."""
        result = runner.invoke(cli, ["info", "-l", "6", "--no-lowercase", "--no-uppercase"])

        assert result.exit_code == 0
        assert "Possible passwords: at most 1,000,000" in result.output

    def test_info_unique_bound_large(self, runner):
        """Test that large bounds are shown as a power of ten."""
        result = runner.invoke(cli, ["info", "-l", "20"])

        assert result.exit_code == 0
        assert "Possible passwords: at most ~10^35" in result.output
