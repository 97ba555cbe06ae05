"""Integration tests for the command-line interface."""

import pytest
from click.testing import CliRunner

from biguint import __version__
from biguint.cli import main


@pytest.fixture
def runner() -> CliRunner:
    return CliRunner()


@pytest.fixture
def no_config(tmp_path) -> list[str]:
    """Point the CLI at a config path that does not exist."""
    return ["--config", str(tmp_path / "none.yaml")]


class TestRun:
    """Tests for the stdin driver."""

    def test_sum_then_difference(self, runner: CliRunner, no_config: list[str]) -> None:
        """Test that run prints the sum and then the difference."""
        result = runner.invoke(main, [*no_config, "run"], input="1000 999\n")
        assert result.exit_code == 0
        assert result.output.splitlines() == ["1999", "1"]

    def test_smaller_first(self, runner: CliRunner, no_config: list[str]) -> None:
        """Test that the difference is a magnitude."""
        result = runner.invoke(main, [*no_config, "run"], input="3\n10\n")
        assert result.exit_code == 0
        assert result.output.splitlines() == ["13", "7"]

    def test_missing_number(self, runner: CliRunner, no_config: list[str]) -> None:
        """Test that a single token is an error."""
        result = runner.invoke(main, [*no_config, "run"], input="5\n")
        assert result.exit_code == 1
        assert "expected two numbers" in result.output

    def test_invalid_number(self, runner: CliRunner, no_config: list[str]) -> None:
        """Test that a non-digit token is an error."""
        result = runner.invoke(main, [*no_config, "run"], input="12 x4\n")
        assert result.exit_code == 1
        assert "invalid digit" in result.output


class TestCommands:
    """Tests for the single-operation commands."""

    def test_add(self, runner: CliRunner, no_config: list[str]) -> None:
        result = runner.invoke(main, [*no_config, "add", "9", "1"])
        assert result.exit_code == 0
        assert result.output.strip() == "10"

    def test_sub(self, runner: CliRunner, no_config: list[str]) -> None:
        result = runner.invoke(main, [*no_config, "sub", "100", "1"])
        assert result.exit_code == 0
        assert result.output.strip() == "99"

    def test_compare(self, runner: CliRunner, no_config: list[str]) -> None:
        result = runner.invoke(main, [*no_config, "compare", "42", "042"])
        assert result.exit_code == 0
        assert result.output.strip() == "equal"

        result = runner.invoke(main, [*no_config, "compare", "41", "42"])
        assert result.output.strip() == "less"

    def test_inspect(self, runner: CliRunner, no_config: list[str]) -> None:
        result = runner.invoke(main, [*no_config, "inspect", "907"])
        assert result.exit_code == 0
        assert "offset 500, length 3" in result.output
        assert "Limbs" in result.output

    def test_version(self, runner: CliRunner, no_config: list[str]) -> None:
        result = runner.invoke(main, [*no_config, "version"])
        assert result.exit_code == 0
        assert __version__ in result.output


class TestConfig:
    """Tests for config handling in the CLI."""

    def test_init_writes_config(self, runner: CliRunner, tmp_path) -> None:
        """Test that init creates a config file."""
        output = tmp_path / ".biguint.yaml"
        result = runner.invoke(main, ["init", str(output)])
        assert result.exit_code == 0
        assert output.exists()
        assert "digits_per_limb" in output.read_text()

    def test_config_changes_limb_width(self, runner: CliRunner, tmp_path) -> None:
        """Test that a config file changes the limb base."""
        path = tmp_path / ".biguint.yaml"
        path.write_text("limbs:\n  digits_per_limb: 4\n")
        result = runner.invoke(main, ["--config", str(path), "inspect", "123456789"])
        assert result.exit_code == 0
        assert "Base: 10000" in result.output

        result = runner.invoke(main, ["--config", str(path), "add", "99999999", "1"])
        assert result.output.strip() == "100000000"

    def test_capacity_exhausted(self, runner: CliRunner, tmp_path) -> None:
        """Test that arena exhaustion under the raise policy exits with an error."""
        path = tmp_path / ".biguint.yaml"
        path.write_text("arena:\n  capacity: 4\n  on_exhausted: raise\n")
        result = runner.invoke(main, ["--config", str(path), "add", "12345", "1"])
        assert result.exit_code == 1
        assert "arena exhausted" in result.output

    def test_malformed_yaml_config(self, runner: CliRunner, tmp_path) -> None:
        """Test that a config with broken YAML syntax is reported."""
        path = tmp_path / ".biguint.yaml"
        path.write_text("limbs: [\n")
        result = runner.invoke(main, ["--config", str(path), "add", "1", "2"])
        assert result.exit_code == 1
        assert isinstance(result.exception, SystemExit)
        assert "Invalid config" in result.output

    def test_invalid_config(self, runner: CliRunner, tmp_path) -> None:
        """Test that a bad config value is reported."""
        path = tmp_path / ".biguint.yaml"
        path.write_text("limbs:\n  digits_per_limb: 40\n")
        result = runner.invoke(main, ["--config", str(path), "add", "1", "2"])
        assert result.exit_code == 1
        assert "Invalid config" in result.output
