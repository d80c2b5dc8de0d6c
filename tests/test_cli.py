"""Tests for CLI commands in natives_tui/cli/main.py."""

import pytest
from click.testing import CliRunner

from natives_tui.cli.main import main
from natives_tui.clients import MockNativesClient


@pytest.fixture
def cli_runner():
    """Create Click CliRunner."""
    return CliRunner()


@pytest.fixture
def config_args(tmp_path):
    """Point the CLI at a config file with a fast retry policy."""
    path = tmp_path / "config.toml"
    path.write_text("[loader]\nmax_retries = 1\nretry_delay = 0\n")
    return ["--config", str(path)]


@pytest.fixture
def failing_source(monkeypatch):
    """Make --mock use a source that always fails."""
    monkeypatch.setattr(
        "natives_tui.clients.MockNativesClient",
        lambda: MockNativesClient(fail_times=-1),
    )


class TestMainEntry:
    """Tests for the main entry point and global options."""

    def test_help_option(self, cli_runner):
        """Test --help shows usage information."""
        result = cli_runner.invoke(main, ["--help"])
        assert result.exit_code == 0
        assert "alt:V natives" in result.output

    def test_version_option(self, cli_runner):
        result = cli_runner.invoke(main, ["--version"])
        assert result.exit_code == 0
        assert "natives-tui" in result.output

    def test_invalid_config_is_usage_error(self, cli_runner, tmp_path):
        """Test a broken config file is reported as a usage error."""
        path = tmp_path / "config.toml"
        path.write_text("[search]\nmax_results = 0\n")
        result = cli_runner.invoke(main, ["--config", str(path), "--mock", "status"])
        assert result.exit_code == 2
        assert "max_results" in result.output

    def test_no_command_runs_tui(self, cli_runner, config_args, monkeypatch):
        """Test running without a subcommand opens the TUI."""
        launched = []
        monkeypatch.setattr("natives_tui.tui.app.NativesApp.run", lambda self: launched.append(self))
        result = cli_runner.invoke(main, [*config_args, "--mock"])
        assert result.exit_code == 0
        assert len(launched) == 1


class TestSearchCommand:
    """Tests for the search command."""

    def test_search_prints_matches(self, cli_runner, config_args):
        """Test matching natives are listed with key and subtitle."""
        result = cli_runner.invoke(
            main, [*config_args, "--mock", "search", "--no-color", "entity", "visible"]
        )
        assert result.exit_code == 0
        assert "setEntityVisible  0xEA1C610A04DB6BBB" in result.output
        assert "Sets the visibility of an entity." in result.output
        assert "isEntityVisible" in result.output
        assert "no description" in result.output
        assert "2 match(es)" in result.output

    def test_search_by_hash(self, cli_runner, config_args):
        result = cli_runner.invoke(main, [*config_args, "--mock", "search", "0XDD75460A"])
        assert result.exit_code == 0
        assert "createVehicle" in result.output
        assert "1 match(es)" in result.output

    def test_search_limit(self, cli_runner, config_args):
        """Test --limit truncates the printed rows but reports the total."""
        result = cli_runner.invoke(main, [*config_args, "--mock", "search", "--limit", "2"])
        assert result.exit_code == 0
        assert "2 of 9 match(es)" in result.output

    def test_search_negative_limit_rejected(self, cli_runner, config_args):
        """Test a negative --limit is a usage error rather than a tail slice."""
        result = cli_runner.invoke(main, [*config_args, "--mock", "search", "--limit", "-3"])
        assert result.exit_code == 2
        assert "--limit" in result.output

    def test_search_no_matches(self, cli_runner, config_args):
        result = cli_runner.invoke(main, [*config_args, "--mock", "search", "nothinglikethis"])
        assert result.exit_code == 0
        assert "0 match(es)" in result.output

    def test_search_failed_load(self, cli_runner, config_args, failing_source):
        """Test a dead source exits non-zero with the failure row text."""
        result = cli_runner.invoke(main, [*config_args, "--mock", "search", "entity"])
        assert result.exit_code == 1
        assert "Failed to initialize (attempt 2)" in result.output


class TestLinkCommand:
    """Tests for the link command."""

    def test_link_known_key(self, cli_runner, config_args):
        result = cli_runner.invoke(main, [*config_args, "--mock", "link", "0xEA1C610A04DB6BBB"])
        assert result.exit_code == 0
        assert result.output.strip() == "https://natives.altv.mp/#/0xEA1C610A04DB6BBB"

    def test_link_unknown_key(self, cli_runner, config_args):
        result = cli_runner.invoke(main, [*config_args, "--mock", "link", "0xDEAD"])
        assert result.exit_code == 1
        assert "Unknown native: 0xDEAD" in result.output


class TestStatusCommand:
    """Tests for the status command."""

    def test_status_ready(self, cli_runner, config_args):
        result = cli_runner.invoke(main, [*config_args, "--mock", "status"])
        assert result.exit_code == 0
        assert "mock://natives" in result.output
        assert "State:   Ready" in result.output
        assert "9 natives loaded" in result.output

    def test_status_failed(self, cli_runner, config_args, failing_source):
        result = cli_runner.invoke(main, [*config_args, "--mock", "status"])
        assert result.exit_code == 1
        assert "Failed (2 failed attempt(s))" in result.output
