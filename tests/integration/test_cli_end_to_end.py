"""End-to-end tests — the ``versioncheck`` command against real shell commands.

Exercises config loading, command execution, extraction, comparison and
exit codes together via typer.testing.CliRunner.
"""

from __future__ import annotations

from pathlib import Path

from typer.testing import CliRunner

from versioncheck import __version__
from versioncheck.cli.app import app

runner = CliRunner()


class TestCliEndToEnd:
    def test_matching_version(self, write_config):
        path = write_config(
            [{"name": "FullVersion", "command": "echo 'FullVersion 1.22.3'", "expect": "1.22.3"}]
        )
        result = runner.invoke(app, ["--config", str(path)])
        assert result.exit_code == 0
        assert "Versions OK" in result.output

    def test_non_existent_binary(self, write_config):
        path = write_config(
            [{"name": "ErrorCommand", "command": "non_existent_command", "expect": "1.0.0"}]
        )
        result = runner.invoke(app, ["-c", str(path)])
        assert result.exit_code == 1
        assert "Error executing command for ErrorCommand" in result.output
        assert "Versions OK" not in result.output

    def test_one_match_one_mismatch(self, write_config):
        path = write_config(
            [
                {"name": "FullVersion", "command": "echo 'FullVersion 1.22.3'", "expect": "1.22.3"},
                {"name": "VersionMismatch", "command": "echo 'VersionMismatch 1.22.4'", "expect": "1.22.3"},
            ]
        )
        result = runner.invoke(app, ["--config", str(path)])
        assert result.exit_code == 1
        mismatch_lines = [
            line for line in result.output.splitlines() if "version mismatch" in line
        ]
        assert mismatch_lines == [
            "VersionMismatch version mismatch: Expected '1.22.3', got '1.22.4'"
        ]
        assert "Command output: VersionMismatch 1.22.4" in result.output
        assert "Versions OK" not in result.output

    def test_no_version_found(self, write_config):
        path = write_config(
            [{"name": "Quiet", "command": "echo 'Tool (no version) [beta]'", "expect": "1.0"}]
        )
        result = runner.invoke(app, ["--config", str(path)])
        assert result.exit_code == 1
        assert "Quiet: No version found in output" in result.output
        assert "Command output: Tool (no version) [beta]" in result.output

    def test_failures_do_not_stop_later_checks(self, write_config):
        path = write_config(
            [
                {"name": "First", "command": "non_existent_command", "expect": "1.0"},
                {"name": "Second", "command": "echo 'Second 2.0'", "expect": "3.0"},
            ]
        )
        result = runner.invoke(app, ["--config", str(path)])
        assert result.exit_code == 1
        assert "First" in result.output
        assert "Second version mismatch" in result.output

    def test_unquoted_trailing_zero_version(self, tmp_path: Path):
        """`expect: 1.20` is compared as written, not as the number 1.2."""
        path = tmp_path / "tools.yaml"
        path.write_text("tools:\n  - name: Go\n    command: echo 'go1.20'\n    expect: 1.20\n")
        result = runner.invoke(app, ["--config", str(path)])
        assert result.exit_code == 0
        assert "Versions OK" in result.output

    def test_unquoted_version_does_not_lose_zero(self, tmp_path: Path):
        path = tmp_path / "tools.yaml"
        path.write_text("tools:\n  - name: Tool\n    command: echo 'Tool 1.1'\n    expect: 1.10\n")
        result = runner.invoke(app, ["--config", str(path)])
        assert result.exit_code == 1
        assert "Tool version mismatch: Expected '1.10', got '1.1'" in result.output

    def test_command_output_printed_verbatim(self, write_config):
        path = write_config(
            [{"name": "Tabbed", "command": "printf 'a\\tb 1.0'", "expect": "2.0"}]
        )
        result = runner.invoke(app, ["--config", str(path)])
        assert result.exit_code == 1
        assert "Command output: a\tb 1.0\n" in result.output

    def test_missing_config_file(self, tmp_path: Path):
        result = runner.invoke(app, ["--config", str(tmp_path / "nope.yaml")])
        assert result.exit_code == 1
        assert "Failed to read config file" in result.output
        assert "Versions OK" not in result.output

    def test_default_config_path(self, tmp_path: Path):
        """Without --config, ./config.yaml is read."""
        (tmp_path / "config.yaml").write_text(
            "tools:\n  - name: Tool\n    command: echo 'Tool v2.0.1'\n    expect: '2.0.1'\n"
        )
        result = runner.invoke(app, [])
        assert result.exit_code == 0
        assert "Versions OK" in result.output

    def test_config_path_from_env(self, tmp_path: Path, write_config, monkeypatch):
        path = write_config(
            [{"name": "Tool", "command": "echo 'Tool 5'", "expect": "5"}], name="env.yaml"
        )
        monkeypatch.setenv("VERSIONCHECK_CONFIG_PATH", str(path))
        result = runner.invoke(app, [])
        assert result.exit_code == 0

    def test_version_flag(self):
        result = runner.invoke(app, ["--version"])
        assert result.exit_code == 0
        assert __version__ in result.output

    def test_help(self):
        result = runner.invoke(app, ["--help"])
        assert result.exit_code == 0
        assert "--config" in result.output
        assert "installed software" in result.output
