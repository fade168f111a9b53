"""Tests for CLI commands."""

from __future__ import annotations

from pathlib import Path
from unittest.mock import patch

import pytest
from typer.testing import CliRunner

from pomoterm.cli import app

runner = CliRunner()


@pytest.fixture()
def fake_terminal():
    """Stub out the terminal so start runs without a TTY."""
    with patch("pomoterm.cli._is_interactive", return_value=True), patch(
        "pomoterm.cli.KeyboardHandler"
    ), patch("pomoterm.cli.Live"), patch("pomoterm.cli.run_loop", return_value=2) as loop:
        yield loop


class TestStart:
    def test_requires_tty(self) -> None:
        result = runner.invoke(app, ["start"])
        assert result.exit_code == 1
        assert "interactive terminal" in result.output

    def test_defaults(self, fake_terminal) -> None:
        result = runner.invoke(app, ["start"])
        assert result.exit_code == 0
        engine, _, notifier, _ = fake_terminal.call_args.args
        assert engine.focus_duration == 25 * 60
        assert engine.break_duration == 5 * 60
        assert notifier.enabled is True
        assert "Completed 2 focus cycles" in result.output

    def test_options_override(self, fake_terminal) -> None:
        result = runner.invoke(app, ["start", "-f", "50", "-b", "10", "--mute"])
        assert result.exit_code == 0
        engine, _, notifier, _ = fake_terminal.call_args.args
        assert engine.focus_minutes == 50
        assert engine.break_minutes == 10
        assert notifier.enabled is False

    def test_rejects_zero_minutes(self, fake_terminal) -> None:
        result = runner.invoke(app, ["start", "--focus", "0"])
        assert result.exit_code != 0
        fake_terminal.assert_not_called()

    def test_ctrl_c_quits_cleanly(self, fake_terminal) -> None:
        fake_terminal.side_effect = KeyboardInterrupt
        result = runner.invoke(app, ["start"])
        assert result.exit_code == 0
        assert "Completed 0 focus cycles" in result.output

    def test_log_file(self, fake_terminal, tmp_path: Path) -> None:
        log_file = tmp_path / "pomoterm.log"
        with patch("pomoterm.cli.logging.basicConfig") as mock_basic:
            result = runner.invoke(app, ["start", "--log-file", str(log_file)])
        assert result.exit_code == 0
        assert mock_basic.call_args.kwargs["filename"] == str(log_file)


class TestPreview:
    def test_seconds(self) -> None:
        result = runner.invoke(app, ["preview", "65"])
        assert result.exit_code == 0
        assert "██" in result.output

    def test_clock_string(self) -> None:
        result = runner.invoke(app, ["preview", "25:00"])
        assert result.exit_code == 0
        assert len(result.output.strip().splitlines()) == 5


class TestCommandSet:
    def test_no_config_command(self) -> None:
        result = runner.invoke(app, ["config", "--show"])
        assert result.exit_code != 0
