"""Tests for the rich layout and print helpers."""

from __future__ import annotations

from rich.console import Console

from pomoterm import display
from pomoterm.engine import TimerEngine
from pomoterm.models import Phase


def _render(renderable, width: int = 120, height: int = 30) -> str:
    console = Console(width=width, height=height, record=True, color_system=None)
    console.print(renderable)
    return console.export_text()


class TestHeader:
    def test_normal(self) -> None:
        assert "POMODORO TIMER" in display.header_text(False).plain

    def test_flashing(self) -> None:
        text = display.header_text(True)
        assert "NOTIFICATION!" in text.plain
        assert "yellow" in str(text.style)


class TestPhasePanel:
    def test_active_title(self) -> None:
        panel = display.phase_panel(Phase.FOCUS, 1500, Phase.FOCUS)
        assert "⚡" in str(panel.title)
        assert panel.border_style == "green"

    def test_inactive_title(self) -> None:
        panel = display.phase_panel(Phase.BREAK, 300, Phase.FOCUS)
        assert panel.title == "BREAK TIME"
        assert panel.border_style == "bright_black"

    def test_paused_dims_both(self) -> None:
        focus = display.phase_panel(Phase.FOCUS, 1500, Phase.PAUSED)
        brk = display.phase_panel(Phase.BREAK, 300, Phase.PAUSED)
        assert focus.border_style == brk.border_style == "bright_black"


class TestFooter:
    def test_contents(self, engine: TimerEngine) -> None:
        text = display.footer_text(engine).plain
        assert "Cycles: 0" in text
        assert "Focus: 25min" in text
        assert "Break: 5min" in text
        assert "SPACE: Pause" in text

    def test_resume_hint_when_paused(self, engine: TimerEngine) -> None:
        engine.toggle_pause()
        assert "SPACE: Resume" in display.footer_text(engine).plain


class TestBuildLayout:
    def test_renders_without_mutating(self, engine: TimerEngine) -> None:
        before = (engine.phase, engine.focus_remaining, engine.last_update)
        output = _render(display.build_layout(engine), height=40)
        assert "FOCUS TIME" in output
        assert "BREAK TIME" in output
        assert "██" in output
        assert (engine.phase, engine.focus_remaining, engine.last_update) == before


class TestPrintHelpers:
    def test_print_digits(self, capsys) -> None:
        display.print_digits("12:34")
        assert "██" in capsys.readouterr().out
