"""Rich terminal formatting helpers and the full-screen timer layout."""

from __future__ import annotations

from rich.align import Align
from rich.console import Console
from rich.layout import Layout
from rich.panel import Panel
from rich.text import Text

from pomoterm import digits
from pomoterm.commands import KEY_HINTS
from pomoterm.engine import TimerEngine
from pomoterm.models import Phase

console = Console()

_INACTIVE_STYLE = "bright_black"

_ACTIVE_STYLE: dict[Phase, str] = {
    Phase.FOCUS: "bold green",
    Phase.BREAK: "bold yellow",
}

_BORDER_STYLE: dict[Phase, str] = {
    Phase.FOCUS: "green",
    Phase.BREAK: "yellow",
}

_TITLES: dict[Phase, tuple[str, str]] = {
    Phase.FOCUS: ("FOCUS TIME", "FOCUS TIME ⚡"),
    Phase.BREAK: ("BREAK TIME", "BREAK TIME ☕"),
}


def header_text(flash_active: bool) -> Text:
    """Banner text; switches to a notification while the flash is on."""
    if flash_active:
        return Text("🔔 NOTIFICATION! 🔔", style="bold yellow", justify="center")
    return Text("🍅 POMODORO TIMER 🍅", style="bold red", justify="center")


def phase_panel(phase: Phase, remaining: int, current: Phase) -> Panel:
    """Big-digit countdown for one phase, highlighted when it is running."""
    active = phase is current
    inactive_title, active_title = _TITLES[phase]
    style = _ACTIVE_STYLE[phase] if active else _INACTIVE_STYLE
    rows = digits.render(digits.format_time(remaining))
    body = Text("\n".join(rows), style=style, justify="center")
    return Panel(
        Align.center(body, vertical="middle"),
        title=active_title if active else inactive_title,
        border_style=_BORDER_STYLE[phase] if active else _INACTIVE_STYLE,
    )


def footer_text(engine: TimerEngine) -> Text:
    """Cycle count, configured lengths and key hints."""
    pause_hint = "SPACE: Resume" if engine.is_paused else "SPACE: Pause"
    line = (
        f"Cycles: {engine.total_cycles} | "
        f"Focus: {engine.focus_minutes}min | Break: {engine.break_minutes}min | "
        f"{KEY_HINTS} | {pause_hint} | R: Reset | Q: Quit"
    )
    return Text(line, style="cyan", justify="center")


def build_layout(engine: TimerEngine) -> Layout:
    """Compose the whole screen from engine state. Does not touch the engine."""
    layout = Layout()
    layout.split_column(
        Layout(name="header", size=3),
        Layout(name="focus", minimum_size=8),
        Layout(name="break", minimum_size=8),
        Layout(name="footer", size=3),
    )
    layout["header"].update(Panel(header_text(engine.flash_active), border_style="cyan"))
    layout["focus"].update(phase_panel(Phase.FOCUS, engine.focus_remaining, engine.phase))
    layout["break"].update(phase_panel(Phase.BREAK, engine.break_remaining, engine.phase))
    layout["footer"].update(Panel(footer_text(engine), border_style="cyan"))
    return layout


def print_digits(time_string: str, style: str = "bold green") -> None:
    """Print a big-digit rendering outside the full-screen view."""
    rows = digits.render(time_string)
    console.print(Text("\n".join(rows), style=style))


def print_success(message: str) -> None:
    """Print a success message."""
    console.print(f"[green]{message}[/green]")


def print_info(message: str) -> None:
    """Print an informational message."""
    console.print(f"[blue]{message}[/blue]")


def print_warning(message: str) -> None:
    """Print a warning message."""
    console.print(f"[yellow]{message}[/yellow]")
