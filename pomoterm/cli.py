"""pomoterm CLI -- a big-digit Pomodoro timer for the terminal."""

from __future__ import annotations

import logging
import sys
from pathlib import Path
from typing import Optional

import typer
from rich.live import Live

from pomoterm import digits, display
from pomoterm.engine import TimerEngine
from pomoterm.keyboard import KeyboardHandler
from pomoterm.loop import run_loop
from pomoterm.models import TimerConfig
from pomoterm.notify import Notifier

log = logging.getLogger(__name__)

app = typer.Typer(
    name="pomoterm",
    help="Focus and break countdowns in big digits, right in your terminal.",
    no_args_is_help=True,
)


def _setup_logging(log_file: Optional[Path]) -> None:
    """Log to a file only; the terminal belongs to the timer screen."""
    if log_file is None:
        return
    logging.basicConfig(
        filename=str(log_file),
        level=logging.DEBUG,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


def _is_interactive() -> bool:
    return sys.stdin.isatty()


# ---------------------------------------------------------------------------
# Timer
# ---------------------------------------------------------------------------


@app.command()
def start(
    focus: int = typer.Option(
        25, "--focus", "-f", min=1, help="Focus time in minutes"
    ),
    break_minutes: int = typer.Option(
        5, "--break", "-b", min=1, help="Break time in minutes"
    ),
    mute: bool = typer.Option(False, "--mute", help="No chime, just the visual flash"),
    log_file: Optional[Path] = typer.Option(
        None, "--log-file", help="Write debug logs to this file"
    ),
) -> None:
    """Start the timer."""
    _setup_logging(log_file)

    if not _is_interactive():
        display.print_warning("pomoterm needs an interactive terminal.")
        raise typer.Exit(1)

    timer_config = TimerConfig(
        focus_minutes=focus, break_minutes=break_minutes, sound=not mute
    )
    log.info(
        "Starting timer: focus=%d break=%d sound=%s",
        timer_config.focus_minutes,
        timer_config.break_minutes,
        timer_config.sound,
    )

    engine = TimerEngine(timer_config.focus_minutes, timer_config.break_minutes)
    notifier = Notifier(enabled=timer_config.sound)
    try:
        with KeyboardHandler() as keyboard, Live(
            display.build_layout(engine),
            console=display.console,
            screen=True,
            refresh_per_second=10,
        ) as live:
            cycles = run_loop(engine, keyboard, notifier, live)
    except KeyboardInterrupt:
        cycles = engine.total_cycles
    finally:
        notifier.close()

    display.print_success(f"Completed {cycles} focus cycle{'s' if cycles != 1 else ''}.")


@app.command()
def preview(
    value: str = typer.Argument(..., help="MM:SS string or a number of seconds"),
) -> None:
    """Print a time in the big-digit font."""
    text = digits.format_time(int(value)) if value.isdigit() else value
    display.print_digits(text)
