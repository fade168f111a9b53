"""Key bindings and command application for the running timer."""

from __future__ import annotations

from typing import Optional

from pomoterm.engine import TimerEngine
from pomoterm.models import Command

MIN_MINUTES = 1

KEY_BINDINGS: dict[str, Command] = {
    "q": Command.QUIT,
    " ": Command.TOGGLE_PAUSE,
    "r": Command.RESET,
    "f": Command.INCREASE_FOCUS,
    "F": Command.DECREASE_FOCUS,
    "b": Command.INCREASE_BREAK,
    "B": Command.DECREASE_BREAK,
}

KEY_HINTS = "f/F: focus +/- | b/B: break +/-"


def map_key(key: Optional[str]) -> Optional[Command]:
    """Translate a key press into a command, or None if it is unbound."""
    if key is None:
        return None
    return KEY_BINDINGS.get(key)


def apply_command(engine: TimerEngine, command: Command) -> bool:
    """Apply a command to the engine. Returns False when the user quit."""
    if command is Command.QUIT:
        return False
    if command is Command.TOGGLE_PAUSE:
        engine.toggle_pause()
    elif command is Command.RESET:
        engine.reset()
    elif command is Command.INCREASE_FOCUS:
        engine.adjust_focus_time(engine.focus_minutes + 1)
    elif command is Command.DECREASE_FOCUS:
        engine.adjust_focus_time(max(MIN_MINUTES, engine.focus_minutes - 1))
    elif command is Command.INCREASE_BREAK:
        engine.adjust_break_time(engine.break_minutes + 1)
    elif command is Command.DECREASE_BREAK:
        engine.adjust_break_time(max(MIN_MINUTES, engine.break_minutes - 1))
    return True
