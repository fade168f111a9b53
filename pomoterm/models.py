"""Pydantic models and enums shared by the timer, CLI and display."""

from __future__ import annotations

import enum

from pydantic import BaseModel, Field


class Phase(str, enum.Enum):
    """Timer phases. Paused does not remember which phase it suspended."""

    FOCUS = "focus"
    BREAK = "break"
    PAUSED = "paused"


class Command(str, enum.Enum):
    """Everything the user can ask the running timer to do."""

    QUIT = "quit"
    TOGGLE_PAUSE = "toggle-pause"
    RESET = "reset"
    INCREASE_FOCUS = "increase-focus"
    DECREASE_FOCUS = "decrease-focus"
    INCREASE_BREAK = "increase-break"
    DECREASE_BREAK = "decrease-break"


class TimerConfig(BaseModel):
    """Startup durations for a timer run."""

    focus_minutes: int = Field(default=25, ge=1)
    break_minutes: int = Field(default=5, ge=1)
    sound: bool = True

