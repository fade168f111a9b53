"""Main loop: poll keys, apply commands, tick once a second, redraw."""

from __future__ import annotations

import logging
import time
from typing import Optional, Protocol

from rich.console import RenderableType

from pomoterm.commands import apply_command, map_key
from pomoterm.display import build_layout
from pomoterm.engine import Clock, TimerEngine

log = logging.getLogger(__name__)

POLL_SECONDS = 0.1
TICK_SECONDS = 1.0


class KeySource(Protocol):
    def poll(self, timeout: float = ...) -> Optional[str]: ...


class ChimeSink(Protocol):
    def request(self) -> None: ...


class Screen(Protocol):
    def update(self, renderable: RenderableType) -> None: ...


def run_loop(
    engine: TimerEngine,
    keyboard: KeySource,
    notifier: ChimeSink,
    screen: Screen,
    clock: Clock = time.monotonic,
) -> int:
    """Drive the timer until the user quits. Returns completed cycles."""
    last_tick = clock()

    while True:
        command = map_key(keyboard.poll(POLL_SECONDS))
        if command is not None:
            log.debug("Applying %s", command.value)
            if not apply_command(engine, command):
                break

        if not engine.is_paused:
            now = clock()
            if now - last_tick >= TICK_SECONDS:
                if engine.update():
                    notifier.request()
                last_tick = now
        else:
            engine.expire_flash()

        screen.update(build_layout(engine))

    return engine.total_cycles
