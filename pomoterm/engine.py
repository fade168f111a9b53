"""Focus/break state machine with whole-second time accounting."""

from __future__ import annotations

import logging
import time
from typing import Callable

from pomoterm.models import Phase

log = logging.getLogger(__name__)

FLASH_SECONDS = 2.0

Clock = Callable[[], float]


class TimerEngine:
    """Owns the timer state for one run.

    ``update()`` is the accounting step: it charges the whole seconds elapsed
    since the previous step against the active phase and reports whether a
    phase transition happened. Sub-second remainders are dropped, so callers
    should step at most once per second.
    """

    def __init__(
        self,
        focus_minutes: int = 25,
        break_minutes: int = 5,
        clock: Clock = time.monotonic,
    ) -> None:
        self._clock = clock
        self.focus_duration = focus_minutes * 60
        self.break_duration = break_minutes * 60
        self.focus_remaining = self.focus_duration
        self.break_remaining = self.break_duration
        self.phase = Phase.FOCUS
        self.total_cycles = 0
        self.last_update = clock()
        self.flash_active = False
        self.flash_started_at = self.last_update

    @property
    def focus_minutes(self) -> int:
        return self.focus_duration // 60

    @property
    def break_minutes(self) -> int:
        return self.break_duration // 60

    @property
    def is_paused(self) -> bool:
        return self.phase is Phase.PAUSED

    def update(self) -> bool:
        """Run one accounting step. Returns True on a phase transition."""
        now = self._clock()
        elapsed = max(0, int(now - self.last_update))
        self.last_update = now

        transitioned = False
        if self.phase is Phase.FOCUS:
            if elapsed < self.focus_remaining:
                self.focus_remaining -= elapsed
            else:
                self.focus_remaining = 0
                self.phase = Phase.BREAK
                self.total_cycles += 1
                transitioned = True
        elif self.phase is Phase.BREAK:
            if elapsed < self.break_remaining:
                self.break_remaining -= elapsed
            else:
                self.break_remaining = self.break_duration
                self.focus_remaining = self.focus_duration
                self.phase = Phase.FOCUS
                transitioned = True

        if transitioned:
            log.info("Phase changed to %s after %d cycle(s)", self.phase.value, self.total_cycles)
            self._start_flash(now)
        else:
            self._expire_flash(now)

        return transitioned

    def expire_flash(self) -> None:
        """Clear the flash if it is at least FLASH_SECONDS old. Consumes no time."""
        self._expire_flash(self._clock())

    def toggle_pause(self) -> None:
        """Pause the running phase, or resume. Resuming always starts Focus."""
        if self.phase is Phase.PAUSED:
            self.phase = Phase.FOCUS
        else:
            self.phase = Phase.PAUSED
        self.last_update = self._clock()
        log.debug("Toggled pause, phase is now %s", self.phase.value)

    def reset(self) -> None:
        """Restart from a fresh Focus phase. The cycle count is kept."""
        self.focus_remaining = self.focus_duration
        self.break_remaining = self.break_duration
        self.phase = Phase.FOCUS
        self.last_update = self._clock()
        self.flash_active = False

    def adjust_focus_time(self, minutes: int) -> None:
        """Set the focus length; restarts the countdown if Focus is active."""
        self.focus_duration = minutes * 60
        if self.phase is Phase.FOCUS:
            self.focus_remaining = self.focus_duration
        else:
            self.focus_remaining = min(self.focus_remaining, self.focus_duration)

    def adjust_break_time(self, minutes: int) -> None:
        """Set the break length; restarts the countdown if Break is active."""
        self.break_duration = minutes * 60
        if self.phase is Phase.BREAK:
            self.break_remaining = self.break_duration
        else:
            self.break_remaining = min(self.break_remaining, self.break_duration)

    def _start_flash(self, now: float) -> None:
        self.flash_active = True
        self.flash_started_at = now

    def _expire_flash(self, now: float) -> None:
        if self.flash_active and now - self.flash_started_at >= FLASH_SECONDS:
            self.flash_active = False
