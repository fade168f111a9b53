"""Single-key terminal input with a bounded wait."""

from __future__ import annotations

import collections
import logging
import os
import select
import sys
import termios
import tty
from typing import Any, Optional, TextIO

log = logging.getLogger(__name__)

ESCAPE = "\x1b"
READ_SIZE = 64


class KeyboardHandler:
    """Puts the terminal in cbreak mode and reads one key at a time.

    Reads go straight to the file descriptor so ``select`` always sees what
    is still unread. Everything a read returns is queued and handed out one
    key per ``poll``. Escape sequences (arrows, function keys) are dropped.

    Use as a context manager so the original terminal settings come back
    even if the timer crashes.
    """

    def __init__(self, stream: Optional[TextIO] = None) -> None:
        self.stream = stream or sys.stdin
        self._old_settings: Optional[list[Any]] = None
        self._pending: collections.deque[str] = collections.deque()

    def __enter__(self) -> KeyboardHandler:
        self.start()
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.stop()

    def start(self) -> None:
        """Switch the terminal to cbreak mode (no echo, no line buffering)."""
        fd = self.stream.fileno()
        try:
            self._old_settings = termios.tcgetattr(fd)
            tty.setcbreak(fd)
        except termios.error:
            log.warning("stdin is not a terminal; key input may be line buffered")
            self._old_settings = None

    def poll(self, timeout: float = 0.1) -> Optional[str]:
        """Wait up to ``timeout`` seconds for a key. Returns None if none came."""
        if self._pending:
            return self._pending.popleft()

        fd = self.stream.fileno()
        ready, _, _ = select.select([fd], [], [], timeout)
        if not ready:
            return None
        chunk = os.read(fd, READ_SIZE).decode("utf-8", errors="ignore")
        keys, escape, rest = chunk.partition(ESCAPE)
        if escape:
            log.debug("Ignoring escape sequence %r", escape + rest)
        if not keys:
            return None
        self._pending.extend(keys)
        return self._pending.popleft()

    def stop(self) -> None:
        """Restore the terminal settings captured by start()."""
        if self._old_settings is not None:
            termios.tcsetattr(self.stream.fileno(), termios.TCSADRAIN, self._old_settings)
            self._old_settings = None
