"""Audible chime on phase changes, played off the render thread."""

from __future__ import annotations

import logging
import queue
import threading
from typing import Optional

import numpy as np

log = logging.getLogger(__name__)

SAMPLE_RATE = 44100
TONE_HZ = 800.0
TONE_SECONDS = 0.2
GAP_SECONDS = 0.15
VOLUME = 0.2
BEEPS = 3

_STOP = object()


def build_chime(sample_rate: int = SAMPLE_RATE) -> np.ndarray:
    """Three short sine beeps separated by silence, as float32 samples."""
    t = np.arange(int(sample_rate * TONE_SECONDS)) / sample_rate
    tone = (VOLUME * np.sin(2 * np.pi * TONE_HZ * t)).astype(np.float32)
    gap = np.zeros(int(sample_rate * GAP_SECONDS), dtype=np.float32)

    parts: list[np.ndarray] = []
    for i in range(BEEPS):
        parts.append(tone)
        if i < BEEPS - 1:
            parts.append(gap)
    return np.concatenate(parts)


def play_chime(samples: np.ndarray, sample_rate: int = SAMPLE_RATE) -> None:
    """Play samples on the default output device and wait for them to finish."""
    # PortAudio may be missing entirely, which surfaces as OSError on import.
    import sounddevice as sd

    sd.play(samples, samplerate=sample_rate)
    sd.wait()


class Notifier:
    """Fire-and-forget chime requests.

    ``request()`` only posts a message; a daemon worker plays it. Playback
    errors stay inside the worker, so a machine without audio just gets the
    visual flash.
    """

    def __init__(self, enabled: bool = True) -> None:
        self.enabled = enabled
        self._queue: queue.Queue[object] = queue.Queue()
        self._thread: Optional[threading.Thread] = None
        self._samples: Optional[np.ndarray] = None

    def request(self) -> None:
        """Ask for a chime. Never blocks."""
        if not self.enabled:
            return
        if self._thread is None:
            self._thread = threading.Thread(
                target=self._run, name="pomoterm-chime", daemon=True
            )
            self._thread.start()
        self._queue.put_nowait("chime")

    def close(self) -> None:
        """Stop the worker. Playback in progress is abandoned, not awaited."""
        if self._thread is not None:
            self._queue.put_nowait(_STOP)
            self._thread = None

    def _run(self) -> None:
        while True:
            message = self._queue.get()
            if message is _STOP:
                return
            try:
                if self._samples is None:
                    self._samples = build_chime()
                play_chime(self._samples)
            except Exception:
                log.debug("Chime playback failed", exc_info=True)
