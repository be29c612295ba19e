"""Wall clock and per-frame scheduling.

The game never reads time on its own: the engine samples `now_ms()` once per
frame and passes the value down, so tests can drive ticks with plain numbers.
"""

from __future__ import annotations

import time
from typing import Callable

import pygame

Clock = Callable[[], float]


def now_ms() -> float:
    """Monotonic wall-clock time in milliseconds."""
    return time.perf_counter() * 1000.0


class FrameScheduler:
    """Waits for the next frame slot, like a browser's animation-frame hook."""

    def __init__(self, fps: int, vsync: bool) -> None:
        self.fps = fps
        self.vsync = vsync
        self._clock = pygame.time.Clock()

    def wait(self) -> float:
        # Without vsync we don't cap here; tick() with no framerate argument
        # returns elapsed ms without sleeping. With vsync the cap is a safety
        # net for drivers that don't honor it.
        if not self.vsync:
            return self._clock.tick()
        return self._clock.tick(self.fps)
