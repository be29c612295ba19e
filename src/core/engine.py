"""Core engine loop & orchestration.

Separates concerns:
- Engine: sets up window, GL state, asset loading, main loop.
- Scene: holds game state & update/draw logic (GameScene for the board).
- GLCanvas: canvas-style 2D drawing the scene renders through.

The loop samples the injected clock once per frame and hands the value to the
scene; nothing below the engine reads time or schedules frames on its own.
"""

from __future__ import annotations

import time
from typing import Optional

import pygame

from config import *
from core.canvas import GLCanvas
from core.clock import Clock, FrameScheduler, now_ms
from core.scene import Scene
from textures.resoucepath import ALL_IMAGE_PATHS
from textures.texture_manager import Resources
from world.game_scene import GameScene


# ---------------------------------------------------------------------------
# Engine
# ---------------------------------------------------------------------------
class Engine:
    def __init__(
        self,
        clock: Clock = now_ms,
        scheduler: Optional[FrameScheduler] = None,
    ):
        pygame.init()
        pygame.display.set_caption(CAPTION)
        flags = pygame.DOUBLEBUF | pygame.OPENGL
        try:
            # vsync: 1 to enable, 0 to disable
            pygame.display.set_mode((WIDTH, HEIGHT), flags, vsync=(1 if VSYNC else 0))
        except (TypeError, pygame.error):
            # Older pygame versions won't accept the vsync kwarg, or vsync
            # was requested but unavailable on this system/driver. Fall back
            # to the older call signature without vsync.
            pygame.display.set_mode((WIDTH, HEIGHT), flags)

        self.clock = clock
        self.scheduler = scheduler or FrameScheduler(FPS, VSYNC)

        self.canvas = GLCanvas(WIDTH, HEIGHT)
        self.canvas.setup()

        self.scene: Optional[Scene] = None
        self.resources = Resources()
        start_time = time.perf_counter()
        self.resources.load(ALL_IMAGE_PATHS)
        self.log_timing("Loading images", start_time, time.perf_counter(), log=True)
        self.resources.on_ready(self._start)

    def _start(self) -> None:
        self.scene = GameScene(self.canvas, self.resources, clock=self.clock)
        print("[Game] Started")

    def log_timing(self, message: str, start_time: float, end_time: float, log: bool = False):
        if log:
            print(f"{message} took {end_time - start_time:.6f} seconds")

    # ------------------------------------------------------------------
    def handle_events(self) -> bool:
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                return False
            if event.type == pygame.KEYDOWN and event.key == pygame.K_ESCAPE:
                return False
            # Forward events to the active scene
            if self.scene is not None:
                self.scene.handle_event(event)
        return True

    # ------------------------------------------------------------------
    def tick(self) -> None:
        if self.scene is None:
            return
        self.canvas.clear()
        if self.scene.tick(self.clock()):
            pygame.display.flip()

    # ------------------------------------------------------------------
    def run(self):  # pragma: no cover - visual
        running = True
        while running:
            self.scheduler.wait()
            running = self.handle_events()
            if not running:
                break
            self.tick()
        pygame.quit()
