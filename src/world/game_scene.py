"""Game scene: per-frame driver for the board, HUD and game-over screen.

Each `tick(now)` computes the frame delta from the previous tick, advances the
world and draws it. When the player runs out of lives the scene switches to
the game-over overlay: it is drawn once, then the scene idles until any key is
released, which starts a brand new session.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

import numpy as np
import pygame

from config import NUM_COLS, NUM_ROWS, OFFSET_Y, TILE_WIDTH
from core.clock import Clock, now_ms
from core.drawable import DrawingContext, ResourceProvider
from core.scene import Scene
from textures.resoucepath import terrain_block_path
from ui.overlays import GameOverOverlay, LoadingBanner
from world.player import UP, DOWN, LEFT, RIGHT
from world.world_hud import WorldHUD
from world.world_state import WorldState

KEY_DIRECTIONS = {
    pygame.K_LEFT: LEFT,
    pygame.K_UP: UP,
    pygame.K_RIGHT: RIGHT,
    pygame.K_DOWN: DOWN,
}


@dataclass
class GameSession:
    start_time: float
    last_time: float
    game_over: bool = False
    game_over_displayed: bool = False
    game_over_time: float = 0.0


class GameScene(Scene):
    def __init__(
        self,
        ctx: DrawingContext,
        resources: ResourceProvider,
        *,
        clock: Clock = now_ms,
        rng: Optional[np.random.Generator] = None,
    ) -> None:
        super().__init__()
        self.ctx = ctx
        self.resources = resources
        self.clock = clock
        self.rng = rng
        self._hud = WorldHUD()
        self._banner = LoadingBanner()
        self._game_over = GameOverOverlay()
        self.reset(clock())

    def reset(self, now: float) -> None:
        """Start a fresh session: new board, level 1, full lives, timer at zero."""
        self.world = WorldState(self.rng)
        self.session = GameSession(start_time=now, last_time=now)

    # ------------------------------------------------------------------
    def tick(self, now: float) -> bool:
        dt = (now - self.session.last_time) / 1000.0
        drew = False
        if self.session.game_over:
            if not self.session.game_over_displayed:
                self.session.game_over_time = now
                self.render_game_over()
                self.session.game_over_displayed = True
                drew = True
        else:
            self.update(dt, now)
            self.render(now)
            drew = True
        self.session.last_time = now
        return drew

    def update(self, dt: float, now: float = 0.0) -> None:
        self.world.update(dt, now)
        if self.world.player.lives == 0:
            self.world.input_enabled = False
            self.session.game_over = True
            self.session.game_over_displayed = False
            print(
                f"[Game] Game over on level {self.world.level.current_level} "
                f"with {self.world.player.gems} gems"
            )

    def handle_event(self, event) -> None:
        if event.type != pygame.KEYUP:
            return
        if self.session.game_over:
            if self.session.game_over_displayed:
                self.reset(self.clock())
            return
        self.world.handle_input(KEY_DIRECTIONS.get(event.key))

    # ------------------------------------------------------------------
    def render(self, now: float = 0.0) -> None:
        world = self.world
        self.draw_board()
        self._hud.draw(
            self.ctx,
            self.resources,
            lives=world.player.lives,
            gems=world.player.gems,
            level=world.level.current_level,
            played_ms=now - self.session.start_time,
        )
        for enemy in world.enemies:
            enemy.render(self.ctx, self.resources)
        for gem in world.gems:
            gem.render(self.ctx, self.resources)
        world.key.render(self.ctx, self.resources)
        world.player.render(
            self.ctx, self.resources, world.level.scroll_offset, world.player_draw_row()
        )
        if world.level.transitioning:
            self._banner.draw(self.ctx, now)

    def draw_board(self) -> None:
        terrain = self.world.level.row_terrain
        margin = self.world.level.scroll_offset
        # Bottom rows repeated above the board so the scroll looks endless
        above = (terrain[NUM_ROWS - 2], terrain[NUM_ROWS - 1])
        for col in range(NUM_COLS):
            for i, kind in enumerate(above):
                self.ctx.draw_image(
                    self.resources.get(terrain_block_path(kind)),
                    col * TILE_WIDTH,
                    margin - (2 - i) * OFFSET_Y,
                )
        for row in range(NUM_ROWS):
            img = self.resources.get(terrain_block_path(terrain[row]))
            for col in range(NUM_COLS):
                self.ctx.draw_image(img, col * TILE_WIDTH, margin + row * OFFSET_Y)

    def render_game_over(self) -> None:
        self._game_over.draw(
            self.ctx,
            self.world.level.current_level,
            self.world.player.gems,
            self.session.game_over_time - self.session.start_time,
        )
