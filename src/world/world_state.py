"""Everything that lives on the board, and one frame of its simulation.

`WorldState` owns the bugs, the gems, the key, the player and the level
counter. `update()` is called once per frame by the game scene: it either runs
the level-scroll animation or plays a normal frame (key, bugs, player).
Keyboard moves arrive through `handle_input()` and are dropped while a level
transition runs.
"""

from __future__ import annotations

from typing import Optional

import numpy as np

from config import NUM_ROWS
from world.enemy import Enemy
from world.entity import Entity
from world.level import LevelState
from world.player import Player
from world.world_collision import on_same_cell
from world.world_spawner import spawn_enemies, spawn_gems, spawn_key


class WorldState:
    def __init__(self, rng: Optional[np.random.Generator] = None) -> None:
        self.rng = rng if rng is not None else np.random.default_rng()
        self.level = LevelState()
        self.player = Player()
        self.key: Entity = spawn_key()
        self.enemies: list[Enemy] = spawn_enemies(self.rng)
        self.gems: list[Entity] = spawn_gems(self.rng)
        self.input_enabled = True

    # ------------------------------------------------------------------
    def update(self, dt: float, now: float) -> None:
        if self.level.transitioning:
            self._advance_transition(dt)
            return

        self._update_key()
        if self.level.transitioning:
            return

        # The board freezes while the player is down
        if not self.player.dead:
            for enemy in self.enemies:
                enemy.update(dt, self.level.current_level, self.rng)
        self.player.update(now, self.enemies, self.gems)

    def _update_key(self) -> None:
        if self.key.visible:
            if on_same_cell(self.key, self.player):
                self.start_transition()
        elif not self.gems:
            self.key.visible = True

    def start_transition(self) -> None:
        if self.level.transitioning:
            return
        self.key.visible = False
        self.enemies = []
        self.level.begin_transition()
        self.input_enabled = False
        print(f"[Level] Loading level {self.level.current_level}")

    def _advance_transition(self, dt: float) -> None:
        if not self.level.advance(dt):
            return
        self.enemies = spawn_enemies(self.rng)
        self.gems = spawn_gems(self.rng)
        self.player.y = NUM_ROWS - 2
        self.input_enabled = True

    # ------------------------------------------------------------------
    def handle_input(self, direction: Optional[str]) -> None:
        if not self.input_enabled:
            return
        self.player.handle_input(direction)

    def player_draw_row(self) -> float:
        """Row the player is drawn on; follows the scroll during a transition."""
        if self.level.transitioning:
            return min(self.level.transition_row, NUM_ROWS - 3)
        return self.player.y
