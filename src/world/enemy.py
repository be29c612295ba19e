from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

import numpy as np

from config import NUM_COLS, LEVEL_SPEEDUP, ENEMY_RESPAWN_MIN, ENEMY_RESPAWN_MAX
from textures.resoucepath import ENEMY_BUG_PATH
from world.entity import Entity

_rng = np.random.default_rng()


def enemy_speed_multiplier(level: int) -> float:
    """Columns per second for enemies on `level` (1 on the first level)."""
    return 1.0 + LEVEL_SPEEDUP * (level - 1)


@dataclass
class Enemy(Entity):
    """Bug crawling rightwards along a fixed row, wrapping back in on the left."""

    sprite: str = ENEMY_BUG_PATH
    x: float = 0.0
    y: float = 0.0
    visible: bool = True

    def update(self, dt: float, level: int, rng: Optional[np.random.Generator] = None) -> None:
        if self.x > NUM_COLS - 1:
            # Re-enter a few tiles off the left edge, same row
            rng = rng if rng is not None else _rng
            self.x = float(rng.integers(ENEMY_RESPAWN_MIN, ENEMY_RESPAWN_MAX))
        else:
            self.x += dt * enemy_speed_multiplier(level)
