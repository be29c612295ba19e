"""Populate a fresh level with bugs and gems.

One bug and one gem per middle row (rows 1..3, the stone lanes), each at a
random whole column in [0, NUM_COLS - 1). One item per row keeps every gem on
its own cell. A `numpy.random.Generator` can be passed in for reproducible
layouts.
"""

from __future__ import annotations

from typing import Optional

import numpy as np

from config import NUM_COLS, ENEMY_COUNT, GEM_COUNT, START_COL
from textures.resoucepath import GEM_PATHS, KEY_PATH
from world.enemy import Enemy
from world.entity import Entity


def _generator(rng: Optional[np.random.Generator]) -> np.random.Generator:
    return rng if rng is not None else np.random.default_rng()


def spawn_enemies(
    rng: Optional[np.random.Generator] = None, *, count: int = ENEMY_COUNT
) -> list[Enemy]:
    rng = _generator(rng)
    cols = rng.integers(0, NUM_COLS - 1, size=count)
    return [Enemy(x=float(cols[i]), y=i + 1) for i in range(count)]


def spawn_gems(
    rng: Optional[np.random.Generator] = None, *, count: int = GEM_COUNT
) -> list[Entity]:
    rng = _generator(rng)
    cols = rng.integers(0, NUM_COLS - 1, size=count)
    sprites = rng.integers(0, len(GEM_PATHS), size=count)
    return [
        Entity(GEM_PATHS[int(sprites[i])], int(cols[i]), i + 1, True)
        for i in range(count)
    ]


def spawn_key() -> Entity:
    """The level key, hidden until every gem has been collected."""
    return Entity(KEY_PATH, START_COL, 0, False)
