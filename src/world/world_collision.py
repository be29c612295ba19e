"""Grid collision checks shared by the player and the world update.

Bugs move continuously along their row, so a hit is a same-row check plus a
horizontal distance below `COLLISION_DISTANCE`. Gems and the key sit on whole
cells and are only collected when the player stands exactly on them.
"""

from __future__ import annotations

from typing import Iterable, List, Optional

from config import COLLISION_DISTANCE


def touching_enemy(player, enemies: Iterable) -> Optional[object]:
    """Return the first enemy on the player's row closer than the threshold."""
    for enemy in enemies:
        if enemy.y == player.y and abs(player.x - enemy.x) < COLLISION_DISTANCE:
            return enemy
    return None


def gems_at(gems: Iterable, x: float, y: float) -> List:
    return [g for g in gems if g.x == x and g.y == y]


def on_same_cell(a, b) -> bool:
    return a.x == b.x and a.y == b.y
