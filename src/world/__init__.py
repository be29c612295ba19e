"""World package: re-export common symbols for simpler imports.

Callers can import public types from `world` directly, e.g.:

    from world import WorldState, Player, Enemy

This file intentionally keeps the public surface small and stable while the
implementation files remain under `world/*.py`.
"""

from .entity import Entity
from .enemy import Enemy, enemy_speed_multiplier
from .player import Player
from .level import LevelState
from .world_state import WorldState
from .world_spawner import spawn_enemies, spawn_gems, spawn_key
from .world_collision import touching_enemy, gems_at
from .world_hud import WorldHUD
from .game_scene import GameScene, GameSession

__all__ = [
    "Entity",
    "Enemy",
    "enemy_speed_multiplier",
    "Player",
    "LevelState",
    "WorldState",
    "spawn_enemies",
    "spawn_gems",
    "spawn_key",
    "touching_enemy",
    "gems_at",
    "WorldHUD",
    "GameScene",
    "GameSession",
]
