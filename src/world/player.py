"""The player: the one entity driven by keyboard input.

Two states. While alive the player walks one cell per key press, picks up gems
it stands on and dies when a bug on its row comes within
`COLLISION_DISTANCE` columns. A dead player ignores input; after
`DEATH_PAUSE_MS` it reappears on the start cell and pays one life.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import List, Optional, Sequence

from config import (
    NUM_COLS,
    OFFSET_X,
    OFFSET_Y,
    START_COL,
    START_ROW,
    PLAYER_START_LIVES,
    DEATH_PAUSE_MS,
    SPRITE_FOOT_CORRECTION,
    DEAD_SPRITE_GROWTH,
)
from core.drawable import DrawingContext, ResourceProvider
from textures.resoucepath import CHAR_BOY_PATH
from world.entity import Entity
from world.world_collision import gems_at, touching_enemy

UP = "up"
DOWN = "down"
LEFT = "left"
RIGHT = "right"


@dataclass
class Player(Entity):
    sprite: str = CHAR_BOY_PATH
    x: float = START_COL
    y: float = START_ROW
    visible: bool = True
    lives: int = PLAYER_START_LIVES
    gems: int = 0
    dead: bool = False
    dead_since: float = 0.0

    def update(self, now: float, enemies: Sequence[Entity], gems: List[Entity]) -> None:
        """Run one frame of the player state machine at time `now` (ms)."""
        if self.dead:
            if now - self.dead_since >= DEATH_PAUSE_MS:
                self.respawn()
            return

        picked = gems_at(gems, self.x, self.y)
        for gem in picked:
            gems.remove(gem)
        self.gems += len(picked)

        if touching_enemy(self, enemies) is not None:
            self.die(now)

    def die(self, now: float) -> None:
        self.dead = True
        self.dead_since = now

    def respawn(self) -> None:
        self.dead = False
        self.x = START_COL
        self.y = START_ROW
        if self.lives > 0:
            self.lives -= 1

    def handle_input(self, direction: Optional[str]) -> None:
        if self.dead:
            return
        if direction == UP and self.y > 0:
            self.y -= 1
        elif direction == DOWN and self.y < START_ROW:
            self.y += 1
        elif direction == LEFT and self.x > 0:
            self.x -= 1
        elif direction == RIGHT and self.x < NUM_COLS - 1:
            self.x += 1

    def render(
        self,
        ctx: DrawingContext,
        resources: ResourceProvider,
        top_margin: float = 0.0,
        row: Optional[float] = None,
    ) -> None:
        # Drawn a little larger while dead to flag the hit
        grow = DEAD_SPRITE_GROWTH if self.dead else 0
        img = resources.get(self.sprite)
        y = self.y if row is None else row
        ctx.draw_image(
            img,
            self.x * OFFSET_X - grow / 2,
            top_margin + y * OFFSET_Y - SPRITE_FOOT_CORRECTION,
            img.width + grow,
            img.height + grow,
        )
