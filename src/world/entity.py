"""Shared shape for everything drawn on the board.

Enemies, gems, the key and the player are all an image id at a (column, row)
grid position with a visibility flag. Grid coordinates become pixels through
the fixed tile offsets, lifted by `SPRITE_FOOT_CORRECTION` so the sprite's
feet land on the tile face.
"""

from __future__ import annotations

from dataclasses import dataclass

from config import OFFSET_X, OFFSET_Y, SPRITE_FOOT_CORRECTION
from core.drawable import DrawingContext, ResourceProvider


def grid_to_pixels(x: float, y: float) -> tuple[float, float]:
    return x * OFFSET_X, y * OFFSET_Y - SPRITE_FOOT_CORRECTION


@dataclass
class Entity:
    sprite: str
    x: float
    y: float
    visible: bool = True

    def render(self, ctx: DrawingContext, resources: ResourceProvider) -> None:
        if not self.visible:
            return
        px, py = grid_to_pixels(self.x, self.y)
        ctx.draw_image(resources.get(self.sprite), px, py)
