"""Full-screen and banner overlays drawn on top of the board."""

from __future__ import annotations

from config import (
    WIDTH,
    HEIGHT,
    TILE_HEIGHT,
    HUD_ORANGE,
    HUD_BROWN,
    HUD_FONT,
    BANNER_FONT,
    BANNER_BLINK_MS,
)
from core.drawable import DrawingContext
from ui.time_format import ms_to_time


def banner_colors(now: float) -> tuple[str, str]:
    """(fill, stroke) for the loading banner; the pair swaps every blink."""
    if int(now // BANNER_BLINK_MS) % 2 == 0:
        return HUD_ORANGE, HUD_BROWN
    return HUD_BROWN, HUD_ORANGE


class LoadingBanner:
    text = "Loading Next Level"

    def draw(self, ctx: DrawingContext, now: float) -> None:
        ctx.text_align = "center"
        ctx.font = BANNER_FONT
        ctx.fill_style, ctx.stroke_style = banner_colors(now)
        ctx.line_width = 2
        ctx.fill_text(self.text, WIDTH / 2, 120)
        ctx.stroke_text(self.text, WIDTH / 2, 120)


class GameOverOverlay:
    """End-of-run summary; drawn once, stays up until a key is pressed."""

    def lines(self, level: int, gems: int, played_ms: float) -> list[str]:
        return [
            "Game Over",
            f"You reached level {level}",
            f"You collected {gems} gems",
            f"Total time {ms_to_time(played_ms)}",
            "Press any key to restart",
        ]

    def draw(self, ctx: DrawingContext, level: int, gems: int, played_ms: float) -> None:
        ctx.fill_style = HUD_ORANGE
        ctx.fill_rect(0, 0, WIDTH, HEIGHT)

        ctx.fill_style = "white"
        ctx.stroke_style = HUD_BROWN
        ctx.text_align = "center"
        ctx.font = HUD_FONT
        for i, line in enumerate(self.lines(level, gems, played_ms), start=1):
            ctx.fill_text(line, WIDTH / 2, i * TILE_HEIGHT)
