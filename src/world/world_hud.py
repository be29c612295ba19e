"""World HUD: footer with lives, gems, level and play time, plus instructions.

The footer sits over the two bottom tile rows; the instruction strip fills the
extra tile row below the board.
"""

from __future__ import annotations

from config import (
    WIDTH,
    HEIGHT,
    NUM_ROWS,
    TILE_WIDTH,
    TILE_HEIGHT,
    OFFSET_X,
    OFFSET_Y,
    GEM_COUNT,
    HUD_ORANGE,
    HUD_BROWN,
    HUD_FONT,
    INSTRUCTIONS_FONT,
)
from core.drawable import DrawingContext, ResourceProvider
from textures.resoucepath import HEART_PATH, GEM_BLUE_PATH
from ui.time_format import ms_to_time

FOOTER_TOP = HEIGHT - 231
FOOTER_HEIGHT = 130
TEXT_ROW_Y = NUM_ROWS * OFFSET_Y

INSTRUCTIONS = [
    "1) Use arrows to move.",
    f"2) Collect all {GEM_COUNT} gems to make the key appear.",
    "3) Collect the key to advance to next level.",
]


class WorldHUD:
    def draw(
        self,
        ctx: DrawingContext,
        resources: ResourceProvider,
        *,
        lives: int,
        gems: int,
        level: int,
        played_ms: float,
    ) -> None:
        self._draw_boxes(ctx)
        self._draw_counter(ctx, resources.get(HEART_PATH), 0, (NUM_ROWS - 1) * OFFSET_Y + 35, lives, 111)
        self._draw_counter(
            ctx,
            resources.get(GEM_BLUE_PATH),
            OFFSET_X * 2 + 6,
            (NUM_ROWS - 1) * OFFSET_Y + 15,
            gems,
            OFFSET_X * 3 + 10,
        )
        self._draw_level(ctx, level)
        self._draw_time(ctx, played_ms)
        self.draw_instructions(ctx)

    # ------------------------------------------------------------------
    def _draw_boxes(self, ctx: DrawingContext) -> None:
        ctx.fill_style = "white"
        ctx.stroke_style = "green"
        ctx.text_align = "left"
        ctx.line_width = 4
        lw = ctx.line_width
        ctx.fill_rect(0, FOOTER_TOP, WIDTH, FOOTER_HEIGHT)
        # lives | gems | level over time
        ctx.stroke_rect(0 * TILE_WIDTH + lw / 2, FOOTER_TOP, 2 * TILE_WIDTH - lw, FOOTER_HEIGHT)
        ctx.stroke_rect(2 * TILE_WIDTH + lw / 2, FOOTER_TOP, 2 * TILE_WIDTH - lw, FOOTER_HEIGHT)
        ctx.stroke_rect(4 * TILE_WIDTH + lw / 2, FOOTER_TOP, 4 * TILE_WIDTH - lw, FOOTER_HEIGHT / 2)
        ctx.stroke_rect(
            4 * TILE_WIDTH + lw / 2, FOOTER_TOP + FOOTER_HEIGHT / 2, 4 * TILE_WIDTH - lw, FOOTER_HEIGHT / 2
        )

    @staticmethod
    def _text_style(ctx: DrawingContext) -> None:
        ctx.font = HUD_FONT
        ctx.fill_style = HUD_ORANGE
        ctx.stroke_style = HUD_BROWN
        ctx.line_width = 2

    @staticmethod
    def _outlined(ctx: DrawingContext, text: str, x: float, y: float) -> None:
        ctx.fill_text(text, x, y)
        ctx.stroke_text(text, x, y)

    def _draw_counter(self, ctx, icon, icon_x, icon_y, value: int, text_x: float) -> None:
        ctx.draw_image(icon, icon_x, icon_y)
        self._text_style(ctx)
        self._outlined(ctx, f"x {value}", text_x, TEXT_ROW_Y + 50)

    def _draw_level(self, ctx: DrawingContext, level: int) -> None:
        self._text_style(ctx)
        self._outlined(ctx, "Level", OFFSET_X * 4 + 10, TEXT_ROW_Y + 30)
        ctx.text_align = "right"
        self._outlined(ctx, str(level), OFFSET_X * 6, TEXT_ROW_Y + 30)

    def _draw_time(self, ctx: DrawingContext, played_ms: float) -> None:
        ctx.text_align = "left"
        self._text_style(ctx)
        self._outlined(ctx, "Time", OFFSET_X * 4 + 10, TEXT_ROW_Y + 85)
        ctx.text_align = "right"
        self._outlined(ctx, ms_to_time(played_ms), WIDTH - 20, TEXT_ROW_Y + 85)

    def draw_instructions(self, ctx: DrawingContext) -> None:
        ctx.fill_style = HUD_ORANGE
        ctx.fill_rect(0, NUM_ROWS * TILE_WIDTH + 2, WIDTH, TILE_WIDTH)
        ctx.fill_style = "white"
        ctx.stroke_style = HUD_BROWN
        ctx.text_align = "left"
        ctx.font = INSTRUCTIONS_FONT
        for i, line in enumerate(INSTRUCTIONS):
            ctx.fill_text(line, 10, (NUM_ROWS + 0.3 * (i + 1)) * TILE_HEIGHT)
