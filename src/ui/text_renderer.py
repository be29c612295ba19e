"""Simple text rendering for OpenGL with pygame fonts.

Draws 2D text in screen space using canvas conventions: `x` is anchored by the
alignment (left | center | right) and `y` is the text baseline. Rendered
labels are cached as textures keyed by (text, font, colour, stroke width) so
the HUD re-uploads only when a value such as the timer changes.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, Tuple

import pygame
from OpenGL.GL import (
    glBindTexture,
    glBegin,
    glEnd,
    glTexCoord2f,
    glVertex2f,
    glColor4f,
    GL_TEXTURE_2D,
    GL_QUADS,
)

from textures.texture_utils import delete_textures, upload_surface

# Cached labels beyond this are dropped (timer text changes every frame)
_MAX_CACHE = 256


@dataclass
class _TexSlot:
    id: int
    size: Tuple[int, int]


def parse_font(font: str) -> Tuple[str, int]:
    """Split a canvas font string ("50px Georgia") into (family, size)."""
    size_part, _, family = font.strip().partition(" ")
    size = int(float(size_part.lower().rstrip("px")))
    return family.strip().lower() or "georgia", size


class TextRenderer:
    """2D text renderer for OpenGL using pygame.font.

    - fill: plain glyphs in the given colour.
    - stroke: the glyph outline traced from the font mask.
    """

    def __init__(self) -> None:
        self._fonts: Dict[Tuple[str, int], pygame.font.Font] = {}
        self._cache: Dict[Tuple[str, str, Tuple[int, int, int, int], int], _TexSlot] = {}

    def _font(self, font_spec: str) -> pygame.font.Font:
        key = parse_font(font_spec)
        font = self._fonts.get(key)
        if font is None:
            family, size = key
            font = pygame.font.SysFont(family, size)
            self._fonts[key] = font
        return font

    def _render_surface(
        self, font: pygame.font.Font, text: str, color: pygame.Color, stroke: int
    ) -> pygame.Surface:
        glyphs = font.render(text, True, color)
        if stroke <= 0:
            return glyphs
        outline = pygame.Surface(glyphs.get_size(), pygame.SRCALPHA)
        mask = pygame.mask.from_surface(glyphs)
        for component in mask.connected_components():
            points = component.outline()
            if len(points) > 1:
                pygame.draw.lines(outline, color, True, points, stroke)
        return outline

    def _get_slot(
        self, text: str, font_spec: str, color: pygame.Color, stroke: int
    ) -> _TexSlot:
        cache_key = (text, font_spec, tuple(color), stroke)
        slot = self._cache.get(cache_key)
        if slot is None:
            if len(self._cache) >= _MAX_CACHE:
                delete_textures(s.id for s in self._cache.values())
                self._cache.clear()
            surf = self._render_surface(self._font(font_spec), text, color, stroke)
            tex_id = upload_surface(surf, smooth=True)
            slot = _TexSlot(id=tex_id, size=surf.get_size())
            self._cache[cache_key] = slot
        return slot

    def draw_text(
        self,
        text: str,
        x: float,
        y: float,
        *,
        font: str,
        color: pygame.Color,
        align: str = "left",
        stroke: int = 0,
    ) -> Tuple[int, int]:  # returns (w, h)
        """Draw a single line of text whose baseline sits at `y`."""
        if not text:
            return 0, 0
        slot = self._get_slot(text, font, color, stroke)
        w, h = slot.size
        ascent = self._font(font).get_ascent()

        if align == "center":
            draw_x = x - w / 2
        elif align == "right":
            draw_x = x - w
        else:  # left
            draw_x = x
        draw_y = y - ascent

        glBindTexture(GL_TEXTURE_2D, slot.id)
        glColor4f(1.0, 1.0, 1.0, 1.0)
        glBegin(GL_QUADS)
        # Note: upload flips rows, so v=1 is the top of the label
        glTexCoord2f(0.0, 1.0)
        glVertex2f(draw_x, draw_y)
        glTexCoord2f(1.0, 1.0)
        glVertex2f(draw_x + w, draw_y)
        glTexCoord2f(1.0, 0.0)
        glVertex2f(draw_x + w, draw_y + h)
        glTexCoord2f(0.0, 0.0)
        glVertex2f(draw_x, draw_y + h)
        glEnd()
        return w, h
