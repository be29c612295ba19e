"""OpenGL-backed 2D drawing context.

Gives the game a canvas-style API (draw_image, fill_rect, stroke_rect,
fill_text, stroke_text plus style attributes) on top of the fixed-function
pipeline. Everything is drawn in a top-left-origin orthographic projection
covering the window, the same overlay setup the text renderer uses.
"""

from __future__ import annotations

from typing import Optional

import pygame
from OpenGL.GL import (
    glBegin,
    glBindTexture,
    glBlendFunc,
    glClear,
    glClearColor,
    glColor4f,
    glDisable,
    glEnable,
    glEnd,
    glLineWidth,
    glLoadIdentity,
    glMatrixMode,
    glOrtho,
    glTexCoord2f,
    glVertex2f,
    GL_BLEND,
    GL_COLOR_BUFFER_BIT,
    GL_DEPTH_TEST,
    GL_LINE_LOOP,
    GL_MODELVIEW,
    GL_ONE_MINUS_SRC_ALPHA,
    GL_PROJECTION,
    GL_QUADS,
    GL_SRC_ALPHA,
    GL_TEXTURE_2D,
)

from ui.text_renderer import TextRenderer


class GLCanvas:
    def __init__(self, width: int, height: int) -> None:
        self.width = width
        self.height = height
        self.fill_style = "black"
        self.stroke_style = "black"
        self.line_width = 1.0
        self.text_align = "left"
        self.font = "10px sans-serif"
        self._text = TextRenderer()

    # --------------------------- frame state ----------------------------
    def setup(self) -> None:  # pragma: no cover - visual
        glMatrixMode(GL_PROJECTION)
        glLoadIdentity()
        glOrtho(0, self.width, self.height, 0, -1, 1)
        glMatrixMode(GL_MODELVIEW)
        glLoadIdentity()

        glDisable(GL_DEPTH_TEST)
        glEnable(GL_BLEND)
        glBlendFunc(GL_SRC_ALPHA, GL_ONE_MINUS_SRC_ALPHA)
        glClearColor(1.0, 1.0, 1.0, 1.0)

    def clear(self) -> None:  # pragma: no cover - visual
        glClear(GL_COLOR_BUFFER_BIT)

    @staticmethod
    def _set_color(style: str) -> None:
        c = pygame.Color(style)
        glColor4f(c.r / 255.0, c.g / 255.0, c.b / 255.0, c.a / 255.0)

    # --------------------------- drawing --------------------------------
    def draw_image(
        self,
        image,
        x: float,
        y: float,
        width: Optional[float] = None,
        height: Optional[float] = None,
    ) -> None:  # pragma: no cover - visual
        w = image.width if width is None else width
        h = image.height if height is None else height
        glEnable(GL_TEXTURE_2D)
        glBindTexture(GL_TEXTURE_2D, image.texture_id)
        glColor4f(1.0, 1.0, 1.0, 1.0)
        glBegin(GL_QUADS)
        glTexCoord2f(0.0, 1.0)
        glVertex2f(x, y)
        glTexCoord2f(1.0, 1.0)
        glVertex2f(x + w, y)
        glTexCoord2f(1.0, 0.0)
        glVertex2f(x + w, y + h)
        glTexCoord2f(0.0, 0.0)
        glVertex2f(x, y + h)
        glEnd()
        glDisable(GL_TEXTURE_2D)

    def fill_rect(self, x: float, y: float, w: float, h: float) -> None:  # pragma: no cover - visual
        self._set_color(self.fill_style)
        glBegin(GL_QUADS)
        glVertex2f(x, y)
        glVertex2f(x + w, y)
        glVertex2f(x + w, y + h)
        glVertex2f(x, y + h)
        glEnd()

    def stroke_rect(self, x: float, y: float, w: float, h: float) -> None:  # pragma: no cover - visual
        self._set_color(self.stroke_style)
        glLineWidth(float(self.line_width))
        glBegin(GL_LINE_LOOP)
        glVertex2f(x, y)
        glVertex2f(x + w, y)
        glVertex2f(x + w, y + h)
        glVertex2f(x, y + h)
        glEnd()

    def fill_text(self, text: str, x: float, y: float) -> None:  # pragma: no cover - visual
        glEnable(GL_TEXTURE_2D)
        self._text.draw_text(
            text, x, y, font=self.font, color=pygame.Color(self.fill_style), align=self.text_align
        )
        glDisable(GL_TEXTURE_2D)

    def stroke_text(self, text: str, x: float, y: float) -> None:  # pragma: no cover - visual
        glEnable(GL_TEXTURE_2D)
        self._text.draw_text(
            text,
            x,
            y,
            font=self.font,
            color=pygame.Color(self.stroke_style),
            align=self.text_align,
            stroke=max(1, int(self.line_width)),
        )
        glDisable(GL_TEXTURE_2D)
