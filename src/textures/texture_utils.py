"""Texture loading utilities for OpenGL.

This module keeps a tiny registry of texture sizes so other systems can
query width/height from a texture ID without tracking pygame surfaces.
Images handed to the game are wrapped in `TextureImage` so the drawing code
can size sprites the way a canvas image reports `width`/`height`.
"""

from dataclasses import dataclass
from typing import Optional, Tuple, Dict

import pygame
from OpenGL.GL import (
    glGenTextures,
    glBindTexture,
    glDeleteTextures,
    glTexImage2D,
    glTexParameteri,
    GL_TEXTURE_2D,
    GL_RGBA,
    GL_UNSIGNED_BYTE,
    GL_TEXTURE_MIN_FILTER,
    GL_TEXTURE_MAG_FILTER,
    GL_LINEAR,
    GL_TEXTURE_WRAP_S,
    GL_TEXTURE_WRAP_T,
    GL_NEAREST,
    GL_CLAMP_TO_EDGE,
)

_TEXTURE_SIZES: Dict[int, Tuple[int, int]] = {}


@dataclass(frozen=True)
class TextureImage:
    """Decoded image handle: GL texture id plus its pixel size."""

    texture_id: int
    width: int
    height: int


def get_texture_size(tex_id: int) -> Optional[Tuple[int, int]]:
    """Return (width, height) for a loaded texture ID, if known."""
    return _TEXTURE_SIZES.get(tex_id)


def upload_surface(
    surface: pygame.Surface, texture_id: Optional[int] = None, *, smooth: bool = False
) -> int:
    """Upload an RGBA pygame surface into a (new or existing) GL texture.

    Rows are flipped on upload, so v=1 is the top edge of the image.
    """
    texture_data = pygame.image.tostring(surface, "RGBA", True)
    width, height = surface.get_size()

    if texture_id is None:
        texture_id = glGenTextures(1)
    glBindTexture(GL_TEXTURE_2D, texture_id)
    glTexImage2D(
        GL_TEXTURE_2D,
        0,
        GL_RGBA,
        width,
        height,
        0,
        GL_RGBA,
        GL_UNSIGNED_BYTE,
        texture_data,
    )

    filt = GL_LINEAR if smooth else GL_NEAREST
    glTexParameteri(GL_TEXTURE_2D, GL_TEXTURE_MIN_FILTER, filt)
    glTexParameteri(GL_TEXTURE_2D, GL_TEXTURE_MAG_FILTER, filt)
    # Clamp edges to avoid sampling from opposite sides (prevents sprite seams)
    glTexParameteri(GL_TEXTURE_2D, GL_TEXTURE_WRAP_S, GL_CLAMP_TO_EDGE)
    glTexParameteri(GL_TEXTURE_2D, GL_TEXTURE_WRAP_T, GL_CLAMP_TO_EDGE)

    _TEXTURE_SIZES[int(texture_id)] = (int(width), int(height))
    return texture_id


def delete_textures(texture_ids) -> None:
    """Free GL textures and drop them from the size registry."""
    ids = [int(t) for t in texture_ids]
    if not ids:
        return
    glDeleteTextures(ids)
    for tex_id in ids:
        _TEXTURE_SIZES.pop(tex_id, None)


def load_texture(filename):
    """Load a texture from an image file.

    Parameters
    ----------
    filename : str
        Path to the image file

    Returns
    -------
    int
        OpenGL texture ID
    """
    try:
        surface = pygame.image.load(filename)
        surface = surface.convert_alpha()
        return upload_surface(surface)

    except Exception as e:
        print(f"Failed to load texture {filename}: {e}")
        return create_test_texture()  # Fallback to test texture


def load_image(filename: str) -> TextureImage:
    """Load `filename` and return a sized image handle."""
    texture_id = load_texture(filename)
    width, height = get_texture_size(int(texture_id))
    return TextureImage(texture_id=int(texture_id), width=width, height=height)


def create_test_texture():
    """Create a red/transparent checkerboard used in place of missing images."""
    size = 64
    surface = pygame.Surface((size, size), pygame.SRCALPHA)

    # Checkerboard tile size in pixels
    tile = 8
    red = (255, 0, 0, 255)
    transparent = (0, 0, 0, 0)

    for y in range(size):
        ty = y // tile
        for x in range(size):
            tx = x // tile
            if (tx + ty) % 2 == 0:
                surface.set_at((x, y), red)
            else:
                surface.set_at((x, y), transparent)

    texture_id = upload_surface(surface)

    print(f"Created checkerboard test texture (ID: {texture_id})")
    return texture_id
