"""Centralized image loading for the game.

`Resources` maps an asset identifier (see `textures.resoucepath`) to a decoded
image handle. The game registers every image it needs with `load()` and hands
`on_ready()` the callback that starts play; `get()` is used while drawing.
"""

from __future__ import annotations

from typing import Callable, Dict, Iterable, List, Optional

ImageLoader = Callable[[str], object]
ReadyCallback = Callable[[], None]


def _default_loader(path: str) -> object:
    # Local import: texture uploads need a live GL context, tests do not
    from textures.texture_utils import load_image

    return load_image(path)


class Resources:
    def __init__(self, loader: Optional[ImageLoader] = None) -> None:
        self._loader = loader or _default_loader
        self._images: Dict[str, object] = {}
        self._pending: List[str] = []
        self._callbacks: List[ReadyCallback] = []
        self._ready = False

    def load(self, paths: Iterable[str]) -> None:
        """Load every listed image, then fire the ready callbacks."""
        self._ready = False
        self._pending = list(dict.fromkeys(p for p in paths if p not in self._images))
        for path in list(self._pending):
            self._images[path] = self._loader(path)
            self._pending.remove(path)
        self._ready = True
        print(f"[Resources] {len(self._images)} images ready")
        self._fire_ready()

    def on_ready(self, callback: ReadyCallback) -> None:
        """Register `callback`; it runs once, as soon as all images are loaded."""
        self._callbacks.append(callback)
        if self._ready:
            self._fire_ready()

    def _fire_ready(self) -> None:
        callbacks, self._callbacks = self._callbacks, []
        for cb in callbacks:
            cb()

    def get(self, path: str) -> object:
        return self._images[path]

    def is_ready(self) -> bool:
        return self._ready and not self._pending
