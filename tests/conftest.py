from dataclasses import dataclass

import numpy as np
import pytest


@dataclass(frozen=True)
class FakeImage:
    name: str
    width: int = 101
    height: int = 171


class FakeResources:
    """Hands out a sized placeholder for any image id and remembers requests."""

    def __init__(self):
        self.images = {}

    def get(self, path):
        if path not in self.images:
            self.images[path] = FakeImage(path)
        return self.images[path]


class RecordingContext:
    def __init__(self):
        self.fill_style = "black"
        self.stroke_style = "black"
        self.line_width = 1
        self.text_align = "left"
        self.font = "10px sans-serif"
        self.calls = []

    def draw_image(self, image, x, y, width=None, height=None):
        self.calls.append(("draw_image", image, x, y, width, height))

    def fill_rect(self, x, y, w, h):
        self.calls.append(("fill_rect", x, y, w, h, self.fill_style))

    def stroke_rect(self, x, y, w, h):
        self.calls.append(("stroke_rect", x, y, w, h, self.stroke_style))

    def fill_text(self, text, x, y):
        self.calls.append(("fill_text", text, x, y, self.text_align))

    def stroke_text(self, text, x, y):
        self.calls.append(("stroke_text", text, x, y, self.text_align))

    def texts(self):
        return [c[1] for c in self.calls if c[0] == "fill_text"]

    def images(self, name=None):
        return [c for c in self.calls if c[0] == "draw_image" and (name is None or c[1].name == name)]


@pytest.fixture
def ctx():
    return RecordingContext()


@pytest.fixture
def resources():
    return FakeResources()


@pytest.fixture
def rng():
    return np.random.default_rng(1234)
