from typing import Optional, Protocol


class Image(Protocol):
    width: int
    height: int


class DrawingContext(Protocol):
    """Canvas-like 2D surface, pixel origin at the top-left corner."""

    fill_style: str
    stroke_style: str
    line_width: float
    text_align: str
    font: str

    def draw_image(
        self,
        image: Image,
        x: float,
        y: float,
        width: Optional[float] = None,
        height: Optional[float] = None,
    ) -> None: ...

    def fill_rect(self, x: float, y: float, w: float, h: float) -> None: ...

    def stroke_rect(self, x: float, y: float, w: float, h: float) -> None: ...

    def fill_text(self, text: str, x: float, y: float) -> None: ...

    def stroke_text(self, text: str, x: float, y: float) -> None: ...


class ResourceProvider(Protocol):
    def get(self, path: str) -> Image: ...

