"""Level counter and the scroll animation between levels.

While a transition runs, the board scrolls up one tile at a time at
`SCROLL_SPEED` px/s. Each completed tile rotates the terrain rows (the last
row moves to the front, as if new ground came in from the bottom). After
`NUM_ROWS` tiles the transition is over.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import List

from config import INITIAL_ROW_TERRAIN, NUM_ROWS, OFFSET_Y, SCROLL_SPEED


@dataclass
class LevelState:
    current_level: int = 1
    transitioning: bool = False
    transition_row: int = 0
    scroll_offset: float = 0.0
    row_terrain: List[str] = field(default_factory=lambda: list(INITIAL_ROW_TERRAIN))

    def begin_transition(self) -> None:
        self.current_level += 1
        self.transitioning = True
        self.transition_row = 0
        self.scroll_offset = 0.0

    def rotate_terrain(self) -> None:
        self.row_terrain.insert(0, self.row_terrain.pop())

    def advance(self, dt: float) -> bool:
        """Scroll by one frame. Returns True on the frame the transition ends."""
        if not self.transitioning:
            return False
        if self.scroll_offset < OFFSET_Y:
            self.scroll_offset += SCROLL_SPEED * dt
            return False

        self.scroll_offset = 0.0
        self.transition_row += 1
        self.rotate_terrain()
        if self.transition_row < NUM_ROWS:
            return False

        self.transitioning = False
        return True
