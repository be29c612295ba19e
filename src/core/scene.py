class Scene:
    """Base for anything the engine can host (game board, menus...)."""

    def update(self, dt: float) -> None:
        pass

    # Optional per-event handler (scenes can override)
    def handle_event(self, event) -> None:
        pass

    def tick(self, now: float) -> bool:
        """Advance one frame at time `now` (ms). Returns True if it drew."""
        self.update(0.0)
        return False

    # Scenes own their full render pipeline
    def render(self) -> None:  # pragma: no cover - visual
        pass
