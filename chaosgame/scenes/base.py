from __future__ import annotations


class Scene:
    """
    Base for scenes driven by the Engine's frame loop.

    Each frame the Engine hands every pygame event to handle_event, then
    calls update with the frame delta and the current tick time, then render.
    """

    def handle_event(self, event, engine: "Engine") -> None:  # type: ignore[name-defined]
        """Process a single pygame event."""
        return None

    def update(self, dt_ms: int, now_ms: int, engine: "Engine") -> None:  # type: ignore[name-defined]
        """Advance scene state. now_ms is the frame's timestamp."""
        return None

    def render(self, renderer, engine: "Engine") -> None:  # type: ignore[name-defined]
        """Draw the scene onto renderer.surface."""
        return None
