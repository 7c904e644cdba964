"""Helper canvas, simplifies drawing chaos-game points onto a named surface."""
from __future__ import annotations

from typing import Optional, Tuple

import pygame

from chaosgame.chaos import POINT_SIZE
from chaosgame.errors import SurfaceUnsupportedError


class Canvas:
    def __init__(
        self,
        renderer,
        name: str,
        *,
        bg: Tuple[int, int, int] = (255, 255, 255),
        fg: Tuple[int, int, int] = (0, 0, 0),
        point_size: int = POINT_SIZE,
    ) -> None:
        # Lookup failures propagate; there is nothing to draw on without a surface.
        surface = renderer.get_surface(name)
        if not isinstance(surface, pygame.Surface):
            raise SurfaceUnsupportedError(
                f"surface {name!r} is a {type(surface).__name__}, not a pygame.Surface"
            )
        self.name = name
        self.surface = surface
        self.rect: pygame.Rect = renderer.surface_rect(name)
        self.bg = bg
        self.fg = fg
        self.point_size = point_size
        self.fill_color = fg

        self.clear()

    def clear(self) -> None:
        self.surface.fill(self.bg)
        self.fill_color = self.fg

    def plot(self, x: float, y: float, size: Optional[int] = None) -> None:
        size = self.point_size if size is None else size
        self.surface.fill(self.fill_color, pygame.Rect(int(x), int(y), size, size))

    def to_local(self, pos: Tuple[int, int]) -> Optional[Tuple[int, int]]:
        """Logical-surface position to canvas coordinates, or None if outside."""
        if not self.rect.collidepoint(pos):
            return None
        return pos[0] - self.rect.x, pos[1] - self.rect.y
