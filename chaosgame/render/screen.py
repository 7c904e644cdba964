"""Pygame window owner: logical surface, named canvases and letterboxed present."""
from __future__ import annotations

import logging
from typing import Dict, Tuple

import pygame

from chaosgame.errors import SurfaceNotFoundError

logger = logging.getLogger(__name__)


class ScreenRenderer:
    def __init__(
        self,
        width: int,
        height: int,
        *,
        font_size: int = 22,
        caption: str = "Chaos Game",
        bg: Tuple[int, int, int] = (30, 30, 50),
        fg: Tuple[int, int, int] = (220, 230, 240),
        dim: Tuple[int, int, int] = (120, 130, 150),
        sel: Tuple[int, int, int] = (255, 230, 120),
    ) -> None:
        pygame.init()
        self.width = width
        self.height = height
        self.surface_flags = pygame.RESIZABLE
        # render surface at native resolution; display may be larger in fullscreen
        self.surface = pygame.Surface((width, height))
        self.fullscreen = False
        self.display = pygame.display.set_mode((width, height), self.surface_flags)
        self.lb_off = (0, 0)  # letterbox offset when centering
        self.lb_scale = 1.0   # letterbox scale factor
        pygame.display.set_caption(caption)
        self.font = pygame.font.Font(None, font_size)
        self.small_font = pygame.font.Font(None, max(8, font_size - 4))
        # UI palette
        self.bg = bg
        self.fg = fg
        self.dim = dim
        self.sel = sel

        # name -> (surface, position on the logical surface)
        self._surfaces: Dict[str, Tuple[pygame.Surface, Tuple[int, int]]] = {}

    # ------------------------------------------------------------------ #
    # Named drawing surfaces

    def add_surface(self, name: str, size: Tuple[int, int], topleft: Tuple[int, int] = (0, 0)) -> pygame.Surface:
        surf = pygame.Surface(size)
        self._surfaces[name] = (surf, topleft)
        logger.debug("Registered surface %r %sx%s at %s", name, size[0], size[1], topleft)
        return surf

    def get_surface(self, name: str) -> pygame.Surface:
        try:
            return self._surfaces[name][0]
        except KeyError:
            raise SurfaceNotFoundError(f"no drawing surface named {name!r}") from None

    def surface_rect(self, name: str) -> pygame.Rect:
        surf = self.get_surface(name)
        return surf.get_rect(topleft=self._surfaces[name][1])

    # ------------------------------------------------------------------ #
    # Display

    def to_surface(self, pos: Tuple[int, int]) -> Tuple[int, int]:
        """Convert display-space mouse coords to surface-space, accounting for letterbox and scale."""
        return (
            int((pos[0] - self.lb_off[0]) / max(1e-6, self.lb_scale)),
            int((pos[1] - self.lb_off[1]) / max(1e-6, self.lb_scale)),
        )

    def toggle_fullscreen(self) -> None:
        flags = self.display.get_flags()
        if flags & pygame.FULLSCREEN:
            self.display = pygame.display.set_mode((self.width, self.height), self.surface_flags)
            self.fullscreen = False
        else:
            self.display = pygame.display.set_mode((0, 0), pygame.FULLSCREEN)
            self.fullscreen = True

    def handle_resize(self, w: int, h: int) -> None:
        if not self.fullscreen:
            self.display = pygame.display.set_mode((w, h), self.surface_flags)

    def compose(self) -> None:
        """Copy every named surface onto the logical surface."""
        for surf, topleft in self._surfaces.values():
            self.surface.blit(surf, topleft)

    def present(self) -> None:
        dw, dh = self.display.get_size()
        if (dw, dh) == (self.width, self.height):
            self.lb_off = (0, 0)
            self.lb_scale = 1.0
            self.display.blit(self.surface, (0, 0))
        else:
            # letterbox: keep aspect ratio, center on the display
            scale = min(dw / self.width, dh / self.height)
            sw, sh = int(self.width * scale), int(self.height * scale)
            self.lb_scale = scale
            self.lb_off = ((dw - sw) // 2, (dh - sh) // 2)
            self.display.fill((0, 0, 0))
            self.display.blit(pygame.transform.scale(self.surface, (sw, sh)), self.lb_off)
        pygame.display.flip()

    def teardown(self) -> None:
        pygame.quit()
