from __future__ import annotations

"""
Engine: owns the renderer, the active scene and the per-frame loop.

Each frame dispatches pygame events, ticks the scene with the current
timestamp and renders. The loop runs until stop() is called or the window
is closed.
"""

import logging
from typing import Optional

import pygame

from chaosgame import config
from chaosgame.render.screen import ScreenRenderer
from chaosgame.rng import new_rng
from chaosgame.scenes import ChaosScene, Scene

logger = logging.getLogger(__name__)


class Engine:
    def __init__(self, cfg: config.GameConfig, scene: Optional[Scene] = None) -> None:
        self.cfg = cfg
        self.renderer = ScreenRenderer(
            cfg.view_width,
            cfg.view_height,
            font_size=cfg.font_size,
            bg=cfg.ui_bg,
            fg=cfg.ui_fg,
            dim=cfg.ui_dim,
            sel=cfg.ui_sel,
        )
        self.scene = scene if scene is not None else ChaosScene(cfg, self.renderer, rng=new_rng(cfg.seed))
        self.running = False
        self.frames = 0

    def stop(self) -> None:
        self.running = False

    def run_frame(self, clock: pygame.time.Clock) -> None:
        dt = clock.tick(self.cfg.fps)
        renderer = self.renderer
        scene = self.scene

        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                self.stop()
                return

            # Window resize is purely a view concern; don't forward it.
            if event.type == pygame.VIDEORESIZE:
                renderer.handle_resize(event.w, event.h)
                continue

            # Global fullscreen toggle
            if event.type == pygame.KEYDOWN and event.key == pygame.K_F11:
                renderer.toggle_fullscreen()
                continue

            scene.handle_event(event, self)
            if not self.running:
                return

        scene.update(dt, pygame.time.get_ticks(), self)
        scene.render(renderer, self)
        self.frames += 1

    def run(self) -> None:
        """Drive frames until stop(). The renderer is always torn down."""
        self.running = True
        clock = pygame.time.Clock()
        logger.info("Engine started (%dx%d @ %d fps)", self.cfg.view_width, self.cfg.view_height, self.cfg.fps)
        try:
            while self.running:
                self.run_frame(clock)
        finally:
            logger.info("Engine stopped after %d frames", self.frames)
            self.renderer.teardown()
