from __future__ import annotations

import logging
import pygame

from chaosgame import config
from chaosgame.chaos import ANCHOR_COUNT, Point
from chaosgame.game import ChaosGame
from chaosgame.render.canvas import Canvas
from chaosgame.ui.widgets import ButtonWidget, HBox, LabelWidget, SpinnerWidget, WidgetContext

from .base import Scene

logger = logging.getLogger(__name__)

CANVAS_NAME = "chaos"

# Keyboard shortcuts for the toolbar controls
_KEY_TOGGLE = (pygame.K_SPACE, pygame.K_RETURN, pygame.K_KP_ENTER)
_KEY_FASTER = (pygame.K_DOWN, pygame.K_MINUS, pygame.K_KP_MINUS)
_KEY_SLOWER = (pygame.K_UP, pygame.K_PLUS, pygame.K_EQUALS, pygame.K_KP_PLUS)


class ChaosScene(Scene):
    """
    Canvas below, toolbar on top.

    Clicks on the canvas seed the game (three anchors, then the running
    point). The toolbar holds the Start/Stop toggle, the speed spinner and a
    status line.
    """

    def __init__(self, cfg: config.GameConfig, renderer, rng=None) -> None:
        self.cfg = cfg
        renderer.add_surface(CANVAS_NAME, cfg.canvas_size, (0, cfg.toolbar_height))
        self.canvas = Canvas(
            renderer,
            CANVAS_NAME,
            bg=cfg.bg,
            fg=cfg.fg,
            point_size=cfg.point_size,
        )
        self.game = ChaosGame(
            self.canvas,
            rng=rng,
            speed=cfg.speed,
            length_step=cfg.length_step,
            point_size=cfg.point_size,
            large_point_size=cfg.large_point_size,
        )

        self.toolbar = HBox(spacing=12, padding=6)
        self.toolbar.rect = pygame.Rect(0, 0, cfg.view_width, cfg.toolbar_height)
        self.toggle_button = self.toolbar.add_child(
            ButtonWidget(self.game.label, on_click=self._on_toggle_click, min_width=80)
        )
        self.toolbar.add_child(LabelWidget("Speed (ms):"))
        self.speed_spinner = self.toolbar.add_child(
            SpinnerWidget(cfg.speed, step=cfg.speed_step, on_change=self.game.on_speed_change)
        )
        self.status_label = self.toolbar.add_child(LabelWidget(self.status_text()))

        self._started = False

    # ------------------------------------------------------------------ #

    def status_text(self) -> str:
        game = self.game
        if len(game.points) < ANCHOR_COUNT:
            return f"Click anchor {len(game.points) + 1} of {ANCHOR_COUNT}"
        if game.capturing:
            return "Click the starting point"
        return f"Points: {game.steps}"

    def _on_toggle_click(self, button: ButtonWidget) -> None:
        button.text = self.game.on_toggle()

    def _widget_ctx(self, renderer) -> WidgetContext:
        return WidgetContext(surface=renderer.surface, renderer=renderer)

    # ------------------------------------------------------------------ #
    # Live-loop hooks

    def handle_event(self, event, engine) -> None:
        renderer = engine.renderer

        if event.type in (pygame.MOUSEMOTION, pygame.MOUSEBUTTONDOWN, pygame.MOUSEBUTTONUP):
            # Widgets hit-test in logical coordinates.
            event = pygame.event.Event(event.type, {**event.dict, "pos": renderer.to_surface(event.pos)})
            if self.toolbar.handle_event(event, self._widget_ctx(renderer)):
                return
            if event.type == pygame.MOUSEBUTTONDOWN and event.button == 1:
                local = self.canvas.to_local(event.pos)
                if local is not None and not self.game.on_initial_point(Point(*local)):
                    logger.debug("Ignoring click at %s; capture complete", local)
            return

        if event.type == pygame.KEYDOWN:
            if event.key == pygame.K_ESCAPE:
                engine.stop()
            elif event.key in _KEY_TOGGLE:
                self.toggle_button.click()
            elif event.key in _KEY_SLOWER:
                self.speed_spinner.nudge(1)
            elif event.key in _KEY_FASTER:
                self.speed_spinner.nudge(-1)

    def update(self, dt_ms: int, now_ms: int, engine) -> None:
        if not self._started:
            self.game.start(now_ms)
            self._started = True
            return
        self.game.tick(now_ms)

    def render(self, renderer, engine) -> None:
        renderer.compose()
        ctx = self._widget_ctx(renderer)
        pygame.draw.rect(renderer.surface, renderer.bg, self.toolbar.rect)
        self.status_label.text = self.status_text()
        self.toolbar.layout(ctx)
        self.toolbar.draw(ctx)
        renderer.present()
