# chaosgame/ui/widgets.py

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, List, Optional
import pygame


@dataclass
class WidgetContext:
    """
    Context passed into widget methods.

    - surface:  the logical surface widgets draw into
    - renderer: the active ScreenRenderer (fonts and UI colours)
    """
    surface: pygame.Surface
    renderer: object


class Widget:
    """
    Minimal base class for toolbar widgets.

    Keeps a rect in logical-surface coordinates, optional children, and
    overridable layout / draw / handle_event hooks.
    """

    def __init__(self) -> None:
        self.rect: pygame.Rect = pygame.Rect(0, 0, 0, 0)
        self.visible: bool = True
        self.enabled: bool = True
        self.children: List[Widget] = []

    def add_child(self, child: "Widget") -> "Widget":
        self.children.append(child)
        return child

    def layout(self, ctx: WidgetContext) -> None:
        for child in self.children:
            child.layout(ctx)

    def draw(self, ctx: WidgetContext) -> None:
        if not self.visible:
            return
        for child in self.children:
            child.draw(ctx)

    def handle_event(self, event, ctx: WidgetContext) -> bool:
        """Return True if the event is consumed. Later children are on top."""
        for child in reversed(self.children):
            if child.handle_event(event, ctx):
                return True
        return False


def _font(ctx: WidgetContext) -> pygame.font.Font:
    return getattr(ctx.renderer, "font", None) or getattr(ctx.renderer, "small_font")


class LabelWidget(Widget):
    def __init__(self, text: str, *, color: Optional[tuple[int, int, int]] = None, padding: int = 0) -> None:
        super().__init__()
        self.text = text
        self.color = color
        self.padding = padding

    def layout(self, ctx: WidgetContext) -> None:
        w, h = _font(ctx).size(self.text)
        # Keep any position a container chose; only size is ours.
        self.rect.width = w + 2 * self.padding
        self.rect.height = h + 2 * self.padding
        super().layout(ctx)

    def draw(self, ctx: WidgetContext) -> None:
        if not self.visible:
            return
        color = self.color or getattr(ctx.renderer, "fg", (255, 255, 255))
        text_surf = _font(ctx).render(self.text, True, color)
        ctx.surface.blit(text_surf, (self.rect.x + self.padding, self.rect.y + self.padding))
        super().draw(ctx)


class ButtonWidget(Widget):
    def __init__(
        self,
        text: str,
        *,
        on_click: Optional[Callable[["ButtonWidget"], None]] = None,
        min_width: int = 0,
        padding_x: int = 12,
        padding_y: int = 4,
    ) -> None:
        super().__init__()
        self.text = text
        self.on_click = on_click
        self.min_width = min_width
        self.padding_x = padding_x
        self.padding_y = padding_y
        self.hovered = False
        self.pressed = False

    def click(self) -> None:
        if self.on_click:
            self.on_click(self)

    def layout(self, ctx: WidgetContext) -> None:
        w, h = _font(ctx).size(self.text)
        self.rect.width = max(self.min_width, w + 2 * self.padding_x)
        self.rect.height = h + 2 * self.padding_y
        super().layout(ctx)

    def draw(self, ctx: WidgetContext) -> None:
        if not self.visible:
            return

        fg = getattr(ctx.renderer, "fg", (255, 255, 255))
        sel = getattr(ctx.renderer, "sel", (255, 255, 0))
        dim = getattr(ctx.renderer, "dim", (150, 150, 150))
        border_col = sel if (self.hovered or self.pressed) else dim

        pygame.draw.rect(ctx.surface, (45, 45, 70), self.rect)
        pygame.draw.rect(ctx.surface, border_col, self.rect, 1)

        text_surf = _font(ctx).render(self.text, True, fg)
        ctx.surface.blit(text_surf, text_surf.get_rect(center=self.rect.center))
        super().draw(ctx)

    def handle_event(self, event, ctx: WidgetContext) -> bool:
        if not (self.visible and self.enabled):
            return False

        if event.type == pygame.MOUSEMOTION:
            self.hovered = self.rect.collidepoint(event.pos)

        elif event.type == pygame.MOUSEBUTTONDOWN and event.button == 1:
            if self.rect.collidepoint(event.pos):
                self.pressed = True
                return True

        elif event.type == pygame.MOUSEBUTTONUP and event.button == 1:
            was_pressed = self.pressed
            self.pressed = False
            if was_pressed and self.rect.collidepoint(event.pos):
                self.click()
                return True

        return super().handle_event(event, ctx)


class HBox(Widget):
    """
    Horizontal layout container: children left -> right, vertically centred
    in the box when it has a preset height.
    """

    def __init__(self, *, spacing: int = 4, padding: int = 0) -> None:
        super().__init__()
        self.spacing = spacing
        self.padding = padding

    def layout(self, ctx: WidgetContext) -> None:
        for child in self.children:
            child.layout(ctx)

        if self.rect.height == 0:
            max_h = max((child.rect.height for child in self.children), default=0)
            self.rect.height = max_h + 2 * self.padding

        x = self.rect.x + self.padding
        for child in self.children:
            child.rect.topleft = (x, self.rect.y + (self.rect.height - child.rect.height) // 2)
            x += child.rect.width + self.spacing

        self.rect.width = max(self.rect.width, (x - self.rect.x) + self.padding - self.spacing)

        # Children positioned; let them place their own children.
        for child in self.children:
            child.layout(ctx)


class SpinnerWidget(HBox):
    """
    Numeric value with -/+ buttons. Every change reports the new value via
    on_change. No clamping: any value, including zero or negative, is passed on.
    """

    def __init__(
        self,
        value: float,
        *,
        step: float = 1.0,
        on_change: Optional[Callable[[float], None]] = None,
        fmt: str = "{:g}",
    ) -> None:
        super().__init__(spacing=4)
        self.value = value
        self.step = step
        self.on_change = on_change
        self.fmt = fmt

        self.dec_button = self.add_child(ButtonWidget("-", on_click=lambda _b: self.nudge(-1), padding_x=8))
        self.value_label = self.add_child(LabelWidget(self.fmt.format(value), padding=4))
        self.inc_button = self.add_child(ButtonWidget("+", on_click=lambda _b: self.nudge(1), padding_x=8))

    def set_value(self, value: float) -> None:
        self.value = value
        self.value_label.text = self.fmt.format(value)
        if self.on_change:
            self.on_change(value)

    def nudge(self, direction: int) -> None:
        self.set_value(self.value + direction * self.step)
