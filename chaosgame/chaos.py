"""Pure chaos-game math: points, anchor selection and the halfway step."""
from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Tuple

# Number of anchors captured before the running point.
ANCHOR_COUNT = 3

POINT_SIZE = 2
LARGE_POINT_SIZE = 5
LENGTH_STEP = 2


@dataclass(frozen=True)
class Point:
    x: float
    y: float

    def __add__(self, other: Tuple[float, float]) -> "Point":
        dx, dy = other
        return Point(self.x + dx, self.y + dy)

    def __iter__(self):
        yield self.x
        yield self.y


def round_half_up(value: float) -> int:
    """Round to the nearest integer, halves toward positive infinity."""
    return math.floor(value + 0.5)


def get_lengths(one: Point, two: Point, step: int = LENGTH_STEP) -> Tuple[int, int]:
    """
    Per-axis displacement from `two` to `one`, divided by `step` and rounded
    to whole pixels.

    get_lengths(anchor, running) added to running moves it toward the anchor.
    """
    return (
        round_half_up((one.x - two.x) / step),
        round_half_up((one.y - two.y) / step),
    )


def get_side(roll: int) -> int:
    """
    Map a die roll to a zero-based anchor index.

    Two consecutive rolls share an anchor, so for three anchors:

        Anchor | Roll
        0        1, 2
        1        3, 4
        2        5, 6
    """
    return (math.ceil((roll + 1) / 2) - (roll + 1) % 2) - 1


def roll_range(anchor_count: int) -> Tuple[int, int]:
    """Inclusive die range covering every anchor twice."""
    return 1, anchor_count * 2


def is_time_passed(prev: float, current: float, duration: float) -> bool:
    return current - prev > duration
