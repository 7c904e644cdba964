"""
Chaos game simulation: anchor capture, run state, speed and the timed step.

The engine knows nothing about pygame events. Hosts feed it through
on_initial_point / on_toggle / on_speed_change and call tick(now) once per
display refresh.
"""
from __future__ import annotations

import logging
from enum import IntEnum
from typing import List, Optional

from chaosgame.chaos import (
    ANCHOR_COUNT,
    LARGE_POINT_SIZE,
    LENGTH_STEP,
    POINT_SIZE,
    Point,
    get_lengths,
    get_side,
    is_time_passed,
    roll_range,
)
from chaosgame.rng import RNG, new_rng

logger = logging.getLogger(__name__)

START_LABEL = "Start"
STOP_LABEL = "Stop"


class GameState(IntEnum):
    STOPPED = 0
    RUNNING = 1


# Label of the toggle control while in each state.
LABEL_MAP = {
    GameState.STOPPED: START_LABEL,
    GameState.RUNNING: STOP_LABEL,
}


class ChaosGame:
    def __init__(
        self,
        canvas,
        *,
        rng: Optional[RNG] = None,
        speed: float = 200,
        length_step: int = LENGTH_STEP,
        point_size: int = POINT_SIZE,
        large_point_size: int = LARGE_POINT_SIZE,
    ) -> None:
        self.canvas = canvas
        self.rng = rng if rng is not None else new_rng()
        self.speed = speed
        self.length_step = length_step
        self.point_size = point_size
        self.large_point_size = large_point_size

        self.points: List[Point] = []
        self.last: Optional[Point] = None
        self.state = GameState.STOPPED
        self.steps = 0

        self._prev: Optional[float] = None

    # ------------------------------------------------------------------ #
    # Read-only views

    @property
    def label(self) -> str:
        return LABEL_MAP[self.state]

    @property
    def running(self) -> bool:
        return self.state == GameState.RUNNING

    @property
    def capturing(self) -> bool:
        """True until the running point has been captured."""
        return self.last is None

    @property
    def seeded(self) -> bool:
        return len(self.points) >= ANCHOR_COUNT and self.last is not None

    # ------------------------------------------------------------------ #
    # Inputs

    def on_initial_point(self, point: Point) -> bool:
        """
        Feed one captured click. The first three become anchors, the fourth
        the running point; anything after that is ignored.

        Returns True if the point was captured.
        """
        if not self.capturing:
            return False

        if len(self.points) >= ANCHOR_COUNT:
            self.last = point
            logger.debug("Captured running point %s", point)
        else:
            self.points.append(point)
            logger.debug("Captured anchor %d at %s", len(self.points), point)

        self.canvas.plot(point.x, point.y, self.large_point_size)
        return True

    def on_toggle(self) -> str:
        """Flip Stopped <-> Running. Returns the label for the new state."""
        self.state = GameState(int(not self.state))
        logger.info("Chaos game %s", "running" if self.running else "stopped")
        return self.label

    def on_speed_change(self, value) -> None:
        self.speed = float(value)
        logger.debug("Speed set to %s ms", self.speed)

    # ------------------------------------------------------------------ #
    # Simulation

    def can_step(self) -> bool:
        return self.running and self.seeded

    def roll(self) -> int:
        low, high = roll_range(len(self.points))
        return self.rng.roll(low, high)

    def step(self) -> Optional[Point]:
        """Jump halfway toward a random anchor and plot. No-op unless eligible."""
        if not self.can_step():
            return None

        # Rolling the die, getting the anchor we move towards
        anchor = self.points[get_side(self.roll())]
        self.last = self.last + get_lengths(anchor, self.last, self.length_step)
        self.steps += 1

        self.canvas.plot(self.last.x, self.last.y, self.point_size)
        return self.last

    def start(self, now: float) -> "ChaosGame":
        """Arm the timed driver; the first step happens once speed has elapsed after now."""
        self._prev = now
        return self

    def tick(self, now: float) -> bool:
        """
        One display-refresh callback. Runs at most one step, and only if more
        than `speed` ms have passed since the last executed tick.

        Returns True if a step was plotted.
        """
        if self._prev is None:
            self._prev = now
            return False

        if not is_time_passed(self._prev, now, self.speed):
            return False

        stepped = self.step() is not None
        self._prev = now
        return stepped
