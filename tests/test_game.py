"""Tests for the chaos game engine: capture, run state, speed and timed steps."""

import pytest

from chaosgame.chaos import LARGE_POINT_SIZE, POINT_SIZE, Point
from chaosgame.game import START_LABEL, STOP_LABEL, ChaosGame, GameState
from chaosgame.rng import new_rng

TRIANGLE = [Point(0, 0), Point(100, 0), Point(50, 100)]


def seeded_game(canvas, rng, speed=100):
    game = ChaosGame(canvas, rng=rng, speed=speed)
    for p in TRIANGLE:
        game.on_initial_point(p)
    game.on_initial_point(Point(50, 50))
    return game


def test_capture_three_anchors_then_running_point(canvas):
    game = ChaosGame(canvas)
    assert game.capturing and not game.seeded

    for p in TRIANGLE:
        assert game.on_initial_point(p)
    assert game.points == TRIANGLE
    assert game.last is None

    assert game.on_initial_point(Point(50, 50))
    assert game.last == Point(50, 50)
    assert game.seeded and not game.capturing

    assert [(x, y) for x, y, _ in canvas.plots] == [(0, 0), (100, 0), (50, 100), (50, 50)]
    assert all(size == LARGE_POINT_SIZE for _, _, size in canvas.plots)


def test_clicks_after_capture_are_ignored(canvas):
    game = seeded_game(canvas, new_rng(1))
    assert not game.on_initial_point(Point(1, 1))
    assert game.points == TRIANGLE
    assert game.last == Point(50, 50)
    assert len(canvas.plots) == 4


@pytest.mark.parametrize("activations", range(7))
def test_toggle_parity_and_label(canvas, activations):
    game = ChaosGame(canvas)
    assert game.state == GameState.STOPPED
    assert game.label == START_LABEL

    label = game.label
    for _ in range(activations):
        label = game.on_toggle()

    if activations % 2:
        assert game.state == GameState.RUNNING
        assert label == game.label == STOP_LABEL
    else:
        assert game.state == GameState.STOPPED
        assert label == game.label == START_LABEL


@pytest.mark.parametrize("value, expected", [(50, 50.0), ("350", 350.0), (0, 0.0), (-10, -10.0)])
def test_speed_change_accepts_any_number(canvas, value, expected):
    game = ChaosGame(canvas)
    game.on_speed_change(value)
    assert game.speed == expected


def test_step_skipped_while_stopped(canvas, stub_rng):
    rng = stub_rng([1])
    game = seeded_game(canvas, rng)
    plots = len(canvas.plots)

    assert game.step() is None
    assert rng.ranges == []
    assert len(canvas.plots) == plots


def test_step_skipped_before_seeding(canvas, stub_rng):
    rng = stub_rng([1])
    game = ChaosGame(canvas, rng=rng)
    game.on_toggle()
    for p in TRIANGLE[:2]:
        game.on_initial_point(p)
    assert game.step() is None

    game.on_initial_point(TRIANGLE[2])
    # three anchors but no running point yet
    assert game.step() is None
    assert rng.ranges == []
    assert len(canvas.plots) == 3


@pytest.mark.parametrize("roll, expected", [(1, Point(25, 25)), (2, Point(25, 25)),
                                            (3, Point(75, 25)), (4, Point(75, 25)),
                                            (5, Point(50, 75)), (6, Point(50, 75))])
def test_step_moves_halfway_toward_rolled_anchor(canvas, stub_rng, roll, expected):
    rng = stub_rng([roll])
    game = seeded_game(canvas, rng)
    game.on_toggle()

    assert game.step() == expected
    assert game.last == expected
    assert rng.ranges == [(1, 6)]
    assert canvas.plots[-1] == (expected.x, expected.y, POINT_SIZE)


def test_repeated_steps_settle_within_a_pixel_of_anchor(canvas, stub_rng):
    rng = stub_rng([3] * 10)
    game = seeded_game(canvas, rng)
    game.on_toggle()
    for _ in range(10):
        game.step()
    assert abs(game.last.x - 100) <= 1
    assert abs(game.last.y - 0) <= 1


def test_tick_paces_steps_by_speed(canvas):
    speed = 100
    total = 1000
    game = seeded_game(canvas, new_rng(7), speed=speed)
    game.on_toggle()
    game.start(0)

    steps = sum(game.tick(now) for now in range(1, total + 1))

    assert steps <= total // speed
    assert steps >= total // speed - 1
    assert game.steps == steps


@pytest.mark.parametrize("frame_ms", [1, 7, 16, 33, 250])
def test_tick_never_exceeds_interval_budget(canvas, frame_ms):
    speed = 100
    total = 2000
    game = seeded_game(canvas, new_rng(3), speed=speed)
    game.on_toggle()
    game.start(0)

    steps = sum(game.tick(now) for now in range(frame_ms, total + 1, frame_ms))
    assert steps <= total // speed


def test_tick_does_not_catch_up(canvas):
    game = seeded_game(canvas, new_rng(3), speed=100)
    game.on_toggle()
    game.start(0)

    assert game.tick(10_000) is True
    assert game.steps == 1
    assert game.tick(10_050) is False


def test_tick_while_stopped_still_advances_clock(canvas):
    game = seeded_game(canvas, new_rng(3), speed=100)
    game.start(0)

    assert game.tick(150) is False
    game.on_toggle()
    assert game.tick(200) is False  # only 50ms since the stopped tick
    assert game.tick(251) is True


def test_tick_before_start_arms_driver(canvas):
    game = seeded_game(canvas, new_rng(3), speed=100)
    game.on_toggle()
    assert game.tick(5000) is False
    assert game.tick(5101) is True


def test_zero_speed_steps_every_advancing_tick(canvas):
    game = seeded_game(canvas, new_rng(3), speed=0)
    game.on_toggle()
    game.start(0)
    assert all(game.tick(now) for now in range(1, 11))
    assert game.tick(10) is False


def test_seeded_rng_is_reproducible(canvas):
    a = seeded_game(canvas, new_rng(42))
    b = seeded_game(canvas, new_rng(42))
    a.on_toggle()
    b.on_toggle()
    assert [a.step() for _ in range(20)] == [b.step() for _ in range(20)]


def test_end_to_end_single_plot_between_point_and_anchor(canvas):
    game = ChaosGame(canvas, rng=new_rng(2024), speed=200)
    for p in TRIANGLE:
        game.on_initial_point(p)
    start = Point(50, 50)
    game.on_initial_point(start)
    game.on_toggle()
    game.start(1000)
    before = len(canvas.plots)

    game.tick(1100)  # not past the interval yet
    game.tick(1201)

    new_plots = canvas.plots[before:]
    assert len(new_plots) == 1
    x, y, size = new_plots[0]
    assert size == POINT_SIZE

    anchor = min(TRIANGLE, key=lambda a: (a.x - 2 * x + start.x) ** 2 + (a.y - 2 * y + start.y) ** 2)
    assert Point(x, y) == Point((start.x + anchor.x) / 2, (start.y + anchor.y) / 2)
    for got, lo, hi in ((x, start.x, anchor.x), (y, start.y, anchor.y)):
        if lo != hi:
            assert min(lo, hi) < got < max(lo, hi)
    assert Point(x, y) not in (start, anchor)
