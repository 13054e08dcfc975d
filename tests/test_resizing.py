import pytest

from funcviz.resizing import (
    PANEL_MAX_WIDTH,
    PANEL_MIN_WIDTH,
    TEXT_EDIT_MAX_HEIGHT,
    TEXT_EDIT_MIN_HEIGHT,
    ResizeDrag,
    clamp_resize,
    near_edge,
)


def test_clamp_zero_delta_keeps_size():
    assert clamp_resize(70, 0, 50, 120) == 70


def test_clamp_to_maximum():
    assert clamp_resize(70, 10_000, 50, 120) == 120


def test_clamp_to_minimum():
    assert clamp_resize(70, -10_000, 50, 120) == 50


def test_non_positive_bounds_disable_clamping():
    assert clamp_resize(70, 0, 0, 0) == 70
    assert clamp_resize(70, 10_000, 0, 0) > 120
    assert clamp_resize(70, -10_000, 0, -5) < 0


@pytest.mark.parametrize("delta", [-500, -30, -1, 0, 1, 25, 49, 500])
def test_clamp_stays_within_bounds(delta):
    size = clamp_resize(60, delta, 50, 120)
    assert 50 <= size <= 120


def test_near_edge():
    assert near_edge(50, 50)
    assert near_edge(43, 50)
    assert not near_edge(42, 50)
    assert near_edge(45, 50, margin=5)
    assert not near_edge(44, 50, margin=5)


def test_press_away_from_edge_does_nothing():
    drag = ResizeDrag(TEXT_EDIT_MIN_HEIGHT, TEXT_EDIT_MAX_HEIGHT)
    assert drag.press(10, 200, 60) is False
    assert drag.move(400) is None
    assert drag.release() is False


def test_press_at_edge_then_move():
    drag = ResizeDrag(TEXT_EDIT_MIN_HEIGHT, TEXT_EDIT_MAX_HEIGHT)
    assert drag.press(58, 300, 60) is True
    assert drag.resizing
    assert drag.move(300) == 60
    assert drag.move(10_000) == TEXT_EDIT_MAX_HEIGHT
    assert drag.move(-10_000) == TEXT_EDIT_MIN_HEIGHT


def test_move_follows_pointer_monotonically():
    drag = ResizeDrag(PANEL_MIN_WIDTH, PANEL_MAX_WIDTH)
    drag.press(400, 400, 400)
    sizes = [drag.move(position) for position in range(200, 1600, 50)]
    assert sizes == sorted(sizes)
    assert all(PANEL_MIN_WIDTH <= size <= PANEL_MAX_WIDTH for size in sizes)


def test_release_ends_resizing():
    drag = ResizeDrag(PANEL_MIN_WIDTH, PANEL_MAX_WIDTH)
    drag.press(300, 0, 300)
    assert drag.release() is True
    assert not drag.resizing
    assert drag.move(500) is None
    assert drag.release() is False