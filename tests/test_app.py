import pytest

from csclip.app import screen_to_world, world_to_screen
from csclip.clipping import Point


def test_bottom_left_pixel_is_world_origin():
    assert screen_to_world(0, 800, 1000, 800) == Point(0.0, 0.0)


def test_top_right_pixel_is_world_maximum():
    assert screen_to_world(1000, 0, 1000, 800) == Point(225.0, 225.0)


def test_world_origin_maps_to_bottom_left():
    assert world_to_screen(Point(0.0, 0.0), 1000, 800) == (0.0, 800.0)


@pytest.mark.parametrize("x,y", [(0, 0), (123, 456), (999, 1), (500, 400)])
def test_screen_world_round_trip(x, y):
    point = screen_to_world(x, y, 1000, 800)
    sx, sy = world_to_screen(point, 1000, 800)
    assert sx == pytest.approx(x)
    assert sy == pytest.approx(y)


@pytest.mark.parametrize(
    "point", [Point(20.0, 120.0), Point(180.0, 30.0), Point(50.0, 150.0)]
)
def test_world_screen_round_trip(point):
    sx, sy = world_to_screen(point, 640, 480)
    back = screen_to_world(sx, sy, 640, 480)
    assert back.x == pytest.approx(point.x)
    assert back.y == pytest.approx(point.y)


def test_screen_y_grows_downwards():
    upper = screen_to_world(10, 100, 1000, 800)
    lower = screen_to_world(10, 700, 1000, 800)
    assert upper.y > lower.y
    assert upper.x == lower.x


def test_mapping_follows_window_size():
    small = screen_to_world(250, 200, 500, 400)
    large = screen_to_world(500, 400, 1000, 800)
    assert small.x == pytest.approx(large.x)
    assert small.y == pytest.approx(large.y)


@pytest.mark.parametrize("width,height", [(0, 800), (1000, 0), (-5, 10)])
def test_screen_to_world_rejects_bad_size(width, height):
    with pytest.raises(ValueError):
        screen_to_world(1, 1, width, height)


@pytest.mark.parametrize("width,height", [(0, 800), (1000, -1)])
def test_world_to_screen_rejects_bad_size(width, height):
    with pytest.raises(ValueError):
        world_to_screen(Point(1.0, 1.0), width, height)