import pytest

from csclip.clipping import (
    Point,
    RegionCode,
    accept,
    clip_line,
    encode,
    inside,
    reject,
    round_half_up,
)

WIN_MIN = Point(50.0, 50.0)
WIN_MAX = Point(150.0, 150.0)


def _within_window(p, tol=1e-9):
    return (
        WIN_MIN.x - tol <= p.x <= WIN_MAX.x + tol
        and WIN_MIN.y - tol <= p.y <= WIN_MAX.y + tol
    )


def _cross(a, b, c):
    return (b.x - a.x) * (c.y - a.y) - (b.y - a.y) * (c.x - a.x)


def test_encode_inside_point():
    code = encode(Point(100, 100), WIN_MIN, WIN_MAX)
    assert code == RegionCode.INSIDE
    assert inside(code)


def test_encode_points_on_edges_are_inside():
    for pt in (WIN_MIN, WIN_MAX, Point(50, 150), Point(150, 50)):
        assert inside(encode(pt, WIN_MIN, WIN_MAX))


def test_encode_single_sides():
    assert encode(Point(0, 100), WIN_MIN, WIN_MAX) == RegionCode.LEFT
    assert encode(Point(200, 100), WIN_MIN, WIN_MAX) == RegionCode.RIGHT
    assert encode(Point(100, 0), WIN_MIN, WIN_MAX) == RegionCode.BOTTOM
    assert encode(Point(100, 200), WIN_MIN, WIN_MAX) == RegionCode.TOP


def test_encode_corner_regions_combine_bits():
    assert encode(Point(0, 200), WIN_MIN, WIN_MAX) == RegionCode.LEFT | RegionCode.TOP
    assert (
        encode(Point(200, 0), WIN_MIN, WIN_MAX)
        == RegionCode.RIGHT | RegionCode.BOTTOM
    )


def test_encode_produces_fixed_bit_values():
    assert int(encode(Point(0, 100), WIN_MIN, WIN_MAX)) == 0x1
    assert int(encode(Point(200, 100), WIN_MIN, WIN_MAX)) == 0x2
    assert int(encode(Point(100, 0), WIN_MIN, WIN_MAX)) == 0x4
    assert int(encode(Point(100, 200), WIN_MIN, WIN_MAX)) == 0x8
    assert int(encode(Point(0, 200), WIN_MIN, WIN_MAX)) == 0x9
    assert int(encode(Point(200, 0), WIN_MIN, WIN_MAX)) == 0x6


def test_accept_and_reject():
    assert accept(RegionCode.INSIDE, RegionCode.INSIDE)
    assert not accept(RegionCode.LEFT, RegionCode.INSIDE)
    assert reject(RegionCode.LEFT, RegionCode.LEFT | RegionCode.TOP)
    assert not reject(RegionCode.LEFT, RegionCode.RIGHT)


def test_inside_is_false_for_any_bit():
    for bit in (RegionCode.LEFT, RegionCode.RIGHT, RegionCode.BOTTOM, RegionCode.TOP):
        assert not inside(bit)


@pytest.mark.parametrize("n", [0, 1, 7, 100])
def test_round_half_up_on_integers_and_halves(n):
    assert round_half_up(float(n)) == n
    assert round_half_up(n + 0.5) == n + 1
    assert round_half_up(n + 0.49) == n


def test_round_half_up_truncates_toward_zero():
    assert round_half_up(-0.7) == 0


def test_clip_line_fully_inside_is_unchanged():
    a, b = Point(60, 70), Point(140, 120)
    assert clip_line(a, b, WIN_MIN, WIN_MAX) == (a, b)


def test_clip_line_trivially_rejected():
    assert clip_line(Point(0, 0), Point(40, 200), WIN_MIN, WIN_MAX) is None
    assert clip_line(Point(0, 160), Point(200, 170), WIN_MIN, WIN_MAX) is None


def test_clip_horizontal_line():
    result = clip_line(Point(0, 100), Point(200, 100), WIN_MIN, WIN_MAX)
    assert result == (Point(50, 100), Point(150, 100))


def test_clip_vertical_line():
    result = clip_line(Point(100, 0), Point(100, 200), WIN_MIN, WIN_MAX)
    assert result == (Point(100, 50), Point(100, 150))


@pytest.mark.parametrize(
    "a, b",
    [
        (Point(20, 120), Point(180, 30)),
        (Point(0, 0), Point(200, 200)),
        (Point(30, 140), Point(100, 100)),
        (Point(100, 100), Point(170, 10)),
        (Point(10, 60), Point(190, 140)),
    ],
)
def test_clip_line_result_lies_in_window_on_the_line(a, b):
    result = clip_line(a, b, WIN_MIN, WIN_MAX)
    assert result is not None
    c, d = result
    assert _within_window(c)
    assert _within_window(d)
    assert _cross(a, b, c) == pytest.approx(0, abs=1e-6)
    assert _cross(a, b, d) == pytest.approx(0, abs=1e-6)
    # Orientation is preserved.
    assert (d.x - c.x) * (b.x - a.x) + (d.y - c.y) * (b.y - a.y) > 0


def test_clip_line_keeps_inside_endpoint():
    a, b = Point(100, 100), Point(300, 100)
    c, d = clip_line(a, b, WIN_MIN, WIN_MAX)
    assert c == a
    assert d == Point(150, 100)