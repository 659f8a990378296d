"""Cohen-Sutherland region codes and line clipping against an axis-aligned window."""

from __future__ import annotations

from dataclasses import dataclass
from enum import IntFlag

# Slope used in place of infinity when both endpoints share an x coordinate.
VERTICAL_SLOPE = 1_000_000.0


@dataclass(frozen=True)
class Point:
    """A point in world coordinates."""

    x: float
    y: float


class RegionCode(IntFlag):
    """Outcode bits telling on which sides of the window a point lies."""

    INSIDE = 0x0
    LEFT = 0x1
    RIGHT = 0x2
    BOTTOM = 0x4
    TOP = 0x8


def encode(pt: Point, win_min: Point, win_max: Point) -> RegionCode:
    """Return the region code of ``pt`` relative to the window."""
    code = RegionCode.INSIDE
    if pt.x < win_min.x:
        code |= RegionCode.LEFT
    if pt.x > win_max.x:
        code |= RegionCode.RIGHT
    if pt.y < win_min.y:
        code |= RegionCode.BOTTOM
    if pt.y > win_max.y:
        code |= RegionCode.TOP
    return code


def inside(code: int) -> bool:
    """True when the code denotes a point inside the window."""
    return not code


def reject(code1: int, code2: int) -> bool:
    """True when both endpoints lie outside the same window edge."""
    return bool(code1 & code2)


def accept(code1: int, code2: int) -> bool:
    """True when both endpoints lie inside the window."""
    return not (code1 | code2)


def round_half_up(value: float) -> int:
    """Add one half and truncate toward zero."""
    return int(value + 0.5)


def _slope(p1: Point, p2: Point) -> float:
    if p2.x != p1.x:
        return (p2.y - p1.y) / (p2.x - p1.x)
    return VERTICAL_SLOPE


def _clip_against_edge(
    p1: Point, p2: Point, code1: int, win_min: Point, win_max: Point
) -> tuple[Point, RegionCode]:
    """Move ``p1`` onto the first window edge its code points at.

    Returns the new point and the edge bit used, or ``p1`` unchanged and
    ``RegionCode.INSIDE`` when the code has no bits set.
    """
    m = _slope(p1, p2)
    if code1 & RegionCode.LEFT:
        return Point(win_min.x, p1.y + (win_min.x - p1.x) * m), RegionCode.LEFT
    if code1 & RegionCode.RIGHT:
        return Point(win_max.x, p1.y + (win_max.x - p1.x) * m), RegionCode.RIGHT
    if code1 & RegionCode.BOTTOM:
        x = p1.x
        if p2.x != p1.x and m != 0:
            x += (win_min.y - p1.y) / m
        return Point(x, win_min.y), RegionCode.BOTTOM
    if code1 & RegionCode.TOP:
        x = p1.x
        if p2.x != p1.x and m != 0:
            x += (win_max.y - p1.y) / m
        return Point(x, win_max.y), RegionCode.TOP
    return p1, RegionCode.INSIDE


def clip_line(
    p1: Point, p2: Point, win_min: Point, win_max: Point
) -> tuple[Point, Point] | None:
    """Clip the segment to the window.

    Returns the visible part with the same orientation as the input, or
    ``None`` when the segment is rejected.
    """
    code1 = encode(p1, win_min, win_max)
    code2 = encode(p2, win_min, win_max)
    flipped = False
    while True:
        if accept(code1, code2):
            return (p2, p1) if flipped else (p1, p2)
        if reject(code1, code2):
            return None
        if inside(code1):
            p1, p2 = p2, p1
            code1, code2 = code2, code1
            flipped = not flipped
        p1, _ = _clip_against_edge(p1, p2, code1, win_min, win_max)
        code1 = encode(p1, win_min, win_max)