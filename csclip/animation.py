"""Step-by-step Cohen-Sutherland clipping and the interactive session state."""

from __future__ import annotations

from collections.abc import Iterator
from enum import Enum, auto

from csclip.clipping import (
    Point,
    RegionCode,
    _clip_against_edge,
    accept,
    encode,
    inside,
    reject,
    round_half_up,
)

ANIM_DELAY_MS = 2000

STARTED_MESSAGE = "Animation started..."
IDLE_MESSAGE = "Set line endpoints and press SPACE to start animation"
ACCEPTED_MESSAGE = "Line ACCEPTED - Both endpoints inside window or clipped properly"
REJECTED_MESSAGE = "Line REJECTED - Line completely outside window"
CONTINUE_MESSAGE = (
    "Checking trivial accept/reject: Neither accepted nor rejected, continuing..."
)
SWAPPED_MESSAGE = "Swapped endpoints - Ensuring P1 is outside the window"
NO_SWAP_MESSAGE = "P1 is already outside window, no need to swap"


class ClipEdge(Enum):
    """The window edge a clipping step cut against."""

    NONE = auto()
    LEFT = auto()
    RIGHT = auto()
    BOTTOM = auto()
    TOP = auto()


_EDGE_FOR_BIT = {
    RegionCode.LEFT: ClipEdge.LEFT,
    RegionCode.RIGHT: ClipEdge.RIGHT,
    RegionCode.BOTTOM: ClipEdge.BOTTOM,
    RegionCode.TOP: ClipEdge.TOP,
}


def edge_name(edge: ClipEdge) -> str:
    """Upper-case name of the edge."""
    return edge.name


def region_code_label(code: int) -> str:
    """Four-digit TBRL label for a region code."""
    return "".join(
        "1" if code & bit else "0"
        for bit in (RegionCode.TOP, RegionCode.BOTTOM, RegionCode.RIGHT, RegionCode.LEFT)
    )


def bresenham(x0: int, y0: int, x1: int, y1: int) -> list[tuple[int, int]]:
    """Pixels of the line from (x0, y0) to (x1, y1), both ends included."""
    dx, dy = abs(x1 - x0), abs(y1 - y0)
    sx = 1 if x0 < x1 else -1
    sy = 1 if y0 < y1 else -1
    err = dx - dy
    pixels = []
    while True:
        pixels.append((x0, y0))
        if x0 == x1 and y0 == y1:
            return pixels
        e2 = 2 * err
        if e2 > -dy:
            err -= dy
            x0 += sx
        if e2 < dx:
            err += dx
            y0 += sy


class ClipAnimator:
    """Runs the clipping algorithm one visible step at a time.

    Stage 0 checks trivial accept/reject, stage 1 swaps so that P1 is
    outside, stage 2 clips P1 against one edge and returns to stage 0.
    """

    def __init__(self, p1: Point, p2: Point, win_min: Point, win_max: Point):
        self.win_min = win_min
        self.win_max = win_max
        self.original_p1 = p1
        self.p1 = p1
        self.p2 = p2
        self.prev_p1 = p1
        self.prev_p2 = p2
        self.code1 = encode(p1, win_min, win_max)
        self.code2 = encode(p2, win_min, win_max)
        self.stage = 0
        self.done = False
        self.accepted = False
        self.swapped = False
        self.swap_in_progress = False
        self.current_edge = ClipEdge.NONE
        self.prev_edge = ClipEdge.NONE
        self.status = STARTED_MESSAGE

    def step(self) -> str:
        """Advance by one step and return the new status message."""
        if self.done:
            return self.status

        self.prev_p1 = self.p1
        self.prev_p2 = self.p2
        self.prev_edge = self.current_edge

        if self.stage == 0:
            self.swap_in_progress = False
            if accept(self.code1, self.code2):
                self.done = True
                self.accepted = True
                self.status = ACCEPTED_MESSAGE
            elif reject(self.code1, self.code2):
                self.done = True
                self.status = REJECTED_MESSAGE
            else:
                self.status = CONTINUE_MESSAGE
                self.stage = 1
            return self.status

        if self.stage == 1:
            self.swap_in_progress = True
            if inside(self.code1):
                self.p1, self.p2 = self.p2, self.p1
                self.code1, self.code2 = self.code2, self.code1
                self.swapped = True
                self.status = SWAPPED_MESSAGE
            else:
                self.status = NO_SWAP_MESSAGE
            self.stage = 2
            return self.status

        self.swap_in_progress = False
        self.p1, bit = _clip_against_edge(
            self.p1, self.p2, self.code1, self.win_min, self.win_max
        )
        self.current_edge = _EDGE_FOR_BIT.get(bit, ClipEdge.NONE)
        if self.current_edge is not ClipEdge.NONE:
            self.status = f"Clipped against {edge_name(self.current_edge)} edge of window"
        self.code1 = encode(self.p1, self.win_min, self.win_max)
        self.stage = 0
        return self.status

    def run(self) -> Iterator[str]:
        """Yield the status after each step until the algorithm finishes."""
        while not self.done:
            yield self.step()

    def final_pixels(self) -> list[tuple[int, int]]:
        """Pixels of the accepted line, or an empty list if not accepted yet."""
        if not (self.done and self.accepted):
            return []
        return bresenham(
            round_half_up(self.p1.x),
            round_half_up(self.p1.y),
            round_half_up(self.p2.x),
            round_half_up(self.p2.y),
        )


class Session:
    """Interactive state: editable endpoints and an optional running animation."""

    def __init__(self, p1: Point, p2: Point, win_min: Point, win_max: Point):
        self.p1 = p1
        self.p2 = p2
        self.win_min = win_min
        self.win_max = win_max
        self.animator: ClipAnimator | None = None
        self.show_final_line = False
        self.show_colored_lines = False
        self.status = IDLE_MESSAGE

    def _locked(self) -> bool:
        return self.animator is not None and not self.animator.done

    def _reset(self) -> None:
        self.animator = None
        self.show_final_line = False
        self.show_colored_lines = False
        self.status = IDLE_MESSAGE

    def toggle(self) -> None:
        """Start the animation when idle, otherwise return to idle."""
        if self.animator is None:
            self.animator = ClipAnimator(self.p1, self.p2, self.win_min, self.win_max)
            self.show_final_line = False
            self.show_colored_lines = False
            self.status = self.animator.status
        else:
            self._reset()

    def click(self, button: str, point: Point) -> bool:
        """Place P1 ("left") or P2 ("right"); False while an animation runs."""
        if self._locked():
            return False
        if self.animator is not None:
            self._reset()
        if button == "left":
            self.p1 = point
        elif button == "right":
            self.p2 = point
        self.status = IDLE_MESSAGE
        return True

    def drag(self, point: Point) -> bool:
        """Move whichever endpoint is nearer; False while an animation runs."""
        if self._locked():
            return False
        d1 = abs(point.x - self.p1.x) + abs(point.y - self.p1.y)
        d2 = abs(point.x - self.p2.x) + abs(point.y - self.p2.y)
        if d1 < d2:
            self.p1 = point
        else:
            self.p2 = point
        return True

    def advance(self) -> bool:
        """Run one timer tick; return True if another tick is needed."""
        if self.animator is None or self.animator.done:
            return False
        self.show_colored_lines = False
        clipping_step = self.animator.stage == 2
        self.status = self.animator.step()
        if clipping_step and self.animator.current_edge is not ClipEdge.NONE:
            self.show_colored_lines = True
        if self.animator.done:
            self.show_colored_lines = False
            self.show_final_line = self.animator.accepted
            return False
        return True