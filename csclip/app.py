"""Tk front end that animates Cohen-Sutherland clipping of one line."""

from __future__ import annotations

import argparse
import tkinter as tk

from csclip.animation import ANIM_DELAY_MS, ClipEdge, Session, region_code_label
from csclip.clipping import Point, encode

WORLD_X_MIN, WORLD_X_MAX = 0.0, 225.0
WORLD_Y_MIN, WORLD_Y_MAX = 0.0, 225.0
TEXT_BASE_Y = 200

DEFAULT_WIDTH = 1000
DEFAULT_HEIGHT = 800

WINDOW_MIN = Point(50.0, 50.0)
WINDOW_MAX = Point(150.0, 150.0)
START_P1 = Point(20.0, 120.0)
START_P2 = Point(180.0, 30.0)

BLACK = "#000000"
RED = "#ff0000"
GREEN = "#00b300"
BLUE = "#0000ff"
ORANGE = "#ff8000"
GRAY = "#808080"

EDGE_COLORS = {
    ClipEdge.LEFT: RED,
    ClipEdge.RIGHT: GREEN,
    ClipEdge.BOTTOM: BLUE,
    ClipEdge.TOP: ORANGE,
}

TITLE = "Cohen-Sutherland Line Clipping Animation"
IDLE_TEXT = "Set line endpoints and press SPACE to start animation"


def _check_size(width: float, height: float) -> None:
    if width <= 0 or height <= 0:
        raise ValueError(f"window size must be positive, got {width}x{height}")


def screen_to_world(x: float, y: float, width: float, height: float) -> Point:
    """Map a pixel position (origin top-left) to world coordinates."""
    _check_size(width, height)
    wx = x * (WORLD_X_MAX - WORLD_X_MIN) / width + WORLD_X_MIN
    wy = (height - y) * (WORLD_Y_MAX - WORLD_Y_MIN) / height + WORLD_Y_MIN
    return Point(wx, wy)


def world_to_screen(point: Point, width: float, height: float) -> tuple[float, float]:
    """Map a world point to a pixel position (origin top-left)."""
    _check_size(width, height)
    sx = (point.x - WORLD_X_MIN) * width / (WORLD_X_MAX - WORLD_X_MIN)
    sy = height - (point.y - WORLD_Y_MIN) * height / (WORLD_Y_MAX - WORLD_Y_MIN)
    return sx, sy


class ClipperApp:
    """Canvas view, input bindings and animation timers around a Session."""

    def __init__(self, root: tk.Misc, width: int, height: int):
        self.root = root
        self.width = width
        self.height = height
        self.session = Session(START_P1, START_P2, WINDOW_MIN, WINDOW_MAX)
        self._step_timer: str | None = None
        self._colour_timer: str | None = None

        self.canvas = tk.Canvas(
            root, width=width, height=height, background="white", highlightthickness=0
        )
        self.canvas.pack(fill=tk.BOTH, expand=True)

        self.canvas.bind("<ButtonPress-1>", lambda e: self._on_click("left", e))
        self.canvas.bind("<ButtonPress-3>", lambda e: self._on_click("right", e))
        self.canvas.bind("<B1-Motion>", self._on_drag)
        self.canvas.bind("<B3-Motion>", self._on_drag)
        self.canvas.bind("<Configure>", self._on_resize)
        root.bind("<space>", self._on_space)
        root.bind("<Escape>", lambda _e: root.destroy())

        self.redraw()

    # -- input -----------------------------------------------------------

    def _event_point(self, event: tk.Event) -> Point:
        return screen_to_world(event.x, event.y, self.width, self.height)

    def _on_click(self, button: str, event: tk.Event) -> None:
        if self.session.click(button, self._event_point(event)):
            self._cancel_timers()
            self.redraw()

    def _on_drag(self, event: tk.Event) -> None:
        if self.session.drag(self._event_point(event)):
            self.redraw()

    def _on_resize(self, event: tk.Event) -> None:
        if event.width > 0 and event.height > 0:
            self.width, self.height = event.width, event.height
            self.redraw()

    def _on_space(self, _event: tk.Event) -> None:
        self._cancel_timers()
        self.session.toggle()
        if self.session.animator is not None:
            self._step_timer = self.root.after(ANIM_DELAY_MS, self._tick)
        self.redraw()

    # -- timers ----------------------------------------------------------

    def _cancel_timers(self) -> None:
        for timer in (self._step_timer, self._colour_timer):
            if timer is not None:
                self.root.after_cancel(timer)
        self._step_timer = None
        self._colour_timer = None

    def _tick(self) -> None:
        self._step_timer = None
        more = self.session.advance()
        if self.session.show_colored_lines:
            if self._colour_timer is not None:
                self.root.after_cancel(self._colour_timer)
            self._colour_timer = self.root.after(ANIM_DELAY_MS, self._hide_colours)
        if more:
            self._step_timer = self.root.after(ANIM_DELAY_MS, self._tick)
        self.redraw()

    def _hide_colours(self) -> None:
        self._colour_timer = None
        self.session.show_colored_lines = False
        self.redraw()

    # -- drawing ---------------------------------------------------------

    def _xy(self, point: Point) -> tuple[float, float]:
        return world_to_screen(point, self.width, self.height)

    def _line(self, a: Point, b: Point, color: str, width: float = 1.0, dash=None) -> None:
        self.canvas.create_line(*self._xy(a), *self._xy(b), fill=color, width=width, dash=dash)

    def _dot(self, p: Point, color: str, radius: float = 3.0) -> None:
        x, y = self._xy(p)
        self.canvas.create_rectangle(
            x - radius, y - radius, x + radius, y + radius, fill=color, outline=color
        )

    def _text(self, text: str, x: float, y: float, font=("Courier", 11)) -> None:
        sx, sy = self._xy(Point(x, y))
        self.canvas.create_text(sx, sy, text=text, anchor="sw", fill=BLACK, font=font)

    def _region_code(self, p: Point, code: int, label: str) -> None:
        self._text(region_code_label(code), p.x + 5, p.y + 5, font=("Courier", 10))
        self._text(label, p.x - 15, p.y - 5, font=("Courier", 10))

    def _clipping_window(self) -> None:
        lo, hi = self.session.win_min, self.session.win_max
        corners = [lo, Point(hi.x, lo.y), hi, Point(lo.x, hi.y)]
        for a, b in zip(corners, corners[1:] + corners[:1]):
            self._line(a, b, BLUE, dash=(8, 8))

    def _edge_key(self) -> None:
        y = TEXT_BASE_Y - 10
        self._text("Edge Color Key:", 10, y)
        for edge, x0, x_label in (
            (ClipEdge.LEFT, 100, 125),
            (ClipEdge.RIGHT, 135, 160),
            (ClipEdge.BOTTOM, 175, 200),
            (ClipEdge.TOP, 65, 90),
        ):
            self._line(Point(x0, y), Point(x0 + 20, y), EDGE_COLORS[edge])
            self._text(edge.name, x_label, y)

    def _idle(self) -> None:
        s = self.session
        self._line(s.p1, s.p2, BLACK)
        self._dot(s.p1, RED)
        self._dot(s.p2, GREEN)
        self._region_code(s.p1, encode(s.p1, s.win_min, s.win_max), "P1")
        self._region_code(s.p2, encode(s.p2, s.win_min, s.win_max), "P2")
        self._text(IDLE_TEXT, 10, 10)

    def _animating(self) -> None:
        s = self.session
        anim = s.animator
        self._edge_key()
        if anim.swapped:
            self._text("*Points were swapped during algorithm*", 10, TEXT_BASE_Y - 40)

        if (
            anim.current_edge is not ClipEdge.NONE
            and not anim.swap_in_progress
            and s.show_colored_lines
        ):
            color = EDGE_COLORS.get(anim.current_edge, GRAY)
            self._line(anim.p1, anim.p2, BLACK)
            self._line(anim.prev_p1, anim.p1, color, width=2.0)
            if anim.prev_p2 != anim.p2:
                self._line(anim.prev_p2, anim.p2, color, width=2.0)
        elif not anim.done:
            self._line(anim.p1, anim.p2, BLACK)

        if anim.done and anim.accepted and s.show_final_line:
            for px, py in anim.final_pixels():
                self._dot(Point(px, py), BLACK, radius=1.0)

        self._dot(anim.p1, RED)
        self._dot(anim.p2, GREEN)
        self._region_code(anim.p1, anim.code1, "P1")
        self._region_code(anim.p2, anim.code2, "P2")
        self._text(f"Step: {anim.stage} - {s.status}", 10, 10)
        if anim.done:
            verdict = "ACCEPTED" if anim.accepted else "REJECTED"
            self._text(f"Line {verdict} - Press SPACE to reset", 10, 30)

    def redraw(self) -> None:
        """Repaint the whole scene from the current session state."""
        self.canvas.delete("all")
        self._clipping_window()
        self._text(
            "Click and drag to move endpoints. Left button = P1, Right button = P2",
            10,
            TEXT_BASE_Y,
        )
        self._text("Press SPACE to start/reset animation", 10, TEXT_BASE_Y - 20)
        if self.session.animator is None:
            self._idle()
        else:
            self._animating()


def main(argv: list[str] | None = None) -> int:
    """Open the clipping window and run until it is closed."""
    parser = argparse.ArgumentParser(prog="csclip", description=TITLE)
    parser.add_argument("--width", type=int, default=DEFAULT_WIDTH)
    parser.add_argument("--height", type=int, default=DEFAULT_HEIGHT)
    args = parser.parse_args(argv)
    if args.width <= 0 or args.height <= 0:
        parser.error("width and height must be positive")

    root = tk.Tk()
    root.title(TITLE)
    root.geometry(f"{args.width}x{args.height}+50+50")
    ClipperApp(root, args.width, args.height)
    root.mainloop()
    return 0


if __name__ == "__main__":
    raise SystemExit(main())