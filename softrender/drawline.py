"""Bresenham line drawing onto any pixel sink."""

from __future__ import annotations

from typing import Any, Protocol

from .geometry import Vec2


class _Canvas(Protocol):
    def set_pixel(self, x: int, y: int, color: Any) -> None:
        ...


def draw_line(canvas: _Canvas, ax: int, ay: int, bx: int, by: int, color: Any) -> None:
    """Draw a line between two integer points, both ends included."""
    steep = abs(ax - bx) < abs(ay - by)
    if steep:
        ax, ay = ay, ax
        bx, by = by, bx
    if ax > bx:
        ax, bx = bx, ax
        ay, by = by, ay

    step = 1 if by > ay else -1
    run = bx - ax
    rise = 2 * abs(by - ay)
    y = ay
    error = 0
    for x in range(ax, bx + 1):
        if steep:
            canvas.set_pixel(y, x, color)
        else:
            canvas.set_pixel(x, y, color)
        error += rise
        if error > run:
            y += step
            error -= 2 * run


def draw_segment(canvas: _Canvas, a: Vec2, b: Vec2, color: Any) -> None:
    """Draw a line between two vectors, truncating their coordinates."""
    draw_line(canvas, int(a.x), int(a.y), int(b.x), int(b.y), color)