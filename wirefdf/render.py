"""Wireframe rasterisation: line stepping with a linear colour ramp."""

from __future__ import annotations

from itertools import pairwise
from typing import Callable

from .model import OFFSET_X, OFFSET_Y, Camera, Point
from .transform import transform_points

PutPixel = Callable[[int, int, int], object]


def _trunc_div(a: int, b: int) -> int:
    quotient = abs(a) // abs(b)
    return quotient if (a < 0) == (b < 0) else -quotient


def get_color_delta(p1: Point, p2: Point, horizontal: bool) -> int:
    """Per-pixel colour step between two points along the line's major axis."""
    red = ((p1.rgb & 0xFF0000) >> 16) - ((p2.rgb & 0xFF0000) >> 16)
    green = ((p1.rgb & 0x00FF00) >> 8) - ((p2.rgb & 0x00FF00) >> 8)
    blue = (p1.rgb & 0x0000FF) - (p2.rgb & 0x0000FF)
    pixel_delta = p2.sx - p1.sx if horizontal else p2.sy - p1.sy
    if pixel_delta != 0:
        red = _trunc_div(red, pixel_delta)
        green = _trunc_div(green, pixel_delta)
        blue = _trunc_div(blue, pixel_delta)
    return (red << 16) | (green << 8) | blue


def change_point(move_by_one: int, total: int, delta: int, j: int) -> tuple[int, int]:
    """Advance the minor-axis coordinate once the error sum reaches a whole step."""
    if move_by_one >= 1:
        return total - delta, j + 1
    if move_by_one <= -1:
        return total + delta, j - 1
    return total, j


def _connect(start: tuple[int, int], end: tuple[int, int], color: int,
             color_delta: int, plot: Callable[[int, int, int], None]) -> None:
    """Step along the major axis from ``start`` to ``end`` (major, minor coordinates)."""
    major, minor = start
    span = end[0] - start[0]
    rise = end[1] - start[1]
    total = 0
    while major < end[0]:
        total += rise
        total, minor = change_point(_trunc_div(total, span), total, span, minor)
        major += 1
        plot(major, minor, color)
        color -= color_delta


def draw_line(p1: Point, p2: Point, put_pixel: PutPixel) -> None:
    """Draw the segment between two projected points; the first endpoint is not plotted."""
    x_span = abs(p1.sx - p2.sx)
    y_span = abs(p1.sy - p2.sy)
    if x_span <= y_span:
        if p1.sy > p2.sy:
            p1, p2 = p2, p1
        _connect((p1.sy, p1.sx), (p2.sy, p2.sx), p1.rgb, get_color_delta(p1, p2, False),
                 lambda y, x, color: put_pixel(x + OFFSET_X, y + OFFSET_Y, color))
    else:
        if p1.sx > p2.sx:
            p1, p2 = p2, p1
        _connect((p1.sx, p1.sy), (p2.sx, p2.sy), p1.rgb, get_color_delta(p1, p2, True),
                 lambda x, y, color: put_pixel(x + OFFSET_X, y + OFFSET_Y, color))


def draw_lines(points: list[list[Point]], camera: Camera, put_pixel: PutPixel) -> None:
    """Project the grid and draw every row edge, then every column edge."""
    transform_points(points, camera)
    for row in points:
        for left, right in pairwise(row):
            draw_line(left, right, put_pixel)
    for column in zip(*points):
        for upper, lower in pairwise(column):
            draw_line(upper, lower, put_pixel)