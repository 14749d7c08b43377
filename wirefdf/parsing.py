"""Reading height maps: one line per row, whitespace-separated altitudes with optional colours."""

from __future__ import annotations

import os
import re

from .model import GREEN, OFFSET_X, OFFSET_Y, WHITE, WINDOW_HEIGHT, WINDOW_WIDTH, Point
from .textutil import to_lower

_HEX_COLOR = re.compile(r",0[xX]([0-9A-Fa-f]*)")
_HEX_DIGITS = "abcdef"


class MapFormatError(ValueError):
    """Raised when a map file does not follow the expected format."""


def _is_digit(char: str) -> bool:
    return "0" <= char <= "9"


def _skip_spaces(line: str, index: int) -> int:
    while index < len(line) and line[index] == " ":
        index += 1
    return index


def _skip_digits(line: str, index: int) -> int:
    while index < len(line) and _is_digit(line[index]):
        index += 1
    return index


def _atoi(line: str, index: int) -> int:
    """Read a decimal integer the way the C library does, stopping at the first non-digit."""
    while index < len(line) and line[index] in " \t\n\v\f\r":
        index += 1
    sign = 1
    if index < len(line) and line[index] in "+-":
        if line[index] == "-":
            sign = -1
        index += 1
    end = _skip_digits(line, index)
    return sign * int(line[index:end]) if end > index else 0


def fetch_hexadecimal(text: str) -> str | None:
    """Return the hex digits of a ``,0x...`` colour suffix at the start of ``text``, or None."""
    match = _HEX_COLOR.match(text)
    return match.group(1) if match else None


def a_to_color(color: str) -> int:
    """Convert a string of hex digits to an integer; other characters count as zero."""
    result = 0
    for char in color:
        result <<= 4
        if _is_digit(char):
            result += ord(char) - ord("0")
        lowered = to_lower(char)
        if lowered in _HEX_DIGITS:
            result += ord(lowered) - ord("a") + 10
    return result


def _color_length(text: str) -> int:
    color = fetch_hexadecimal(text)
    return 0 if color is None else len(color) + 3


def count_points(line: str) -> int:
    """Count the values on one map line, checking that it holds nothing else."""
    result = 0
    index = 0
    while index < len(line):
        index = _skip_spaces(line, index)
        if index < len(line) and (_is_digit(line[index]) or line[index] == "-"):
            result += 1
            if line[index] == "-":
                index += 1
            index = _skip_digits(line, index)
        index += _color_length(line[index:])
        index = _skip_spaces(line, index)
        if index < len(line) and line[index] != "-" and not _is_digit(line[index]):
            raise MapFormatError("File is in an invalid format")
    return result


def parse_point(line: str, x: int, y: int, index: int) -> tuple[Point, int]:
    """Parse the value starting at ``index``; return the point and the index after it."""
    z = _atoi(line, index)
    while index < len(line) and (_is_digit(line[index]) or line[index] == "-"):
        index += 1
    if index < len(line) and line[index] not in ", ":
        raise MapFormatError("Invalid file format")
    rgb = GREEN if z != 0 else WHITE
    if index < len(line) and line[index] == ",":
        color = fetch_hexadecimal(line[index:])
        if color is None:
            raise MapFormatError("Invalid colour")
        index += len(color) + 3
        rgb = a_to_color(color)
    return Point(x=x, y=y, z=z, rgb=rgb), index


def parse_row(line: str, row: int, expected: int) -> list[Point] | None:
    """Parse one map line; return None when it does not hold ``expected`` points."""
    points: list[Point] = []
    index = _skip_spaces(line, 0)
    while index < len(line):
        if len(points) > expected:
            raise MapFormatError("Invalid amount of points on a line")
        point, index = parse_point(line, len(points), row, index)
        points.append(point)
        index = _skip_spaces(line, index)
    return points if len(points) == expected else None


def normalize_points(points: list[list[Point]], cols: int, rows: int) -> None:
    """Spread the points evenly over the drawing area, in place."""
    cols = 2 if cols - 1 == 0 else cols
    rows = 2 if rows - 1 == 0 else rows
    width = WINDOW_WIDTH - 2 * OFFSET_X
    height = WINDOW_HEIGHT - 2 * OFFSET_Y
    for i, row in enumerate(points):
        for j, point in enumerate(row):
            point.x = (width * j) // (cols - 1)
            point.y = (height * i) // (rows - 1)


def parse_map(lines) -> list[list[Point]]:
    """Build the normalised point grid from map lines.

    The grid ends before the first row whose point count differs from the first row's.
    """
    lines = [line[:-1] if line.endswith("\n") else line for line in lines]
    if not lines:
        raise MapFormatError("Map is empty")
    expected = count_points(lines[0])
    grid: list[list[Point]] = []
    truncated = False
    for row_number, line in enumerate(lines):
        row = parse_row(line, row_number, expected)
        if row is None:
            truncated = True
        elif not truncated:
            grid.append(row)
    normalize_points(grid, expected, len(lines))
    return grid


def read_map(path: str | os.PathLike) -> list[list[Point]]:
    """Read and parse a map file."""
    with open(path, encoding="utf-8") as handle:
        text = handle.read()
    lines = text.split("\n")
    if lines and lines[-1] == "":
        lines.pop()
    return parse_map(lines)