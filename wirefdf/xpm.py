"""Loading XPM images, either from a list of strings or from an XPM source file."""

from __future__ import annotations

import os
import re
from collections.abc import Iterable, Iterator, Sequence
from dataclasses import dataclass

from .colornames import lookup_color

TRANSPARENT = 0xFF000000

_WORD_SEPARATORS = re.compile(r"[ \t]+")
_LEADING_INT = re.compile(r"\s*([+-]?\d+)")
_LEADING_HEX = re.compile(r"[0-9A-Fa-f]+")
_QUOTED = re.compile(r'"([^"]*)"')


class XpmError(ValueError):
    """Raised when XPM data cannot be parsed."""


@dataclass(frozen=True)
class XpmImage:
    """A decoded image: ``pixels[y][x]`` holds a 0xAARRGGBB value."""

    width: int
    height: int
    pixels: tuple[tuple[int, ...], ...]


def split_words(text: str) -> list[str]:
    """Split ``text`` on runs of spaces and tabs, dropping empty words."""
    return [word for word in _WORD_SEPARATORS.split(text) if word]


def find_substring(text: str, find: str, length: int) -> int | None:
    """Return the first index of ``find`` within the first ``length`` characters, or None."""
    if not find:
        raise ValueError("search string must not be empty")
    if len(find) > length:
        return None
    index = text.find(find, 0, length)
    return None if index < 0 else index


def find_unquoted(text: str, find: str, length: int) -> int | None:
    """Like :func:`find_substring`, but skip matches inside double-quoted strings."""
    if not find:
        raise ValueError("search string must not be empty")
    if len(find) > length:
        return None
    limit = min(len(text), length)
    quoted = False
    for pos in range(limit - len(find) + 1):
        if text[pos] == '"':
            quoted = not quoted
        if not quoted and text.startswith(find, pos):
            return pos
    return None


def _blank(text: str, start: int, stop: int) -> str:
    return text[:start] + " " * (stop - start) + text[stop:]


def strip_comments(text: str) -> str:
    """Replace ``/* */`` and ``//`` comments outside strings with spaces, keeping the length."""
    while (start := find_unquoted(text, "/*", len(text))) is not None:
        body = start + 2
        end = find_substring(text[body:], "*/", len(text) - body)
        if end is None:
            raise XpmError("unterminated comment")
        text = _blank(text, start, body + end + 2)
    while (start := find_unquoted(text, "//", len(text))) is not None:
        body = start + 2
        end = find_substring(text[body:], "\n", len(text) - body) if body < len(text) else None
        text = _blank(text, start, len(text) if end is None else body + end + 1)
    return text


def color_name_key(chars: str) -> int:
    """Pack the characters of a pixel code into one integer key."""
    result = 0
    for char in chars:
        result = (result << 8) + ord(char)
    return result


def text_to_rgb(name: str, end: str | None = None) -> int:
    """Resolve a colour given as ``#RRGGBB`` or as a name; unknown names give 0.

    When ``end`` is given it is joined to ``name`` with a space before the lookup,
    so two-word names such as ``light blue`` are found.
    """
    if name.startswith("#"):
        match = _LEADING_HEX.match(name, 1)
        return int(match.group(), 16) if match else 0
    if end is not None:
        name = f"{name} {end}"
    try:
        return lookup_color(name)
    except KeyError:
        return 0


def _atoi(text: str) -> int:
    match = _LEADING_INT.match(text)
    return int(match.group(1)) if match else 0


def _next_line(lines: Iterator[str], what: str) -> str:
    try:
        return next(lines)
    except StopIteration:
        raise XpmError(f"missing {what}") from None


def _parse_header(line: str) -> tuple[int, int, int, int]:
    words = split_words(line)
    if len(words) < 4:
        raise XpmError("header needs width, height, colour count and characters per pixel")
    values = tuple(_atoi(word) for word in words[:4])
    if any(value <= 0 for value in values):
        raise XpmError("header values must be positive")
    return values  # type: ignore[return-value]


def _parse_color_line(line: str, cpp: int) -> tuple[int, int]:
    if len(line) < cpp:
        raise XpmError("colour line is shorter than a pixel code")
    words = split_words(line[cpp:])
    try:
        index = words.index("c") + 1
    except ValueError:
        raise XpmError("colour line has no 'c' entry") from None
    if index >= len(words):
        raise XpmError("colour line has no colour after 'c'")
    end = words[index + 1] if index + 1 < len(words) else None
    return color_name_key(line[:cpp]), text_to_rgb(words[index], end)


def parse_xpm(lines: Iterable[str]) -> XpmImage:
    """Decode the strings of an XPM image: header, colour lines, then pixel rows."""
    stream = iter(lines)
    width, height, ncolors, cpp = _parse_header(_next_line(stream, "header"))

    colors: dict[int, int] = {}
    for _ in range(ncolors):
        key, rgb = _parse_color_line(_next_line(stream, "colour line"), cpp)
        # Short codes use a direct table where later entries overwrite;
        # longer codes are searched so that the first entry wins.
        if cpp <= 2 or key not in colors:
            colors[key] = rgb

    rows = []
    for _ in range(height):
        line = _next_line(stream, "pixel row")
        if len(line) < width * cpp:
            raise XpmError("pixel row is shorter than the image width")
        row = []
        for x in range(width):
            color = colors.get(color_name_key(line[x * cpp:(x + 1) * cpp]), 0)
            row.append(TRANSPARENT if color == -1 else color)
        rows.append(tuple(row))
    return XpmImage(width=width, height=height, pixels=tuple(rows))


def quoted_lines(text: str) -> Iterator[str]:
    """Yield the contents of successive double-quoted strings in ``text``."""
    for match in _QUOTED.finditer(text):
        yield match.group(1)


def xpm_to_image(data: Sequence[str]) -> XpmImage:
    """Decode an image given as the list of XPM strings."""
    return parse_xpm(data)


def xpm_file_to_image(path: str | os.PathLike) -> XpmImage:
    """Read and decode an XPM source file."""
    with open(path, encoding="latin-1") as handle:
        text = handle.read()
    return parse_xpm(quoted_lines(strip_comments(text)))