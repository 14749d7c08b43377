"""Small string helpers used when reading map files."""

from __future__ import annotations

_TRIM_CHARS = " \t\n"


def split_on(text: str, sep: str) -> list[str]:
    """Split ``text`` on ``sep``, dropping the empty pieces between repeats."""
    if len(sep) != 1:
        raise ValueError("separator must be a single character")
    return [word for word in text.split(sep) if word]


def find(haystack: str, needle: str) -> int | None:
    """Return the index of the first occurrence of ``needle``, or None."""
    index = haystack.find(needle)
    return None if index < 0 else index


def substring(text: str, start: int, length: int) -> str:
    """Return ``length`` characters of ``text`` beginning at ``start``."""
    if start < 0 or length < 0:
        raise ValueError("start and length must not be negative")
    if start + length > len(text):
        raise IndexError("substring runs past the end of the text")
    return text[start:start + length]


def trim(text: str) -> str:
    """Remove leading and trailing spaces, tabs and newlines."""
    return text.strip(_TRIM_CHARS)


def _single(char: str) -> str:
    if len(char) != 1:
        raise ValueError("expected a single character")
    return char


def to_lower(char: str) -> str:
    """Lower-case an ASCII letter; any other character is returned unchanged."""
    if "A" <= _single(char) <= "Z":
        return chr(ord(char) - ord("A") + ord("a"))
    return char


def to_upper(char: str) -> str:
    """Upper-case an ASCII letter; any other character is returned unchanged."""
    if "a" <= _single(char) <= "z":
        return chr(ord(char) - ord("a") + ord("A"))
    return char