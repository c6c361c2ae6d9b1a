"""Reading XPM images into pixel images."""

from __future__ import annotations

import os
import re
from collections.abc import Iterable

from raycube.colornames import lookup_color
from raycube.image import Image
from raycube.wordtab import find, find_unquoted, split_words

_TRANSPARENT = 0xFF000000
_QUOTED = re.compile(r'"([^"]*)"')
_LEADING_INT = re.compile(r"\s*([+-]?\d+)")


class XpmError(ValueError):
    """Raised when XPM data cannot be read or is malformed."""


def _atoi(text: str) -> int:
    match = _LEADING_INT.match(text)
    return int(match.group(1)) if match else 0


def strip_comments(text: str) -> str:
    """Blank out C-style comments outside quoted strings, keeping offsets."""
    for opener, closer, extra in (("/*", "*/", 4), ("//", "\n", 3)):
        while (begin := find_unquoted(text, opener)) != -1:
            end = find(text[begin + 2 :], closer)
            span = end + extra
            span = min(span, len(text) - begin)
            text = text[:begin] + " " * span + text[begin + span :]
    return text


def xpm_lines_from_text(text: str) -> list[str]:
    """Return the contents of every double-quoted string, in order."""
    return _QUOTED.findall(text)


def _next_line(lines, what: str) -> str:
    try:
        return next(lines)
    except StopIteration:
        raise XpmError(f"missing {what} line") from None


def parse_xpm(lines: Iterable[str]) -> Image:
    """Build an image from XPM lines: header, colour table, then pixel rows.

    Pixels whose colour is ``None`` are stored as 0xFF000000.
    """
    lines = iter(lines)
    header = split_words(_next_line(lines, "header"))
    if len(header) < 4:
        raise XpmError("header needs width, height, colours and chars per pixel")
    width, height, ncolors, cpp = (_atoi(word) for word in header[:4])
    if width <= 0 or height <= 0 or ncolors <= 0 or cpp <= 0:
        raise XpmError(f"invalid header values {header[:4]}")

    colors: dict[str, int] = {}
    for _ in range(ncolors):
        line = _next_line(lines, "colour")
        words = split_words(line[cpp:])
        try:
            index = words.index("c") + 1
        except ValueError:
            raise XpmError(f"colour line without 'c' key: {line!r}") from None
        if index >= len(words):
            raise XpmError(f"colour line without value: {line!r}")
        value = lookup_color(words[index], words[index + 1] if index + 1 < len(words) else None)
        key = line[:cpp]
        if cpp <= 2:
            colors[key] = value
        else:
            colors.setdefault(key, value)

    image = Image(width, height)
    for y in range(height):
        line = _next_line(lines, "pixel")
        if len(line) < width * cpp:
            raise XpmError(f"pixel row {y} is too short")
        for x in range(width):
            col = colors.get(line[x * cpp : (x + 1) * cpp], 0)
            if col == -1:
                col = _TRANSPARENT
            image.put_pixel(y, x, col)
    return image


def read_xpm_file(path: str | os.PathLike[str]) -> Image:
    """Read and parse an XPM file."""
    try:
        with open(path, "rb") as handle:
            raw = handle.read()
    except OSError as exc:
        raise XpmError(f"cannot read {os.fspath(path)}: {exc}") from exc
    text = strip_comments(raw.decode("latin-1"))
    return parse_xpm(xpm_lines_from_text(text))