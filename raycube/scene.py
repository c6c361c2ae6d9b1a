"""Reading ``.cub`` scene descriptions: textures, colours and the map."""

from __future__ import annotations

import os
import re
import string
from dataclasses import dataclass, field

from raycube.errors import Cub3DError

_BLANKS = " \t\r\v\f"
_ATOI = re.compile(r"[ \t\n\v\f\r]*([+-]?[0-9]+)")
_TEXTURE_IDS = {"NO": "north", "SO": "south", "WE": "west", "EA": "east"}

_ERR_FLOOR_CEILING = "Invalid floor/ceiling RGB color(s)"
_ERR_COLOR_CEILING = "Invalid ceiling RGB color"
_ERR_COLOR_FLOOR = "Invalid floor RGB color"
_ERR_TEXTURE = "Invalid texture line"
_ERR_UNKNOWN = "Unrecognised line in scene"
_ERR_NO_MAP = "Missing map"
_ERR_NO_COLOR = "Missing floor or ceiling color"
_ERR_EXTENSION = "extension file is wrong"
_ERR_OPEN = "cannot open file"


def _atoi(text: str) -> int:
    match = _ATOI.match(text)
    return int(match.group(1)) if match else 0


def _skip_blanks(line: str) -> int:
    return len(line) - len(line.lstrip(_BLANKS))


def _to_hex(rgb: tuple[int, int, int]) -> int:
    red, green, blue = rgb
    return (red << 16) | (green << 8) | blue


def parse_rgb(text: str) -> tuple[int, int, int]:
    """Parse ``R,G,B`` into three integers.

    Empty pieces between commas are ignored; exactly three must remain, each
    holding a digit and not reading as -1.
    """
    parts = [part for part in text.lstrip(" \t").split(",") if part]
    if len(parts) != 3:
        raise ValueError(f"expected three colour components in {text!r}")
    values = []
    for part in parts:
        value = _atoi(part)
        if value == -1 or not any(char in string.digits for char in part):
            raise ValueError(f"invalid colour component {part!r}")
        values.append(value)
    return values[0], values[1], values[2]


def widest_line(lines: list[str], start: int) -> int:
    """Return the length of the longest line from ``start`` to the end."""
    if not 0 <= start < len(lines):
        raise ValueError(f"start line {start} outside {len(lines)} lines")
    return max(len(line) for line in lines[start:])


def _is_map_line(line: str) -> bool:
    return line[_skip_blanks(line):][:1] == "1"


def build_map(lines: list[str], start: int) -> list[list[str]]:
    """Build the grid from the map lines beginning at ``start``.

    The map runs while lines start, after blanks, with a wall. Rows are
    padded with NUL characters to the widest line and spaces after the first
    non-blank character become walls.
    """
    width = widest_line(lines, start)
    rows = []
    for line in lines[start:]:
        if not _is_map_line(line):
            break
        rows.append(line.split("\n", 1)[0])
    grid = []
    for row in rows:
        lead = _skip_blanks(row)
        cells = list(row)
        for j in range(lead + 1, len(cells)):
            if cells[j] == " ":
                cells[j] = "1"
        cells.extend("\0" * (width - len(cells)))
        grid.append(cells)
    return grid


@dataclass
class Scene:
    """Everything a scene file describes."""

    path: str
    lines: list[str]
    grid: list[list[str]]
    ceiling: tuple[int, int, int]
    floor: tuple[int, int, int]
    north: str | None = None
    south: str | None = None
    east: str | None = None
    west: str | None = None
    map_start: int = 0
    map_end: int = 0
    extra: dict[str, str] = field(default_factory=dict)

    @property
    def hex_ceiling(self) -> int:
        return _to_hex(self.ceiling)

    @property
    def hex_floor(self) -> int:
        return _to_hex(self.floor)

    @property
    def height(self) -> int:
        return len(self.grid)

    @property
    def width(self) -> int:
        return len(self.grid[0]) if self.grid else 0


def _color_line(line: str, j: int, colors: dict[str, tuple[int, int, int]], path: str) -> None:
    following = line[j + 1 : j + 2]
    if following and following.isprintable() and following.isascii() and following not in " \t":
        raise Cub3DError(_ERR_FLOOR_CEILING, path)
    key = line[j]
    if key == "C" and "C" not in colors:
        message = _ERR_COLOR_CEILING
    elif key == "F" and "F" not in colors:
        message = _ERR_COLOR_FLOOR
    else:
        raise Cub3DError(_ERR_FLOOR_CEILING, path)
    try:
        colors[key] = parse_rgb(line[j + 1 :])
    except ValueError:
        raise Cub3DError(message, path) from None


def parse_scene(lines: list[str], path: str) -> Scene:
    """Interpret the non-empty lines of a scene file."""
    textures: dict[str, str] = {}
    colors: dict[str, tuple[int, int, int]] = {}
    grid: list[list[str]] | None = None
    start = 0
    for index, line in enumerate(lines):
        j = _skip_blanks(line)
        rest = line[j:]
        if not rest:
            continue
        if rest[0] == "1":
            start = index
            grid = build_map(lines, index)
            break
        ident = rest[:2]
        if ident in _TEXTURE_IDS and rest[2:3] in ("", " ", "\t"):
            name = _TEXTURE_IDS[ident]
            texture = rest[2:].strip(_BLANKS)
            if name in textures or not texture:
                raise Cub3DError(_ERR_TEXTURE, path)
            textures[name] = texture
        elif rest[0] in "FC":
            _color_line(line, j, colors, path)
        else:
            raise Cub3DError(_ERR_UNKNOWN, path)
    if grid is None:
        raise Cub3DError(_ERR_NO_MAP, path)
    if "C" not in colors or "F" not in colors:
        raise Cub3DError(_ERR_NO_COLOR, path)
    return Scene(
        path=path,
        lines=list(lines),
        grid=grid,
        ceiling=colors["C"],
        floor=colors["F"],
        map_start=start,
        map_end=start + len(grid),
        **textures,
    )


def read_scene(path: str | os.PathLike[str]) -> Scene:
    """Read a ``.cub`` file and parse it; empty lines are dropped."""
    name = os.fspath(path)
    base = os.path.basename(name)
    dot = base.find(".")
    if dot == -1 or base[dot:] != ".cub":
        raise Cub3DError(_ERR_EXTENSION, name)
    try:
        with open(name, "rb") as handle:
            text = handle.read().decode("latin-1")
    except OSError as exc:
        raise Cub3DError(_ERR_OPEN, name) from exc
    lines = [line for line in text.split("\n") if line]
    return parse_scene(lines, name)