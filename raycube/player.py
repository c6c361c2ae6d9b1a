"""The player: where it stands, where it looks and how keys move it."""

from __future__ import annotations

import math
from dataclasses import dataclass

from raycube.errors import Cub3DError
from raycube.vector import Vec

MOVE_SPEED = 0.005
ROTATION_SPEED = 0.003

_KEYS = {
    97: "a",
    100: "d",
    115: "s",
    119: "w",
    65307: "escape",
    65361: "left",
    65362: "up",
    65363: "right",
    65364: "down",
}

_FACINGS = {
    "N": (Vec(-1.0, 0.0), Vec(0.0, 0.66)),
    "S": (Vec(1.0, 0.0), Vec(0.0, -0.66)),
    "E": (Vec(0.0, -1.0), Vec(0.66, 0.0)),
    "W": (Vec(0.0, 1.0), Vec(-0.66, 0.0)),
}


@dataclass
class Keys:
    """Which of the game's keys are held down."""

    w: bool = False
    s: bool = False
    a: bool = False
    d: bool = False
    escape: bool = False
    left: bool = False
    up: bool = False
    right: bool = False
    down: bool = False

    def _set(self, code: int, state: bool) -> None:
        name = _KEYS.get(code)
        if name is not None:
            setattr(self, name, state)

    def press(self, code: int) -> None:
        """Mark the key with this keysym as held."""
        self._set(code, True)

    def release(self, code: int) -> None:
        """Mark the key with this keysym as released."""
        self._set(code, False)


def _rotate(vec: Vec, angle: float) -> Vec:
    cos, sin = math.cos(angle), math.sin(angle)
    return Vec(vec.x * sin + vec.y * cos, vec.x * cos - vec.y * sin)


@dataclass
class Player:
    """Position, view direction and camera plane, all in (y, x) order."""

    pos: Vec
    dir: Vec
    camera_plane: Vec

    @staticmethod
    def from_map(grid: list[list[str]]) -> Player:
        """Find the first N, S, E or W cell, face that way and clear the cell."""
        for y, row in enumerate(grid):
            for x, cell in enumerate(row):
                if cell == "\0":
                    break
                if cell in _FACINGS:
                    direction, plane = _FACINGS[cell]
                    grid[y][x] = "0"
                    return Player(Vec(y + 0.5, x + 0.5), direction, plane)
        raise Cub3DError("Ain't got no player on the map")

    def _step(self, grid: list[list[str]], dy: float, dx: float) -> None:
        new_y = self.pos.y + dy
        if grid[int(new_y)][int(self.pos.x)] != "1":
            self.pos = Vec(new_y, self.pos.x)
        new_x = self.pos.x + dx
        if grid[int(self.pos.y)][int(new_x)] != "1":
            self.pos = Vec(self.pos.y, new_x)

    def _turn(self, angle: float) -> None:
        self.dir = _rotate(self.dir, angle)
        self.camera_plane = _rotate(self.camera_plane, angle)

    def move(self, keys: Keys, grid: list[list[str]]) -> None:
        """Apply one frame of movement and rotation for the held keys."""
        if keys.w:
            self._step(grid, self.dir.y * MOVE_SPEED, self.dir.x * MOVE_SPEED)
        if keys.s:
            self._step(grid, -self.dir.y * MOVE_SPEED, -self.dir.x * MOVE_SPEED)
        if keys.a:
            self._step(grid, -self.camera_plane.y * MOVE_SPEED, -self.camera_plane.x * MOVE_SPEED)
        if keys.d:
            self._step(grid, self.camera_plane.y * MOVE_SPEED, self.camera_plane.x * MOVE_SPEED)
        if keys.left:
            self._turn(-ROTATION_SPEED)
        if keys.right:
            self._turn(ROTATION_SPEED)