"""Ray casting: one ray per screen column, walls drawn as vertical strips."""

from __future__ import annotations

from dataclasses import dataclass

from raycube.image import Image
from raycube.player import Player
from raycube.vector import Vec

WHITE = 0xFFFFFF
RED = 0xFF0000
GREEN = 0x00FF00
BLUE = 0x0000FF

_FAR = 1e30


@dataclass(frozen=True)
class RayHit:
    """Where a ray met a wall and how far it is from the camera plane."""

    map_y: int
    map_x: int
    side: int
    distance: float
    ray_dir: Vec

    @property
    def color(self) -> int:
        """Wall colour picked from the face the ray struck."""
        if self.side == 0:
            return WHITE if self.ray_dir.x < 0 else BLUE
        return RED if self.ray_dir.y < 0 else GREEN


def _is_wall(grid: list[list[str]], y: int, x: int) -> bool:
    if not (0 <= y < len(grid) and 0 <= x < len(grid[y])):
        return True
    return grid[y][x] > "0"


def cast_ray(player: Player, grid: list[list[str]], camera_x: float) -> RayHit:
    """Cast the ray through ``camera_x`` (-1 left edge, 1 right edge) by DDA."""
    ray = player.dir + player.camera_plane * camera_x
    pos = player.pos
    map_y, map_x = int(pos.y), int(pos.x)
    delta_x = _FAR if ray.x == 0 else abs(1 / ray.x)
    delta_y = _FAR if ray.y == 0 else abs(1 / ray.y)

    if ray.x < 0:
        step_x = -1
        side_x = (pos.x - map_x) * delta_x
    else:
        step_x = 1
        side_x = (map_x + 1.0 - pos.x) * delta_x
    if ray.y < 0:
        step_y = -1
        side_y = (pos.y - map_y) * delta_y
    else:
        step_y = 1
        side_y = (map_y + 1.0 - pos.y) * delta_y

    side = 0
    while True:
        if side_x < side_y:
            side_x += delta_x
            map_x += step_x
            side = 0
        else:
            side_y += delta_y
            map_y += step_y
            side = 1
        if _is_wall(grid, map_y, map_x):
            break

    if side == 0:
        distance = (map_x - pos.x + (1 - step_x) // 2) / ray.x
    else:
        distance = (map_y - pos.y + (1 - step_y) // 2) / ray.y
    return RayHit(map_y, map_x, side, distance, ray)


def _draw_column(image: Image, x: int, hit: RayHit, ceiling: int, floor: int) -> None:
    height = image.height
    line_height = int(height / hit.distance) if hit.distance > 0 else height
    top = max(-(line_height // 2) + height // 2, 0)
    bottom = min(line_height // 2 + height // 2, height - 1)
    for y in range(top + 1):
        image.put_pixel(y, x, ceiling)
    for y in range(bottom + 1, height):
        image.put_pixel(y, x, floor)
    image.draw_vertical_line(x, top, bottom, hit.color)


def render(
    image: Image, player: Player, grid: list[list[str]], ceiling: int, floor: int
) -> list[RayHit]:
    """Draw one frame into ``image`` and return the hit of every column."""
    hits = []
    for x in range(image.width):
        camera_x = 2 * x / float(image.width) - 1
        hit = cast_ray(player, grid, camera_x)
        _draw_column(image, x, hit, ceiling, floor)
        hits.append(hit)
    return hits