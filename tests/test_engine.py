import pytest

from raycube import engine
from raycube.engine import RayHit, cast_ray, render
from raycube.image import Image
from raycube.player import Player
from raycube.vector import Vec

ROOM5 = ["11111", "10001", "10001", "10001", "11111"]
ROOM7 = [
    "1111111",
    "1000001",
    "1000001",
    "1000001",
    "1000001",
    "1000001",
    "1111111",
]


def make_grid(rows):
    return [list(row) for row in rows]


def north_player(y, x):
    return Player(Vec(y, x), Vec(-1.0, 0.0), Vec(0.0, 0.66))


@pytest.mark.parametrize("camera_x", [-1.0, -0.5, 0.0, 0.3, 0.99])
def test_hit_cell_is_wall(camera_x):
    grid = make_grid(ROOM5)
    hit = cast_ray(north_player(2.5, 2.5), grid, camera_x)
    assert grid[hit.map_y][hit.map_x] == "1"
    assert hit.distance > 0


def test_straight_ray_distance():
    hit = cast_ray(north_player(2.5, 2.5), make_grid(ROOM5), 0.0)
    assert hit.distance == pytest.approx(1.5)
    assert hit.ray_dir == Vec(-1.0, 0.0)


def test_mirrored_rays_hit_at_same_distance():
    grid = make_grid(ROOM5)
    player = north_player(2.5, 2.5)
    left = cast_ray(player, grid, -0.5)
    right = cast_ray(player, grid, 0.5)
    assert left.distance == pytest.approx(right.distance)
    assert left.map_y == right.map_y


@pytest.mark.parametrize(
    "letter, color",
    [("N", engine.RED), ("S", engine.GREEN), ("E", engine.WHITE), ("W", engine.BLUE)],
)
def test_wall_colour_follows_facing(letter, color):
    rows = ["11111", "10001", f"10{letter}01", "10001", "11111"]
    grid = make_grid(rows)
    player = Player.from_map(grid)
    assert cast_ray(player, grid, 0.0).color == color


def test_render_column_layout():
    grid = make_grid(ROOM5)
    image = Image(40, 30)
    ceiling, floor = 0x111111, 0x222222
    hits = render(image, north_player(2.5, 2.5), grid, ceiling, floor)
    assert len(hits) == image.width
    for x in (0, 20, 39):
        column = [image.get_pixel(y, x) for y in range(image.height)]
        assert column[0] == ceiling
        assert column[-1] == floor
        assert column[image.height // 2] == hits[x].color
        assert set(column) <= {ceiling, floor, hits[x].color}


def test_render_hits_match_cast_ray():
    grid = make_grid(ROOM5)
    player = north_player(2.5, 2.5)
    image = Image(16, 12)
    hits = render(image, player, grid, 0, 0)
    for x, hit in enumerate(hits):
        assert hit == cast_ray(player, grid, 2 * x / float(image.width) - 1)
        assert isinstance(hit, RayHit)


def test_closer_wall_is_taller():
    grid = make_grid(ROOM7)
    far_image, near_image = Image(20, 60), Image(20, 60)
    far_hits = render(far_image, north_player(5.5, 3.5), grid, 1, 2)
    near_hits = render(near_image, north_player(1.5, 3.5), grid, 1, 2)
    x = 10
    far_count = sum(far_image.get_pixel(y, x) == far_hits[x].color for y in range(60))
    near_count = sum(near_image.get_pixel(y, x) == near_hits[x].color for y in range(60))
    assert near_hits[x].distance < far_hits[x].distance
    assert near_count > far_count