import math

import pytest

from raycube.errors import Cub3DError
from raycube.game import Game, describe_scene, main
from raycube.scene import parse_scene

LINES = [
    "NO ./n.xpm",
    "SO ./s.xpm",
    "WE ./w.xpm",
    "EA ./e.xpm",
    "F 220,100,0",
    "C 225,30,0",
    "1111111",
    "1000001",
    "1000001",
    "1000001",
    "100N001",
    "1000001",
    "1111111",
]


def make_scene(lines=LINES):
    return parse_scene(list(lines), "test.cub")


def test_game_places_player_and_clears_start_cell():
    game = Game(make_scene())
    assert game.player.pos.y == 4.5
    assert game.player.pos.x == 3.5
    assert game.grid[4][3] == "0"
    assert game.running is True


def test_frame_draws_ceiling_and_floor():
    scene = make_scene()
    game = Game(scene)
    image = game.frame()
    middle = image.width // 2
    assert image.get_pixel(0, middle) == scene.hex_ceiling
    assert image.get_pixel(image.height - 1, middle) == scene.hex_floor


def test_forward_key_moves_player_north():
    game = Game(make_scene())
    start = game.player.pos
    game.handle_key(119, True)
    game.frame()
    assert game.player.pos.y < start.y
    assert game.player.pos.x == start.x
    game.handle_key(119, False)
    assert game.keys.w is False


def test_turn_key_keeps_direction_length():
    game = Game(make_scene())
    before = game.player.dir
    game.handle_key(65363, True)
    game.frame()
    after = game.player.dir
    assert after != before
    assert math.hypot(after.x, after.y) == pytest.approx(1.0)


def test_escape_stops_game():
    game = Game(make_scene())
    game.handle_key(65307, True)
    assert game.running is False
    assert game.keys.escape is True


def test_new_game_after_previous_one_ended():
    first = Game(make_scene())
    first.handle_key(65307, True)
    second = Game(make_scene())
    assert first.running is False
    assert second.running is True
    assert second.frame().width == first.image.width


def test_map_without_player_is_rejected():
    lines = [line.replace("N", "0") if line.startswith("1") else line for line in LINES]
    with pytest.raises(Cub3DError):
        Game(make_scene(lines))


def test_describe_scene():
    scene = make_scene()
    text = describe_scene(scene)
    assert f"Color ceiling: #{scene.hex_ceiling:x}\n" in text
    assert f"Color floor: #{scene.hex_floor:x}\n" in text
    assert "Texture north: ./n.xpm\n" in text
    assert "Texture west: ./w.xpm\n" in text


def test_describe_scene_missing_texture():
    lines = [line for line in LINES if not line.startswith("EA")]
    assert "Texture east: (null)\n" in describe_scene(make_scene(lines))


@pytest.mark.parametrize("argv", [[], ["a.cub", "b.cub"]])
def test_main_wrong_argument_count(argv, capsys):
    assert main(argv) == 2
    assert "Too few arguments" in capsys.readouterr().out


def test_main_bad_extension(capsys):
    assert main(["scene.txt"]) == 1
    assert "cub3D: Error" in capsys.readouterr().err


def test_main_map_without_player(tmp_path, capsys):
    path = tmp_path / "empty.cub"
    lines = [line.replace("N", "0") if line.startswith("1") else line for line in LINES]
    path.write_text("\n".join(lines) + "\n")
    assert main([str(path)]) == 1
    assert "no player" in capsys.readouterr().err