# raycube

A small first-person raycasting engine. It reads a `.cub` scene file that
holds the floor and ceiling colours and a grid map of walls, places the
player at the `N`, `S`, `E` or `W` marker, and draws the view column by
column with a DDA grid walk in a 640x480 pygame window.

## Installing

```
pip install .
```

## Running

```
raycube path/to/scene.cub
```

Exactly one argument is expected; otherwise the command prints
`Too few arguments` and exits with status 2. The part of the file name from
its first dot onwards must be exactly `.cub`. A scene that cannot be read or
parsed is reported on standard error as `cub3D: Error: <file>: <message>` and
the command exits with status 1.

Controls:

- `W` / `S` move forward and back
- `A` / `D` strafe left and right
- left and right arrows turn
- `Esc` or closing the window quits

Movement stops at cells holding `1`.

## Scene files

```
NO ./textures/north.xpm
SO ./textures/south.xpm
WE ./textures/west.xpm
EA ./textures/east.xpm
F 220,100,0
C 225,30,0

111111
100001
10N001
111111
```

- Empty lines are ignored.
- `NO`, `SO`, `WE` and `EA` each name a texture path, at most once each.
- `F` (floor) and `C` (ceiling) take three comma-separated components and
  must both be present, each given once.
- The map starts at the first line whose first non-blank character is `1`
  and continues while lines do the same. Spaces after the first non-blank
  character of a map row are turned into walls; shorter rows are padded to
  the widest line.
- Any other line before the map is an error, as is a scene with no map.
- The first `N`, `S`, `E` or `W` cell is the player's start and facing; a map
  without one is an error.

## Library use

The pieces can be used on their own:

- `raycube.scene.read_scene(path)` and `parse_scene(lines, path)` return a
  `Scene` with its grid, colours (`hex_ceiling`, `hex_floor`) and texture
  paths; `parse_rgb` parses a colour triple; `build_map` and `widest_line`
  build the grid. Problems raise `raycube.errors.Cub3DError`.
- `raycube.player.Player.from_map(grid)` places the player; `Player.move`
  applies one frame of movement for the held `Keys` (`Keys.press`,
  `Keys.release` take X keysym codes).
- `raycube.engine.cast_ray(player, grid, camera_x)` returns a `RayHit`;
  `render(image, player, grid, ceiling, floor)` fills a
  `raycube.image.Image` and returns the hit of every column.
- `raycube.image.Image` stores 32-bit pixels (`put_pixel`, `get_pixel`,
  `draw_vertical_line`, `to_rgb_bytes`); `good_color` converts a colour for
  displays of lower depth.
- `raycube.xpm.read_xpm_file(path)` and `parse_xpm(lines)` load XPM images
  into an `Image`, raising `XpmError` on bad data; `strip_comments` and
  `xpm_lines_from_text` prepare XPM file text.
- `raycube.colornames.lookup_color` resolves X11 colour names and `#RRGGBB`
  values; `raycube.wordtab` holds the word splitting and search helpers.
- `raycube.game.Game` runs one frame at a time (`frame`, `handle_key`), and
  `describe_scene` gives a readable summary of a loaded scene.

## What it does not do

Walls are drawn in flat colours chosen by the face a ray hits (white, blue,
red or green), not with textures: the texture paths in a scene are read and
kept on the `Scene`, and XPM images can be loaded, but the renderer does not
use them. The up and down arrows are tracked but move nothing. The map is not
checked for being closed by walls; rays that leave the grid stop at its edge.

## Tests

```
pip install .[test]
pytest
```