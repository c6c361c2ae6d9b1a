"""The game: scene, player and frame loop, plus the command that runs it."""

from __future__ import annotations

import sys

from raycube.engine import render
from raycube.errors import Cub3DError
from raycube.image import Image
from raycube.player import Keys, Player
from raycube.scene import Scene, read_scene

WIDTH = 640
HEIGHT = 480
TITLE = "Cub3d game"
ESCAPE = 65307


class Game:
    """A running game built from a parsed scene."""

    def __init__(self, scene: Scene) -> None:
        self.scene = scene
        self.grid = scene.grid
        self.player = Player.from_map(self.grid)
        self.keys = Keys()
        self.image = Image(WIDTH, HEIGHT)
        self.running = True

    def frame(self) -> Image:
        """Move the player for the held keys and draw the next frame."""
        self.player.move(self.keys, self.grid)
        render(
            self.image,
            self.player,
            self.grid,
            self.scene.hex_ceiling,
            self.scene.hex_floor,
        )
        return self.image

    def handle_key(self, code: int, pressed: bool) -> None:
        """Record a key press or release; escape ends the game."""
        if pressed:
            self.keys.press(code)
            if code == ESCAPE:
                self.running = False
        else:
            self.keys.release(code)


def describe_scene(scene: Scene) -> str:
    """Summarise the scene's colours and textures."""

    def text(value: str | None) -> str:
        return "(null)" if value is None else value

    return (
        "\n---- TEXTURES & COLORS\n"
        f"Color ceiling: #{scene.hex_ceiling:x}\n"
        f"Color floor: #{scene.hex_floor:x}\n"
        f"Texture north: {text(scene.north)}\n"
        f"Texture south: {text(scene.south)}\n"
        f"Texture east: {text(scene.east)}\n"
        f"Texture west: {text(scene.west)}\n"
    )


def _run_window(game: Game) -> None:
    import pygame

    keysyms = {
        pygame.K_a: 97,
        pygame.K_d: 100,
        pygame.K_s: 115,
        pygame.K_w: 119,
        pygame.K_ESCAPE: ESCAPE,
        pygame.K_LEFT: 65361,
        pygame.K_UP: 65362,
        pygame.K_RIGHT: 65363,
        pygame.K_DOWN: 65364,
    }
    pygame.init()
    try:
        screen = pygame.display.set_mode((WIDTH, HEIGHT))
        pygame.display.set_caption(TITLE)
        while game.running:
            for event in pygame.event.get():
                if event.type == pygame.QUIT:
                    game.running = False
                elif event.type in (pygame.KEYDOWN, pygame.KEYUP):
                    code = keysyms.get(event.key)
                    if code is not None:
                        game.handle_key(code, event.type == pygame.KEYDOWN)
            if not game.running:
                break
            image = game.frame()
            surface = pygame.image.frombuffer(
                image.to_rgb_bytes(), (image.width, image.height), "RGB"
            )
            screen.blit(surface, (0, 0))
            pygame.display.flip()
    finally:
        pygame.quit()


def main(argv: list[str] | None = None) -> int:
    """Load the scene named on the command line and play it in a window."""
    args = sys.argv[1:] if argv is None else list(argv)
    if len(args) != 1:
        print("Too few arguments")
        return 2
    try:
        game = Game(read_scene(args[0]))
    except Cub3DError as exc:
        print(exc, file=sys.stderr)
        return 1
    _run_window(game)
    return 0


if __name__ == "__main__":
    sys.exit(main())