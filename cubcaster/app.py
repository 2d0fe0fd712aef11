"""The game: loading a scene, reacting to keys and the display loop."""

from __future__ import annotations

import sys
from collections.abc import Sequence
from dataclasses import dataclass
from pathlib import Path

import pygame

from .config import WIN_HEIGHT, WIN_WIDTH, CubError, Direction, Key
from .parser import Scene, check_arguments, load_scene
from .player import Player
from .render import Frame, load_texture, render_scene

_PYGAME_KEYS = {
    pygame.K_ESCAPE: Key.ESC,
    pygame.K_w: Key.W,
    pygame.K_a: Key.A,
    pygame.K_s: Key.S,
    pygame.K_d: Key.D,
    pygame.K_e: Key.E,
    pygame.K_LEFT: Key.LEFT,
    pygame.K_RIGHT: Key.RIGHT,
    pygame.K_UP: Key.UP,
    pygame.K_DOWN: Key.DOWN,
}


@dataclass
class Game:
    """A loaded scene with its wall textures and the player in it."""

    scene: Scene
    textures: dict[Direction, list[int]]
    player: Player

    @classmethod
    def from_file(cls, path: str | Path) -> Game:
        """Load the scene at path, its textures and place the player."""
        scene = load_scene(path)
        walls = scene.textures
        textures = {
            Direction.NORTH: load_texture(walls.north),
            Direction.SOUTH: load_texture(walls.south),
            Direction.EAST: load_texture(walls.east),
            Direction.WEST: load_texture(walls.west),
        }
        player = Player.from_spawn(scene.spawn_x, scene.spawn_y, scene.direction)
        return cls(scene=scene, textures=textures, player=player)

    def render(self, frame: Frame) -> None:
        """Draw the current view into frame."""
        render_scene(
            frame,
            self.scene.grid,
            self.scene.width,
            self.scene.height,
            self.player.position.x,
            self.player.position.y,
            self.player.angle,
            self.textures,
            self.scene.textures.ceiling,
            self.scene.textures.floor,
        )

    def handle_key(self, key: int) -> bool:
        """Apply a key press; return False when the game should close."""
        if key == Key.ESC:
            return False
        if key in (Key.W, Key.S):
            self.player.move_straight(self.scene.grid, key)
        elif key in (Key.A, Key.D):
            self.player.strafe(self.scene.grid, key)
        elif key == Key.RIGHT:
            self.player.turn_right()
        elif key == Key.LEFT:
            self.player.turn_left()
        return True


def _frame_rgb(frame: Frame) -> bytes:
    """Repack the frame's 4-byte pixels as packed RGB."""
    source = frame.buffer
    rgb = bytearray(frame.width * frame.height * 3)
    if frame.endian == 1:
        rgb[0::3] = source[1::4]
        rgb[1::3] = source[2::4]
        rgb[2::3] = source[3::4]
    else:
        rgb[0::3] = source[2::4]
        rgb[1::3] = source[1::4]
        rgb[2::3] = source[0::4]
    return bytes(rgb)


def _run_window(game: Game) -> None:
    pygame.init()
    try:
        try:
            screen = pygame.display.set_mode((WIN_WIDTH, WIN_HEIGHT))
        except pygame.error as exc:
            raise CubError("Display initialization failed") from exc
        pygame.display.set_caption("cub3D")
        frame = Frame()
        clock = pygame.time.Clock()
        dirty = True
        running = True
        while running:
            for event in pygame.event.get():
                if event.type == pygame.QUIT:
                    running = False
                elif event.type == pygame.KEYDOWN:
                    key = _PYGAME_KEYS.get(event.key)
                    if key is not None:
                        running = game.handle_key(key) and running
                        dirty = True
            if running and dirty:
                game.render(frame)
                surface = pygame.image.frombuffer(
                    _frame_rgb(frame), (frame.width, frame.height), "RGB"
                )
                screen.blit(surface, (0, 0))
                pygame.display.flip()
                dirty = False
            clock.tick(60)
    finally:
        pygame.quit()


def main(argv: Sequence[str] | None = None) -> int:
    """Run the game on the .cub file named on the command line."""
    args = sys.argv[1:] if argv is None else list(argv)
    try:
        path = check_arguments(args)
        game = Game.from_file(path)
        _run_window(game)
    except CubError as exc:
        print(f"Error\n{exc}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())