# cubcaster

cubcaster reads a maze from a `.cub` scene file and shows it as a textured,
first-person 3D view drawn with grid raycasting. It opens a 1280×900 window,
and you move through the maze with the keyboard.

## Installation

```
pip install .
```

This installs `pygame`, which draws the window and reads the keyboard, and
`pillow`, which loads the wall textures.

## Running

```
cubcaster path/to/level.cub
```

Pass exactly one argument, and its name must end in `.cub`. If it does not,
or if the scene, a texture or the display cannot be used, cubcaster prints
`Error` and a message on standard error, then exits with status 1.

### Controls

| Key           | Action                    |
|---------------|---------------------------|
| `W` / `S`     | move forward / backward   |
| `A` / `D`     | strafe left / right       |
| `←` / `→`     | turn left / right         |
| `Esc`         | quit                      |

Closing the window also quits. Movement is checked against the walls one axis
at a time, so you slide along a wall instead of stopping at it.

## Scene files

A scene file starts with six elements. They may come in any order, with blank
lines between them.

```
NO ./textures/north.xpm
SO ./textures/south.xpm
WE ./textures/west.xpm
EA ./textures/east.xpm

F 220,100,0
C 225,30,0

        1111111111111
        1000000000001
        1011000001111
111111111011000001001
100000000011000001001
1111111110110000N0001
        1111111111111
```

- `NO`, `SO`, `WE` and `EA` give the texture path for each wall face. Each may
  appear only once. A path must look like an `.xpm` file, meaning its last four
  characters must begin with `.xp`. Textures are loaded with Pillow. The
  top-left 64×64 pixels are sampled, so an image must be at least that large.
- `F` and `C` give the floor and ceiling colours as `R,G,B`. The value must
  contain exactly two commas, and each component must be an integer from 0 to
  255. Each colour may appear only once.

The map follows the elements:

- `1` is a wall and `0` is open floor.
- A space is empty space outside the maze.
- Exactly one `N`, `S`, `E` or `W` marks the player's start cell and the
  direction they face.
- A blank line inside the map is read as a row holding a single wall.
- The map must be closed. Every floor cell reachable from the start must be
  enclosed by walls, and none may touch the edge of the map or empty space.

Any other character, a missing element, or a second start position is an
error.

## Using it as a library

- `cubcaster.parser`: `load_scene(path)` reads and validates a file and returns
  a `Scene`. `parse_scene_lines(lines)` does the same for lines already in
  memory, with their newlines kept. `check_arguments(argv)` validates
  command-line arguments, not counting the program name.
- `cubcaster.mapcheck`: character classification, spawn search, the
  closed-map flood fill and padding of rows into a rectangular grid.
- `cubcaster.raycaster`: `cast_ray(grid, width, height, px, py, angle)` returns
  a `RayHit`. `wall_direction` and `texture_column` give the wall face that was
  hit and the texture column to sample. `ray_angles(player_angle)` gives one
  angle for each screen column.
- `cubcaster.render`: `Frame` is a 32-bit pixel buffer with `put_pixel`,
  `pixel` and `clear`. `load_texture(path)` returns 64×64 packed colours.
  `render_scene(...)` draws a whole view into a frame.
- `cubcaster.player`: `Player.from_spawn(x, y, direction)`, turning with
  `turn_left`/`turn_right`, and wall-checked movement with `move_straight` and
  `strafe`.
- `cubcaster.app`: `Game.from_file(path)` loads a scene, its textures and the
  player. `Game.render(frame)` and `Game.handle_key(key)` run the game without
  a window. `handle_key` returns `False` for `Key.ESC`. `main(argv)` is the
  command.

Invalid arguments, scenes and textures raise `cubcaster.config.CubError`.

## Limitations

cubcaster only draws walls, floor and ceiling. It has no minimap, doors,
sprites or mouse look, and it does not save anything.

## Running the tests

```
pip install .[test]
pytest
```