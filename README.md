# raycub

`raycub` is a small raycasting engine in the style of classic grid-based
first-person games. It reads `.cub` scene files, keeps the player inside the
walls with sliding collision, lets the player jump, open and close doors, and
draws the view column by column into an in-memory image, with a minimap
overlay on top.

It uses only the standard library.

## Scene files

A `.cub` file starts with identifier lines, followed by the map:

```
NO ./textures/north.xpm
SO ./textures/south.xpm
WE ./textures/west.xpm
EA ./textures/east.xpm
F 220,100,0
C 30,60,90

111111
100D01
10N001
111111
```

- `NO`, `SO`, `WE`, `EA` give the wall texture path for each side. Each may
  appear only once. The paths are stored as written in `game.textures`,
  keyed by `raycub.settings.Direction`.
- `F` and `C` give the floor and ceiling colours as `R,G,B`, each in 0–255;
  they end up in `game.floor_color` and `game.ceil_color` as `0xRRGGBB`.
- The map starts at the first line whose first non-blank character is `1`,
  and runs for as long as lines keep starting that way.
  `0` is floor, `1` is wall, `D` is a door, and exactly one of `N`, `S`, `E`,
  `W` marks where the player starts and which way they face.
- Spaces and short rows are filled with wall. Every walkable cell must have
  neighbours on all four sides inside the map.

A scene that breaks these rules (a repeated or unknown identifier, a bad
colour, no map, an open map, not exactly one spawn) raises
`raycub.state.SceneError`, as does a file that cannot be read.

Texture files are not opened while parsing. `raycub.paths.resolve_texture`
finds one: it tries the path as written, then, for a relative path, the
path under the map's directory, then under `<map dir>/..`, and raises
`SceneError` if none can be read. `texture_candidates` lists those places.

## Modules

| Module | What it holds |
| --- | --- |
| `raycub.settings` | Window size, speeds, colours, `Direction` and `Key` |
| `raycub.vector` | `Vec`, a small immutable 2-D vector |
| `raycub.state` | `GameMap`, `Player`, `Keys`, `Door`, `Game`, `SceneError` |
| `raycub.scene` | `parse_scene`, `parse_scene_lines`, `has_cub_extension` and the line parsers |
| `raycub.mapgrid` | Map reading, padding, validation and spawn lookup |
| `raycub.paths` | Path helpers and texture path resolution |
| `raycub.physics` | Collision, wall sliding, movement, rotation, jumping |
| `raycub.doors` | Finding doors and opening or closing the one ahead |
| `raycub.events` | `key_press`, `key_release`, `mouse_move` |
| `raycub.framebuffer` | `Image`, the pixel buffer frames are drawn into |
| `raycub.render` | Floor and ceiling, DDA ray casting, textured walls |
| `raycub.minimap` | The minimap overlay |

## Using it

```python
from raycub.framebuffer import Image
from raycub.scene import has_cub_extension, parse_scene
from raycub.settings import WIN_H, WIN_W

path = "maps/level1.cub"
if not has_cub_extension(path):
    raise SystemExit("Map file must have .cub extension")

game = parse_scene(path)
screen = Image(WIN_W, WIN_H)
```

Each frame, feed the input events from your window library into the game,
advance the physics and draw:

```python
from raycub.events import key_press, key_release, mouse_move
from raycub.minimap import draw_minimap
from raycub.physics import movement_update
from raycub.render import draw_floor_ceil, raycaster

key_press(game, keycode)       # on key down
key_release(game, keycode)     # on key up
mouse_move(game, x, y)         # on pointer motion

movement_update(game)          # walk, turn and jump
draw_floor_ceil(game, screen)
raycaster(game, screen, textures)
draw_minimap(game, screen)
```

`screen` should be `WIN_W` by `WIN_H` pixels: `raycaster` casts one ray per
column of that width. `textures` maps each `Direction` (the four wall sides
and `Direction.DOOR`) to a 64×64 `Image`; a missing texture samples as black.
Read the finished frame back with `screen.pixel(x, y)`, which gives colours
as `0xRRGGBB` integers.

Key codes are the X11 ones in `raycub.settings.Key`: `W`/`S` walk forward
and back, `A`/`D` strafe, the left and right arrows and the mouse turn,
`Space` jumps and `E` opens or closes the door in front of the player,
within reach. A door cannot be closed while the player stands in it.
`Escape` raises `SystemExit(0)`. The first `mouse_move` only records the
pointer position.

Toggling a door sets `game.door_flash_timer`, which makes the door's cell
flash white on the minimap while the timer is above zero; counting it down
each frame is up to the caller.

## What it does not do

`raycub` opens no window, reads no keyboard or mouse by itself and has no
command-line program. It does not decode image files either: loading the
texture files into `Image` objects, and showing `screen`, are left to
whatever window or image library you use.