"""Map block extraction, normalisation, validation and spawn lookup."""

from __future__ import annotations

from collections.abc import Iterable
from itertools import dropwhile, takewhile

from raycub.settings import FOV
from raycub.state import GameMap, Player, SceneError
from raycub.vector import Vec

WALKABLE = frozenset("0NSEWD")
SPAWN_CHARS = frozenset("NSEW")
_PADDED_AS_WALL = frozenset(" \n\r")

_FACING = {
    "N": Vec(0.0, -1.0),
    "S": Vec(0.0, 1.0),
    "E": Vec(1.0, 0.0),
    "W": Vec(-1.0, 0.0),
}


def _is_map_row(text: str) -> bool:
    return text.lstrip(" \t").startswith("1")


def is_walkable(char: str) -> bool:
    """Tell whether the player may stand on a cell holding ``char``."""
    return char in WALKABLE


def read_map_rows(lines: Iterable[str]) -> list[str]:
    """Return the first block of map lines, without line endings."""
    block = takewhile(_is_map_row, dropwhile(lambda line: not _is_map_row(line), lines))
    return [line.rstrip("\r\n") for line in block]


def normalize_map(rows: list[str]) -> list[str]:
    """Pad every row to the widest one; blanks and padding become walls."""
    width = max((len(row) for row in rows), default=0)
    return [
        "".join("1" if char in _PADDED_AS_WALL else char for char in row).ljust(width, "1")
        for row in rows
    ]


def _neighbours(x: int, y: int) -> tuple[tuple[int, int], ...]:
    return ((x, y - 1), (x, y + 1), (x - 1, y), (x + 1, y))


def check_map(game_map: GameMap) -> tuple[int, int]:
    """Check that the map is closed and has one spawn; return the spawn cell."""
    spawns = []
    for y, row in enumerate(game_map.grid):
        for x, char in enumerate(row):
            if not is_walkable(char):
                continue
            if any(not game_map.in_bounds(nx, ny) for nx, ny in _neighbours(x, y)):
                raise SceneError(f"map is not closed at ({x}, {y})")
            if char in SPAWN_CHARS:
                spawns.append((x, y))
    if len(spawns) != 1:
        raise SceneError(f"map must have exactly one spawn, found {len(spawns)}")
    return spawns[0]


def _camera_plane(facing: Vec) -> Vec:
    if facing.x == -1:
        return Vec(0.0, FOV)
    if facing.x == 1:
        return Vec(0.0, -FOV)
    if facing.y == -1:
        return Vec(FOV, 0.0)
    return Vec(-FOV, 0.0)


def find_spawn(game_map: GameMap) -> Player:
    """Place a player on the first spawn cell, which becomes floor."""
    for y, row in enumerate(game_map.grid):
        for x, char in enumerate(row):
            if char in SPAWN_CHARS:
                facing = _FACING[char]
                game_map.set_tile(x, y, "0")
                player = Player(
                    pos=Vec(x + 0.5, y + 0.5),
                    dir=facing,
                    plane=_camera_plane(facing),
                )
                player.reset_jump()
                return player
    raise SceneError("map has no spawn")