"""Reading of .cub scene files: textures, colours and the map."""

from __future__ import annotations

import os
from collections.abc import Iterable

from raycub.doors import parse_doors
from raycub.mapgrid import check_map, find_spawn, normalize_map, read_map_rows
from raycub.settings import Direction
from raycub.state import Game, GameMap, SceneError

_DIGITS = "0123456789"
_TEXTURE_IDS = {
    "NO ": Direction.NORTH,
    "SO ": Direction.SOUTH,
    "WE ": Direction.WEST,
    "EA ": Direction.EAST,
}
_TEXTURE_LEADS = ("N", "S", "W", "E")


def skip_spaces(text: str) -> str:
    """Drop leading spaces and tabs."""
    return text.lstrip(" \t")


def parse_int(text: str) -> tuple[int, str]:
    """Read an unsigned decimal after optional blanks; return it and the rest."""
    rest = skip_spaces(text)
    end = len(rest) - len(rest.lstrip(_DIGITS))
    if end == 0:
        raise SceneError(f"expected a number in {text!r}")
    return int(rest[:end]), rest[end:]


def is_map_line(text: str) -> bool:
    """Tell whether a line belongs to the map: it starts with '1' after blanks."""
    return skip_spaces(text).startswith("1")


def _after_comma(text: str) -> str:
    if not text.startswith(","):
        raise SceneError(f"expected ',' in colour at {text!r}")
    return text[1:]


def parse_color_line(line: str) -> int:
    """Parse an 'F r,g,b' or 'C r,g,b' line into 0xRRGGBB."""
    red, rest = parse_int(skip_spaces(line[1:]))
    green, rest = parse_int(_after_comma(rest))
    blue, _ = parse_int(_after_comma(rest))
    if not all(0 <= part <= 255 for part in (red, green, blue)):
        raise SceneError(f"colour component out of range in {line!r}")
    return (red << 16) | (green << 8) | blue


def parse_texture_line(line: str, textures: dict[Direction, str]) -> Direction:
    """Store the path of a NO/SO/WE/EA line in ``textures``; return its slot."""
    text = skip_spaces(line)
    for prefix, slot in _TEXTURE_IDS.items():
        if text.startswith(prefix):
            if slot in textures:
                raise SceneError(f"texture {prefix.strip()} given twice")
            textures[slot] = skip_spaces(text[len(prefix):]).rstrip("\n\r ")
            return slot
    raise SceneError(f"unknown identifier in {line!r}")


def parse_scene_lines(lines: Iterable[str], map_dir: str = ".") -> Game:
    """Build a game from the lines of a scene file."""
    lines = [line.rstrip("\r\n") for line in lines]
    textures: dict[Direction, str] = {}
    floor_color = 0
    ceil_color = 0
    for line in lines:
        text = skip_spaces(line)
        if text.startswith(_TEXTURE_LEADS):
            parse_texture_line(text, textures)
        if text.startswith("F"):
            floor_color = parse_color_line(text)
        if text.startswith("C"):
            ceil_color = parse_color_line(text)
        if is_map_line(text):
            break
    else:
        raise SceneError("scene has no map")

    game_map = GameMap(normalize_map(read_map_rows(lines)))
    check_map(game_map)
    game = Game(
        map=game_map,
        textures=textures,
        floor_color=floor_color,
        ceil_color=ceil_color,
        map_dir=map_dir,
    )
    parse_doors(game)
    game.player = find_spawn(game_map)
    return game


def parse_scene(path: str | os.PathLike[str]) -> Game:
    """Read and parse a scene file."""
    path = os.fspath(path)
    try:
        with open(path, encoding="utf-8", errors="surrogateescape", newline="") as handle:
            lines = handle.read().split("\n")
    except OSError as exc:
        raise SceneError(f"cannot read {path}: {exc}") from exc
    return parse_scene_lines(lines, os.path.dirname(path) or ".")


def has_cub_extension(name: str) -> bool:
    """Tell whether ``name`` ends in '.cub' after at least one character."""
    return len(name) >= 5 and name.endswith(".cub")