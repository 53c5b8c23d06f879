"""Ray casting and drawing of floor, ceiling and textured walls."""

from __future__ import annotations

import math
from collections.abc import Mapping
from dataclasses import dataclass

from raycub.framebuffer import Image
from raycub.settings import EPS, JUMP_VISUAL_MULTIPLIER, TEX_SIZE, WIN_H, WIN_W, Direction
from raycub.state import Game

_SOLID = frozenset("1D")
_SHADE_MASK = 8355711


@dataclass
class Ray:
    """One camera ray and where it struck the map."""

    dir_x: float = 0.0
    dir_y: float = 0.0
    side_x: float = 0.0
    side_y: float = 0.0
    delta_x: float = 0.0
    delta_y: float = 0.0
    map_x: int = 0
    map_y: int = 0
    step_x: int = 0
    step_y: int = 0
    side_hit: int = 0
    dist: float = 0.0
    tex_id: Direction = Direction.NORTH
    tex_x: int = 0


def tex_sample(textures: Mapping[int, Image], tex_id: int, x: int, y: int) -> int:
    """Return the texel (x, y) of texture ``tex_id``, or 0 when out of range."""
    if not 0 <= tex_id < len(Direction):
        return 0
    if not (0 <= x < TEX_SIZE and 0 <= y < TEX_SIZE):
        return 0
    texture = textures.get(tex_id)
    if texture is None:
        return 0
    return texture.data[y * TEX_SIZE + x]


def _jump_offset(game: Game) -> int:
    return int(game.player.z_offset * JUMP_VISUAL_MULTIPLIER)


def draw_floor_ceil(game: Game, screen: Image) -> None:
    """Paint the ceiling above the horizon and the floor below it."""
    horizon = screen.height // 2 + _jump_offset(game)
    width = screen.width
    for y in range(screen.height):
        color = game.floor_color if y >= horizon else game.ceil_color
        screen.data[y * width:(y + 1) * width] = [color] * width


def _non_zero(value: float) -> float:
    if abs(value) < EPS:
        return -EPS if value < 0 else EPS
    return value


def _tile(game: Game, x: int, y: int) -> str | None:
    game_map = game.map
    if not game_map.in_bounds(x, y):
        return None
    row = game_map.grid[y]
    return row[x] if x < len(row) else None


def _init_ray(game: Game, x: int) -> Ray:
    player = game.player
    camera_x = 2.0 * x / WIN_W - 1.0
    ray = Ray(
        dir_x=_non_zero(player.dir.x + player.plane.x * camera_x),
        dir_y=_non_zero(player.dir.y + player.plane.y * camera_x),
        map_x=int(player.pos.x),
        map_y=int(player.pos.y),
    )
    ray.delta_x = abs(1.0 / ray.dir_x)
    ray.delta_y = abs(1.0 / ray.dir_y)
    if ray.dir_x < 0:
        ray.step_x = -1
        ray.side_x = (player.pos.x - ray.map_x) * ray.delta_x
    else:
        ray.step_x = 1
        ray.side_x = (ray.map_x + 1.0 - player.pos.x) * ray.delta_x
    if ray.dir_y < 0:
        ray.step_y = -1
        ray.side_y = (player.pos.y - ray.map_y) * ray.delta_y
    else:
        ray.step_y = 1
        ray.side_y = (ray.map_y + 1.0 - player.pos.y) * ray.delta_y
    return ray


def _march(game: Game, ray: Ray) -> None:
    while True:
        if ray.side_x < ray.side_y:
            ray.side_x += ray.delta_x
            ray.map_x += ray.step_x
            ray.side_hit = 0
        else:
            ray.side_y += ray.delta_y
            ray.map_y += ray.step_y
            ray.side_hit = 1
        tile = _tile(game, ray.map_x, ray.map_y)
        if tile is None or tile in _SOLID:
            break
    pos = game.player.pos
    if ray.side_hit == 0:
        dist = (ray.map_x - pos.x + (1 - ray.step_x) * 0.5) / ray.dir_x
    else:
        dist = (ray.map_y - pos.y + (1 - ray.step_y) * 0.5) / ray.dir_y
    ray.dist = max(abs(dist), EPS)


def _set_texture_info(game: Game, ray: Ray) -> None:
    pos = game.player.pos
    if ray.side_hit == 0:
        wall_x = pos.y + ray.dist * ray.dir_y
    else:
        wall_x = pos.x + ray.dist * ray.dir_x
    wall_x -= math.floor(wall_x)
    ray.tex_x = int(wall_x * TEX_SIZE)
    if _tile(game, ray.map_x, ray.map_y) == "D":
        ray.tex_id = Direction.DOOR
    elif ray.side_hit == 0:
        ray.tex_id = Direction.WEST if ray.dir_x > 0 else Direction.EAST
    else:
        ray.tex_id = Direction.NORTH if ray.dir_y > 0 else Direction.SOUTH


def cast_ray(game: Game, x: int) -> Ray:
    """Cast the ray of screen column ``x`` and return what it hit."""
    ray = _init_ray(game, x)
    _march(game, ray)
    _set_texture_info(game, ray)
    return ray


def draw_walls(
    game: Game, screen: Image, x: int, ray: Ray, textures: Mapping[int, Image]
) -> None:
    """Draw the textured wall slice of column ``x`` for ``ray``."""
    line_h = max(int(WIN_H / ray.dist), 1)
    jump_offset = _jump_offset(game)
    half = line_h // 2
    start = max(-half + WIN_H // 2 + jump_offset, 0)
    end = min(half + WIN_H // 2 + jump_offset, WIN_H - 1)
    step = TEX_SIZE / line_h
    tex_pos = (start - WIN_H // 2 - jump_offset + half) * step
    for y in range(start, end):
        tex_y = int(tex_pos) & (TEX_SIZE - 1)
        color = tex_sample(textures, ray.tex_id, ray.tex_x, tex_y)
        if ray.side_hit == 1:
            color = (color >> 1) & _SHADE_MASK
        screen.put_pixel(x, y, color)
        tex_pos += step


def raycaster(game: Game, screen: Image, textures: Mapping[int, Image]) -> None:
    """Cast and draw every screen column."""
    for x in range(WIN_W):
        draw_walls(game, screen, x, cast_ray(game, x), textures)