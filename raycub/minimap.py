"""Overhead minimap drawn in the top-left corner of the screen."""

from __future__ import annotations

from raycub.doors import is_door_position
from raycub.framebuffer import Image
from raycub.settings import (
    COLOR_BORDER,
    COLOR_DOOR,
    COLOR_DOOR_OPEN,
    COLOR_PLAYER,
    COLOR_SPACE,
    COLOR_SPRITE,
    COLOR_WALL,
    MINIMAP_PADDING,
    MINIMAP_SIZE,
    WIN_H,
    WIN_W,
)
from raycub.state import Game

FLASH_COLOR = 0xFFFFFF
PLAYER_DOT_RADIUS = 2

_BASE_COLORS = {
    "1": COLOR_WALL,
    "D": COLOR_DOOR,
    "S": COLOR_SPRITE,
    "T": COLOR_SPRITE,
    "E": COLOR_SPRITE,
}


def put_pixel_minimap(screen: Image, x: int, y: int, color: int) -> None:
    """Set a screen pixel, ignoring points outside the window."""
    if not (0 <= x < WIN_W and 0 <= y < WIN_H):
        return
    screen.put_pixel(x, y, color)


def draw_minimap_border(screen: Image) -> None:
    """Draw a one-pixel frame just around the minimap area."""
    low = MINIMAP_PADDING - 1
    high = MINIMAP_PADDING + MINIMAP_SIZE
    for y in range(low, high + 1):
        for x in range(low, high + 1):
            if y in (low, high) or x in (low, high):
                put_pixel_minimap(screen, x, y, COLOR_BORDER)


def _tile_at(game: Game, map_x: int, map_y: int) -> str | None:
    game_map = game.map
    if not game_map.in_bounds(map_x, map_y):
        return None
    row = game_map.grid[map_y]
    return row[map_x] if map_x < len(row) else None


def get_tile_color(game: Game, map_x: int, map_y: int) -> int:
    """Return the minimap colour of map cell (map_x, map_y)."""
    tile = _tile_at(game, map_x, map_y)
    if tile is None:
        return COLOR_WALL
    if tile == "0":
        base_color = (
            COLOR_DOOR_OPEN if is_door_position(game, map_x, map_y) else COLOR_SPACE
        )
    else:
        base_color = _BASE_COLORS.get(tile, COLOR_SPACE)
    if (
        game.door_flash_timer > 0
        and map_x == game.door_flash_x
        and map_y == game.door_flash_y
    ):
        return FLASH_COLOR
    return base_color


def draw_minimap_content(game: Game, screen: Image) -> None:
    """Fill the minimap area with the scaled-down map."""
    width = game.map.width
    height = game.map.height
    for y in range(MINIMAP_SIZE):
        map_y = (y * height) // MINIMAP_SIZE
        for x in range(MINIMAP_SIZE):
            map_x = (x * width) // MINIMAP_SIZE
            color = get_tile_color(game, map_x, map_y)
            put_pixel_minimap(screen, MINIMAP_PADDING + x, MINIMAP_PADDING + y, color)


def draw_player_on_minimap(game: Game, screen: Image) -> None:
    """Draw the player as a small disc on the minimap."""
    pos = game.player.pos
    player_x = int(MINIMAP_PADDING + (pos.x * MINIMAP_SIZE) / game.map.width)
    player_y = int(MINIMAP_PADDING + (pos.y * MINIMAP_SIZE) / game.map.height)
    radius = PLAYER_DOT_RADIUS
    for dy in range(-radius, radius + 1):
        for dx in range(-radius, radius + 1):
            if dx * dx + dy * dy <= radius * radius:
                put_pixel_minimap(screen, player_x + dx, player_y + dy, COLOR_PLAYER)


def draw_minimap(game: Game, screen: Image) -> None:
    """Draw the frame, the map and the player marker."""
    if not screen.data:
        return
    draw_minimap_border(screen)
    draw_minimap_content(game, screen)
    draw_player_on_minimap(game, screen)