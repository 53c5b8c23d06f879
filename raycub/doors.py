"""Door discovery on the map and player interaction with doors."""

from __future__ import annotations

import math

from raycub.state import Door, Game

DOOR_REACH = 1.5
DOOR_MAX_DISTANCE = 2.0
DOOR_FACING_DOT = 0.5
DOOR_FLASH_FRAMES = 15


def parse_doors(game: Game) -> list[Door]:
    """Collect every 'D' cell of the map as a closed door, row by row."""
    game_map = game.map
    game.doors = [
        Door(x, y)
        for y, row in enumerate(game_map.grid)
        for x, char in enumerate(row)
        if char == "D"
    ]
    return game.doors


def is_door_position(game: Game, x: int, y: int) -> bool:
    """Tell whether a door, open or closed, stands at (x, y)."""
    return any(door.x == x and door.y == y for door in game.doors)


def _door_offset(game: Game, door: Door) -> tuple[float, float]:
    pos = game.player.pos
    return door.x + 0.5 - pos.x, door.y + 0.5 - pos.y


def _is_door_in_direction(game: Game, door: Door) -> bool:
    dx, dy = _door_offset(game, door)
    if math.hypot(dx, dy) > DOOR_REACH:
        return False
    facing = game.player.dir
    return dx * facing.x + dy * facing.y > DOOR_FACING_DOT


def find_closest_door(game: Game) -> Door | None:
    """Return the nearest door within reach that the player faces."""
    closest = None
    min_dist = DOOR_MAX_DISTANCE
    for door in game.doors:
        if not _is_door_in_direction(game, door):
            continue
        dist = math.hypot(*_door_offset(game, door))
        if dist < min_dist:
            min_dist = dist
            closest = door
    return closest


def toggle_door(game: Game, door: Door) -> bool:
    """Open or close ``door``; a door the player stands in stays open.

    Returns whether the door changed state.
    """
    if door.is_open:
        pos = game.player.pos
        if int(pos.x) == door.x and int(pos.y) == door.y:
            return False
    door.is_open = not door.is_open
    game.map.set_tile(door.x, door.y, "0" if door.is_open else door.original)
    game.door_flash_timer = DOOR_FLASH_FRAMES
    game.door_flash_x = door.x
    game.door_flash_y = door.y
    return True


def handle_door_interaction(game: Game) -> Door | None:
    """Toggle the door the player faces, returning it if there was one."""
    door = find_closest_door(game)
    if door is not None:
        toggle_door(game, door)
    return door