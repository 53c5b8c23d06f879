"""Keyboard and mouse handlers that update the game state."""

from __future__ import annotations

from typing import NoReturn

from raycub.doors import handle_door_interaction
from raycub.physics import rotate_player
from raycub.settings import MOUSE_SENSITIVITY, Key
from raycub.state import Game

_HELD_ON_PRESS = {
    Key.W: "w",
    Key.A: "a",
    Key.S: "s",
    Key.D: "d",
    Key.LEFT: "left",
    Key.RIGHT: "right",
    Key.SPACE: "space",
}

_RELEASED = {**_HELD_ON_PRESS, Key.E: "e"}


def _exit_program() -> NoReturn:
    raise SystemExit(0)


def key_press(game: Game, keycode: int) -> None:
    """Mark a movement key as held, use a door on E, or quit on Escape."""
    if keycode == Key.ESC:
        _exit_program()
    if keycode == Key.E:
        handle_door_interaction(game)
        return
    name = _HELD_ON_PRESS.get(keycode)
    if name is not None:
        setattr(game.keys, name, True)


def key_release(game: Game, keycode: int) -> None:
    """Mark a tracked key as no longer held."""
    name = _RELEASED.get(keycode)
    if name is not None:
        setattr(game.keys, name, False)


def mouse_move(game: Game, x: int, y: int) -> None:
    """Turn the player by the horizontal mouse motion since the last event."""
    del y
    if game.first_mouse:
        game.mouse_x = x
        game.first_mouse = False
        return
    dx = x - game.mouse_x
    rotate_player(game.player, dx * MOUSE_SENSITIVITY)
    game.mouse_x = x