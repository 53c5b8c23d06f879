import pytest

from raycub.doors import (
    DOOR_FLASH_FRAMES,
    find_closest_door,
    handle_door_interaction,
    is_door_position,
    parse_doors,
    toggle_door,
)
from raycub.state import Game, GameMap, Player
from raycub.vector import Vec


def make_game(facing=Vec(1.0, 0.0), pos=Vec(1.5, 1.5)):
    game_map = GameMap(["11111", "10D01", "11D11", "11111"])
    game = Game(map=game_map, player=Player(pos=pos, dir=facing))
    parse_doors(game)
    return game


def test_parse_doors_finds_all_in_row_order():
    game = make_game()
    assert [(d.x, d.y) for d in game.doors] == [(2, 1), (2, 2)]
    assert all(not d.is_open and d.original == "D" for d in game.doors)


def test_parse_doors_on_map_without_doors():
    game = Game(map=GameMap(["111", "1N1", "111"]))
    assert parse_doors(game) == []


def test_is_door_position():
    game = make_game()
    assert is_door_position(game, 2, 1)
    assert not is_door_position(game, 1, 1)


def test_find_closest_door_when_facing():
    game = make_game()
    door = find_closest_door(game)
    assert (door.x, door.y) == (2, 1)


def test_find_closest_door_none_when_facing_away():
    game = make_game(facing=Vec(-1.0, 0.0))
    assert find_closest_door(game) is None


def test_find_closest_door_none_when_too_far():
    game = make_game(pos=Vec(1.5, 1.5))
    game.player = Player(pos=Vec(0.2, 1.5), dir=Vec(1.0, 0.0))
    assert find_closest_door(game) is None


def test_toggle_opens_and_flashes():
    game = make_game()
    door = game.doors[0]
    assert toggle_door(game, door) is True
    assert door.is_open
    assert game.map.tile(2, 1) == "0"
    assert game.door_flash_timer == DOOR_FLASH_FRAMES == 15
    assert (game.door_flash_x, game.door_flash_y) == (2, 1)


def test_toggle_twice_restores_door():
    game = make_game()
    door = game.doors[0]
    toggle_door(game, door)
    toggle_door(game, door)
    assert not door.is_open
    assert game.map.tile(2, 1) == "D"
    assert is_door_position(game, 2, 1)


def test_cannot_close_door_while_standing_in_it():
    game = make_game()
    door = game.doors[0]
    toggle_door(game, door)
    game.player.pos = Vec(2.5, 1.5)
    game.door_flash_timer = 0
    assert toggle_door(game, door) is False
    assert door.is_open
    assert game.map.tile(2, 1) == "0"
    assert game.door_flash_timer == 0


def test_handle_door_interaction_toggles_faced_door():
    game = make_game()
    door = handle_door_interaction(game)
    assert door is game.doors[0]
    assert game.map.tile(2, 1) == "0"


@pytest.mark.parametrize("facing", [Vec(-1.0, 0.0), Vec(0.0, -1.0)])
def test_handle_door_interaction_without_door_changes_nothing(facing):
    game = make_game(facing=facing)
    assert handle_door_interaction(game) is None
    assert game.map.tile(2, 1) == "D"
    assert game.door_flash_timer == 0