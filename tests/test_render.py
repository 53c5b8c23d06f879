import pytest

from raycub.framebuffer import Image
from raycub.mapgrid import find_spawn
from raycub.render import Ray, cast_ray, draw_floor_ceil, draw_walls, raycaster, tex_sample
from raycub.settings import JUMP_VISUAL_MULTIPLIER, TEX_SIZE, WIN_H, WIN_W, Direction
from raycub.state import Game, GameMap

ROOM = ["11111", "10001", "10E01", "10001", "11111"]


def make_game(rows=ROOM, facing=None):
    game_map = GameMap(rows)
    game = Game(map=game_map)
    game.player = find_spawn(game_map)
    return game


def solid(color):
    return Image(TEX_SIZE, TEX_SIZE, [color] * (TEX_SIZE * TEX_SIZE))


def uniform_textures(color):
    return {slot: solid(color) for slot in Direction}


def painted_rows(screen, x):
    return [y for y in range(screen.height) if screen.pixel(x, y) != 0]


def test_tex_sample_reads_texel():
    texture = Image(TEX_SIZE, TEX_SIZE, list(range(TEX_SIZE * TEX_SIZE)))
    textures = {Direction.NORTH: texture}
    assert tex_sample(textures, Direction.NORTH, 3, 2) == texture.pixel(3, 2)


@pytest.mark.parametrize(
    "tex_id, x, y",
    [(-1, 0, 0), (5, 0, 0), (0, -1, 0), (0, TEX_SIZE, 0), (0, 0, TEX_SIZE)],
)
def test_tex_sample_out_of_range_is_zero(tex_id, x, y):
    textures = uniform_textures(0x123456)
    assert tex_sample(textures, tex_id, x, y) == 0


def test_floor_and_ceiling_split_at_half():
    game = make_game()
    game.floor_color = 0x112233
    game.ceil_color = 0x445566
    screen = Image(4, 10)
    draw_floor_ceil(game, screen)
    assert screen.pixel(0, 4) == 0x445566
    assert screen.pixel(3, 5) == 0x112233


def test_jump_moves_horizon_down():
    game = make_game()
    game.floor_color = 0x112233
    game.ceil_color = 0x445566
    game.player.z_offset = 0.1
    screen = Image(4, 10)
    draw_floor_ceil(game, screen)
    horizon = 5 + int(0.1 * JUMP_VISUAL_MULTIPLIER)
    assert screen.pixel(1, horizon - 1) == 0x445566
    assert screen.pixel(1, horizon) == 0x112233


def test_centre_ray_hits_east_wall():
    game = make_game()
    ray = cast_ray(game, WIN_W // 2)
    assert (ray.map_x, ray.map_y) == (4, 2)
    assert ray.side_hit == 0
    assert ray.dist == pytest.approx(1.5)
    assert ray.tex_id == Direction.WEST
    assert 0 <= ray.tex_x < TEX_SIZE


def test_ray_hits_door():
    rows = ["11111", "10001", "10ED1", "10001", "11111"]
    game = make_game(rows)
    ray = cast_ray(game, WIN_W // 2)
    assert (ray.map_x, ray.map_y) == (3, 2)
    assert ray.tex_id == Direction.DOOR
    assert ray.dist == pytest.approx(0.5)


def test_ray_facing_north_hits_horizontal_side():
    rows = ["11111", "10001", "10N01", "10001", "11111"]
    game = make_game(rows)
    ray = cast_ray(game, WIN_W // 2)
    assert ray.side_hit == 1
    assert ray.map_y == 0
    assert ray.tex_id == Direction.SOUTH


def test_wall_slice_is_centred_and_contiguous():
    game = make_game()
    screen = Image(WIN_W, WIN_H)
    x = WIN_W // 2
    draw_walls(game, screen, x, cast_ray(game, x), uniform_textures(0x00FF00))
    rows = painted_rows(screen, x)
    assert rows == list(range(rows[0], rows[-1] + 1))
    assert rows[0] < WIN_H // 2 < rows[-1]
    assert screen.pixel(x, WIN_H // 2) == 0x00FF00
    assert screen.pixel(x - 1, WIN_H // 2) == 0


def test_closer_wall_is_taller():
    game = make_game()
    x = WIN_W // 2
    textures = uniform_textures(0x00FF00)
    far, near = Image(WIN_W, WIN_H), Image(WIN_W, WIN_H)
    draw_walls(game, far, x, Ray(dist=3.0, tex_id=Direction.WEST), textures)
    draw_walls(game, near, x, Ray(dist=1.0, tex_id=Direction.WEST), textures)
    assert len(painted_rows(near, x)) > len(painted_rows(far, x))


def test_horizontal_side_is_shaded():
    game = make_game()
    screen = Image(WIN_W, WIN_H)
    ray = Ray(dist=2.0, side_hit=1, tex_id=Direction.NORTH)
    draw_walls(game, screen, 0, ray, uniform_textures(0xFFFFFF))
    assert screen.pixel(0, WIN_H // 2) == 8355711


def test_jump_shifts_wall_slice():
    game = make_game()
    textures = uniform_textures(0x00FF00)
    ray = Ray(dist=2.0, tex_id=Direction.WEST)
    ground = Image(WIN_W, WIN_H)
    draw_walls(game, ground, 0, ray, textures)
    game.player.z_offset = 0.5
    jumped = Image(WIN_W, WIN_H)
    draw_walls(game, jumped, 0, ray, textures)
    shift = int(0.5 * JUMP_VISUAL_MULTIPLIER)
    assert painted_rows(jumped, 0)[0] == painted_rows(ground, 0)[0] + shift


def test_raycaster_draws_every_column():
    game = make_game()
    textures = {slot: solid(0x010101 * (int(slot) + 1)) for slot in Direction}
    screen = Image(WIN_W, WIN_H)
    raycaster(game, screen, textures)
    for x in range(0, WIN_W, 160):
        assert screen.pixel(x, WIN_H // 2) != 0
    assert screen.pixel(WIN_W // 2, WIN_H // 2) == textures[Direction.WEST].pixel(0, 0)