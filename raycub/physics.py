"""Player physics: jumping, rotation, collision and sliding movement."""

from __future__ import annotations

import math

from raycub.settings import (
    COLLISION_RADIUS,
    EPS,
    GRAVITY,
    JUMP_INITIAL_SPEED,
    MAX_MOVE_STEP,
    MIN_MOVE_DISTANCE,
    MOVE_SPEED,
    ROT_SPEED,
)
from raycub.state import Game, Player
from raycub.vector import Vec

_SOLID = frozenset("1D")


def _start_jump(player: Player) -> None:
    if not player.is_jumping:
        player.jump_speed = JUMP_INITIAL_SPEED
        player.is_jumping = True


def _apply_gravity(player: Player) -> None:
    player.z_offset += player.jump_speed
    player.jump_speed -= GRAVITY
    if player.z_offset <= 0.0:
        player.reset_jump()


def update_jump(game: Game) -> None:
    """Start a jump while space is held and advance one jump frame."""
    if game.keys.space:
        _start_jump(game.player)
    if game.player.is_jumping:
        _apply_gravity(game.player)


def _is_point_wall(game: Game, x: float, y: float) -> bool:
    game_map = game.map
    if y < 0 or y >= game_map.height or x < 0 or x >= game_map.width:
        return True
    row = game_map.grid[int(y)]
    column = int(x)
    if column >= len(row):
        return True
    return row[column] in _SOLID


def is_wall(game: Game, x: float, y: float) -> bool:
    """Tell whether a player body centred at (x, y) would touch a wall or door."""
    radius = COLLISION_RADIUS
    if (
        x - radius < 0
        or x + radius >= game.map.width
        or y - radius < 0
        or y + radius >= game.map.height
    ):
        return True
    probes = (
        (x, y),
        (x, y - radius),
        (x, y + radius),
        (x - radius, y),
        (x + radius, y),
        (x - radius, y - radius),
        (x + radius, y - radius),
        (x - radius, y + radius),
        (x + radius, y + radius),
    )
    return any(_is_point_wall(game, px, py) for px, py in probes)


def wall_slide_move(game: Game, dx: float, dy: float) -> None:
    """Move by (dx, dy), or along whichever single axis is free."""
    player = game.player
    nx = player.pos.x + dx
    ny = player.pos.y + dy
    if not is_wall(game, nx, ny):
        player.pos = Vec(nx, ny)
    elif not is_wall(game, nx, player.pos.y):
        player.pos = Vec(nx, player.pos.y)
    elif not is_wall(game, player.pos.x, ny):
        player.pos = Vec(player.pos.x, ny)


def find_safe_distance(
    game: Game, start_x: float, start_y: float, dx: float, dy: float
) -> float:
    """Return the largest fraction of (dx, dy) found free by bisection."""
    safe_ratio = 0.0
    low, high = 0.0, 1.0
    while high - low > EPS:
        test_ratio = (low + high) * 0.5
        if not is_wall(game, start_x + dx * test_ratio, start_y + dy * test_ratio):
            safe_ratio = test_ratio
            low = test_ratio
        else:
            high = test_ratio
    return safe_ratio


def try_smooth_move(game: Game, dx: float, dy: float) -> None:
    """Try the x part of the move, then the y part, each on its own."""
    player = game.player
    if abs(dx) >= EPS:
        nx = player.pos.x + dx
        if not is_wall(game, nx, player.pos.y):
            player.pos = Vec(nx, player.pos.y)
    if abs(dy) >= EPS:
        ny = player.pos.y + dy
        if not is_wall(game, player.pos.x, ny):
            player.pos = Vec(player.pos.x, ny)


def apply_wall_sliding(game: Game, dx: float, dy: float) -> None:
    """Advance as far as is free, then slide the remainder along walls."""
    player = game.player
    safe_ratio = find_safe_distance(game, player.pos.x, player.pos.y, dx, dy)
    if safe_ratio > EPS:
        player.pos = Vec(player.pos.x + dx * safe_ratio, player.pos.y + dy * safe_ratio)
        remaining_dx = dx * (1.0 - safe_ratio)
        remaining_dy = dy * (1.0 - safe_ratio)
        if abs(remaining_dx) > EPS or abs(remaining_dy) > EPS:
            try_smooth_move(game, remaining_dx, remaining_dy)
    else:
        try_smooth_move(game, dx, dy)


def subdiv_move(game: Game, total_dx: float, total_dy: float) -> None:
    """Move by the total, splitting it into short slides when blocked."""
    if abs(total_dx) < EPS and abs(total_dy) < EPS:
        return
    player = game.player
    if not is_wall(game, player.pos.x + total_dx, player.pos.y + total_dy):
        player.pos = Vec(player.pos.x + total_dx, player.pos.y + total_dy)
        return
    dist = math.hypot(total_dx, total_dy)
    if dist <= MAX_MOVE_STEP:
        apply_wall_sliding(game, total_dx, total_dy)
        return
    steps = math.ceil(dist / MAX_MOVE_STEP)
    step_dx = total_dx / steps
    step_dy = total_dy / steps
    for _ in range(steps):
        apply_wall_sliding(game, step_dx, step_dy)


def rotate_player(player: Player, angle: float) -> None:
    """Turn the facing direction and camera plane by ``angle`` radians."""
    cos_a = math.cos(angle)
    sin_a = math.sin(angle)
    d = player.dir
    p = player.plane
    player.dir = Vec(d.x * cos_a - d.y * sin_a, d.x * sin_a + d.y * cos_a)
    player.plane = Vec(p.x * cos_a - p.y * sin_a, p.x * sin_a + p.y * cos_a)


def move(game: Game, dx: float, dy: float) -> None:
    """Slide by (dx, dy) unless both parts are below the minimum step."""
    if abs(dx) < MIN_MOVE_DISTANCE and abs(dy) < MIN_MOVE_DISTANCE:
        return
    wall_slide_move(game, dx, dy)


def _wasd_delta(game: Game) -> tuple[float, float]:
    keys = game.keys
    facing = game.player.dir
    total_dx = 0.0
    total_dy = 0.0
    if keys.w:
        total_dx += facing.x * MOVE_SPEED
        total_dy += facing.y * MOVE_SPEED
    if keys.s:
        total_dx -= facing.x * MOVE_SPEED
        total_dy -= facing.y * MOVE_SPEED
    if keys.a:
        total_dx += facing.y * MOVE_SPEED
        total_dy -= facing.x * MOVE_SPEED
    if keys.d:
        total_dx -= facing.y * MOVE_SPEED
        total_dy += facing.x * MOVE_SPEED
    return total_dx, total_dy


def movement_update(game: Game) -> None:
    """Apply one frame of held keys: walking, turning and jumping."""
    total_dx, total_dy = _wasd_delta(game)
    if abs(total_dx) > EPS or abs(total_dy) > EPS:
        subdiv_move(game, total_dx, total_dy)
    if game.keys.left:
        rotate_player(game.player, -ROT_SPEED)
    if game.keys.right:
        rotate_player(game.player, ROT_SPEED)
    update_jump(game)