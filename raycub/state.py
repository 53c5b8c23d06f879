"""Game state: map grid, player, keys, doors and the whole game."""

from __future__ import annotations

from dataclasses import dataclass, field

from raycub.settings import Direction
from raycub.vector import Vec


class SceneError(Exception):
    """Raised when a scene file or map is invalid."""


@dataclass
class GameMap:
    """A mutable grid of map characters indexed by (x, y)."""

    grid: list[list[str]] = field(default_factory=list)
    width: int = field(init=False)
    height: int = field(init=False)

    def __post_init__(self) -> None:
        self.grid = [list(row) for row in self.grid]
        self.height = len(self.grid)
        self.width = max((len(row) for row in self.grid), default=0)

    def in_bounds(self, x: int, y: int) -> bool:
        """Tell whether (x, y) lies inside the map rectangle."""
        return 0 <= x < self.width and 0 <= y < self.height

    def tile(self, x: int, y: int) -> str:
        """Return the character at (x, y)."""
        if not self.in_bounds(x, y) or x >= len(self.grid[y]):
            raise IndexError(f"tile ({x}, {y}) is outside the map")
        return self.grid[y][x]

    def set_tile(self, x: int, y: int, char: str) -> None:
        """Replace the character at (x, y)."""
        if not self.in_bounds(x, y) or x >= len(self.grid[y]):
            raise IndexError(f"tile ({x}, {y}) is outside the map")
        self.grid[y][x] = char


@dataclass
class Player:
    """Position, facing, camera plane and jump state."""

    pos: Vec = field(default_factory=Vec)
    dir: Vec = field(default_factory=Vec)
    plane: Vec = field(default_factory=Vec)
    z_offset: float = 0.0
    jump_speed: float = 0.0
    is_jumping: bool = False

    def reset_jump(self) -> None:
        """Put the player back on the ground, not jumping."""
        self.z_offset = 0.0
        self.jump_speed = 0.0
        self.is_jumping = False


@dataclass
class Keys:
    """Which of the tracked keys are held down."""

    w: bool = False
    a: bool = False
    s: bool = False
    d: bool = False
    left: bool = False
    right: bool = False
    space: bool = False
    e: bool = False


@dataclass
class Door:
    """A door cell on the map."""

    x: int
    y: int
    is_open: bool = False
    original: str = "D"


@dataclass
class Game:
    """Everything the running game knows about."""

    map: GameMap = field(default_factory=GameMap)
    player: Player = field(default_factory=Player)
    keys: Keys = field(default_factory=Keys)
    doors: list[Door] = field(default_factory=list)
    textures: dict[Direction, str] = field(default_factory=dict)
    floor_color: int = 0
    ceil_color: int = 0
    map_dir: str = "."
    mouse_x: int = 0
    first_mouse: bool = True
    door_flash_timer: int = 0
    door_flash_x: int = 0
    door_flash_y: int = 0