"""Engine constants, texture slots and key codes."""

from enum import IntEnum

# Window size
WIN_W = 1280
WIN_H = 720

# Ray casting
FOV = 0.66
TEX_SIZE = 64

# Movement
COLLISION_RADIUS = 0.15
MIN_MOVE_DISTANCE = 0.015
MOVE_SPEED = 0.05
ROT_SPEED = 0.05
MAX_MOVE_STEP = 0.05
EPS = 1e-6
MOUSE_SENSITIVITY = 0.0045

# Jump physics
JUMP_INITIAL_SPEED = 0.25
GRAVITY = 0.015
JUMP_VISUAL_MULTIPLIER = 40

# Minimap
MINIMAP_SIZE = 150
MINIMAP_PADDING = 10
COLOR_WALL = 0x4A4A4A
COLOR_SPACE = 0x1A1A0E
COLOR_DOOR = 0x8B4513
COLOR_DOOR_OPEN = 0xDEB887
COLOR_SPRITE = 0xFFD700
COLOR_PLAYER = 0xFF4500
COLOR_VISITED = 0x2F2F1F
COLOR_BORDER = 0xFFFFFF


class Direction(IntEnum):
    """Texture slots: the four wall faces and the door."""

    NORTH = 0
    SOUTH = 1
    EAST = 2
    WEST = 3
    DOOR = 4


class Key(IntEnum):
    """X11 key codes the game reacts to."""

    W = 119
    A = 97
    S = 115
    D = 100
    ESC = 65307
    LEFT = 65361
    RIGHT = 65363
    SPACE = 32
    E = 101