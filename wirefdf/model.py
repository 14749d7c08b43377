"""Core data types shared by the map loader, the renderer and the viewer."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum, IntFlag

WINDOW_WIDTH = 2048
WINDOW_HEIGHT = 1024
WINDOW_NAME = "FDF"

OFFSET_X = WINDOW_WIDTH // 6
OFFSET_Y = WINDOW_HEIGHT // 4

DELTA_SCALE = 0.25
DELTA_ALTITUDE = 50
DELTA_TRANSLATE = 50
DELTA_ROTATE = 7

WHITE = 0xFFFFFF
GREEN = 0x00FF00


@dataclass
class Point:
    """A map vertex: its position in the map, its colour and its projected position."""

    x: int
    y: int
    z: int
    rgb: int = WHITE
    screen: list[int] = field(default_factory=lambda: [0, 0, 0])

    @property
    def sx(self) -> int:
        return self.screen[0]

    @sx.setter
    def sx(self, value: int) -> None:
        self.screen[0] = value

    @property
    def sy(self) -> int:
        return self.screen[1]

    @sy.setter
    def sy(self, value: int) -> None:
        self.screen[1] = value

    @property
    def sz(self) -> int:
        return self.screen[2]

    @sz.setter
    def sz(self, value: int) -> None:
        self.screen[2] = value


@dataclass
class Camera:
    """View parameters: rotation in degrees, translation and per-axis scaling."""

    rotation_angle_x: int = 0
    rotation_angle_y: int = 0
    x: int = 0
    y: int = 0
    scale_x: float = 1.0
    scale_y: float = 1.0
    scale_z: float = 1.0
    altitude: float = 1.0

    def reset(self) -> None:
        """Restore the initial view."""
        self.rotation_angle_x = 0
        self.rotation_angle_y = 0
        self.x = 0
        self.y = 0
        self.scale_x = 1.0
        self.scale_y = 1.0
        self.scale_z = 1.0
        self.altitude = 1.0


class KeyFlag(IntFlag):
    """Bits recording which control keys are currently held."""

    NONE = 0
    UNDEFINED = 0b00000000000001
    UP = 0b00000000000010
    DOWN = 0b00000000000100
    LEFT = 0b00000000001000
    RIGHT = 0b00000000010000
    ROTATE_UP = 0b00000000100000
    ROTATE_DOWN = 0b00000001000000
    ROTATE_LEFT = 0b00000010000000
    ROTATE_RIGHT = 0b00000100000000
    INCREASE_ALT = 0b00001000000000
    DECREASE_ALT = 0b00010000000000
    ZOOM_IN = 0b00100000000000
    ZOOM_OUT = 0b01000000000000
    ESC = 0b10000000000000


class AnsiColor(str, Enum):
    """Terminal escape sequences used for status messages."""

    BLACK = "\033[30m"
    RED = "\033[31m"
    GREEN = "\033[32m"
    YELLOW = "\033[33m"
    BLUE = "\033[34m"
    MAGENTA = "\033[35m"
    CYAN = "\033[36m"
    WHITE = "\033[37m"
    BOLDBLACK = "\033[1m\033[30m"
    BOLDRED = "\033[1m\033[31m"
    BOLDGREEN = "\033[1m\033[32m"
    BOLDYELLOW = "\033[1m\033[33m"
    BOLDBLUE = "\033[1m\033[34m"
    BOLDMAGENTA = "\033[1m\033[35m"
    BOLDCYAN = "\033[1m\033[36m"
    BOLDWHITE = "\033[1m\033[37m"
    RESET = "\033[0m"

    def __str__(self) -> str:
        return self.value