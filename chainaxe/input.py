"""Player tuning and the mapping from keyboard and gamepad state to actions."""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from enum import Enum, auto
from typing import ClassVar, Optional

from chainaxe.core import Vec2


class Key(Enum):
    ARROW_LEFT = auto()
    ARROW_RIGHT = auto()
    ARROW_UP = auto()
    ARROW_DOWN = auto()
    KEY_Z = auto()
    KEY_X = auto()
    KEY_C = auto()
    KEY_P = auto()
    ESCAPE = auto()
    ENTER = auto()


class GamepadButton(Enum):
    DPAD_LEFT = auto()
    DPAD_RIGHT = auto()
    DPAD_UP = auto()
    DPAD_DOWN = auto()
    SOUTH = auto()
    WEST = auto()
    RIGHT_TRIGGER = auto()
    RIGHT_TRIGGER2 = auto()


MOVEMENT_SPEED = 500.0
DASH_SPEED_MODIFIER = 2.0
JUMP_IMPULSE = 1000.0
MOVEMENT_DAMPING = 6.0
MAX_SLOPE_ANGLE = math.radians(30.0)
CHARACTER_GRAVITY_SCALE = 1.5
DASH_DURATION = 0.216
DASH_COOLDOWN_DURATION = 0.3
JUMP_DURATION_SECONDS = 0.400

CHARACTER_HEALTH = 100.0

KEYBOARD_LEFT = Key.ARROW_LEFT
KEYBOARD_RIGHT = Key.ARROW_RIGHT
KEYBOARD_DOWN = Key.ARROW_DOWN
KEYBOARD_UP = Key.ARROW_UP
KEYBOARD_JUMP = Key.KEY_Z
KEYBOARD_ATTACK = Key.KEY_X
KEYBOARD_DASH = Key.KEY_C


@dataclass(frozen=True)
class KeyboardState:
    """Keys held, newly pressed and newly released this frame."""

    pressed: frozenset = field(default_factory=frozenset)
    just_pressed: frozenset = field(default_factory=frozenset)
    just_released: frozenset = field(default_factory=frozenset)


@dataclass(frozen=True)
class GamepadState:
    """Buttons and left stick of one gamepad this frame."""

    pressed: frozenset = field(default_factory=frozenset)
    just_pressed: frozenset = field(default_factory=frozenset)
    just_released: frozenset = field(default_factory=frozenset)
    left_stick_x: Optional[float] = None
    left_stick_y: Optional[float] = None


@dataclass(frozen=True)
class MovementAction:
    """A movement input: move in a direction, start or end a jump, or dash."""

    kind: str
    direction: Optional[Vec2] = None

    MOVE: ClassVar[str] = "move"
    JUMP_START: ClassVar[str] = "jump_start"
    JUMP_END: ClassVar[str] = "jump_end"
    DASH: ClassVar[str] = "dash"

    def __post_init__(self) -> None:
        if self.kind not in (self.MOVE, self.JUMP_START, self.JUMP_END, self.DASH):
            raise ValueError(f"unknown movement action: {self.kind!r}")
        if (self.kind == self.MOVE) != (self.direction is not None):
            raise ValueError("only a move action carries a direction")

    @classmethod
    def move(cls, direction: Vec2) -> MovementAction:
        return cls(cls.MOVE, direction)

    @classmethod
    def jump_start(cls) -> MovementAction:
        return cls(cls.JUMP_START)

    @classmethod
    def jump_end(cls) -> MovementAction:
        return cls(cls.JUMP_END)

    @classmethod
    def dash(cls) -> MovementAction:
        return cls(cls.DASH)


def input_to_direction(left: bool, right: bool, up: bool, down: bool) -> Optional[Vec2]:
    """Combine four directional buttons into a direction, or None when they cancel out."""
    horizontal = float(int(right) - int(left))
    vertical = float(int(up) - int(down))
    if horizontal == 0.0 and vertical == 0.0:
        return None
    return Vec2(horizontal, vertical)


def _keyboard_direction(keyboard: KeyboardState) -> Optional[Vec2]:
    held = keyboard.pressed
    return input_to_direction(
        KEYBOARD_LEFT in held, KEYBOARD_RIGHT in held, KEYBOARD_UP in held, KEYBOARD_DOWN in held
    )


def _gamepad_direction(gamepad: GamepadState) -> Optional[Vec2]:
    held = gamepad.pressed
    button_direction = input_to_direction(
        GamepadButton.DPAD_LEFT in held,
        GamepadButton.DPAD_RIGHT in held,
        GamepadButton.DPAD_UP in held,
        GamepadButton.DPAD_DOWN in held,
    )
    if button_direction is not None:
        return button_direction
    x = gamepad.left_stick_x or 0.0
    y = gamepad.left_stick_y or 0.0
    if x == 0.0 and y == 0.0:
        return None
    return Vec2(x, y)


def keyboard_movement_actions(keyboard: KeyboardState) -> list[MovementAction]:
    actions = []
    direction = _keyboard_direction(keyboard)
    if direction is not None and direction.x != 0.0:
        actions.append(MovementAction.move(direction))
    if KEYBOARD_JUMP in keyboard.just_pressed:
        actions.append(MovementAction.jump_start())
    if KEYBOARD_JUMP in keyboard.just_released:
        actions.append(MovementAction.jump_end())
    if KEYBOARD_DASH in keyboard.just_pressed:
        actions.append(MovementAction.dash())
    return actions


def gamepad_movement_actions(gamepad: GamepadState) -> list[MovementAction]:
    actions = []
    direction = _gamepad_direction(gamepad)
    if direction is not None and direction.x != 0.0:
        actions.append(MovementAction.move(direction))
    if GamepadButton.SOUTH in gamepad.just_pressed:
        actions.append(MovementAction.jump_start())
    if GamepadButton.SOUTH in gamepad.just_released:
        actions.append(MovementAction.jump_end())
    if gamepad.just_pressed & {GamepadButton.RIGHT_TRIGGER, GamepadButton.RIGHT_TRIGGER2}:
        actions.append(MovementAction.dash())
    return actions


def keyboard_attack_input(keyboard: KeyboardState) -> tuple[Optional[Vec2], bool]:
    """The attack direction held, if any, and whether the attack key is down."""
    return _keyboard_direction(keyboard), KEYBOARD_ATTACK in keyboard.pressed


def gamepad_attack_input(gamepad: GamepadState) -> tuple[Optional[Vec2], bool]:
    """The attack direction held, if any, and whether the attack button is down."""
    return _gamepad_direction(gamepad), GamepadButton.WEST in gamepad.pressed