"""Small value types shared by the game logic: vectors, colours and timers."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import ClassVar, Union

_Scalar = Union[int, float]


@dataclass(frozen=True)
class Vec2:
    """An immutable two-dimensional vector."""

    x: float
    y: float

    ZERO: ClassVar[Vec2]
    X: ClassVar[Vec2]
    Y: ClassVar[Vec2]
    NEG_X: ClassVar[Vec2]
    NEG_Y: ClassVar[Vec2]

    def __add__(self, other: Vec2) -> Vec2:
        return Vec2(self.x + other.x, self.y + other.y)

    def __sub__(self, other: Vec2) -> Vec2:
        return Vec2(self.x - other.x, self.y - other.y)

    def __mul__(self, other: Vec2 | _Scalar) -> Vec2:
        if isinstance(other, Vec2):
            return Vec2(self.x * other.x, self.y * other.y)
        return Vec2(self.x * other, self.y * other)

    __rmul__ = __mul__

    def __neg__(self) -> Vec2:
        return Vec2(-self.x, -self.y)

    def dot(self, other: Vec2) -> float:
        return self.x * other.x + self.y * other.y

    def length(self) -> float:
        return math.hypot(self.x, self.y)

    def angle_to(self, other: Vec2) -> float:
        """Signed angle in radians that rotates this vector onto ``other``."""
        perp_dot = self.x * other.y - self.y * other.x
        return math.atan2(perp_dot, self.dot(other))

    def extend(self, z: float) -> Vec3:
        return Vec3(self.x, self.y, z)


Vec2.ZERO = Vec2(0.0, 0.0)
Vec2.X = Vec2(1.0, 0.0)
Vec2.Y = Vec2(0.0, 1.0)
Vec2.NEG_X = Vec2(-1.0, 0.0)
Vec2.NEG_Y = Vec2(0.0, -1.0)


@dataclass(frozen=True)
class Vec3:
    """An immutable three-dimensional vector."""

    x: float
    y: float
    z: float

    ZERO: ClassVar[Vec3]
    ONE: ClassVar[Vec3]

    def __add__(self, other: Vec3) -> Vec3:
        return Vec3(self.x + other.x, self.y + other.y, self.z + other.z)

    def __sub__(self, other: Vec3) -> Vec3:
        return Vec3(self.x - other.x, self.y - other.y, self.z - other.z)

    def __mul__(self, other: Vec3 | _Scalar) -> Vec3:
        if isinstance(other, Vec3):
            return Vec3(self.x * other.x, self.y * other.y, self.z * other.z)
        return Vec3(self.x * other, self.y * other, self.z * other)

    __rmul__ = __mul__

    def __neg__(self) -> Vec3:
        return Vec3(-self.x, -self.y, -self.z)

    def length(self) -> float:
        return math.sqrt(self.x * self.x + self.y * self.y + self.z * self.z)

    def smooth_nudge(self, target: Vec3, decay_rate: float, delta: float) -> Vec3:
        """Move towards ``target`` with frame-rate independent exponential decay."""
        t = 1.0 - math.exp(-decay_rate * delta)
        return self + (target - self) * t


Vec3.ZERO = Vec3(0.0, 0.0, 0.0)
Vec3.ONE = Vec3(1.0, 1.0, 1.0)


@dataclass(frozen=True)
class Color:
    """An sRGB colour with alpha, components in 0..1."""

    r: float
    g: float
    b: float
    a: float = 1.0

    WHITE: ClassVar[Color]
    BLACK: ClassVar[Color]

    @classmethod
    def srgb(cls, r: float, g: float, b: float) -> Color:
        return cls(r, g, b, 1.0)

    @classmethod
    def srgba(cls, r: float, g: float, b: float, a: float) -> Color:
        return cls(r, g, b, a)

    def with_alpha(self, alpha: float) -> Color:
        return Color(self.r, self.g, self.b, alpha)


Color.WHITE = Color(1.0, 1.0, 1.0, 1.0)
Color.BLACK = Color(0.0, 0.0, 0.0, 1.0)


@dataclass
class Timer:
    """A one-shot countdown measured in seconds."""

    duration: float
    elapsed: float = 0.0
    finished: bool = False
    just_finished: bool = False

    def __post_init__(self) -> None:
        if self.duration < 0:
            raise ValueError(f"timer duration must not be negative: {self.duration}")

    @classmethod
    def from_seconds(cls, seconds: float) -> Timer:
        return cls(float(seconds))

    def tick(self, delta: float) -> Timer:
        """Advance the timer by ``delta`` seconds and return it."""
        if delta < 0:
            raise ValueError(f"cannot tick a timer backwards: {delta}")
        if self.finished:
            self.just_finished = False
            return self
        self.elapsed += delta
        if self.elapsed >= self.duration:
            self.elapsed = self.duration
            self.finished = True
            self.just_finished = True
        else:
            self.just_finished = False
        return self

    def reset(self) -> None:
        self.elapsed = 0.0
        self.finished = False
        self.just_finished = False