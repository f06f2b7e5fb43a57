"""The chain-reacting weapon attack: phases, fury, sounds and the combat state machine."""

from __future__ import annotations

import random
from dataclasses import dataclass, field
from enum import Enum
from typing import ClassVar, Union

from chainaxe.core import Timer, Vec2, Vec3

INITIAL_ATTACK_COOLDOWN_SECONDS = 1.5
MINIMUM_ATTACK_COOLDOWN_SECONDS = 0.05
ATTACK_PERIOD_SECONDS = 2.0
GRACE_PERIOD_SECONDS = 2.0
INITIAL_EXTEND_SCALE = 7.0
MINIMUM_EXTEND_SCALE = 1.0

SCALE_INCREASE_FACTOR = 1.2
SCALE_DECREASE_FACTOR = 0.8
COOLDOWN_INCREASE_FACTOR = 1.2
COOLDOWN_DECREASE_FACTOR = 0.8

WEAPON_ATTACK_HORIZONTAL_OFFSET = Vec3(-60.0, -47.0, -1.0)
WEAPON_ATTACK_VERTICAL_OFFSET = Vec3(30.0, 10.0, -1.0)

_COMBAT_AUDIO = "audio/sound_effects/combat"
WIND_SLASH_SOUNDS = tuple(f"{_COMBAT_AUDIO}/wind_slash_{i}.ogg" for i in range(1, 9))
_LEVELS = ("0008", "0016", "0031", "0062", "0125", "0250", "0500", "1000")
WEAPON_HIT_SOUNDS = tuple(f"{_COMBAT_AUDIO}/weapon_hit_{level}.ogg" for level in _LEVELS)
WEAPON_MISS_SOUNDS = tuple(f"{_COMBAT_AUDIO}/weapon_miss_{level}.ogg" for level in _LEVELS)


class AttackPosition(Enum):
    """Which side the weapon swings from."""

    UP = "up"
    DOWN = "down"

    def next(self) -> AttackPosition:
        return AttackPosition.DOWN if self is AttackPosition.UP else AttackPosition.UP

    def translate(self, attack_direction: Vec2) -> Vec3:
        """Weapon offset from the player for this position and direction."""
        if attack_direction.x == 0.0:
            offset = Vec3(-70.0, 0.0, 0.0) if self is AttackPosition.DOWN else Vec3.ZERO
            return (WEAPON_ATTACK_VERTICAL_OFFSET + offset) * Vec3(1.0, attack_direction.y, 1.0)
        offset = Vec3(0.0, 110.0, 0.0) if self is AttackPosition.DOWN else Vec3.ZERO
        return (WEAPON_ATTACK_HORIZONTAL_OFFSET + offset) * Vec3(attack_direction.x, 1.0, 1.0)

    def scale(self, attack_direction: Vec2) -> Vec3:
        """Sprite mirroring for this position and direction."""
        is_vertical = attack_direction.x == 0.0
        is_positive = attack_direction.y > 0.0 if is_vertical else attack_direction.x > 0.0
        unflipped = {
            (True, False, AttackPosition.UP),
            (True, True, AttackPosition.DOWN),
            (False, True, AttackPosition.DOWN),
            (False, False, AttackPosition.UP),
        }
        if (is_vertical, is_positive, self) in unflipped:
            return Vec3(1.0, 1.0, 1.0)
        return Vec3(-1.0, 1.0, 1.0)


@dataclass
class Reacting:
    """The weapon is chain reacting; the timer runs from button press to swing."""

    timer: Timer


@dataclass
class Attacking:
    """The swing is animating from the player's position at attack time."""

    pos: Vec3
    direction: Vec2
    is_in_attack_delay: bool = False


@dataclass
class Ready:
    """The weapon may attack again before the timer runs out."""

    timer: Timer


@dataclass
class Cooling:
    """The weapon is cooling down; attacking now restarts the reaction."""

    timer: Timer


AttackPhase = Union[Reacting, Attacking, Ready, Cooling]


def _ready_phase() -> Ready:
    return Ready(Timer.from_seconds(ATTACK_PERIOD_SECONDS))


def _cooling_phase() -> Cooling:
    return Cooling(Timer.from_seconds(GRACE_PERIOD_SECONDS))


def _initial_phase() -> Reacting:
    return Reacting(Timer.from_seconds(INITIAL_ATTACK_COOLDOWN_SECONDS))


@dataclass
class Attack:
    """The state of an attack in progress."""

    attack_delay_seconds: float = INITIAL_ATTACK_COOLDOWN_SECONDS
    extend_scale: float = INITIAL_EXTEND_SCALE
    phase: AttackPhase = field(default_factory=_initial_phase)
    position: AttackPosition = AttackPosition.UP

    def update_fury(self, increase_fury: bool) -> None:
        """Speed up and shorten the weapon on a hit, slow and lengthen it on a miss."""
        if increase_fury:
            self.attack_delay_seconds = max(
                self.attack_delay_seconds * COOLDOWN_DECREASE_FACTOR,
                MINIMUM_ATTACK_COOLDOWN_SECONDS,
            )
            self.extend_scale = max(self.extend_scale * SCALE_DECREASE_FACTOR, MINIMUM_EXTEND_SCALE)
        else:
            self.attack_delay_seconds = min(
                self.attack_delay_seconds * COOLDOWN_INCREASE_FACTOR,
                INITIAL_ATTACK_COOLDOWN_SECONDS,
            )
            self.extend_scale = min(self.extend_scale * SCALE_INCREASE_FACTOR, INITIAL_EXTEND_SCALE)

    def new_reaction_timer(self) -> Reacting:
        return Reacting(Timer.from_seconds(self.attack_delay_seconds))

    def tick(self, delta: float) -> None:
        if not isinstance(self.phase, Attacking):
            self.phase.timer.tick(delta)


@dataclass(frozen=True)
class AttackSound:
    """A sound to play: a hit or a miss at a given cooldown, or a slash."""

    kind: str
    cooldown_seconds: float = 0.0

    HIT: ClassVar[str] = "hit"
    MISS: ClassVar[str] = "miss"
    SLASH: ClassVar[str] = "slash"

    def __post_init__(self) -> None:
        if self.kind not in (self.HIT, self.MISS, self.SLASH):
            raise ValueError(f"unknown attack sound: {self.kind!r}")

    @classmethod
    def hit(cls, cooldown_seconds: float) -> AttackSound:
        return cls(cls.HIT, cooldown_seconds)

    @classmethod
    def miss(cls, cooldown_seconds: float) -> AttackSound:
        return cls(cls.MISS, cooldown_seconds)

    @classmethod
    def slash(cls) -> AttackSound:
        return cls(cls.SLASH)


_SOUND_THRESHOLDS = ((1.0, 7), (0.5, 6), (0.25, 5), (0.125, 4), (0.062, 3), (0.031, 2), (0.016, 1))


def sound_index(cooldown_seconds: float) -> int:
    """Pick the hit/miss sound variant that matches the current cooldown."""
    return next((index for limit, index in _SOUND_THRESHOLDS if cooldown_seconds >= limit), 0)


def choose_sound_path(sound: AttackSound, rng: random.Random | None = None) -> str:
    """Asset path of the sound to play for ``sound``."""
    if sound.kind == AttackSound.HIT:
        return WEAPON_HIT_SOUNDS[sound_index(sound.cooldown_seconds)]
    if sound.kind == AttackSound.MISS:
        return WEAPON_MISS_SOUNDS[sound_index(sound.cooldown_seconds)]
    return (rng or random).choice(WIND_SLASH_SOUNDS)


def choose_attack_direction(current: Vec2, direction: Vec2, grounded: bool) -> Vec2:
    """Snap an input direction to an axis; downward attacks only while airborne."""
    if direction.y > 0.0:
        return Vec2.Y
    if direction.y < 0.0:
        return current if grounded else Vec2.NEG_Y
    if direction.x > 0.0:
        return Vec2.X
    if direction.x < 0.0:
        return Vec2.NEG_X
    return current


@dataclass
class Combat:
    """The player's attack state machine together with the weapon hitbox."""

    attack: Attack | None = None
    hitbox_enabled: bool = False
    it_hit_something: bool = False
    rehit_delays: dict = field(default_factory=dict)

    def update(
        self, attack_input: bool, delta: float, position: Vec3, attack_direction: Vec2
    ) -> list[AttackSound]:
        """Advance one frame; returns the sounds to play."""
        if self.attack is None:
            if attack_input:
                self.attack = Attack()
            return []

        attack = self.attack
        attack.tick(delta)
        sounds: list[AttackSound] = []
        phase = attack.phase

        if isinstance(phase, Reacting):
            if phase.timer.just_finished:
                attack.phase = Attacking(position, attack_direction, False)
                sounds.append(AttackSound.slash())
                self.rehit_delays = {}
                self.hitbox_enabled = True
        elif isinstance(phase, Ready):
            self.hitbox_enabled = False
            if phase.timer.just_finished:
                attack.update_fury(False)
                attack.phase = _cooling_phase()
            elif attack_input:
                attack.phase = attack.new_reaction_timer()
        elif isinstance(phase, Cooling):
            self.hitbox_enabled = False
            if phase.timer.just_finished:
                self.attack = None
            elif attack_input:
                attack.phase = attack.new_reaction_timer()
        return sounds

    def register_hit(self) -> None:
        self.it_hit_something = True

    def do_attack(self, in_attack_delay: bool) -> list[AttackSound]:
        """Handle the swing reaching its target; returns the sounds to play."""
        attack = self.attack
        if attack is None or not isinstance(attack.phase, Attacking):
            return []
        hit = self.it_hit_something
        if in_attack_delay:
            attack.update_fury(hit)
            attack.position = attack.position.next()
            attack.phase = _ready_phase() if hit else _cooling_phase()
            self.it_hit_something = False
            return []
        attack.phase.is_in_attack_delay = True
        return [AttackSound.hit(attack.attack_delay_seconds)] if hit else []