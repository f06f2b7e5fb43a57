"""The player's extending axe: part layout, glow and how it follows the player."""

from __future__ import annotations

import math
from dataclasses import dataclass, field

from chainaxe.attack import Attack, Attacking, Cooling, Reacting, Ready
from chainaxe.core import Color, Timer, Vec2, Vec3

OFFSET_FROM_BASE = 900
OFFSET_FROM_EXTEND = 604 - 551
EXTEND_SIZE = 604
WEAPON_SCALE_FACTOR = 0.065
WEAPON_FOLLOW_OFFSET = Vec3(55.0, -35.0, -1.0)

IDLE_DECAY_RATE = 2.0
AIMING_DECAY_RATE = 10.0
ARRIVED_DISTANCE = 1.0
STRIKE_DISTANCE = 100.0

WEAPON_BASE_IMAGE = "images/weapon_base.png"
WEAPON_EXTEND_IMAGE = "images/weapon_extend.png"
WEAPON_HEAD_IMAGE = "images/weapon_head.png"
WEAPON_GLOW_RED_IMAGE = "images/weapon_glow_red.png"
WEAPON_GLOW_PURPLE_IMAGE = "images/weapon_glow_purple.png"
WEAPON_GLOW_BLUE_IMAGE = "images/weapon_glow_blue.png"

BASE_PART = "Weapon Base"
EXTEND_PART = "Weapon Extend"
HEAD_PART = "Weapon Head"


def weapon_part_offsets(extend_scale: float = 1.0) -> dict[str, tuple[float, float]]:
    """Vertical offset and vertical scale of each weapon part for an extension."""
    extend_translation = extend_scale * EXTEND_SIZE - (EXTEND_SIZE - OFFSET_FROM_EXTEND)
    return {
        BASE_PART: (0.0, 1.0),
        EXTEND_PART: (float(OFFSET_FROM_BASE), extend_scale),
        HEAD_PART: (OFFSET_FROM_BASE + extend_translation - 1.0, 1.0),
    }


def timer_to_transparency(timer: Timer, reverse: bool) -> float:
    """Glow alpha from a phase timer, growing with elapsed whole seconds."""
    whole_seconds = int(timer.duration)
    if timer.finished or whole_seconds == 0:
        grow = 1.0
    else:
        grow = min(timer.elapsed / whole_seconds, 1.0)
    return 1.0 - grow if reverse else grow


def color_with_transparency(alpha: float) -> Color:
    return Color.srgba(1.0, 1.0, 1.0, alpha)


@dataclass
class WeaponGlow:
    """The glow sprite drawn over the weapon head."""

    image: str = WEAPON_GLOW_PURPLE_IMAGE
    color: Color = Color.WHITE
    visible: bool = False


def _base_scale() -> Vec3:
    return Vec3(WEAPON_SCALE_FACTOR, WEAPON_SCALE_FACTOR, 1.0)


@dataclass
class WeaponFollower:
    """The weapon's transform, trailing the player or swinging with an attack."""

    translation: Vec3 = Vec3.ZERO
    rotation: float = 0.0
    scale: Vec3 = field(default_factory=_base_scale)
    glow: WeaponGlow = field(default_factory=WeaponGlow)

    def follow_idle(self, player_position: Vec3, face_direction: Vec2, delta: float) -> None:
        """Hang behind the player while no attack is running."""
        self.glow.visible = False
        direction = 1.0 if self.translation.x > player_position.x else -1.0
        self.scale = Vec3(direction * abs(self.scale.x), self.scale.y, self.scale.z)
        self.rotation = 0.0
        target = player_position + WEAPON_FOLLOW_OFFSET * Vec3(-face_direction.x, 1.0, 1.0)
        self.translation = self.translation.smooth_nudge(target, IDLE_DECAY_RATE, delta)

    def follow_attack(
        self, player_position: Vec3, attack_direction: Vec2, attack: Attack, delta: float
    ) -> list[bool]:
        """Move with the attack; returns the strike events as their attack-delay flags."""
        phase = attack.phase
        if isinstance(phase, Attacking):
            return self._swing(phase, attack, delta)

        if isinstance(phase, Reacting):
            self.glow.color = color_with_transparency(timer_to_transparency(phase.timer, False))
            self.glow.image = WEAPON_GLOW_RED_IMAGE
        elif isinstance(phase, Ready):
            self.glow.color = color_with_transparency(timer_to_transparency(phase.timer, True))
            self.glow.image = WEAPON_GLOW_PURPLE_IMAGE
        elif isinstance(phase, Cooling):
            self.glow.color = color_with_transparency(timer_to_transparency(phase.timer, True))
            self.glow.image = WEAPON_GLOW_BLUE_IMAGE
        else:
            raise TypeError(f"not an attack phase: {phase!r}")
        self.glow.visible = True

        self.rotation = Vec2.Y.angle_to(attack_direction)
        self.scale = attack.position.scale(attack_direction) * _base_scale()
        target = player_position + attack.position.translate(attack_direction)
        self.translation = self.translation.smooth_nudge(target, AIMING_DECAY_RATE, delta)
        return []

    def _swing(self, phase: Attacking, attack: Attack, delta: float) -> list[bool]:
        destination = phase.pos + attack.position.next().translate(phase.direction)
        distance = (self.translation - destination).length()
        events = []
        if distance < ARRIVED_DISTANCE and phase.is_in_attack_delay:
            events.append(True)
        if distance < STRIKE_DISTANCE and not phase.is_in_attack_delay:
            events.append(False)
        decay_rate = math.exp(2.7 * (-attack.attack_delay_seconds + 2.7))
        self.translation = self.translation.smooth_nudge(destination, decay_rate, delta)
        return events