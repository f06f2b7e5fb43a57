"""Player movement: running, jumping, dashing, coyote time and sprite animation."""

from __future__ import annotations

import random
from dataclasses import dataclass, field
from typing import Iterable, Optional, Union

from chainaxe.core import Timer, Vec2, Vec3
from chainaxe.input import (
    CHARACTER_GRAVITY_SCALE,
    CHARACTER_HEALTH,
    DASH_COOLDOWN_DURATION,
    DASH_DURATION,
    DASH_SPEED_MODIFIER,
    JUMP_DURATION_SECONDS,
    JUMP_IMPULSE,
    MOVEMENT_SPEED,
    MovementAction,
)

IDLE_FRAME_NUM = 10
RUN_FRAME_NUM = 32
JUMP_FRAME_NUM = 34

COYOTE_DURATION_SECONDS = 0.2
JUMP_GRAVITY_SCALE = 0.5
FALL_LIMIT_Y = -1500.0
RECOVERY_HEIGHT = 300.0
RECOVERY_GRAVITY_SCALE = 0.5
DASH_END_VELOCITY_FACTOR = 0.4
JUMP_END_VELOCITY_FACTOR = 0.5
ACCELERATION_FACTOR = 10.0

PLAYER_IDLE_IMAGE = "images/player/player_idle.png"
PLAYER_RUN_IMAGE = "images/player/player_run.png"
PLAYER_DASH_IMAGE = "images/player/player_dash.png"
PLAYER_JUMP_IMAGE = "images/player/player_jump.png"

_PLAYER_AUDIO = "audio/sound_effects/player"
FOOTSTEP_SOUNDS = tuple(f"{_PLAYER_AUDIO}/footsteps_{i}.ogg" for i in range(1, 9))
DASH_SOUNDS = tuple(f"{_PLAYER_AUDIO}/dash_{i}.ogg" for i in range(1, 9))

# Atlas layouts as (tile width, tile height, columns, rows).
IDLE_ATLAS = (390, 560, 8, 2)
RUN_ATLAS = (390, 560, 8, 4)
JUMP_ATLAS = (390, 580, 8, 5)


@dataclass
class Idle:
    """Standing still; ``reverse`` tracks the direction of the ping-pong animation."""

    reverse: bool = False


@dataclass
class Run:
    """Running along the ground."""


@dataclass
class Jump:
    """In a jump; the timer limits how long the jump keeps its low gravity."""

    timer: Timer = field(default_factory=lambda: Timer.from_seconds(JUMP_DURATION_SECONDS))


@dataclass
class Dash:
    """Dashing; ``remaining`` is the time left in seconds."""

    remaining: float = DASH_DURATION


MovementState = Union[Idle, Run, Jump, Dash]


@dataclass(frozen=True)
class SpriteChoice:
    """The image to show and, for animated sheets, its atlas layout."""

    image: str
    atlas: Optional[tuple[int, int, int, int]] = None


def player_sprite(state: MovementState) -> SpriteChoice:
    """The sprite sheet that belongs to a movement state."""
    if isinstance(state, Idle):
        return SpriteChoice(PLAYER_IDLE_IMAGE, IDLE_ATLAS)
    if isinstance(state, Run):
        return SpriteChoice(PLAYER_RUN_IMAGE, RUN_ATLAS)
    if isinstance(state, Dash):
        return SpriteChoice(PLAYER_DASH_IMAGE, None)
    if isinstance(state, Jump):
        return SpriteChoice(PLAYER_JUMP_IMAGE, JUMP_ATLAS)
    raise TypeError(f"not a movement state: {state!r}")


def reversible_step(reverse: bool, index: int, frame_count: int) -> tuple[bool, int]:
    """Advance a ping-pong animation by one frame; returns the new direction and index."""
    if frame_count <= 0:
        raise ValueError(f"frame count must be positive: {frame_count}")
    if frame_count == 1:
        return reverse, 0
    if reverse:
        if index <= 0:
            return False, 1
        return True, index - 1
    if index >= frame_count - 1:
        return True, frame_count - 2
    return False, index + 1


@dataclass
class PlayerController:
    """The player's body: velocity, gravity, movement state and sprite."""

    position: Vec3 = field(default_factory=lambda: Vec3(0.0, 0.0, 2.0))
    velocity: Vec2 = Vec2.ZERO
    face_direction: Vec2 = Vec2.X
    attack_direction: Vec2 = Vec2.X
    gravity_scale: float = CHARACTER_GRAVITY_SCALE
    health: float = CHARACTER_HEALTH
    state: MovementState = field(default_factory=Idle)
    grounded: bool = False
    flying: bool = False
    dashing_used: bool = False
    dash_cooldown: Optional[Timer] = None
    coyote: Optional[Timer] = None
    scale_x: float = 1.0
    sprite: SpriteChoice = field(default_factory=lambda: player_sprite(Idle()))
    atlas_index: int = 0
    rng: random.Random = field(default_factory=random.Random, repr=False, compare=False)

    def _change_sprite(self) -> None:
        self.sprite = player_sprite(self.state)
        self.atlas_index = 0

    def apply_movement(self, actions: Iterable[MovementAction], delta: float) -> list[str]:
        """Apply this frame's movement actions; returns the sounds to play."""
        actions = list(actions)
        if not actions and isinstance(self.state, Run):
            self.state = Idle(False)
            self._change_sprite()

        jumps: list[bool] = []
        dashes = 0
        for action in actions:
            if action.kind == MovementAction.MOVE:
                if isinstance(self.state, Dash):
                    continue
                direction = action.direction
                self.face_direction = direction
                desired_speed = direction.x * MOVEMENT_SPEED - self.velocity.x
                self.velocity = Vec2(
                    self.velocity.x + desired_speed * ACCELERATION_FACTOR * delta,
                    self.velocity.y,
                )
                if isinstance(self.state, Idle):
                    self.state = Run()
                    self._change_sprite()
            elif action.kind == MovementAction.JUMP_START:
                jumps.append(True)
            elif action.kind == MovementAction.JUMP_END:
                jumps.append(False)
            elif action.kind == MovementAction.DASH:
                dashes += 1

        for is_start in jumps:
            self.handle_jump(is_start)
        sounds = []
        for _ in range(dashes):
            sound = self.handle_dash(True, self.rng)
            if sound is not None:
                sounds.append(sound)
        return sounds

    def handle_jump(self, is_start: bool) -> None:
        """Start a jump when on the ground or in coyote time, or cut a rising jump short."""
        if is_start:
            if isinstance(self.state, Dash):
                return
            if self.grounded or self.coyote is not None:
                self.grounded = False
                self.coyote = None
                self.state = Jump()
                self._change_sprite()
                self.velocity = Vec2(self.velocity.x, self.velocity.y + JUMP_IMPULSE)
                self.gravity_scale = JUMP_GRAVITY_SCALE
        elif not self.grounded and self.velocity.y > 0.0:
            self.gravity_scale = CHARACTER_GRAVITY_SCALE
            self.velocity = Vec2(self.velocity.x, self.velocity.y * JUMP_END_VELOCITY_FACTOR)

    def handle_dash(self, is_start: bool, rng: Optional[random.Random] = None) -> Optional[str]:
        """Start or finish a dash; returns the dash sound when one starts."""
        if not is_start:
            self.flying = False
            self.gravity_scale = CHARACTER_GRAVITY_SCALE
            self.velocity = Vec2(self.velocity.x * DASH_END_VELOCITY_FACTOR, self.velocity.y)
            self.state = Jump()
            self._change_sprite()
            self.dash_cooldown = Timer.from_seconds(DASH_COOLDOWN_DURATION)
            return None

        if isinstance(self.state, Dash):
            return None
        if self.dashing_used or self.dash_cooldown is not None:
            return None
        sound = (rng or self.rng).choice(DASH_SOUNDS)
        self.flying = True
        self.velocity = Vec2(self.face_direction.x * MOVEMENT_SPEED * DASH_SPEED_MODIFIER, 0.0)
        self.gravity_scale = 0.0
        self.dashing_used = True
        self.state = Dash(DASH_DURATION)
        self._change_sprite()
        return sound

    def tick(self, delta: float) -> None:
        """Advance timers: coyote time, jump and dash durations, cooldowns and facing."""
        if self.grounded and self.coyote is None:
            self.coyote = Timer.from_seconds(COYOTE_DURATION_SECONDS)
        if not self.grounded and self.coyote is not None:
            self.coyote.tick(delta)
            if self.coyote.finished:
                self.coyote = None

        if isinstance(self.state, Jump):
            timer = self.state.timer
            timer.tick(delta)
            if timer.just_finished:
                self.handle_jump(False)
            if self.grounded:
                self.state = Idle(False)
                self._change_sprite()

        if isinstance(self.state, Dash):
            self.state.remaining -= delta
            remaining = self.state.remaining
            if remaining <= 0.0 and remaining + delta > 0.0:
                self.handle_dash(False)
        if self.grounded:
            self.dashing_used = False

        if self.dash_cooldown is not None:
            self.dash_cooldown.tick(delta)
            if self.dash_cooldown.finished:
                self.dash_cooldown = None

        if self.grounded:
            self.gravity_scale = CHARACTER_GRAVITY_SCALE

        self.scale_x = self.face_direction.x * abs(self.scale_x)

    def set_grounded(self, grounded: bool) -> None:
        self.grounded = grounded

    def fall_recovery(self) -> bool:
        """Put the player back above the arena after falling off; returns whether it did."""
        if self.position.y >= FALL_LIMIT_Y:
            return False
        self.velocity = Vec2(self.velocity.x, 0.0)
        self.gravity_scale = RECOVERY_GRAVITY_SCALE
        self.position = Vec3(0.0, RECOVERY_HEIGHT, self.position.z)
        return True

    def advance_animation(
        self, fast_tick: bool, slow_tick: bool, rng: Optional[random.Random] = None
    ) -> Optional[str]:
        """Step the sprite animation; returns a footstep sound when one should play."""
        if self.sprite.atlas is None:
            return None
        if not fast_tick and not slow_tick:
            return None

        state = self.state
        if isinstance(state, Idle):
            if slow_tick:
                state.reverse, self.atlas_index = reversible_step(
                    state.reverse, self.atlas_index, IDLE_FRAME_NUM
                )
        elif isinstance(state, Run):
            self.atlas_index = (self.atlas_index + 1) % RUN_FRAME_NUM
            if self.atlas_index == 4 or (self.atlas_index == 19 and self.grounded):
                return (rng or self.rng).choice(FOOTSTEP_SOUNDS)
        elif isinstance(state, Jump):
            if slow_tick:
                self.atlas_index = (self.atlas_index + 1) % JUMP_FRAME_NUM
        return None