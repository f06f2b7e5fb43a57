import math

import pytest

from chainaxe.attack import Attack, Attacking, AttackPosition, Cooling, Reacting, Ready
from chainaxe.core import Color, Timer, Vec2, Vec3
from chainaxe.weapon import (
    BASE_PART,
    EXTEND_PART,
    EXTEND_SIZE,
    HEAD_PART,
    OFFSET_FROM_BASE,
    WEAPON_FOLLOW_OFFSET,
    WEAPON_GLOW_BLUE_IMAGE,
    WEAPON_GLOW_PURPLE_IMAGE,
    WEAPON_GLOW_RED_IMAGE,
    WEAPON_SCALE_FACTOR,
    WeaponFollower,
    color_with_transparency,
    timer_to_transparency,
    weapon_part_offsets,
)


def test_part_offsets_at_default_scale():
    parts = weapon_part_offsets(1.0)
    assert parts[BASE_PART] == (0.0, 1.0)
    assert parts[EXTEND_PART] == (float(OFFSET_FROM_BASE), 1.0)
    assert parts[HEAD_PART][0] == pytest.approx(952.0)


def test_head_moves_by_extend_size_per_unit_scale():
    one = weapon_part_offsets(1.0)[HEAD_PART][0]
    three = weapon_part_offsets(3.0)[HEAD_PART][0]
    assert three - one == pytest.approx(2 * EXTEND_SIZE)
    assert weapon_part_offsets(3.0)[EXTEND_PART][1] == 3.0


def test_transparency_of_finished_timer():
    timer = Timer.from_seconds(2.0).tick(5.0)
    assert timer_to_transparency(timer, False) == 1.0
    assert timer_to_transparency(timer, True) == 0.0


@pytest.mark.parametrize("elapsed", [0.0, 0.3, 1.0, 1.9])
def test_transparency_reverse_is_complement(elapsed):
    timer = Timer.from_seconds(2.0).tick(elapsed)
    forward = timer_to_transparency(timer, False)
    assert forward + timer_to_transparency(timer, True) == pytest.approx(1.0)
    assert 0.0 <= forward <= 1.0


def test_transparency_grows_with_elapsed():
    early = timer_to_transparency(Timer.from_seconds(2.0).tick(0.2), False)
    late = timer_to_transparency(Timer.from_seconds(2.0).tick(0.8), False)
    assert early < late


def test_transparency_sub_second_timer_is_full():
    timer = Timer.from_seconds(0.5).tick(0.1)
    assert timer_to_transparency(timer, False) == 1.0


def test_color_with_transparency():
    assert color_with_transparency(0.25) == Color(1.0, 1.0, 1.0, 0.25)


@pytest.mark.parametrize("face", [Vec2.X, Vec2.NEG_X])
def test_follow_idle_reaches_target(face):
    follower = WeaponFollower()
    follower.glow.visible = True
    follower.rotation = 1.0
    follower.follow_idle(Vec3.ZERO, face, 100.0)
    target = WEAPON_FOLLOW_OFFSET * Vec3(-face.x, 1.0, 1.0)
    assert follower.translation.x == pytest.approx(target.x)
    assert follower.translation.y == pytest.approx(target.y)
    assert follower.rotation == 0.0
    assert follower.glow.visible is False


def test_follow_idle_flips_scale_by_side():
    follower = WeaponFollower(translation=Vec3(10.0, 0.0, 0.0))
    follower.follow_idle(Vec3.ZERO, Vec2.X, 0.0)
    assert follower.scale.x == pytest.approx(WEAPON_SCALE_FACTOR)
    follower = WeaponFollower(translation=Vec3(-10.0, 0.0, 0.0))
    follower.follow_idle(Vec3.ZERO, Vec2.X, 0.0)
    assert follower.scale.x == pytest.approx(-WEAPON_SCALE_FACTOR)


def test_follow_attack_reacting():
    attack = Attack()
    follower = WeaponFollower()
    events = follower.follow_attack(Vec3.ZERO, Vec2.X, attack, 100.0)
    assert events == []
    assert follower.glow.image == WEAPON_GLOW_RED_IMAGE
    assert follower.glow.visible is True
    assert follower.rotation == pytest.approx(-math.pi / 2)
    expected = attack.position.translate(Vec2.X)
    assert follower.translation.x == pytest.approx(expected.x)
    assert follower.scale.x == pytest.approx(
        attack.position.scale(Vec2.X).x * WEAPON_SCALE_FACTOR
    )


@pytest.mark.parametrize(
    "phase, image",
    [
        (Ready(Timer.from_seconds(2.0)), WEAPON_GLOW_PURPLE_IMAGE),
        (Cooling(Timer.from_seconds(2.0)), WEAPON_GLOW_BLUE_IMAGE),
    ],
)
def test_follow_attack_glow_images(phase, image):
    attack = Attack(phase=phase)
    follower = WeaponFollower()
    follower.follow_attack(Vec3.ZERO, Vec2.Y, attack, 0.1)
    assert follower.glow.image == image
    assert follower.glow.color.a == pytest.approx(1.0)


def _destination(attack, pos, direction):
    return pos + attack.position.next().translate(direction)


@pytest.mark.parametrize("in_delay", [True, False])
def test_swing_at_destination_emits_event(in_delay):
    pos = Vec3(5.0, 5.0, 0.0)
    attack = Attack(phase=Attacking(pos, Vec2.X, in_delay))
    follower = WeaponFollower(translation=_destination(attack, pos, Vec2.X))
    assert follower.follow_attack(Vec3.ZERO, Vec2.X, attack, 0.0) == [in_delay]


def test_swing_far_away_emits_nothing_and_moves_closer():
    pos = Vec3.ZERO
    attack = Attack(phase=Attacking(pos, Vec2.X, False), position=AttackPosition.UP)
    start = Vec3(1000.0, 1000.0, 0.0)
    follower = WeaponFollower(translation=start)
    assert follower.follow_attack(Vec3.ZERO, Vec2.X, attack, 0.01) == []
    dest = _destination(attack, pos, Vec2.X)
    assert (follower.translation - dest).length() < (start - dest).length()


def test_reacting_phase_is_used():
    attack = Attack(phase=Reacting(Timer.from_seconds(2.0).tick(1.0)))
    follower = WeaponFollower()
    follower.follow_attack(Vec3.ZERO, Vec2.X, attack, 0.0)
    assert follower.glow.color.a == pytest.approx(0.5)