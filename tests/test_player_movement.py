import math
import random

import pytest

from gridcast.player import TAU, Intent, PlayerPose, wrap_angle


def test_turn_left_increases_rotation():
    player = PlayerPose(rotation=0.0, speed=0.0, turn_speed=math.pi)
    player.update({Intent.TURN_LEFT}, dt=0.5)
    assert player.rotation == pytest.approx(math.pi / 2)


def test_turn_right_wraps_below_zero():
    player = PlayerPose(rotation=0.0, speed=0.0, turn_speed=math.pi)
    player.update({Intent.TURN_RIGHT}, dt=0.5)
    assert player.rotation == pytest.approx(3 * math.pi / 2)


def test_opposite_turns_cancel():
    player = PlayerPose(rotation=1.0, speed=0.0, turn_speed=math.pi)
    player.update({Intent.TURN_LEFT, Intent.TURN_RIGHT}, dt=0.3)
    assert player.rotation == pytest.approx(1.0)


def test_rotation_stays_in_range_for_random_turns():
    rng = random.Random(1234)
    player = PlayerPose(turn_speed=math.pi)
    choices = [
        set(),
        {Intent.TURN_LEFT},
        {Intent.TURN_RIGHT},
        {Intent.TURN_LEFT, Intent.TURN_RIGHT},
    ]
    for _ in range(2000):
        player.update(rng.choice(choices), dt=rng.uniform(0.0, 5.0))
        assert 0.0 <= player.rotation < TAU


@pytest.mark.parametrize(
    "angle", [-1e-20, -TAU, TAU, 3 * TAU + 0.5, -0.5, 1e9]
)
def test_wrap_angle_range(angle):
    wrapped = wrap_angle(angle)
    assert 0.0 <= wrapped < TAU


def test_constructor_normalizes_rotation():
    assert PlayerPose(rotation=-math.pi / 2).rotation == pytest.approx(3 * math.pi / 2)


@pytest.mark.parametrize(
    "intents,angle,expected",
    [
        ({Intent.MOVE_FORWARD}, 0.0, (1.0, 0.0)),
        ({Intent.MOVE_BACKWARD}, 0.0, (-1.0, 0.0)),
        ({Intent.STRAFE_LEFT}, 0.0, (0.0, 1.0)),
        ({Intent.STRAFE_RIGHT}, 0.0, (0.0, -1.0)),
        ({Intent.MOVE_FORWARD}, math.pi / 2, (0.0, 1.0)),
        ({Intent.STRAFE_LEFT}, math.pi / 2, (-1.0, 0.0)),
    ],
)
def test_single_intent_moves_one_unit(intents, angle, expected):
    player = PlayerPose(rotation=angle, speed=1.0, turn_speed=0.0)
    player.update(intents, dt=1.0)
    assert player.x == pytest.approx(expected[0], abs=1e-9)
    assert player.y == pytest.approx(expected[1], abs=1e-9)


def test_diagonal_movement_is_normalized():
    player = PlayerPose(speed=2.0, turn_speed=0.0)
    player.update({Intent.MOVE_FORWARD, Intent.STRAFE_LEFT}, dt=1.0)
    assert math.hypot(player.x, player.y) == pytest.approx(2.0)
    assert player.x == pytest.approx(player.y)


def test_movement_uses_rotation_after_turning():
    player = PlayerPose(speed=1.0, turn_speed=math.pi / 2)
    player.update({Intent.TURN_LEFT, Intent.MOVE_FORWARD}, dt=1.0)
    assert player.rotation == pytest.approx(math.pi / 2)
    assert player.x == pytest.approx(0.0, abs=1e-9)
    assert player.y == pytest.approx(1.0)


@pytest.mark.parametrize(
    "intents",
    [
        set(),
        {Intent.MOVE_FORWARD, Intent.MOVE_BACKWARD},
        {Intent.STRAFE_LEFT, Intent.STRAFE_RIGHT},
        {
            Intent.MOVE_FORWARD,
            Intent.MOVE_BACKWARD,
            Intent.STRAFE_LEFT,
            Intent.STRAFE_RIGHT,
        },
    ],
)
@pytest.mark.parametrize("dt", [0.0, 0.016, 10.0])
def test_no_movement_without_net_intent(intents, dt):
    player = PlayerPose(x=1.25, y=-2.5, rotation=0.7, speed=3.0)
    player.update(intents, dt)
    assert player.position == (1.25, -2.5)


def test_negative_frame_time_is_rejected():
    with pytest.raises(ValueError):
        PlayerPose().update({Intent.MOVE_FORWARD}, dt=-0.1)


def test_non_finite_start_is_rejected():
    with pytest.raises(ValueError):
        PlayerPose(x=float("nan"))
    with pytest.raises(ValueError):
        PlayerPose(rotation=float("inf"))


def test_facing_matches_rotation():
    player = PlayerPose(rotation=math.pi)
    fx, fy = player.facing()
    assert fx == pytest.approx(-1.0)
    assert fy == pytest.approx(0.0, abs=1e-12)
