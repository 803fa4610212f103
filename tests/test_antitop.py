import math

import pytest
from hypothesis import given
from hypothesis import strategies as st

from rmaim.antitop import (
    angle_min,
    angle_trans,
    angle_trans_ref,
    fire_angle_valid,
    toggle,
)

angles = st.floats(min_value=-20.0, max_value=20.0, allow_nan=False)
plates = st.sampled_from([2, 3, 4])


def _whole_steps(diff: float, armor_num: int) -> bool:
    steps = diff / (2 * math.pi / armor_num)
    return abs(steps - round(steps)) < 1e-6


@given(angles, angles, plates)
def test_angle_trans_lands_near_target(target, src, n):
    result = angle_trans(target, src, n)
    half = math.pi / n
    assert result - target <= half + 1e-9
    assert target - result <= half + 1e-9
    assert _whole_steps(result - src, n)


def test_angle_trans_keeps_close_angle():
    assert angle_trans(0.1, 0.2, 4) == 0.2


def test_angle_trans_shifts_one_step():
    result = angle_trans(0.0, math.pi / 2, 4)
    assert result == pytest.approx(0.0)


@given(angles, angles, angles, plates)
def test_angle_trans_ref_moves_by_whole_steps(target, src, refer, n):
    result = angle_trans_ref(target, src, refer, n)
    assert _whole_steps(result - src, n)
    shifted_refer = refer + (result - src)
    assert abs(shifted_refer - target) <= math.pi / n + 1e-6


def test_angle_trans_ref_unchanged_when_reference_close():
    assert angle_trans_ref(1.0, 5.0, 1.1, 4) == 5.0


def test_angle_min_uses_bearing():
    x, y = 1.0, 1.0
    result = angle_min(3.0, x, y, 4)
    assert abs(result - math.atan2(y, x)) <= math.pi / 4 + 1e-9
    assert result == angle_trans(math.atan2(y, x), 3.0, 4)


def test_invalid_armor_num_raises():
    with pytest.raises(ValueError):
        angle_trans(0.0, 0.0, 0)
    with pytest.raises(ValueError):
        toggle(0.0, 0.0, 0, 0)


def test_non_finite_angle_raises():
    with pytest.raises(ValueError):
        angle_trans(math.inf, 0.0, 4)


@given(angles, angles, st.sampled_from([0, 1]))
def test_toggle_single_pair_for_few_plates(target, src, current):
    assert toggle(target, src, 2, current) == 0
    assert toggle(target, src, 3, current) == 0


@pytest.mark.parametrize("current", [0, 1])
def test_toggle_same_angle_keeps_current(current):
    assert toggle(0.7, 0.7, 4, current) == current


@pytest.mark.parametrize("current", [0, 1])
def test_toggle_quarter_turn_flips(current):
    assert toggle(math.pi / 2, 0.0, 4, current) == 1 - current


@pytest.mark.parametrize("current", [0, 1])
def test_toggle_half_turn_keeps(current):
    assert toggle(math.pi, 0.0, 4, current) == current


def test_fire_valid_when_facing_and_updated():
    pose = (1.0, 1.0, 0.0, math.atan2(1.0, 1.0))
    assert fire_angle_valid(pose, 0.1, 10, 5) is True


def test_fire_invalid_without_enough_updates():
    pose = (1.0, 1.0, 0.0, math.atan2(1.0, 1.0))
    assert fire_angle_valid(pose, 0.1, 5, 5) is False


def test_fire_invalid_when_turned_away():
    pose = (1.0, 0.0, 0.0, 1.0)
    assert fire_angle_valid(pose, 0.1, 10, 5) is False


def test_fire_wraps_full_turn():
    pose = (1.0, 0.0, 0.0, 2 * math.pi)
    assert fire_angle_valid(pose, 0.1, 10, 5) is True