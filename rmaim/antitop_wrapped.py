"""Plate-angle bookkeeping with every difference wrapped into [-pi, pi].

These variants compare angles through their wrapped difference. They also
keep the matched angle on the same side of zero as the observed one, so a
target seen across the +/-pi seam is tracked without a jump.
"""

from __future__ import annotations

import math
from collections.abc import Sequence

_TWO_PI = 2 * math.pi


def _steps(armor_num: int, *angles: float) -> tuple[float, float]:
    if armor_num < 1:
        raise ValueError(f"armor_num must be at least 1, got {armor_num}")
    if not all(math.isfinite(a) for a in angles):
        raise ValueError("angles must be finite")
    return math.pi / armor_num, _TWO_PI / armor_num


def safe_sub(angle1: float, angle2: float) -> float:
    """``angle1 - angle2`` wrapped into [-pi, pi]."""
    if not (math.isfinite(angle1) and math.isfinite(angle2)):
        raise ValueError("angles must be finite")
    angle = angle1 - angle2
    while angle > math.pi:
        angle -= _TWO_PI
    while angle < -math.pi:
        angle += _TWO_PI
    return angle


def _settle(dst: float, target_angle: float) -> float:
    """Wrap ``dst`` into [-pi, pi], then move it to the side of zero that
    ``target_angle`` is on when it lies beyond a quarter turn."""
    while dst > math.pi:
        dst -= _TWO_PI
    while dst < -math.pi:
        dst += _TWO_PI
    if dst * target_angle >= 0:
        return dst
    if dst > math.pi / 2:
        dst -= _TWO_PI
    elif dst < -math.pi / 2:
        dst += _TWO_PI
    return dst


def wrapped_angle_trans(target_angle: float, src_angle: float, armor_num: int) -> float:
    """Shift ``src_angle`` by whole plate steps to lie within half a step of
    ``target_angle``, measured around the circle."""
    half, step = _steps(armor_num, target_angle, src_angle)
    dst = src_angle
    while safe_sub(dst, target_angle) > half:
        dst -= step
    while safe_sub(target_angle, dst) > half:
        dst += step
    return _settle(dst, target_angle)


def wrapped_angle_trans_ref(
    target_angle: float, src_angle: float, refer_angle: float, armor_num: int
) -> float:
    """Shift ``src_angle`` by the plate steps that bring ``refer_angle``
    within half a step of ``target_angle``, measured around the circle."""
    half, step = _steps(armor_num, target_angle, src_angle, refer_angle)
    dst = src_angle
    while safe_sub(refer_angle, target_angle) > half:
        refer_angle -= step
        dst -= step
    while safe_sub(target_angle, refer_angle) > half:
        refer_angle += step
        dst += step
    return _settle(dst, target_angle)


def is_angle_trans(target_angle: float, src_angle: float, armor_num: int) -> bool:
    """Whether the two angles are more than half a plate step apart, i.e.
    the observation has moved to another plate."""
    half, _ = _steps(armor_num, target_angle, src_angle)
    return abs(safe_sub(target_angle, src_angle)) > half


def wrapped_angle_min(armor_angle: float, x: float, y: float, armor_num: int) -> float:
    """The plate angle closest to the bearing of the centre ``(x, y)``."""
    return wrapped_angle_trans(math.atan2(y, x), armor_angle, armor_num)


def wrapped_toggle(
    target_angle: float, src_angle: float, armor_num: int, current: int
) -> int:
    """Which of the two alternating plate pairs ``target_angle`` belongs to.

    Targets with fewer than four plates have a single pair and give 0.
    Otherwise an odd number of quarter turns in the wrapped difference
    flips ``current``.
    """
    if armor_num < 1:
        raise ValueError(f"armor_num must be at least 1, got {armor_num}")
    if armor_num < 4:
        return 0
    differ = abs(safe_sub(target_angle, src_angle))
    quarters = math.floor(2 * differ / math.pi + 0.5)
    return (quarters % 2) ^ current


def weight_by_theta(theta: float) -> float:
    """Weight of an observation seen at plate angle ``theta``; highest when
    the plate faces straight on."""
    return math.exp(-(theta**2) * 400)


def wrapped_fire_valid(
    pose: Sequence[float], max_angle: float, update_num: int, min_update: int
) -> bool:
    """Whether the plate at ``pose`` faces the shooter within ``max_angle``
    after more than ``min_update`` updates."""
    angle = safe_sub(math.atan2(pose[1], pose[0]), pose[3])
    return abs(angle) < max_angle and update_num > min_update