"""Angle bookkeeping for tracking a spinning target with several armor plates.

A target carrying ``armor_num`` evenly spaced plates looks the same after a
turn of ``2 * pi / armor_num``, so an observed plate angle can be matched to
a tracked angle by shifting whole plate steps.
"""

from __future__ import annotations

import math
from collections.abc import Sequence


def _check(armor_num: int, *angles: float) -> tuple[float, float]:
    if armor_num < 1:
        raise ValueError(f"armor_num must be at least 1, got {armor_num}")
    if not all(math.isfinite(a) for a in angles):
        raise ValueError("angles must be finite")
    return math.pi / armor_num, 2 * math.pi / armor_num


def angle_trans(target_angle: float, src_angle: float, armor_num: int) -> float:
    """Shift ``src_angle`` by whole plate steps to lie within half a step of
    ``target_angle``."""
    half, step = _check(armor_num, target_angle, src_angle)
    dst = src_angle
    while dst - target_angle > half:
        dst -= step
    while target_angle - dst > half:
        dst += step
    return dst


def angle_trans_ref(
    target_angle: float, src_angle: float, refer_angle: float, armor_num: int
) -> float:
    """Shift ``src_angle`` by the plate steps that bring ``refer_angle``
    within half a step of ``target_angle``."""
    half, step = _check(armor_num, target_angle, src_angle, refer_angle)
    dst = src_angle
    while refer_angle - target_angle > half:
        refer_angle -= step
        dst -= step
    while target_angle - refer_angle > half:
        refer_angle += step
        dst += step
    return dst


def angle_min(armor_angle: float, x: float, y: float, armor_num: int) -> float:
    """The plate angle closest to the bearing of the centre ``(x, y)``."""
    return angle_trans(math.atan2(y, x), armor_angle, armor_num)


def toggle(target_angle: float, src_angle: float, armor_num: int, current: int) -> int:
    """Which of the two alternating plate pairs ``target_angle`` belongs to.

    Targets with fewer than four plates have a single pair, so the result
    is always 0 for them. Otherwise an odd number of quarter turns between
    the angles flips ``current``.
    """
    if armor_num < 1:
        raise ValueError(f"armor_num must be at least 1, got {armor_num}")
    if armor_num < 4:
        return 0
    differ = abs(target_angle - src_angle)
    quarters = math.floor(2 * differ / math.pi + 0.5)
    return (quarters % 2) ^ current


def fire_angle_valid(
    pose: Sequence[float], max_angle: float, update_num: int, min_update: int
) -> bool:
    """Whether the plate at ``pose`` faces the shooter closely enough, after
    more than ``min_update`` updates, to fire."""
    angle = abs(math.atan2(pose[1], pose[0]) - pose[3])
    while angle > math.pi:
        angle -= 2 * math.pi
    while angle < -math.pi:
        angle += 2 * math.pi
    return abs(angle) < max_angle and update_num > min_update