"""Plate-angle bookkeeping for the three-plate spinning outpost.

The outpost carries three evenly spaced plates, so it looks the same after
a turn of ``2 * pi / 3``. Angles are compared through their difference
wrapped into [-pi, pi].
"""

from __future__ import annotations

import math
from collections.abc import Sequence

from rmaim.antitop_wrapped import safe_sub

PLATE_COUNT = 3
_HALF_STEP = math.pi / PLATE_COUNT
_STEP = 2 * math.pi / PLATE_COUNT
_TWO_PI = 2 * math.pi


def outpost_angle_trans(target_angle: float, src_angle: float) -> float:
    """Shift ``src_angle`` by whole plate steps to lie within half a step of
    ``target_angle``, measured around the circle.

    When the result ends up on the other side of zero from
    ``target_angle`` and beyond a quarter turn, it is moved by a full turn.
    """
    dst = src_angle
    while safe_sub(dst, target_angle) > _HALF_STEP:
        dst -= _STEP
    while safe_sub(target_angle, dst) > _HALF_STEP:
        dst += _STEP

    if dst * target_angle >= 0:
        return dst
    if dst > math.pi / 2:
        dst -= _TWO_PI
    elif dst < -math.pi / 2:
        dst += _TWO_PI
    return dst


def outpost_angle_min(armor_angle: float, x: float, y: float) -> float:
    """The plate angle closest to the bearing of the centre ``(x, y)``."""
    return outpost_angle_trans(math.atan2(y, x), armor_angle)


def outpost_toggle(target_angle: float, src_angle: float, current: int) -> int:
    """Index, 0 to 2, of the plate ``target_angle`` belongs to.

    ``current`` is advanced by the number of whole plate steps, rounded,
    between the two angles.
    """
    if not (math.isfinite(target_angle) and math.isfinite(src_angle)):
        raise ValueError("angles must be finite")
    differ = abs(target_angle - src_angle)
    steps = math.floor(differ / _STEP + 0.5)
    return (current + steps) % PLATE_COUNT


def outpost_is_angle_trans(target_angle: float, src_angle: float) -> bool:
    """Whether the two angles are more than half a plate step apart, i.e.
    the observation has moved to another plate."""
    return abs(safe_sub(target_angle, src_angle)) > _HALF_STEP


def outpost_fire_valid(
    pose: Sequence[float],
    omega: float,
    nominal_omega: float,
    max_angle: float,
    update_num: int,
    min_update: int,
) -> bool:
    """Whether to fire at the plate at ``pose``.

    The outpost must be spinning at least half its nominal speed, the plate
    must face the shooter within ``max_angle``, and more than
    ``min_update`` updates must have been seen.
    """
    angle = safe_sub(math.atan2(pose[1], pose[0]), pose[3])
    if abs(omega) < nominal_omega * 0.5:
        return False
    return abs(angle) < max_angle and update_num > min_update