"""Angle bookkeeping and firing rhythm for the five-blade power rune.

The rune carries five evenly spaced blades, so it looks the same after a
turn of ``2 * pi / 5``. In its large mode the spin speed follows
``a * sin(w * t + p) + b`` with ``a + b`` held at a fixed base value.
"""

from __future__ import annotations

import math
import time
from collections.abc import Callable

from rmaim.antitop_wrapped import is_angle_trans, wrapped_angle_trans

BLADE_COUNT = 5


def rune_angle_trans(target_angle: float, src_angle: float) -> float:
    """Shift ``src_angle`` by whole blade steps to lie within half a step of
    ``target_angle``, wrapped into [-pi, pi] on the side of ``target_angle``."""
    return wrapped_angle_trans(target_angle, src_angle, BLADE_COUNT)


def is_rune_trans(angle1: float, angle2: float) -> bool:
    """Whether the two angles are more than half a blade step apart, i.e.
    the observation has moved to another blade."""
    return is_angle_trans(angle1, angle2, BLADE_COUNT)


def big_rune_angle(
    angle: float,
    p: float,
    a: float,
    w: float,
    sign: float,
    dt: float,
    a_min: float,
    a_max: float,
    w_min: float,
    w_max: float,
    b_base: float,
) -> float:
    """Blade angle after ``dt`` seconds of large-mode spin.

    ``a`` and ``w`` are clamped to their ranges, ``b`` is ``b_base - a``,
    and the speed ``a * sin(p + w * t) + b`` is integrated over ``dt`` in
    the direction given by the sign of ``sign``.
    """
    if a_min > a_max:
        raise ValueError("a_min must not exceed a_max")
    if w_min > w_max:
        raise ValueError("w_min must not exceed w_max")
    a = min(max(a, a_min), a_max)
    w = min(max(w, w_min), w_max)
    if w == 0:
        raise ValueError("angular frequency must not be zero")
    b = b_base - a
    return angle + sign * b * dt + sign * a / w * (math.cos(p) - math.cos(p + w * dt))


class RuneFireScheduler:
    """Decides when to raise the fire flag while hitting the small rune.

    After a blade change the flag stays low for ``after_trans_delay``
    seconds, then rises once; afterwards it rises again whenever
    ``interval_delay`` seconds have passed since the last rise, and each
    rise is held for ``keep_delay`` seconds. In large mode it never fires.
    """

    def __init__(
        self,
        after_trans_delay: float,
        interval_delay: float,
        keep_delay: float,
        clock: Callable[[], float] = time.monotonic,
    ) -> None:
        self._after_trans_delay = after_trans_delay
        self._interval_delay = interval_delay
        self._keep_delay = keep_delay
        self._clock = clock
        now = clock()
        self._t_trans = now
        self._t_fire = now
        self._is_trans = False
        self._is_fire = False

    def mark_trans(self, t: float) -> None:
        """Record that the target moved to another blade at time ``t``."""
        self._t_trans = t
        self._is_trans = True

    def fire_flag(self, is_big_rune: bool) -> bool:
        """The fire flag for the current moment."""
        now = self._clock()
        trans_delay = now - self._t_trans
        fire_delay = now - self._t_fire

        if is_big_rune or trans_delay < self._after_trans_delay:
            self._is_fire = False
        elif self._is_trans:
            self._t_fire = now
            self._is_trans = False
            self._is_fire = True
        elif fire_delay > self._interval_delay:
            self._t_fire = now
            self._is_fire = True
        elif fire_delay < self._keep_delay:
            if not self._is_fire:
                self._t_fire = now
            self._is_fire = True
        else:
            self._is_fire = False
        return self._is_fire