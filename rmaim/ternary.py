"""Ternary search for the minimum of a unimodal function."""

from __future__ import annotations

from collections.abc import Callable


def ternary_search(
    left: float, right: float, func: Callable[[float], float], epsilon: float
) -> float:
    """Return the point in [left, right] where ``func`` is smallest.

    The interval is narrowed until it is no wider than ``epsilon``, and
    its midpoint is returned.
    """
    if epsilon <= 0:
        raise ValueError("epsilon must be positive")
    while right - left > epsilon:
        third = (right - left) / 3
        mid1 = left + third
        mid2 = right - third
        if func(mid1) < func(mid2):
            right = mid2
        else:
            left = mid1
    return (left + right) / 2