"""Six-component pose vector with element-wise arithmetic."""

from __future__ import annotations

from dataclasses import astuple, dataclass, fields
from numbers import Real


@dataclass
class Vector6d:
    """Position and attitude; operators act element-wise.

    Division by a zero scalar, or by a vector with any zero component,
    leaves the vector unchanged.
    """

    x: float = 0.0
    y: float = 0.0
    z: float = 0.0
    yaw: float = 0.0
    pitch: float = 0.0
    roll: float = 0.0

    def _combine(self, other, op):
        if isinstance(other, Vector6d):
            return Vector6d(*(op(a, b) for a, b in zip(astuple(self), astuple(other))))
        if isinstance(other, Real) and not isinstance(other, bool):
            return Vector6d(*(op(a, other) for a in astuple(self)))
        return NotImplemented

    def __add__(self, other):
        return self._combine(other, lambda a, b: a + b)

    def __sub__(self, other):
        return self._combine(other, lambda a, b: a - b)

    def __mul__(self, other):
        return self._combine(other, lambda a, b: a * b)

    def __truediv__(self, other):
        if isinstance(other, Vector6d):
            if any(getattr(other, f.name) == 0 for f in fields(other)):
                return Vector6d(*astuple(self))
        elif isinstance(other, Real) and not isinstance(other, bool):
            if other == 0:
                return Vector6d(*astuple(self))
        return self._combine(other, lambda a, b: a / b)