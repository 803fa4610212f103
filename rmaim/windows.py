"""Sliding-window statistics over recent samples."""

from __future__ import annotations

import math
from collections import deque
from collections.abc import Sequence


def _check_size(size: int) -> int:
    if size < 1:
        raise ValueError(f"window size must be at least 1, got {size}")
    return size


class CycleQueue:
    """Fixed-size window keeping a running sum and mean."""

    def __init__(self, size: int = 5) -> None:
        self._values: deque[float] = deque()
        self._size = _check_size(size)
        self._sum = 0.0
        self._avg = 0.0

    def push(self, value: float) -> None:
        if len(self._values) >= self._size:
            self._sum -= self._values.popleft()
        self._values.append(value)
        self._sum += value
        self._avg = self._sum / len(self._values)

    def front(self) -> float:
        """The oldest value in the window, without removing it."""
        if not self._values:
            raise IndexError("front of an empty queue")
        return self._values[0]

    def avg(self) -> float:
        return self._avg

    def total(self) -> float:
        return self._sum

    def values(self) -> list[float]:
        return list(self._values)

    def clear(self) -> None:
        self._values.clear()
        self._sum = 0.0

    def __len__(self) -> int:
        return len(self._values)


class SlideStd:
    """Fixed-size window reporting mean, population variance and deviation."""

    def __init__(self, size: int = 20) -> None:
        self._values: deque[float] = deque()
        self._size = _check_size(size)
        self._sum = 0.0
        self._avg = 0.0
        self._var = 0.0
        self._std = 0.0

    def push(self, value: float) -> None:
        if len(self._values) >= self._size:
            self._sum -= self._values.popleft()
        self._values.append(value)
        self._sum += value
        average = self._sum / len(self._values)
        self._avg = average
        self._var = sum((v - average) ** 2 for v in self._values) / len(self._values)
        self._std = math.sqrt(self._var)

    def std(self) -> float:
        return self._std

    def var(self) -> float:
        return self._var

    def avg(self) -> float:
        return self._avg

    def clear(self) -> None:
        self._values.clear()
        self._sum = 0.0
        self._avg = 0.0

    def __len__(self) -> int:
        return len(self._values)


class SlideAvg:
    """Fixed-size window reporting the mean."""

    def __init__(self, size: int = 20) -> None:
        self._values: deque[float] = deque()
        self._size = _check_size(size)
        self._sum = 0.0
        self._avg = 0.0

    def push(self, value: float) -> None:
        if len(self._values) >= self._size:
            self._sum -= self._values.popleft()
        self._values.append(value)
        self._sum += value
        self._avg = self._sum / len(self._values)

    def avg(self) -> float:
        return self._avg

    def clear(self) -> None:
        self._values.clear()
        self._sum = 0.0
        self._avg = 0.0

    def __len__(self) -> int:
        return len(self._values)


class SlideWeightedAvg:
    """Fixed-size window reporting the weighted mean.

    When the weights in the window sum to zero the mean follows IEEE
    division: NaN for a zero weighted sum, otherwise a signed infinity.
    """

    def __init__(self, size: int = 20) -> None:
        self._items: deque[tuple[float, float]] = deque()
        self._size = _check_size(size)
        self._sum = 0.0
        self._weight_sum = 0.0
        self._avg = 0.0

    def push(self, value: float, weight: float) -> None:
        if len(self._items) >= self._size:
            old_value, old_weight = self._items.popleft()
            self._sum -= old_value * old_weight
            self._weight_sum -= old_weight
        self._items.append((value, weight))
        self._sum += value * weight
        self._weight_sum += weight
        if self._weight_sum == 0:
            self._avg = math.nan if self._sum == 0 else math.copysign(math.inf, self._sum)
        else:
            self._avg = self._sum / self._weight_sum

    def avg(self) -> float:
        return self._avg

    def clear(self) -> None:
        self._items.clear()
        self._sum = 0.0
        self._weight_sum = 0.0
        self._avg = 0.0

    def __len__(self) -> int:
        return len(self._items)


class SpeedQueue:
    """Fixed-length queue of distinct consecutive values with a weighted mean.

    ``weights`` lists the weight of the newest value first; they are
    normalised to sum to one. Without weights every slot counts equally.
    """

    def __init__(
        self,
        length: int = 3,
        init: float = 0.0,
        weights: Sequence[float] | None = None,
    ) -> None:
        self._length = _check_size(length)
        self._init = init
        self._deque: deque[float] = deque([init] * length, maxlen=length)
        if weights is None:
            self._percent = [1.0 / length] * length
        else:
            if len(weights) != length:
                raise ValueError(
                    f"expected {length} weights, got {len(weights)}"
                )
            total = sum(weights)
            if total == 0:
                raise ValueError("weights must not sum to zero")
            self._percent = [w / total for w in reversed(weights)]

    def push(self, value: float) -> None:
        """Append ``value`` unless it equals the newest value."""
        if self._deque[-1] == value:
            return
        self._deque.append(value)

    def average(self) -> float:
        return sum(v * p for v, p in zip(self._deque, self._percent))

    def back(self) -> float:
        return self._deque[-1]

    def clear(self) -> None:
        self._deque = deque([self._init] * self._length, maxlen=self._length)