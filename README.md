# rmaim

Small, dependency-free building blocks for the aiming side of a robot
competition vision stack: fixed-size sliding windows with running statistics,
a six-component pose vector, a ternary search, a name-to-key hash, and the
angle bookkeeping needed to follow targets that spin and carry several
identical plates (a spinning robot, the three-plate outpost, the five-blade
power rune).

## Installation

```
pip install .
```

For running the tests:

```
pip install ".[test]"
pytest
```

## Modules

### `rmaim.windows`

Fixed-size windows; once full, each push drops the oldest sample. A size
below 1 raises `ValueError`.

- `CycleQueue(size=5)`: `push`, `front()` (oldest value; `IndexError` when
  empty), `avg()`, `total()`, `values()`, `clear()`, `len()`.
- `SlideStd(size=20)`: `push`, `avg()`, `var()` (population variance),
  `std()`, `clear()`, `len()`.
- `SlideAvg(size=20)`: `push`, `avg()`, `clear()`, `len()`.
- `SlideWeightedAvg(size=20)`: `push(value, weight)`, `avg()`, `clear()`,
  `len()`. If the weights in the window sum to zero, `avg()` is NaN or a
  signed infinity.
- `SpeedQueue(length=3, init=0.0, weights=None)`: keeps `length` values,
  ignoring a push equal to the newest one; `average()` is their weighted mean,
  `back()` the newest value, `clear()` refills with `init`. `weights` lists the
  newest value's weight first and is normalised; a wrong count or a zero sum
  raises `ValueError`.

### `rmaim.vector6d`

`Vector6d(x, y, z, yaw, pitch, roll)`, a dataclass whose `+`, `-`, `*`, `/`
work element-wise with another `Vector6d` or a number. Dividing by zero, or by
a vector with any zero component, returns an unchanged copy.

### `rmaim.ternary`

`ternary_search(left, right, func, epsilon)` returns the midpoint of the
interval, narrowed to at most `epsilon` wide, around the minimum of a unimodal
`func`. A non-positive `epsilon` raises `ValueError`.

### `rmaim.sharedkey`

`gen_hash_key(name)` hashes a name (djb2 over its UTF-8 bytes) to a signed
32-bit integer, suitable as a System V IPC key. It only computes the key.

### `rmaim.antitop`

For a target with `armor_num` evenly spaced plates:
`angle_trans`, `angle_trans_ref`, `angle_min`, `toggle` and
`fire_angle_valid`. Angles are shifted by whole plate steps without wrapping.

### `rmaim.antitop_wrapped`

The same operations with differences wrapped into [-pi, pi]: `safe_sub`,
`wrapped_angle_trans`, `wrapped_angle_trans_ref`, `is_angle_trans`,
`wrapped_angle_min`, `wrapped_toggle`, `wrapped_fire_valid`, plus
`weight_by_theta`, a weight that peaks when a plate faces straight on.

### `rmaim.outpost`

Three-plate versions: `outpost_angle_trans`, `outpost_angle_min`,
`outpost_toggle` (plate index 0 to 2), `outpost_is_angle_trans` and
`outpost_fire_valid`, which also requires the spin to be at least half its
nominal speed.

### `rmaim.rune`

Five-blade versions: `rune_angle_trans`, `is_rune_trans`, and
`big_rune_angle`, which integrates the large-mode speed
`a * sin(p + w * t) + b` over `dt`. `RuneFireScheduler(after_trans_delay,
interval_delay, keep_delay, clock=time.monotonic)` produces the fire flag for
the small rune: `mark_trans(t)` records a blade change, `fire_flag(is_big_rune)`
returns the flag for the current moment.

## Example

```python
from rmaim.windows import SlideStd
from rmaim.ternary import ternary_search

window = SlideStd(5)
for value in (1.0, 2.0, 3.0):
    window.push(value)
print(window.avg(), window.std())

x = ternary_search(-10.0, 10.0, lambda v: (v - 2.0) ** 2, 1e-6)
print(round(x, 4))
```

## What this package does not do

It holds no Kalman filters or full trackers: the angle functions are the
helpers such trackers use, and the caller keeps the state. It does not read
cameras, detect plates, choose which target to aim at, define plate or
controller enumerations or frame records, or allocate shared memory. There is
no command-line program.