from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Iterator

import math
import numbers


NO_FIT = -1
MIN_LABEL_PIXEL_WIDTH = 1.0
SAMPLE_DIGIT = "8"


@dataclass(frozen=True)
class AxisRange:
    """Inclusive frame range shown by the axis."""

    start: int = 0
    end: int = 180

    @property
    def length(self) -> int:
        return self.end - self.start + 1

    @property
    def is_degenerate(self) -> bool:
        return self.length <= 0


@dataclass(frozen=True)
class TickMark:
    value: int
    x_center: float
    width: float

    @property
    def label(self) -> str:
        return str(self.value)

    @property
    def left(self) -> float:
        return self.x_center - self.width / 2.0

    @property
    def right(self) -> float:
        return self.x_center + self.width / 2.0


def coerce_frame(value: object, *, name: str = "frame") -> int:
    """Integral frame number; fractional or non-numeric input raises ValueError."""

    if isinstance(value, numbers.Integral) and not isinstance(value, bool):
        return int(value)
    if isinstance(value, float) and value.is_integer():
        return int(value)
    raise ValueError(f"`{name}` must be an integral frame number, got {value!r}")


def label_char_count(value: int) -> int:
    return len(str(int(value)))


def sample_label(axis_range: AxisRange, digit: str = SAMPLE_DIGIT) -> str:
    """Widest plausible label for the range, e.g. `888` for 0..180."""

    count = max(label_char_count(axis_range.start), label_char_count(axis_range.end))
    return digit * count


def select_major_tick(range_length: int, available_width: float, label_pixel_width: float) -> int:
    """Pick the smallest nice interval whose labels fit in `available_width`.

    Returns `NO_FIT` when not even one label fits. The interval never rounds
    down, so `range_length / capacity <= interval` holds for every result.
    """

    if range_length <= 0:
        return NO_FIT
    if not math.isfinite(available_width) or available_width <= 0:
        return NO_FIT
    if math.isnan(label_pixel_width) or math.isinf(label_pixel_width):
        return NO_FIT

    # Zero-width labels still reserve one pixel so capacity stays bounded.
    label_w = max(MIN_LABEL_PIXEL_WIDTH, float(label_pixel_width))
    capacity = available_width / label_w
    if capacity < 1:
        return NO_FIT

    raw = range_length / capacity
    if raw <= 1.0:
        return 1

    exponent = 0
    while raw >= 10.0:
        raw /= 10.0
        exponent += 1

    if raw <= 2.0:
        digit = 2
    elif raw <= 5.0:
        digit = 5
    else:
        digit = 1
        exponent += 1
    return digit * 10**exponent


def layout_ticks(
    major_tick: int,
    axis_range: AxisRange,
    surface_width: float,
    label_width_of: Callable[[int], float],
) -> Iterator[TickMark]:
    """Yield ticks whose labels sit strictly inside `(0, surface_width)`.

    The grid is anchored to multiples of `major_tick`, so the first candidate
    may lie before `axis_range.start`. `axis_range.end` itself is never labelled.
    """

    if major_tick < 1 or axis_range.is_degenerate or surface_width <= 0:
        return
    span = float(axis_range.length)
    tick = (axis_range.start // major_tick) * major_tick
    while tick < axis_range.end:
        x_center = (tick - axis_range.start) / span * surface_width
        mark = TickMark(value=tick, x_center=x_center, width=float(label_width_of(tick)))
        if mark.left > 0 and mark.right < surface_width:
            yield mark
        tick += major_tick
