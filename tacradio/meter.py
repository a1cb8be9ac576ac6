"""An analogue S-meter: needle damping, peak hold and scale geometry."""

from __future__ import annotations

import math
from typing import Callable, List, Tuple

ValueCallback = Callable[[float], None]
Point = Tuple[float, float]

_START_ANGLE = -60.0  # degrees from vertical
_END_ANGLE = 60.0
_DAMPING_FACTOR = 0.15
_PEAK_DECAY_RATE = 0.5  # dB per second
_PEAK_DECAY_INTERVAL = 0.1  # seconds between decay steps
_SETTLE_THRESHOLD = 0.1

# S-meter scale: S1..S9, then dB over S9.
_SCALE: Tuple[Tuple[str, float], ...] = (
    ("1", -90.0),
    ("3", -80.0),
    ("5", -70.0),
    ("7", -60.0),
    ("9", -50.0),
    ("+20", -30.0),
    ("+40", -10.0),
    ("+60", 0.0),
)


def _fuzzy_equal(a: float, b: float) -> bool:
    return abs(a - b) * 1e12 <= min(abs(a), abs(b))


class Meter:
    """A needle meter sweeping 120 degrees, with damped motion and peak hold.

    The needle and peak marker are advanced by calling :meth:`animate`
    (every 20 ms in the panel) and :meth:`decay_peak` (every 100 ms).
    """

    def __init__(self, label: str = "") -> None:
        self.label = label
        self._minimum = -100.0
        self._maximum = 0.0
        self._current = -100.0
        self._display = -100.0
        self._target = -100.0
        self._peak = -100.0
        self._peak_hold = True
        self._listeners: List[ValueCallback] = []

    @property
    def value(self) -> float:
        return self._current

    @property
    def minimum(self) -> float:
        return self._minimum

    @property
    def maximum(self) -> float:
        return self._maximum

    @property
    def display_value(self) -> float:
        """The value the needle currently shows."""
        return self._display

    @property
    def target_value(self) -> float:
        """The value the needle is moving towards."""
        return self._target

    @property
    def peak_value(self) -> float:
        return self._peak

    @property
    def peak_hold(self) -> bool:
        return self._peak_hold

    @property
    def shows_peak(self) -> bool:
        """Whether the peak marker is drawn."""
        return self._peak_hold and self._peak > self._minimum

    def connect(self, callback: ValueCallback) -> None:
        """Call ``callback`` with the new value whenever the value changes."""
        self._listeners.append(callback)

    def set_range(self, minimum: float, maximum: float) -> None:
        """Set the range and snap needle and peak to the clamped value.

        An empty or inverted range is ignored.
        """
        if minimum >= maximum:
            return
        self._minimum = minimum
        self._maximum = maximum
        self._current = min(max(self._current, minimum), maximum)
        self._target = self._current
        self._display = self._current
        self._peak = self._current

    def set_minimum(self, minimum: float) -> None:
        self.set_range(minimum, self._maximum)

    def set_maximum(self, maximum: float) -> None:
        self.set_range(self._minimum, maximum)

    def set_value(self, value: float) -> None:
        """Set the reading, clamped to the range, raising the peak if exceeded."""
        new_value = min(max(value, self._minimum), self._maximum)
        if _fuzzy_equal(new_value, self._current):
            return
        self._current = new_value
        self._target = new_value
        if new_value > self._peak:
            self._peak = new_value
        for callback in list(self._listeners):
            callback(new_value)

    def set_peak_hold(self, enable: bool) -> None:
        """Turn peak hold on or off; turning it off drops the peak to the value."""
        self._peak_hold = enable
        if not enable:
            self._peak = self._current

    def reset_peak(self) -> None:
        self._peak = self._current

    def animate(self) -> bool:
        """Move the needle one damped step; return whether it moved."""
        diff = self._target - self._display
        if abs(diff) <= _SETTLE_THRESHOLD:
            return False
        self._display += diff * _DAMPING_FACTOR
        return True

    def decay_peak(self) -> bool:
        """Let the held peak fall one step; return whether it changed."""
        if not self._peak_hold or self._peak <= self._current:
            return False
        self._peak -= _PEAK_DECAY_RATE * _PEAK_DECAY_INTERVAL
        if self._peak < self._current:
            self._peak = self._current
        return True

    def value_to_angle(self, value: float) -> float:
        """Return the needle angle in degrees from vertical for ``value``."""
        normalized = (value - self._minimum) / (self._maximum - self._minimum)
        return _START_ANGLE + normalized * (_END_ANGLE - _START_ANGLE)

    def rotate_point(self, point: Point, center: Point, angle: float) -> Point:
        """Rotate ``point`` about ``center`` by ``angle`` degrees."""
        rad = math.radians(angle)
        cos_a = math.cos(rad)
        sin_a = math.sin(rad)
        x = point[0] - center[0]
        y = point[1] - center[1]
        return (center[0] + x * cos_a - y * sin_a, center[1] + x * sin_a + y * cos_a)

    def scale_marks(self) -> List[Tuple[str, float, float]]:
        """Return the scale as ``(label, value, angle)`` triples, left to right."""
        return [(label, value, self.value_to_angle(value)) for label, value in _SCALE]

    def size_hint(self) -> Tuple[int, int]:
        return (300, 120)

    def minimum_size_hint(self) -> Tuple[int, int]:
        return (200, 80)

    def __repr__(self) -> str:
        return (
            f"Meter(label={self.label!r}, value={self._current}, "
            f"range=({self._minimum}, {self._maximum}))"
        )