"""A rotary control knob: value range, wrapping, mouse and wheel handling."""

from __future__ import annotations

import math
from typing import Callable, List, Optional, Tuple

ValueCallback = Callable[[float], None]

_START_ANGLE = -135.0  # degrees
_END_ANGLE = 135.0
_MIN_WIDTH = 100
_MIN_HEIGHT = 120


def _fuzzy_equal(a: float, b: float) -> bool:
    return abs(a - b) * 1e12 <= min(abs(a), abs(b))


def _half(a: int, b: int) -> int:
    """Integer midpoint truncated toward zero."""
    return int((a + b) / 2)


class Knob:
    """A rotary knob sweeping 270 degrees from lower left to lower right."""

    def __init__(self, label: str = "") -> None:
        self.label = label
        self.wrapping = True
        self._value = 0.0
        self._minimum = 0.0
        self._maximum = 100.0
        self._width = _MIN_WIDTH
        self._height = _MIN_HEIGHT
        self._dragging = False
        self._hovered = False
        self._drag_start_pos: Tuple[float, float] = (0.0, 0.0)
        self._drag_start_value = 0.0
        self._listeners: List[ValueCallback] = []

    @property
    def value(self) -> float:
        return self._value

    @property
    def minimum(self) -> float:
        return self._minimum

    @property
    def maximum(self) -> float:
        return self._maximum

    @property
    def width(self) -> int:
        return self._width

    @property
    def height(self) -> int:
        return self._height

    @property
    def is_dragging(self) -> bool:
        return self._dragging

    @property
    def is_hovered(self) -> bool:
        return self._hovered

    def connect(self, callback: ValueCallback) -> None:
        """Call ``callback`` with the new value whenever the value changes."""
        self._listeners.append(callback)

    def set_range(self, minimum: float, maximum: float) -> None:
        """Set the value range; an empty or inverted range is ignored."""
        if minimum >= maximum:
            return
        self._minimum = minimum
        self._maximum = maximum
        self._value = min(max(self._value, minimum), maximum)

    def set_minimum(self, minimum: float) -> None:
        self.set_range(minimum, self._maximum)

    def set_maximum(self, maximum: float) -> None:
        self.set_range(self._minimum, maximum)

    def set_value(self, value: float) -> None:
        """Set the value, clamped to the range, notifying on change."""
        new_value = min(max(value, self._minimum), self._maximum)
        if _fuzzy_equal(new_value, self._value):
            return
        self._value = new_value
        for callback in list(self._listeners):
            callback(new_value)

    def resize(self, width: int, height: int) -> None:
        """Resize the control, never below its minimum size."""
        self._width = max(width, _MIN_WIDTH)
        self._height = max(height, _MIN_HEIGHT)

    def press(self, x: float, y: float, left: bool = True) -> bool:
        """Start a drag with the left button; return whether it was accepted."""
        if not left:
            return False
        self._dragging = True
        self._drag_start_pos = (x, y)
        self._drag_start_value = self._value
        return True

    def move(self, x: float, y: float) -> bool:
        """Turn the knob by the angle swept around its centre since the press."""
        if not self._dragging:
            return False
        cx = self._width / 2.0
        cy = self._height / 2.0 - 10
        sx, sy = self._drag_start_pos
        start_angle = math.atan2(sy - cy, sx - cx)
        current_angle = math.atan2(y - cy, x - cx)
        delta_angle = current_angle - start_angle
        angle_range = math.radians(_END_ANGLE - _START_ANGLE)
        value_range = self._maximum - self._minimum
        delta_value = delta_angle / angle_range * value_range
        self._update_value(self._drag_start_value + delta_value)
        return True

    def release(self, left: bool = True) -> bool:
        """End a drag; return whether the release was accepted."""
        if left and self._dragging:
            self._dragging = False
            return True
        return False

    def wheel(self, angle_delta: float) -> bool:
        """Step the value by one hundredth of the range per wheel notch."""
        step = (self._maximum - self._minimum) / 100.0
        self._update_value(self._value + angle_delta / 120.0 * step)
        return True

    def enter(self) -> None:
        self._hovered = True

    def leave(self) -> None:
        self._hovered = False

    def value_to_angle(self, value: float) -> float:
        """Return the pointer angle in degrees, 0 pointing straight up."""
        normalized = (value - self._minimum) / (self._maximum - self._minimum)
        return _START_ANGLE + normalized * (_END_ANGLE - _START_ANGLE)

    def angle_to_value(self, angle: float) -> float:
        """Return the value shown by a pointer at ``angle`` degrees."""
        normalized = (angle - _START_ANGLE) / (_END_ANGLE - _START_ANGLE)
        return self._minimum + normalized * (self._maximum - self._minimum)

    def normalize_value(self, value: float) -> float:
        """Wrap the value into the range, or clamp it when not wrapping."""
        if not self.wrapping:
            return min(max(value, self._minimum), self._maximum)
        span = self._maximum - self._minimum
        if value < self._minimum:
            value += math.ceil((self._minimum - value) / span) * span
        if value > self._maximum:
            value -= math.ceil((value - self._maximum) / span) * span
        return value

    def _update_value(self, value: float) -> None:
        self.set_value(self.normalize_value(value))

    def knob_rect(self) -> Tuple[int, int, int, int]:
        """Return the knob face as ``(left, top, width, height)``."""
        size = min(self._width, self._height - 20)
        return ((self._width - size) // 2, 5, size, size)

    def _knob_center(self) -> Tuple[int, int]:
        left, top, w, h = self.knob_rect()
        return _half(left, left + w - 1), _half(top, top + h - 1)

    def pointer_tip(self) -> Tuple[int, int]:
        """Return the pixel position of the pointer's tip for the current value."""
        rad = math.radians(self.value_to_angle(self._value) - 90)
        cx, cy = self._knob_center()
        radius = int(self.knob_rect()[2] / 2) - 15
        return int(cx + radius * math.cos(rad)), int(cy + radius * math.sin(rad))

    def value_text(self) -> str:
        """Return the value as shown under the knob."""
        return f"{self._value:.1f}"

    def size_hint(self) -> Tuple[int, int]:
        return (100, 120)

    def minimum_size_hint(self) -> Tuple[int, int]:
        return (80, 100)

    def __repr__(self) -> str:
        label: Optional[str] = self.label or None
        return (
            f"Knob(label={label!r}, value={self._value}, "
            f"range=({self._minimum}, {self._maximum}))"
        )