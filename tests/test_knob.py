import math

import pytest

from tacradio.knob import Knob


@pytest.fixture
def knob():
    return Knob("VOLUME")


def test_defaults(knob):
    assert knob.label == "VOLUME"
    assert (knob.value, knob.minimum, knob.maximum) == (0.0, 0.0, 100.0)
    assert knob.wrapping is True
    assert knob.size_hint() == (100, 120)
    assert knob.minimum_size_hint() == (80, 100)


def test_set_value_clamps_and_notifies(knob):
    seen = []
    knob.connect(seen.append)
    knob.set_value(150)
    knob.set_value(-20)
    assert seen == [100.0, 0.0]
    assert knob.value == 0.0


def test_set_value_same_value_is_silent(knob):
    knob.set_value(50)
    seen = []
    knob.connect(seen.append)
    knob.set_value(50 + 1e-14)
    assert seen == []
    assert knob.value == 50


def test_invalid_range_ignored(knob):
    knob.set_range(10, 10)
    knob.set_range(20, 5)
    assert (knob.minimum, knob.maximum) == (0.0, 100.0)


def test_angle_endpoints(knob):
    assert knob.value_to_angle(0) == -135.0
    assert knob.value_to_angle(100) == 135.0
    assert knob.value_to_angle(50) == pytest.approx(0.0)


@pytest.mark.parametrize("value", [0.0, 12.5, 50.0, 99.0])
def test_angle_round_trip(knob, value):
    knob.set_range(-30, 70)
    assert knob.angle_to_value(knob.value_to_angle(value)) == pytest.approx(value)


def test_normalize_wraps(knob):
    assert knob.normalize_value(130) == pytest.approx(30)
    assert knob.normalize_value(-30) == pytest.approx(70)
    assert knob.normalize_value(100) == 100
    assert knob.normalize_value(0) == 0
    for v in (-1234.5, 555.5, 1e6 + 0.25):
        assert 0 <= knob.normalize_value(v) <= 100


def test_normalize_clamps_without_wrapping(knob):
    knob.wrapping = False
    assert knob.normalize_value(130) == 100
    assert knob.normalize_value(-30) == 0


def test_wheel_round_trip(knob):
    knob.set_value(50)
    assert knob.wheel(120) is True
    up = knob.value
    assert up > 50
    knob.wheel(-120)
    assert knob.value == pytest.approx(50)


def test_drag_quarter_turn(knob):
    knob.set_value(50)
    before = knob.value_to_angle(knob.value)
    # centre of the 100x120 control is (50, 50); sweep from top to right
    assert knob.press(50, 0) is True
    assert knob.is_dragging
    assert knob.move(100, 50) is True
    after = knob.value_to_angle(knob.value)
    assert after - before == pytest.approx(90)
    assert knob.release() is True
    assert not knob.is_dragging


def test_move_without_press_ignored(knob):
    knob.set_value(40)
    assert knob.move(100, 50) is False
    assert knob.value == 40
    assert knob.release() is False


def test_right_button_not_accepted(knob):
    assert knob.press(50, 0, left=False) is False
    assert not knob.is_dragging


def test_hover(knob):
    knob.enter()
    assert knob.is_hovered
    knob.leave()
    assert not knob.is_hovered


def test_resize_respects_minimum(knob):
    knob.resize(40, 40)
    assert (knob.width, knob.height) == (100, 120)
    knob.resize(200, 150)
    assert (knob.width, knob.height) == (200, 150)


def test_knob_rect(knob):
    assert knob.knob_rect() == (0, 5, 100, 100)
    knob.resize(200, 150)
    left, top, w, h = knob.knob_rect()
    assert w == h == 130
    assert left * 2 + w == 200


def test_pointer_tip_symmetry(knob):
    left, top, w, _ = knob.knob_rect()
    cx = int((left + left + w - 1) / 2)
    knob.set_value(0)
    low_x, low_y = knob.pointer_tip()
    knob.set_value(100)
    high_x, high_y = knob.pointer_tip()
    assert low_y == high_y
    assert abs((cx - low_x) - (high_x - cx)) <= 1
    assert low_x < cx < high_x


def test_pointer_tip_points_up_at_midpoint(knob):
    knob.set_value(50)
    left, top, w, h = knob.knob_rect()
    cy = int((top + top + h - 1) / 2)
    x, y = knob.pointer_tip()
    assert abs(x - int((left + left + w - 1) / 2)) <= 1
    assert y < cy
    assert math.isclose(cy - y, w // 2 - 15, abs_tol=1)


def test_value_text(knob):
    knob.set_value(42)
    assert knob.value_text() == "42.0"