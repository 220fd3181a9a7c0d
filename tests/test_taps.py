import pytest

from maidata.judge.core import OnSensorResult, Timing, TouchSensorStates
from maidata.judge.judge_data import JUDGE_DATA
from maidata.judge.taps import Hold, Tap, Touch, TouchHold
from maidata.notes import Key, TouchSensor


def test_tap_sensor_and_window():
    tap = Tap(Key(2), 1.0)
    assert tap.sensor_of() == TouchSensor("A", 2)
    assert tap.start_time() == pytest.approx(1.0 - 9 / 60)
    assert tap.end_time() == pytest.approx(1.0 + 9 / 60)


def test_tap_hit_on_time_is_critical():
    tap = Tap(Key(0), 1.0)
    assert tap.on_sensor(1.0) is OnSensorResult.CONSUMED
    assert tap.judge_result() is Timing.CRITICAL


def test_tap_too_early_is_not_consumed():
    tap = Tap(Key(0), 1.0)
    assert tap.on_sensor(0.0) is OnSensorResult.TOO_FAST
    assert tap.judge_result() is None


def test_tap_missed_is_too_late():
    tap = Tap(Key(0), 1.0)
    states = TouchSensorStates()
    tap.judge(states, 1.0)
    assert tap.judge_result() is None
    tap.judge(states, 5.0)
    assert tap.judge_result() is Timing.TOO_LATE


def test_ex_tap_is_critical_within_wide_window():
    tap = Tap(Key(1), 1.0, is_ex=True)
    tap.on_sensor(1.0 + 8 / 60)
    assert tap.judge_result() is Timing.CRITICAL


def test_judged_tap_rejects_further_calls():
    tap = Tap(Key(0), 1.0)
    tap.on_sensor(1.0)
    with pytest.raises(RuntimeError):
        tap.judge(TouchSensorStates(), 5.0)
    with pytest.raises(RuntimeError):
        tap.on_sensor(1.0)


def test_touch_hit_and_window():
    sensor = TouchSensor("C")
    touch = Touch(sensor, 2.0)
    assert touch.sensor_of() == sensor
    assert touch.end_time() == pytest.approx(2.0 + 18 / 60)
    assert touch.on_sensor(2.0) is OnSensorResult.CONSUMED
    assert touch.judge_result() is Timing.CRITICAL


def test_touch_missed():
    touch = Touch(TouchSensor("B", 3), 2.0)
    touch.judge(TouchSensorStates(), 3.0)
    assert touch.judge_result() is Timing.TOO_LATE


def test_hold_times():
    hold = Hold(Key(0), 0.0, 2.0)
    assert hold.start_time() == pytest.approx(-9 / 60)
    assert hold.end_time() == 2.0
    short = Hold(Key(0), 0.0, 0.01)
    assert short.end_time() == pytest.approx(9 / 60)


def test_hold_fully_held_keeps_head_result():
    hold = Hold(Key(0), 0.0, 2.0)
    states = TouchSensorStates()
    states.activate(hold.sensor)
    assert hold.on_sensor(0.0) is OnSensorResult.CONSUMED
    assert hold.head_result is Timing.CRITICAL
    hold.judge(states, 0.05)
    assert hold.prev_state is True
    hold.judge(states, 1.0)
    assert hold.judge_result() is None
    hold.judge(states, 2.0)
    assert hold.judge_result() is Timing.CRITICAL


def test_hold_never_pressed_uses_too_late_head():
    hold = Hold(Key(4), 0.0, 2.0)
    states = TouchSensorStates()
    hold.judge(states, 0.0)
    hold.judge(states, 2.0)
    expected = JUDGE_DATA.get_hold_timing(2.0, hold.release_time, Timing.TOO_LATE, False)
    assert hold.judge_result() is expected
    assert hold.release_time > 0.0


def test_hold_without_prior_state_raises():
    hold = Hold(Key(0), 0.0, 2.0)
    with pytest.raises(RuntimeError):
        hold.judge(TouchSensorStates(), 1.0)


def test_touch_hold_fully_held():
    sensor = TouchSensor("C")
    touch_hold = TouchHold(sensor, 0.0, 3.0)
    states = TouchSensorStates()
    states.activate(sensor)
    assert touch_hold.on_sensor(0.0) is OnSensorResult.CONSUMED
    touch_hold.judge(states, 0.1)
    touch_hold.judge(states, 3.0)
    assert touch_hold.judge_result() is Timing.CRITICAL


def test_short_touch_hold_returns_head_result():
    sensor = TouchSensor("E", 1)
    touch_hold = TouchHold(sensor, 0.0, 0.1)
    states = TouchSensorStates()
    states.activate(sensor)
    touch_hold.on_sensor(0.0)
    touch_hold.judge(states, 0.0)
    touch_hold.judge(states, touch_hold.end_time())
    assert touch_hold.judge_result() is touch_hold.head_result
    assert touch_hold.judge_result() is Timing.CRITICAL


def test_touch_hold_too_early_press():
    touch_hold = TouchHold(TouchSensor("C"), 1.0, 3.0)
    assert touch_hold.on_sensor(0.0) is OnSensorResult.TOO_FAST
    assert touch_hold.head_result is None