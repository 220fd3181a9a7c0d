import pytest

from maidata.judge.core import Timing, TouchSensorStates
from maidata.judge.slides import FanSlide, Slide
from maidata.notes import TouchSensor


def a(i):
    return TouchSensor("A", i)


def three_area_slide(appear=0.0, tail=1.0):
    return Slide.from_path([[a(0)], [a(1)], [a(2)]], appear, tail, False)


def test_times_follow_judge_windows():
    slide = three_area_slide(2.0, 3.0)
    assert slide.start_time() == pytest.approx(2.0 - 6 / 60)
    assert slide.end_time() == pytest.approx(3.0 + 36 / 60)
    assert slide.is_too_fast(1.0)
    assert slide.is_too_late(slide.end_time())


def test_full_pass_on_time_is_critical():
    slide = three_area_slide()
    states = TouchSensorStates()
    states.activate(a(0))
    slide.judge(states, 0.5)
    assert slide.judge_index == 0 and slide.judge_is_on
    assert slide.judge_sub_sensor == a(0)
    states.deactivate(a(0))
    states.activate(a(1))
    slide.judge(states, 0.7)
    assert slide.judge_index == 1
    assert slide.judge_result() is None
    states.activate(a(2))
    slide.judge(states, 1.0)
    assert slide.judge_index == 3
    assert slide.judge_result() is Timing.CRITICAL


def test_early_completion_is_never_too_fast():
    slide = Slide.from_path([[a(0)], [a(1)]], 0.0, 5.0, False)
    states = TouchSensorStates()
    states.activate(a(0))
    states.activate(a(1))
    slide.judge(states, 0.0)
    assert slide.judge_result() is Timing.FAST_GOOD


def test_too_late_with_one_area_left_is_late_good():
    slide = Slide.from_path([[a(0)]], 0.0, 1.0, False)
    slide.judge(TouchSensorStates(), slide.end_time())
    assert slide.judge_result() is Timing.LATE_GOOD


def test_too_late_untouched_is_too_late():
    slide = three_area_slide()
    slide.judge(TouchSensorStates(), 10.0)
    assert slide.judge_result() is Timing.TOO_LATE


def test_judging_twice_raises():
    slide = three_area_slide()
    slide.judge(TouchSensorStates(), 10.0)
    with pytest.raises(RuntimeError):
        slide.judge(TouchSensorStates(), 11.0)


def test_next_sensor_check_rules():
    slide = three_area_slide()
    assert slide.is_next_sensor_check() is True
    slide.judge_index = 1
    assert slide.is_next_sensor_check() is False
    long_slide = Slide([[a(i)] for i in range(5)], 0.0, 1.0, False, True, True)
    long_slide.judge_index = 1
    assert long_slide.is_next_sensor_check() is False
    long_slide.judge_index = 2
    assert long_slide.is_next_sensor_check() is True
    long_slide.judge_index = 3
    assert long_slide.is_next_sensor_check() is False


def test_alternative_sensors_in_one_area():
    slide = Slide.from_path([[a(0)], [a(1), TouchSensor("B", 1)], [a(2)]], 0.0, 1.0, False)
    states = TouchSensorStates()
    states.activate(a(0))
    slide.judge(states, 0.2)
    states.deactivate(a(0))
    states.activate(TouchSensor("B", 1))
    slide.judge(states, 0.4)
    assert slide.judge_sub_sensor == TouchSensor("B", 1)
    assert slide.judge_index == 1


def test_fan_slide_times_span_sub_slides():
    early = three_area_slide(0.0, 1.0)
    late = three_area_slide(0.5, 2.0)
    fan = FanSlide([early, late])
    assert fan.start_time() == early.start_time()
    assert fan.end_time() == late.end_time()


def test_fan_slide_result_waits_for_all_and_takes_latest():
    short = Slide.from_path([[a(0)]], 0.0, 1.0, False)
    longer = Slide.from_path([[a(0)], [a(1)], [a(2)]], 0.0, 3.0, False)
    fan = FanSlide([short, longer])
    states = TouchSensorStates()
    fan.judge(states, short.end_time())
    assert short.judge_result() is Timing.LATE_GOOD
    assert fan.judge_result() is None
    fan.judge(states, longer.end_time())
    assert fan.judge_result() is Timing.TOO_LATE
    assert fan.judge_result() == max(short.judge_result(), longer.judge_result())


def test_fan_slide_needs_sub_slides():
    with pytest.raises(ValueError):
        FanSlide([])