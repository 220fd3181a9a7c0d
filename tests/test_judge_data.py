import pytest

from maidata.judge.core import JudgeType, Timing
from maidata.judge.judge_data import JUDGE_DATA, JudgeData


def test_hold_windows_derive_from_adjust():
    data = JudgeData()
    assert data.judge_adjust_s == 0.05
    assert data.judge_hold_head_s == pytest.approx(0.05 + 0.05)
    assert data.judge_hold_tail_s == pytest.approx(0.15 + 0.05)
    assert data.judge_touch_hold_head_s == pytest.approx(0.2 + 0.05)
    assert data.judge_touch_hold_tail_s == pytest.approx(0.15 + 0.05)


@pytest.mark.parametrize(
    "judge_type, too_fast, critical, late_good",
    [
        (JudgeType.TAP, -9, 1, 9),
        (JudgeType.TOUCH, -9, 9, 18),
        (JudgeType.SLIDE, -36, 14, 36),
        (JudgeType.EX_TAP, -9, 9, 9),
    ],
)
def test_judge_param_frames(judge_type, too_fast, critical, late_good):
    param = JUDGE_DATA.judge_param(judge_type)
    assert param[Timing.TOO_FAST] == pytest.approx(too_fast / 60)
    assert param[Timing.CRITICAL] == pytest.approx(critical / 60)
    assert param[Timing.LATE_GOOD] == pytest.approx(late_good / 60)


@pytest.mark.parametrize("judge_type", list(JudgeType))
def test_judge_param_bounds_are_non_decreasing(judge_type):
    param = JUDGE_DATA.judge_param(judge_type)
    bounds = [param[t] for t in Timing]
    assert bounds == sorted(bounds)
    assert bounds[-1] == float("inf")


def test_get_timing_exact_hit_is_critical():
    assert JUDGE_DATA.get_timing(JudgeType.TAP, 0.0) is Timing.CRITICAL


def test_get_timing_extremes():
    assert JUDGE_DATA.get_timing(JudgeType.TAP, -1.0) is Timing.TOO_FAST
    assert JUDGE_DATA.get_timing(JudgeType.TAP, 100.0) is Timing.TOO_LATE


def test_get_timing_is_monotonic():
    deltas = [i / 120 for i in range(-30, 31)]
    results = [JUDGE_DATA.get_timing(JudgeType.SLIDE, d) for d in deltas]
    assert results == sorted(results)


def test_get_timing_rejects_infinite_delta():
    with pytest.raises(ValueError):
        JUDGE_DATA.get_timing(JudgeType.TAP, float("inf"))


def test_short_hold_returns_head_result():
    result = JUDGE_DATA.get_hold_timing(0.1, 0.0, Timing.FAST_GREAT, False)
    assert result is Timing.FAST_GREAT


def test_no_release_keeps_critical():
    assert JUDGE_DATA.get_hold_timing(2.0, 0.0, Timing.CRITICAL, False) is Timing.CRITICAL


def test_half_release_downgrades_to_great():
    dur = 2.0
    judged = dur - JUDGE_DATA.judge_hold_head_s - JUDGE_DATA.judge_hold_tail_s
    result = JUDGE_DATA.get_hold_timing(dur, judged / 2, Timing.CRITICAL, False)
    assert result is Timing.LATE_GREAT


def test_full_release_is_good():
    dur = 3.0
    judged = dur - JUDGE_DATA.judge_touch_hold_head_s - JUDGE_DATA.judge_touch_hold_tail_s
    result = JUDGE_DATA.get_hold_timing(dur, judged, Timing.CRITICAL, True)
    assert result is Timing.LATE_GOOD


def test_missed_head_without_release_is_late_good():
    assert JUDGE_DATA.get_hold_timing(2.0, 0.0, Timing.TOO_LATE, False) is Timing.LATE_GOOD


def test_release_longer_than_hold_is_rejected():
    with pytest.raises(ValueError):
        JUDGE_DATA.get_hold_timing(1.0, 5.0, Timing.CRITICAL, False)