"""Judge timing windows and the hold-release grading tables."""

from __future__ import annotations

import math
import sys

from .core import JudgeParam, JudgeType, Timing

_EPSILON = sys.float_info.epsilon
_INF = math.inf

_T = Timing


class JudgeData:
    """Timing windows per judge type and grading of held notes."""

    def __init__(self) -> None:
        self.judge_adjust_s = 0.05
        self.judge_hold_head_s = 0.05 + self.judge_adjust_s
        self.judge_hold_tail_s = 0.15 + self.judge_adjust_s
        self.judge_touch_hold_head_s = 0.2 + self.judge_adjust_s
        self.judge_touch_hold_tail_s = 0.15 + self.judge_adjust_s
        self._params = {
            JudgeType.TAP: JudgeParam(
                [-9, -6, -5, -4, -3, -2, -1, 1, 2, 3, 4, 5, 6, 9, _INF]
            ),
            JudgeType.TOUCH: JudgeParam(
                [-9, -9, -9, -9, -9, -9, -9, 9, 10.5, 12, 13, 14, 15, 18, _INF]
            ),
            JudgeType.SLIDE: JudgeParam(
                [-36, -26, -22, -18, -14, -14, -14, 14, 14, 14, 16, 22, 26, 36, _INF]
            ),
            JudgeType.EX_TAP: JudgeParam(
                [-9, -9, -9, -9, -9, -9, -9, 9, 9, 9, 9, 9, 9, 9, _INF]
            ),
        }
        self._hold_percents = (0, 33, 67, 95, 100)
        self._hold_tables = (
            (
                _T.FAST_GOOD, _T.FAST_GREAT, _T.FAST_GREAT, _T.FAST_GREAT,
                _T.FAST_GREAT, _T.FAST_PERFECT, _T.FAST_PERFECT, _T.CRITICAL,
                _T.LATE_PERFECT, _T.LATE_PERFECT, _T.LATE_GREAT, _T.LATE_GREAT,
                _T.LATE_GREAT, _T.LATE_GREAT, _T.LATE_GOOD,
            ),
            (
                _T.FAST_GOOD, _T.FAST_GREAT, _T.FAST_GREAT, _T.FAST_GREAT,
                _T.FAST_GREAT, _T.FAST_PERFECT, _T.FAST_PERFECT, _T.LATE_PERFECT,
                _T.LATE_PERFECT, _T.LATE_PERFECT, _T.LATE_GREAT, _T.LATE_GREAT,
                _T.LATE_GREAT, _T.LATE_GREAT, _T.LATE_GOOD,
            ),
            (
                _T.FAST_GOOD, _T.FAST_GOOD, _T.FAST_GREAT, _T.FAST_GREAT,
                _T.FAST_GREAT, _T.FAST_GREAT, _T.FAST_GREAT, _T.LATE_GREAT,
                _T.LATE_GREAT, _T.LATE_GREAT, _T.LATE_GREAT, _T.LATE_GREAT,
                _T.LATE_GREAT, _T.LATE_GOOD, _T.LATE_GOOD,
            ),
            (
                _T.FAST_GOOD, _T.FAST_GOOD, _T.FAST_GOOD, _T.FAST_GOOD,
                _T.FAST_GOOD, _T.FAST_GOOD, _T.FAST_GOOD, _T.LATE_GOOD,
                _T.LATE_GOOD, _T.LATE_GOOD, _T.LATE_GOOD, _T.LATE_GOOD,
                _T.LATE_GOOD, _T.LATE_GOOD, _T.LATE_GOOD,
            ),
            (
                _T.TOO_FAST, _T.FAST_GOOD, _T.FAST_GOOD, _T.FAST_GOOD,
                _T.FAST_GOOD, _T.FAST_GOOD, _T.FAST_GOOD, _T.LATE_GOOD,
                _T.LATE_GOOD, _T.LATE_GOOD, _T.LATE_GOOD, _T.LATE_GOOD,
                _T.LATE_GOOD, _T.LATE_GOOD, _T.TOO_LATE,
            ),
        )

    def judge_param(self, judge_type: JudgeType) -> JudgeParam:
        """The timing windows of a judge type."""
        return self._params[judge_type]

    def get_timing(self, judge_type: JudgeType, delta_time: float) -> Timing:
        """The first timing whose upper bound lies above ``delta_time``."""
        param = self._params[judge_type]
        for timing in Timing:
            if delta_time < param[timing]:
                return timing
        raise ValueError(f"no timing for time difference {delta_time}")

    def get_hold_timing(
        self,
        dur_time: float,
        release_time: float,
        head_result: Timing,
        is_touch_hold: bool,
    ) -> Timing:
        """Grade a held note from its head result and how long it was released."""
        if is_touch_hold:
            dur_time -= self.judge_touch_hold_head_s + self.judge_touch_hold_tail_s
        else:
            dur_time -= self.judge_hold_head_s + self.judge_hold_tail_s
        if dur_time < 0.0:
            return head_result
        released = release_time - _EPSILON
        if released > dur_time:
            raise ValueError(
                f"release time {release_time} exceeds judged duration {dur_time}"
            )
        if dur_time == 0.0:
            release_percent = 0
        else:
            release_percent = math.ceil(released / dur_time * 100.0)
        for percent, table in zip(self._hold_percents, self._hold_tables):
            if release_percent <= percent:
                return table[Timing(head_result)]
        raise ValueError(f"release percentage {release_percent} out of range")


JUDGE_DATA = JudgeData()