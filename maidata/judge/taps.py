"""Judging of taps, touches, holds and touch holds."""

from __future__ import annotations

from typing import Optional

from ..notes import Key, TouchSensor
from .core import (
    JudgeNote,
    JudgeType,
    OnSensorResult,
    Timing,
    TouchSensorStates,
    key_to_sensor,
)
from .judge_data import JUDGE_DATA


def _ensure_undecided(result: Optional[Timing]) -> None:
    if result is not None:
        raise RuntimeError("note has already been judged")


def _head_outcome(result: Timing) -> OnSensorResult:
    if result is Timing.TOO_LATE:
        return OnSensorResult.TOO_LATE
    return OnSensorResult.CONSUMED


class _Instant(JudgeNote):
    """A note judged by a single press of its sensor."""

    sensor: TouchSensor
    appear_time: float
    judge_type: JudgeType
    _result: Optional[Timing]

    def start_time(self) -> float:
        return self.appear_time + JUDGE_DATA.judge_param(self.judge_type)[Timing.TOO_FAST]

    def end_time(self) -> float:
        return self.appear_time + JUDGE_DATA.judge_param(self.judge_type)[Timing.LATE_GOOD]

    def sensor_of(self) -> Optional[TouchSensor]:
        return self.sensor

    def on_sensor(self, current_time: float) -> OnSensorResult:
        _ensure_undecided(self._result)
        if self.is_too_fast(current_time):
            return OnSensorResult.TOO_FAST
        self._result = JUDGE_DATA.get_timing(self.judge_type, current_time - self.appear_time)
        return _head_outcome(self._result)

    def judge(self, states: TouchSensorStates, current_time: float) -> None:
        _ensure_undecided(self._result)
        if self.is_too_late(current_time):
            self._result = Timing.TOO_LATE

    def judge_result(self) -> Optional[Timing]:
        return self._result


class Tap(_Instant):
    """A tap on one of the eight buttons."""

    def __init__(
        self, key: Key, appear_time: float, is_break: bool = False, is_ex: bool = False
    ) -> None:
        self.sensor = key_to_sensor(key)
        self.appear_time = appear_time
        self.is_break = is_break
        self.is_ex = is_ex
        self.judge_type = JudgeType.EX_TAP if is_ex else JudgeType.TAP
        self._result = None

    def __repr__(self) -> str:
        return (
            f"Tap(sensor={self.sensor}, appear_time={self.appear_time}, "
            f"is_break={self.is_break}, is_ex={self.is_ex}, result={self._result})"
        )

    def start_time(self) -> float:
        return super().start_time()

    def end_time(self) -> float:
        return super().end_time()

    def sensor_of(self) -> Optional[TouchSensor]:
        return super().sensor_of()

    def on_sensor(self, current_time: float) -> OnSensorResult:
        return super().on_sensor(current_time)

    def judge(self, states: TouchSensorStates, current_time: float) -> None:
        super().judge(states, current_time)

    def judge_result(self) -> Optional[Timing]:
        return super().judge_result()


class Touch(_Instant):
    """A touch on one touch sensor."""

    def __init__(self, sensor: TouchSensor, appear_time: float) -> None:
        self.sensor = sensor
        self.appear_time = appear_time
        self.judge_type = JudgeType.TOUCH
        self._result = None

    def __repr__(self) -> str:
        return (
            f"Touch(sensor={self.sensor}, appear_time={self.appear_time}, "
            f"result={self._result})"
        )

    def start_time(self) -> float:
        return super().start_time()

    def end_time(self) -> float:
        return super().end_time()

    def sensor_of(self) -> Optional[TouchSensor]:
        return super().sensor_of()

    def on_sensor(self, current_time: float) -> OnSensorResult:
        return super().on_sensor(current_time)

    def judge(self, states: TouchSensorStates, current_time: float) -> None:
        super().judge(states, current_time)

    def judge_result(self) -> Optional[Timing]:
        return super().judge_result()


class _Held(JudgeNote):
    """A note pressed at its head and held until its tail."""

    sensor: TouchSensor
    appear_time: float
    tail_time: float
    head_judge_type: JudgeType
    _is_touch_hold: bool

    def _init_state(self) -> None:
        self.head_result: Optional[Timing] = None
        self.prev_state: Optional[bool] = None
        self.prev_time: Optional[float] = None
        self.release_time = 0.0
        self._result: Optional[Timing] = None

    def _head_s(self) -> float:
        if self._is_touch_hold:
            return JUDGE_DATA.judge_touch_hold_head_s
        return JUDGE_DATA.judge_hold_head_s

    def _tail_s(self) -> float:
        if self._is_touch_hold:
            return JUDGE_DATA.judge_touch_hold_tail_s
        return JUDGE_DATA.judge_hold_tail_s

    def start_time(self) -> float:
        return self.appear_time + JUDGE_DATA.judge_param(self.head_judge_type)[Timing.TOO_FAST]

    def end_time(self) -> float:
        head_end = (
            self.appear_time + JUDGE_DATA.judge_param(self.head_judge_type)[Timing.LATE_GOOD]
        )
        return max(head_end, self.tail_time)

    def sensor_of(self) -> Optional[TouchSensor]:
        return self.sensor

    def on_sensor(self, current_time: float) -> OnSensorResult:
        _ensure_undecided(self._result)
        if current_time < self.start_time():
            return OnSensorResult.TOO_FAST
        self.head_result = JUDGE_DATA.get_timing(
            self.head_judge_type, current_time - self.appear_time
        )
        return _head_outcome(self.head_result)

    def judge(self, states: TouchSensorStates, current_time: float) -> None:
        _ensure_undecided(self._result)
        curr_state = states.is_on(self.sensor)
        head_end = self.appear_time + self._head_s()
        tail_start = self.tail_time - self._tail_s()
        if current_time < head_end:
            self.prev_state = curr_state
            self.prev_time = current_time
            return
        if self.prev_state is None or self.prev_time is None:
            raise RuntimeError("hold judged past its head without an earlier sensor state")
        if not self.prev_state and head_end <= tail_start:
            self.release_time += max(
                min(current_time, tail_start) - max(self.prev_time, head_end), 0.0
            )
        self.prev_state = curr_state
        self.prev_time = current_time
        if current_time >= self.end_time():
            self._result = JUDGE_DATA.get_hold_timing(
                self.tail_time - self.appear_time,
                self.release_time,
                self.head_result if self.head_result is not None else Timing.TOO_LATE,
                self._is_touch_hold,
            )

    def judge_result(self) -> Optional[Timing]:
        return self._result


class Hold(_Held):
    """A hold on one of the eight buttons."""

    def __init__(
        self,
        key: Key,
        appear_time: float,
        tail_time: float,
        is_break: bool = False,
        is_ex: bool = False,
    ) -> None:
        self.sensor = key_to_sensor(key)
        self.appear_time = appear_time
        self.tail_time = tail_time
        self.is_break = is_break
        self.is_ex = is_ex
        self.head_judge_type = JudgeType.EX_TAP if is_ex else JudgeType.TAP
        self._is_touch_hold = False
        self._init_state()

    def __repr__(self) -> str:
        return (
            f"Hold(sensor={self.sensor}, appear_time={self.appear_time}, "
            f"tail_time={self.tail_time}, result={self._result})"
        )

    def start_time(self) -> float:
        return super().start_time()

    def end_time(self) -> float:
        return super().end_time()

    def sensor_of(self) -> Optional[TouchSensor]:
        return super().sensor_of()

    def on_sensor(self, current_time: float) -> OnSensorResult:
        return super().on_sensor(current_time)

    def judge(self, states: TouchSensorStates, current_time: float) -> None:
        super().judge(states, current_time)

    def judge_result(self) -> Optional[Timing]:
        return super().judge_result()


class TouchHold(_Held):
    """A hold on a touch sensor."""

    def __init__(self, sensor: TouchSensor, appear_time: float, tail_time: float) -> None:
        self.sensor = sensor
        self.appear_time = appear_time
        self.tail_time = tail_time
        self.head_judge_type = JudgeType.TOUCH
        self._is_touch_hold = True
        self._init_state()

    def __repr__(self) -> str:
        return (
            f"TouchHold(sensor={self.sensor}, appear_time={self.appear_time}, "
            f"tail_time={self.tail_time}, result={self._result})"
        )

    def start_time(self) -> float:
        return super().start_time()

    def end_time(self) -> float:
        return super().end_time()

    def sensor_of(self) -> Optional[TouchSensor]:
        return super().sensor_of()

    def on_sensor(self, current_time: float) -> OnSensorResult:
        return super().on_sensor(current_time)

    def judge(self, states: TouchSensorStates, current_time: float) -> None:
        super().judge(states, current_time)

    def judge_result(self) -> Optional[Timing]:
        return super().judge_result()