"""Judging of slides and fan slides."""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from typing import Optional

from ..notes import TouchSensor
from .core import JudgeNote, JudgeType, Timing, TouchSensorStates
from .judge_data import JUDGE_DATA


class Slide(JudgeNote):
    """A slide judged by passing its hit areas in order."""

    def __init__(
        self,
        path: Sequence[Sequence[TouchSensor]],
        appear_time: float,
        tail_time: float,
        is_break: bool = False,
        judge_check_sensor_1: bool = False,
        judge_check_sensor_3: bool = False,
    ) -> None:
        self.path = [list(area) for area in path]
        self.appear_time = appear_time
        self.tail_time = tail_time
        self.is_break = is_break
        self._check_sensor_1 = judge_check_sensor_1
        self._check_sensor_3 = judge_check_sensor_3
        self.judge_type = JudgeType.SLIDE
        self.judge_index = 0
        self.judge_is_on = False
        self.judge_sub_sensor: Optional[TouchSensor] = None
        self._result: Optional[Timing] = None

    @classmethod
    def from_path(
        cls,
        path: Sequence[Sequence[TouchSensor]],
        appear_time: float,
        tail_time: float,
        is_break: bool,
    ) -> Slide:
        """A slide without the extra sensor checks used by thunder shapes."""
        return cls(path, appear_time, tail_time, is_break, False, False)

    def __repr__(self) -> str:
        return (
            f"Slide(path={[[str(s) for s in area] for area in self.path]}, "
            f"appear_time={self.appear_time}, tail_time={self.tail_time}, "
            f"judge_index={self.judge_index}, result={self._result})"
        )

    def _check_sensor(self, states: TouchSensorStates, index: int, is_on: bool) -> bool:
        if index >= len(self.path):
            return False
        if not is_on:
            for sensor in self.path[index]:
                if states.is_on(sensor):
                    self.judge_index = index
                    self.judge_is_on = True
                    self.judge_sub_sensor = sensor
                    if self.judge_index == len(self.path) - 1:
                        self.judge_index = len(self.path)
                    return True
            return False
        if index != self.judge_index or not self.judge_is_on or self.judge_sub_sensor is None:
            raise RuntimeError("slide sensor state is inconsistent")
        if not states.is_on(self.judge_sub_sensor):
            self.judge_index += 1
            self.judge_is_on = False
            self.judge_sub_sensor = None
            return True
        return False

    def is_next_sensor_check(self) -> bool:
        """Whether the area after the current one may be checked."""
        if self.judge_is_on:
            return True
        if self._check_sensor_1 and self.judge_index == 1:
            return False
        if self._check_sensor_3 and self.judge_index == 3:
            return False
        return len(self.path) > 3 or self.judge_index + 1 != len(self.path) - 1

    def _compute_judge_result(self, current_time: float) -> Optional[Timing]:
        if self.judge_index < len(self.path):
            return None
        result = JUDGE_DATA.get_timing(self.judge_type, current_time - self.tail_time)
        if result is Timing.TOO_FAST:
            result = Timing.FAST_GOOD
        return result

    def start_time(self) -> float:
        return self.appear_time + JUDGE_DATA.judge_param(JudgeType.TAP)[Timing.FAST_GOOD]

    def end_time(self) -> float:
        return self.tail_time + JUDGE_DATA.judge_param(self.judge_type)[Timing.LATE_GOOD]

    def judge(self, states: TouchSensorStates, current_time: float) -> None:
        if self._result is not None:
            raise RuntimeError("note has already been judged")
        if self.is_too_late(current_time):
            if self.judge_index >= len(self.path):
                raise RuntimeError("completed slide was not judged in time")
            if self.judge_index + 1 == len(self.path):
                self._result = Timing.LATE_GOOD
            else:
                self._result = Timing.TOO_LATE
            return

        while True:
            changed = self._check_sensor(states, self.judge_index, self.judge_is_on)
            if not changed and self.is_next_sensor_check():
                changed = self._check_sensor(states, self.judge_index + 1, False)
            if not changed or self.judge_index == len(self.path):
                break
        if self.judge_index == len(self.path):
            self._result = self._compute_judge_result(current_time)

    def judge_result(self) -> Optional[Timing]:
        return self._result


class FanSlide(JudgeNote):
    """A fan-shaped slide made of several sub-slides judged together."""

    def __init__(self, sub_slides: Iterable[Slide]) -> None:
        self.sub_slides = list(sub_slides)
        if not self.sub_slides:
            raise ValueError("a fan slide needs at least one sub-slide")

    def __repr__(self) -> str:
        return f"FanSlide(sub_slides={self.sub_slides!r})"

    def start_time(self) -> float:
        return min(slide.start_time() for slide in self.sub_slides)

    def end_time(self) -> float:
        return max(slide.end_time() for slide in self.sub_slides)

    def judge(self, states: TouchSensorStates, current_time: float) -> None:
        for slide in self.sub_slides:
            if slide.judge_result() is None:
                slide.judge(states, current_time)

    def judge_result(self) -> Optional[Timing]:
        results = [slide.judge_result() for slide in self.sub_slides]
        if any(result is None for result in results):
            return None
        return max(results)