"""Shared vocabulary of the judge: timings, judge types, sensor states and the note interface."""

from __future__ import annotations

import abc
import enum
from collections.abc import Sequence
from typing import Optional

from ..notes import Key, TouchSensor

FRAME_RATE = 60.0


class Timing(enum.IntEnum):
    """Judge results ordered from earliest to latest."""

    TOO_FAST = 0
    FAST_GOOD = 1
    FAST_GREAT_3RD = 2
    FAST_GREAT_2ND = 3
    FAST_GREAT = 4
    FAST_PERFECT_2ND = 5
    FAST_PERFECT = 6
    CRITICAL = 7
    LATE_PERFECT = 8
    LATE_PERFECT_2ND = 9
    LATE_GREAT = 10
    LATE_GREAT_2ND = 11
    LATE_GREAT_3RD = 12
    LATE_GOOD = 13
    TOO_LATE = 14


class JudgeType(enum.Enum):
    TAP = "tap"
    TOUCH = "touch"
    SLIDE = "slide"
    EX_TAP = "ex_tap"


class OnSensorResult(enum.Enum):
    TOO_FAST = "too_fast"
    CONSUMED = "consumed"
    TOO_LATE = "too_late"


class JudgeParam:
    """Upper time bounds in seconds for each timing, given in frames."""

    def __init__(self, frames: Sequence[float]) -> None:
        frames = tuple(frames)
        if len(frames) != len(Timing):
            raise ValueError(f"expected {len(Timing)} frame values, got {len(frames)}")
        self._seconds = tuple(frame / FRAME_RATE for frame in frames)

    def __getitem__(self, timing: Timing) -> float:
        return self._seconds[Timing(timing)]

    def __repr__(self) -> str:
        return f"JudgeParam({[s * FRAME_RATE for s in self._seconds]!r})"


def key_to_sensor(key: Key) -> TouchSensor:
    """The outer A sensor under a button."""
    return TouchSensor("A", key.index)


def all_sensors() -> list[TouchSensor]:
    """Every touch sensor: groups A, B, D, E in index order, then C."""
    sensors = [TouchSensor(group, index) for group in "ABDE" for index in range(8)]
    sensors.append(TouchSensor("C", None))
    return sensors


class TouchSensorStates:
    """Whether each touch sensor is currently pressed."""

    def __init__(self) -> None:
        self._states = dict.fromkeys(all_sensors(), False)

    def is_on(self, sensor: TouchSensor) -> bool:
        return self._states[sensor]

    def activate(self, sensor: TouchSensor) -> None:
        self._states[sensor] = True

    def deactivate(self, sensor: TouchSensor) -> None:
        self._states[sensor] = False


class JudgeNote(abc.ABC):
    """A note under judgement.

    ``on_sensor`` is called when the note's sensor turns on; ``judge`` is called
    when sensors change or the note is too late. Neither is called once a
    result has been decided.
    """

    @abc.abstractmethod
    def start_time(self) -> float:
        """The earliest time the note can be judged."""

    @abc.abstractmethod
    def end_time(self) -> float:
        """The time from which the note is too late."""

    def is_too_fast(self, current_time: float) -> bool:
        return current_time < self.start_time()

    def is_too_late(self, current_time: float) -> bool:
        return current_time >= self.end_time()

    def sensor_of(self) -> Optional[TouchSensor]:
        """The sensor whose press triggers ``on_sensor``, if any."""
        return None

    def on_sensor(self, current_time: float) -> OnSensorResult:
        return OnSensorResult.TOO_LATE

    @abc.abstractmethod
    def judge(self, states: TouchSensorStates, current_time: float) -> None:
        """Update the note from the current sensor states."""

    @abc.abstractmethod
    def judge_result(self) -> Optional[Timing]:
        """The decided timing, or None while undecided."""