"""Simulation of a play: notes, sensor changes and the judgements they produce."""

from __future__ import annotations

import math
from collections import deque
from typing import Optional

from ..notes import TouchSensor
from .core import JudgeNote, OnSensorResult, Timing, TouchSensorStates, all_sensors
from .slides import FanSlide, Slide
from .taps import Hold, TouchHold

_CONTINUOUS = (Hold, TouchHold, Slide, FanSlide)


def worse_judge_result(lhs: Timing, rhs: Timing) -> Timing:
    """The timing further from critical; ``rhs`` on a tie."""
    if abs(lhs - Timing.CRITICAL) > abs(rhs - Timing.CRITICAL):
        return lhs
    return rhs


def _swap_remove(items: list, index: int) -> None:
    items[index] = items[-1]
    items.pop()


class MaiSimulator:
    """Feeds sensor changes to notes and tracks which of them are judged."""

    def __init__(self) -> None:
        self._states = TouchSensorStates()
        self.notes: list[JudgeNote] = []
        self._judge_on: dict[TouchSensor, deque[int]] = {
            sensor: deque() for sensor in all_sensors()
        }
        self._judge_change: list[int] = []
        self.note_is_judged: list[bool] = []
        self._worst: Optional[Timing] = None

    def worst_judge_result(self) -> Optional[Timing]:
        """The worst timing among the judged notes so far."""
        return self._worst

    def _add_judged_note(self, index: int) -> None:
        if self.note_is_judged[index]:
            raise RuntimeError(f"note {index} was judged twice")
        self.note_is_judged[index] = True
        result = self.notes[index].judge_result()
        if result is not None:
            self._worst = result if self._worst is None else worse_judge_result(self._worst, result)

    def update_too_late(self, current_time: float) -> None:
        """Judge every pending note whose window has closed."""
        for index, note in enumerate(self.notes):
            if self.note_is_judged[index]:
                continue
            if note.end_time() <= current_time:
                note.judge(self._states, current_time)
                if note.judge_result() is None:
                    raise RuntimeError("late note was left without a result")
                self._add_judged_note(index)

    def add_note(self, note: JudgeNote) -> None:
        """Add a note; notes on one sensor must come in order of start time."""
        sensor = note.sensor_of()
        if sensor is not None:
            queue = self._judge_on[sensor]
            if queue and self.notes[queue[-1]].start_time() > note.start_time():
                raise ValueError("note's start time is earlier than last note's start time")
            queue.append(len(self.notes))

        self.notes.append(note)
        self.note_is_judged.append(False)

        if isinstance(note, _CONTINUOUS):
            self._judge_change.append(len(self.notes) - 1)
            self._update_sensor_change(note.start_time())

    def _update_sensor_change(self, current_time: float) -> None:
        for position in reversed(range(len(self._judge_change))):
            index = self._judge_change[position]
            if self.note_is_judged[index]:
                _swap_remove(self._judge_change, position)
                continue
            note = self.notes[index]
            note.judge(self._states, current_time)
            if note.judge_result() is not None:
                _swap_remove(self._judge_change, position)
                self._add_judged_note(index)

    def change_sensor(self, sensor: TouchSensor, current_time: float) -> bool:
        """Toggle a sensor; return whether it is now on."""
        if not self._states.is_on(sensor):
            self._states.activate(sensor)
            queue = self._judge_on[sensor]
            while queue:
                index = queue[0]
                if self.note_is_judged[index]:
                    queue.popleft()
                    continue
                note = self.notes[index]
                outcome = note.on_sensor(current_time)
                if outcome is OnSensorResult.TOO_FAST:
                    break
                queue.popleft()
                if outcome is OnSensorResult.CONSUMED:
                    if note.judge_result() is not None:
                        self._add_judged_note(index)
                    break
                note.judge(self._states, current_time)
                if note.judge_result() is not None:
                    self._add_judged_note(index)
        else:
            self._states.deactivate(sensor)
        self._update_sensor_change(current_time)
        return self._states.is_on(sensor)

    def finish(self) -> None:
        """Judge every remaining note as if time had run out."""
        for index, note in enumerate(self.notes):
            if self.note_is_judged[index]:
                continue
            note.judge(self._states, math.inf)
            if note.judge_result() is None:
                raise RuntimeError("note was left without a result at the end")
            self._add_judged_note(index)
        for queue in self._judge_on.values():
            queue.clear()
        self._update_sensor_change(math.inf)
        if self._judge_change or not all(self.note_is_judged):
            raise RuntimeError("notes remain unjudged after finishing")

    def judge_results(self) -> list[Optional[Timing]]:
        """The result of every note, in the order they were added."""
        return [note.judge_result() for note in self.notes]

    def print_judge_result(self) -> None:
        """Print each note's result on its own line."""
        for result in self.judge_results():
            print(result.name if result is not None else None)