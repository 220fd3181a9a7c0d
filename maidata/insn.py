"""Raw chart instructions: tempo changes, beat divisors, rests and note bundles."""

from __future__ import annotations

import enum
from dataclasses import dataclass, field
from typing import Union

from .notes import HoldParams, TapParams, TouchHoldParams, TouchParams, _format_float
from .slide import SlideParams


class NoteType(enum.Enum):
    TAP = "tap"
    TOUCH = "touch"
    HOLD = "hold"
    TOUCH_HOLD = "touch_hold"
    SLIDE = "slide"

    def __str__(self) -> str:
        return self.value


RawNote = Union[TapParams, TouchParams, HoldParams, TouchHoldParams, SlideParams]


def note_type(note: RawNote) -> NoteType:
    """Return the kind of a note given by its parameters."""
    if isinstance(note, TapParams):
        return NoteType.TAP
    if isinstance(note, TouchParams):
        return NoteType.TOUCH
    if isinstance(note, HoldParams):
        return NoteType.HOLD
    if isinstance(note, TouchHoldParams):
        return NoteType.TOUCH_HOLD
    if isinstance(note, SlideParams):
        return NoteType.SLIDE
    raise TypeError(f"not a note: {note!r}")


@dataclass(frozen=True)
class BpmParams:
    """A tempo change."""

    new_bpm: float

    def __str__(self) -> str:
        return _format_float(self.new_bpm)


@dataclass(frozen=True)
class NewDivisor:
    divisor: int

    def __str__(self) -> str:
        return str(self.divisor)


@dataclass(frozen=True)
class NewAbsoluteDuration:
    seconds: float

    def __str__(self) -> str:
        return f"#{_format_float(self.seconds)}"


BeatDivisorParams = Union[NewDivisor, NewAbsoluteDuration]


@dataclass(frozen=True)
class BeatDivisor:
    """A change of the beat divisor."""

    params: BeatDivisorParams


@dataclass(frozen=True)
class Rest:
    """An empty time step."""


@dataclass
class NoteBundle:
    """Notes played together in one time step."""

    notes: list = field(default_factory=list)


@dataclass(frozen=True)
class EndMark:
    """The end of the chart."""


RawInsn = Union[BpmParams, BeatDivisor, Rest, NoteBundle, EndMark]


def format_raw_insn(insn: RawInsn) -> str:
    """Render one instruction in chart notation."""
    match insn:
        case BpmParams():
            return f"({insn})"
        case BeatDivisor(params=params):
            return f"{{{params}}}"
        case Rest():
            return ","
        case NoteBundle(notes=notes):
            return "/".join(str(note) for note in notes) + ","
        case EndMark():
            return "E"
    raise TypeError(f"not an instruction: {insn!r}")