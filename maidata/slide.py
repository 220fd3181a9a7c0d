"""Slide notes: segments, tracks and their durations."""

from __future__ import annotations

import enum
from dataclasses import dataclass, field
from functools import total_ordering
from typing import Optional

from .notes import Duration, Key, SecondsDuration, TapParams, _format_float


class StopTimeKind(enum.Enum):
    """How the wait before a slide starts moving is given."""

    BPM = "bpm"
    SECONDS = "seconds"


@dataclass(frozen=True)
class SlideStopTimeSpec:
    kind: StopTimeKind
    value: float


@dataclass(frozen=True)
class SlideDuration:
    """A slide's duration, with an optional custom stop time."""

    duration: Duration
    spec: Optional[SlideStopTimeSpec] = None

    def valid(self) -> bool:
        if self.spec is None or self.spec.kind is StopTimeKind.SECONDS:
            return True
        return isinstance(self.duration, SecondsDuration)

    def __add__(self, other: object) -> Optional[SlideDuration]:
        if not isinstance(other, SlideDuration):
            return NotImplemented
        if self.spec is not None and other.spec is not None and self.spec != other.spec:
            return None
        total = self.duration + other.duration
        if total is None:
            return None
        spec = self.spec if self.spec is not None else other.spec
        result = SlideDuration(total, spec)
        return result if result.valid() else None

    def __str__(self) -> str:
        if not self.valid():
            raise ValueError("invalid slide duration specification")
        if self.spec is None:
            return str(self.duration)
        stop = _format_float(self.spec.value)
        if self.spec.kind is StopTimeKind.BPM:
            return f"{stop}#{_format_float(self.duration.seconds)}"
        if isinstance(self.duration, SecondsDuration):
            return f"{stop}##{_format_float(self.duration.seconds)}"
        return f"{stop}##{self.duration}"


class SlideSegmentShape(enum.Enum):
    """Segment shapes, valued by the symbol that introduces them."""

    LINE = "-"
    ARC = "^"
    CIRCUMFERENCE_LEFT = "<"
    CIRCUMFERENCE_RIGHT = ">"
    V = "v"
    P = "p"
    Q = "q"
    S = "s"
    Z = "z"
    PP = "pp"
    QQ = "qq"
    ANGLE = "V"
    SPREAD = "w"


_SHAPE_RANK = {shape: rank for rank, shape in enumerate(SlideSegmentShape)}


@total_ordering
@dataclass(frozen=True)
class SlideSegmentParams:
    destination: Key
    interim: Optional[Key] = None

    def _order_key(self) -> tuple[int, int]:
        interim = -1 if self.interim is None else self.interim.index
        return (self.destination.index, interim)

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, SlideSegmentParams):
            return NotImplemented
        return self._order_key() < other._order_key()


@total_ordering
@dataclass(frozen=True)
class SlideSegment:
    shape: SlideSegmentShape
    params: SlideSegmentParams

    def _order_key(self) -> tuple[int, tuple[int, int]]:
        return (_SHAPE_RANK[self.shape], self.params._order_key())

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, SlideSegment):
            return NotImplemented
        return self._order_key() < other._order_key()

    def __str__(self) -> str:
        destination = self.params.destination
        if self.shape is SlideSegmentShape.ANGLE:
            if self.params.interim is None:
                raise ValueError("angle segment without interim key")
            return f"V{self.params.interim}{destination}"
        return f"{self.shape.value}{destination}"


@dataclass(frozen=True)
class SlideTrackModifier:
    is_break: bool = False
    is_sudden: bool = False

    def __str__(self) -> str:
        return "b" if self.is_break else ""


@dataclass
class SlideTrack:
    segments: list[SlideSegment]
    dur: SlideDuration
    modifier: SlideTrackModifier = SlideTrackModifier()

    def __str__(self) -> str:
        body = "".join(str(segment) for segment in self.segments)
        return f"{body}[{self.dur}]{self.modifier}"


@dataclass
class SlideParams:
    start: TapParams
    tracks: list[SlideTrack] = field(default_factory=list)

    def __str__(self) -> str:
        return f"{self.start}" + "*".join(str(track) for track in self.tracks)