"""Diagnostics collected while reading a chart: warnings, errors and their spans."""

from __future__ import annotations

import enum
from dataclasses import dataclass, field
from typing import Any, Generic, Optional, TypeVar

from .insn import NoteType

T = TypeVar("T")


class WarningKind(enum.Enum):
    DUPLICATE_MODIFIER = "duplicate_modifier"
    MULTIPLE_SLIDE_TRACK_GROUPS = "multiple_slide_track_groups"
    MISSING_SLIDE_START_KEY = "missing_slide_start_key"


@dataclass(frozen=True)
class WarningMessage:
    """A problem that does not stop the chart from being read."""

    kind: WarningKind
    modifier: Optional[str] = None
    note_type: Optional[NoteType] = None

    def __post_init__(self) -> None:
        if self.kind is WarningKind.DUPLICATE_MODIFIER and (
            self.modifier is None or self.note_type is None
        ):
            raise ValueError("a duplicate modifier warning needs a modifier and a note type")

    def __str__(self) -> str:
        if self.kind is WarningKind.DUPLICATE_MODIFIER:
            return f"duplicate `{self.modifier}` modifier in {self.note_type} instruction"
        if self.kind is WarningKind.MULTIPLE_SLIDE_TRACK_GROUPS:
            return "multiple slide track groups in slide instruction"
        return "missing start key in slide instruction"

    def to_json(self) -> Any:
        """Return the JSON form: a tagged object, or the bare name for plain kinds."""
        if self.kind is WarningKind.DUPLICATE_MODIFIER:
            return {self.kind.value: [self.modifier, self.note_type.value]}
        return self.kind.value


class ErrorKind(enum.Enum):
    UNKNOWN_CHAR = "unknown_char"
    EXPECTED_BEFORE = "expected_before"
    EXPECTED_AFTER = "expected_after"
    EXPECTED_BETWEEN = "expected_between"
    MISSING_BEATS_NUM = "missing_beats_num"
    MISSING_DURATION = "missing_duration"
    MISSING_NOTE = "missing_note"
    MISSING_SLIDE_START_KEY = "missing_slide_start_key"
    MISSING_SLIDE_TRACK = "missing_slide_track"
    MISSING_SLIDE_DESTINATION_KEY = "missing_slide_destination_key"
    INVALID_BPM = "invalid_bpm"
    INVALID_BEAT_DIVISOR = "invalid_beat_divisor"
    INVALID_DURATION = "invalid_duration"
    INVALID_SLIDE_STOP_TIME = "invalid_slide_stop_time"
    INVALID_SLIDE_TRACK = "invalid_slide_track"
    DUPLICATE_SHAPE_MODIFIER = "duplicate_shape_modifier"
    DURATION_MISMATCH = "duration_mismatch"


_ERROR_TEMPLATES = {
    ErrorKind.UNKNOWN_CHAR: "unknown character `{detail}`",
    ErrorKind.EXPECTED_BEFORE: "expected {expected} before {location}",
    ErrorKind.EXPECTED_AFTER: "expected {expected} after {location}",
    ErrorKind.EXPECTED_BETWEEN: "expected {expected} between {previous} and {next}",
    ErrorKind.MISSING_BEATS_NUM: "missing number of beats",
    ErrorKind.MISSING_DURATION: "missing {note_type} duration",
    ErrorKind.MISSING_NOTE: "missing note",
    ErrorKind.MISSING_SLIDE_START_KEY: "missing slide start key",
    ErrorKind.MISSING_SLIDE_TRACK: "missing slide track",
    ErrorKind.MISSING_SLIDE_DESTINATION_KEY: "missing slide destination key",
    ErrorKind.INVALID_BPM: "invalid bpm {detail}",
    ErrorKind.INVALID_BEAT_DIVISOR: "invalid beat divisor `{detail}`",
    ErrorKind.INVALID_DURATION: "invalid duration `{detail}`",
    ErrorKind.INVALID_SLIDE_STOP_TIME: "invalid slide stop time {detail}",
    ErrorKind.INVALID_SLIDE_TRACK: "invalid slide track `{detail}`",
    ErrorKind.DUPLICATE_SHAPE_MODIFIER: "duplicate {note_type} shape modifier",
    ErrorKind.DURATION_MISMATCH: "{note_type} duration mismatch",
}

_DETAIL_KINDS = frozenset(
    {
        ErrorKind.UNKNOWN_CHAR,
        ErrorKind.INVALID_BPM,
        ErrorKind.INVALID_BEAT_DIVISOR,
        ErrorKind.INVALID_DURATION,
        ErrorKind.INVALID_SLIDE_STOP_TIME,
        ErrorKind.INVALID_SLIDE_TRACK,
    }
)
_NOTE_KINDS = frozenset(
    {
        ErrorKind.MISSING_DURATION,
        ErrorKind.DUPLICATE_SHAPE_MODIFIER,
        ErrorKind.DURATION_MISMATCH,
    }
)
_LOCATED_KINDS = frozenset({ErrorKind.EXPECTED_BEFORE, ErrorKind.EXPECTED_AFTER})


@dataclass(frozen=True)
class ErrorMessage:
    """A problem that makes part of the chart unreadable."""

    kind: ErrorKind
    detail: Optional[str] = None
    note_type: Optional[NoteType] = None
    expected: Optional[str] = None
    location: Optional[str] = None
    previous: Optional[str] = None
    next: Optional[str] = None

    def __post_init__(self) -> None:
        missing = []
        if self.kind in _DETAIL_KINDS and self.detail is None:
            missing.append("detail")
        if self.kind in _NOTE_KINDS and self.note_type is None:
            missing.append("note_type")
        if self.kind in _LOCATED_KINDS:
            missing += [n for n in ("expected", "location") if getattr(self, n) is None]
        if self.kind is ErrorKind.EXPECTED_BETWEEN:
            missing += [
                n for n in ("expected", "previous", "next") if getattr(self, n) is None
            ]
        if missing:
            raise ValueError(f"{self.kind.value} error needs {', '.join(missing)}")

    def __str__(self) -> str:
        return _ERROR_TEMPLATES[self.kind].format(
            detail=self.detail,
            note_type=self.note_type,
            expected=self.expected,
            location=self.location,
            previous=self.previous,
            next=self.next,
        )

    def to_json(self) -> dict:
        """Return the JSON form, tagged by ``type`` with content under ``message``."""
        result: dict = {"type": self.kind.value}
        if self.kind in _DETAIL_KINDS:
            result["message"] = self.detail
        elif self.kind in _NOTE_KINDS:
            result["message"] = self.note_type.value
        elif self.kind in _LOCATED_KINDS:
            result["message"] = {"expected": self.expected, "location": self.location}
        elif self.kind is ErrorKind.EXPECTED_BETWEEN:
            result["message"] = {
                "expected": self.expected,
                "previous": self.previous,
                "next": self.next,
            }
        return result


@dataclass(frozen=True)
class Spanned(Generic[T]):
    """A value together with the place in the source it came from."""

    value: T
    span: Any = None

    def __str__(self) -> str:
        return str(self.value)


@dataclass
class State:
    """Warnings and errors gathered while parsing."""

    warnings: list = field(default_factory=list)
    errors: list = field(default_factory=list)

    def add_warning(self, warning: WarningMessage, span: Any) -> None:
        self.warnings.append(Spanned(warning, span))

    def add_error(self, error: ErrorMessage, span: Any) -> None:
        self.errors.append(Spanned(error, span))

    def has_warnings(self) -> bool:
        return bool(self.warnings)

    def has_errors(self) -> bool:
        return bool(self.errors)

    def has_messages(self) -> bool:
        return self.has_warnings() or self.has_errors()