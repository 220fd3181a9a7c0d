"""Keys, touch sensors, durations and the parameters of tap, touch and hold notes."""

from __future__ import annotations

import enum
import math
import re
from dataclasses import dataclass
from decimal import Decimal
from functools import total_ordering
from typing import ClassVar, Optional, Union

_U8_PATTERN = re.compile(r"\+?[0-9]+")
_INDEXED_GROUPS = frozenset("ABDE")


def _format_float(value: float) -> str:
    """Format a float the shortest way, without exponent or trailing ``.0``."""
    value = float(value)
    if math.isnan(value):
        return "NaN"
    if math.isinf(value):
        return "inf" if value > 0 else "-inf"
    text = repr(value)
    if "e" in text or "E" in text:
        text = format(Decimal(text), "f")
    if text.endswith(".0"):
        text = text[:-2]
    return text


def _is_small_int(value: object) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)


class KeyParseError(ValueError):
    """Raised for a key index outside 0..7 or an unparsable key."""

    def __init__(self, value: object) -> None:
        self.value = value
        super().__init__(f"invalid key: {value}")


class TouchSensorParseError(ValueError):
    """Raised for a group and index that name no touch sensor."""

    def __init__(self, group: str, index: Optional[int] = None) -> None:
        self.group = group
        self.index = index
        suffix = "" if index is None else str(index)
        super().__init__(f"invalid touch sensor: {group}{suffix}")


@dataclass(frozen=True, order=True)
class Key:
    """One of the eight buttons around the ring, indexed from 0."""

    index: int

    def __post_init__(self) -> None:
        if not _is_small_int(self.index) or not 0 <= self.index <= 7:
            raise KeyParseError(self.index)

    def __str__(self) -> str:
        return str(self.index + 1)

    @classmethod
    def from_str(cls, text: str) -> Key:
        """Parse the serialized form; the number is taken as the zero-based index."""
        if not _U8_PATTERN.fullmatch(text):
            raise KeyParseError(text)
        value = int(text)
        if value > 255:
            raise KeyParseError(text)
        return cls(value)


def _is_valid_sensor(group: str, index: Optional[int]) -> bool:
    if group in _INDEXED_GROUPS and len(group) == 1:
        return _is_small_int(index) and 0 <= index <= 7
    return group == "C" and index is None


@total_ordering
@dataclass(frozen=True)
class TouchSensor:
    """A touch sensor: groups A, B, D, E with index 0..7, or the centre C."""

    group: str
    index: Optional[int] = None

    def __post_init__(self) -> None:
        if not _is_valid_sensor(self.group, self.index):
            raise TouchSensorParseError(self.group, self.index)

    def _order_key(self) -> tuple[str, int]:
        return (self.group, -1 if self.index is None else self.index)

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, TouchSensor):
            return NotImplemented
        return self._order_key() < other._order_key()

    def __str__(self) -> str:
        if self.index is None:
            return self.group
        return f"{self.group}{self.index + 1}"

    @classmethod
    def from_str(cls, text: str) -> TouchSensor:
        """Parse a group letter optionally followed by a digit taken as the index."""
        if len(text) == 1:
            return cls(text, None)
        if len(text) == 2:
            digit = text[1]
            index = int(digit) if digit in "0123456789" else None
            return cls(text[0], index)
        raise TouchSensorParseError(text, None)

    @classmethod
    def unchecked(cls, group: str, index: Optional[int]) -> TouchSensor:
        """Build a sensor without validating it."""
        sensor = object.__new__(cls)
        object.__setattr__(sensor, "group", group)
        object.__setattr__(sensor, "index", index)
        return sensor


@dataclass(frozen=True)
class NumBeatsParams:
    """A duration of ``num`` beats of 1/``divisor`` notes, optionally at a fixed bpm."""

    divisor: int
    num: int
    bpm: Optional[float] = None

    def bpm_of(self) -> Optional[float]:
        return self.bpm

    def __add__(self, other: object) -> Optional[NumBeatsParams]:
        if isinstance(other, SecondsDuration):
            return None
        if not isinstance(other, NumBeatsParams):
            return NotImplemented
        if self.bpm is not None and other.bpm is not None and self.bpm != other.bpm:
            return None
        divisor = self.divisor // math.gcd(self.divisor, other.divisor) * other.divisor
        num = self.num * (divisor // self.divisor) + other.num * (divisor // other.divisor)
        common = math.gcd(num, divisor)
        bpm = self.bpm if self.bpm is not None else other.bpm
        return NumBeatsParams(divisor // common, num // common, bpm)

    def __str__(self) -> str:
        prefix = "" if self.bpm is None else f"{_format_float(self.bpm)}#"
        return f"{prefix}{self.divisor}:{self.num}"


@dataclass(frozen=True)
class SecondsDuration:
    """A duration given directly in seconds."""

    seconds: float
    bpm: ClassVar[Optional[float]] = None

    def bpm_of(self) -> Optional[float]:
        """A duration in seconds carries no bpm of its own."""
        return self.bpm

    def __add__(self, other: object) -> Optional[SecondsDuration]:
        if isinstance(other, NumBeatsParams):
            return None
        if not isinstance(other, SecondsDuration):
            return NotImplemented
        return SecondsDuration(self.seconds + other.seconds)

    def __str__(self) -> str:
        return f"#{_format_float(self.seconds)}"


Duration = Union[NumBeatsParams, SecondsDuration]


class TapShape(enum.Enum):
    RING = "ring"
    STAR = "star"
    STAR_SPIN = "star_spin"
    INVALID = "invalid"


@dataclass(frozen=True)
class TapModifier:
    is_break: bool = False
    is_ex: bool = False
    shape: Optional[TapShape] = None

    def __str__(self) -> str:
        return ("b" if self.is_break else "") + ("x" if self.is_ex else "")


@dataclass(frozen=True)
class TapParams:
    key: Key
    modifier: TapModifier = TapModifier()

    def __str__(self) -> str:
        return f"{self.key}{self.modifier}"


@dataclass(frozen=True)
class TouchModifier:
    is_firework: bool = False

    def __str__(self) -> str:
        return "f" if self.is_firework else ""


@dataclass(frozen=True)
class TouchParams:
    sensor: TouchSensor
    modifier: TouchModifier = TouchModifier()

    def __str__(self) -> str:
        return f"{self.sensor}{self.modifier}"


@dataclass(frozen=True)
class HoldModifier:
    is_break: bool = False
    is_ex: bool = False

    def __str__(self) -> str:
        return ("b" if self.is_break else "") + ("x" if self.is_ex else "")


@dataclass(frozen=True)
class HoldParams:
    key: Key
    dur: Duration
    modifier: HoldModifier = HoldModifier()

    def __str__(self) -> str:
        return f"{self.key}{self.modifier}h[{self.dur}]"


@dataclass(frozen=True)
class TouchHoldModifier:
    is_firework: bool = False

    def __str__(self) -> str:
        return "f" if self.is_firework else ""


@dataclass(frozen=True)
class TouchHoldParams:
    sensor: TouchSensor
    dur: Duration
    modifier: TouchHoldModifier = TouchHoldModifier()

    def __str__(self) -> str:
        return f"{self.sensor}{self.modifier}h[{self.dur}]"