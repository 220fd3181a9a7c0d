"""Splitting a chart container into its ``&key=value`` pairs."""

from __future__ import annotations

import re
from dataclasses import dataclass

_WHITESPACE = " \t\n\r"
_BOM = "\ufeff"
_KEYVAL = re.compile(r"[ \t\r\n]*&([^=]*)=([^&]*)")


@dataclass(frozen=True)
class KeyVal:
    """One ``&key=value`` pair, with the offsets where key and value start."""

    key: str
    val: str
    key_offset: int = 0
    val_offset: int = 0


def num_rightmost_whitespaces(text: str) -> int:
    """Count the trailing tabs, newlines, carriage returns and spaces."""
    return len(text) - len(text.rstrip(_WHITESPACE))


def lex_keyvals(text: str) -> list[KeyVal]:
    """Split the whole text into key-value pairs.

    A leading byte-order mark is skipped and trailing whitespace is removed
    from each value. Raises ValueError if anything is left that is not a pair.
    """
    pos = 1 if text.startswith(_BOM) else 0
    result = []
    while (match := _KEYVAL.match(text, pos)) is not None:
        val = match.group(2)
        val = val[: len(val) - num_rightmost_whitespaces(val)]
        result.append(KeyVal(match.group(1), val, match.start(1), match.start(2)))
        pos = match.end()
    if pos != len(text):
        raise ValueError(f"parse maidata failed at offset {pos}")
    return result