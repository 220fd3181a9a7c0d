"""Helpers shared by the command-line tools."""

from __future__ import annotations

import os
import sys
from typing import Union

from .diag import State


def read_file(path: Union[str, os.PathLike]) -> str:
    """Read a file as UTF-8 text, keeping any byte-order mark."""
    with open(path, "rb") as handle:
        content = handle.read()
    return content.decode("utf-8")


def print_state_messages(state: State) -> None:
    """Print the warnings and errors of a parser state to stderr."""
    for warning in state.warnings:
        print(f"Warning: {warning}", file=sys.stderr)
    for error in state.errors:
        print(f"Error: {error}", file=sys.stderr)