"""Writing characters, strings and numbers to a text stream."""

from __future__ import annotations

import sys
from typing import TextIO


def _target(stream: TextIO | None) -> TextIO:
    return sys.stdout if stream is None else stream


def put_char(c: str, stream: TextIO | None = None) -> None:
    """Write one character."""
    if len(c) != 1:
        raise ValueError(f"expected a single character, got {c!r}")
    _target(stream).write(c)


def put_str(s: str, stream: TextIO | None = None) -> None:
    """Write a string as it is."""
    _target(stream).write(s)


def put_endl(s: str, stream: TextIO | None = None) -> None:
    """Write a string followed by a newline."""
    out = _target(stream)
    put_str(s, out)
    put_char("\n", out)


def put_nbr(n: int, stream: TextIO | None = None) -> None:
    """Write an integer in decimal."""
    if not isinstance(n, int):
        raise TypeError(f"expected an integer, got {type(n).__name__}")
    _target(stream).write(str(n))