"""A small printf supporting %c %s %p %d %i %u %x %X and %%.

A conversion letter it does not know is dropped along with its percent
sign, and consumes no argument; so does a percent sign at the very end.
"""

from __future__ import annotations

import sys
from collections.abc import Callable, Iterator
from typing import Any, TextIO

from ftkit.numbers import UINT_MAX, itoa, utoa


def _char(value: Any) -> str:
    if isinstance(value, str):
        if len(value) != 1:
            raise ValueError(f"%c expects a single character, got {value!r}")
        return value
    if isinstance(value, int):
        return chr(value & 0xFF)
    raise TypeError(f"%c expects a character or an integer, got {type(value).__name__}")


def _string(value: Any) -> str:
    return "(null)" if value is None else str(value)


def _unsigned(value: Any) -> int:
    if not isinstance(value, int):
        raise TypeError(f"expected an integer, got {type(value).__name__}")
    if not 0 <= value <= UINT_MAX:
        raise OverflowError(f"{value} does not fit in an unsigned 32-bit integer")
    return value


def _hex_lower(value: Any) -> str:
    return format(_unsigned(value), "x")


def _hex_upper(value: Any) -> str:
    return format(_unsigned(value), "X")


def _pointer(value: Any) -> str:
    if value is None or value == 0:
        return "(nil)"
    if not isinstance(value, int) or value < 0:
        raise TypeError(f"%p expects a non-negative integer address, got {value!r}")
    return "0x" + format(value, "x")


_CONVERSIONS: dict[str, Callable[[Any], str]] = {
    "c": _char,
    "d": itoa,
    "i": itoa,
    "s": _string,
    "p": _pointer,
    "x": _hex_lower,
    "X": _hex_upper,
    "u": utoa,
}


def _pieces(fmt: str, args: tuple[Any, ...]) -> Iterator[str]:
    values = iter(args)
    chars = iter(fmt)
    for ch in chars:
        if ch != "%":
            yield ch
            continue
        spec = next(chars, None)
        if spec == "%":
            yield "%"
        elif spec in _CONVERSIONS:
            try:
                value = next(values)
            except StopIteration:
                raise TypeError(f"not enough arguments for %{spec}") from None
            yield _CONVERSIONS[spec](value)


def sprintf(fmt: str, *args: Any) -> str:
    """The text that printf would write for fmt and args."""
    return "".join(_pieces(fmt, args))


def printf(fmt: str, *args: Any, stream: TextIO | None = None) -> int:
    """Write formatted text to stream (standard output by default).

    Returns the number of characters written.
    """
    text = sprintf(fmt, *args)
    (sys.stdout if stream is None else stream).write(text)
    return len(text)