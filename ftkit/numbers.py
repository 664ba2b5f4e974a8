"""Conversions between text and 32-bit integers."""

from __future__ import annotations

import re

INT_MIN = -2147483648
INT_MAX = 2147483647
UINT_MAX = 4294967295

_LEADING_NUMBER = re.compile(r"[ \t\n\v\f\r]*([+-]?)([0-9]*)")


def atoi(text: str) -> int:
    """Parse a leading decimal integer, as C's atoi does.

    Leading whitespace is skipped, one optional sign is taken, then ASCII
    digits are read until the first non-digit.  Text with no digits gives 0.
    """
    match = _LEADING_NUMBER.match(text)
    sign, digits = match.group(1), match.group(2)
    value = int(digits) if digits else 0
    return -value if sign == "-" else value


def _require_int(n: object) -> int:
    if not isinstance(n, int):
        raise TypeError(f"expected an integer, got {type(n).__name__}")
    return n


def itoa(n: int) -> str:
    """Decimal text of a signed 32-bit integer."""
    n = _require_int(n)
    if not INT_MIN <= n <= INT_MAX:
        raise OverflowError(f"{n} does not fit in a signed 32-bit integer")
    return str(n)


def utoa(n: int) -> str:
    """Decimal text of an unsigned 32-bit integer."""
    n = _require_int(n)
    if not 0 <= n <= UINT_MAX:
        raise OverflowError(f"{n} does not fit in an unsigned 32-bit integer")
    return str(n)