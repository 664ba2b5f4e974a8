"""ASCII character classification and case conversion.

Every function accepts either a one-character string or an integer code.
Case conversion gives back a value of the same kind it was given.
"""

from __future__ import annotations

CharLike = str | int


def _code(c: CharLike) -> int:
    if isinstance(c, str):
        if len(c) != 1:
            raise ValueError(f"expected a single character, got {c!r}")
        return ord(c)
    if isinstance(c, int):
        return int(c)
    raise TypeError(f"expected a character or an integer code, got {type(c).__name__}")


def _same_kind(original: CharLike, code: int) -> CharLike:
    return chr(code) if isinstance(original, str) else code


def is_alpha(c: CharLike) -> bool:
    """True for ASCII letters A-Z and a-z."""
    code = _code(c)
    return 65 <= code <= 90 or 97 <= code <= 122


def is_digit(c: CharLike) -> bool:
    """True for ASCII digits 0-9."""
    return 48 <= _code(c) <= 57


def is_alnum(c: CharLike) -> bool:
    """True for ASCII letters and digits."""
    return is_digit(c) or is_alpha(c)


def is_ascii(c: CharLike) -> bool:
    """True for codes 0 through 127."""
    return 0 <= _code(c) <= 127


def is_print(c: CharLike) -> bool:
    """True for printable ASCII, space through tilde."""
    return 32 <= _code(c) <= 126


def to_lower(c: CharLike) -> CharLike:
    """Map an ASCII upper-case letter to lower case; anything else is unchanged."""
    code = _code(c)
    if 65 <= code <= 90:
        return _same_kind(c, code + 32)
    return c


def to_upper(c: CharLike) -> CharLike:
    """Map an ASCII lower-case letter to upper case; anything else is unchanged."""
    code = _code(c)
    if 97 <= code <= 122:
        return _same_kind(c, code - 32)
    return c