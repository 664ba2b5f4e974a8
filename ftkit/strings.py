"""String searching, comparison, copying and splitting.

Searches return an index into the string, or None when nothing is found.
The copy functions that report a total length return the resulting string
together with that total.
"""

from __future__ import annotations

from collections.abc import Callable, MutableSequence

from ftkit.chars import is_ascii

CharLike = str | int


def _char(c: CharLike) -> str:
    if isinstance(c, str):
        if len(c) != 1:
            raise ValueError(f"expected a single character, got {c!r}")
        return c
    if isinstance(c, int):
        return chr(c)
    raise TypeError(f"expected a character or an integer code, got {type(c).__name__}")


def _non_negative(value: int, name: str) -> int:
    if value < 0:
        raise ValueError(f"{name} must not be negative")
    return value


def strchr(s: str, c: CharLike) -> int | None:
    """Index of the first occurrence of c in s.

    The terminator "\\0" is found at len(s). Non-ASCII characters are never found.
    """
    ch = _char(c)
    if ch == "\0":
        return len(s)
    if not is_ascii(ch):
        return None
    index = s.find(ch)
    return None if index < 0 else index


def strrchr(s: str, c: CharLike) -> int | None:
    """Index of the last occurrence of c in s; "\\0" is found at len(s)."""
    ch = _char(c)
    if ch == "\0":
        return len(s)
    index = s.rfind(ch)
    return None if index < 0 else index


def strcmp(s1: str, s2: str) -> int:
    """Compare two strings, giving -1, 0 or 1."""
    for a, b in zip(s1, s2):
        if a != b:
            return -1 if a < b else 1
    if len(s1) == len(s2):
        return 0
    return -1 if len(s1) < len(s2) else 1


def _code_at(s: str, index: int) -> int:
    return ord(s[index]) if index < len(s) else 0


def strncmp(s1: str, s2: str, n: int) -> int:
    """Difference of the first differing characters among the first n, or 0.

    The end of a string counts as a character of code 0.
    """
    _non_negative(n, "n")
    for index, (a, b) in enumerate(zip(s1, s2)):
        if index >= n:
            return 0
        if a != b:
            return ord(a) - ord(b)
    index = min(len(s1), len(s2))
    if index < n:
        return _code_at(s1, index) - _code_at(s2, index)
    return 0


def strnstr(big: str, little: str, length: int) -> int | None:
    """Index of the first occurrence of little lying wholly within big[:length]."""
    _non_negative(length, "length")
    if not little:
        return 0
    index = big[:length].find(little)
    return None if index < 0 else index


def strlcpy(src: str, dstsize: int) -> tuple[str, int]:
    """Copy src into a buffer of dstsize characters, terminator included.

    Returns the copied text and the full length of src.
    """
    _non_negative(dstsize, "dstsize")
    if dstsize == 0:
        return "", len(src)
    return src[: dstsize - 1], len(src)


def strlcat(dst: str, src: str, dstsize: int) -> tuple[str, int]:
    """Append src to dst within a buffer of dstsize characters.

    Returns the resulting text and the length the full result would have had.
    """
    _non_negative(dstsize, "dstsize")
    if dstsize == 0:
        return dst, len(src)
    if dstsize <= len(dst):
        return dst, len(src) + dstsize
    room = dstsize - 1 - len(dst)
    return dst + src[:room], len(dst) + len(src)


def strjoin(s1: str, s2: str) -> str:
    """The two strings one after the other."""
    return s1 + s2


def substr(s: str, start: int, length: int) -> str:
    """At most length characters of s from start; empty when start is past the end."""
    _non_negative(start, "start")
    _non_negative(length, "length")
    if start > len(s):
        return ""
    return s[start : start + length]


def strtrim(s: str, charset: str) -> str:
    """s without leading and trailing ASCII characters that appear in charset."""
    trimmable = "".join(ch for ch in charset if is_ascii(ch))
    return s.strip(trimmable)


def split(s: str, c: CharLike) -> list[str]:
    """The non-empty pieces of s separated by the character c."""
    sep = _char(c)
    return [word for word in s.split(sep) if word]


def strmapi(s: str, f: Callable[[int, str], str]) -> str:
    """A new string made of f(index, char) for every character of s."""
    return "".join(f(index, ch) for index, ch in enumerate(s))


def striteri(s: MutableSequence[str], f: Callable[[int, str], str | None]) -> None:
    """Apply f(index, char) to each character of s in place.

    A returned string replaces the character; None leaves it as it is.
    """
    for index, ch in enumerate(list(s)):
        replacement = f(index, ch)
        if replacement is not None:
            s[index] = replacement