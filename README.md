# ftkit

Small helpers in the style of the C library: ASCII character
classification, integer/text conversion, byte-buffer operations, string
utilities, a singly linked list and a minimal `printf`.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Modules

### `ftkit.chars`

`is_alpha`, `is_digit`, `is_alnum`, `is_ascii`, `is_print`, `to_lower`,
`to_upper`. Each accepts a one-character string or an integer code.
`to_lower` and `to_upper` change only ASCII letters and give back a value
of the same kind they were given (`to_upper("a") == "A"`,
`to_upper(97) == 65`).

### `ftkit.numbers`

- `atoi(text)` skips leading whitespace, takes one optional sign and reads
  ASCII digits up to the first non-digit; text with no digits gives `0`.
- `itoa(n)` gives the decimal text of a signed 32-bit integer.
- `utoa(n)` gives the decimal text of an unsigned 32-bit integer.

`itoa` and `utoa` raise `OverflowError` for values outside their range
and `TypeError` for non-integers.

### `ftkit.memory`

Operations on `bytearray` and other bytes-like buffers:

- `memset(buf, c, n)` fills the first `n` bytes with the low byte of `c`;
  `bzero(buf, n)` zeroes them.
- `calloc(count, size)` returns a zeroed `bytearray` of `count * size`
  bytes, or of one byte when either is zero.
- `memchr(data, c, n)` returns the index of the first matching byte in
  the first `n`, or `None`.
- `memcmp(s1, s2, n)` returns the difference of the first differing bytes,
  or `0`.
- `memcpy(dst, src, n)` copies `n` bytes to the start of `dst`.
- `memmove(buf, dst, src, n)` moves `n` bytes inside `buf` from offset
  `src` to offset `dst`; overlapping spans are handled.

A span that runs past the end of a buffer, or a negative size, raises
`ValueError`.

### `ftkit.output`

`put_char`, `put_str`, `put_endl` and `put_nbr` write to a text stream,
standard output when none is given.

### `ftkit.strings`

Searches return an index, or `None` when nothing is found.

- `strchr(s, c)` and `strrchr(s, c)` find the first and last occurrence of
  a character; `"\0"` is found at `len(s)`. `strchr` never finds a
  non-ASCII character.
- `strcmp(s1, s2)` gives `-1`, `0` or `1`; `strncmp(s1, s2, n)` gives the
  difference of the first differing character codes among the first `n`.
- `strnstr(big, little, length)` finds `little` lying wholly within
  `big[:length]`; an empty `little` is found at `0`.
- `strlcpy(src, dstsize)` and `strlcat(dst, src, dstsize)` return a tuple
  of the resulting text and the total length the operation reports.
- `strjoin`, `substr(s, start, length)`, `strtrim(s, charset)` and
  `split(s, c)`, which drops empty pieces.
- `strmapi(s, f)` builds a new string from `f(index, char)`;
  `striteri(s, f)` applies `f(index, char)` to a mutable sequence of
  characters in place, replacing a character whenever `f` returns a string.

### `ftkit.linked_list`

`Node` holds `content` and `next`. `LinkedList` can be built from any
iterable and has `push_front`, `push_back` (both return the new node),
`head`, `last`, `iterate(f)`, `map(f)` (returns a new list) and
`clear(delete=None)`; it supports `len()` and iteration over contents.

### `ftkit.printf`

`sprintf(fmt, *args)` returns the formatted text; `printf(fmt, *args,
stream=None)` writes it (to standard output by default) and returns the
number of characters written. Supported conversions: `%c %s %d %i %u %x
%X %p %%`. `%s` prints `None` as `(null)`; `%p` prints `None` or `0` as
`(nil)` and other addresses as `0x` followed by lower-case hex. An unknown
conversion letter, or a `%` at the very end, is dropped and takes no
argument. Too few arguments raise `TypeError`.

## Examples

```python
from ftkit.numbers import atoi, itoa
from ftkit.strings import split, strtrim
from ftkit.printf import sprintf
from ftkit.linked_list import LinkedList

atoi("   -42abc")                 # -42
itoa(-2147483648)                 # "-2147483648"
split("  hello  world ", " ")     # ["hello", "world"]
strtrim("xxhixx", "x")            # "hi"

sprintf("%s is %d (0x%x)", "answer", 42, 42)   # "answer is 42 (0x2a)"

items = LinkedList()
items.push_back(1)
items.push_back(2)
items.push_front(0)
list(items)                       # [0, 1, 2]
list(items.map(lambda v: v * 2)) # [0, 2, 4]
```

```python
import sys
from ftkit.printf import printf

count = printf("%c%c\n", "o", "k", stream=sys.stdout)   # writes "ok\n", count == 3
```

## What it does not do

`printf` has no flags, field widths, precision or length modifiers, and
the package provides no command-line program.