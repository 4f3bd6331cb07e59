# solong

The support library of a small tile-based puzzle game: character
classification, byte-buffer helpers, bounded string operations, stream
writers and a compact printf-style formatter. It uses only the standard
library.

## Installing

```
pip install .
```

To run the test suite as well:

```
pip install ".[test]"
pytest
```

## Modules

### `solong.chars`

Character tests and conversions. Each function takes a one-character string
or an integer code point.

- `is_alpha`, `is_digit`, `is_alnum`, `is_ascii`, `is_print` return a bool
  (ASCII rules only).
- `to_lower`, `to_upper` change the case of ASCII letters and return the same
  kind of value they were given (string in, string out; int in, int out).
- `atoi(text)` skips leading whitespace, accepts one `+` or `-`, and reads
  digits until the first non-digit; text without digits gives `0`.
- `itoa(n)` renders an integer in decimal.

```python
from solong.chars import atoi, to_upper

atoi("  -42abc")   # -42
to_upper("q")      # "Q"
```

### `solong.buffers`

Helpers for `bytearray` and writable `memoryview` objects. Lengths larger
than a buffer, or negative, raise `ValueError`.

- `memset(buffer, value, n)`, `bzero(buffer, n)` fill the first `n` bytes
  and return the buffer.
- `calloc(count, size)` returns a zeroed `bytearray` of `count * size` bytes.
- `memcpy(dest, src, n)`, `memmove(dest, src, n)` copy `n` bytes and return
  `dest`; both return `None` when `dest` and `src` are both `None`.
- `memchr(data, value, n)` returns the index of the first matching byte in
  the first `n` bytes, or `None`.
- `memcmp(a, b, n)` returns the difference of the first unequal byte pair,
  or `0`.

### `solong.textutils`

String operations that report positions as indexes (or `None` when nothing
is found).

- `strlcpy(src, size)` returns `(copied, len(src))`, copying at most
  `size - 1` characters.
- `strlcat(dst, src, size)` returns `(result, attempted_length)`.
- `strchr(s, c)`, `strrchr(s, c)` find the first or last occurrence; looking
  for `"\0"` finds the end of the string at `len(s)`.
- `strncmp(s1, s2, n)` compares at most `n` characters.
- `strnstr(big, little, length)` searches within the first `length`
  characters; an empty needle is found at `0`.
- `substr(s, start, length)`, `strjoin(s1, s2)`, `strtrim(s, charset)`.
- `split(s, sep)` splits on one character and drops empty pieces.
- `strmapi(s, func)` builds a string from `func(index, char)`.
- `striteri(chars, func)` calls `func(index, char)` on a mutable sequence of
  characters and stores every result that is not `None` back in place.

```python
from solong.textutils import split, strlcpy

split("a,,b,", ",")    # ["a", "b"]
strlcpy("hello", 3)    # ("he", 5)
```

### `solong.writers`

`put_char`, `put_str`, `put_endl` and `put_nbr` write to a text stream
(standard output when none is given) and return the number of characters
written.

### `solong.formatting`

A small printf supporting `%c %s %d %i %u %x %X %p` and `%%`.

- `sprintf(fmt, *args)` returns the formatted text.
- `printf(fmt, *args, stream=None)` writes it and returns its length.
- `format_str`, `format_int`, `format_uint`, `format_hex`, `format_ptr`
  render a single value. Integers are treated as 32-bit (`%d` signed, `%u`
  and `%x` unsigned); `%p` renders `0x`-prefixed hex, or `(nil)` for `None`
  or `0`; `%s` renders `None` as `(null)`.

An unknown conversion, a lone trailing `%` or a missing argument raises
`ValueError`.

```python
from solong.formatting import sprintf

sprintf("%d %x %p", -1, 255, 0)   # "-1 ff (nil)"
```

## What this package does not do

There is no game here yet: no map-file loading or validation, no player
movement, no window or drawing, and no command to start anything. The
package holds only the helper modules listed above.