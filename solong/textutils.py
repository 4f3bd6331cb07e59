"""String helpers with bounded-copy, search, trim and split semantics."""

from __future__ import annotations

from typing import Callable, MutableSequence, Optional, Tuple, Union

CharLike = Union[str, int]


def _char(c: CharLike) -> str:
    """Normalise a one-character string or a byte value to a one-character string."""
    if isinstance(c, str):
        if len(c) != 1:
            raise ValueError(f"expected a single character, got {c!r}")
        return c
    if isinstance(c, bool) or not isinstance(c, int):
        raise TypeError(f"expected a character or an int, got {type(c).__name__}")
    return chr(c % 256)


def _require_str(name: str, value: object) -> str:
    if not isinstance(value, str):
        raise TypeError(f"{name} must be a str, got {type(value).__name__}")
    return value


def strlcpy(src: str, size: int) -> Tuple[str, int]:
    """Copy at most size - 1 characters of src.

    Returns the copied text and the full length of src, so truncation shows
    as a length larger than or equal to size.
    """
    _require_str("src", src)
    if size < 0:
        raise ValueError("size must not be negative")
    if size == 0:
        return "", len(src)
    return src[: size - 1], len(src)


def strlcat(dst: str, src: str, size: int) -> Tuple[str, int]:
    """Append src to dst so that the result holds at most size - 1 characters.

    Returns the resulting text and the length it tried to create. When size is
    not larger than dst, dst is returned untouched with size + len(src).
    """
    _require_str("dst", dst)
    _require_str("src", src)
    if size < 0:
        raise ValueError("size must not be negative")
    if size == 0:
        return dst, len(src)
    if size <= len(dst):
        return dst, size + len(src)
    room = size - len(dst) - 1
    return dst + src[:room], len(dst) + len(src)


def strchr(s: str, c: CharLike) -> Optional[int]:
    """Index of the first occurrence of c in s, or None.

    Searching for the NUL character finds the terminator at len(s).
    """
    _require_str("s", s)
    ch = _char(c)
    found = s.find(ch)
    if found != -1:
        return found
    return len(s) if ch == "\0" else None


def strrchr(s: str, c: CharLike) -> Optional[int]:
    """Index of the last occurrence of c in s, or None.

    Searching for the NUL character finds the terminator at len(s).
    """
    _require_str("s", s)
    ch = _char(c)
    if ch == "\0":
        return len(s)
    found = s.rfind(ch)
    return None if found == -1 else found


def strncmp(s1: str, s2: str, n: int) -> int:
    """Compare at most n characters; the result is the difference of the first unequal pair.

    The end of a string compares as a zero character.
    """
    _require_str("s1", s1)
    _require_str("s2", s2)
    if n < 0:
        raise ValueError("n must not be negative")
    for i in range(n):
        a = ord(s1[i]) if i < len(s1) else 0
        b = ord(s2[i]) if i < len(s2) else 0
        if a != b:
            return a - b
        if a == 0:
            break
    return 0


def strnstr(big: str, little: str, length: int) -> Optional[int]:
    """Index of little within the first length characters of big, or None.

    An empty needle is found at index 0.
    """
    _require_str("big", big)
    _require_str("little", little)
    if length < 0:
        raise ValueError("length must not be negative")
    if not little:
        return 0
    found = big.find(little, 0, min(length, len(big)))
    return None if found == -1 else found


def substr(s: str, start: int, length: int) -> str:
    """At most length characters of s beginning at start; empty when start is past the end."""
    _require_str("s", s)
    if start < 0 or length < 0:
        raise ValueError("start and length must not be negative")
    if start >= len(s):
        return ""
    return s[start : start + length]


def strjoin(s1: str, s2: str) -> str:
    """Concatenate two strings."""
    return _require_str("s1", s1) + _require_str("s2", s2)


def strtrim(s: str, charset: str) -> str:
    """Remove characters found in charset from both ends of s."""
    _require_str("s", s)
    _require_str("charset", charset)
    return s.strip(charset)


def split(s: str, sep: CharLike) -> list[str]:
    """Split s on the separator character, dropping empty pieces."""
    _require_str("s", s)
    return [word for word in s.split(_char(sep)) if word]


def strmapi(s: str, func: Callable[[int, str], str]) -> str:
    """Build a new string from func(index, char) applied to every character of s."""
    _require_str("s", s)
    return "".join(func(i, ch) for i, ch in enumerate(s))


def striteri(
    chars: MutableSequence[str], func: Callable[[int, str], Optional[str]]
) -> MutableSequence[str]:
    """Call func(index, char) on every character, storing any non-None result in place."""
    for i, ch in enumerate(chars):
        result = func(i, ch)
        if result is not None:
            chars[i] = result
    return chars