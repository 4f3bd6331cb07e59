"""Write characters, strings and integers to a text stream."""

from __future__ import annotations

import sys
from typing import Optional, TextIO, Union


def _target(stream: Optional[TextIO]) -> TextIO:
    return sys.stdout if stream is None else stream


def put_char(char: Union[str, int], stream: Optional[TextIO] = None) -> int:
    """Write one character (a one-character string or a byte value); returns 1."""
    if isinstance(char, str):
        if len(char) != 1:
            raise ValueError(f"expected a single character, got {char!r}")
        text = char
    elif isinstance(char, int) and not isinstance(char, bool):
        text = chr(char & 0xFF)
    else:
        raise TypeError(f"expected a character or an int, got {type(char).__name__}")
    _target(stream).write(text)
    return 1


def put_str(text: str, stream: Optional[TextIO] = None) -> int:
    """Write a string; returns the number of characters written."""
    if not isinstance(text, str):
        raise TypeError(f"text must be a str, got {type(text).__name__}")
    _target(stream).write(text)
    return len(text)


def put_endl(text: str, stream: Optional[TextIO] = None) -> int:
    """Write a string followed by a newline; returns the number of characters written."""
    written = put_str(text, stream)
    return written + put_char("\n", stream)


def put_nbr(n: int, stream: Optional[TextIO] = None) -> int:
    """Write an integer in decimal; returns the number of characters written."""
    if isinstance(n, bool) or not isinstance(n, int):
        raise TypeError(f"n must be an int, got {type(n).__name__}")
    return put_str(str(n), stream)