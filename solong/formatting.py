"""A small printf supporting %c %s %d %i %u %x %X %p and %%."""

from __future__ import annotations

from typing import Callable, Dict, Optional, TextIO, Union

from solong.writers import put_str

_MASK32 = 0xFFFFFFFF
_MASK64 = 0xFFFFFFFFFFFFFFFF


def _require_int(name: str, value: object) -> int:
    if isinstance(value, bool) or not isinstance(value, int):
        raise TypeError(f"{name} must be an int, got {type(value).__name__}")
    return value


def format_str(text: Optional[str]) -> str:
    """Render a string; None renders as "(null)"."""
    if text is None:
        return "(null)"
    if not isinstance(text, str):
        raise TypeError(f"text must be a str, got {type(text).__name__}")
    return text


def format_int(value: int) -> str:
    """Render a value as a signed 32-bit decimal integer."""
    v = _require_int("value", value) & _MASK32
    if v >= 1 << 31:
        v -= 1 << 32
    return str(v)


def format_uint(value: int) -> str:
    """Render a value as an unsigned 32-bit decimal integer."""
    return str(_require_int("value", value) & _MASK32)


def format_hex(value: int, upper: bool = False) -> str:
    """Render a value as unsigned 32-bit hexadecimal, without prefix."""
    return format(_require_int("value", value) & _MASK32, "X" if upper else "x")


def format_ptr(address: Optional[int]) -> str:
    """Render an address as 0x-prefixed lower-case hex; None or 0 renders as "(nil)"."""
    if address is None:
        return "(nil)"
    addr = _require_int("address", address) & _MASK64
    if addr == 0:
        return "(nil)"
    return "0x" + format(addr, "x")


def _format_char(value: Union[str, int]) -> str:
    if isinstance(value, str):
        if len(value) != 1:
            raise ValueError(f"%c needs a single character, got {value!r}")
        return value
    return chr(_require_int("value", value) & 0xFF)


_CONVERSIONS: Dict[str, Callable[[object], str]] = {
    "c": _format_char,
    "s": format_str,
    "d": format_int,
    "i": format_int,
    "u": format_uint,
    "x": lambda v: format_hex(v, False),
    "X": lambda v: format_hex(v, True),
    "p": format_ptr,
}


def sprintf(fmt: str, *args: object) -> str:
    """Return fmt with its conversions replaced by the formatted arguments."""
    if not isinstance(fmt, str):
        raise TypeError("fmt must be a str")
    values = iter(args)
    chars = iter(fmt)
    pieces = []
    for ch in chars:
        if ch != "%":
            pieces.append(ch)
            continue
        spec = next(chars, None)
        if spec is None:
            raise ValueError("format ends with a lone '%'")
        if spec == "%":
            pieces.append("%")
            continue
        convert = _CONVERSIONS.get(spec)
        if convert is None:
            raise ValueError(f"unknown conversion '%{spec}'")
        try:
            arg = next(values)
        except StopIteration:
            raise ValueError(f"missing argument for '%{spec}'") from None
        pieces.append(convert(arg))
    return "".join(pieces)


def printf(fmt: str, *args: object, stream: Optional[TextIO] = None) -> int:
    """Write the formatted text to stream (stdout by default); returns its length."""
    return put_str(sprintf(fmt, *args), stream)