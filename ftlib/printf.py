"""A small printf supporting the conversions %c %s %p %d %i %u %x %X and %%."""

from __future__ import annotations

import sys
from typing import Any, Callable, Dict, Iterator, Optional, TextIO

from ftlib.strings import itoa

__all__ = ["format_hex", "format_pointer", "format_uint", "format_printf", "printf"]

LOWER_HEX = "0123456789abcdef"
UPPER_HEX = "0123456789ABCDEF"

_UINT_MASK = 0xFFFFFFFF
_POINTER_MASK = 0xFFFFFFFFFFFFFFFF
_MISSING = object()


def _require_int(value: Any, conversion: str) -> int:
    if isinstance(value, bool) or not isinstance(value, int):
        raise TypeError(f"%{conversion} needs an int, got {type(value).__name__}")
    return value


def _to_base(n: int, digits: str) -> str:
    if n == 0:
        return digits[0]
    out = []
    base = len(digits)
    while n:
        n, rem = divmod(n, base)
        out.append(digits[rem])
    return "".join(reversed(out))


def format_hex(n: int, upper: bool = False) -> str:
    """Hexadecimal text of ``n`` taken as a 32-bit unsigned integer."""
    n = _require_int(n, "X" if upper else "x") & _UINT_MASK
    return _to_base(n, UPPER_HEX if upper else LOWER_HEX)


def format_uint(n: int) -> str:
    """Decimal text of ``n`` taken as a 32-bit unsigned integer."""
    return str(_require_int(n, "u") & _UINT_MASK)


def format_pointer(p: Any) -> str:
    """Address text: ``(nil)`` for None or 0, else ``0x`` and lowercase hex.

    An int is taken as the address itself; any other object is shown by
    its identity.
    """
    if p is None:
        return "(nil)"
    if isinstance(p, int) and not isinstance(p, bool):
        address = p & _POINTER_MASK
    else:
        address = id(p) & _POINTER_MASK
    if address == 0:
        return "(nil)"
    return "0x" + _to_base(address, LOWER_HEX)


def _format_char(value: Any) -> str:
    if isinstance(value, str):
        if len(value) != 1:
            raise ValueError(f"%c needs a single character, got {value!r}")
        return value
    return chr(_require_int(value, "c") & 0xFF)


def _format_string(value: Any) -> str:
    if value is None:
        return "(null)"
    if not isinstance(value, str):
        raise TypeError(f"%s needs a str, got {type(value).__name__}")
    return value


def _format_int(value: Any) -> str:
    n = _require_int(value, "d") & _UINT_MASK
    if n > 0x7FFFFFFF:
        n -= 1 << 32
    return itoa(n)


_HANDLERS: Dict[str, Callable[[Any], str]] = {
    "c": _format_char,
    "s": _format_string,
    "p": format_pointer,
    "d": _format_int,
    "i": _format_int,
    "u": format_uint,
    "x": lambda value: format_hex(value, False),
    "X": lambda value: format_hex(value, True),
}


def _convert(conversion: str, args: Iterator[Any]) -> str:
    if conversion == "%":
        return "%"
    handler = _HANDLERS.get(conversion)
    if handler is None:
        raise ValueError(f"unsupported conversion %{conversion}")
    value = next(args, _MISSING)
    if value is _MISSING:
        raise ValueError(f"not enough arguments for %{conversion}")
    return handler(value)


def format_printf(fmt: str, *args: Any) -> str:
    """Return ``fmt`` with each conversion replaced by the next argument.

    Unused trailing arguments are ignored.
    """
    if not isinstance(fmt, str):
        raise TypeError(f"format must be a str, got {type(fmt).__name__}")
    remaining = iter(args)
    pieces = []
    pos = 0
    while True:
        percent = fmt.find("%", pos)
        if percent < 0:
            pieces.append(fmt[pos:])
            break
        pieces.append(fmt[pos:percent])
        if percent + 1 >= len(fmt):
            raise ValueError("format ends in an incomplete conversion")
        pieces.append(_convert(fmt[percent + 1], remaining))
        pos = percent + 2
    return "".join(pieces)


def printf(fmt: str, *args: Any, stream: Optional[TextIO] = None) -> int:
    """Write the formatted text to ``stream`` (standard output by default).

    Returns the number of characters written.
    """
    text = format_printf(fmt, *args)
    (sys.stdout if stream is None else stream).write(text)
    return len(text)