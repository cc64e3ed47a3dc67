"""Writing characters, strings and integers to a text stream.

Each function writes to ``stream`` (standard output when it is None) and
returns the number of characters written.
"""

from __future__ import annotations

import sys
from typing import Optional, TextIO, Union

from ftlib.strings import itoa

__all__ = ["put_char", "put_str", "put_endl", "put_nbr"]


def _target(stream: Optional[TextIO]) -> TextIO:
    return sys.stdout if stream is None else stream


def put_char(c: Union[int, str], stream: Optional[TextIO] = None) -> int:
    """Write one character; an int is taken as a byte value."""
    if isinstance(c, str):
        if len(c) != 1:
            raise ValueError(f"expected a single character, got {c!r}")
        text = c
    elif isinstance(c, int) and not isinstance(c, bool):
        text = chr(c & 0xFF)
    else:
        raise TypeError(f"expected an int or a one-character str, got {type(c).__name__}")
    _target(stream).write(text)
    return 1


def put_str(s: Optional[str], stream: Optional[TextIO] = None) -> int:
    """Write a string; None writes nothing."""
    if s is None:
        return 0
    _target(stream).write(s)
    return len(s)


def put_endl(s: Optional[str], stream: Optional[TextIO] = None) -> int:
    """Write a string followed by a newline; None writes nothing."""
    if s is None:
        return 0
    _target(stream).write(s + "\n")
    return len(s) + 1


def put_nbr(n: int, stream: Optional[TextIO] = None) -> int:
    """Write a 32-bit signed integer in decimal."""
    return put_str(itoa(n), stream)