"""Building new strings from existing ones: slicing, joining, trimming,
splitting and per-character mapping."""

from __future__ import annotations

from typing import Callable, MutableSequence, Optional

__all__ = ["substr", "strjoin", "strtrim", "split", "strmapi", "striteri"]


def _require_str(value: object, name: str) -> str:
    if not isinstance(value, str):
        raise TypeError(f"{name} must be a str, got {type(value).__name__}")
    return value


def substr(s: str, start: int, length: int) -> str:
    """Return at most ``length`` characters of ``s`` beginning at ``start``.

    A ``start`` at or past the end of ``s`` gives an empty string.
    """
    _require_str(s, "s")
    if start < 0:
        raise ValueError(f"start must not be negative, got {start}")
    if length < 0:
        raise ValueError(f"length must not be negative, got {length}")
    if start >= len(s):
        return ""
    return s[start:start + length]


def strjoin(s1: str, s2: str) -> str:
    """Return ``s1`` followed by ``s2``."""
    return _require_str(s1, "s1") + _require_str(s2, "s2")


def strtrim(s: str, charset: str) -> str:
    """Remove every leading and trailing character that appears in ``charset``."""
    _require_str(s, "s")
    _require_str(charset, "charset")
    if not charset:
        return s
    return s.strip(charset)


def split(s: str, sep: str) -> list[str]:
    """Split ``s`` on the single character ``sep``, dropping empty pieces."""
    _require_str(s, "s")
    _require_str(sep, "sep")
    if len(sep) != 1:
        raise ValueError(f"separator must be a single character, got {sep!r}")
    return [part for part in s.split(sep) if part]


def strmapi(s: str, func: Callable[[int, str], str]) -> str:
    """Return a new string made of ``func(index, char)`` for each character of ``s``."""
    _require_str(s, "s")
    return "".join(func(index, char) for index, char in enumerate(s))


def striteri(
    chars: MutableSequence[str], func: Callable[[int, str], Optional[str]]
) -> MutableSequence[str]:
    """Apply ``func(index, char)`` to each character of ``chars`` in place.

    When ``func`` returns a character it replaces the one at that index;
    when it returns None the character is left as it was. ``chars`` is
    returned for convenience.
    """
    for index, char in enumerate(chars):
        replacement = func(index, char)
        if replacement is not None:
            chars[index] = replacement
    return chars