"""Bounded string operations and integer/text conversion.

Positions are returned as indexes into the string, or None where nothing
is found. The end of a string acts as a terminating NUL character, so
searching for code point 0 finds ``len(s)``.
"""

from __future__ import annotations

from typing import Optional, Tuple, Union

__all__ = [
    "strlcpy",
    "strlcat",
    "strchr",
    "strrchr",
    "strncmp",
    "strnstr",
    "atoi",
    "itoa",
]

INT_MIN = -(2**31)
INT_MAX = 2**31 - 1

_WHITESPACE = " \t\v\f\n\r"


def _wrap_int32(value: int) -> int:
    value &= 0xFFFFFFFF
    return value - 2**32 if value > INT_MAX else value


def _char_code(c: Union[int, str]) -> int:
    """Reduce a search character to a code in (-128, 128), as the search does."""
    if isinstance(c, str):
        if len(c) != 1:
            raise ValueError(f"expected a single character, got {c!r}")
        c = ord(c)
    if isinstance(c, bool) or not isinstance(c, int):
        raise TypeError(f"expected an int or a one-character str, got {type(c).__name__}")
    code = abs(c) % 128
    return -code if c < 0 else code


def _code_at(s: str, index: int) -> int:
    return ord(s[index]) if index < len(s) else 0


def strlcpy(src: str, size: int) -> Tuple[str, int]:
    """Copy ``src`` into a buffer of ``size`` characters including the terminator.

    Returns the copied text (at most ``size - 1`` characters) and the full
    length of ``src``, which shows whether the copy was truncated.
    """
    if size < 0:
        raise ValueError(f"size must not be negative, got {size}")
    if size == 0:
        return "", len(src)
    return src[: size - 1], len(src)


def strlcat(dst: str, src: str, size: int) -> Tuple[str, int]:
    """Append ``src`` to ``dst`` within a buffer of ``size`` characters.

    Returns the resulting text and the length the result would have had
    without truncation. When ``size`` leaves no room past ``dst``, ``dst``
    is returned unchanged with ``size + len(src)``.
    """
    if size < 0:
        raise ValueError(f"size must not be negative, got {size}")
    if size == 0:
        return dst, len(src)
    if size <= len(dst):
        return dst, size + len(src)
    room = size - 1 - len(dst)
    return dst + src[:room], len(dst) + len(src)


def strchr(s: str, c: Union[int, str]) -> Optional[int]:
    """Index of the first occurrence of ``c`` in ``s``, or None.

    The character is taken modulo 128; code 0 matches the end of the string.
    """
    code = _char_code(c)
    if code == 0:
        return len(s)
    return next((i for i, ch in enumerate(s) if ord(ch) == code), None)


def strrchr(s: str, c: Union[int, str]) -> Optional[int]:
    """Index of the last occurrence of ``c`` in ``s``, or None.

    The character is taken modulo 128; code 0 matches the end of the string.
    """
    code = _char_code(c)
    if code == 0:
        return len(s)
    found = None
    for i, ch in enumerate(s):
        if ord(ch) == code:
            found = i
    return found


def strncmp(s1: str, s2: str, n: int) -> int:
    """Compare at most ``n`` characters.

    Returns the difference between the first pair of differing character
    codes (the end of a string counting as 0), or 0 when they match.
    """
    if n < 0:
        raise ValueError(f"count must not be negative, got {n}")
    for i in range(min(n, len(s1) + 1)):
        a, b = _code_at(s1, i), _code_at(s2, i)
        if a != b or a == 0:
            return a - b
    return 0


def strnstr(big: str, little: str, length: int) -> Optional[int]:
    """Index of the first ``little`` wholly inside the first ``length`` characters of ``big``.

    An empty ``little`` is found at index 0.
    """
    if length < 0:
        raise ValueError(f"length must not be negative, got {length}")
    if not little:
        return 0
    needle = len(little)
    for i in range(min(len(big), length)):
        if needle > length - i:
            break
        if big.startswith(little, i):
            return i
    return None


def atoi(s: str) -> int:
    """Parse a leading decimal integer.

    Leading whitespace and one optional sign are accepted; parsing stops
    at the first non-digit. An absent number gives 0. The result wraps
    around to a 32-bit signed integer.
    """
    stripped = s.lstrip(_WHITESPACE)
    sign = 1
    if stripped[:1] == "-":
        sign = -1
        stripped = stripped[1:]
    elif stripped[:1] == "+":
        stripped = stripped[1:]
    value = 0
    for ch in stripped:
        if not "0" <= ch <= "9":
            break
        value = value * 10 + ord(ch) - ord("0")
    return _wrap_int32(sign * value)


def itoa(n: int) -> str:
    """Decimal text of a 32-bit signed integer."""
    if isinstance(n, bool) or not isinstance(n, int):
        raise TypeError(f"expected an int, got {type(n).__name__}")
    if not INT_MIN <= n <= INT_MAX:
        raise OverflowError(f"{n} does not fit in a 32-bit signed integer")
    return str(n)