"""String helpers: measuring, copying, searching, comparing, converting, splitting."""

from __future__ import annotations

from collections.abc import Callable, MutableSequence
from itertools import zip_longest

_WHITESPACE = "\f\n\r\t\v "
_INT_MIN = -(2**31)
_INT_MAX = 2**31 - 1
_NUL = "\0"


def _char(c: int | str) -> str:
    """Normalise a character given as a 1-char str or an int code."""
    if isinstance(c, str):
        if len(c) != 1:
            raise ValueError(f"expected a single character, got {c!r}")
        return c
    if isinstance(c, int):
        return chr(c & 0xFF)
    raise TypeError(f"expected int or str, got {type(c).__name__}")


def _check_size(name: str, value: int) -> None:
    if value < 0:
        raise ValueError(f"{name} must not be negative")


def strlen(text: str) -> int:
    """Number of characters in ``text``."""
    return len(text)


def strlcpy(dest: str, src: str, size: int) -> tuple[str, int]:
    """Copy ``src`` into a buffer of ``size`` characters, terminator included.

    Returns the new buffer content and the length of ``src``. With a size of
    zero nothing is copied and ``dest`` comes back unchanged.
    """
    _check_size("size", size)
    if size == 0:
        return dest, len(src)
    return src[: size - 1], len(src)


def strlcat(dest: str, src: str, size: int) -> tuple[str, int]:
    """Append ``src`` to ``dest`` within a buffer of ``size`` characters.

    Returns the new buffer content and the length the full result would have
    had. When ``size`` does not exceed the length of ``dest``, ``dest`` comes
    back unchanged and the length reported is ``len(src) + size``.
    """
    _check_size("size", size)
    if size <= len(dest):
        return dest, len(src) + size
    room = size - len(dest) - 1
    return dest + src[:room], len(dest) + len(src)


def strchr(text: str, char: int | str) -> int | None:
    """Index of the first ``char`` in ``text``; NUL matches the end."""
    c = _char(char)
    if c == _NUL:
        return len(text)
    index = text.find(c)
    return None if index < 0 else index


def strrchr(text: str, char: int | str) -> int | None:
    """Index of the last ``char`` in ``text``; NUL matches the end."""
    c = _char(char)
    if c == _NUL:
        return len(text)
    index = text.rfind(c)
    return None if index < 0 else index


def strnstr(haystack: str, needle: str, length: int) -> int | None:
    """Index of ``needle`` wholly inside the first ``length`` chars of ``haystack``."""
    _check_size("length", length)
    if not needle:
        return 0
    index = haystack.find(needle, 0, length)
    return None if index < 0 else index


def strncmp(first: str, second: str, count: int) -> int:
    """Compare at most ``count`` characters; the sign tells the ordering."""
    _check_size("count", count)
    pairs = zip_longest(first[:count], second[:count], fillvalue=_NUL)
    for a, b in pairs:
        if a == _NUL and b == _NUL:
            return 0
        if a != b:
            return ord(a) - ord(b)
    return 0


def atoi(text: str) -> int:
    """Parse a leading decimal integer, wrapping to a signed 32-bit value.

    Leading whitespace is skipped and one sign is accepted; parsing stops at
    the first non-digit. Text without digits gives 0.
    """
    rest = text.lstrip(_WHITESPACE)
    sign = 1
    if rest[:1] in ("+", "-"):
        if rest[0] == "-":
            sign = -1
        rest = rest[1:]
    digits = []
    for ch in rest:
        if not "0" <= ch <= "9":
            break
        digits.append(ch)
    value = int("".join(digits)) * sign if digits else 0
    return (value - _INT_MIN) % 2**32 + _INT_MIN


def strdup(text: str) -> str:
    """A copy of ``text``."""
    return "".join(text)


def substr(text: str, start: int, length: int) -> str:
    """Up to ``length`` characters of ``text`` from ``start``; empty past the end."""
    _check_size("start", start)
    _check_size("length", length)
    if start >= len(text):
        return ""
    return text[start:start + length]


def strjoin(first: str, second: str) -> str:
    """``first`` followed by ``second``."""
    return first + second


def strtrim(text: str, charset: str) -> str:
    """``text`` without the leading and trailing characters found in ``charset``."""
    return text.strip(charset)


def split(text: str, sep: int | str) -> list[str]:
    """Split ``text`` on ``sep``, dropping empty fields."""
    return [field for field in text.split(_char(sep)) if field]


def itoa(number: int) -> str:
    """Decimal representation of a signed 32-bit integer."""
    if not _INT_MIN <= number <= _INT_MAX:
        raise OverflowError(f"{number} does not fit in a signed 32-bit integer")
    return str(number)


def strmapi(text: str, func: Callable[[int, str], str]) -> str:
    """A new string built from ``func(index, char)`` for every character."""
    return "".join(func(index, ch) for index, ch in enumerate(text))


def striteri(
    text: MutableSequence[str], func: Callable[[int, str], str | None]
) -> None:
    """Apply ``func(index, char)`` to each character of ``text`` in place.

    A returned character replaces the one at that index; ``None`` leaves it.
    """
    if isinstance(text, str):
        raise TypeError("striteri needs a mutable sequence of characters")
    for index, ch in enumerate(list(text)):
        result = func(index, ch)
        if result is not None:
            text[index] = result