"""Writing characters, strings and numbers to text streams."""

from __future__ import annotations

from typing import TextIO

from pipex.text import itoa


def _as_char(char: int | str) -> str:
    if isinstance(char, str):
        if len(char) != 1:
            raise ValueError(f"expected a single character, got {char!r}")
        return char
    if isinstance(char, int):
        return chr(char & 0xFF)
    raise TypeError(f"expected int or str, got {type(char).__name__}")


def putchar_fd(char: int | str, stream: TextIO) -> None:
    """Write one character to ``stream``."""
    stream.write(_as_char(char))


def putstr_fd(text: str | None, stream: TextIO) -> None:
    """Write ``text`` to ``stream``; ``None`` writes nothing."""
    if text is None:
        return
    stream.write(text)


def putendl_fd(text: str | None, stream: TextIO) -> None:
    """Write ``text`` followed by a newline; ``None`` writes only the newline."""
    putstr_fd(text, stream)
    stream.write("\n")


def putnbr_fd(number: int, stream: TextIO) -> None:
    """Write the decimal form of a signed 32-bit integer to ``stream``."""
    stream.write(itoa(number))