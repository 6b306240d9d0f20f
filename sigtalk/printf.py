"""A small printf supporting the %c %s %d %i %u %x %X %p and %% conversions."""

from __future__ import annotations

import io
import sys
from collections.abc import Iterator
from typing import Any, TextIO

CONVERSIONS = "%csdiuxXp"
_HEX_DIGITS = "0123456789abcdef"


def _to_int32(value: int) -> int:
    value &= 0xFFFFFFFF
    return value - (1 << 32) if value >= 1 << 31 else value


def _hex(value: int) -> str:
    digits = []
    while True:
        value, remainder = divmod(value, 16)
        digits.append(_HEX_DIGITS[remainder])
        if value == 0:
            break
    return "".join(reversed(digits))


def _char_byte(value: Any) -> int:
    if isinstance(value, (str, bytes)):
        if len(value) != 1:
            raise TypeError("%c expects a single character")
        return ord(value) & 0xFF
    return int(value) & 0xFF


def _render(fmt: str, args: tuple[Any, ...]) -> Iterator[str | bytes]:
    """Yield output pieces; %c conversions come out as single raw bytes."""
    values = iter(args)

    def next_arg() -> Any:
        try:
            return next(values)
        except StopIteration:
            raise TypeError("not enough arguments for format string") from None

    chars = iter(fmt)
    for char in chars:
        if char != "%":
            yield char
            continue
        conv = next(chars, None)
        if conv is None:
            return
        if conv not in CONVERSIONS:
            yield "%"
            yield conv
        elif conv == "%":
            yield "%"
        elif conv == "c":
            yield bytes([_char_byte(next_arg())])
        elif conv == "s":
            text = next_arg()
            yield "(null)" if text is None else str(text)
        elif conv in "di":
            yield str(_to_int32(int(next_arg())))
        elif conv == "u":
            yield str(int(next_arg()) & 0xFFFFFFFF)
        elif conv in "xX":
            digits = _hex(int(next_arg()) & 0xFFFFFFFF)
            yield digits.upper() if conv == "X" else digits
        else:
            pointer = next_arg()
            if not pointer:
                yield "(nil)"
            else:
                yield "0x" + _hex(int(pointer) & 0xFFFFFFFFFFFFFFFF)


def format_message(fmt: str, *args: Any) -> str:
    """Render ``fmt`` with ``args``; %c bytes become the matching Latin-1 character."""
    return "".join(
        piece.decode("latin-1") if isinstance(piece, bytes) else piece
        for piece in _render(fmt, args)
    )


def printf(fmt: str, *args: Any, stream: TextIO | io.IOBase | None = None) -> int:
    """Write the rendered format to ``stream`` (stdout by default).

    Binary streams receive %c values as raw bytes and other text as UTF-8.
    Returns the number of characters (text streams) or bytes written.
    """
    target = sys.stdout if stream is None else stream
    if isinstance(target, (io.RawIOBase, io.BufferedIOBase)):
        data = b"".join(
            piece if isinstance(piece, bytes) else piece.encode("utf-8")
            for piece in _render(fmt, args)
        )
        target.write(data)
        return len(data)
    text = format_message(fmt, *args)
    target.write(text)
    return len(text)