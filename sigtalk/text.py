"""String helpers with C-library semantics: bounded copies, comparisons and splitting."""

from __future__ import annotations

_WHITESPACE = " \t\n\v\f\r"


def _as_bytes(value: str | bytes) -> bytes:
    return value.encode("utf-8") if isinstance(value, str) else bytes(value)


def parse_long(text: str) -> int:
    """Parse a leading decimal integer, skipping whitespace and one optional sign.

    Parsing stops at the first non-digit; a string with no digits yields 0.
    """
    rest = text.lstrip(_WHITESPACE)
    sign = 1
    if rest[:1] in ("+", "-"):
        if rest[0] == "-":
            sign = -1
        rest = rest[1:]
    digits = []
    for char in rest:
        if not "0" <= char <= "9":
            break
        digits.append(char)
    return sign * int("".join(digits)) if digits else 0


def split(text: str, sep: str) -> list[str]:
    """Split ``text`` on the single character ``sep``, dropping empty pieces."""
    if not sep or sep == "\0":
        return [text] if text else []
    return [piece for piece in text.split(sep) if piece]


def trim(text: str, charset: str) -> str:
    """Remove every character found in ``charset`` from both ends of ``text``."""
    return text.strip(charset)


def substring(text: str, start: int, length: int) -> str:
    """Return at most ``length`` characters of ``text`` beginning at ``start``.

    A start past the end of the string gives an empty string.
    """
    if start < 0 or length < 0:
        raise ValueError("start and length must not be negative")
    if start > len(text):
        return ""
    return text[start:start + length]


def find_bounded(haystack: str, needle: str, limit: int) -> int | None:
    """Find ``needle`` lying wholly within the first ``limit`` characters.

    Returns the index of the first match, 0 for an empty needle, or None.
    """
    if not needle:
        return 0
    if limit <= 0:
        return None
    index = haystack.find(needle, 0, limit)
    return index if index >= 0 else None


def compare_bounded(first: str | bytes, second: str | bytes, n: int) -> int:
    """Compare at most ``n`` bytes of two strings, stopping at the end of either.

    Returns the difference of the first mismatching unsigned bytes, or 0.
    """
    left, right = _as_bytes(first), _as_bytes(second)
    for position in range(n):
        a = left[position] if position < len(left) else 0
        b = right[position] if position < len(right) else 0
        if a != b or a == 0:
            return a - b
    return 0


def compare_bytes(first: bytes, second: bytes, n: int) -> int:
    """Compare exactly ``n`` bytes of two buffers.

    Returns the difference of the first mismatching bytes, or 0.
    """
    left, right = _as_bytes(first), _as_bytes(second)
    if n > len(left) or n > len(right):
        raise ValueError("both buffers must hold at least n bytes")
    for a, b in zip(left[:n], right[:n]):
        if a != b:
            return a - b
    return 0


def bounded_copy(src: str, size: int) -> tuple[str, int]:
    """Copy ``src`` into a buffer of ``size`` slots, one kept for the terminator.

    Returns the copied text and the full length of ``src``.
    """
    copied = src[:size - 1] if size > 0 else ""
    return copied, len(src)


def bounded_concat(dst: str | None, src: str, size: int) -> tuple[str, int]:
    """Append ``src`` to ``dst`` inside a buffer of ``size`` slots.

    Returns the resulting text and the length the full result would have had;
    when ``dst`` already fills the buffer that length is ``size + len(src)``.
    """
    if dst is None:
        if size == 0:
            return "", len(src)
        raise TypeError("dst may only be None when size is 0")
    if len(dst) >= size:
        return dst, size + len(src)
    room = size - len(dst) - 1
    return dst + src[:room], len(dst) + len(src)