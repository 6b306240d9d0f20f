"""Bit framing for messages carried one bit per signal.

Each byte goes out least significant bit first: a set bit is sent as SIGUSR1,
a clear bit as SIGUSR2. A message ends with a NUL byte.
"""

from __future__ import annotations

from collections.abc import Iterator

BITS_PER_BYTE = 8


def encode_byte(byte: int) -> tuple[int, ...]:
    """Return the eight bits of ``byte``, least significant first."""
    if not 0 <= byte <= 0xFF:
        raise ValueError(f"byte out of range: {byte}")
    return tuple((byte >> shift) & 1 for shift in range(BITS_PER_BYTE))


def encode_message(message: str | bytes) -> Iterator[int]:
    """Yield the bits of ``message`` followed by those of a terminating NUL.

    Text is encoded as UTF-8. Anything after an embedded NUL is not sent,
    since the NUL already ends the message.
    """
    data = message.encode("utf-8") if isinstance(message, str) else bytes(message)
    data = data.split(b"\0", 1)[0]
    for byte in (*data, 0):
        yield from encode_byte(byte)


class FrameDecoder:
    """Rebuild bytes from bits, starting afresh whenever the sender changes."""

    def __init__(self) -> None:
        self._sender: int | None = None
        self._count = 0
        self._byte = 0

    def _reset(self) -> None:
        self._count = 0
        self._byte = 0

    def feed(self, sender: int, bit: int | bool) -> int | None:
        """Take one bit from ``sender``; return the byte once eight have arrived."""
        if sender != self._sender:
            self._sender = sender
            self._reset()
        if bit:
            self._byte |= 1 << self._count
        self._count += 1
        if self._count < BITS_PER_BYTE:
            return None
        byte = self._byte
        self._reset()
        return byte