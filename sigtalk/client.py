"""Send a message to a server process as a stream of signals."""

from __future__ import annotations

import os
import signal
import sys
import time
from collections.abc import Callable, Sequence

from sigtalk.printf import printf
from sigtalk.protocol import encode_message
from sigtalk.text import parse_long

DEFAULT_DELAY = 0.0004
ACK_MESSAGE = "Message received by server\n"


def send_message(
    pid: int,
    message: str | bytes,
    delay: float = DEFAULT_DELAY,
    kill: Callable[[int, int], object] | None = None,
) -> int:
    """Signal ``message`` bit by bit to ``pid``, pausing ``delay`` seconds per bit.

    Returns the number of signals sent.
    """
    send = os.kill if kill is None else kill
    sent = 0
    for bit in encode_message(message):
        send(pid, signal.SIGUSR1 if bit else signal.SIGUSR2)
        time.sleep(delay)
        sent += 1
    return sent


def _acknowledge(signum: int, frame: object) -> None:
    if signum == signal.SIGUSR1:
        printf(ACK_MESSAGE)


def main(argv: Sequence[str] | None = None) -> int:
    """Run the client: ``client PID MESSAGE``."""
    args = list(sys.argv[1:] if argv is None else argv)
    if len(args) < 2:
        print("usage: client PID MESSAGE", file=sys.stderr)
        return 2
    pid = parse_long(args[0])
    if pid <= 0:
        print(f"client: invalid pid: {args[0]}", file=sys.stderr)
        return 1
    signal.signal(signal.SIGUSR1, _acknowledge)
    try:
        send_message(pid, os.fsencode(args[1]))
    except OSError as error:
        print(f"client: {error}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())