"""Receive messages sent one bit per signal and print them."""

from __future__ import annotations

import os
import signal
import sys
from collections.abc import Callable, Sequence
from typing import IO, Any

from sigtalk.printf import printf
from sigtalk.protocol import FrameDecoder


class Server:
    """Decode incoming signals and write each completed byte to a stream.

    When a NUL byte ends a message, the sender is acknowledged with SIGUSR1.
    """

    def __init__(
        self,
        stream: IO[Any] | None = None,
        kill: Callable[[int, int], object] | None = None,
    ) -> None:
        self._stream = getattr(sys.stdout, "buffer", sys.stdout) if stream is None else stream
        self._kill = kill
        self._decoder = FrameDecoder()

    def handle(self, signum: int, sender: int) -> int | None:
        """Process one signal from ``sender``; return the byte it completed, if any."""
        byte = self._decoder.feed(sender, signum == signal.SIGUSR1)
        if byte is None:
            return None
        printf("%c", byte, stream=self._stream)
        flush = getattr(self._stream, "flush", None)
        if flush is not None:
            flush()
        if byte == 0:
            send = os.kill if self._kill is None else self._kill
            send(sender, signal.SIGUSR1)
        return byte


def main(argv: Sequence[str] | None = None) -> int:
    """Print the process id, then receive messages until interrupted."""
    watched = {signal.SIGUSR1, signal.SIGUSR2}
    server = Server()
    printf("PID : %d\n\n", os.getpid(), stream=server._stream)
    flush = getattr(server._stream, "flush", None)
    if flush is not None:
        flush()
    signal.pthread_sigmask(signal.SIG_BLOCK, watched)
    try:
        while True:
            info = signal.sigwaitinfo(watched)
            server.handle(info.si_signo, info.si_pid)
    except KeyboardInterrupt:
        return 0
    finally:
        signal.pthread_sigmask(signal.SIG_UNBLOCK, watched)


if __name__ == "__main__":
    sys.exit(main())