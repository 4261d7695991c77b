"""Receive messages sent as signals and print each one on its own line."""

from __future__ import annotations

import os
import signal
import sys
from types import FrameType
from typing import List, Optional, TextIO

from .printf import render
from .protocol import ONE_SIGNAL, ZERO_SIGNAL, MessageDecoder


class Server:
    """Decodes incoming signals and writes every complete message."""

    def __init__(self, output: Optional[TextIO] = None) -> None:
        self._output = sys.stdout if output is None else output
        self._decoder = MessageDecoder()

    def handle(self, signum: int, frame: Optional[FrameType]) -> None:
        """Signal handler: take one bit and print the message once complete."""
        message = self._decoder.feed_signal(signum)
        if message is not None:
            self._output.write(message.decode("utf-8", errors="replace") + "\n")
            self._output.flush()

    def install(self) -> None:
        """Register ``handle`` for both bit-carrying signals."""
        for signum in (ZERO_SIGNAL, ONE_SIGNAL):
            signal.signal(signum, self.handle)

    def serve_forever(self) -> None:
        """Announce the process id and wait for signals forever."""
        self._output.write(render("Server PID is : %d\n", os.getpid()))
        self._output.flush()
        while True:
            signal.pause()


def main(argv: Optional[List[str]] = None) -> int:
    server = Server()
    try:
        server.install()
    except (OSError, ValueError):
        sys.stderr.write("Error when setting sigaction\n")
        return 1
    try:
        server.serve_forever()
    except KeyboardInterrupt:
        return 0
    return 0


if __name__ == "__main__":
    sys.exit(main())