"""Send a message to a running server, one signal per bit."""

from __future__ import annotations

import os
import sys
import time
from typing import List, Optional

from .protocol import Payload, bit_to_signal, encode_bits
from .textutils import atoi

DEFAULT_DELAY = 0.0001


class SendError(Exception):
    """A signal could not be delivered to the server."""


def parse_pid(text: str) -> int:
    """Return the process id in ``text``; it must be all digits and positive."""
    if not text or any(char not in "0123456789" for char in text):
        raise ValueError(f"invalid process id: {text!r}")
    pid = atoi(text)
    if pid <= 0:
        raise ValueError(f"invalid process id: {text!r}")
    return pid


def send_message(pid: int, text: Payload, delay: float = DEFAULT_DELAY) -> None:
    """Send ``text`` and its terminating zero byte to process ``pid``."""
    for bit in encode_bits(text):
        try:
            os.kill(pid, bit_to_signal(bit))
        except OSError as exc:
            raise SendError(
                "Failure when trying to send signal\n"
                "Check PID or if target server is running"
            ) from exc
        time.sleep(delay)


def main(argv: Optional[List[str]] = None) -> int:
    args = sys.argv[1:] if argv is None else argv
    if len(args) != 2:
        sys.stderr.write("Wrong number of arguments\n")
        return 0
    try:
        pid = parse_pid(args[0])
    except ValueError:
        sys.stderr.write("Wrong PID\n")
        return 0
    try:
        send_message(pid, args[1])
    except SendError as exc:
        sys.stderr.write(f"{exc}\n")
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())