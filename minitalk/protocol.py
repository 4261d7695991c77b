"""Signal-level message protocol.

Every byte travels as eight signals, most significant bit first: SIGUSR1
carries a 0 bit and SIGUSR2 carries a 1 bit. A zero byte ends a message.
"""

from __future__ import annotations

import signal
from typing import Iterator, Optional, Union

ZERO_SIGNAL = signal.SIGUSR1
ONE_SIGNAL = signal.SIGUSR2
BITS_PER_BYTE = 8
TERMINATOR = 0

Payload = Union[str, bytes, bytearray]


def _as_bytes(data: Payload) -> bytes:
    if isinstance(data, str):
        return data.encode("utf-8")
    return bytes(data)


def encode_bits(data: Payload) -> Iterator[int]:
    """Yield the bits of ``data`` followed by a terminating zero byte."""
    for byte in _as_bytes(data) + bytes([TERMINATOR]):
        for shift in reversed(range(BITS_PER_BYTE)):
            yield (byte >> shift) & 1


def bit_to_signal(bit: int) -> signal.Signals:
    """Return the signal that carries ``bit``."""
    if bit == 1:
        return ONE_SIGNAL
    if bit == 0:
        return ZERO_SIGNAL
    raise ValueError(f"bit must be 0 or 1, not {bit!r}")


def signal_to_bit(signum: int) -> int:
    """Return the bit carried by ``signum``."""
    if signum == ONE_SIGNAL:
        return 1
    if signum == ZERO_SIGNAL:
        return 0
    raise ValueError(f"signal {signum!r} carries no bit")


class MessageDecoder:
    """Rebuilds messages from a stream of bits."""

    def __init__(self) -> None:
        self._byte = 0
        self._count = 0
        self._buffer = bytearray()

    @property
    def pending(self) -> bytes:
        """Bytes of the message received so far."""
        return bytes(self._buffer)

    def feed(self, bit: int) -> Optional[bytes]:
        """Take one bit; return the whole message once its terminator arrives."""
        self._byte = (self._byte << 1) | (1 if bit else 0)
        self._count += 1
        if self._count < BITS_PER_BYTE:
            return None
        byte, self._byte, self._count = self._byte, 0, 0
        if byte == TERMINATOR:
            message = bytes(self._buffer)
            self._buffer.clear()
            return message
        self._buffer.append(byte)
        return None

    def feed_signal(self, signum: int) -> Optional[bytes]:
        """Take one signal; return the whole message once it is complete."""
        return self.feed(signal_to_bit(signum))