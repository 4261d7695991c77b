"""Send text messages between processes over SIGUSR1 and SIGUSR2, with small text helpers."""

__version__ = "1.0.0"