"""Exception hierarchy for binstring."""
from __future__ import annotations


class BinStringError(Exception):
    """Base exception for binstring"""


class OutOfRangeError(BinStringError, IndexError):
    """Raised when slice bounds or an index fall outside the stored bytes"""

    def __init__(self, start: int, end: int | None, length: int) -> None:
        self.start = start
        self.end = end
        self.length = length
        if end is None:
            message = f"index {start} out of range for {length} bytes"
        else:
            message = f"range [{start}, {end}) out of range for {length} bytes"
        super().__init__(message)


class InvalidTextError(BinStringError, ValueError):
    """Raised by the checked decode when the bytes are not well-formed UTF-8"""

    def __init__(self, offset: int, reason: str) -> None:
        self.offset = offset
        self.reason = reason
        super().__init__(f"invalid UTF-8 at byte offset {offset}: {reason}")


class ConfigError(BinStringError, ValueError):
    """Raised when a configuration file cannot be validated"""


__all__ = [
    "BinStringError",
    "OutOfRangeError",
    "InvalidTextError",
    "ConfigError",
]
