"""Exceptions raised by shlexer.

Malformed quoting in the source is never an error: unterminated quotes and
dangling backslashes are recovered while splitting. Only the conditions
below are reported to callers.
"""

from __future__ import annotations


class ShlexError(Exception):
    """Base class for shlexer errors."""


class BufferAllocationError(ShlexError, MemoryError):
    """The output buffer could not grow to hold more bytes.

    The operation that triggered the growth is aborted and the buffer keeps
    its previous contents and capacity.
    """

    def __init__(self, requested: int, capacity: int) -> None:
        self.requested = requested
        self.capacity = capacity
        super().__init__(
            f"Cannot grow output buffer from {capacity} to {requested} bytes"
        )


class SourceRangeError(ShlexError, ValueError):
    """The requested start/end range lies outside the source."""

    def __init__(self, start: int, end: int, size: int) -> None:
        self.start = start
        self.end = end
        self.size = size
        super().__init__(
            f"Invalid source range [{start}, {end}) for a source of {size} bytes"
        )
