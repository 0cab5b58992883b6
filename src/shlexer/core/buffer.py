"""Reusable output buffer shared by the splitter and the joiner."""

from __future__ import annotations

from shlexer.errors import BufferAllocationError
from shlexer.utils.logger import get_logger

log = get_logger(__name__)

DEFAULT_CAPACITY = 256
TERMINATOR = 0


class OutputBuffer:
    """Append-only byte buffer with a logical length separate from its capacity.

    The backing ``bytearray`` only ever grows (doubling, starting from
    ``initial_capacity``). ``clear()`` forgets the content but keeps the
    storage, so one buffer can serve any number of split and join sessions.

    Usage:
        >>> buf = OutputBuffer()
        >>> buf.extend(b"foo")
        >>> buf.terminate()
        >>> buf.value()
        b'foo'
        >>> buf.capacity
        256
    """

    __slots__ = ("_data", "_length", "_initial_capacity")

    def __init__(self, initial_capacity: int = DEFAULT_CAPACITY) -> None:
        if initial_capacity < 1:
            raise ValueError(f"initial_capacity must be positive, got {initial_capacity}")
        self._initial_capacity = initial_capacity
        self._data = bytearray()
        self._length = 0

    @property
    def capacity(self) -> int:
        """Number of bytes allocated for the buffer."""
        return len(self._data)

    def __len__(self) -> int:
        return self._length

    def __bool__(self) -> bool:
        return self._length > 0

    def reserve(self, size: int) -> None:
        """Make sure at least ``size`` bytes fit without another allocation."""
        if size <= len(self._data):
            return

        old_capacity = len(self._data)
        new_capacity = old_capacity * 2 if old_capacity else self._initial_capacity
        while new_capacity < size:
            new_capacity *= 2

        try:
            self._grow(new_capacity - old_capacity)
        except (MemoryError, OverflowError) as e:
            raise BufferAllocationError(new_capacity, old_capacity) from e

        log.debug("buffer_grown", old_capacity=old_capacity, new_capacity=new_capacity)

    def _grow(self, extra: int) -> None:
        """Extend the backing storage by ``extra`` zeroed bytes.

        This is the only place the buffer allocates.
        """
        self._data += bytes(extra)

    def append(self, byte: int) -> None:
        """Append a single byte."""
        if self._length >= len(self._data):
            self.reserve(self._length + 1)
        self._data[self._length] = byte
        self._length += 1

    def extend(self, chunk: bytes) -> None:
        """Append a run of bytes."""
        end = self._length + len(chunk)
        self.reserve(end)
        self._data[self._length : end] = chunk
        self._length = end

    def terminate(self) -> None:
        """Write the terminator right after the content.

        The terminator is not part of the logical length.
        """
        self.reserve(self._length + 1)
        self._data[self._length] = TERMINATOR

    def value(self) -> bytes:
        """Copy of the logical content.

        The copy stays valid after later calls mutate the buffer, at the cost
        of one allocation per result.
        """
        return bytes(self._data[: self._length])

    def clear(self) -> None:
        """Drop the content but keep the allocated storage."""
        self._length = 0

    def free(self) -> None:
        """Release the allocated storage."""
        if self._data:
            log.debug("buffer_released", capacity=len(self._data))
        self._data = bytearray()
        self._length = 0
