"""Shell-safe quoting for joining arguments back into one command line."""

from __future__ import annotations

import string
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from shlexer.core.buffer import OutputBuffer

SAFE_PUNCTUATION = b"_@%+=:,./-"
SAFE_BYTES = (string.ascii_letters + string.digits).encode("ascii") + SAFE_PUNCTUATION

SEPARATOR = ord(" ")
EMPTY_QUOTED = b"''"

# Close the single quote, emit a double-quoted single quote, reopen.
ESCAPED_SINGLE_QUOTE = b"'\"'\"'"


def needs_quoting(value: bytes) -> bool:
    """Check if a value must be quoted to survive splitting unchanged.

    Empty values need quoting so they still produce a token. Anything else
    needs quoting as soon as it holds a byte outside ``SAFE_BYTES``.
    """
    if not value:
        return True
    return bool(value.translate(None, SAFE_BYTES))


def quote(value: bytes) -> bytes:
    """Return the shell-safe form of a value.

    Examples:
        >>> quote(b"main.c")
        b'main.c'
        >>> quote(b"hello world")
        b"'hello world'"
        >>> quote(b"")
        b"''"
    """
    if not value:
        return EMPTY_QUOTED
    if not needs_quoting(value):
        return bytes(value)
    return b"'" + value.replace(b"'", ESCAPED_SINGLE_QUOTE) + b"'"


def append_quoted(buffer: OutputBuffer, value: bytes) -> None:
    """Append a quoted value, separated by a space from earlier content."""
    if buffer:
        buffer.append(SEPARATOR)
    buffer.extend(quote(value))
