"""POSIX shell aware word splitter and shell-safe string joiner."""

from shlexer.core import (
    OutputBuffer,
    QuoteType,
    Shlex,
    Token,
    join,
    needs_quoting,
    quote,
    split,
    tokenize,
)
from shlexer.errors import BufferAllocationError, ShlexError, SourceRangeError

__version__ = "0.1.0"

__all__ = [
    "BufferAllocationError",
    "OutputBuffer",
    "QuoteType",
    "Shlex",
    "ShlexError",
    "SourceRangeError",
    "Token",
    "join",
    "needs_quoting",
    "quote",
    "split",
    "tokenize",
]
