"""POSIX shell word splitter with quote-aware parsing.

Only the lexical rules are applied: single quotes, double quotes and
backslash escapes. Nothing is expanded, globbed or redirected.
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from enum import Enum, auto
from typing import TYPE_CHECKING, Union

if TYPE_CHECKING:
    from shlexer.core.buffer import OutputBuffer

Source = Union[bytes, bytearray, memoryview]

# C locale isspace()
WHITESPACE = frozenset(b" \t\n\v\f\r")

# Characters a backslash may escape inside double quotes (POSIX 2.2.3)
DOUBLE_QUOTE_ESCAPES = frozenset(b'$`\\\n"')

SINGLE_QUOTE = ord("'")
DOUBLE_QUOTE = ord('"')
BACKSLASH = ord("\\")


class QuoteType(Enum):
    """Quoting context of the tokenizer."""

    NONE = auto()
    SINGLE = auto()
    DOUBLE = auto()


@dataclass
class Token:
    """A token split from the source.

    Attributes:
        value: Token bytes with quoting and escapes resolved
        start: Start offset of the raw token in the source
        end: End offset of the raw token in the source (exclusive)
        quote_type: First quoting context entered inside the token
        terminated: False when the source ended inside an open quote
        raw: The raw token bytes including quotes
    """

    value: bytes
    start: int
    end: int
    quote_type: QuoteType = QuoteType.NONE
    terminated: bool = True
    raw: bytes = b""

    def __post_init__(self) -> None:
        if not self.raw:
            self.raw = self.value

    @property
    def is_quoted(self) -> bool:
        """Check if token was quoted."""
        return self.quote_type != QuoteType.NONE

    @property
    def length(self) -> int:
        """Length of the raw token in the source."""
        return self.end - self.start


class Tokenizer:
    """Splits one token per call out of a byte range.

    The tokenizer keeps a reference to the source and never copies it, so the
    source must not change while tokens are being split from it. Each call to
    :meth:`next_token` replaces the content of the output buffer.
    """

    __slots__ = ("source", "start", "end", "pos", "token_start", "quote_type", "terminated")

    def __init__(self, source: Source, start: int = 0, end: int | None = None) -> None:
        self.source = source
        self.start = start
        self.end = len(source) if end is None else end
        self.pos = start

        # Metadata of the last token
        self.token_start = start
        self.quote_type = QuoteType.NONE
        self.terminated = True

    def _skip_whitespace(self) -> None:
        while self.pos < self.end and self.source[self.pos] in WHITESPACE:
            self.pos += 1

    def next_token(self, out: OutputBuffer) -> bool:
        """Split the next token into ``out``.

        Returns:
            False when only whitespace was left (the buffer is untouched)
        """
        self._skip_whitespace()
        if self.pos >= self.end:
            return False

        out.clear()
        self.token_start = self.pos
        self.quote_type = QuoteType.NONE

        state: QuoteType | None = QuoteType.NONE
        while state is not None and self.pos < self.end:
            state = _TRANSITIONS[state](self, out)

        self.terminated = state is None or state is QuoteType.NONE
        out.terminate()
        return True

    def token(self, value: bytes) -> Token:
        """Build a Token describing the last split."""
        return Token(
            value=value,
            start=self.token_start,
            end=self.pos,
            quote_type=self.quote_type,
            terminated=self.terminated,
            raw=bytes(self.source[self.token_start : self.pos]),
        )

    def _open_quote(self, state: QuoteType) -> QuoteType:
        if self.quote_type is QuoteType.NONE:
            self.quote_type = state
        return state

    def _unquoted(self, out: OutputBuffer) -> QuoteType | None:
        char = self.source[self.pos]

        if char == SINGLE_QUOTE:
            self.pos += 1
            return self._open_quote(QuoteType.SINGLE)

        if char == DOUBLE_QUOTE:
            self.pos += 1
            return self._open_quote(QuoteType.DOUBLE)

        if char == BACKSLASH:
            # A trailing backslash has nothing to escape and is dropped
            self.pos += 1
            if self.pos < self.end:
                out.append(self.source[self.pos])
                self.pos += 1
            return QuoteType.NONE

        if char in WHITESPACE:
            # Token is complete; the whitespace is skipped by the next call
            return None

        out.append(char)
        self.pos += 1
        return QuoteType.NONE

    def _single_quoted(self, out: OutputBuffer) -> QuoteType | None:
        char = self.source[self.pos]
        self.pos += 1

        if char == SINGLE_QUOTE:
            return QuoteType.NONE

        out.append(char)
        return QuoteType.SINGLE

    def _double_quoted(self, out: OutputBuffer) -> QuoteType | None:
        char = self.source[self.pos]
        self.pos += 1

        if char == DOUBLE_QUOTE:
            return QuoteType.NONE

        if char != BACKSLASH:
            out.append(char)
            return QuoteType.DOUBLE

        if self.pos >= self.end:
            # Unfinished escape at the end of the source: keep the backslash
            # literally and end the token here.
            out.append(BACKSLASH)
            return QuoteType.DOUBLE

        escaped = self.source[self.pos]
        self.pos += 1
        if escaped not in DOUBLE_QUOTE_ESCAPES:
            out.append(BACKSLASH)
        out.append(escaped)
        return QuoteType.DOUBLE


_TRANSITIONS: dict[QuoteType, Callable[[Tokenizer, OutputBuffer], QuoteType | None]] = {
    QuoteType.NONE: Tokenizer._unquoted,
    QuoteType.SINGLE: Tokenizer._single_quoted,
    QuoteType.DOUBLE: Tokenizer._double_quoted,
}
