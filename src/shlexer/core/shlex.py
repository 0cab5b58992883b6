"""Word splitter and shell-safe string builder sharing one buffer.

Splitting:

    >>> s = Shlex()
    >>> s.init(b"gcc -o 'hello world' main.c")
    >>> [token for token in s]
    [b'gcc', b'-o', b'hello world', b'main.c']

Joining:

    >>> s.reset()
    >>> s.append_quoted(b"foo")
    >>> s.append_quoted(b"Hello, World")
    >>> s.join()
    b"foo 'Hello, World'"

Instances are not thread safe; use one instance per thread.
"""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from typing import TYPE_CHECKING, Any

from shlexer.core.buffer import DEFAULT_CAPACITY, OutputBuffer
from shlexer.core.quoting import append_quoted
from shlexer.core.quoting import quote as quote_bytes
from shlexer.core.tokenizer import Source, Token, Tokenizer
from shlexer.errors import SourceRangeError
from shlexer.utils.logger import get_logger

if TYPE_CHECKING:
    from shlexer.config.schema import Config

log = get_logger(__name__)

DEFAULT_ENCODING = "utf-8"
DEFAULT_ERRORS = "surrogateescape"

# Every ASCII character must encode to its own single byte
ASCII = bytes(range(128))


def check_encoding(encoding: str) -> str:
    """Make sure a codec keeps ASCII bytes as they are.

    The splitter and the quoting encoder look at single ASCII bytes, so codecs
    such as UTF-16 that widen ASCII or add a byte order mark are rejected.

    Raises:
        ValueError: If the codec is unknown or not ASCII compatible
    """
    try:
        encoded = ASCII.decode("ascii").encode(encoding)
    except LookupError:
        raise ValueError(f"Unknown encoding: {encoding}") from None
    except UnicodeError:
        encoded = b""
    if encoded != ASCII:
        raise ValueError(f"Encoding is not ASCII compatible: {encoding}")
    return encoding


class Shlex:
    """Splitter and joiner over a single reusable output buffer.

    A split session starts with :meth:`init` and runs :meth:`next_token`
    until it returns None. A join session starts with :meth:`reset`, appends
    with :meth:`append_quoted` and finishes with :meth:`join`, which leaves the
    instance ready for the next joined string. The buffer storage survives
    both, so an instance can be reused indefinitely; :meth:`free` releases it.

    Results are returned as ``bytes`` copies of the buffer content.
    """

    def __init__(
        self,
        source: Source | str | None = None,
        *,
        initial_capacity: int = DEFAULT_CAPACITY,
        encoding: str = DEFAULT_ENCODING,
        errors: str = DEFAULT_ERRORS,
    ) -> None:
        self.encoding = check_encoding(encoding)
        self.errors = errors
        self._buffer = OutputBuffer(initial_capacity)
        self._tokenizer: Tokenizer | None = None
        self._has_token = False

        if source is not None:
            self.init(source)

    @classmethod
    def from_config(cls, config: Config, source: Source | str | None = None) -> Shlex:
        """Create an instance using the buffer and text settings of a config."""
        return cls(
            source,
            initial_capacity=config.buffer.initial_capacity,
            encoding=config.text.encoding,
            errors=config.text.errors,
        )

    @property
    def attached(self) -> bool:
        """Whether a source is attached for splitting."""
        return self._tokenizer is not None

    @property
    def cursor(self) -> int:
        """Current read offset in the source (0 when detached)."""
        return self._tokenizer.pos if self._tokenizer else 0

    @property
    def capacity(self) -> int:
        """Allocated size of the output buffer."""
        return self._buffer.capacity

    def encode(self, value: str | bytes | bytearray | memoryview) -> bytes:
        """Convert a value to the bytes the lexer works on."""
        if isinstance(value, str):
            return value.encode(self.encoding, self.errors)
        if isinstance(value, (bytes, bytearray, memoryview)):
            return bytes(value)
        raise TypeError(f"Expected str or bytes-like value, got {type(value).__name__}")

    def decode(self, value: bytes) -> str:
        """Convert lexer bytes back to text."""
        return value.decode(self.encoding, self.errors)

    def init(self, source: Source | str, start: int = 0, end: int | None = None) -> None:
        """Attach a source to split tokens from.

        Bytes-like sources are referenced, not copied, and must stay unchanged
        until the split session ends. Text is encoded first.

        Args:
            source: The command line to split
            start: First offset of the range to split
            end: End offset of the range (default: end of source)

        Raises:
            SourceRangeError: If the range lies outside the source
            TypeError: If the source is neither text nor bytes-like
        """
        if isinstance(source, str):
            data: Source = source.encode(self.encoding, self.errors)
        elif isinstance(source, memoryview):
            data = source if source.format == "B" else source.cast("B")
        elif isinstance(source, (bytes, bytearray)):
            data = source
        else:
            raise TypeError(f"Expected str or bytes-like source, got {type(source).__name__}")

        size = len(data)
        if end is None:
            end = size
        if not 0 <= start <= end <= size:
            raise SourceRangeError(start, end, size)

        self._tokenizer = Tokenizer(data, start, end)
        self._buffer.clear()
        self._has_token = False
        log.debug("source_attached", start=start, end=end)

    def next_token(self) -> bytes | None:
        """Split the next token from the source.

        Returns:
            The token bytes, or None once the source is exhausted. A detached
            instance behaves like an empty source.
        """
        tokenizer = self._tokenizer
        if tokenizer is None or not tokenizer.next_token(self._buffer):
            self._has_token = False
            return None

        self._has_token = True
        if not tokenizer.terminated:
            log.debug(
                "unterminated_quote",
                quote_type=tokenizer.quote_type.name,
                start=tokenizer.token_start,
            )
        return self._buffer.value()

    def last_token(self) -> Token | None:
        """Describe the token returned by the last :meth:`next_token` call."""
        if self._tokenizer is None or not self._has_token:
            return None
        return self._tokenizer.token(self._buffer.value())

    def __iter__(self) -> Iterator[bytes]:
        while (token := self.next_token()) is not None:
            yield token

    def tokens(self) -> Iterator[Token]:
        """Iterate over the remaining tokens with their source positions."""
        while (value := self.next_token()) is not None and self._tokenizer is not None:
            yield self._tokenizer.token(value)

    def reset(self) -> None:
        """Detach the source and empty the buffer, keeping its storage."""
        self._tokenizer = None
        self._has_token = False
        self._buffer.clear()
        log.debug("reset", capacity=self._buffer.capacity)

    def append_quoted(self, value: str | bytes | bytearray | memoryview) -> None:
        """Append a value to the joined string, quoting it if necessary."""
        self._has_token = False
        append_quoted(self._buffer, self.encode(value))

    def extend_quoted(self, values: Iterable[str | bytes]) -> None:
        """Append several values with :meth:`append_quoted`."""
        for value in values:
            self.append_quoted(value)

    def join(self) -> bytes:
        """Finish the joined string and start a new one.

        Returns:
            Everything appended since the last join, space separated
        """
        self._buffer.terminate()
        result = self._buffer.value()
        self._buffer.clear()
        return result

    def free(self) -> None:
        """Release the buffer storage and detach the source."""
        self._tokenizer = None
        self._has_token = False
        self._buffer.free()

    def __enter__(self) -> Shlex:
        return self

    def __exit__(self, *exc_info: Any) -> None:
        self.free()


def split(text: str, encoding: str = DEFAULT_ENCODING, errors: str = DEFAULT_ERRORS) -> list[str]:
    """Split a command line into arguments.

    Examples:
        >>> split('gcc -DNAME="hello world" main.c')
        ['gcc', '-DNAME=hello world', 'main.c']
    """
    s = Shlex(text, encoding=encoding, errors=errors)
    return [s.decode(token) for token in s]


def tokenize(text: str | bytes, encoding: str = DEFAULT_ENCODING, errors: str = DEFAULT_ERRORS) -> list[Token]:
    """Split a command line into tokens carrying their source positions.

    Positions are byte offsets into the encoded text.
    """
    return list(Shlex(text, encoding=encoding, errors=errors).tokens())


def join(args: Iterable[str], encoding: str = DEFAULT_ENCODING, errors: str = DEFAULT_ERRORS) -> str:
    """Join arguments into a command line that splits back into the same arguments.

    Examples:
        >>> join(["foo", "bar baz"])
        "foo 'bar baz'"
    """
    s = Shlex(encoding=encoding, errors=errors)
    s.extend_quoted(args)
    return s.decode(s.join())


def quote(value: str, encoding: str = DEFAULT_ENCODING, errors: str = DEFAULT_ERRORS) -> str:
    """Quote a single argument for a shell command line."""
    check_encoding(encoding)
    return quote_bytes(value.encode(encoding, errors)).decode(encoding, errors)
