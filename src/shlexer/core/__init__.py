"""Core functionality: output buffer, tokenizer and quoting encoder."""

from shlexer.core.buffer import OutputBuffer
from shlexer.core.quoting import needs_quoting
from shlexer.core.shlex import Shlex, check_encoding, join, quote, split, tokenize
from shlexer.core.tokenizer import QuoteType, Token, Tokenizer

__all__ = [
    "OutputBuffer",
    "QuoteType",
    "Shlex",
    "Token",
    "Tokenizer",
    "check_encoding",
    "join",
    "needs_quoting",
    "quote",
    "split",
    "tokenize",
]
