"""prompt_toolkit lexer highlighting tokens by quoting context."""

from __future__ import annotations

from collections.abc import Callable
from typing import TYPE_CHECKING

from prompt_toolkit.document import Document
from prompt_toolkit.formatted_text import StyleAndTextTuples
from prompt_toolkit.lexers import Lexer
from prompt_toolkit.styles import Style

from shlexer.core.shlex import Shlex
from shlexer.core.tokenizer import QuoteType, Token

if TYPE_CHECKING:
    from shlexer.config.schema import Config

QUOTE_CLASSES = {
    QuoteType.NONE: "unquoted",
    QuoteType.SINGLE: "single",
    QuoteType.DOUBLE: "double",
}

UNTERMINATED_CLASS = "unterminated"


def token_class(token: Token) -> str:
    """Style class name for a token."""
    if not token.terminated:
        return UNTERMINATED_CLASS
    return QUOTE_CLASSES[token.quote_type]


class TokenLexer(Lexer):
    """Lexer for command line syntax highlighting based on shell quoting."""

    def __init__(self, config: Config, shlex: Shlex | None = None) -> None:
        """Initialize the lexer.

        Args:
            config: Configuration object
            shlex: Splitter to reuse between documents (created from config if None)
        """
        self.config = config
        self.shlex = shlex or Shlex.from_config(config)

    def get_style(self) -> Style:
        """Get the prompt_toolkit style for the token classes."""
        return Style.from_dict(self.config.repl.styles)

    def lex_line(self, line: str) -> StyleAndTextTuples:
        """Style a single line of text."""
        data = self.shlex.encode(line)
        self.shlex.init(data)

        styled: StyleAndTextTuples = []
        last_end = 0
        for token in self.shlex.tokens():
            # Whitespace before this token
            if token.start > last_end:
                styled.append(("", self.shlex.decode(data[last_end : token.start])))

            styled.append((f"class:{token_class(token)}", self.shlex.decode(token.raw)))
            last_end = token.end

        if last_end < len(data):
            styled.append(("", self.shlex.decode(data[last_end:])))

        return styled

    def lex_document(self, document: Document) -> Callable[[int], StyleAndTextTuples]:
        """Lex a document and return a function that returns styled text for each line.

        Args:
            document: The document to lex

        Returns:
            Function that takes a line number and returns styled text tuples
        """
        lines = document.lines

        def get_line(line_number: int) -> StyleAndTextTuples:
            if line_number < len(lines):
                return self.lex_line(lines[line_number])
            return []

        return get_line
