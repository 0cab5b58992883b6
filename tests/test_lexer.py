"""Tests for the editor lexer and REPL."""

from prompt_toolkit.document import Document
from prompt_toolkit.styles import Style

from shlexer.core.tokenizer import QuoteType, Token
from shlexer.editor.lexer import TokenLexer, token_class
from shlexer.editor.prompt import SplitRepl


class TestTokenClass:
    """Tests for token_class function."""

    def test_quote_types(self):
        """Test that each quoting context maps to its class."""
        assert token_class(Token(b"a", 0, 1)) == "unquoted"
        assert token_class(Token(b"a", 0, 3, quote_type=QuoteType.SINGLE)) == "single"
        assert token_class(Token(b"a", 0, 3, quote_type=QuoteType.DOUBLE)) == "double"

    def test_unterminated(self):
        """Test that unterminated tokens get their own class."""
        token = Token(b"a", 0, 2, quote_type=QuoteType.DOUBLE, terminated=False)

        assert token_class(token) == "unterminated"


class TestTokenLexer:
    """Tests for TokenLexer."""

    def test_styles_each_token(self, empty_config):
        """Test that tokens are styled by quoting and whitespace kept."""
        lexer = TokenLexer(empty_config)

        styled = lexer.lex_line("foo \"bar baz\" 'q' \"open")

        assert styled == [
            ("class:unquoted", "foo"),
            ("", " "),
            ("class:double", '"bar baz"'),
            ("", " "),
            ("class:single", "'q'"),
            ("", " "),
            ("class:unterminated", '"open'),
        ]

    def test_leading_and_trailing_whitespace(self, empty_config):
        """Test that surrounding whitespace is preserved."""
        lexer = TokenLexer(empty_config)

        assert lexer.lex_line("  a  ") == [
            ("", "  "),
            ("class:unquoted", "a"),
            ("", "  "),
        ]

    def test_non_ascii_text(self, empty_config):
        """Test that multi-byte characters are mapped back to text."""
        lexer = TokenLexer(empty_config)

        assert lexer.lex_line("café 'ü x'") == [
            ("class:unquoted", "café"),
            ("", " "),
            ("class:single", "'ü x'"),
        ]

    def test_text_round_trips(self, empty_config):
        """Test that the styled fragments concatenate to the input."""
        lexer = TokenLexer(empty_config)
        line = " -I\"./raylib/\"  -C 'x y' \\ z "

        assert "".join(text for _, text in lexer.lex_line(line)) == line

    def test_lex_document(self, empty_config):
        """Test styling a multi-line document line by line."""
        lexer = TokenLexer(empty_config)
        get_line = lexer.lex_document(Document("a b\n'c d'"))

        assert get_line(0) == [("class:unquoted", "a"), ("", " "), ("class:unquoted", "b")]
        assert get_line(1) == [("class:single", "'c d'")]
        assert get_line(5) == []

    def test_get_style(self, sample_config):
        """Test building the prompt_toolkit style."""
        lexer = TokenLexer(sample_config)

        assert isinstance(lexer.get_style(), Style)


class TestSplitRepl:
    """Tests for the REPL report."""

    def test_describe(self, empty_config):
        """Test the report for a line."""
        repl = SplitRepl(empty_config)

        assert repl.describe("foo 'bar baz'") == [
            "[0] 'foo'",
            "[1] 'bar baz'",
            "=> foo 'bar baz'",
        ]

    def test_describe_unterminated(self, empty_config):
        """Test that unterminated quotes are reported."""
        repl = SplitRepl(empty_config)

        assert repl.describe('"open') == [
            "[0] 'open'  (unterminated quote)",
            "=> open",
        ]

    def test_reuses_buffer(self, empty_config):
        """Test that the same instance serves consecutive lines."""
        repl = SplitRepl(empty_config)
        repl.describe("x" * 300)
        capacity = repl.shlex.capacity

        repl.describe("y")

        assert capacity == 512
        assert repl.shlex.capacity == capacity
