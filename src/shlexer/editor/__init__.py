"""Interactive splitter with syntax highlighting."""

from shlexer.editor.lexer import TokenLexer
from shlexer.editor.prompt import SplitRepl, run_repl

__all__ = ["SplitRepl", "TokenLexer", "run_repl"]
