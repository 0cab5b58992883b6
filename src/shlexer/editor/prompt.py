"""Interactive splitter using prompt_toolkit."""

from __future__ import annotations

from collections.abc import Callable
from typing import TYPE_CHECKING

from prompt_toolkit import PromptSession
from prompt_toolkit.history import InMemoryHistory

from shlexer.core.shlex import Shlex
from shlexer.editor.lexer import TokenLexer

if TYPE_CHECKING:
    from shlexer.config.schema import Config


class SplitRepl:
    """Read command lines, show their tokens and the canonical re-joined form."""

    def __init__(self, config: Config, output: Callable[[str], None] = print) -> None:
        """Initialize the REPL.

        Args:
            config: Configuration object
            output: Function receiving each line of output
        """
        self.config = config
        self.output = output

        # One instance serves every line so its buffer is reused
        self.shlex = Shlex.from_config(config)
        self.lexer = TokenLexer(config)

        self.session: PromptSession[str] | None = None

    def describe(self, line: str) -> list[str]:
        """Split a line and return the report printed for it."""
        s = self.shlex
        s.init(line)

        report: list[str] = []
        tokens: list[bytes] = []
        for index, token in enumerate(s.tokens()):
            tokens.append(token.value)
            suffix = "" if token.terminated else "  (unterminated quote)"
            report.append(f"[{index}] {s.decode(token.value)!r}{suffix}")

        s.reset()
        s.extend_quoted(tokens)
        report.append(f"=> {s.decode(s.join())}")
        return report

    def run(self) -> int:
        """Run until end of input.

        Returns:
            Exit code
        """
        self.session = PromptSession(
            lexer=self.lexer,
            style=self.lexer.get_style(),
            history=InMemoryHistory(),
        )

        while True:
            try:
                line = self.session.prompt(self.config.repl.prompt)
            except KeyboardInterrupt:
                continue
            except EOFError:
                return 0

            if not line.strip():
                continue

            for report_line in self.describe(line):
                self.output(report_line)


def run_repl(config: Config) -> int:
    """Run the interactive splitter."""
    return SplitRepl(config).run()
