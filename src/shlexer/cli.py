"""Command-line interface for shlexer."""

from __future__ import annotations

import argparse
import sys
from pathlib import Path

import yaml

from shlexer import __version__
from shlexer.config.defaults import DEFAULT_CONFIG_YAML
from shlexer.config.loader import load_config
from shlexer.config.schema import Config
from shlexer.core.shlex import Shlex
from shlexer.utils.logger import configure_logging


def parse_args(args: list[str] | None = None) -> argparse.Namespace:
    """Parse command-line arguments.

    Args:
        args: Arguments to parse (defaults to sys.argv[1:])

    Returns:
        Parsed arguments
    """
    parser = argparse.ArgumentParser(
        prog="shlexer",
        description="Split command lines into words and join words into shell-safe command lines",
        epilog="Example: shlexer split -- '-I\"./raylib/\" -O3'",
    )

    parser.add_argument(
        "--config",
        "-c",
        type=Path,
        metavar="FILE",
        help="Configuration file path (default: ~/.config/shlexer/config.yaml)",
    )

    parser.add_argument(
        "--config-dir",
        type=Path,
        metavar="DIR",
        help="Drop-in configuration directory (default: ~/.config/shlexer/conf.d/)",
    )

    parser.add_argument(
        "--verbose",
        "-v",
        action="store_true",
        help="Log debug messages to stderr",
    )

    parser.add_argument(
        "--version",
        "-V",
        action="version",
        version=f"%(prog)s {__version__}",
    )

    subparsers = parser.add_subparsers(dest="command", required=True)

    split_parser = subparsers.add_parser("split", help="Print the words of a command line")
    split_parser.add_argument(
        "text",
        nargs="?",
        help="Command line to split (default: read stdin)",
    )
    split_parser.add_argument(
        "--null",
        "-0",
        action="store_true",
        help="Terminate each word with NUL instead of newline",
    )

    join_parser = subparsers.add_parser("join", help="Join words into one shell-safe line")
    join_parser.add_argument("words", nargs="*", help="Words to join")

    quote_parser = subparsers.add_parser("quote", help="Quote each word on its own line")
    quote_parser.add_argument("words", nargs="*", help="Words to quote")

    config_parser = subparsers.add_parser("config", help="Print the effective configuration")
    config_parser.add_argument(
        "--default",
        action="store_true",
        help="Print the default configuration instead",
    )

    subparsers.add_parser("repl", help="Split command lines interactively")

    return parser.parse_args(args)


def _write(data: bytes) -> None:
    """Write raw bytes to stdout."""
    sys.stdout.flush()
    sys.stdout.buffer.write(data)
    sys.stdout.buffer.flush()


def _read_stdin() -> bytes:
    return sys.stdin.buffer.read()


def run_split(config: Config, text: str | None, null: bool) -> int:
    """Print the words of a command line."""
    s = Shlex.from_config(config, _read_stdin() if text is None else text)
    terminator = b"\0" if null else b"\n"
    _write(b"".join(token + terminator for token in s))
    return 0


def run_join(config: Config, words: list[str]) -> int:
    """Print words joined into one command line."""
    s = Shlex.from_config(config)
    s.extend_quoted(words)
    _write(s.join() + b"\n")
    return 0


def run_quote(config: Config, words: list[str]) -> int:
    """Print each word quoted on its own line."""
    s = Shlex.from_config(config)
    for word in words:
        s.append_quoted(word)
        _write(s.join() + b"\n")
    return 0


def run_config(config: Config, default: bool) -> int:
    """Print the configuration as YAML."""
    if default:
        print(DEFAULT_CONFIG_YAML.strip())
    else:
        print(yaml.safe_dump(config.model_dump(by_alias=True), sort_keys=False).strip())
    return 0


def main(args: list[str] | None = None) -> int:
    """Main entry point.

    Args:
        args: Command-line arguments

    Returns:
        Exit code
    """
    parsed = parse_args(args)

    # Load configuration
    try:
        config = load_config(
            config_path=parsed.config,
            dropin_dir=parsed.config_dir,
        )
    except Exception as e:
        print(f"Error loading configuration: {e}", file=sys.stderr)
        return 1

    configure_logging(
        level="debug" if parsed.verbose else config.logging.level,
        json=config.logging.json_output,
    )

    try:
        match parsed.command:
            case "split":
                return run_split(config, parsed.text, parsed.null)
            case "join":
                return run_join(config, parsed.words)
            case "quote":
                return run_quote(config, parsed.words)
            case "config":
                return run_config(config, parsed.default)
            case "repl":
                from shlexer.editor.prompt import run_repl

                return run_repl(config)
            case _:
                print(f"Error: Unknown command: {parsed.command}", file=sys.stderr)
                return 1

    except KeyboardInterrupt:
        return 130
    except Exception as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1


if __name__ == "__main__":
    sys.exit(main())
