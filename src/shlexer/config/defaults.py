"""Default configuration values."""

DEFAULT_PROMPT = "shlex> "

DEFAULT_STYLES: dict[str, str] = {
    "unquoted": "",
    "single": "ansigreen",
    "double": "ansicyan",
    "unterminated": "ansired bold",
}

DEFAULT_CONFIG_YAML = """
buffer:
  initial_capacity: 256

text:
  encoding: utf-8
  errors: surrogateescape

logging:
  level: warning
  json: false

repl:
  prompt: "shlex> "
  styles:
    unquoted: ""
    single: "ansigreen"
    double: "ansicyan"
    unterminated: "ansired bold"
"""
