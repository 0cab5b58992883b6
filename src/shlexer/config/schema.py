"""Pydantic models for configuration schema."""

from __future__ import annotations

import codecs
from typing import Literal

from pydantic import BaseModel, Field, field_validator

from shlexer.config.defaults import DEFAULT_PROMPT, DEFAULT_STYLES
from shlexer.core.shlex import check_encoding


class BufferConfig(BaseModel):
    """Output buffer sizing."""

    initial_capacity: int = Field(
        default=256, ge=1, description="Bytes allocated on the first append"
    )


class TextConfig(BaseModel):
    """Conversion between text and the bytes the lexer works on."""

    encoding: str = Field(default="utf-8", description="Codec used for str input and output")
    errors: str = Field(default="surrogateescape", description="Codec error handler")

    @field_validator("encoding")
    @classmethod
    def validate_encoding(cls, v: str) -> str:
        """Reject unknown codecs and codecs that are not ASCII compatible."""
        return check_encoding(v)

    @field_validator("errors")
    @classmethod
    def validate_errors(cls, v: str) -> str:
        """Reject unknown codec error handlers."""
        try:
            codecs.lookup_error(v)
        except LookupError:
            raise ValueError(f"Unknown error handler: {v}") from None
        return v


class LoggingConfig(BaseModel):
    """Log output settings."""

    level: Literal["debug", "info", "warning", "error"] = "warning"
    json_output: bool = Field(default=False, alias="json", description="Render JSON lines")

    model_config = {"populate_by_name": True}

    @field_validator("level", mode="before")
    @classmethod
    def normalize_level(cls, v: str) -> str:
        """Accept level names in any case."""
        return v.lower() if isinstance(v, str) else v


class ReplConfig(BaseModel):
    """Interactive splitter settings."""

    prompt: str = Field(default=DEFAULT_PROMPT)
    styles: dict[str, str] = Field(
        default_factory=lambda: dict(DEFAULT_STYLES),
        description="Token class to prompt_toolkit style (unquoted, single, double, unterminated)",
    )

    @field_validator("styles", mode="before")
    @classmethod
    def merge_styles(cls, v: dict[str, str] | None) -> dict[str, str]:
        """Fill in default styles for classes the user did not set."""
        result = dict(DEFAULT_STYLES)
        if v:
            result.update({name.lower(): style for name, style in v.items()})
        return result


class Config(BaseModel):
    """Top-level configuration."""

    buffer: BufferConfig = Field(default_factory=BufferConfig)
    text: TextConfig = Field(default_factory=TextConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)
    repl: ReplConfig = Field(default_factory=ReplConfig)
