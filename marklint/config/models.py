"""Configuration models for marklint.

This module provides the Pydantic configuration models controlling which
rules run, how documents are parsed and how the package logs.
"""

from typing import Any

from pydantic import BaseModel, ConfigDict, Field


class ParserSettings(BaseModel):
    """File-level settings passed to the parser and to every rule."""

    model_config = ConfigDict(extra="allow")

    gfm: bool = Field(default=True, description="Enable tables and strikethrough")


class LoggingConfig(BaseModel):
    """Logging configuration."""

    debug: bool = Field(default=False, description="Enable debug logging")
    verbose: bool = Field(default=False, description="Enable info logging")
    format: str = Field(
        default="%(asctime)s %(name)s %(levelname)s %(message)s",
        description="Log record format",
    )


class LintConfig(BaseModel):
    """Configuration for a lint run.

    ``rules`` maps rule ids to configuration values, written in any shape
    the severity resolver accepts. Rules left out are not attached.
    """

    rules: dict[str, Any] = Field(
        default_factory=dict, description="Rule id to severity/options"
    )
    settings: ParserSettings = Field(default_factory=ParserSettings)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)
    message_control: bool = Field(
        default=True, description="Honour lint directives in documents"
    )
    max_workers: int = Field(
        default=4, ge=1, le=64, description="Threads used by lint_files"
    )

    def is_rule_configured(self, rule_id: str) -> bool:
        """Check if a rule has an entry in the configuration."""
        return rule_id in self.rules


__all__ = ["LintConfig", "LoggingConfig", "ParserSettings"]
