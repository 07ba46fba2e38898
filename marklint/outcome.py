"""Typed results of a document pass.

A pass ends in exactly one of three ways: Success carries the linted file
(fatal diagnostics included, they are data), ConfigurationFailure carries a
setup error, ProcessingFailure carries the error that aborted the pass.
"""

from dataclasses import dataclass
from typing import Union

from .exceptions import ConfigurationError, ProcessingError
from .messages import LintFile, LintMessage


@dataclass(frozen=True)
class Success:
    """The document was processed; its messages are final."""

    file: LintFile
    rules_executed: int = 0
    rules_skipped: int = 0
    execution_time_ms: float = 0.0

    ok = True
    kind = "success"

    @property
    def messages(self) -> list[LintMessage]:
        return self.file.messages


@dataclass(frozen=True)
class ConfigurationFailure:
    """The pipeline could not be configured."""

    error: ConfigurationError

    ok = False
    kind = "configuration_error"


@dataclass(frozen=True)
class ProcessingFailure:
    """The document pass was aborted by a parser or rule failure."""

    error: ProcessingError
    path: str | None = None

    ok = False
    kind = "processing_failure"

    @property
    def rule_id(self) -> str | None:
        return self.error.rule_id


LintOutcome = Union[Success, ConfigurationFailure, ProcessingFailure]


__all__ = ["ConfigurationFailure", "LintOutcome", "ProcessingFailure", "Success"]
