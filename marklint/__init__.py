"""marklint - rule-based linting for markdown documents.

Rules are composed into a pipeline, each with its own severity and options,
and run in a single pass over a parsed document.

Example usage:
    from marklint import LintPipeline
    from marklint.rules import FinalNewlineRule

    outcome = LintPipeline().use(FinalNewlineRule(), [2]).process(".")
    if outcome.ok:
        for message in outcome.messages:
            print(message)
"""

__version__ = "1.0.0"

from .config import ConfigLoader, LintConfig, load_config
from .exceptions import (
    SOURCE,
    ConfigurationError,
    InvalidOptionsError,
    InvalidSeverityError,
    MarklintError,
    ProcessingError,
    RuleIdMismatchError,
    UnknownRuleError,
)
from .linter import create_pipeline, lint_files, lint_text
from .messages import LintFile, LintMessage, MessageAggregator
from .outcome import ConfigurationFailure, LintOutcome, ProcessingFailure, Success
from .parser import parse
from .pipeline import AttachedRule, LintPipeline
from .tree import Node, Point, Position, strip_positions

__all__ = [
    # Pipeline
    "AttachedRule",
    "LintPipeline",
    "create_pipeline",
    "lint_files",
    "lint_text",
    # Messages and outcomes
    "LintFile",
    "LintMessage",
    "MessageAggregator",
    "ConfigurationFailure",
    "LintOutcome",
    "ProcessingFailure",
    "Success",
    # Tree
    "Node",
    "Point",
    "Position",
    "parse",
    "strip_positions",
    # Configuration
    "ConfigLoader",
    "LintConfig",
    "load_config",
    # Errors
    "SOURCE",
    "ConfigurationError",
    "InvalidOptionsError",
    "InvalidSeverityError",
    "MarklintError",
    "ProcessingError",
    "RuleIdMismatchError",
    "UnknownRuleError",
]
