"""
Lint rules for marklint.

This package provides the rule contract, the severity resolver, the rule
registry and the builtin rules.

Example usage:
    from marklint.rules import default_registry, resolve_severity

    registry = default_registry()
    rule = registry.get_rule("final-newline")
    resolved = resolve_severity(rule.rule_id, ["error"])
"""

from .base import BaseRule, Fixture, RuleDescriptor
from .headings import (
    FirstHeadingLevelRule,
    HeadingIncrementRule,
    NoHeadingPunctuationRule,
    NoMultipleToplevelHeadingsRule,
)
from .registry import BUILTIN_RULES, RuleRegistry, default_registry
from .severity import ResolvedSeverity, SeverityLevel, resolve_severity
from .whitespace import FinalNewlineRule, MaximumLineLengthRule, NoTabsRule

__all__ = [
    # Base types
    "BaseRule",
    "Fixture",
    "RuleDescriptor",
    # Severity
    "ResolvedSeverity",
    "SeverityLevel",
    "resolve_severity",
    # Registry
    "BUILTIN_RULES",
    "RuleRegistry",
    "default_registry",
    # Rules
    "FinalNewlineRule",
    "FirstHeadingLevelRule",
    "HeadingIncrementRule",
    "MaximumLineLengthRule",
    "NoHeadingPunctuationRule",
    "NoMultipleToplevelHeadingsRule",
    "NoTabsRule",
]
