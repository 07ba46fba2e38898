"""Explicit registry of lint rules.

Rules are registered by instance; nothing is discovered by scanning the
filesystem. default_registry() holds the builtin rules.
"""

from .base import BaseRule, RuleDescriptor
from .headings import (
    FirstHeadingLevelRule,
    HeadingIncrementRule,
    NoHeadingPunctuationRule,
    NoMultipleToplevelHeadingsRule,
)
from .whitespace import FinalNewlineRule, MaximumLineLengthRule, NoTabsRule

BUILTIN_RULES: tuple[type[BaseRule], ...] = (
    FinalNewlineRule,
    FirstHeadingLevelRule,
    HeadingIncrementRule,
    MaximumLineLengthRule,
    NoHeadingPunctuationRule,
    NoMultipleToplevelHeadingsRule,
    NoTabsRule,
)


class RuleRegistry:
    """Maps rule identifiers to rule instances, in registration order."""

    def __init__(self, rules: list[BaseRule] | None = None):
        self._rules: dict[str, BaseRule] = {}
        for rule in rules or []:
            self.register(rule)

    def register(self, rule: BaseRule) -> None:
        """Register a rule.

        Args:
            rule: Rule instance to register.

        Raises:
            ValueError: If a rule with the same ID is already registered.
        """
        if rule.rule_id in self._rules:
            raise ValueError(f"Rule {rule.rule_id} is already registered")
        self._rules[rule.rule_id] = rule

    def unregister(self, rule_id: str) -> bool:
        """Unregister a rule by ID.

        Returns:
            True if rule was unregistered, False if not found.
        """
        return self._rules.pop(rule_id, None) is not None

    def get_rule(self, rule_id: str) -> BaseRule | None:
        """Get a rule by ID, or None if not registered."""
        return self._rules.get(rule_id)

    def list_rules(self) -> list[str]:
        """Ordered identifiers of every registered rule."""
        return list(self._rules)

    def load_rule_descriptor(self, rule_id: str) -> RuleDescriptor:
        """Get the descriptor (id and fixtures) of a registered rule.

        Raises:
            KeyError: If the rule is not registered.
        """
        rule = self._rules.get(rule_id)
        if rule is None:
            raise KeyError(f"Rule {rule_id} is not registered")
        return rule.describe()

    def __contains__(self, rule_id: object) -> bool:
        return rule_id in self._rules

    def __len__(self) -> int:
        return len(self._rules)


def default_registry() -> RuleRegistry:
    """Create a registry holding every builtin rule."""
    return RuleRegistry([rule_class() for rule_class in BUILTIN_RULES])


__all__ = ["BUILTIN_RULES", "RuleRegistry", "default_registry"]
