"""Fixture cases collected from rule descriptors.

Fixture input is plain text with two visible whitespace markers, so that
whitespace-sensitive cases read unambiguously: ``»`` is a tab and ``·`` is a
space.
"""

import json
from collections.abc import Iterator
from dataclasses import dataclass
from typing import Any

from ..rules.base import BaseRule, Fixture
from ..rules.registry import RuleRegistry, default_registry

WHITESPACE_MARKERS = {"»": "\t", "·": " "}


def preprocess(value: str) -> str:
    """Replace whitespace markers in fixture input by real whitespace."""
    for marker, replacement in WHITESPACE_MARKERS.items():
        value = value.replace(marker, replacement)
    return value


@dataclass(frozen=True)
class FixtureCase:
    """One fixture of one rule under one configuration setting."""

    rule: BaseRule
    setting: str  # JSON text of the configuration value
    name: str
    fixture: Fixture

    @property
    def rule_id(self) -> str:
        return self.rule.rule_id

    @property
    def config(self) -> Any:
        """Configuration value the rule is attached with."""
        return json.loads(self.setting)

    @property
    def id(self) -> str:
        return f"{self.rule_id}/{self.setting}/{self.name}"


def iter_rule_cases(rule: BaseRule) -> Iterator[FixtureCase]:
    """Yield every fixture case declared by one rule."""
    descriptor = rule.describe()
    for setting, fixtures in descriptor.tests.items():
        for name, fixture in fixtures.items():
            yield FixtureCase(rule=rule, setting=setting, name=name, fixture=fixture)


def iter_fixture_cases(registry: RuleRegistry | None = None) -> Iterator[FixtureCase]:
    """Yield every fixture case of every registered rule, in order."""
    if registry is None:
        registry = default_registry()
    for rule_id in registry.list_rules():
        rule = registry.get_rule(rule_id)
        if rule is not None:
            yield from iter_rule_cases(rule)


__all__ = [
    "WHITESPACE_MARKERS",
    "FixtureCase",
    "iter_fixture_cases",
    "iter_rule_cases",
    "preprocess",
]
