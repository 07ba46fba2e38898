"""Fixture conformance harness for lint rules.

Example usage:
    from marklint.testing import assert_fixture, iter_fixture_cases

    for case in iter_fixture_cases():
        assert_fixture(case)
"""

from .fixtures import (
    WHITESPACE_MARKERS,
    FixtureCase,
    iter_fixture_cases,
    iter_rule_cases,
    preprocess,
)
from .harness import (
    FixtureMismatchError,
    FixtureReport,
    assert_fixture,
    assert_rule,
    normalize,
    run_fixture,
)

__all__ = [
    "WHITESPACE_MARKERS",
    "FixtureCase",
    "FixtureMismatchError",
    "FixtureReport",
    "assert_fixture",
    "assert_rule",
    "iter_fixture_cases",
    "iter_rule_cases",
    "normalize",
    "preprocess",
    "run_fixture",
]
