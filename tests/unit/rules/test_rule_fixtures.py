"""Conformance of every registered rule against its declared fixtures.

Each case runs the rule alone over the fixture input, once with positions
and once with positions stripped from the tree.
"""

import pytest

from marklint.testing import assert_fixture, iter_fixture_cases

CASES = list(iter_fixture_cases())


@pytest.mark.parametrize("case", CASES, ids=[case.id for case in CASES])
def test_fixture(case):
    """Test that the rule produces the fixture's expected messages."""
    assert_fixture(case)


def test_every_rule_has_fixtures():
    """Test that no registered rule goes unchecked."""
    covered = {case.rule_id for case in CASES}
    assert covered == {
        "final-newline",
        "first-heading-level",
        "heading-increment",
        "maximum-line-length",
        "no-heading-punctuation",
        "no-multiple-toplevel-headings",
        "no-tabs",
    }
