"""
Whitespace rule for hard tabs anywhere in a file.
"""

from typing import TYPE_CHECKING, Any

from ...tree import Point
from ..base import BaseRule

if TYPE_CHECKING:
    from ...messages import RuleFile
    from ...tree import Node


class NoTabsRule(BaseRule):
    """Warn on every hard tab character."""

    @property
    def rule_id(self) -> str:
        return "no-tabs"

    @property
    def fixtures(self) -> dict[str, dict[str, dict[str, Any]]]:
        # » stands for a tab and · for a space in fixture input
        return {
            "true": {
                "ok.md": {
                    "input": "Foo Bar\n\n····Foo\n",
                    "config": {"positionless": True},
                    "output": [],
                },
                "not-ok.md": {
                    "input": "»Foo\n\nBar»baz\n",
                    "config": {"positionless": True},
                    "output": [
                        "1:1: Use spaces instead of hard-tabs",
                        "3:4: Use spaces instead of hard-tabs",
                    ],
                },
            },
        }

    def check(self, tree: "Node", file: "RuleFile", options: Any) -> None:
        offset = 0
        for line_number, line in enumerate(file.contents.split("\n"), start=1):
            for index, char in enumerate(line):
                if char == "\t":
                    file.message(
                        "Use spaces instead of hard-tabs",
                        Point(line_number, index + 1, offset + index),
                    )
            offset += len(line) + 1
