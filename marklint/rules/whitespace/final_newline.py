"""
Whitespace rule for a missing newline at the end of a file.

The check reads the raw contents instead of the tree, so its fixtures are
positionless. The message is anchored at the start of the file.
"""

from typing import TYPE_CHECKING, Any

from ...tree import Point
from ..base import BaseRule

if TYPE_CHECKING:
    from ...messages import RuleFile
    from ...tree import Node


class FinalNewlineRule(BaseRule):
    """Warn when a non-empty file does not end in a newline."""

    @property
    def rule_id(self) -> str:
        return "final-newline"

    @property
    def fixtures(self) -> dict[str, dict[str, dict[str, Any]]]:
        return {
            "true": {
                "ok.md": {
                    "input": "Alpha\n",
                    "config": {"positionless": True},
                    "output": [],
                },
                "empty.md": {
                    "input": "",
                    "config": {"positionless": True},
                    "output": [],
                },
                "not-ok.md": {
                    "input": "Alpha",
                    "config": {"positionless": True},
                    "output": ["1:1: Missing newline character at end of file"],
                },
            },
        }

    def check(self, tree: "Node", file: "RuleFile", options: Any) -> None:
        contents = file.contents
        if contents and not contents.endswith("\n"):
            file.message("Missing newline character at end of file", Point(1, 1, 0))
