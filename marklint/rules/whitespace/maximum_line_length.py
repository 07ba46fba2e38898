"""
Whitespace rule for overly long lines.

Lines are measured on the raw contents. Lines inside fenced or indented
code blocks and HTML blocks are skipped when the tree carries positions.
"""

from typing import TYPE_CHECKING, Annotated, Any

from pydantic import Field

from ...tree import Point, walk
from ..base import BaseRule

if TYPE_CHECKING:
    from ...messages import RuleFile
    from ...tree import Node

DEFAULT_MAXIMUM = 80
IGNORED_NODE_TYPES = {"code", "html"}


class MaximumLineLengthRule(BaseRule):
    """Warn when a line is longer than the configured maximum."""

    options_type = Annotated[int, Field(ge=1)]

    @property
    def rule_id(self) -> str:
        return "maximum-line-length"

    @property
    def fixtures(self) -> dict[str, dict[str, dict[str, Any]]]:
        return {
            "[1, 20]": {
                "ok.md": {
                    "input": "This line is short.\n",
                    "config": {"positionless": True},
                    "output": [],
                },
                "not-ok.md": {
                    "input": "This line is a bit too long.\n",
                    "config": {"positionless": True},
                    "output": ["1:29: Line must be at most 20 characters"],
                },
                "code.md": {
                    "input": "```\nThis line is a bit too long.\n```\n",
                    "config": {"positionless": True},
                    "output": [],
                },
            },
        }

    def check(self, tree: "Node", file: "RuleFile", options: Any) -> None:
        maximum = options or DEFAULT_MAXIMUM

        skipped: set[int] = set()
        for node, _parent in walk(tree):
            if node.type in IGNORED_NODE_TYPES and node.position is not None:
                skipped.update(
                    range(node.position.start.line, node.position.end.line + 1)
                )

        offset = 0
        for line_number, line in enumerate(file.contents.split("\n"), start=1):
            if len(line) > maximum and line_number not in skipped:
                file.message(
                    f"Line must be at most {maximum} characters",
                    Point(line_number, len(line) + 1, offset + len(line)),
                )
            offset += len(line) + 1
