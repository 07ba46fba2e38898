"""
Heading rule for the level of the first heading in a document.
"""

from typing import TYPE_CHECKING, Annotated, Any

from pydantic import Field

from ...tree import find_all, is_generated
from ..base import BaseRule

if TYPE_CHECKING:
    from ...messages import RuleFile
    from ...tree import Node


class FirstHeadingLevelRule(BaseRule):
    """Warn when the first heading is not of the expected level."""

    options_type = Annotated[int, Field(ge=1, le=6)]

    @property
    def rule_id(self) -> str:
        return "first-heading-level"

    @property
    def fixtures(self) -> dict[str, dict[str, dict[str, Any]]]:
        return {
            "true": {
                "ok.md": {
                    "input": "# Foo\n\n## Bar\n",
                    "output": [],
                },
                "not-ok.md": {
                    "input": "## Foo\n\n# Bar\n",
                    "output": ["1:1-1:7: First heading level should be `1`"],
                },
            },
            "[1, 2]": {
                "ok.md": {
                    "input": "## Foo\n",
                    "output": [],
                },
                "not-ok.md": {
                    "input": "# Foo\n",
                    "output": ["1:1-1:6: First heading level should be `2`"],
                },
            },
        }

    def check(self, tree: "Node", file: "RuleFile", options: Any) -> None:
        expected = options or 1

        for heading in find_all(tree, "heading"):
            if is_generated(heading):
                continue
            if heading.depth != expected:
                file.message(f"First heading level should be `{expected}`", heading)
            break
