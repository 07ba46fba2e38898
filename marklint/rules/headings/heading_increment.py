"""
Heading rule for skipped heading levels.
"""

from typing import TYPE_CHECKING, Any

from ...tree import find_all, is_generated
from ..base import BaseRule

if TYPE_CHECKING:
    from ...messages import RuleFile
    from ...tree import Node


class HeadingIncrementRule(BaseRule):
    """Warn when a heading is more than one level deeper than the previous."""

    @property
    def rule_id(self) -> str:
        return "heading-increment"

    @property
    def fixtures(self) -> dict[str, dict[str, dict[str, Any]]]:
        return {
            "true": {
                "ok.md": {
                    "input": "# Alpha\n\n## Bravo\n\n# Charlie\n\n## Delta\n",
                    "output": [],
                },
                "not-ok.md": {
                    "input": "# Alpha\n\n### Bravo\n",
                    "output": [
                        "3:1-3:10: Heading levels should increment by one level at a time"
                    ],
                },
            },
        }

    def check(self, tree: "Node", file: "RuleFile", options: Any) -> None:
        previous = None

        for heading in find_all(tree, "heading"):
            if is_generated(heading):
                continue
            if previous is not None and heading.depth > previous + 1:
                file.message(
                    "Heading levels should increment by one level at a time", heading
                )
            previous = heading.depth
