"""
Heading rule for documents with more than one top level heading.
"""

from typing import TYPE_CHECKING, Annotated, Any

from pydantic import Field

from ...tree import find_all, is_generated
from ..base import BaseRule

if TYPE_CHECKING:
    from ...messages import RuleFile
    from ...tree import Node


class NoMultipleToplevelHeadingsRule(BaseRule):
    """Warn when more than one heading has the top level depth."""

    options_type = Annotated[int, Field(ge=1, le=6)]

    @property
    def rule_id(self) -> str:
        return "no-multiple-toplevel-headings"

    @property
    def description(self) -> str:
        return (
            "Warns when multiple headings share the top level depth "
            "(default 1). Each repeat is reported at its own position."
        )

    @property
    def fixtures(self) -> dict[str, dict[str, dict[str, Any]]]:
        return {
            "[1, 1]": {
                "ok.md": {
                    "input": "# Foo\n\n## Bar\n",
                    "output": [],
                },
                "not-ok.md": {
                    "input": "# Foo\n\n# Bar\n",
                    "output": [
                        "3:1-3:6: Don’t use multiple top level headings (3:1)"
                    ],
                },
                "repeated.md": {
                    "input": "# Foo\n\n# Bar\n\n# Baz\n",
                    "output": [
                        "3:1-3:6: Don’t use multiple top level headings (3:1)",
                        "5:1-5:6: Don’t use multiple top level headings (5:1)",
                    ],
                },
            },
            '["warn", 2]': {
                "not-ok.md": {
                    "input": "## Foo\n\n## Bar\n",
                    "output": [
                        "3:1-3:7: Don’t use multiple top level headings (3:1)"
                    ],
                },
            },
        }

    def check(self, tree: "Node", file: "RuleFile", options: Any) -> None:
        depth = options or 1
        seen = False

        for heading in find_all(tree, "heading"):
            if is_generated(heading) or heading.depth != depth:
                continue
            if seen:
                file.message(
                    "Don’t use multiple top level headings "
                    f"({heading.position.start})",
                    heading,
                )
            seen = True
