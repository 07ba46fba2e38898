"""
Heading rule for trailing punctuation.

Headings are titles, not sentences: a trailing period, colon or question
mark usually slips in by accident.
"""

from typing import TYPE_CHECKING, Any

from ...tree import find_all, is_generated, to_string
from ..base import BaseRule

if TYPE_CHECKING:
    from ...messages import RuleFile
    from ...tree import Node

DEFAULT_PUNCTUATION = ".,;:!?"


class NoHeadingPunctuationRule(BaseRule):
    """Warn when a heading ends in punctuation."""

    options_type = str

    @property
    def rule_id(self) -> str:
        return "no-heading-punctuation"

    @property
    def description(self) -> str:
        return (
            "Warns when a heading ends with one of the configured punctuation "
            f"characters (default `{DEFAULT_PUNCTUATION}`)."
        )

    @property
    def fixtures(self) -> dict[str, dict[str, dict[str, Any]]]:
        return {
            "true": {
                "ok.md": {
                    "input": "# Hello\n\n# Hello world\n",
                    "output": [],
                },
                "not-ok.md": {
                    "input": "# Hello:\n\n# Hello?\n\n# Hello!\n\n# Hello,\n\n# Hello;\n",
                    "output": [
                        "1:1-1:9: Don’t add a trailing `:` to headings",
                        "3:1-3:9: Don’t add a trailing `?` to headings",
                        "5:1-5:9: Don’t add a trailing `!` to headings",
                        "7:1-7:9: Don’t add a trailing `,` to headings",
                        "9:1-9:9: Don’t add a trailing `;` to headings",
                    ],
                },
                "setext.md": {
                    "input": "Hello.\n=====\n",
                    "output": ["1:1-2:6: Don’t add a trailing `.` to headings"],
                },
                "nested.md": {
                    "input": "> # Hello.\n\n- # Hello!\n",
                    "output": [
                        "1:3-1:11: Don’t add a trailing `.` to headings",
                        "3:3-3:11: Don’t add a trailing `!` to headings",
                    ],
                },
            },
            '[1, ",;:!?"]': {
                "ok.md": {
                    "input": "# Hello...\n",
                    "output": [],
                },
                "not-ok.md": {
                    "input": "# Hello?\n",
                    "output": ["1:1-1:9: Don’t add a trailing `?` to headings"],
                },
            },
        }

    def check(self, tree: "Node", file: "RuleFile", options: Any) -> None:
        punctuation = options if options is not None else DEFAULT_PUNCTUATION

        for heading in find_all(tree, "heading"):
            if is_generated(heading):
                continue
            tail = to_string(heading).rstrip()[-1:]
            if tail and tail in punctuation:
                file.message(f"Don’t add a trailing `{tail}` to headings", heading)
