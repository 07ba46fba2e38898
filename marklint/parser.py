"""Markdown parser producing a positioned marklint tree.

Parsing is delegated to markdown-it-py; its token stream is folded into
marklint Nodes. markdown-it only records line ranges for block tokens, so
block positions are computed from the source lines: a block starts at its
first non-blank character after the markers of its enclosing blockquotes
and list items, and ends after the last character of its last non-blank
line. Inline nodes are left without a position.
"""

from dataclasses import dataclass
from functools import lru_cache
from typing import Any

from markdown_it import MarkdownIt
from markdown_it.tree import SyntaxTreeNode

from .lint_logging import get_logger
from .tree import Node, Point, Position, strip_positions

logger = get_logger("parser")

# markdown-it node type -> marklint node type
NODE_TYPES = {
    "heading": "heading",
    "paragraph": "paragraph",
    "blockquote": "blockquote",
    "bullet_list": "list",
    "ordered_list": "list",
    "list_item": "listItem",
    "fence": "code",
    "code_block": "code",
    "html_block": "html",
    "hr": "thematicBreak",
    "table": "table",
    "text": "text",
    "code_inline": "inlineCode",
    "html_inline": "html",
    "em": "emphasis",
    "strong": "strong",
    "s": "delete",
    "link": "link",
    "image": "image",
    "hardbreak": "break",
}


@dataclass(frozen=True)
class _Container:
    """A blockquote or list item whose markers prefix its children's lines."""

    kind: str
    line: int
    marker: str = ""

    def skip(self, text: str, index: int, line: int) -> int:
        """Index just past this container's marker on ``line``, if present."""
        cursor = index
        while cursor < len(text) and text[cursor] == " ":
            cursor += 1
        if self.kind == "blockquote":
            if not text.startswith(">", cursor):
                # lazy continuation
                return index
            cursor += 1
            if cursor < len(text) and text[cursor] in " \t":
                cursor += 1
            return cursor
        if line == self.line and text.startswith(self.marker, cursor):
            return cursor + len(self.marker)
        return index


@lru_cache(maxsize=2)
def _markdown_parser(gfm: bool) -> MarkdownIt:
    md = MarkdownIt("commonmark", {"html": True})
    if gfm:
        md.enable(["table", "strikethrough"])
    return md


class _SourceLines:
    """Line/column arithmetic over the raw document text."""

    def __init__(self, text: str):
        self.text = text
        self.lines = text.split("\n")
        self.offsets: list[int] = []
        offset = 0
        for line in self.lines:
            self.offsets.append(offset)
            offset += len(line) + 1

    def point(self, line: int, column: int) -> Point:
        return Point(line, column, self.offsets[line - 1] + column - 1)

    def document_position(self) -> Position:
        last = len(self.lines)
        return Position(
            start=self.point(1, 1),
            end=self.point(last, len(self.lines[last - 1]) + 1),
        )

    def block_position(
        self, line_map: Any, containers: tuple[_Container, ...] = ()
    ) -> Position | None:
        if not line_map:
            return None
        begin, end = line_map
        last = min(end, len(self.lines)) - 1
        while last > begin and not self.lines[last].strip():
            last -= 1
        if last < begin:
            return None

        first_line = self.lines[begin]
        index = 0
        for container in containers:
            index = container.skip(first_line, index, begin)
        start_column = len(first_line) - len(first_line[index:].lstrip()) + 1
        end_column = len(self.lines[last].rstrip()) + 1
        return Position(
            start=self.point(begin + 1, start_column),
            end=self.point(last + 1, end_column),
        )


def _convert(
    node: SyntaxTreeNode,
    source: _SourceLines,
    containers: tuple[_Container, ...] = (),
) -> list[Node]:
    # inline containers are flattened into their block parent
    if node.type == "inline":
        return [
            c for child in node.children for c in _convert(child, source, containers)
        ]

    if node.type == "softbreak":
        return [Node("text", value="\n")]

    converted = Node(
        type=NODE_TYPES.get(node.type, node.type),
        position=source.block_position(node.map, containers),
    )

    if node.map and node.type == "blockquote":
        containers = (*containers, _Container("blockquote", node.map[0]))
    elif node.map and node.type == "list_item":
        # ordered items carry the number in info and the delimiter in markup
        marker = f"{node.info}{node.markup}"
        containers = (*containers, _Container("list_item", node.map[0], marker))

    if node.type == "heading":
        converted.depth = int(node.tag[1])
    elif node.type in ("fence", "code_block"):
        converted.value = node.content.rstrip("\n")
        converted.data["lang"] = node.info or None
    elif node.type in ("html_block", "html_inline"):
        converted.value = node.content.rstrip("\n")
    elif node.type in ("text", "code_inline"):
        converted.value = node.content
    elif node.type in ("bullet_list", "ordered_list"):
        converted.data["ordered"] = node.type == "ordered_list"
        if "start" in node.attrs:
            converted.data["start"] = int(node.attrs["start"])
    elif node.type == "link":
        converted.data["url"] = node.attrs.get("href")
    elif node.type == "image":
        converted.data["url"] = node.attrs.get("src")
        converted.value = node.content

    if converted.value is None:
        for child in node.children:
            converted.children.extend(_convert(child, source, containers))

    return [converted]


def parse(text: str, settings: dict[str, Any] | None = None) -> Node:
    """Parse markdown text into a positioned tree.

    Args:
        text: Raw document text
        settings: File-level settings; ``gfm`` (default True) enables
            tables and strikethrough. Unknown keys are ignored.

    Returns:
        Root node of the document tree
    """
    settings = settings or {}
    md = _markdown_parser(bool(settings.get("gfm", True)))
    source = _SourceLines(text)

    tree = SyntaxTreeNode(md.parse(text))
    root = Node("root", position=source.document_position())
    for child in tree.children:
        root.children.extend(_convert(child, source))

    logger.debug(f"Parsed document into {len(root.children)} top-level nodes")
    return root


__all__ = ["parse", "strip_positions"]
