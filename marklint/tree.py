"""Syntax tree model for parsed markdown documents.

Nodes loosely follow the mdast vocabulary (root, heading, paragraph, list,
listItem, code, html, text, ...). Block nodes carry a Position; inline nodes
and nodes produced after strip_positions() do not.
"""

from collections.abc import Iterator
from dataclasses import dataclass, field
from typing import Any


@dataclass(frozen=True)
class Point:
    """A place in the source: 1-indexed line and column, 0-based offset."""

    line: int
    column: int
    offset: int | None = None

    def __str__(self) -> str:
        return f"{self.line}:{self.column}"

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for JSON serialization."""
        return {"line": self.line, "column": self.column, "offset": self.offset}


@dataclass(frozen=True)
class Position:
    """A range in the source, from start to end (end column is exclusive)."""

    start: Point
    end: Point

    def __str__(self) -> str:
        return f"{self.start}-{self.end}"

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for JSON serialization."""
        return {"start": self.start.to_dict(), "end": self.end.to_dict()}


@dataclass
class Node:
    """A node in the document tree."""

    type: str
    children: list["Node"] = field(default_factory=list)
    value: str | None = None
    position: Position | None = None
    depth: int | None = None  # heading level
    data: dict[str, Any] = field(default_factory=dict)

    def __repr__(self) -> str:
        where = f" {self.position}" if self.position else ""
        return f"<Node {self.type}{where}>"


def walk(
    tree: Node, parent: Node | None = None
) -> Iterator[tuple[Node, Node | None]]:
    """Yield (node, parent) pairs in document order, depth first."""
    yield tree, parent
    for child in tree.children:
        yield from walk(child, tree)


def find_all(tree: Node, node_type: str) -> Iterator[Node]:
    """Yield every node of the given type in document order."""
    for node, _parent in walk(tree):
        if node.type == node_type:
            yield node


def to_string(node: Node) -> str:
    """Return the text content of a node."""
    if node.value is not None:
        return node.value
    return "".join(to_string(child) for child in node.children)


def is_generated(node: Node) -> bool:
    """Check whether a node has no source position."""
    return node.position is None


def strip_positions(tree: Node) -> Node:
    """Remove position information from every node of the tree, in place."""
    for node, _parent in walk(tree):
        node.position = None
    return tree


__all__ = [
    "Node",
    "Point",
    "Position",
    "find_all",
    "is_generated",
    "strip_positions",
    "to_string",
    "walk",
]
