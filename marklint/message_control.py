"""Comment directives that silence messages.

Supported directives, written as HTML comments in the document:

    <!--lint ignore-->                  next node, every rule
    <!--lint ignore rule-a rule-b-->    next node, listed rules
    <!--lint disable [rule ...]-->      until enabled again or end of parent
    <!--lint enable [rule ...]-->

Messages without a position cannot be located and are never suppressed.
"""

import re
from dataclasses import dataclass

from .lint_logging import get_logger
from .messages import LintMessage, MessageAggregator
from .tree import Node, Point, walk

logger = get_logger("message_control")

CONTROL_RULE_ID = "message-control"
KEYWORDS = ("ignore", "disable", "enable")

DIRECTIVE_PATTERN = re.compile(r"^<!--\s*lint\s+(\S+)(.*?)\s*-->$", re.DOTALL)


@dataclass(frozen=True)
class _Toggle:
    start: Point
    end: Point | None
    disable: bool
    rule_ids: frozenset[str] | None


@dataclass(frozen=True)
class _Ignore:
    start: Point
    end: Point
    rule_ids: frozenset[str] | None


def _key(point: Point) -> tuple[int, int]:
    return (point.line, point.column)


def _applies(rule_ids: frozenset[str] | None, message: LintMessage) -> bool:
    return rule_ids is None or message.rule_id in rule_ids


def _next_positioned_sibling(node: Node, parent: Node) -> Node | None:
    index = parent.children.index(node)
    for sibling in parent.children[index + 1 :]:
        if sibling.position is not None:
            return sibling
    return None


def _is_suppressed(
    message: LintMessage, ignores: list[_Ignore], toggles: list[_Toggle]
) -> bool:
    start = message.start
    if start is None:
        return False
    where = _key(start)

    for ignore in ignores:
        if _applies(ignore.rule_ids, message) and (
            _key(ignore.start) <= where <= _key(ignore.end)
        ):
            return True

    disabled = False
    for toggle in toggles:
        if not _applies(toggle.rule_ids, message):
            continue
        if where < _key(toggle.start):
            continue
        if toggle.end is not None and where > _key(toggle.end):
            continue
        disabled = toggle.disable
    return disabled


def apply_message_control(
    tree: Node, aggregator: MessageAggregator, known_rules: set[str]
) -> int:
    """Drop messages silenced by lint directives in the tree.

    Args:
        tree: Root node of the document
        aggregator: The document's message aggregator
        known_rules: Ids of the rules attached to the pipeline

    Returns:
        Number of messages removed
    """
    ignores: list[_Ignore] = []
    toggles: list[_Toggle] = []
    warnings: list[tuple[str, Node]] = []

    for node, parent in walk(tree):
        if node.type != "html" or node.position is None or parent is None:
            continue
        match = DIRECTIVE_PATTERN.match((node.value or "").strip())
        if not match:
            continue

        keyword = match.group(1)
        names = match.group(2).split()
        if keyword not in KEYWORDS:
            warnings.append(
                (
                    f"Unknown keyword `{keyword}`: expected "
                    "`'enable'`, `'disable'`, or `'ignore'`",
                    node,
                )
            )
            continue

        for name in names:
            if name not in known_rules:
                warnings.append((f"Unknown rule: cannot {keyword} `'{name}'`", node))
        rule_ids = frozenset(names) if names else None

        if keyword == "ignore":
            sibling = _next_positioned_sibling(node, parent)
            if sibling is not None and sibling.position is not None:
                ignores.append(
                    _Ignore(sibling.position.start, sibling.position.end, rule_ids)
                )
        else:
            toggles.append(
                _Toggle(
                    start=node.position.end,
                    end=parent.position.end if parent.position else None,
                    disable=keyword == "disable",
                    rule_ids=rule_ids,
                )
            )

    removed = 0
    if ignores or toggles:
        removed = aggregator.discard(lambda m: _is_suppressed(m, ignores, toggles))
        logger.debug(f"Suppressed {removed} message(s) by lint directives")

    for reason, node in warnings:
        aggregator.report(reason, node, rule_id=CONTROL_RULE_ID, fatal=False)

    return removed


__all__ = ["CONTROL_RULE_ID", "KEYWORDS", "apply_message_control"]
