"""Diagnostic messages and the per-document message aggregator.

Rules never build LintMessage objects themselves. They receive a RuleFile
bound to their own rule id and resolved severity, and every message they
report goes through the document's MessageAggregator, which keeps emission
order and refuses new messages once the document pass has completed.
"""

from collections.abc import Callable
from dataclasses import dataclass, field, replace
from pathlib import Path
from typing import Any, Union

from .exceptions import SOURCE, ProcessingError
from .tree import Node, Point, Position

Place = Union[Node, Position, Point, None]


def _to_location(place: Place) -> Position | Point | None:
    if isinstance(place, Node):
        return place.position
    return place


@dataclass(frozen=True)
class LintMessage:
    """A single diagnostic produced by a rule."""

    rule_id: str
    reason: str
    position: Position | Point | None = None
    fatal: bool | None = False  # True error, False warning, None info
    source: str = SOURCE
    file: str | None = None

    @property
    def start(self) -> Point | None:
        if isinstance(self.position, Position):
            return self.position.start
        return self.position

    def without_position(self) -> "LintMessage":
        """Return a copy of this message with its position removed."""
        return replace(self, position=None)

    def __str__(self) -> str:
        location = str(self.position) if self.position is not None else ""
        prefix = ":".join(part for part in (self.file, location) if part)
        return f"{prefix}: {self.reason}" if prefix else self.reason

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for JSON serialization."""
        return {
            "rule_id": self.rule_id,
            "reason": self.reason,
            "position": self.position.to_dict() if self.position else None,
            "fatal": self.fatal,
            "source": self.source,
            "file": self.file,
        }


class MessageAggregator:
    """Collects the messages of one document pass, in emission order."""

    def __init__(self, path: str | None = None):
        self.path = path
        self._messages: list[LintMessage] = []
        self._closed = False

    @property
    def messages(self) -> list[LintMessage]:
        return list(self._messages)

    @property
    def closed(self) -> bool:
        return self._closed

    def add(self, message: LintMessage) -> LintMessage:
        if self._closed:
            raise ProcessingError(
                f"Cannot add message after processing completed: {message}",
                rule_id=message.rule_id,
            )
        self._messages.append(message)
        return message

    def report(
        self,
        reason: str,
        place: Place = None,
        *,
        rule_id: str,
        fatal: bool | None,
        source: str = SOURCE,
    ) -> LintMessage:
        """Create a message and append it.

        Args:
            reason: Human-readable description of the problem
            place: Node, position or point the message is anchored at
            rule_id: Identifier of the emitting rule
            fatal: True for errors, False for warnings, None for info
            source: Origin tag of the message

        Returns:
            The appended LintMessage
        """
        return self.add(
            LintMessage(
                rule_id=rule_id,
                reason=reason,
                position=_to_location(place),
                fatal=fatal,
                source=source,
                file=self.path,
            )
        )

    def discard(self, predicate: Callable[[LintMessage], bool]) -> int:
        """Remove messages matching predicate, returning how many were removed."""
        if self._closed:
            raise ProcessingError("Cannot discard messages after processing completed")
        kept = [m for m in self._messages if not predicate(m)]
        removed = len(self._messages) - len(kept)
        self._messages = kept
        return removed

    def bind(self, rule_id: str, fatal: bool | None) -> "MessageReporter":
        """Return a reporter stamping messages with one rule's identity."""
        return MessageReporter(self, rule_id, fatal)

    def close(self) -> None:
        self._closed = True

    def __len__(self) -> int:
        return len(self._messages)


class MessageReporter:
    """Reports messages on behalf of one attached rule."""

    def __init__(self, aggregator: MessageAggregator, rule_id: str, fatal: bool | None):
        self._aggregator = aggregator
        self.rule_id = rule_id
        self.fatal = fatal

    def message(self, reason: str, place: Place = None) -> LintMessage:
        return self._aggregator.report(
            reason, place, rule_id=self.rule_id, fatal=self.fatal
        )

    def info(self, reason: str, place: Place = None) -> LintMessage:
        return self._aggregator.report(reason, place, rule_id=self.rule_id, fatal=None)


@dataclass
class LintFile:
    """A document being linted: path, contents and the resulting messages."""

    contents: str = ""
    path: str | None = None
    messages: list[LintMessage] = field(default_factory=list)

    @classmethod
    def from_path(cls, path: Path | str) -> "LintFile":
        """Read a document from disk."""
        path = Path(path)
        return cls(contents=path.read_text(encoding="utf-8"), path=str(path))

    @property
    def has_fatal(self) -> bool:
        return any(m.fatal for m in self.messages)


@dataclass(frozen=True)
class RuleFile:
    """What a rule sees of the document it checks."""

    contents: str
    path: str | None
    settings: dict[str, Any]
    reporter: MessageReporter

    def message(self, reason: str, place: Place = None) -> LintMessage:
        """Report a problem at the rule's configured severity."""
        return self.reporter.message(reason, place)

    def info(self, reason: str, place: Place = None) -> LintMessage:
        """Report an informational, non-triggering message."""
        return self.reporter.info(reason, place)


__all__ = [
    "LintFile",
    "LintMessage",
    "MessageAggregator",
    "MessageReporter",
    "Place",
    "RuleFile",
]
