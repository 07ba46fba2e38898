"""Base classes and types for lint rules.

This module provides the rule contract every rule implements, along with
the fixture types rules use to declare their expected behaviour.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any

from pydantic import TypeAdapter, ValidationError

from ..exceptions import InvalidOptionsError

if TYPE_CHECKING:
    from ..messages import RuleFile
    from ..tree import Node


@dataclass(frozen=True)
class Fixture:
    """One input document with the messages a rule must produce for it."""

    input: str = ""
    output: list[str] = field(default_factory=list)
    config: dict[str, Any] = field(default_factory=dict)

    @property
    def positionless(self) -> bool:
        """Whether the rule's logic does not depend on tree positions."""
        return bool(self.config.get("positionless", False))

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "Fixture":
        """Create Fixture from dictionary."""
        return cls(
            input=data.get("input", ""),
            output=list(data.get("output", [])),
            config=dict(data.get("config", {})),
        )


@dataclass(frozen=True)
class RuleDescriptor:
    """Static metadata of a rule: its id and fixtures keyed by setting.

    ``tests`` maps the JSON text of a configuration value to a mapping of
    fixture name to Fixture.
    """

    rule_id: str
    tests: dict[str, dict[str, Fixture]] = field(default_factory=dict)


class BaseRule(ABC):
    """Abstract base class for lint rules.

    Rules inspect a document tree and report problems through the RuleFile
    they are given. They must not mutate the tree, must not keep state
    between calls, and should skip nodes without a position when their
    logic depends on the tree.
    """

    # Validates rule options; None accepts anything
    options_type: Any = None

    @property
    @abstractmethod
    def rule_id(self) -> str:
        """Unique rule identifier (e.g., 'final-newline')."""

    @property
    def name(self) -> str:
        """Human-readable rule name."""
        return self.rule_id.replace("-", " ").capitalize()

    @property
    def description(self) -> str:
        """Detailed description of what this rule checks."""
        return f"Rule {self.rule_id}: {self.name}"

    @property
    def fixtures(self) -> dict[str, dict[str, dict[str, Any]]]:
        """Fixtures keyed by serialized setting, then by fixture name."""
        return {}

    @abstractmethod
    def check(self, tree: "Node", file: "RuleFile", options: Any) -> None:
        """Inspect the tree and report problems.

        Args:
            tree: Root node of the document
            file: Document access and message reporting
            options: Validated rule options, or None for the defaults
        """

    def validate_options(self, options: Any) -> Any:
        """Validate options at attachment time.

        Returns:
            The validated options

        Raises:
            InvalidOptionsError: If the options have the wrong shape
        """
        if options is None or self.options_type is None:
            return options
        try:
            return TypeAdapter(self.options_type).validate_python(
                options, strict=True
            )
        except ValidationError as e:
            detail = "; ".join(err["msg"] for err in e.errors())
            raise InvalidOptionsError(self.rule_id, options, detail) from None

    def describe(self) -> RuleDescriptor:
        """Build the rule's descriptor from its fixtures."""
        return RuleDescriptor(
            rule_id=self.rule_id,
            tests={
                setting: {
                    name: Fixture.from_dict(data) for name, data in cases.items()
                }
                for setting, cases in self.fixtures.items()
            },
        )

    def __repr__(self) -> str:
        """String representation of the rule."""
        return f"<{self.__class__.__name__} {self.rule_id}>"


__all__ = [
    "BaseRule",
    "Fixture",
    "RuleDescriptor",
]
