"""Pipeline composing rules into a single pass over a document.

This module provides LintPipeline, which attaches rules with their resolved
configuration, runs them over a parsed document and returns a LintOutcome.
"""

import time
from collections.abc import Callable
from dataclasses import dataclass
from typing import Any

from .exceptions import MarklintError, ProcessingError
from .lint_logging import get_logger
from .message_control import apply_message_control
from .messages import LintFile, MessageAggregator, RuleFile
from .outcome import LintOutcome, ProcessingFailure, Success
from .parser import parse
from .rules.base import BaseRule
from .rules.severity import ResolvedSeverity, SeverityLevel, resolve_severity
from .tree import Node

logger = get_logger("pipeline")

Transform = Callable[[Node], Node | None]
Parser = Callable[[str, dict[str, Any]], Node]


@dataclass(frozen=True)
class AttachedRule:
    """A rule together with its resolved configuration."""

    rule: BaseRule
    config: ResolvedSeverity

    @property
    def rule_id(self) -> str:
        return self.rule.rule_id

    @property
    def enabled(self) -> bool:
        return self.config.enabled


class LintPipeline:
    """Runs attached rules over documents.

    Configuration errors surface from use(), before any document is
    processed. A pass over a document never raises: it returns Success or
    ProcessingFailure.
    """

    def __init__(self, parser: Parser | None = None, message_control: bool = True):
        """Initialize the pipeline.

        Args:
            parser: Callable turning text and settings into a tree.
                Defaults to the markdown-it based parser.
            message_control: Whether lint directives in the document
                can silence messages.
        """
        self._parser = parser or parse
        self._message_control = message_control
        self._attached: list[AttachedRule] = []
        self._transforms: list[Transform] = []
        self._settings: dict[str, Any] = {}

    def use(
        self,
        rule: BaseRule | type[BaseRule],
        config: Any = SeverityLevel.WARN,
    ) -> "LintPipeline":
        """Attach a rule.

        A bare boolean is handled here rather than by the resolver: False
        records the rule as disabled, True attaches it as an error.

        Args:
            rule: Rule instance or class
            config: Severity, ``[severity, options]`` or options

        Returns:
            The pipeline, for chaining

        Raises:
            InvalidSeverityError: If the severity is not recognised
            InvalidOptionsError: If the rule rejects the options
        """
        if isinstance(rule, type):
            rule = rule()

        if config is False:
            resolved = ResolvedSeverity(SeverityLevel.OFF)
        elif config is True:
            resolved = ResolvedSeverity(SeverityLevel.ERROR)
        else:
            resolved = resolve_severity(rule.rule_id, config)

        if resolved.enabled:
            resolved = ResolvedSeverity(
                resolved.level, rule.validate_options(resolved.options)
            )

        attached = AttachedRule(rule, resolved)
        for index, existing in enumerate(self._attached):
            if existing.rule_id == rule.rule_id:
                logger.debug(f"Reconfiguring rule {rule.rule_id}")
                self._attached[index] = attached
                break
        else:
            self._attached.append(attached)

        return self

    def use_transform(self, transform: Transform) -> "LintPipeline":
        """Add a tree transform, run after parsing and before any rule."""
        self._transforms.append(transform)
        return self

    def with_settings(self, settings: dict[str, Any]) -> "LintPipeline":
        """Merge file-level settings, passed to the parser and to rules."""
        self._settings.update(settings)
        return self

    @property
    def attached(self) -> list[AttachedRule]:
        return list(self._attached)

    @property
    def settings(self) -> dict[str, Any]:
        return dict(self._settings)

    def process(self, document: LintFile | str) -> LintOutcome:
        """Lint one document.

        Args:
            document: LintFile or raw text

        Returns:
            Success with the linted file, or ProcessingFailure. On failure
            the file keeps no messages.
        """
        file = document if isinstance(document, LintFile) else LintFile(document)
        file.messages = []
        aggregator = MessageAggregator(file.path)
        try:
            return self._run(file, aggregator)
        finally:
            aggregator.close()

    def _run(self, file: LintFile, aggregator: MessageAggregator) -> LintOutcome:
        start_time = time.perf_counter()
        try:
            tree = self._parser(file.contents, dict(self._settings))
            for transform in self._transforms:
                tree = transform(tree) or tree
        except Exception as e:
            logger.error(f"Failed to parse {file.path or '<input>'}: {e}")
            return ProcessingFailure(self._wrap(e, "Cannot parse document"), file.path)

        rules_executed = 0
        rules_skipped = 0
        for attached in self._attached:
            if not attached.enabled:
                rules_skipped += 1
                continue

            rule_file = RuleFile(
                contents=file.contents,
                path=file.path,
                settings=dict(self._settings),
                reporter=aggregator.bind(attached.rule_id, attached.config.fatal),
            )
            try:
                attached.rule.check(tree, rule_file, attached.config.options)
            except Exception as e:
                logger.error(f"Rule {attached.rule_id} failed on {file.path}: {e}")
                return ProcessingFailure(
                    self._wrap(
                        e, f"Rule `{attached.rule_id}` failed", attached.rule_id
                    ),
                    file.path,
                )
            rules_executed += 1

        if self._message_control:
            apply_message_control(
                tree, aggregator, {a.rule_id for a in self._attached}
            )

        file.messages = aggregator.messages

        return Success(
            file=file,
            rules_executed=rules_executed,
            rules_skipped=rules_skipped,
            execution_time_ms=(time.perf_counter() - start_time) * 1000,
        )

    def process_sync(self, document: LintFile | str) -> LintFile:
        """Lint one document, raising instead of returning a failure."""
        outcome = self.process(document)
        if isinstance(outcome, Success):
            return outcome.file
        raise outcome.error

    @staticmethod
    def _wrap(
        error: Exception, context: str, rule_id: str | None = None
    ) -> ProcessingError:
        if isinstance(error, ProcessingError):
            return error
        if isinstance(error, MarklintError):
            wrapped = ProcessingError(str(error), rule_id=rule_id)
        else:
            wrapped = ProcessingError(f"{context}: {error}", rule_id=rule_id)
        wrapped.__cause__ = error
        return wrapped

    def __repr__(self) -> str:
        ids = ", ".join(a.rule_id for a in self._attached)
        return f"<LintPipeline [{ids}]>"


__all__ = ["AttachedRule", "LintPipeline"]
