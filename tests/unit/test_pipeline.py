"""Tests for the pipeline composer.

Covers rule attachment, severity handling, order-insensitivity, disabled
rules and failures during a document pass.
"""

from collections import Counter
from typing import Any

import pytest

from marklint.exceptions import (
    InvalidOptionsError,
    InvalidSeverityError,
    ProcessingError,
)
from marklint.messages import LintFile
from marklint.outcome import ProcessingFailure, Success
from marklint.pipeline import LintPipeline
from marklint.rules import (
    FinalNewlineRule,
    NoHeadingPunctuationRule,
    NoMultipleToplevelHeadingsRule,
)
from marklint.rules.base import BaseRule
from marklint.rules.severity import SeverityLevel

DOC = "\n".join(
    [
        "# A heading",
        "",
        "# Another main heading.",
        "",
        "<!--lint ignore-->",
        "",
        "# Another main heading.",
    ]
)

EXPECTED = [
    "virtual.md:3:1-3:24: Don’t add a trailing `.` to headings",
    "virtual.md:3:1-3:24: Don’t use multiple top level headings (3:1)",
]

MISSING_NEWLINE = "1:1: Missing newline character at end of file"


# --- Mock Rules for Testing ---


class CountingRule(BaseRule):
    """Mock rule counting its invocations."""

    def __init__(self):
        self.calls = 0

    @property
    def rule_id(self) -> str:
        return "counting"

    def check(self, tree, file, options: Any) -> None:
        self.calls += 1
        file.message("Counted", tree)


class CrashingRule(BaseRule):
    """Mock rule that raises an error."""

    @property
    def rule_id(self) -> str:
        return "crashing"

    def check(self, tree, file, options: Any) -> None:
        raise RuntimeError("Mock rule error")


class ReportThenCrashRule(BaseRule):
    """Mock rule that reports a message and then raises."""

    def __init__(self):
        self.aggregator = None

    @property
    def rule_id(self) -> str:
        return "report-then-crash"

    def check(self, tree, file, options: Any) -> None:
        self.aggregator = file.reporter._aggregator
        file.message("Half done", tree)
        raise RuntimeError("Mock rule error")


class OptionsRule(BaseRule):
    """Mock rule recording the options it receives."""

    options_type = int

    def __init__(self):
        self.seen: list[Any] = []

    @property
    def rule_id(self) -> str:
        return "options"

    def check(self, tree, file, options: Any) -> None:
        self.seen.append(options)


def _lint(pipeline: LintPipeline, text: str, path: str | None = None) -> Success:
    outcome = pipeline.process(LintFile(text, path))
    assert isinstance(outcome, Success)
    return outcome


class TestEndToEnd:
    """Tests for processing a document through several rules."""

    def test_rules_in_declared_order(self):
        """Test two heading rules plus an ignore directive."""
        pipeline = (
            LintPipeline()
            .use(NoHeadingPunctuationRule())
            .use(NoMultipleToplevelHeadingsRule())
        )
        outcome = _lint(pipeline, DOC, "virtual.md")
        assert [str(m) for m in outcome.messages] == EXPECTED

    def test_rules_in_reverse_order(self):
        """Test that reversing attachment order gives the same messages."""
        forward = (
            LintPipeline()
            .use(NoHeadingPunctuationRule())
            .use(NoMultipleToplevelHeadingsRule())
        )
        backward = (
            LintPipeline()
            .use(NoMultipleToplevelHeadingsRule())
            .use(NoHeadingPunctuationRule())
        )
        first = _lint(forward, DOC, "virtual.md").messages
        second = _lint(backward, DOC, "virtual.md").messages
        assert Counter(first) == Counter(second)
        assert sorted(str(m) for m in second) == sorted(EXPECTED)

    def test_rule_ids_follow_rules(self):
        """Test that each message carries its own rule's id."""
        pipeline = (
            LintPipeline()
            .use(NoMultipleToplevelHeadingsRule())
            .use(NoHeadingPunctuationRule())
        )
        outcome = _lint(pipeline, DOC, "virtual.md")
        by_id = {m.rule_id: m.reason for m in outcome.messages}
        assert by_id["no-heading-punctuation"].startswith("Don’t add")
        assert by_id["no-multiple-toplevel-headings"].startswith("Don’t use")

    def test_all_messages_anchored_on_line_three(self):
        """Test that the ignored heading on line 7 reports nothing."""
        pipeline = (
            LintPipeline()
            .use(NoHeadingPunctuationRule())
            .use(NoMultipleToplevelHeadingsRule())
        )
        outcome = _lint(pipeline, DOC, "virtual.md")
        assert {str(m.position) for m in outcome.messages} == {"3:1-3:24"}

    def test_repeated_heading_cites_its_own_position(self):
        """Test that the reason names the repeated heading, not the first."""
        pipeline = (
            LintPipeline()
            .use(NoHeadingPunctuationRule())
            .use(NoMultipleToplevelHeadingsRule())
        )
        text = "# A\n\n<!--lint ignore no-heading-punctuation-->\n\n# B.\n"
        outcome = _lint(pipeline, text)
        assert [str(m) for m in outcome.messages] == [
            "5:1-5:5: Don’t use multiple top level headings (5:1)"
        ]

    def test_no_rules(self):
        """Test that a pipeline without rules reports nothing."""
        assert _lint(LintPipeline(), ".").messages == []

    def test_successful_rule(self):
        """Test a rule that finds nothing."""
        assert _lint(LintPipeline().use(FinalNewlineRule()), "").messages == []


class TestSeverityConfiguration:
    """Tests for severity handling at attachment."""

    def test_list_severity_error(self):
        """Test that [2] triggers fatally."""
        outcome = _lint(LintPipeline().use(FinalNewlineRule(), [2]), ".")
        assert ",".join(str(m) for m in outcome.messages) == MISSING_NEWLINE
        assert outcome.messages[0].fatal is True

    def test_bare_true(self):
        """Test that a bare True attaches the rule as an error."""
        outcome = _lint(LintPipeline().use(FinalNewlineRule(), True), ".")
        assert [str(m) for m in outcome.messages] == [MISSING_NEWLINE]
        assert outcome.messages[0].fatal is True

    def test_bare_false(self):
        """Test that a bare False disables the rule."""
        outcome = _lint(LintPipeline().use(FinalNewlineRule(), False), ".")
        assert outcome.messages == []

    def test_list_true(self):
        """Test a list with a boolean severity (on)."""
        outcome = _lint(LintPipeline().use(FinalNewlineRule(), [True]), ".")
        assert [str(m) for m in outcome.messages] == [MISSING_NEWLINE]

    def test_list_false(self):
        """Test a list with a boolean severity (off)."""
        outcome = _lint(LintPipeline().use(FinalNewlineRule(), [False]), ".")
        assert outcome.messages == []

    def test_list_error_keyword(self):
        """Test ["error"]."""
        outcome = _lint(LintPipeline().use(FinalNewlineRule(), ["error"]), ".")
        assert [str(m) for m in outcome.messages] == [MISSING_NEWLINE]
        assert outcome.messages[0].fatal is True

    @pytest.mark.parametrize("keyword", ["on", "warn"])
    def test_list_warning_keywords(self, keyword):
        """Test ["on"] and ["warn"] report non-fatally."""
        outcome = _lint(LintPipeline().use(FinalNewlineRule(), [keyword]), ".")
        assert [str(m) for m in outcome.messages] == [MISSING_NEWLINE]
        assert outcome.messages[0].fatal is False

    def test_list_off_keyword(self):
        """Test ["off"] disables the rule."""
        outcome = _lint(LintPipeline().use(FinalNewlineRule(), ["off"]), ".")
        assert outcome.messages == []

    def test_default_is_warning(self):
        """Test that use() without configuration warns."""
        pipeline = LintPipeline().use(FinalNewlineRule())
        assert pipeline.attached[0].config.level is SeverityLevel.WARN
        assert _lint(pipeline, ".").messages[0].fatal is False

    def test_fatal_messages_are_data(self):
        """Test that fatal messages do not fail the pass."""
        outcome = LintPipeline().use(FinalNewlineRule(), 2).process(".")
        assert outcome.ok is True
        assert outcome.file.has_fatal is True

    @pytest.mark.parametrize("value", [[3], [-1]])
    def test_invalid_severity_raises_at_attachment(self, value):
        """Test that invalid severities fail before any document is processed."""
        pipeline = LintPipeline()
        with pytest.raises(InvalidSeverityError) as exc_info:
            pipeline.use(FinalNewlineRule(), value)
        assert str(exc_info.value) == (
            f"Invalid severity `{value[0]}` for `final-newline`, expected 0, 1, or 2"
        )
        assert pipeline.attached == []

    def test_invalid_options_raise_at_attachment(self):
        """Test that malformed options fail at attachment."""
        with pytest.raises(InvalidOptionsError):
            LintPipeline().use(NoMultipleToplevelHeadingsRule(), [1, 9])
        with pytest.raises(InvalidOptionsError):
            LintPipeline().use(OptionsRule(), [1, "three"])

    def test_options_reach_rule(self):
        """Test that validated options are passed to check()."""
        rule = OptionsRule()
        _lint(LintPipeline().use(rule, ["error", 3]), "text\n")
        assert rule.seen == [3]

    def test_reattaching_replaces_configuration(self):
        """Test that attaching the same rule twice keeps one attachment."""
        pipeline = LintPipeline().use(FinalNewlineRule(), 1).use(FinalNewlineRule(), 2)
        assert len(pipeline.attached) == 1
        assert _lint(pipeline, ".").messages[0].fatal is True

    def test_rule_class_is_instantiated(self):
        """Test that a rule class can be attached directly."""
        pipeline = LintPipeline().use(FinalNewlineRule)
        assert pipeline.attached[0].rule_id == "final-newline"


class TestDisabledRules:
    """Disabled rules are never invoked."""

    @pytest.mark.parametrize("value", [False, 0, "off", ["off"], None])
    def test_disabled_rule_not_invoked(self, value):
        """Test that disabled rules are skipped, not filtered."""
        counting = CountingRule()
        pipeline = LintPipeline().use(counting, value).use(FinalNewlineRule(), 2)
        outcome = _lint(pipeline, ".")

        assert counting.calls == 0
        assert [m.rule_id for m in outcome.messages] == ["final-newline"]
        assert outcome.rules_executed == 1
        assert outcome.rules_skipped == 1

    def test_enabled_rule_invoked_once(self):
        """Test that an enabled rule runs exactly once per document."""
        counting = CountingRule()
        pipeline = LintPipeline().use(counting)
        _lint(pipeline, "a\n")
        _lint(pipeline, "b\n")
        assert counting.calls == 2


class TestFailures:
    """Tests for processing failures."""

    def test_rule_exception_becomes_processing_failure(self):
        """Test that a crashing rule aborts the pass."""
        pipeline = LintPipeline().use(FinalNewlineRule()).use(CrashingRule())
        outcome = pipeline.process(LintFile(".", "a.md"))

        assert isinstance(outcome, ProcessingFailure)
        assert outcome.ok is False
        assert outcome.rule_id == "crashing"
        assert outcome.path == "a.md"
        assert outcome.error.source == "marklint"
        assert isinstance(outcome.error.__cause__, RuntimeError)

    def test_parser_exception_becomes_processing_failure(self):
        """Test that a failing parser aborts the pass."""

        def broken_parser(text, settings):
            raise ValueError("cannot parse")

        pipeline = LintPipeline(parser=broken_parser).use(FinalNewlineRule())
        outcome = pipeline.process(".")
        assert isinstance(outcome, ProcessingFailure)
        assert outcome.rule_id is None
        assert "cannot parse" in str(outcome.error)

    def test_failure_closes_aggregator(self):
        """Test that an aborted pass seals the aggregator it reported into."""
        rule = ReportThenCrashRule()
        outcome = LintPipeline().use(rule).process(".")
        assert isinstance(outcome, ProcessingFailure)
        assert rule.aggregator.closed is True

    def test_failure_clears_previous_messages(self):
        """Test that reprocessing a file that now fails drops stale messages."""
        file = LintFile(".", "a.md")
        LintPipeline().use(FinalNewlineRule()).process(file)
        assert len(file.messages) == 1

        outcome = LintPipeline().use(ReportThenCrashRule()).process(file)
        assert isinstance(outcome, ProcessingFailure)
        assert file.messages == []

    def test_process_sync_raises(self):
        """Test that process_sync raises the failure's error."""
        with pytest.raises(ProcessingError):
            LintPipeline().use(CrashingRule()).process_sync(".")

    def test_process_sync_returns_file(self):
        """Test that process_sync returns the linted file."""
        file = LintPipeline().use(FinalNewlineRule()).process_sync(".")
        assert [str(m) for m in file.messages] == [MISSING_NEWLINE]


class TestTransformsAndSettings:
    """Tests for tree transforms and settings."""

    def test_transform_runs_before_rules(self):
        """Test that a transform's tree is what rules see."""
        from marklint.tree import strip_positions

        pipeline = (
            LintPipeline()
            .use_transform(strip_positions)
            .use(NoHeadingPunctuationRule())
        )
        assert _lint(pipeline, "# Title.\n").messages == []

    def test_settings_reach_parser(self):
        """Test that settings are handed to the parser."""
        seen = {}

        def recording_parser(text, settings):
            from marklint.parser import parse

            seen.update(settings)
            return parse(text, settings)

        pipeline = LintPipeline(parser=recording_parser).with_settings({"gfm": False})
        _lint(pipeline, "text\n")
        assert seen == {"gfm": False}

    def test_message_control_can_be_disabled(self):
        """Test that lint directives are ignored when turned off."""
        pipeline = LintPipeline(message_control=False).use(NoHeadingPunctuationRule())
        outcome = _lint(pipeline, "<!--lint ignore-->\n\n# Title.\n")
        assert len(outcome.messages) == 1
