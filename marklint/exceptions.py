"""Exception hierarchy for marklint.

Configuration errors are raised while a pipeline is being set up. Processing
errors abort a single document's pass. Diagnostics produced by rules are
never raised, whatever their severity.
"""

SOURCE = "marklint"


class MarklintError(Exception):
    """Base class for errors raised by the lint engine itself."""

    source = SOURCE


class ConfigurationError(MarklintError):
    """Invalid rule configuration, detected at attachment time."""


class InvalidSeverityError(ConfigurationError):
    """A severity value outside 0, 1, 2 or the known keywords."""

    def __init__(self, rule_id: str, value: object):
        self.rule_id = rule_id
        self.value = value
        super().__init__(
            f"Invalid severity `{value}` for `{rule_id}`, expected 0, 1, or 2"
        )


class InvalidOptionsError(ConfigurationError):
    """Rule options with a shape the rule does not accept."""

    def __init__(self, rule_id: str, options: object, detail: str):
        self.rule_id = rule_id
        self.options = options
        super().__init__(f"Invalid options `{options!r}` for `{rule_id}`: {detail}")


class UnknownRuleError(ConfigurationError):
    """A configuration names a rule that is not registered."""

    def __init__(self, rule_id: str):
        self.rule_id = rule_id
        super().__init__(f"Unknown rule `{rule_id}`")


class ProcessingError(MarklintError):
    """A document's pass failed (parser or rule crashed)."""

    def __init__(self, message: str, rule_id: str | None = None):
        self.rule_id = rule_id
        super().__init__(message)


class RuleIdMismatchError(MarklintError):
    """A rule emitted a message carrying another rule's id.

    This is a programming error in the rule, reported by the fixture
    harness separately from ordinary fixture mismatches.
    """

    def __init__(self, expected: str, actual: str | None, message: object):
        self.expected = expected
        self.actual = actual
        super().__init__(
            f"Expected `{expected}`, not `{actual}` as `rule_id` for {message}"
        )


__all__ = [
    "SOURCE",
    "ConfigurationError",
    "InvalidOptionsError",
    "InvalidSeverityError",
    "MarklintError",
    "ProcessingError",
    "RuleIdMismatchError",
    "UnknownRuleError",
]
