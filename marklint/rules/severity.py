"""Severity resolution for rule configuration values.

A rule's configuration may be written many ways: ``True``, ``2``, ``"error"``
and ``[2]`` all mean the same thing. resolve_severity() folds every accepted
shape into one ResolvedSeverity.

    ============================  =======  =====
    value                         enabled  fatal
    ============================  =======  =====
    None                          False    None
    True / 2 / "error"            True     True
    1 / "warn" / "on"             True     False
    False / 0 / "off"             False    None
    [severity, options]           recurse on severity
    ============================  =======  =====

A bare value that is not severity-shaped (for instance a string that is not
a keyword, or a dict) is taken as options at the warning level.
"""

from dataclasses import dataclass
from enum import IntEnum
from typing import Any

from ..exceptions import InvalidSeverityError


class SeverityLevel(IntEnum):
    """Canonical integer severities."""

    OFF = 0
    WARN = 1
    ERROR = 2


SEVERITY_KEYWORDS = {
    "off": SeverityLevel.OFF,
    "on": SeverityLevel.WARN,
    "warn": SeverityLevel.WARN,
    "error": SeverityLevel.ERROR,
}

DEFAULT_LEVEL = SeverityLevel.WARN


@dataclass(frozen=True)
class ResolvedSeverity:
    """Canonical form of a rule configuration value."""

    level: SeverityLevel
    options: Any = None

    @property
    def enabled(self) -> bool:
        return self.level is not SeverityLevel.OFF

    @property
    def fatal(self) -> bool | None:
        """True for errors, False for warnings, None when disabled."""
        if not self.enabled:
            return None
        return self.level is SeverityLevel.ERROR


def _coerce_level(rule_id: str, value: Any) -> SeverityLevel:
    if isinstance(value, bool):
        return SeverityLevel.ERROR if value else SeverityLevel.OFF

    if isinstance(value, str):
        try:
            return SEVERITY_KEYWORDS[value]
        except KeyError:
            raise InvalidSeverityError(rule_id, value) from None

    if isinstance(value, int | float):
        if value in (0, 1, 2) and float(value).is_integer():
            return SeverityLevel(int(value))
        raise InvalidSeverityError(rule_id, value)

    raise InvalidSeverityError(rule_id, value)


def _is_severity_shaped(value: Any) -> bool:
    return isinstance(value, bool | int | float) or (
        isinstance(value, str) and value in SEVERITY_KEYWORDS
    )


def resolve_severity(rule_id: str, raw: Any) -> ResolvedSeverity:
    """Resolve a raw configuration value for a rule.

    Args:
        rule_id: Rule identifier, used in error messages
        raw: Configuration value as written by the user

    Returns:
        ResolvedSeverity with level and options

    Raises:
        InvalidSeverityError: If a severity falls outside 0, 1, 2 or the
            known keywords
    """
    if raw is None:
        return ResolvedSeverity(SeverityLevel.OFF)

    if isinstance(raw, list | tuple):
        if not raw:
            return ResolvedSeverity(DEFAULT_LEVEL)
        head = raw[0]
        if isinstance(head, bool | int | float | str):
            options = raw[1] if len(raw) > 1 else None
            return ResolvedSeverity(_coerce_level(rule_id, head), options)
        # list of options without a leading severity
        return ResolvedSeverity(DEFAULT_LEVEL, list(raw))

    if _is_severity_shaped(raw):
        return ResolvedSeverity(_coerce_level(rule_id, raw))

    return ResolvedSeverity(DEFAULT_LEVEL, raw)


__all__ = [
    "DEFAULT_LEVEL",
    "SEVERITY_KEYWORDS",
    "ResolvedSeverity",
    "SeverityLevel",
    "resolve_severity",
]
