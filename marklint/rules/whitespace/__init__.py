"""Whitespace rules."""

from .final_newline import FinalNewlineRule
from .maximum_line_length import MaximumLineLengthRule
from .no_tabs import NoTabsRule

__all__ = ["FinalNewlineRule", "MaximumLineLengthRule", "NoTabsRule"]
