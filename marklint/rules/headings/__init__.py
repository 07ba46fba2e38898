"""Heading rules."""

from .first_heading_level import FirstHeadingLevelRule
from .heading_increment import HeadingIncrementRule
from .no_heading_punctuation import NoHeadingPunctuationRule
from .no_multiple_toplevel_headings import NoMultipleToplevelHeadingsRule

__all__ = [
    "FirstHeadingLevelRule",
    "HeadingIncrementRule",
    "NoHeadingPunctuationRule",
    "NoMultipleToplevelHeadingsRule",
]
