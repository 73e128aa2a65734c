"""Gust model layer -- public type re-exports."""

from gust.model.css import CssProperty, CssRule
from gust.model.diagnostic import Diagnostic, Severity
from gust.model.report import BatchReport

__all__ = [
    # css
    "CssProperty",
    "CssRule",
    # diagnostic
    "Severity",
    "Diagnostic",
    # report
    "BatchReport",
]
