"""Presentation helpers: edit-buffer parsing and display formatting.

The engine never sees formatted strings; this package converts at the boundary.
"""

from bonus_conversion.presentation.formatters import (
    format_american_odds,
    format_currency,
    format_percent,
    format_result_table,
)
from bonus_conversion.presentation.parser import (
    EditBuffer,
    accepts_currency_keystroke,
    accepts_odds_keystroke,
    accepts_percent_keystroke,
    parse_currency,
    parse_odds,
    parse_percent,
)

__all__ = [
    "format_american_odds",
    "format_currency",
    "format_percent",
    "format_result_table",
    "EditBuffer",
    "accepts_currency_keystroke",
    "accepts_odds_keystroke",
    "accepts_percent_keystroke",
    "parse_currency",
    "parse_odds",
    "parse_percent",
]
