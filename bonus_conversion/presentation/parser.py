"""Keystroke filtering and parsing for editable calculator fields.

Editable fields keep raw text between edits:
- currency: "$ 10", "$ 12.5", "$ " (in progress)
- percent:  "60 %", "12.75 %", " %" (in progress)
- odds:     "-110", "150", "-" (in progress)

A keystroke is applied only if the resulting text still matches the field's
shape (or is empty). Parsing is lenient on in-progress text: an empty number
reads as 0, an incomplete one (".") reads as NaN. Neither raises, so every
accepted keystroke can be fed to the engine.
"""

import math
import re
from dataclasses import dataclass
from typing import Literal

CURRENCY_PREFIX = "$ "
PERCENT_SUFFIX = " %"

CURRENCY_PATTERN = re.compile(r'^\$ (\d*?\.?\d{0,2})$')
PERCENT_PATTERN = re.compile(r'^(\d*\.?\d*) %$')
ODDS_PATTERN = re.compile(r'^[+-]?\d*$')

FieldKind = Literal["currency", "percent", "odds"]


def accepts_currency_keystroke(text: str) -> bool:
    """Return True if ``text`` is an acceptable currency edit buffer."""
    return text == "" or CURRENCY_PATTERN.match(text) is not None


def accepts_percent_keystroke(text: str) -> bool:
    """Return True if ``text`` is an acceptable percent edit buffer."""
    return text == "" or PERCENT_PATTERN.match(text) is not None


def accepts_odds_keystroke(text: str) -> bool:
    """Return True if ``text`` is an acceptable American odds edit buffer."""
    return ODDS_PATTERN.match(text) is not None


def _parse_number(number: str) -> float:
    if number == "":
        return 0.0
    try:
        return float(number)
    except ValueError:
        # Incomplete edit such as "."
        return math.nan


def parse_currency(text: str) -> float:
    """Parse a currency buffer into an amount.

    Examples:
        >>> parse_currency("$ 12.5")
        12.5
        >>> parse_currency("$ ")
        0.0
    """
    return _parse_number(text[len(CURRENCY_PREFIX):])


def parse_percent(text: str) -> float:
    """Parse a percent buffer into a fraction ("60 %" → 0.6)."""
    if text == "":
        return 0.0
    return _parse_number(text[: -len(PERCENT_SUFFIX)]) / 100


def parse_odds(text: str) -> int:
    """Parse an odds buffer; empty or sign-only text reads as 0 (invalid odds)."""
    if text in ("", "-", "+"):
        return 0
    return int(text)


_ACCEPTORS = {
    "currency": accepts_currency_keystroke,
    "percent": accepts_percent_keystroke,
    "odds": accepts_odds_keystroke,
}

_PARSERS = {
    "currency": parse_currency,
    "percent": parse_percent,
    "odds": parse_odds,
}


@dataclass
class EditBuffer:
    """Raw text of one editable field, kept apart from the numeric model.

    Attributes:
        kind: Field shape (currency, percent or odds)
        text: Current raw text
    """

    kind: FieldKind
    text: str = ""

    def apply(self, new_text: str) -> bool:
        """Replace the text if the keystroke keeps the field's shape.

        Returns:
            True if the edit was applied, False if it was rejected
        """
        if not _ACCEPTORS[self.kind](new_text):
            return False
        self.text = new_text
        return True

    @property
    def value(self) -> float | int:
        """Numeric value of the current text."""
        return _PARSERS[self.kind](self.text)
