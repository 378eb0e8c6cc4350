"""American odds conversion.

Every settlement formula works on multiplicative (decimal/European) odds:
the factor such that ``payout = stake × factor``. Sportsbooks quote
American odds, so this module is the single entry point between the two.

Conversion:
    odds >= +100:  (odds + 100) / 100      e.g. +150 → 2.5
    odds <  -100:  (100 - odds) / -odds    e.g. -110 → 1.9091

No American line sits strictly between -100 and +100, and -100 itself is
outside both branches, so those values raise InvalidOddsError.
"""


class InvalidOddsError(ValueError):
    """American odds outside the quotable domain (odds >= 100 or odds < -100)."""

    def __init__(self, odds: float):
        self.odds = odds
        super().__init__(
            f"American odds must be greater than or equal to +100, "
            f"or strictly less than -100. Got {odds}."
        )


def is_valid_american(odds: float) -> bool:
    """Return True when ``odds`` is a quotable American line."""
    return odds >= 100 or odds < -100


def to_multiplicative(odds: float) -> float:
    """Convert American odds to multiplicative (decimal) odds.

    No rounding is applied; rounding belongs to presentation.

    Args:
        odds: American odds (e.g., -110, +150)

    Returns:
        Multiplicative odds, >= 2.0 for positive lines and in (1.0, 2.0)
        for negative lines

    Raises:
        InvalidOddsError: If odds are in [-100, 100)

    Example:
        >>> to_multiplicative(150)
        2.5
        >>> round(to_multiplicative(-110), 4)
        1.9091
    """
    if not is_valid_american(odds):
        raise InvalidOddsError(odds)
    if odds >= 100:
        return (odds + 100) / 100
    return (100 - odds) / -odds
