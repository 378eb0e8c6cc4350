"""Bonus conversion calculator: hedge sportsbook promotions into guaranteed profit."""

__version__ = "0.1.0"
