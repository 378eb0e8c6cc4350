"""Shared pytest fixtures for bonus conversion tests."""

import pytest

from bonus_conversion.config import get_settings
from bonus_conversion.engine.models import (
    BetInsuranceInput,
    FreeBetInput,
    HedgeBetInput,
    MustSpendInput,
)
from bonus_conversion.monitoring import configure_logging


@pytest.fixture(autouse=True)
def setup_test_logging():
    """Configure structlog for test output."""
    configure_logging("development")


@pytest.fixture(autouse=True)
def clear_settings_cache():
    """Drop cached settings so environment overrides apply per test."""
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def free_bet():
    """$10 free bet at -110 hedged at -110."""
    return FreeBetInput(promo_odds=-110, promo_stake=10, hedge_odds=-110)


@pytest.fixture
def hedge_bet():
    """$100 bet at +150 hedged at -200."""
    return HedgeBetInput(bet_odds=150, bet_stake=100, hedge_odds=-200)


@pytest.fixture
def bet_insurance():
    """$10 fully insured bet at -110, hedged at -110, credit worth 60%."""
    return BetInsuranceInput(
        insured_odds=-110,
        insured_stake=10,
        hedge_odds=-110,
        percent_insured=1.0,
        percent_conversion=0.6,
    )


@pytest.fixture
def must_spend():
    """Spend $10 at -110 for $10 bonus credit worth 60%, hedged at -110."""
    return MustSpendInput(
        required_spend=10,
        bonus_value=10,
        percent_conversion=0.6,
        odds_leg1=-110,
        odds_leg2=-110,
    )
