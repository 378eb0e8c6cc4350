"""Odds-and-settlement engine for bonus conversion promotions.

- American → multiplicative odds conversion
- Hedge stake, payout, profit and quality percent per promotion type
- Two-stage recomputation with an explicit zero fallback
"""

from bonus_conversion.engine.models import (
    BetInsuranceInput,
    CalculationResult,
    FreeBetInput,
    HedgeBetInput,
    MustSpendInput,
    PromotionInput,
)
from bonus_conversion.engine.odds import (
    InvalidOddsError,
    is_valid_american,
    to_multiplicative,
)
from bonus_conversion.engine.recompute import BonusCalculator, default_input
from bonus_conversion.engine.settlement import (
    PROMOTION_CONFIGS,
    Failure,
    PromotionConfig,
    PromotionType,
    Success,
    compute_hedge_stake,
    compute_payout,
    compute_profit,
    compute_quality_percent,
    settle,
    try_hedge_stake,
    try_results,
)

__all__ = [
    # Odds conversion
    "InvalidOddsError",
    "is_valid_american",
    "to_multiplicative",
    # Inputs and results
    "FreeBetInput",
    "HedgeBetInput",
    "BetInsuranceInput",
    "MustSpendInput",
    "PromotionInput",
    "CalculationResult",
    # Settlement
    "PromotionType",
    "PromotionConfig",
    "PROMOTION_CONFIGS",
    "Success",
    "Failure",
    "compute_hedge_stake",
    "compute_payout",
    "compute_profit",
    "compute_quality_percent",
    "settle",
    "try_hedge_stake",
    "try_results",
    # Recomputation
    "BonusCalculator",
    "default_input",
]
