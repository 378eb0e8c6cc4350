"""Hedge stake, payout, profit and quality calculations for promotions.

One parameterized engine settles every promotion type. A PromotionConfig
describes how a promotion differs from a plain two-leg bet:

- Free bet: the stake is not returned on a win and is not the bettor's money
- Hedge bet: both legs are real money
- Bet insurance: a losing primary leg refunds ``stake × percent_insured``
  as credit worth ``percent_conversion`` per unit
- Must spend: same as bet insurance with the bonus value as the refund

Formula Reference (M = multiplicative odds, S = primary stake):
    primary_return = M(primary) × S           (stake returned)
                   = (M(primary) - 1) × S     (free bet)
    hedge_stake    = (primary_return - credit × conversion) / M(hedge)
    profit         = payout - hedge_stake - (S if stake at risk else 0)

Every function is pure. Invalid odds raise InvalidOddsError; a zero
normalization base yields NaN. The ``try_*`` entry points turn both into a
Failure so callers can decide on a fallback explicitly.
"""

import math
from dataclasses import dataclass
from enum import Enum
from typing import Literal, Union

from bonus_conversion.engine.models import CalculationResult, PromotionInput
from bonus_conversion.engine.odds import InvalidOddsError, to_multiplicative


class PromotionType(str, Enum):
    FREE_BET = "free_bet"
    HEDGE_BET = "hedge_bet"
    BET_INSURANCE = "bet_insurance"
    MUST_SPEND = "must_spend"


@dataclass(frozen=True)
class PromotionConfig:
    """How a promotion type is settled.

    Attributes:
        stake_returned: A winning primary leg returns its stake
        stake_at_risk: The primary stake is the bettor's own money
        uses_credit: A losing primary leg refunds bonus credit
        payout_leg: Leg whose winning return is reported as payout
        quality_base: Reference amount the quality percent is normalized to
    """

    stake_returned: bool
    stake_at_risk: bool
    uses_credit: bool
    payout_leg: Literal["primary", "hedge"]
    quality_base: Literal["odds_only", "stake", "credit"]


PROMOTION_CONFIGS: dict[PromotionType, PromotionConfig] = {
    PromotionType.FREE_BET: PromotionConfig(
        stake_returned=False,
        stake_at_risk=False,
        uses_credit=False,
        payout_leg="hedge",
        quality_base="odds_only",
    ),
    PromotionType.HEDGE_BET: PromotionConfig(
        stake_returned=True,
        stake_at_risk=True,
        uses_credit=False,
        payout_leg="hedge",
        quality_base="stake",
    ),
    PromotionType.BET_INSURANCE: PromotionConfig(
        stake_returned=True,
        stake_at_risk=True,
        uses_credit=True,
        payout_leg="primary",
        quality_base="credit",
    ),
    PromotionType.MUST_SPEND: PromotionConfig(
        stake_returned=True,
        stake_at_risk=True,
        uses_credit=True,
        payout_leg="primary",
        quality_base="credit",
    ),
}


@dataclass(frozen=True)
class Success:
    value: float


@dataclass(frozen=True)
class Failure:
    """A computation with no usable value.

    Attributes:
        reason: "invalid_odds" or "non_finite"
        error: The conversion error, when odds caused the failure
    """

    reason: str
    error: InvalidOddsError | None = None


Computation = Union[Success, Failure]


def get_config(inp: PromotionInput) -> PromotionConfig:
    """Look up the settlement configuration for an input's promotion type."""
    return PROMOTION_CONFIGS[PromotionType(inp.promotion)]


def _primary_return(inp: PromotionInput, config: PromotionConfig) -> float:
    factor = to_multiplicative(inp.primary_odds)
    if config.stake_returned:
        return factor * inp.primary_stake
    return (factor - 1) * inp.primary_stake


def _safe_ratio(numerator: float, denominator: float) -> float:
    # Zero base has no meaningful ratio
    if denominator == 0:
        return math.nan
    return numerator / denominator


def compute_hedge_stake(inp: PromotionInput) -> float:
    """Calculate the hedge stake that locks in the same return on both legs.

    Args:
        inp: Promotion input snapshot

    Returns:
        Hedge stake in currency units

    Raises:
        InvalidOddsError: If either leg's odds are invalid

    Example:
        >>> inp = FreeBetInput(promo_odds=-110, promo_stake=10, hedge_odds=-110)
        >>> round(compute_hedge_stake(inp), 4)
        4.7619
    """
    config = get_config(inp)
    target = _primary_return(inp, config)
    if config.uses_credit:
        target -= inp.credit_amount * inp.conversion
    return target / to_multiplicative(inp.hedge_odds)


def compute_payout(inp: PromotionInput, hedge_stake: float) -> float:
    """Calculate the guaranteed payout for a hedge stake.

    Free and hedge bets report the hedge leg's return; insurance and
    must-spend offers report the primary leg's return (stake included).

    Raises:
        InvalidOddsError: If the reported leg's odds are invalid
    """
    config = get_config(inp)
    if config.payout_leg == "hedge":
        return to_multiplicative(inp.hedge_odds) * hedge_stake
    return to_multiplicative(inp.primary_odds) * inp.primary_stake


def compute_profit(payout: float, inp: PromotionInput, hedge_stake: float) -> float:
    """Subtract every real-money stake from the payout."""
    config = get_config(inp)
    cost = hedge_stake
    if config.stake_at_risk:
        cost += inp.primary_stake
    return payout - cost


def compute_quality_percent(profit: float, inp: PromotionInput) -> float:
    """Normalize profit into the promotion's quality percentage.

    - Free bet: share of the free bet's notional value converted to profit,
      ``(M(promo) - 1) × (1 - 1 / M(hedge)) × 100``; independent of stake
    - Hedge bet: return on the original stake
    - Bet insurance / must spend: profit per unit of refunded credit
      (insured part of the stake, or the bonus value)

    Returns:
        Percentage, or NaN when the normalization base is zero

    Raises:
        InvalidOddsError: For the free bet closed form with invalid odds
    """
    config = get_config(inp)
    if config.quality_base == "odds_only":
        promo = to_multiplicative(inp.primary_odds)
        hedge = to_multiplicative(inp.hedge_odds)
        return (promo - 1) * (1 - 1 / hedge) * 100
    if config.quality_base == "stake":
        return _safe_ratio(profit, inp.primary_stake) * 100
    return 100 * _safe_ratio(profit, inp.credit_amount)


def settle(inp: PromotionInput) -> CalculationResult:
    """Compute all derived fields in dependency order.

    Raises:
        InvalidOddsError: If either leg's odds are invalid
    """
    hedge_stake = compute_hedge_stake(inp)
    payout = compute_payout(inp, hedge_stake)
    profit = compute_profit(payout, inp, hedge_stake)
    return CalculationResult(
        hedge_stake=hedge_stake,
        payout=payout,
        profit=profit,
        quality_percent=compute_quality_percent(profit, inp),
    )


def try_hedge_stake(inp: PromotionInput) -> Computation:
    """Stage A as an explicit result: hedge stake or the reason it is missing."""
    try:
        hedge_stake = compute_hedge_stake(inp)
    except InvalidOddsError as e:
        return Failure(reason="invalid_odds", error=e)
    if not math.isfinite(hedge_stake):
        return Failure(reason="non_finite")
    return Success(hedge_stake)


def try_results(
    inp: PromotionInput, hedge_stake: float
) -> tuple[Computation, Computation, Computation]:
    """Stage B as explicit results: (payout, profit, quality_percent).

    A failed payout fails profit and quality too, since both are derived
    from it.
    """
    try:
        payout = compute_payout(inp, hedge_stake)
        profit = compute_profit(payout, inp, hedge_stake)
        quality = compute_quality_percent(profit, inp)
    except InvalidOddsError as e:
        failure = Failure(reason="invalid_odds", error=e)
        return failure, failure, failure

    return tuple(
        Success(value) if math.isfinite(value) else Failure(reason="non_finite")
        for value in (payout, profit, quality)
    )
