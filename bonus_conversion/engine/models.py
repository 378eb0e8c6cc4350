"""Input and result models for promotion settlement.

Inputs are immutable pydantic models, one per promotion type, discriminated
by the ``promotion`` field. Each exposes the same generic leg view
(``primary_odds``, ``primary_stake``, ``hedge_odds``, ``credit_amount``,
``conversion``) so one parameterized engine can settle all of them.

Odds are stored as given and only validated by the odds converter, so an
in-progress edit such as ``50`` is representable and yields a failed
computation instead of a model error.

Percent inputs are fractions (60% → 0.6).
"""

from dataclasses import dataclass
from typing import Annotated, Literal, Union

from pydantic import BaseModel, ConfigDict, Field


class FreeBetInput(BaseModel):
    """Free bet hedged at a second sportsbook.

    Attributes:
        promo_odds: American odds of the free bet
        promo_stake: Notional free bet amount (not returned on a win)
        hedge_odds: American odds of the hedge bet
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    promotion: Literal["free_bet"] = "free_bet"
    promo_odds: int
    promo_stake: float
    hedge_odds: int

    @property
    def primary_odds(self) -> int:
        return self.promo_odds

    @property
    def primary_stake(self) -> float:
        return self.promo_stake

    @property
    def credit_amount(self) -> float:
        return 0.0

    @property
    def conversion(self) -> float:
        return 0.0


class HedgeBetInput(BaseModel):
    """Real-money bet hedged with a real-money bet on the other side.

    Attributes:
        bet_odds: American odds of the original bet
        bet_stake: Stake of the original bet
        hedge_odds: American odds of the hedge bet
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    promotion: Literal["hedge_bet"] = "hedge_bet"
    bet_odds: int
    bet_stake: float
    hedge_odds: int

    @property
    def primary_odds(self) -> int:
        return self.bet_odds

    @property
    def primary_stake(self) -> float:
        return self.bet_stake

    @property
    def credit_amount(self) -> float:
        return 0.0

    @property
    def conversion(self) -> float:
        return 0.0


class BetInsuranceInput(BaseModel):
    """Bet whose stake is partially refunded as bonus credit if it loses.

    Attributes:
        insured_odds: American odds of the insured bet
        insured_stake: Stake of the insured bet
        hedge_odds: American odds of the hedge bet
        percent_insured: Fraction of the stake refunded on a loss
        percent_conversion: Assumed cash value per unit of refunded credit
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    promotion: Literal["bet_insurance"] = "bet_insurance"
    insured_odds: int
    insured_stake: float
    hedge_odds: int
    percent_insured: float = 1.0
    percent_conversion: float = 0.6

    @property
    def primary_odds(self) -> int:
        return self.insured_odds

    @property
    def primary_stake(self) -> float:
        return self.insured_stake

    @property
    def credit_amount(self) -> float:
        return self.insured_stake * self.percent_insured

    @property
    def conversion(self) -> float:
        return self.percent_conversion


class MustSpendInput(BaseModel):
    """Spending-requirement offer ("bet $X, get $Y in bonus credit").

    The required spend is placed on leg 1 and hedged on leg 2. Bonus credit
    is treated like a fully insured refund of ``bonus_value``.

    Attributes:
        required_spend: Amount that must be wagered on leg 1
        bonus_value: Bonus credit awarded for meeting the requirement
        percent_conversion: Assumed cash value per unit of bonus credit
        odds_leg1: American odds of the qualifying bet
        odds_leg2: American odds of the hedge bet
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    promotion: Literal["must_spend"] = "must_spend"
    required_spend: float
    bonus_value: float
    percent_conversion: float = 0.6
    odds_leg1: int
    odds_leg2: int

    @property
    def primary_odds(self) -> int:
        return self.odds_leg1

    @property
    def primary_stake(self) -> float:
        return self.required_spend

    @property
    def hedge_odds(self) -> int:
        return self.odds_leg2

    @property
    def credit_amount(self) -> float:
        return self.bonus_value

    @property
    def conversion(self) -> float:
        return self.percent_conversion


PromotionInput = Annotated[
    Union[FreeBetInput, HedgeBetInput, BetInsuranceInput, MustSpendInput],
    Field(discriminator="promotion"),
]


@dataclass(frozen=True)
class CalculationResult:
    """Derived fields of one promotion snapshot.

    Attributes:
        hedge_stake: Stake to place on the hedge leg
        payout: Guaranteed return
        profit: Guaranteed profit after all stakes
        quality_percent: Normalized deal quality (basis depends on promotion)
        failure_reason: Why sentinel zeros were committed, None on success
    """

    hedge_stake: float
    payout: float
    profit: float
    quality_percent: float
    failure_reason: str | None = None

    @property
    def is_valid(self) -> bool:
        return self.failure_reason is None

    @classmethod
    def sentinel(cls, reason: str) -> "CalculationResult":
        """All-zero result committed when no value is available."""
        return cls(
            hedge_stake=0.0,
            payout=0.0,
            profit=0.0,
            quality_percent=0.0,
            failure_reason=reason,
        )
