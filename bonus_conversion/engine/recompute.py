"""Two-stage recomputation of a calculator form.

The caller owns the current input snapshot; every edit replaces it and
triggers an explicit recompute:

    Stage A: hedge stake        (depends on odds, stake, promotion fractions)
    Stage B: payout, profit,    (depends on the hedge stake committed by A)
             quality percent

Stage B always runs after Stage A, so it never sees a stale hedge stake.
Fallback policy: a failed computation always commits the sentinel 0.0.
When Stage A fails every Stage B field depends on the failed conversion,
so the whole result is zeroed rather than reporting a profit computed
against a placeholder hedge stake.
"""

import uuid
from typing import Any

from pydantic import TypeAdapter

from bonus_conversion.config import Settings, get_settings
from bonus_conversion.engine.models import (
    BetInsuranceInput,
    CalculationResult,
    FreeBetInput,
    HedgeBetInput,
    MustSpendInput,
    PromotionInput,
)
from bonus_conversion.engine.settlement import (
    Failure,
    PromotionType,
    Success,
    try_hedge_stake,
    try_results,
)
from bonus_conversion.monitoring import RecomputeMetrics, get_logger, session_context

log = get_logger(__name__)

SENTINEL = 0.0

_input_adapter: TypeAdapter = TypeAdapter(PromotionInput)


def default_input(promotion: PromotionType | str, settings: Settings | None = None) -> PromotionInput:
    """Build the initial form input for a promotion type from settings.

    Args:
        promotion: Promotion type (enum or its string value)
        settings: Settings to read defaults from (cached settings if None)

    Returns:
        Promotion input seeded with the configured defaults
    """
    settings = settings or get_settings()
    promotion = PromotionType(promotion)

    if promotion is PromotionType.FREE_BET:
        return FreeBetInput(
            promo_odds=settings.default_odds,
            promo_stake=settings.default_stake,
            hedge_odds=settings.default_hedge_odds,
        )
    if promotion is PromotionType.HEDGE_BET:
        return HedgeBetInput(
            bet_odds=settings.default_odds,
            bet_stake=settings.default_stake,
            hedge_odds=settings.default_hedge_odds,
        )
    if promotion is PromotionType.BET_INSURANCE:
        return BetInsuranceInput(
            insured_odds=settings.default_odds,
            insured_stake=settings.default_stake,
            hedge_odds=settings.default_hedge_odds,
            percent_insured=settings.default_percent_insured / 100,
            percent_conversion=settings.default_percent_conversion / 100,
        )
    return MustSpendInput(
        required_spend=settings.default_stake,
        bonus_value=settings.default_bonus_value,
        percent_conversion=settings.default_percent_conversion / 100,
        odds_leg1=settings.default_odds,
        odds_leg2=settings.default_hedge_odds,
    )


class BonusCalculator:
    """Holds one form's input snapshot and its last committed result.

    Example:
        >>> calc = BonusCalculator(FreeBetInput(promo_odds=-110, promo_stake=10, hedge_odds=-110))
        >>> round(calc.result.profit, 2)
        4.33
        >>> calc.update(hedge_odds=50).result.is_valid
        False
    """

    def __init__(self, inp: PromotionInput, session_id: str | None = None):
        self.session_id = session_id or uuid.uuid4().hex
        self.metrics = RecomputeMetrics()
        self._input = inp
        self._hedge_stake = SENTINEL
        self._result = CalculationResult.sentinel("not_computed")
        self.recompute()

    @classmethod
    def from_settings(
        cls, promotion: PromotionType | str, settings: Settings | None = None
    ) -> "BonusCalculator":
        """Create a calculator seeded with the configured defaults."""
        return cls(default_input(promotion, settings))

    @property
    def input(self) -> PromotionInput:
        return self._input

    @property
    def result(self) -> CalculationResult:
        return self._result

    def update(self, **changes: Any) -> "BonusCalculator":
        """Replace input fields and recompute.

        Args:
            **changes: Input fields to replace (e.g. ``hedge_odds=-120``)

        Returns:
            self, for chaining

        Raises:
            pydantic.ValidationError: If a field is structurally invalid
        """
        data = self._input.model_dump()
        data.update(changes)
        self._input = _input_adapter.validate_python(data)
        return self.recompute()

    def recompute(self) -> "BonusCalculator":
        """Run Stage A then Stage B and commit the result."""
        with session_context(self.session_id):
            failure_reason = self._run_stage_a()
            self._result = self._run_stage_b(failure_reason)

            self.metrics.recomputations += 1
            if not self._result.is_valid:
                self.metrics.failed_recomputations += 1

            log.debug(
                "recomputed",
                promotion=self._input.promotion,
                hedge_stake=self._result.hedge_stake,
                payout=self._result.payout,
                profit=self._result.profit,
                quality_percent=self._result.quality_percent,
                failure_reason=self._result.failure_reason,
            )
        return self

    def _run_stage_a(self) -> str | None:
        outcome = try_hedge_stake(self._input)
        if isinstance(outcome, Success):
            self._hedge_stake = outcome.value
            return None

        self._hedge_stake = SENTINEL
        self.metrics.stage_a_failures += 1
        log.info(
            "stage_a_failed",
            promotion=self._input.promotion,
            reason=outcome.reason,
            odds=getattr(outcome.error, "odds", None),
        )
        return outcome.reason

    def _run_stage_b(self, stage_a_failure: str | None) -> CalculationResult:
        if stage_a_failure is not None:
            return CalculationResult.sentinel(stage_a_failure)

        payout, profit, quality = try_results(self._input, self._hedge_stake)
        failures = [c for c in (payout, profit, quality) if isinstance(c, Failure)]
        if failures:
            self.metrics.stage_b_failures += 1
            log.info(
                "stage_b_failed",
                promotion=self._input.promotion,
                reason=failures[0].reason,
                failed_fields=len(failures),
            )

        return CalculationResult(
            hedge_stake=self._hedge_stake,
            payout=_value_or_sentinel(payout),
            profit=_value_or_sentinel(profit),
            quality_percent=_value_or_sentinel(quality),
            failure_reason=failures[0].reason if failures else None,
        )


def _value_or_sentinel(computation: Success | Failure) -> float:
    if isinstance(computation, Success):
        return computation.value
    return SENTINEL
