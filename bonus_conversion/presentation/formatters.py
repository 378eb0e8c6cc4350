"""Display formatting for calculator inputs and results.

Displayed values are lossy (two decimals, "$ " / " %" decoration) and never
feed back into the numeric model; editable fields go through the parser.

Rounding is half away from zero on the exact binary value, so 0.125
shows as 0.13.
"""

import math
from decimal import ROUND_HALF_UP, Decimal, localcontext

from rich.table import Table
from rich.text import Text

from bonus_conversion.engine.models import CalculationResult, PromotionInput
from bonus_conversion.engine.odds import is_valid_american
from bonus_conversion.presentation.parser import CURRENCY_PREFIX, PERCENT_SUFFIX

_CENTS = Decimal("0.01")

PROMOTION_TITLES = {
    "free_bet": "Free Bet",
    "hedge_bet": "Hedge Bet",
    "bet_insurance": "Bet Insurance",
    "must_spend": "Must Spend",
}

# field name -> (label, kind)
_INPUT_FIELDS = {
    "promo_odds": ("Free Bet Odds", "odds"),
    "promo_stake": ("Free Bet Amount", "currency"),
    "bet_odds": ("Bet Odds", "odds"),
    "bet_stake": ("Bet Amount", "currency"),
    "insured_odds": ("Insured Bet Odds", "odds"),
    "insured_stake": ("Insured Bet Amount", "currency"),
    "odds_leg1": ("Qualifying Bet Odds", "odds"),
    "required_spend": ("Required Spend", "currency"),
    "hedge_odds": ("Hedge Bet Odds", "odds"),
    "odds_leg2": ("Hedge Bet Odds", "odds"),
    "bonus_value": ("Bonus Value", "currency"),
    "percent_insured": ("% Insured", "fraction"),
    "percent_conversion": ("Assumed % Conversion", "fraction"),
}

_QUALITY_LABELS = {
    "free_bet": "% Conversion",
    "hedge_bet": "% Return on Stake",
    "bet_insurance": "% Gain on Insured Amount",
    "must_spend": "% Gain on Bonus Value",
}


def _round_cents(amount: float) -> Decimal:
    exact = Decimal(amount)
    with localcontext() as ctx:
        # Room for every integer digit plus the cents
        ctx.prec = max(ctx.prec, exact.adjusted() + 3)
        # "+ 0" folds -0.00 into 0.00
        return exact.quantize(_CENTS, rounding=ROUND_HALF_UP) + 0


def format_currency(amount: float, round_amount: bool = True) -> str:
    """Format an amount as "$ <value>".

    Whole amounts drop their decimals; other amounts keep exactly two.

    Args:
        amount: Amount in currency units
        round_amount: If False, print the unrounded value

    Returns:
        Display string, "$ --" for NaN or infinite amounts

    Examples:
        >>> format_currency(10.0)
        '$ 10'
        >>> format_currency(4.7619)
        '$ 4.76'
        >>> format_currency(4.8)
        '$ 4.80'
    """
    if not math.isfinite(amount):
        return f"{CURRENCY_PREFIX}--"
    if not round_amount:
        if float(amount).is_integer():
            return f"{CURRENCY_PREFIX}{int(amount)}"
        return f"{CURRENCY_PREFIX}{amount!r}"

    rounded = _round_cents(amount)
    if rounded == rounded.to_integral_value():
        return f"{CURRENCY_PREFIX}{int(rounded)}"
    return f"{CURRENCY_PREFIX}{rounded}"


def format_percent(value: float) -> str:
    """Format a percentage with two fixed decimals ("43.29 %")."""
    if not math.isfinite(value):
        return f"--{PERCENT_SUFFIX}"
    return f"{_round_cents(value)}{PERCENT_SUFFIX}"


def format_american_odds(odds: int) -> str:
    """Format American odds with an explicit sign ("+150", "-110")."""
    if odds > 0:
        return f"+{odds}"
    return f"{odds}"


def _format_input(kind: str, value: float) -> str | Text:
    if kind == "odds":
        if not is_valid_american(value):
            return Text(format_american_odds(value), style="bold red")
        return format_american_odds(value)
    if kind == "currency":
        return format_currency(value)
    return format_percent(value * 100)


def _signed_money(amount: float) -> Text:
    style = "green" if amount > 0 else "red" if amount < 0 else "dim"
    return Text(format_currency(amount), style=style)


def format_result_table(inp: PromotionInput, result: CalculationResult) -> Table:
    """Format a promotion snapshot and its result as a Rich table.

    Args:
        inp: Promotion input the result was computed from
        result: Committed calculation result

    Returns:
        Rich Table with one row per input and derived field
    """
    caption = None
    if not result.is_valid:
        caption = f"No result available ({result.failure_reason})"

    table = Table(
        title=f"{PROMOTION_TITLES[inp.promotion]} Calculator",
        caption=caption,
        show_header=True,
        header_style="bold cyan",
    )
    table.add_column("Field", justify="left", style="white")
    table.add_column("Value", justify="right")

    for name, value in inp.model_dump(exclude={"promotion"}).items():
        label, kind = _INPUT_FIELDS[name]
        table.add_row(label, _format_input(kind, value))

    table.add_section()
    table.add_row("Hedge Bet Amount", Text(format_currency(result.hedge_stake), style="bold"))
    table.add_row("Payout", format_currency(result.payout))
    table.add_row("Profit", _signed_money(result.profit))
    table.add_row(
        _QUALITY_LABELS[inp.promotion],
        Text(format_percent(result.quality_percent), style="bold green"),
    )

    return table
