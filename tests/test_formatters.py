"""Unit tests for display formatting."""

from rich.table import Table

from bonus_conversion.engine.models import BetInsuranceInput, CalculationResult, FreeBetInput
from bonus_conversion.engine.recompute import BonusCalculator
from bonus_conversion.engine.settlement import settle
from bonus_conversion.presentation.formatters import (
    format_american_odds,
    format_currency,
    format_percent,
    format_result_table,
)
from bonus_conversion.presentation.parser import EditBuffer


class TestFormatCurrency:
    """Tests for format_currency."""

    def test_whole_amount_drops_decimals(self):
        assert format_currency(10.0) == "$ 10"
        assert format_currency(0.0) == "$ 0"

    def test_rounds_to_cents(self):
        assert format_currency(4.761904761904762) == "$ 4.76"

    def test_keeps_trailing_zero_for_fractional_amounts(self):
        assert format_currency(4.8) == "$ 4.80"

    def test_rounds_up_to_whole(self):
        assert format_currency(9.999) == "$ 10"

    def test_half_rounds_away_from_zero(self):
        assert format_currency(0.125) == "$ 0.13"

    def test_negative(self):
        assert format_currency(-0.9090909) == "$ -0.91"

    def test_tiny_negative_is_zero(self):
        assert format_currency(-0.001) == "$ 0"

    def test_unrounded(self):
        assert format_currency(4.761904761904762, round_amount=False) == "$ 4.761904761904762"
        assert format_currency(10.0, round_amount=False) == "$ 10"

    def test_nan(self):
        assert format_currency(float("nan")) == "$ --"

    def test_amount_beyond_default_decimal_precision(self):
        amount = 1e27

        assert format_currency(amount) == f"$ {int(amount)}"

    def test_large_negative_amount(self):
        assert format_currency(-1.5e30) == f"$ {int(-1.5e30)}"

    def test_large_stake_typed_into_form(self):
        """Every digit the currency field accepts still formats."""
        buffer = EditBuffer(kind="currency")
        assert buffer.apply("$ 1" + "0" * 27)

        calc = BonusCalculator(
            FreeBetInput(promo_odds=-110, promo_stake=buffer.value, hedge_odds=-110)
        )

        assert calc.result.is_valid
        for amount in (calc.result.hedge_stake, calc.result.payout, calc.result.profit):
            text = format_currency(amount)
            assert text.startswith("$ ")
            assert len(text) > 28


class TestFormatPercent:
    """Tests for format_percent."""

    def test_two_fixed_decimals(self):
        assert format_percent(43.290043) == "43.29 %"
        assert format_percent(100.0) == "100.00 %"

    def test_negative_zero(self):
        assert format_percent(-0.0) == "0.00 %"

    def test_nan(self):
        assert format_percent(float("nan")) == "-- %"

    def test_huge_quality_from_tiny_insured_fraction(self):
        buffer = EditBuffer(kind="percent")
        assert buffer.apply("0." + "0" * 30 + "1 %")

        calc = BonusCalculator(
            BetInsuranceInput(
                insured_odds=-110,
                insured_stake=10,
                hedge_odds=-110,
                percent_insured=buffer.value,
                percent_conversion=0.6,
            )
        )

        quality = calc.result.quality_percent
        assert abs(quality) > 1e30
        text = format_percent(quality)
        assert text.startswith("-")
        assert text.endswith(".00 %")


class TestFormatAmericanOdds:
    def test_signs(self):
        assert format_american_odds(150) == "+150"
        assert format_american_odds(-110) == "-110"


class TestFormatResultTable:
    """Tests for format_result_table."""

    def test_free_bet_table(self, free_bet):
        table = format_result_table(free_bet, settle(free_bet))

        assert isinstance(table, Table)
        assert table.title == "Free Bet Calculator"
        assert table.caption is None
        # 3 inputs + 4 derived fields
        assert table.row_count == 7

    def test_insurance_table_lists_fractions(self, bet_insurance):
        table = format_result_table(bet_insurance, settle(bet_insurance))

        labels = list(table.columns[0].cells)
        values = list(table.columns[1].cells)
        assert "% Insured" in labels
        assert values[labels.index("% Insured")] == "100.00 %"
        assert values[labels.index("Assumed % Conversion")] == "60.00 %"
        assert "% Gain on Insured Amount" in labels

    def test_failed_result_caption(self, must_spend):
        table = format_result_table(must_spend, CalculationResult.sentinel("invalid_odds"))

        assert table.title == "Must Spend Calculator"
        assert "invalid_odds" in table.caption

    def test_invalid_odds_highlighted(self):
        inp = FreeBetInput(promo_odds=50, promo_stake=10, hedge_odds=-110)
        table = format_result_table(inp, CalculationResult.sentinel("invalid_odds"))

        values = list(table.columns[1].cells)
        assert str(values[0]) == "+50"
        assert values[0].style == "bold red"
        assert values[2] == "-110"
