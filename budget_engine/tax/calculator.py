"""
Effective Tax Rate Calculator

Applies a progressive bracket table to a yearly gross income and reports
the effective rate: total tax as a percentage of income. This is the
average rate across all brackets, not the marginal rate of the top one.

Zero or negative income is not an error: its effective rate is 0.
"""

from decimal import ROUND_HALF_UP, Decimal
from typing import Optional, Union

from budget_engine.tax.brackets import (
    DEFAULT_TAX_BRACKETS,
    TaxBracketTable,
    validate_bracket_table,
)


Number = Union[Decimal, int, float]

_HUNDRED = Decimal(100)
_RATE_PLACES = Decimal("0.01")


def _as_decimal(value: Number) -> Decimal:
    if isinstance(value, Decimal):
        return value
    if isinstance(value, float):
        return Decimal(str(value))
    return Decimal(value)


class TaxBracketCalculator:
    """
    Progressive tax over an injected bracket table.

    Instances hold only the immutable table, so one calculator can be
    shared freely between callers.
    """

    def __init__(self, brackets: TaxBracketTable = DEFAULT_TAX_BRACKETS):
        self._brackets = validate_bracket_table(brackets)

    @property
    def brackets(self) -> TaxBracketTable:
        return self._brackets

    def total_tax(self, yearly_income: Number) -> Decimal:
        """Total tax owed on `yearly_income` (unrounded)."""
        income = _as_decimal(yearly_income)
        total = Decimal(0)
        if income <= 0:
            return total

        for bracket in self._brackets:
            if income <= bracket.lower:
                break
            top = income if bracket.upper is None else min(income, bracket.upper)
            total += (top - bracket.lower) * bracket.rate

        return total

    def effective_rate(self, yearly_income: Number) -> Decimal:
        """Effective tax rate in percent, rounded half-up to 2 places."""
        income = _as_decimal(yearly_income)
        if income <= 0:
            return Decimal(0).quantize(_RATE_PLACES)

        rate = self.total_tax(income) / income * _HUNDRED
        return rate.quantize(_RATE_PLACES, rounding=ROUND_HALF_UP)


_DEFAULT_CALCULATOR = TaxBracketCalculator()


def compute_effective_tax_rate(
    yearly_income: Number,
    brackets: Optional[TaxBracketTable] = None,
) -> Decimal:
    """
    Effective tax rate (percent, 2 decimal places) for a yearly income.

    Uses the 2024 single-filer table unless `brackets` is given.
    """
    if brackets is None:
        return _DEFAULT_CALCULATOR.effective_rate(yearly_income)
    return TaxBracketCalculator(brackets).effective_rate(yearly_income)
