"""
Income Annualizer

Projects one income record to a yearly gross figure and applies the
progressive tax calculator to get the yearly net.

- hourly: rate * hours per week * 52 weeks
- salary: pay-period amount * 26 (biweekly) or 24 (anything else)

A salary record with no pay frequency is annualized over 24 periods,
the same as semimonthly. The validator flags it but does not reject it.
"""

from decimal import Decimal
from typing import Optional

from budget_engine.models.records import IncomeCreate, IncomeType, PayFrequency
from budget_engine.models.results import AnnualizedIncome
from budget_engine.tax import TaxBracketCalculator
from budget_engine.validation import ensure_valid_income


WEEKS_PER_YEAR = Decimal(52)
BIWEEKLY_PERIODS = Decimal(26)
SEMIMONTHLY_PERIODS = Decimal(24)

_HUNDRED = Decimal(100)
_DEFAULT_CALCULATOR = TaxBracketCalculator()


def pay_periods(pay_frequency: Optional[PayFrequency]) -> Decimal:
    """Number of pay periods per year for a salary schedule."""
    if pay_frequency == PayFrequency.BIWEEKLY:
        return BIWEEKLY_PERIODS
    return SEMIMONTHLY_PERIODS


def yearly_gross(record: IncomeCreate) -> Decimal:
    """
    Pre-tax yearly income of a record.

    Raises InvalidInputError for hourly income without positive hours.
    """
    ensure_valid_income(record)

    if record.income_type == IncomeType.HOURLY:
        return record.amount * record.hours_per_week * WEEKS_PER_YEAR
    return record.amount * pay_periods(record.pay_frequency)


def annualize_income(
    record: IncomeCreate,
    calculator: Optional[TaxBracketCalculator] = None,
) -> AnnualizedIncome:
    """Yearly gross, effective tax rate and yearly net for one income record."""
    calculator = calculator or _DEFAULT_CALCULATOR

    gross = yearly_gross(record)
    rate = calculator.effective_rate(gross)

    return AnnualizedIncome(
        yearly_gross=gross,
        yearly_net=gross * (1 - rate / _HUNDRED),
        effective_tax_rate=rate,
    )
