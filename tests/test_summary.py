"""Tests for the budget summarizer."""

import pytest
from decimal import Decimal

from budget_engine.models import (
    BudgetSummary,
    ExpenseRecord,
    IncomeCreate,
    IncomeType,
    PayFrequency,
    RecurringFrequency,
    round_amount,
)
from budget_engine.projection import summarize_budget
from budget_engine.tax import TaxBracket, TaxBracketCalculator
from budget_engine.validation import InvalidInputError


@pytest.fixture
def biweekly_salary():
    """78000 gross, 15.66% effective, 65785.20 net."""
    return IncomeCreate(
        amount=Decimal("3000"),
        income_type=IncomeType.SALARY,
        pay_frequency=PayFrequency.BIWEEKLY,
    )


@pytest.fixture
def part_time_job():
    """41600 gross, 11.44% effective, 36840.96 net."""
    return IncomeCreate(
        amount=Decimal("20"),
        income_type=IncomeType.HOURLY,
        hours_per_week=Decimal("40"),
    )


@pytest.fixture
def expenses():
    """1200 recurring + 500 one-off = 1700 per year."""
    return [
        ExpenseRecord(
            amount=Decimal("100"),
            is_recurring=True,
            recurring_frequency=RecurringFrequency.MONTHLY,
        ),
        ExpenseRecord(amount=Decimal("500")),
    ]


class TestSummarizeBudget:
    """Tests for summarize_budget."""

    def test_empty_inputs(self):
        """Test no records gives an all-zero summary without dividing by zero."""
        summary = summarize_budget([], [])
        assert summary == BudgetSummary.empty()
        assert summary.savings_rate == 0

    def test_expenses_only(self, expenses):
        summary = summarize_budget([], expenses)
        assert summary.yearly_expenses == Decimal("1700")
        assert summary.net_income == Decimal("-1700")
        assert summary.savings_rate == 0

    def test_income_fields_are_net_of_tax(self, biweekly_salary, expenses):
        summary = summarize_budget([biweekly_salary], expenses)
        assert summary.yearly_income_gross == Decimal("78000")
        assert summary.yearly_income == Decimal("65785.20")
        assert summary.total_income == summary.yearly_income
        assert summary.yearly_expenses == Decimal("1700")
        assert summary.total_expenses == summary.yearly_expenses
        assert summary.net_income == Decimal("64085.20")

    def test_monthly_fields(self, biweekly_salary, expenses):
        summary = summarize_budget([biweekly_salary], expenses)
        assert summary.monthly_income == Decimal("65785.20") / 12
        assert summary.monthly_expenses == Decimal("1700") / 12
        assert summary.net_monthly == summary.net_income / 12
        assert round_amount(summary.monthly_income) == Decimal("5482.10")

    def test_net_income_invariant(self, biweekly_salary, part_time_job, expenses):
        summary = summarize_budget([biweekly_salary, part_time_job], expenses)
        assert summary.net_income == summary.yearly_income - summary.yearly_expenses

    def test_incomes_taxed_separately(self, biweekly_salary, part_time_job):
        """Test each income source gets its own effective rate."""
        summary = summarize_budget([biweekly_salary, part_time_job], [])
        assert summary.yearly_income_gross == Decimal("119600")
        assert summary.yearly_income == Decimal("65785.20") + Decimal("36840.96")

    def test_savings_rate_uses_gross_income(self, biweekly_salary, expenses):
        """
        Documented quirk: savings rate divides net income by GROSS income,
        while every other income field is net of tax.
        """
        summary = summarize_budget([biweekly_salary], expenses)
        assert summary.savings_rate == summary.net_income / Decimal("78000") * 100
        assert round_amount(summary.savings_rate) == Decimal("82.16")
        assert summary.savings_rate != summary.net_income / summary.yearly_income * 100

    def test_negative_savings_rate(self, part_time_job):
        rent = ExpenseRecord(
            amount=Decimal("4000"),
            is_recurring=True,
            recurring_frequency=RecurringFrequency.MONTHLY,
        )
        summary = summarize_budget([part_time_job], [rent])
        assert summary.net_income < 0
        assert summary.savings_rate < 0

    def test_order_independent(self, biweekly_salary, part_time_job, expenses):
        forward = summarize_budget([biweekly_salary, part_time_job], expenses)
        backward = summarize_budget([part_time_job, biweekly_salary], list(reversed(expenses)))
        assert forward == backward

    def test_injected_calculator(self, biweekly_salary):
        untaxed = TaxBracketCalculator(
            (TaxBracket(lower=Decimal("0"), upper=None, rate=Decimal("0")),)
        )
        summary = summarize_budget([biweekly_salary], [], untaxed)
        assert summary.yearly_income == Decimal("78000")
        assert summary.savings_rate == Decimal("100")

    def test_malformed_income_rejects_whole_summary(self, biweekly_salary):
        broken = IncomeCreate(amount=Decimal("20"), income_type=IncomeType.HOURLY)
        with pytest.raises(InvalidInputError):
            summarize_budget([biweekly_salary, broken], [])


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
