"""
Budget Summarizer

Composes the income annualizer and the expense projector into one
`BudgetSummary`.

The summary's income fields are post-tax. The savings rate is the one
exception: it divides net income by GROSS yearly income. That asymmetry
is long-standing behavior callers depend on and is kept as is.
"""

from decimal import Decimal
from typing import Optional, Sequence

from budget_engine.models.records import ExpenseRecord, IncomeCreate
from budget_engine.models.results import BudgetSummary
from budget_engine.projection.expenses import project_yearly_expenses
from budget_engine.projection.income import annualize_income
from budget_engine.tax import TaxBracketCalculator


MONTHS_PER_YEAR = Decimal(12)
_HUNDRED = Decimal(100)


def summarize_budget(
    income_records: Sequence[IncomeCreate],
    expense_records: Sequence[ExpenseRecord],
    calculator: Optional[TaxBracketCalculator] = None,
) -> BudgetSummary:
    """
    Yearly and monthly budget figures for one snapshot of records.

    Raises InvalidInputError if any income record is malformed; no
    partial summary is produced.
    """
    gross = Decimal(0)
    net = Decimal(0)
    for record in income_records:
        annualized = annualize_income(record, calculator)
        gross += annualized.yearly_gross
        net += annualized.yearly_net

    expenses = project_yearly_expenses(expense_records)
    net_income = net - expenses
    savings_rate = net_income / gross * _HUNDRED if gross > 0 else Decimal(0)

    return BudgetSummary(
        yearly_income=net,
        yearly_expenses=expenses,
        monthly_income=net / MONTHS_PER_YEAR,
        monthly_expenses=expenses / MONTHS_PER_YEAR,
        net_income=net_income,
        net_monthly=net_income / MONTHS_PER_YEAR,
        savings_rate=savings_rate,
        yearly_income_gross=gross,
        total_income=net,
        total_expenses=expenses,
    )
