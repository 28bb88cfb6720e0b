"""Income, expense and budget projections."""

from budget_engine.projection.expenses import (
    YEARLY_MULTIPLIERS,
    compute_expense_stats,
    project_yearly_expenses,
    projected_amount,
    yearly_multiplier,
)
from budget_engine.projection.income import (
    annualize_income,
    pay_periods,
    yearly_gross,
)
from budget_engine.projection.summary import summarize_budget

__all__ = [
    "YEARLY_MULTIPLIERS",
    "annualize_income",
    "compute_expense_stats",
    "pay_periods",
    "project_yearly_expenses",
    "projected_amount",
    "summarize_budget",
    "yearly_gross",
    "yearly_multiplier",
]
