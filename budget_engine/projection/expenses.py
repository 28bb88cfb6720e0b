"""
Expense Projector and Statistics

`project_yearly_expenses` turns a set of expense records into one
yearly figure: one-off expenses count once, recurring ones are scaled by
how often they repeat in a year.

`compute_expense_stats` reports what was actually spent (no projection):
the raw total, the per-category breakdown, and the total and daily
average for one calendar month.

Sums accumulate in input order and are never rounded here.
"""

import calendar
from datetime import date
from decimal import Decimal
from typing import Iterable, Optional, Union

from budget_engine.models.records import ExpenseCategory, ExpenseRecord, RecurringFrequency
from budget_engine.models.results import ExpenseStats, round_amount


YEARLY_MULTIPLIERS: dict[RecurringFrequency, int] = {
    RecurringFrequency.DAILY: 365,
    RecurringFrequency.WEEKLY: 52,
    RecurringFrequency.BIWEEKLY: 26,
    RecurringFrequency.MONTHLY: 12,
    RecurringFrequency.YEARLY: 1,
}


def yearly_multiplier(frequency: Optional[Union[RecurringFrequency, str]]) -> int:
    """
    Occurrences per year for a recurring frequency.

    Missing or unrecognized frequencies count as once a year.
    """
    if frequency is None:
        return 1
    try:
        return YEARLY_MULTIPLIERS[RecurringFrequency(frequency)]
    except ValueError:
        return 1


def projected_amount(record: ExpenseRecord) -> Decimal:
    """What one record contributes to the yearly projection."""
    if not record.is_recurring:
        return record.amount
    return record.amount * yearly_multiplier(record.recurring_frequency)


def project_yearly_expenses(records: Iterable[ExpenseRecord]) -> Decimal:
    """Total projected yearly expenses."""
    total = Decimal(0)
    for record in records:
        total += projected_amount(record)
    return total


def compute_expense_stats(records: Iterable[ExpenseRecord], as_of: date) -> ExpenseStats:
    """
    Spending statistics for the calendar month containing `as_of`.

    `as_of` is explicit so the result never depends on the clock.
    """
    total = Decimal(0)
    monthly_total = Decimal(0)
    breakdown: dict[ExpenseCategory, Decimal] = {}

    for record in records:
        total += record.amount
        breakdown[record.category] = breakdown.get(record.category, Decimal(0)) + record.amount

        spent_on = record.expense_date
        if spent_on and (spent_on.year, spent_on.month) == (as_of.year, as_of.month):
            monthly_total += record.amount

    _, days_in_month = calendar.monthrange(as_of.year, as_of.month)

    return ExpenseStats(
        month=f"{as_of.year}-{as_of.month:02d}",
        total_expenses=total,
        category_breakdown=breakdown,
        monthly_total=monthly_total,
        average_daily=round_amount(monthly_total / days_in_month),
    )
