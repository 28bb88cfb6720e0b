"""
Input Records for the Budget Engine

These models describe the raw income and expense records handed to the
engine by the storage layer. They are immutable value types: the engine
never mutates a record, it returns new values.

DESIGN DECISION: Money, hours and rates are Decimal end-to-end.
Values coming from storage as strings or numbers are parsed once, here,
and never round-trip through text again.
"""

from datetime import date
from decimal import Decimal
from enum import Enum
from typing import Any, Optional

from pydantic import (
    BaseModel,
    ConfigDict,
    Field,
    field_validator,
)


# =============================================================================
# ENUMS - Finite set of valid values
# =============================================================================

class IncomeType(str, Enum):
    """How an income source is paid."""
    SALARY = "salary"
    HOURLY = "hourly"


class PayFrequency(str, Enum):
    """
    Pay schedule for salaried income.

    Biweekly pays 26 times a year, semimonthly 24.
    """
    BIWEEKLY = "biweekly"
    SEMIMONTHLY = "semimonthly"


class RecurringFrequency(str, Enum):
    """How often a recurring expense repeats."""
    DAILY = "daily"
    WEEKLY = "weekly"
    BIWEEKLY = "biweekly"
    MONTHLY = "monthly"
    YEARLY = "yearly"


class ExpenseCategory(str, Enum):
    """Expense categories used for the per-category breakdown."""
    FOOD = "food"
    TRANSPORT = "transport"
    ENTERTAINMENT = "entertainment"
    UTILITIES = "utilities"
    HEALTHCARE = "healthcare"
    SHOPPING = "shopping"
    OTHER = "other"


def _known_or_none(enum_cls: type[Enum], value: Any) -> Any:
    """
    Map a frequency string to its enum member, or None if unrecognized.

    Unrecognized frequencies take the same fallback as a missing one
    (24 pay periods, yearly multiplier of 1).
    """
    if value is None or isinstance(value, enum_cls):
        return value
    if isinstance(value, str):
        try:
            return enum_cls(value.strip().lower())
        except ValueError:
            return None
    return value


# =============================================================================
# INCOME
# =============================================================================

class IncomeCreate(BaseModel):
    """
    A user-submitted income source, before a tax rate is attached.

    `hours_per_week` is deliberately unbounded here. Hourly income with a
    missing or non-positive value is rejected by the validator so the
    error names the offending field.
    """
    model_config = ConfigDict(frozen=True, str_strip_whitespace=True)

    amount: Decimal = Field(
        ...,
        gt=0,
        description="Pay-period amount (salary) or hourly rate (hourly)"
    )
    income_type: IncomeType = Field(
        ...,
        description="Salary or hourly"
    )
    pay_frequency: Optional[PayFrequency] = Field(
        default=None,
        description="Pay schedule; only meaningful for salary"
    )
    hours_per_week: Optional[Decimal] = Field(
        default=None,
        description="Hours worked per week; only meaningful for hourly"
    )
    description: Optional[str] = Field(
        default=None,
        max_length=500,
    )
    income_date: Optional[date] = None

    @field_validator('pay_frequency', mode='before')
    @classmethod
    def normalize_pay_frequency(cls, v: Any) -> Any:
        return _known_or_none(PayFrequency, v)


class IncomeRecord(IncomeCreate):
    """
    A stored income source.

    `tax_rate` is derived: it is recomputed from the annualized gross
    every time the record is created or updated, never user-supplied.
    """

    tax_rate: Optional[Decimal] = Field(
        default=None,
        ge=0,
        le=100,
        description="Effective tax rate in percent"
    )


class IncomeUpdate(BaseModel):
    """
    Partial update to a stored income source.

    Fields left unset (or None) keep their stored value.
    """
    model_config = ConfigDict(frozen=True, str_strip_whitespace=True)

    amount: Optional[Decimal] = Field(default=None, gt=0)
    income_type: Optional[IncomeType] = None
    pay_frequency: Optional[PayFrequency] = None
    hours_per_week: Optional[Decimal] = None
    description: Optional[str] = Field(default=None, max_length=500)
    income_date: Optional[date] = None

    @field_validator('pay_frequency', mode='before')
    @classmethod
    def normalize_pay_frequency(cls, v: Any) -> Any:
        return _known_or_none(PayFrequency, v)

    def changes(self) -> dict[str, Any]:
        """Fields this update actually sets."""
        return self.model_dump(exclude_unset=True, exclude_none=True)


# =============================================================================
# EXPENSES
# =============================================================================

class ExpenseRecord(BaseModel):
    """
    One expense.

    A non-recurring expense counts once per year at its raw amount;
    it is not amortized.
    """
    model_config = ConfigDict(frozen=True, str_strip_whitespace=True)

    amount: Decimal = Field(
        ...,
        gt=0,
        description="Per-occurrence amount"
    )
    is_recurring: bool = False
    recurring_frequency: Optional[RecurringFrequency] = Field(
        default=None,
        description="Repeat interval; only meaningful when is_recurring"
    )
    category: ExpenseCategory = ExpenseCategory.OTHER
    description: Optional[str] = Field(
        default=None,
        max_length=500,
    )
    expense_date: Optional[date] = None

    @field_validator('recurring_frequency', mode='before')
    @classmethod
    def normalize_recurring_frequency(cls, v: Any) -> Any:
        return _known_or_none(RecurringFrequency, v)
