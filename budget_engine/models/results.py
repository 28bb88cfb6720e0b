"""
Derived Values Produced by the Budget Engine

None of these are persisted. They are computed per call from a snapshot
of records and handed back to the caller, who decides how to render them.

DESIGN DECISION: Results carry full Decimal precision.
Rounding happens only when a result is rendered for the API
(`to_api_dict`), so aggregating results never compounds rounding error.
"""

from decimal import ROUND_HALF_UP, Decimal
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from budget_engine.models.records import ExpenseCategory


ZERO = Decimal("0")


def round_amount(value: Decimal, places: int = 2) -> Decimal:
    """Round half-up to a fixed number of decimal places."""
    return value.quantize(Decimal(1).scaleb(-places), rounding=ROUND_HALF_UP)


# =============================================================================
# VALIDATION MODELS
# =============================================================================

class ValidationIssue(BaseModel):
    """A single problem found on an input record."""

    field: str = Field(
        ...,
        description="Field with the issue"
    )
    issue_type: str = Field(
        ...,
        description="Type of issue (e.g., 'missing', 'invalid_value', 'defaulted')"
    )
    message: str = Field(
        ...,
        description="Human-readable description of the issue"
    )
    severity: str = Field(
        ...,
        pattern="^(error|warning|info)$",
        description="Issue severity"
    )
    suggested_fix: Optional[str] = Field(
        default=None,
        description="Suggested fix if available"
    )


# =============================================================================
# PROJECTION RESULTS
# =============================================================================

class AnnualizedIncome(BaseModel):
    """One income source projected to a year, before and after tax."""
    model_config = ConfigDict(frozen=True)

    yearly_gross: Decimal
    yearly_net: Decimal
    effective_tax_rate: Decimal = Field(
        ...,
        description="Effective tax rate in percent, 2 decimal places"
    )


class BudgetSummary(BaseModel):
    """
    Yearly and monthly view of a user's budget.

    The income fields are post-tax. `savings_rate` is measured against
    the GROSS yearly income (`yearly_income_gross`), not the net figure
    the other income fields use.
    """
    model_config = ConfigDict(
        frozen=True,
        alias_generator=to_camel,
        populate_by_name=True,
    )

    yearly_income: Decimal = ZERO
    yearly_expenses: Decimal = ZERO
    monthly_income: Decimal = ZERO
    monthly_expenses: Decimal = ZERO
    net_income: Decimal = ZERO
    net_monthly: Decimal = ZERO
    savings_rate: Decimal = Field(
        default=ZERO,
        description="Net income as a percentage of gross yearly income"
    )
    yearly_income_gross: Decimal = ZERO
    total_income: Decimal = ZERO
    total_expenses: Decimal = ZERO

    @classmethod
    def empty(cls) -> "BudgetSummary":
        return cls()

    def to_api_dict(self, places: int = 2) -> dict[str, float]:
        """
        Render as a JSON-ready dict with camelCase keys.

        This is the presentation boundary: every value is rounded here.
        """
        return {
            key: float(round_amount(value, places))
            for key, value in self.model_dump(by_alias=True).items()
        }


class ExpenseStats(BaseModel):
    """
    Raw (unprojected) spending statistics.

    `monthly_total` and `average_daily` cover the calendar month named by
    `month`; undated expenses only count towards the totals.
    """
    model_config = ConfigDict(
        frozen=True,
        alias_generator=to_camel,
        populate_by_name=True,
    )

    month: str = Field(
        ...,
        pattern=r"^\d{4}-\d{2}$",
        description="Calendar month the monthly figures cover (YYYY-MM)"
    )
    total_expenses: Decimal = ZERO
    category_breakdown: dict[ExpenseCategory, Decimal] = Field(default_factory=dict)
    monthly_total: Decimal = ZERO
    average_daily: Decimal = ZERO

    def to_api_dict(self, places: int = 2) -> dict[str, object]:
        """Render as a JSON-ready dict with camelCase keys."""
        return {
            "month": self.month,
            "totalExpenses": float(round_amount(self.total_expenses, places)),
            "categoryBreakdown": {
                category.value: float(round_amount(total, places))
                for category, total in self.category_breakdown.items()
            },
            "monthlyTotal": float(round_amount(self.monthly_total, places)),
            "averageDaily": float(round_amount(self.average_daily, places)),
        }
