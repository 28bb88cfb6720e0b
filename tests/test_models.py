"""
Tests for the Budget Engine models

Test strategy:
1. Unit tests for models and each pure computation
2. Service tests with a recording logger (no log parsing)
3. Decimal comparisons everywhere; floats only at the API boundary
"""

import pytest
from decimal import Decimal
from uuid import uuid4

from pydantic import ValidationError

from budget_engine.models import (
    AuditEvent,
    AuditEventBuilder,
    AuditEventType,
    AuditSeverity,
    BudgetSummary,
    ExpenseCategory,
    ExpenseRecord,
    ExpenseStats,
    IncomeCreate,
    IncomeRecord,
    IncomeType,
    IncomeUpdate,
    PayFrequency,
    RecurringFrequency,
    round_amount,
)


class TestIncomeModels:
    """Tests for income records and DTOs."""

    def test_income_create_parses_decimals(self):
        """Test amounts from storage strings become Decimals."""
        income = IncomeCreate(
            amount="3000.50",
            income_type="salary",
            pay_frequency="biweekly",
        )
        assert income.amount == Decimal("3000.50")
        assert income.income_type == IncomeType.SALARY
        assert income.pay_frequency == PayFrequency.BIWEEKLY

    def test_income_rejects_non_positive_amount(self):
        """Test that zero and negative amounts are rejected."""
        with pytest.raises(ValidationError):
            IncomeCreate(amount=Decimal("0"), income_type=IncomeType.SALARY)
        with pytest.raises(ValidationError):
            IncomeCreate(amount=Decimal("-5"), income_type=IncomeType.HOURLY)

    def test_unknown_pay_frequency_becomes_none(self):
        """Test an unrecognized pay frequency falls back to unset."""
        income = IncomeCreate(
            amount=Decimal("1000"),
            income_type=IncomeType.SALARY,
            pay_frequency="monthly",
        )
        assert income.pay_frequency is None

    def test_pay_frequency_is_case_insensitive(self):
        income = IncomeCreate(
            amount=Decimal("1000"),
            income_type=IncomeType.SALARY,
            pay_frequency=" Semimonthly ",
        )
        assert income.pay_frequency == PayFrequency.SEMIMONTHLY

    def test_income_record_tax_rate_bounds(self):
        """Test tax rate must be a percentage."""
        with pytest.raises(ValidationError):
            IncomeRecord(
                amount=Decimal("1000"),
                income_type=IncomeType.SALARY,
                tax_rate=Decimal("101"),
            )

    def test_income_records_are_immutable(self):
        income = IncomeCreate(amount=Decimal("20"), income_type=IncomeType.HOURLY)
        with pytest.raises(ValidationError):
            income.amount = Decimal("30")

    def test_income_update_changes_skip_unset_and_none(self):
        """Test only explicitly set, non-null fields count as changes."""
        update = IncomeUpdate(amount=Decimal("25"), pay_frequency=None)
        assert update.changes() == {"amount": Decimal("25")}


class TestExpenseModels:
    """Tests for expense records."""

    def test_expense_defaults(self):
        expense = ExpenseRecord(amount=Decimal("12.50"))
        assert expense.is_recurring is False
        assert expense.recurring_frequency is None
        assert expense.category == ExpenseCategory.OTHER

    def test_expense_rejects_non_positive_amount(self):
        with pytest.raises(ValidationError):
            ExpenseRecord(amount=Decimal("0"))

    def test_recurring_frequency_parsed(self):
        expense = ExpenseRecord(
            amount=Decimal("100"),
            is_recurring=True,
            recurring_frequency="monthly",
        )
        assert expense.recurring_frequency == RecurringFrequency.MONTHLY

    def test_unknown_recurring_frequency_becomes_none(self):
        expense = ExpenseRecord(
            amount=Decimal("100"),
            is_recurring=True,
            recurring_frequency="fortnightly",
        )
        assert expense.recurring_frequency is None

    def test_all_categories_exist(self):
        """Test that expected categories exist."""
        expected = [
            "food", "transport", "entertainment", "utilities",
            "healthcare", "shopping", "other",
        ]
        for cat in expected:
            assert ExpenseCategory(cat) is not None


class TestResultModels:
    """Tests for summary and stats rendering."""

    def test_round_amount_half_up(self):
        assert round_amount(Decimal("17.055")) == Decimal("17.06")
        assert round_amount(Decimal("17.054")) == Decimal("17.05")
        assert round_amount(Decimal("2.5"), places=0) == Decimal("3")

    def test_empty_summary_is_all_zero(self):
        summary = BudgetSummary.empty()
        assert summary.yearly_income == 0
        assert summary.savings_rate == 0

    def test_summary_api_dict_uses_camel_case_and_rounds(self):
        """Test the presentation boundary rounds and renames."""
        summary = BudgetSummary(
            yearly_income=Decimal("1000"),
            monthly_income=Decimal("1000") / Decimal(12),
            savings_rate=Decimal("12.345"),
        )
        payload = summary.to_api_dict()
        assert payload["yearlyIncome"] == 1000.0
        assert payload["monthlyIncome"] == 83.33
        assert payload["savingsRate"] == 12.35
        assert "netMonthly" in payload
        assert "yearlyIncomeGross" in payload
        assert all(isinstance(value, float) for value in payload.values())

    def test_expense_stats_api_dict(self):
        stats = ExpenseStats(
            month="2024-02",
            total_expenses=Decimal("30"),
            category_breakdown={ExpenseCategory.FOOD: Decimal("30")},
            monthly_total=Decimal("30"),
            average_daily=Decimal("1.03"),
        )
        payload = stats.to_api_dict()
        assert payload["month"] == "2024-02"
        assert payload["categoryBreakdown"] == {"food": 30.0}
        assert payload["averageDaily"] == 1.03

    def test_expense_stats_month_format(self):
        with pytest.raises(ValidationError):
            ExpenseStats(month="February")


class TestAuditModels:
    """Tests for audit-related models."""

    def test_audit_event_creation(self):
        event = AuditEvent(
            event_type=AuditEventType.BUDGET_SUMMARIZED,
            description="Budget summarized",
        )
        assert event.severity == AuditSeverity.INFO
        assert event.timestamp.tzinfo is not None

    def test_audit_event_to_log_dict(self):
        correlation_id = uuid4()
        event = AuditEventBuilder.income_prepared(
            income_type="salary",
            yearly_gross="78000",
            tax_rate="13.24",
            correlation_id=correlation_id,
        )
        log_dict = event.to_log_dict()
        assert log_dict["event_type"] == "income_prepared"
        assert log_dict["correlation_id"] == str(correlation_id)
        assert log_dict["details"]["tax_rate"] == "13.24"

    def test_income_rejected_is_warning(self):
        event = AuditEventBuilder.income_rejected(
            field="hours_per_week",
            issues=[],
        )
        assert event.severity == AuditSeverity.WARNING
        assert event.to_log_dict()["correlation_id"] is None

    def test_expense_stats_event(self):
        event = AuditEventBuilder.expense_stats_computed(
            month="2024-03",
            expense_count=2,
            monthly_total="10",
        )
        assert event.event_type == AuditEventType.EXPENSE_STATS_COMPUTED
        assert event.details["month"] == "2024-03"


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
