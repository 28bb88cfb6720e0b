"""
Budget Service Facade

This is the entry point the storage/aggregation layer calls. It ties the
pure engine to configuration and audit logging and defines the two flows
the outside world needs:

1. Income write (DTO → annualize → attach tax rate → record to persist)
2. Summary request (records → summary → JSON-ready payload)

DESIGN DECISION: The facade adds logging, never behavior.
Every number it returns comes straight from the pure functions, and every
InvalidInputError they raise reaches the caller after being audited.
"""

from datetime import date
from typing import Optional, Sequence
from uuid import UUID

from budget_engine.audit import AuditLogger
from budget_engine.config import EngineSettings, get_settings
from budget_engine.models.records import (
    ExpenseRecord,
    IncomeCreate,
    IncomeRecord,
    IncomeUpdate,
)
from budget_engine.models.results import (
    AnnualizedIncome,
    BudgetSummary,
    ExpenseStats,
    ValidationIssue,
)
from budget_engine.projection import annualize_income, compute_expense_stats, summarize_budget
from budget_engine.tax import DEFAULT_TAX_BRACKETS, TaxBracketCalculator, load_tax_brackets
from budget_engine.validation import InvalidInputError, validate_income


def calculator_from_settings(settings: EngineSettings) -> TaxBracketCalculator:
    """Calculator over the configured bracket table, or the 2024 default."""
    if settings.tax_brackets_file:
        return TaxBracketCalculator(load_tax_brackets(settings.tax_brackets_file))
    return TaxBracketCalculator(DEFAULT_TAX_BRACKETS)


class BudgetService:
    """
    Budget computations for the aggregation layer.

    Holds no per-request state: one instance can serve concurrent
    callers.
    """

    def __init__(
        self,
        calculator: Optional[TaxBracketCalculator] = None,
        audit_logger: Optional[AuditLogger] = None,
        settings: Optional[EngineSettings] = None,
    ):
        self._settings = settings or get_settings().engine
        self._calculator = calculator or calculator_from_settings(self._settings)
        self._audit = audit_logger or AuditLogger()

    @property
    def calculator(self) -> TaxBracketCalculator:
        return self._calculator

    # -------------------------------------------------------------------------
    # Income writes
    # -------------------------------------------------------------------------

    def review_income(self, dto: IncomeCreate) -> list[ValidationIssue]:
        """All issues on an income DTO, warnings included, for display before saving."""
        return validate_income(
            dto,
            max_hours_per_week=self._settings.max_hours_per_week,
        )

    def prepare_income(
        self,
        dto: IncomeCreate,
        correlation_id: Optional[UUID] = None,
    ) -> IncomeRecord:
        """
        Attach a freshly computed tax rate to a new income source.

        Raises:
            InvalidInputError: If the DTO breaks a required-field contract
        """
        record = IncomeRecord(**dto.model_dump())
        prepared, annualized = self._with_tax_rate(record, correlation_id)

        self._audit.log_income_prepared(
            income_type=prepared.income_type.value,
            yearly_gross=str(annualized.yearly_gross),
            tax_rate=str(prepared.tax_rate),
            correlation_id=correlation_id,
        )
        return prepared

    def update_income(
        self,
        current: IncomeRecord,
        update: IncomeUpdate,
        correlation_id: Optional[UUID] = None,
    ) -> IncomeRecord:
        """
        Merge an update into a stored income source and recompute its tax rate.

        Fields the update leaves unset keep their stored values. The tax
        rate is recomputed on every update, whatever changed.

        Raises:
            InvalidInputError: If the merged record breaks a contract
        """
        changes = update.changes()
        merged = IncomeRecord(**{**current.model_dump(), **changes})
        updated, _ = self._with_tax_rate(merged, correlation_id)

        self._audit.log_income_updated(
            changed_fields=sorted(changes),
            previous_tax_rate=None if current.tax_rate is None else str(current.tax_rate),
            tax_rate=str(updated.tax_rate),
            correlation_id=correlation_id,
        )
        return updated

    def _with_tax_rate(
        self,
        record: IncomeRecord,
        correlation_id: Optional[UUID],
    ) -> tuple[IncomeRecord, AnnualizedIncome]:
        try:
            annualized = annualize_income(record, self._calculator)
        except InvalidInputError as e:
            self._audit.log_income_rejected(
                field=e.field,
                issues=[issue.model_dump() for issue in e.issues],
                correlation_id=correlation_id,
            )
            raise
        return record.model_copy(update={"tax_rate": annualized.effective_tax_rate}), annualized

    # -------------------------------------------------------------------------
    # Summaries
    # -------------------------------------------------------------------------

    def summarize(
        self,
        incomes: Sequence[IncomeCreate],
        expenses: Sequence[ExpenseRecord],
        correlation_id: Optional[UUID] = None,
    ) -> BudgetSummary:
        """Full-precision budget summary for one snapshot of records."""
        summary = summarize_budget(incomes, expenses, self._calculator)

        self._audit.log_budget_summarized(
            income_count=len(incomes),
            expense_count=len(expenses),
            net_income=str(summary.net_income),
            savings_rate=str(summary.savings_rate),
            correlation_id=correlation_id,
        )
        return summary

    def summary_payload(
        self,
        incomes: Sequence[IncomeCreate],
        expenses: Sequence[ExpenseRecord],
        correlation_id: Optional[UUID] = None,
    ) -> dict[str, float]:
        """Budget summary rendered for the API (camelCase, rounded)."""
        summary = self.summarize(incomes, expenses, correlation_id)
        return summary.to_api_dict(self._settings.presentation_decimal_places)

    def expense_stats(
        self,
        expenses: Sequence[ExpenseRecord],
        as_of: Optional[date] = None,
        correlation_id: Optional[UUID] = None,
    ) -> ExpenseStats:
        """Raw spending statistics for the month containing `as_of` (default today)."""
        stats = compute_expense_stats(expenses, as_of or date.today())

        self._audit.log_expense_stats(
            month=stats.month,
            expense_count=len(expenses),
            monthly_total=str(stats.monthly_total),
            correlation_id=correlation_id,
        )
        return stats
