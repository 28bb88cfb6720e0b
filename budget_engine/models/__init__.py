"""
Data Models Package

This package contains all Pydantic models used by the budget engine.
Every record entering the engine and every result leaving it conforms
to these schemas.
"""

from budget_engine.models.records import (
    ExpenseCategory,
    ExpenseRecord,
    IncomeCreate,
    IncomeRecord,
    IncomeType,
    IncomeUpdate,
    PayFrequency,
    RecurringFrequency,
)
from budget_engine.models.results import (
    AnnualizedIncome,
    BudgetSummary,
    ExpenseStats,
    ValidationIssue,
    round_amount,
)
from budget_engine.models.audit import (
    AuditEvent,
    AuditEventBuilder,
    AuditEventType,
    AuditSeverity,
)

__all__ = [
    # Input records
    "ExpenseCategory",
    "ExpenseRecord",
    "IncomeCreate",
    "IncomeRecord",
    "IncomeType",
    "IncomeUpdate",
    "PayFrequency",
    "RecurringFrequency",
    # Results
    "AnnualizedIncome",
    "BudgetSummary",
    "ExpenseStats",
    "ValidationIssue",
    "round_amount",
    # Audit models
    "AuditEvent",
    "AuditEventBuilder",
    "AuditEventType",
    "AuditSeverity",
]
