"""
Income Record Validation

Pydantic already enforces the shape of a record (types, amount > 0).
This module checks the cross-field contracts pydantic cannot express
per field:

- hourly income needs a positive `hours_per_week`
- salaried income without a pay frequency is accepted but flagged,
  since it silently falls back to 24 pay periods

IMPORTANT: Validation NEVER silently fixes issues.
Errors reject the record; warnings are reported and the record proceeds.
"""

from decimal import Decimal
from typing import Optional

from budget_engine.models.records import IncomeCreate, IncomeType
from budget_engine.models.results import ValidationIssue


class InvalidInputError(ValueError):
    """A record violates a required-field contract."""

    def __init__(self, issues: list[ValidationIssue]):
        self.issues = issues
        self.field = issues[0].field if issues else "record"
        super().__init__("; ".join(f"{issue.field}: {issue.message}" for issue in issues))


def validate_income(
    record: IncomeCreate,
    max_hours_per_week: Optional[Decimal] = None,
) -> list[ValidationIssue]:
    """
    Check an income record.

    Returns all issues found; an empty list means the record is clean.
    """
    issues = []

    if record.income_type == IncomeType.HOURLY:
        hours = record.hours_per_week
        if hours is None:
            issues.append(ValidationIssue(
                field="hours_per_week",
                issue_type="missing",
                message="Hours per week is required for hourly income",
                severity="error",
                suggested_fix="Enter the number of hours worked per week",
            ))
        elif hours <= 0:
            issues.append(ValidationIssue(
                field="hours_per_week",
                issue_type="invalid_value",
                message=f"Hours per week must be greater than zero (got {hours})",
                severity="error",
            ))
        elif max_hours_per_week is not None and hours > max_hours_per_week:
            issues.append(ValidationIssue(
                field="hours_per_week",
                issue_type="suspicious_value",
                message=f"Hours per week ({hours}) exceeds {max_hours_per_week}",
                severity="warning",
                suggested_fix="Check the hours were entered per week, not per month",
            ))

    elif record.pay_frequency is None:
        issues.append(ValidationIssue(
            field="pay_frequency",
            issue_type="defaulted",
            message="No pay frequency set; treated as semimonthly (24 pay periods)",
            severity="warning",
            suggested_fix="Choose biweekly or semimonthly",
        ))

    return issues


def ensure_valid_income(record: IncomeCreate) -> None:
    """Raise InvalidInputError if the record has any error-level issue."""
    errors = [issue for issue in validate_income(record) if issue.severity == "error"]
    if errors:
        raise InvalidInputError(errors)
