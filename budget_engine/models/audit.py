"""
Audit Models for the Budget Engine

Every income write and every budget computation served through the
service facade produces an audit event. This provides:
1. Traceability of how a stored tax rate was derived
2. Debugging information when a summary looks wrong
3. Correlation of all events belonging to one caller request

DESIGN DECISION: Audit events describe results, never raw records.
Amounts are logged as strings so Decimal precision survives JSON.
"""

from datetime import datetime, timezone
from enum import Enum
from typing import Any, Optional
from uuid import UUID, uuid4

from pydantic import BaseModel, Field


class AuditEventType(str, Enum):
    """Types of events we audit."""
    # Income writes
    INCOME_PREPARED = "income_prepared"
    INCOME_UPDATED = "income_updated"
    INCOME_REJECTED = "income_rejected"

    # Computations
    BUDGET_SUMMARIZED = "budget_summarized"
    EXPENSE_STATS_COMPUTED = "expense_stats_computed"


class AuditSeverity(str, Enum):
    """Severity level for audit events."""
    DEBUG = "debug"
    INFO = "info"
    WARNING = "warning"
    ERROR = "error"


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class AuditEvent(BaseModel):
    """
    A single audit event.

    This is the core unit of our audit trail.
    """

    event_id: UUID = Field(
        default_factory=uuid4,
        description="Unique event identifier"
    )
    timestamp: datetime = Field(
        default_factory=_utcnow,
        description="When the event occurred (UTC)"
    )

    event_type: AuditEventType = Field(
        ...,
        description="Type of event"
    )
    severity: AuditSeverity = Field(
        default=AuditSeverity.INFO,
        description="Event severity"
    )

    entity_type: Optional[str] = Field(
        default=None,
        description="Type of entity (e.g., 'income', 'budget')"
    )

    correlation_id: Optional[UUID] = Field(
        default=None,
        description="ID to correlate related events (e.g., all events in one request)"
    )

    description: str = Field(
        ...,
        max_length=500,
        description="Human-readable description of what happened"
    )
    details: dict[str, Any] = Field(
        default_factory=dict,
        description="Additional event-specific data"
    )

    def to_log_dict(self) -> dict[str, Any]:
        """Convert to a flat dict for structured logging."""
        return {
            "event_id": str(self.event_id),
            "timestamp": self.timestamp.isoformat(),
            "event_type": self.event_type.value,
            "severity": self.severity.value,
            "entity_type": self.entity_type,
            "correlation_id": str(self.correlation_id) if self.correlation_id else None,
            "description": self.description,
            "details": self.details,
        }


class AuditEventBuilder:
    """
    Factory methods for the events the service facade emits.

    Keeps event wording and detail keys consistent across call sites.
    """

    @staticmethod
    def income_prepared(
        income_type: str,
        yearly_gross: str,
        tax_rate: str,
        correlation_id: Optional[UUID] = None,
    ) -> AuditEvent:
        return AuditEvent(
            event_type=AuditEventType.INCOME_PREPARED,
            entity_type="income",
            correlation_id=correlation_id,
            description=f"Tax rate {tax_rate}% computed for new {income_type} income",
            details={
                "income_type": income_type,
                "yearly_gross": yearly_gross,
                "tax_rate": tax_rate,
            },
        )

    @staticmethod
    def income_updated(
        changed_fields: list[str],
        previous_tax_rate: Optional[str],
        tax_rate: str,
        correlation_id: Optional[UUID] = None,
    ) -> AuditEvent:
        return AuditEvent(
            event_type=AuditEventType.INCOME_UPDATED,
            entity_type="income",
            correlation_id=correlation_id,
            description=f"Tax rate recomputed after update: {previous_tax_rate} -> {tax_rate}",
            details={
                "changed_fields": changed_fields,
                "previous_tax_rate": previous_tax_rate,
                "tax_rate": tax_rate,
            },
        )

    @staticmethod
    def income_rejected(
        field: str,
        issues: list[dict],
        correlation_id: Optional[UUID] = None,
    ) -> AuditEvent:
        return AuditEvent(
            event_type=AuditEventType.INCOME_REJECTED,
            severity=AuditSeverity.WARNING,
            entity_type="income",
            correlation_id=correlation_id,
            description=f"Income record rejected: invalid {field}",
            details={"field": field, "issues": issues},
        )

    @staticmethod
    def budget_summarized(
        income_count: int,
        expense_count: int,
        net_income: str,
        savings_rate: str,
        correlation_id: Optional[UUID] = None,
    ) -> AuditEvent:
        return AuditEvent(
            event_type=AuditEventType.BUDGET_SUMMARIZED,
            entity_type="budget",
            correlation_id=correlation_id,
            description=(
                f"Budget summarized from {income_count} income and "
                f"{expense_count} expense records"
            ),
            details={
                "income_count": income_count,
                "expense_count": expense_count,
                "net_income": net_income,
                "savings_rate": savings_rate,
            },
        )

    @staticmethod
    def expense_stats_computed(
        month: str,
        expense_count: int,
        monthly_total: str,
        correlation_id: Optional[UUID] = None,
    ) -> AuditEvent:
        return AuditEvent(
            event_type=AuditEventType.EXPENSE_STATS_COMPUTED,
            entity_type="expense",
            correlation_id=correlation_id,
            description=f"Expense stats computed for {month}",
            details={
                "month": month,
                "expense_count": expense_count,
                "monthly_total": monthly_total,
            },
        )
