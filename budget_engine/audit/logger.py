"""
Audit Logger

DESIGN DECISION: The pure engine never logs. The service facade logs
every income write and every computation it serves, so a stored tax
rate or a surprising summary can always be traced back.

The audit logger:
- Writes structured JSON lines through structlog
- Is synchronous, like the engine it wraps
- Supports correlation IDs to trace related events
"""

import logging
from typing import Any, Optional
from uuid import UUID, uuid4

import structlog

from budget_engine.config import get_settings
from budget_engine.models.audit import AuditEvent, AuditEventBuilder, AuditSeverity


structlog.configure(
    processors=[
        structlog.stdlib.filter_by_level,
        structlog.stdlib.add_logger_name,
        structlog.stdlib.add_log_level,
        structlog.stdlib.PositionalArgumentsFormatter(),
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.format_exc_info,
        structlog.processors.UnicodeDecoder(),
        structlog.processors.JSONRenderer()
    ],
    wrapper_class=structlog.stdlib.BoundLogger,
    context_class=dict,
    logger_factory=structlog.stdlib.LoggerFactory(),
    cache_logger_on_first_use=True,
)

LOGGER_NAME = "budget_engine.audit"


def configure_log_level(level: Optional[str] = None) -> None:
    """Set the stdlib level structlog filters on (defaults to settings)."""
    level = level or get_settings().logging.level
    logging.getLogger(LOGGER_NAME).setLevel(level)


class AuditLogger:
    """Central audit logging service."""

    def __init__(self, logger: Optional[Any] = None):
        """
        Initialize audit logger.

        Args:
            logger: A structlog-style logger. Defaults to the
                    `budget_engine.audit` logger.
        """
        if logger is None:
            configure_log_level()
            logger = structlog.get_logger(LOGGER_NAME)
        self._logger = logger

    def log(self, event: AuditEvent) -> None:
        """Log an audit event at the level matching its severity."""
        log_dict = event.to_log_dict()

        if event.severity == AuditSeverity.ERROR:
            self._logger.error("audit_event", **log_dict)
        elif event.severity == AuditSeverity.WARNING:
            self._logger.warning("audit_event", **log_dict)
        elif event.severity == AuditSeverity.DEBUG:
            self._logger.debug("audit_event", **log_dict)
        else:
            self._logger.info("audit_event", **log_dict)

    def log_income_prepared(
        self,
        income_type: str,
        yearly_gross: str,
        tax_rate: str,
        correlation_id: Optional[UUID] = None,
    ) -> None:
        self.log(AuditEventBuilder.income_prepared(
            income_type=income_type,
            yearly_gross=yearly_gross,
            tax_rate=tax_rate,
            correlation_id=correlation_id,
        ))

    def log_income_updated(
        self,
        changed_fields: list[str],
        previous_tax_rate: Optional[str],
        tax_rate: str,
        correlation_id: Optional[UUID] = None,
    ) -> None:
        self.log(AuditEventBuilder.income_updated(
            changed_fields=changed_fields,
            previous_tax_rate=previous_tax_rate,
            tax_rate=tax_rate,
            correlation_id=correlation_id,
        ))

    def log_income_rejected(
        self,
        field: str,
        issues: list[dict],
        correlation_id: Optional[UUID] = None,
    ) -> None:
        self.log(AuditEventBuilder.income_rejected(
            field=field,
            issues=issues,
            correlation_id=correlation_id,
        ))

    def log_budget_summarized(
        self,
        income_count: int,
        expense_count: int,
        net_income: str,
        savings_rate: str,
        correlation_id: Optional[UUID] = None,
    ) -> None:
        self.log(AuditEventBuilder.budget_summarized(
            income_count=income_count,
            expense_count=expense_count,
            net_income=net_income,
            savings_rate=savings_rate,
            correlation_id=correlation_id,
        ))

    def log_expense_stats(
        self,
        month: str,
        expense_count: int,
        monthly_total: str,
        correlation_id: Optional[UUID] = None,
    ) -> None:
        self.log(AuditEventBuilder.expense_stats_computed(
            month=month,
            expense_count=expense_count,
            monthly_total=monthly_total,
            correlation_id=correlation_id,
        ))


def create_correlation_id() -> UUID:
    """
    Create a new correlation ID for tracking related events.

    Use this at the start of a caller request and pass it through
    all subsequent service calls.
    """
    return uuid4()
