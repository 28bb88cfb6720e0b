"""Services package."""

from budget_engine.services.budget_service import BudgetService, calculator_from_settings

__all__ = ["BudgetService", "calculator_from_settings"]
