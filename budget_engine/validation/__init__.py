"""Record validation package."""

from budget_engine.validation.validator import (
    InvalidInputError,
    ensure_valid_income,
    validate_income,
)

__all__ = ["InvalidInputError", "ensure_valid_income", "validate_income"]
