"""Tax bracket tables and the effective tax rate calculator."""

from budget_engine.tax.brackets import (
    DEFAULT_TAX_BRACKETS,
    TaxBracket,
    TaxBracketTable,
    load_tax_brackets,
    parse_tax_brackets,
    validate_bracket_table,
)
from budget_engine.tax.calculator import (
    TaxBracketCalculator,
    compute_effective_tax_rate,
)

__all__ = [
    "DEFAULT_TAX_BRACKETS",
    "TaxBracket",
    "TaxBracketCalculator",
    "TaxBracketTable",
    "compute_effective_tax_rate",
    "load_tax_brackets",
    "parse_tax_brackets",
    "validate_bracket_table",
]
