"""
Progressive Tax Bracket Tables

A bracket table is an ordered, immutable tuple of `TaxBracket`s. Each
bracket taxes the part of income inside the half-open interval
[lower, upper) at its rate; the last bracket may be unbounded.

The built-in table is the 2024 US federal table for a single filer.
Alternate tables (other years, test doubles) can be built in code or
loaded from JSON:

    [{"lower": 0, "upper": 11600, "rate": "0.10"}, ...,
     {"lower": 609350, "upper": null, "rate": "0.37"}]
"""

from decimal import Decimal
from pathlib import Path
from typing import Optional, Sequence, Union

from pydantic import BaseModel, ConfigDict, Field, TypeAdapter, model_validator


class TaxBracket(BaseModel):
    """One progressive bracket. `upper=None` means no upper bound."""
    model_config = ConfigDict(frozen=True)

    lower: Decimal = Field(..., ge=0)
    upper: Optional[Decimal] = None
    rate: Decimal = Field(..., ge=0, le=1, description="Marginal rate, e.g. 0.22")

    @model_validator(mode='after')
    def validate_bounds(self) -> 'TaxBracket':
        if self.upper is not None and self.upper <= self.lower:
            raise ValueError("Bracket upper bound must be greater than its lower bound")
        return self


TaxBracketTable = tuple[TaxBracket, ...]


def validate_bracket_table(brackets: Sequence[TaxBracket]) -> TaxBracketTable:
    """
    Check a bracket table and freeze it.

    A valid table is non-empty, starts at 0, has each bracket begin
    where the previous one ends, and leaves only the last bracket
    unbounded.
    """
    table = tuple(brackets)
    if not table:
        raise ValueError("Tax bracket table must contain at least one bracket")
    if table[0].lower != 0:
        raise ValueError("Tax bracket table must start at 0")

    for previous, current in zip(table, table[1:]):
        if previous.upper is None:
            raise ValueError("Only the last tax bracket may be unbounded")
        if current.lower != previous.upper:
            raise ValueError(
                f"Tax brackets must be contiguous: bracket starting at {current.lower} "
                f"does not follow bracket ending at {previous.upper}"
            )

    return table


def _bracket(lower: int, upper: Optional[int], rate: str) -> TaxBracket:
    return TaxBracket(
        lower=Decimal(lower),
        upper=None if upper is None else Decimal(upper),
        rate=Decimal(rate),
    )


# 2024 federal brackets, single filer
DEFAULT_TAX_BRACKETS: TaxBracketTable = validate_bracket_table([
    _bracket(0, 11600, "0.10"),
    _bracket(11600, 47150, "0.12"),
    _bracket(47150, 100525, "0.22"),
    _bracket(100525, 191950, "0.24"),
    _bracket(191950, 243725, "0.32"),
    _bracket(243725, 609350, "0.35"),
    _bracket(609350, None, "0.37"),
])


_TABLE_ADAPTER = TypeAdapter(list[TaxBracket])


def parse_tax_brackets(payload: Union[str, bytes]) -> TaxBracketTable:
    """Parse and validate a JSON bracket table."""
    return validate_bracket_table(_TABLE_ADAPTER.validate_json(payload))


def load_tax_brackets(path: Union[str, Path]) -> TaxBracketTable:
    """Load and validate a JSON bracket table from disk."""
    return parse_tax_brackets(Path(path).read_bytes())
