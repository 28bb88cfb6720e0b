"""
Budget Engine - Source Package

The computation core of a personal finance tracker. It turns raw income
and expense records into yearly/monthly projections and an effective
tax rate.

DESIGN PRINCIPLES:
1. Pure functions at the core: records in, numbers out
2. Decimal end-to-end, rounding only at presentation boundaries
3. Malformed records are rejected loudly, never coerced
4. Degenerate arithmetic (zero income) resolves to 0, never a fault
5. Tax bracket tables are injected, not global
"""

__version__ = "1.0.0"
__author__ = "Budget Engine Team"
