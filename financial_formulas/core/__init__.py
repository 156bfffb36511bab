"""Core catalog components: error types, guards and market conventions."""

from financial_formulas.core.conventions import (
    CONVENTIONS,
    DAYS_IN_YEAR,
    MONTHS_IN_YEAR,
    PERCENT,
    RULE_OF_72_NUMERATOR,
    TWO_POINT_AVERAGE,
)
from financial_formulas.core.errors import (
    FormulaInputError,
    require_greater_than,
    require_nonzero,
    require_not_equal,
)

__all__ = [
    "CONVENTIONS",
    "DAYS_IN_YEAR",
    "MONTHS_IN_YEAR",
    "PERCENT",
    "RULE_OF_72_NUMERATOR",
    "TWO_POINT_AVERAGE",
    "FormulaInputError",
    "require_greater_than",
    "require_nonzero",
    "require_not_equal",
]
