"""Utility functions for financial calculations."""

from financial_formulas.utils.financial_utils import (
    calculate_discount_factors,
    real_power,
    to_percentage,
)

__all__ = [
    "calculate_discount_factors",
    "real_power",
    "to_percentage",
]
