"""Financial utility functions for common calculations."""

import logging
import math
from typing import Any

import numpy as np

from financial_formulas.core.conventions import PERCENT
from financial_formulas.core.errors import FormulaInputError, require_not_equal

logger = logging.getLogger(__name__)


def to_percentage(number: float) -> float:
    """
    Express a decimal fraction as a percentage.

    Example:
        >>> to_percentage(0.25)
        25.0
    """
    return number * PERCENT


def real_power(base: float, exponent: float, argument: str, value: Any) -> float:
    """
    Raise a growth factor such as 1 + r to a power, staying in the reals.

    Args:
        base: Factor being compounded.
        exponent: Number of periods (may be negative or fractional).
        argument: Name of the input the base is derived from.
        value: Value of that input, reported on rejection.

    Returns:
        base^exponent as float.

    Raises:
        FormulaInputError: If a zero base is raised to a negative power, or a
            negative base to a fractional one.

    Example:
        >>> real_power(1.1, 2, "rate", 0.1)
        1.2100000000000002
    """
    if base == 0 and exponent < 0:
        logger.debug("Rejected %s=%r (zero base, exponent %r)", argument, value, exponent)
        raise FormulaInputError(
            argument,
            value,
            f"{argument}={value!r} gives a zero base raised to {exponent!r}",
        )
    if base < 0 and not float(exponent).is_integer():
        logger.debug("Rejected %s=%r (negative base, exponent %r)", argument, value, exponent)
        raise FormulaInputError(
            argument,
            value,
            f"{argument}={value!r} gives a negative base with no real power {exponent!r}",
        )

    return math.pow(base, exponent)


def calculate_discount_factors(
    discount_rate: float,
    n_periods: int,
    first_period: int = 1,
) -> np.ndarray:
    """
    Calculate discount factors for consecutive periods.

    Args:
        discount_rate: Discount rate per period (e.g., 0.05 for 5%).
        n_periods: Number of periods.
        first_period: Exponent applied to the first factor. The default of 1
            treats every cash flow as arriving at the end of its period.

    Returns:
        Array of 1 / (1 + r)^k for k = first_period .. first_period + n - 1.

    Raises:
        FormulaInputError: If discount_rate is -1.

    Example:
        >>> calculate_discount_factors(0.05, 3)
        array([0.95238095, 0.90702948, 0.8638376 ])
    """
    require_not_equal(discount_rate, -1, "discount_rate")

    periods = np.arange(first_period, first_period + n_periods)
    return 1 / np.float64(1 + discount_rate) ** periods
