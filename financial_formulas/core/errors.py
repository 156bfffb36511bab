"""Input guards shared by every formula in the catalog."""

import logging
from typing import Any

logger = logging.getLogger(__name__)


class FormulaInputError(ValueError):
    """
    Raised when a formula receives a value it cannot divide by.

    Args:
        argument: Name of the offending argument (or derived quantity).
        value: The rejected value.
        reason: Optional message overriding the default "must be non-zero".
    """

    def __init__(self, argument: str, value: Any, reason: str | None = None) -> None:
        self.argument = argument
        self.value = value
        message = reason or f"{argument} must be non-zero, got {value!r}"
        super().__init__(message)


def require_nonzero(value: float, argument: str) -> None:
    """
    Reject a zero denominator before any arithmetic happens.

    Args:
        value: Quantity that ends up as a divisor.
        argument: Name reported back to the caller.

    Raises:
        FormulaInputError: If value equals zero.

    Example:
        >>> require_nonzero(0.05, "discount_rate")
        >>> require_nonzero(0, "discount_rate")
        Traceback (most recent call last):
        ...
        financial_formulas.core.errors.FormulaInputError: discount_rate must be non-zero, got 0
    """
    if value == 0:
        logger.debug("Rejected zero denominator for %s", argument)
        raise FormulaInputError(argument, value)


def require_not_equal(value: float, forbidden: float, argument: str) -> None:
    """
    Reject the single value that turns a derived denominator into zero.

    Used where the divisor is an expression such as ``1 + rate`` or
    ``1 - tax_rate`` rather than the argument itself.

    Raises:
        FormulaInputError: If value equals forbidden.
    """
    if value == forbidden:
        logger.debug("Rejected %s=%r (zero derived denominator)", argument, value)
        raise FormulaInputError(
            argument, value, f"{argument} must not be {forbidden!r}, got {value!r}"
        )


def require_greater_than(value: float, bound: float, argument: str) -> None:
    """
    Reject values at or below a lower bound.

    Used where a logarithm of ``1 + rate`` is taken, which is undefined for
    rates of -1 and below.

    Raises:
        FormulaInputError: If value is not strictly greater than bound.
    """
    if value <= bound:
        logger.debug("Rejected %s=%r (not above %r)", argument, value, bound)
        raise FormulaInputError(
            argument, value, f"{argument} must be greater than {bound!r}, got {value!r}"
        )
