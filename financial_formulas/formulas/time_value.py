"""Time value of money: present/future value, annuities, NPV and return averages."""

import math
from collections.abc import Iterable, Sequence

import numpy as np

from financial_formulas.core.errors import (
    FormulaInputError,
    require_nonzero,
    require_not_equal,
)
from financial_formulas.utils.financial_utils import (
    calculate_discount_factors,
    real_power,
)


def future_value(
    initial_cash_flow: float,
    rate_of_returns: float,
    number_of_periods: float,
) -> float:
    """
    Calculate the future value of a single cash flow.

    Raises:
        FormulaInputError: If 1 + rate_of_returns has no real power
            number_of_periods (zero base with negative periods, or negative
            base with fractional periods).

    Example:
        >>> future_value(100, 0.1, 2)
        121.00000000000001
    """
    growth = real_power(
        1 + rate_of_returns, number_of_periods, "rate_of_returns", rate_of_returns
    )
    return initial_cash_flow * growth


def future_value_continuous_compounding(
    present_value: float,
    rate_of_returns: float,
    number_of_periods: float,
) -> float:
    """Calculate the future value of a cash flow compounded continuously."""
    return present_value * math.exp(rate_of_returns * number_of_periods)


def future_value_of_annuity(
    payment: float,
    interest_rate: float,
    number_of_payments: float,
) -> float:
    """
    Calculate the future value of an ordinary annuity.

    FV = PMT × [(1 + r)^n - 1] / r

    Args:
        payment: Payment made at the end of each period.
        interest_rate: Interest rate per period.
        number_of_payments: Number of payments.

    Returns:
        Accumulated value after the last payment.

    Example:
        >>> future_value_of_annuity(100, 0.1, 2)
        210.0000000000002
    """
    require_nonzero(interest_rate, "interest_rate")

    growth = real_power(
        1 + interest_rate, number_of_payments, "interest_rate", interest_rate
    )
    return payment * ((growth - 1) / interest_rate)


def present_value(
    future_value: float,
    rate_of_return: float,
    number_of_periods: float,
) -> float:
    """
    Discount a single future cash flow to today.

    PV = FV / (1 + r)^n

    Args:
        future_value: Cash flow received at the end of the horizon.
        rate_of_return: Discount rate per period.
        number_of_periods: Number of periods until the cash flow.

    Returns:
        Present value.

    Example:
        >>> present_value(100, 200, 1)
        0.4975124378109453
    """
    require_not_equal(rate_of_return, -1, "rate_of_return")

    discount = real_power(
        1 + rate_of_return, number_of_periods, "rate_of_return", rate_of_return
    )
    return future_value / discount


def present_value_continuous_compounding(
    future_value: float,
    rate_of_return: float,
    time: float,
) -> float:
    """
    Discount a future cash flow under continuous compounding: FV / e^(r × t).

    Example:
        >>> present_value_continuous_compounding(1, 2, 1)
        0.1353352832366127
    """
    return future_value / math.exp(rate_of_return * time)


def present_value_of_perpetuity(coupon_per_period: float, discount_rate: float) -> float:
    """Calculate the present value of a level perpetuity: C / r."""
    require_nonzero(discount_rate, "discount_rate")

    return coupon_per_period / discount_rate


def preferred_stock_value(dividend: float, discount_rate: float) -> float:
    """Value a preferred share paying a fixed dividend forever: D / r."""
    require_nonzero(discount_rate, "discount_rate")

    return dividend / discount_rate


def perpetuity_yield(payment: float, present_value: float) -> float:
    """Calculate the yield implied by a perpetuity's price: PMT / PV."""
    require_nonzero(present_value, "present_value")

    return payment / present_value


def net_present_value(
    initial_investment: float,
    cash_flows: Sequence[float],
    discount_rate: float,
) -> float:
    """
    Calculate Net Present Value with end-of-period convention.

    The first cash flow is discounted by one period, the second by two and so
    on; the initial investment is taken at t=0 and not discounted.

    Args:
        initial_investment: Outlay at t=0 (positive number).
        cash_flows: Cash flows for periods 1..n, in order.
        discount_rate: Discount rate per period.

    Returns:
        NPV as float.

    Raises:
        FormulaInputError: If discount_rate is -1.

    Example:
        >>> net_present_value(100, [100, 200, 300], 0.5)
        144.44444444444443
    """
    flows = np.asarray(cash_flows, dtype=np.float64)
    discount_factors = calculate_discount_factors(discount_rate, len(flows))

    return float(np.sum(flows * discount_factors)) - initial_investment


def profitability_index(
    present_value_of_future_cash_flows: float,
    initial_investment: float,
) -> float:
    """Calculate the profitability index: PV of future cash flows / investment."""
    require_nonzero(initial_investment, "initial_investment")

    return present_value_of_future_cash_flows / initial_investment


def payback_period(initial_investment: float, periodic_cash_flows: float) -> float:
    """
    Calculate the simple payback period for level cash flows.

    Args:
        initial_investment: Amount to recover.
        periodic_cash_flows: Cash inflow per period.

    Returns:
        Number of periods until the investment is recovered.
    """
    require_nonzero(periodic_cash_flows, "periodic_cash_flows")

    return initial_investment / periodic_cash_flows


def geometric_mean(rate_of_returns: Sequence[float]) -> float:
    """
    Calculate the geometric mean of a series of periodic returns.

    Each (1 + r) is raised to 1/n before the product is taken.

    Args:
        rate_of_returns: Periodic returns as decimals.

    Returns:
        Average compounded return per period.

    Raises:
        FormulaInputError: If rate_of_returns is empty, or holds a return
            below -1 across more than one period (no real root).

    Example:
        >>> geometric_mean([0.1, 0.2, 0.3])
        0.1972157672583763
    """
    returns = np.asarray(rate_of_returns, dtype=np.float64)
    n = len(returns)
    if n == 0:
        raise FormulaInputError(
            "rate_of_returns", list(rate_of_returns), "rate_of_returns must not be empty"
        )
    if n > 1 and np.any(returns < -1):
        raise FormulaInputError(
            "rate_of_returns",
            list(rate_of_returns),
            "rate_of_returns must all be at least -1 to average over several periods",
        )

    return float(np.prod((1 + returns) ** (1.0 / n))) - 1


def weighted_average(pairs: Iterable[tuple[float, float]]) -> float:
    """
    Calculate the weighted sum of (weight, value) pairs.

    Weights are not normalised: pass weights that sum to one for a mean.

    Raises:
        FormulaInputError: If any item is not a (weight, value) pair.

    Example:
        >>> weighted_average([(0.5, 100), (0.5, 200)])
        150.0
    """
    rows = list(pairs)
    if not rows:
        return 0.0

    weighted = np.asarray(rows, dtype=np.float64)
    if weighted.ndim != 2 or weighted.shape[1] != 2:
        raise FormulaInputError(
            "pairs", rows, f"pairs must be (weight, value) pairs, got shape {weighted.shape}"
        )

    weights = weighted[:, 0]
    values = weighted[:, 1]

    return float(np.sum(weights * values))
