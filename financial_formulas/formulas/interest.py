"""Interest, compounding and doubling-time formulas."""

import math

from financial_formulas.core.conventions import MONTHS_IN_YEAR, RULE_OF_72_NUMERATOR
from financial_formulas.core.errors import require_greater_than, require_nonzero
from financial_formulas.utils.financial_utils import real_power


def annual_percentage_yield(
    nominal_interest_rate: float,
    number_of_times_compounded: float,
) -> float:
    """
    Calculate the annual percentage yield (APY) of an investment.

    APY is the effective yearly rate once intra-year compounding is taken
    into account:

        (1 + r / n)^n - 1

    Args:
        nominal_interest_rate: Nominal annual rate (e.g., 0.025 for 2.5%).
        number_of_times_compounded: Compounding periods per year.

    Returns:
        Effective annual yield as decimal.

    Raises:
        FormulaInputError: If number_of_times_compounded is zero, or the
            periodic growth factor 1 + r / n has no real power.

    Example:
        >>> annual_percentage_yield(0.025, 12)
        0.025288456983290075
    """
    require_nonzero(number_of_times_compounded, "number_of_times_compounded")

    n = number_of_times_compounded
    growth = real_power(
        1 + nominal_interest_rate / n, n, "nominal_interest_rate", nominal_interest_rate
    )
    return growth - 1


def compound_interest(
    principal: float,
    rate_per_period: float,
    number_of_years: float,
    number_of_periods_per_year: float = MONTHS_IN_YEAR,
) -> float:
    """
    Calculate the value of a principal after compound interest.

    Uses P × (1 + r / m)^(m × t), compounding monthly unless told otherwise.

    Args:
        principal: Amount invested.
        rate_per_period: Annual interest rate (e.g., 0.05 for 5%).
        number_of_years: Investment horizon in years.
        number_of_periods_per_year: Compounding periods per year. Defaults to 12.

    Returns:
        Accumulated amount (principal plus interest).

    Example:
        >>> compound_interest(5000, 0.05, 10)
        8235.0474884514
    """
    require_nonzero(number_of_periods_per_year, "number_of_periods_per_year")

    number_of_periods = number_of_periods_per_year * number_of_years
    periodic_rate = rate_per_period / number_of_periods_per_year

    return principal * real_power(
        1 + periodic_rate, number_of_periods, "rate_per_period", rate_per_period
    )


def continuous_compounding(principal: float, interest_rate: float, time: float) -> float:
    """
    Calculate the value of a principal under continuous compounding.

    Example:
        >>> continuous_compounding(3000, 0.07, 5)
        4257.202645779772
    """
    return principal * math.exp(interest_rate * time)


def simple_interest(principal: float, interest_rate: float, time: float) -> float:
    """Calculate simple (non-compounded) interest: P × r × t."""
    return principal * interest_rate * time


def doubling_time(rate_of_returns: float) -> float:
    """
    Calculate the number of periods needed to double an investment.

    Exact doubling time under periodic compounding: ln(2) / ln(1 + r).

    Args:
        rate_of_returns: Return per period as decimal.

    Returns:
        Number of periods.

    Raises:
        FormulaInputError: If rate_of_returns is zero or not above -1.

    Example:
        >>> doubling_time(0.1)
        7.272540897341713
    """
    # ln(1 + r) needs r > -1 and is zero at r == 0
    require_greater_than(rate_of_returns, -1, "rate_of_returns")
    require_nonzero(rate_of_returns, "rate_of_returns")

    return math.log(2) / math.log(1 + rate_of_returns)


def doubling_time_continuous_compounding(rate_of_returns: float) -> float:
    """
    Calculate doubling time under continuous compounding: ln(2) / r.

    Example:
        >>> doubling_time_continuous_compounding(0.1)
        6.931471805599452
    """
    require_nonzero(rate_of_returns, "rate_of_returns")

    return math.log(2) / rate_of_returns


def doubling_time_simple(rate_of_returns: float) -> float:
    """Calculate doubling time under simple interest: 1 / r."""
    require_nonzero(rate_of_returns, "rate_of_returns")

    return 1 / rate_of_returns


def rule_of_72(rate_of_return: float) -> float:
    """
    Approximate doubling time with the rule of 72.

    The rate is taken as given: pass 8 for 8% to get years, or 0.08 to get
    the figure scaled by 100.

    Example:
        >>> rule_of_72(100)
        0.72
    """
    require_nonzero(rate_of_return, "rate_of_return")

    return RULE_OF_72_NUMERATOR / rate_of_return
