"""Liquidity, leverage and coverage ratios."""

from financial_formulas.core.errors import require_nonzero


def current_ratio(current_assets: float, current_liabilities: float) -> float:
    """
    Calculate the current ratio: current assets / current liabilities.

    Example:
        >>> current_ratio(100, 200)
        0.5
    """
    require_nonzero(current_liabilities, "current_liabilities")

    return current_assets / current_liabilities


def quick_ratio(quick_assets: float, current_liabilities: float) -> float:
    """Calculate the quick (acid-test) ratio from quick assets."""
    require_nonzero(current_liabilities, "current_liabilities")

    return quick_assets / current_liabilities


def quick_ratio_from_inventory(
    current_assets: float,
    inventory: float,
    current_liabilities: float,
) -> float:
    """
    Calculate the quick ratio by stripping inventory from current assets.

    (current_assets - inventory) / current_liabilities

    Example:
        >>> quick_ratio_from_inventory(100, 200, 300)
        -0.3333333333333333
    """
    require_nonzero(current_liabilities, "current_liabilities")

    return (current_assets - inventory) / current_liabilities


def net_working_capital(current_assets: float, current_liabilities: float) -> float:
    """Calculate net working capital: current assets - current liabilities."""
    return current_assets - current_liabilities


def debt_ratio(total_liabilities: float, total_assets: float) -> float:
    """Calculate total liabilities as a share of total assets."""
    require_nonzero(total_assets, "total_assets")

    return total_liabilities / total_assets


def debt_to_equity_ratio(total_liabilities: float, total_equity: float) -> float:
    """Calculate total liabilities / total equity."""
    require_nonzero(total_equity, "total_equity")

    return total_liabilities / total_equity


def debt_to_income_ratio(debt: float, income: float) -> float:
    """Calculate debt payments / income."""
    require_nonzero(income, "income")

    return debt / income


def debt_coverage_ratio(net_operating_income: float, total_debt_service: float) -> float:
    """
    Calculate the Debt Service Coverage Ratio.

    DSCR = Net Operating Income / Debt Service

    Args:
        net_operating_income: Cash available for debt service.
        total_debt_service: Interest plus principal due in the period.

    Returns:
        Coverage multiple. Values below 1 mean debt service is not covered.
    """
    require_nonzero(total_debt_service, "total_debt_service")

    return net_operating_income / total_debt_service


def equity_multiplier(total_assets: float, total_equity: float) -> float:
    """Calculate total assets / total equity."""
    require_nonzero(total_equity, "total_equity")

    return total_assets / total_equity


def interest_coverage_ratio(ebit: float, interest_expense: float) -> float:
    """Calculate how many times EBIT covers interest expense."""
    require_nonzero(interest_expense, "interest_expense")

    return ebit / interest_expense


def times_interest_earned_ratio(ebit: float, interest_expense: float) -> float:
    """Calculate the times interest earned ratio: EBIT / interest expense."""
    require_nonzero(interest_expense, "interest_expense")

    return ebit / interest_expense


def loan_to_deposit_ratio(total_loans: float, total_deposits: float) -> float:
    """Calculate a bank's loans as a share of its deposits."""
    require_nonzero(total_deposits, "total_deposits")

    return total_loans / total_deposits


def cost_to_income_ratio(operational_costs: float, operational_income: float) -> float:
    """Calculate operating costs / operating income (efficiency ratio)."""
    require_nonzero(operational_income, "operational_income")

    return operational_costs / operational_income
