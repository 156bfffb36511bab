"""Earnings, margins, returns, cash flows and depreciation."""

from financial_formulas.core.errors import require_nonzero


def contribution_margin(total_sales_revenue: float, variable_costs: float) -> float:
    """Calculate contribution margin: sales - variable costs."""
    return total_sales_revenue - variable_costs


def contribution_margin_per_unit(price_per_unit: float, variable_cost_per_unit: float) -> float:
    """Calculate contribution margin per unit sold."""
    return price_per_unit - variable_cost_per_unit


def contribution_margin_ratio(contribution_margin: float, total_sales_revenue: float) -> float:
    """Calculate contribution margin as a share of sales."""
    require_nonzero(total_sales_revenue, "total_sales_revenue")

    return contribution_margin / total_sales_revenue


def ebit(sales_revenue: float, cost_of_goods_sold: float, operating_expenses: float) -> float:
    """
    Calculate Earnings Before Interest and Taxes.

    Example:
        >>> ebit(100, 200, 300)
        -400
    """
    return sales_revenue - cost_of_goods_sold - operating_expenses


def ebitda(
    sales_revenue: float,
    cost_of_goods_sold: float,
    operating_expenses: float,
    depreciation_and_amortization: float,
) -> float:
    """
    Calculate EBITDA from revenue and cost lines.

    sales - COGS - operating expenses - depreciation & amortization

    Args:
        sales_revenue: Revenue for the period.
        cost_of_goods_sold: Direct costs.
        operating_expenses: Operating costs.
        depreciation_and_amortization: D&A charge.

    Example:
        >>> ebitda(100, 200, 300, 400)
        -800
    """
    return sales_revenue - cost_of_goods_sold - operating_expenses - depreciation_and_amortization


def estimated_earnings(forecasted_sales: float, forecasted_expenses: float) -> float:
    """Calculate estimated earnings: forecasted sales - forecasted expenses."""
    return forecasted_sales - forecasted_expenses


def gross_profit_margin(sales_revenue: float, cost_of_goods_sold: float) -> float:
    """
    Calculate gross profit as a share of sales.

    Example:
        >>> gross_profit_margin(100, 200)
        -1.0
    """
    require_nonzero(sales_revenue, "sales_revenue")

    return (sales_revenue - cost_of_goods_sold) / sales_revenue


def net_profit_margin(net_income: float, sales_revenue: float) -> float:
    """Calculate net income as a share of sales."""
    require_nonzero(sales_revenue, "sales_revenue")

    return net_income / sales_revenue


def operating_margin(operating_income: float, sales_revenue: float) -> float:
    """Calculate operating income as a share of sales."""
    require_nonzero(sales_revenue, "sales_revenue")

    return operating_income / sales_revenue


def return_on_assets(net_income: float, average_total_assets: float) -> float:
    """Calculate return on assets (ROA)."""
    require_nonzero(average_total_assets, "average_total_assets")

    return net_income / average_total_assets


def return_on_equity(net_income: float, average_shareholder_equity: float) -> float:
    """Calculate return on equity (ROE)."""
    require_nonzero(average_shareholder_equity, "average_shareholder_equity")

    return net_income / average_shareholder_equity


def return_on_investment(initial_investment: float, earnings: float) -> float:
    """
    Calculate return on investment.

    ROI = (earnings - initial_investment) / initial_investment

    Args:
        initial_investment: Amount invested.
        earnings: Total amount received back.

    Returns:
        ROI as decimal (e.g., 1.0 for 100%).

    Example:
        >>> return_on_investment(100, 200)
        1.0
    """
    require_nonzero(initial_investment, "initial_investment")

    return (earnings - initial_investment) / initial_investment


def retained_earnings(net_income: float, dividends: float) -> float:
    """Calculate earnings retained after dividends."""
    return net_income - dividends


def retention_ratio(net_income: float, dividends: float) -> float:
    """Calculate the share of net income retained (plowback ratio)."""
    require_nonzero(net_income, "net_income")

    return (net_income - dividends) / net_income


def free_cash_flow_to_equity(
    net_income: float,
    depreciation_and_amortization: float,
    capital_expenditures: float,
    change_in_working_capital: float,
    net_borrowing: float,
) -> float:
    """
    Calculate Free Cash Flow to Equity (levered).

    FCFE = NI + D&A - CapEx - ΔWC + net borrowing

    Args:
        net_income: Net income.
        depreciation_and_amortization: Non-cash D&A added back.
        capital_expenditures: Capital spending.
        change_in_working_capital: Increase in net working capital.
        net_borrowing: New debt issued minus debt repaid.

    Returns:
        Cash flow available to equity holders.
    """
    return (
        net_income
        + depreciation_and_amortization
        - capital_expenditures
        - change_in_working_capital
        + net_borrowing
    )


def free_cash_flow_to_firm(
    ebit: float,
    tax_rate: float,
    depreciation_and_amortization: float,
    capital_expenditures: float,
    change_in_working_capital: float,
) -> float:
    """
    Calculate Free Cash Flow to Firm (unlevered).

    FCFF = EBIT × (1 - t) + D&A - CapEx - ΔWC

    Example:
        >>> free_cash_flow_to_firm(100, 200, 300, 400, 500)
        -20500
    """
    # Tax on EBIT (without interest deduction)
    nopat = ebit * (1 - tax_rate)

    return nopat + depreciation_and_amortization - capital_expenditures - change_in_working_capital


def straight_line_depreciation(
    initial_value: float,
    salvage_value: float,
    useful_life: float,
) -> float:
    """
    Calculate annual linear depreciation.

    Args:
        initial_value: Cost of the asset.
        salvage_value: Residual value at the end of its life.
        useful_life: Depreciation period in years.

    Returns:
        Annual depreciation amount.
    """
    require_nonzero(useful_life, "useful_life")

    return (initial_value - salvage_value) / useful_life


def year_over_year(current_year: float, previous_year: float) -> float:
    """
    Calculate year-over-year growth.

    Example:
        >>> year_over_year(100, 200)
        -0.5
    """
    require_nonzero(previous_year, "previous_year")

    return (current_year - previous_year) / previous_year


def real_gdp(nominal_gdp: float, gdp_deflator: float) -> float:
    """Deflate nominal GDP. The deflator is a ratio (1.0 = base year), not an index of 100."""
    require_nonzero(gdp_deflator, "gdp_deflator")

    return nominal_gdp / gdp_deflator


def net_interest_income(interest_income: float, interest_expense: float) -> float:
    """Calculate net interest income: interest earned - interest paid."""
    return interest_income - interest_expense


def net_interest_margin(net_interest_income: float, average_earning_assets: float) -> float:
    """Calculate net interest income as a share of average earning assets."""
    require_nonzero(average_earning_assets, "average_earning_assets")

    return net_interest_income / average_earning_assets


def net_interest_spread(interest_income_rate: float, interest_expense_rate: float) -> float:
    """Calculate the spread between lending and borrowing rates."""
    return interest_income_rate - interest_expense_rate
