"""Market and valuation formulas: per-share figures, multiples and yields."""

from financial_formulas.core.conventions import DAYS_IN_YEAR
from financial_formulas.core.errors import require_nonzero, require_not_equal


def bid_ask_spread(ask_price: float, bid_price: float) -> float:
    """Calculate the absolute bid-ask spread of a security."""
    return ask_price - bid_price


def bond_equivalent_yield(
    face_value: float,
    purchase_price: float,
    days_to_maturity: float = DAYS_IN_YEAR,
) -> float:
    """
    Calculate the bond equivalent yield of a discount bond.

    BEY = (face_value - purchase_price) / purchase_price × 365 / days

    Args:
        face_value: Amount repaid at maturity.
        purchase_price: Price paid for the bond.
        days_to_maturity: Days until the bond matures. Defaults to 365.

    Returns:
        Annualised yield as decimal.

    Example:
        >>> bond_equivalent_yield(110, 100, 180)
        0.20277777777777778
        >>> bond_equivalent_yield(110, 100)
        0.1
    """
    require_nonzero(purchase_price, "purchase_price")
    require_nonzero(days_to_maturity, "days_to_maturity")

    holding_period_return = (face_value - purchase_price) / purchase_price
    return holding_period_return * DAYS_IN_YEAR / days_to_maturity


def book_value_per_share(
    shareholders_equity: float,
    preferred_equity: float,
    weighted_average_number_of_shares_outstanding: float,
) -> float:
    """
    Calculate book value attributable to each common share.

    Example:
        >>> book_value_per_share(100, 10, 10)
        9.0
    """
    require_nonzero(
        weighted_average_number_of_shares_outstanding,
        "weighted_average_number_of_shares_outstanding",
    )

    common_equity = shareholders_equity - preferred_equity
    return common_equity / weighted_average_number_of_shares_outstanding


def capital_asset_pricing_model(
    risk_free_rate: float,
    beta: float,
    market_return: float,
) -> float:
    """
    Calculate the expected return of an asset under CAPM.

    E[r] = rf + β × (rm - rf)

    Example:
        >>> capital_asset_pricing_model(0.03, 0.8, 0.1)
        0.08600000000000001
    """
    return risk_free_rate + beta * (market_return - risk_free_rate)


def capital_gains_yield(initial_price: float, final_price: float) -> float:
    """Calculate the price appreciation of a security as a share of its cost."""
    require_nonzero(initial_price, "initial_price")

    return (final_price - initial_price) / initial_price


def current_yield(annual_coupons: float, current_price: float) -> float:
    """Calculate a bond's annual coupon income relative to its price."""
    require_nonzero(current_price, "current_price")

    return annual_coupons / current_price


def tax_equivalent_yield(tax_free_yield: float, tax_rate: float) -> float:
    """
    Calculate the taxable yield matching a tax-free yield.

    Args:
        tax_free_yield: Yield of the tax-exempt instrument.
        tax_rate: Marginal tax rate as decimal.

    Raises:
        FormulaInputError: If tax_rate is 1 (100%).

    Example:
        >>> tax_equivalent_yield(100, 200)
        -0.5025125628140703
    """
    require_not_equal(tax_rate, 1, "tax_rate")

    return tax_free_yield / (1 - tax_rate)


def dividend_payout_ratio(dividends: float, net_income: float) -> float:
    """Calculate the share of net income paid out as dividends."""
    require_nonzero(net_income, "net_income")

    return dividends / net_income


def dividend_yield(dividends: float, current_price: float) -> float:
    """Calculate dividends per share relative to the share price."""
    require_nonzero(current_price, "current_price")

    return dividends / current_price


def dividends_per_share(dividends: float, shares: float) -> float:
    """Calculate dividends paid per share outstanding."""
    require_nonzero(shares, "shares")

    return dividends / shares


def earnings_per_share(net_income: float, average_shares: float) -> float:
    """Calculate basic earnings per share."""
    require_nonzero(average_shares, "average_shares")

    return net_income / average_shares


def diluted_earnings_per_share(
    net_income: float,
    average_shares: float,
    other_convertible_instruments: float = 0,
) -> float:
    """
    Calculate diluted earnings per share.

    Args:
        net_income: Net income attributable to common shareholders.
        average_shares: Weighted average common shares outstanding.
        other_convertible_instruments: Shares issuable on conversion of
            options, warrants and convertibles. Defaults to 0.

    Returns:
        Earnings per fully diluted share.

    Raises:
        FormulaInputError: If the diluted share count is zero.

    Example:
        >>> diluted_earnings_per_share(100, 200, 300)
        0.2
        >>> diluted_earnings_per_share(100, 200)
        0.5
    """
    diluted_shares = average_shares + other_convertible_instruments
    require_nonzero(diluted_shares, "average_shares + other_convertible_instruments")

    return net_income / diluted_shares


def market_capitalization(price_per_share: float, outstanding_shares: float) -> float:
    """Calculate market capitalization: price × shares outstanding."""
    return price_per_share * outstanding_shares


def market_to_book_ratio(market_price_per_share: float, book_value_per_share: float) -> float:
    """Calculate the market-to-book ratio."""
    require_nonzero(book_value_per_share, "book_value_per_share")

    return market_price_per_share / book_value_per_share


def margin_of_safety(current_price: float, intrinsic_value: float) -> float:
    """
    Calculate the discount of the market price to intrinsic value.

    Example:
        >>> margin_of_safety(100, 200)
        0.5
    """
    require_nonzero(intrinsic_value, "intrinsic_value")

    return (intrinsic_value - current_price) / intrinsic_value


def net_asset_value(assets: float, liabilities: float, shares: float) -> float:
    """Calculate net asset value per share of a fund."""
    require_nonzero(shares, "shares")

    return (assets - liabilities) / shares


def price_to_book_value(price_per_share: float, book_value_per_share: float) -> float:
    """Calculate the price-to-book (P/B) multiple."""
    require_nonzero(book_value_per_share, "book_value_per_share")

    return price_per_share / book_value_per_share


def price_to_cash_flow(market_capitalization: float, operating_cash_flow: float) -> float:
    """Calculate the price-to-cash-flow multiple."""
    require_nonzero(operating_cash_flow, "operating_cash_flow")

    return market_capitalization / operating_cash_flow


def price_to_dividend_ratio(price_per_share: float, dividend_per_share: float) -> float:
    """Calculate the price-to-dividend multiple."""
    require_nonzero(dividend_per_share, "dividend_per_share")

    return price_per_share / dividend_per_share


def price_to_earnings_ratio(price_per_share: float, earnings_per_share: float) -> float:
    """Calculate the price-to-earnings (P/E) multiple."""
    require_nonzero(earnings_per_share, "earnings_per_share")

    return price_per_share / earnings_per_share


def price_to_sales_ratio(price_per_share: float, sales_per_share: float) -> float:
    """Calculate the price-to-sales (P/S) multiple."""
    require_nonzero(sales_per_share, "sales_per_share")

    return price_per_share / sales_per_share


def risk_premium(asset_or_investment_return: float, risk_free_return: float) -> float:
    """Calculate the return in excess of the risk-free rate."""
    return asset_or_investment_return - risk_free_return


def total_stock_return(
    initial_stock_price: float,
    ending_stock_price: float,
    dividends: float,
) -> float:
    """
    Calculate total shareholder return including dividends.

    Example:
        >>> total_stock_return(100, 200, 50)
        1.5
    """
    require_nonzero(initial_stock_price, "initial_stock_price")

    return (ending_stock_price - initial_stock_price + dividends) / initial_stock_price
