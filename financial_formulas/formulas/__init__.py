"""Formula catalog grouped by financial concern."""

from financial_formulas.formulas.activity import (
    asset_to_sales_ratio,
    asset_turnover_ratio,
    average_collection_period,
    average_inventory,
    average_inventory_period,
    average_payment_period,
    cash_conversion_cycle,
    cost_of_goods_sold,
    days_in_inventory,
    days_payable_outstanding,
    days_sales_of_inventory,
    days_sales_outstanding,
    inventory_turnover_ratio,
    operating_cycle,
    payables_turnover_ratio,
    receivables_turnover_ratio,
)
from financial_formulas.formulas.interest import (
    annual_percentage_yield,
    compound_interest,
    continuous_compounding,
    doubling_time,
    doubling_time_continuous_compounding,
    doubling_time_simple,
    rule_of_72,
    simple_interest,
)
from financial_formulas.formulas.liquidity import (
    cost_to_income_ratio,
    current_ratio,
    debt_coverage_ratio,
    debt_ratio,
    debt_to_equity_ratio,
    debt_to_income_ratio,
    equity_multiplier,
    interest_coverage_ratio,
    loan_to_deposit_ratio,
    net_working_capital,
    quick_ratio,
    quick_ratio_from_inventory,
    times_interest_earned_ratio,
)
from financial_formulas.formulas.market import (
    bid_ask_spread,
    bond_equivalent_yield,
    book_value_per_share,
    capital_asset_pricing_model,
    capital_gains_yield,
    current_yield,
    diluted_earnings_per_share,
    dividend_payout_ratio,
    dividend_yield,
    dividends_per_share,
    earnings_per_share,
    margin_of_safety,
    market_capitalization,
    market_to_book_ratio,
    net_asset_value,
    price_to_book_value,
    price_to_cash_flow,
    price_to_dividend_ratio,
    price_to_earnings_ratio,
    price_to_sales_ratio,
    risk_premium,
    tax_equivalent_yield,
    total_stock_return,
)
from financial_formulas.formulas.profitability import (
    contribution_margin,
    contribution_margin_per_unit,
    contribution_margin_ratio,
    ebit,
    ebitda,
    estimated_earnings,
    free_cash_flow_to_equity,
    free_cash_flow_to_firm,
    gross_profit_margin,
    net_interest_income,
    net_interest_margin,
    net_interest_spread,
    net_profit_margin,
    operating_margin,
    real_gdp,
    retained_earnings,
    retention_ratio,
    return_on_assets,
    return_on_equity,
    return_on_investment,
    straight_line_depreciation,
    year_over_year,
)
from financial_formulas.formulas.time_value import (
    future_value,
    future_value_continuous_compounding,
    future_value_of_annuity,
    geometric_mean,
    net_present_value,
    payback_period,
    perpetuity_yield,
    preferred_stock_value,
    present_value,
    present_value_continuous_compounding,
    present_value_of_perpetuity,
    profitability_index,
    weighted_average,
)

__all__ = [
    "annual_percentage_yield",
    "asset_to_sales_ratio",
    "asset_turnover_ratio",
    "average_collection_period",
    "average_inventory",
    "average_inventory_period",
    "average_payment_period",
    "bid_ask_spread",
    "bond_equivalent_yield",
    "book_value_per_share",
    "capital_asset_pricing_model",
    "capital_gains_yield",
    "cash_conversion_cycle",
    "compound_interest",
    "continuous_compounding",
    "contribution_margin",
    "contribution_margin_per_unit",
    "contribution_margin_ratio",
    "cost_of_goods_sold",
    "cost_to_income_ratio",
    "current_ratio",
    "current_yield",
    "days_in_inventory",
    "days_payable_outstanding",
    "days_sales_of_inventory",
    "days_sales_outstanding",
    "debt_coverage_ratio",
    "debt_ratio",
    "debt_to_equity_ratio",
    "debt_to_income_ratio",
    "diluted_earnings_per_share",
    "dividend_payout_ratio",
    "dividend_yield",
    "dividends_per_share",
    "doubling_time",
    "doubling_time_continuous_compounding",
    "doubling_time_simple",
    "earnings_per_share",
    "ebit",
    "ebitda",
    "equity_multiplier",
    "estimated_earnings",
    "free_cash_flow_to_equity",
    "free_cash_flow_to_firm",
    "future_value",
    "future_value_continuous_compounding",
    "future_value_of_annuity",
    "geometric_mean",
    "gross_profit_margin",
    "interest_coverage_ratio",
    "inventory_turnover_ratio",
    "loan_to_deposit_ratio",
    "margin_of_safety",
    "market_capitalization",
    "market_to_book_ratio",
    "net_asset_value",
    "net_interest_income",
    "net_interest_margin",
    "net_interest_spread",
    "net_present_value",
    "net_profit_margin",
    "net_working_capital",
    "operating_cycle",
    "operating_margin",
    "payables_turnover_ratio",
    "payback_period",
    "perpetuity_yield",
    "preferred_stock_value",
    "present_value",
    "present_value_continuous_compounding",
    "present_value_of_perpetuity",
    "price_to_book_value",
    "price_to_cash_flow",
    "price_to_dividend_ratio",
    "price_to_earnings_ratio",
    "price_to_sales_ratio",
    "profitability_index",
    "quick_ratio",
    "quick_ratio_from_inventory",
    "real_gdp",
    "receivables_turnover_ratio",
    "retained_earnings",
    "retention_ratio",
    "return_on_assets",
    "return_on_equity",
    "return_on_investment",
    "risk_premium",
    "rule_of_72",
    "simple_interest",
    "straight_line_depreciation",
    "tax_equivalent_yield",
    "times_interest_earned_ratio",
    "total_stock_return",
    "weighted_average",
    "year_over_year",
]
