"""Registry of every formula with its expression and guarded arguments."""

import logging
from collections.abc import Callable
from dataclasses import dataclass, field
from typing import Any

from financial_formulas.formulas import (
    activity,
    interest,
    liquidity,
    market,
    profitability,
    time_value,
)
from financial_formulas.utils import financial_utils

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class FormulaEntry:
    """
    Catalog entry describing one formula.

    Attributes:
        name: Public function name.
        function: The callable implementing the formula.
        formula: Human-readable expression.
        category: Module grouping (interest, time_value, ...).
        guarded: Arguments rejected when they make a denominator zero.
        rejected_values: Value that triggers the rejection, per guarded
            argument (0 unless the divisor is derived, e.g. 1 + rate).
        reported_as: Quantity named in the FormulaInputError, per guarded
            argument. Differs from the argument when the divisor is a sum
            of several arguments.
    """

    name: str
    function: Callable[..., float]
    formula: str
    category: str
    guarded: tuple[str, ...] = ()
    rejected_values: dict[str, Any] = field(default_factory=dict)
    reported_as: dict[str, str] = field(default_factory=dict)


def _entry(
    module: Any,
    name: str,
    formula: str,
    guarded: tuple[str, ...] = (),
    rejects: dict[str, Any] | None = None,
    reported: dict[str, str] | None = None,
) -> FormulaEntry:
    category = module.__name__.rsplit(".", 1)[-1]
    overrides = rejects or {}
    rejected_values = {argument: overrides.get(argument, 0) for argument in guarded}
    labels = reported or {}
    reported_as = {argument: labels.get(argument, argument) for argument in guarded}

    return FormulaEntry(
        name,
        getattr(module, name),
        formula,
        category,
        guarded,
        rejected_values,
        reported_as,
    )


_ENTRIES: list[FormulaEntry] = [
    # Interest
    _entry(
        interest,
        "annual_percentage_yield",
        "(1 + r / n)^n - 1",
        ("number_of_times_compounded",),
    ),
    _entry(
        interest,
        "compound_interest",
        "P × (1 + r / m)^(m × t)",
        ("number_of_periods_per_year",),
    ),
    _entry(interest, "continuous_compounding", "P × e^(r × t)"),
    _entry(interest, "simple_interest", "P × r × t"),
    _entry(interest, "doubling_time", "ln(2) / ln(1 + r)", ("rate_of_returns",)),
    _entry(interest, "doubling_time_continuous_compounding", "ln(2) / r", ("rate_of_returns",)),
    _entry(interest, "doubling_time_simple", "1 / r", ("rate_of_returns",)),
    _entry(interest, "rule_of_72", "72 / r", ("rate_of_return",)),
    # Time value
    _entry(time_value, "future_value", "C × (1 + r)^n"),
    _entry(time_value, "future_value_continuous_compounding", "PV × e^(r × n)"),
    _entry(time_value, "future_value_of_annuity", "PMT × ((1 + r)^n - 1) / r", ("interest_rate",)),
    _entry(
        time_value,
        "present_value",
        "FV / (1 + r)^n",
        ("rate_of_return",),
        {"rate_of_return": -1},
    ),
    _entry(time_value, "present_value_continuous_compounding", "FV / e^(r × t)"),
    _entry(time_value, "present_value_of_perpetuity", "C / r", ("discount_rate",)),
    _entry(time_value, "preferred_stock_value", "D / r", ("discount_rate",)),
    _entry(time_value, "perpetuity_yield", "PMT / PV", ("present_value",)),
    _entry(
        time_value,
        "net_present_value",
        "Σ CF_i / (1 + r)^(i + 1) - I",
        ("discount_rate",),
        {"discount_rate": -1},
    ),
    _entry(time_value, "profitability_index", "PV / I", ("initial_investment",)),
    _entry(time_value, "payback_period", "I / CF", ("periodic_cash_flows",)),
    _entry(
        time_value,
        "geometric_mean",
        "Π (1 + r_i)^(1 / n) - 1",
        ("rate_of_returns",),
        {"rate_of_returns": []},
    ),
    _entry(time_value, "weighted_average", "Σ w_i × v_i"),
    # Liquidity
    _entry(liquidity, "current_ratio", "CA / CL", ("current_liabilities",)),
    _entry(liquidity, "quick_ratio", "QA / CL", ("current_liabilities",)),
    _entry(liquidity, "quick_ratio_from_inventory", "(CA - Inv) / CL", ("current_liabilities",)),
    _entry(liquidity, "net_working_capital", "CA - CL"),
    _entry(liquidity, "debt_ratio", "TL / TA", ("total_assets",)),
    _entry(liquidity, "debt_to_equity_ratio", "TL / TE", ("total_equity",)),
    _entry(liquidity, "debt_to_income_ratio", "D / I", ("income",)),
    _entry(liquidity, "debt_coverage_ratio", "NOI / DS", ("total_debt_service",)),
    _entry(liquidity, "equity_multiplier", "TA / TE", ("total_equity",)),
    _entry(liquidity, "interest_coverage_ratio", "EBIT / IE", ("interest_expense",)),
    _entry(liquidity, "times_interest_earned_ratio", "EBIT / IE", ("interest_expense",)),
    _entry(liquidity, "loan_to_deposit_ratio", "L / D", ("total_deposits",)),
    _entry(liquidity, "cost_to_income_ratio", "C / I", ("operational_income",)),
    # Activity
    _entry(activity, "asset_to_sales_ratio", "TA / S", ("sales_revenue",)),
    _entry(activity, "asset_turnover_ratio", "S / TA", ("total_assets",)),
    _entry(activity, "average_collection_period", "days / RT", ("receivables_turnover_ratio",)),
    _entry(activity, "average_inventory", "(E + B) / n", ("number_of_periods",)),
    _entry(activity, "average_inventory_period", "days / IT", ("inventory_turnover",)),
    _entry(
        activity,
        "average_payment_period",
        "AP / (CP / days)",
        ("credit_purchases", "days_in_period"),
    ),
    _entry(activity, "cash_conversion_cycle", "DIO + DSO - DPO"),
    _entry(activity, "cost_of_goods_sold", "B + P - E"),
    _entry(activity, "days_in_inventory", "365 / IT", ("inventory_turnover",)),
    _entry(activity, "days_sales_of_inventory", "Inv / COGS × 365", ("cost_of_goods_sold",)),
    _entry(activity, "days_sales_outstanding", "AR / S × 365", ("total_credit_sales",)),
    _entry(activity, "days_payable_outstanding", "AP / COGS × 365", ("cost_of_goods_sold",)),
    _entry(activity, "inventory_turnover_ratio", "COGS / Inv", ("average_inventory",)),
    _entry(activity, "operating_cycle", "DIO + DSO"),
    _entry(activity, "payables_turnover_ratio", "COGS / AP", ("average_accounts_payable",)),
    _entry(activity, "receivables_turnover_ratio", "S / AR", ("average_accounts_receivable",)),
    # Profitability
    _entry(profitability, "contribution_margin", "S - VC"),
    _entry(profitability, "contribution_margin_per_unit", "P - VC"),
    _entry(profitability, "contribution_margin_ratio", "CM / S", ("total_sales_revenue",)),
    _entry(profitability, "ebit", "S - COGS - OE"),
    _entry(profitability, "ebitda", "S - COGS - OE - DA"),
    _entry(profitability, "estimated_earnings", "S - E"),
    _entry(profitability, "gross_profit_margin", "(S - COGS) / S", ("sales_revenue",)),
    _entry(profitability, "net_profit_margin", "NI / S", ("sales_revenue",)),
    _entry(profitability, "operating_margin", "OI / S", ("sales_revenue",)),
    _entry(profitability, "return_on_assets", "NI / TA", ("average_total_assets",)),
    _entry(profitability, "return_on_equity", "NI / E", ("average_shareholder_equity",)),
    _entry(profitability, "return_on_investment", "(E - I) / I", ("initial_investment",)),
    _entry(profitability, "retained_earnings", "NI - D"),
    _entry(profitability, "retention_ratio", "(NI - D) / NI", ("net_income",)),
    _entry(profitability, "free_cash_flow_to_equity", "NI + DA - CapEx - ΔWC + NB"),
    _entry(profitability, "free_cash_flow_to_firm", "EBIT × (1 - t) + DA - CapEx - ΔWC"),
    _entry(profitability, "straight_line_depreciation", "(V - S) / L", ("useful_life",)),
    _entry(profitability, "year_over_year", "(C - P) / P", ("previous_year",)),
    _entry(profitability, "real_gdp", "N / D", ("gdp_deflator",)),
    _entry(profitability, "net_interest_income", "II - IE"),
    _entry(profitability, "net_interest_margin", "NII / A", ("average_earning_assets",)),
    _entry(profitability, "net_interest_spread", "r_i - r_e"),
    # Market
    _entry(market, "bid_ask_spread", "A - B"),
    _entry(
        market,
        "bond_equivalent_yield",
        "(F - P) / P × 365 / days",
        ("purchase_price", "days_to_maturity"),
    ),
    _entry(
        market,
        "book_value_per_share",
        "(E - PE) / shares",
        ("weighted_average_number_of_shares_outstanding",),
    ),
    _entry(market, "capital_asset_pricing_model", "rf + β × (rm - rf)"),
    _entry(market, "capital_gains_yield", "(F - I) / I", ("initial_price",)),
    _entry(market, "current_yield", "C / P", ("current_price",)),
    _entry(market, "tax_equivalent_yield", "y / (1 - t)", ("tax_rate",), {"tax_rate": 1}),
    _entry(market, "dividend_payout_ratio", "D / NI", ("net_income",)),
    _entry(market, "dividend_yield", "D / P", ("current_price",)),
    _entry(market, "dividends_per_share", "D / shares", ("shares",)),
    _entry(market, "earnings_per_share", "NI / shares", ("average_shares",)),
    _entry(
        market,
        "diluted_earnings_per_share",
        "NI / (shares + conv)",
        ("average_shares",),
        reported={"average_shares": "average_shares + other_convertible_instruments"},
    ),
    _entry(market, "market_capitalization", "P × N"),
    _entry(market, "market_to_book_ratio", "P / BV", ("book_value_per_share",)),
    _entry(market, "margin_of_safety", "(IV - P) / IV", ("intrinsic_value",)),
    _entry(market, "net_asset_value", "(A - L) / shares", ("shares",)),
    _entry(market, "price_to_book_value", "P / BV", ("book_value_per_share",)),
    _entry(market, "price_to_cash_flow", "MC / OCF", ("operating_cash_flow",)),
    _entry(market, "price_to_dividend_ratio", "P / D", ("dividend_per_share",)),
    _entry(market, "price_to_earnings_ratio", "P / EPS", ("earnings_per_share",)),
    _entry(market, "price_to_sales_ratio", "P / S", ("sales_per_share",)),
    _entry(market, "risk_premium", "r - rf"),
    _entry(market, "total_stock_return", "(E - I + D) / I", ("initial_stock_price",)),
    # Utilities
    _entry(financial_utils, "to_percentage", "x × 100"),
]

FORMULA_CATALOG: dict[str, FormulaEntry] = {entry.name: entry for entry in _ENTRIES}


def get_formula(name: str) -> FormulaEntry:
    """
    Look up a catalog entry by function name.

    Raises:
        KeyError: If no formula is registered under name.
    """
    try:
        return FORMULA_CATALOG[name]
    except KeyError:
        raise KeyError(f"Unknown formula: {name!r}") from None


def evaluate(name: str, *args: Any, **kwargs: Any) -> float:
    """
    Call a formula by name.

    Example:
        >>> evaluate("current_ratio", 100, 200)
        0.5
    """
    entry = get_formula(name)
    logger.debug("Evaluating %s args=%r kwargs=%r", name, args, kwargs)
    return entry.function(*args, **kwargs)
