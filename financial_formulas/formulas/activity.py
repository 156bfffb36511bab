"""Activity formulas: turnover ratios, day counts and working-capital cycles."""

from financial_formulas.core.conventions import DAYS_IN_YEAR, TWO_POINT_AVERAGE
from financial_formulas.core.errors import require_nonzero


def asset_to_sales_ratio(total_assets: float, sales_revenue: float) -> float:
    """
    Calculate the assets needed per unit of sales.

    Example:
        >>> asset_to_sales_ratio(100000, 50000)
        2.0
    """
    require_nonzero(sales_revenue, "sales_revenue")

    return total_assets / sales_revenue


def asset_turnover_ratio(sales_revenue: float, total_assets: float) -> float:
    """Calculate sales generated per unit of assets."""
    require_nonzero(total_assets, "total_assets")

    return sales_revenue / total_assets


def average_collection_period(
    receivables_turnover_ratio: float,
    days_in_period: float = DAYS_IN_YEAR,
) -> float:
    """
    Calculate the average number of days needed to collect receivables.

    Args:
        receivables_turnover_ratio: Receivables turnover over the period.
        days_in_period: Days in the period. Defaults to 365.

    Returns:
        Days.

    Example:
        >>> average_collection_period(10)
        36.5
    """
    require_nonzero(receivables_turnover_ratio, "receivables_turnover_ratio")

    return days_in_period / receivables_turnover_ratio


def average_inventory(
    ending_inventory: float,
    beginning_inventory: float,
    number_of_periods: float = TWO_POINT_AVERAGE,
) -> float:
    """
    Calculate average inventory from opening and closing balances.

    Args:
        ending_inventory: Inventory at the end of the period.
        beginning_inventory: Inventory at the start of the period.
        number_of_periods: Divisor. Defaults to 2 (simple two-point average).

    Example:
        >>> average_inventory(100, 50)
        75.0
        >>> average_inventory(100, 50, 3)
        50.0
    """
    require_nonzero(number_of_periods, "number_of_periods")

    return (ending_inventory + beginning_inventory) / number_of_periods


def average_inventory_period(
    inventory_turnover: float,
    days_in_period: float = DAYS_IN_YEAR,
) -> float:
    """
    Calculate the average number of days inventory is held.

    Example:
        >>> average_inventory_period(10, 180)
        18.0
    """
    require_nonzero(inventory_turnover, "inventory_turnover")

    return days_in_period / inventory_turnover


def average_payment_period(
    average_accounts_payable: float,
    credit_purchases: float,
    days_in_period: float = DAYS_IN_YEAR,
) -> float:
    """
    Calculate the average number of days taken to pay suppliers.

    average_accounts_payable / (credit_purchases / days_in_period)

    Args:
        average_accounts_payable: Average accounts payable balance.
        credit_purchases: Purchases made on credit during the period.
        days_in_period: Days in the period. Defaults to 365.

    Returns:
        Days.

    Example:
        >>> average_payment_period(23000, 100000)
        83.95
    """
    require_nonzero(credit_purchases, "credit_purchases")
    require_nonzero(days_in_period, "days_in_period")

    return average_accounts_payable / (credit_purchases / days_in_period)


def cash_conversion_cycle(
    days_inventory_outstanding: float,
    days_sales_outstanding: float,
    days_payable_outstanding: float,
) -> float:
    """
    Calculate the cash conversion cycle in days.

    DIO + DSO - DPO

    Example:
        >>> cash_conversion_cycle(82, 34, 66)
        50
    """
    return days_inventory_outstanding + days_sales_outstanding - days_payable_outstanding


def cost_of_goods_sold(
    beginning_inventory: float,
    purchases: float,
    ending_inventory: float,
) -> float:
    """Calculate cost of goods sold from the inventory roll-forward."""
    return beginning_inventory + purchases - ending_inventory


def days_in_inventory(inventory_turnover: float) -> float:
    """Calculate days in inventory over a 365-day year."""
    require_nonzero(inventory_turnover, "inventory_turnover")

    return DAYS_IN_YEAR / inventory_turnover


def days_sales_of_inventory(average_inventory: float, cost_of_goods_sold: float) -> float:
    """
    Calculate days sales of inventory (DIO).

    Example:
        >>> days_sales_of_inventory(100, 200)
        182.5
    """
    require_nonzero(cost_of_goods_sold, "cost_of_goods_sold")

    return average_inventory / cost_of_goods_sold * DAYS_IN_YEAR


def days_sales_outstanding(accounts_receivable: float, total_credit_sales: float) -> float:
    """Calculate days sales outstanding (DSO)."""
    require_nonzero(total_credit_sales, "total_credit_sales")

    return accounts_receivable / total_credit_sales * DAYS_IN_YEAR


def days_payable_outstanding(accounts_payable: float, cost_of_goods_sold: float) -> float:
    """Calculate days payable outstanding (DPO)."""
    require_nonzero(cost_of_goods_sold, "cost_of_goods_sold")

    return accounts_payable / cost_of_goods_sold * DAYS_IN_YEAR


def inventory_turnover_ratio(cost_of_goods_sold: float, average_inventory: float) -> float:
    """Calculate how many times inventory is sold through in a period."""
    require_nonzero(average_inventory, "average_inventory")

    return cost_of_goods_sold / average_inventory


def operating_cycle(days_inventory_outstanding: float, days_sales_outstanding: float) -> float:
    """Calculate the operating cycle in days: DIO + DSO."""
    return days_inventory_outstanding + days_sales_outstanding


def payables_turnover_ratio(
    cost_of_goods_sold: float,
    average_accounts_payable: float,
) -> float:
    """Calculate how many times payables are settled in a period."""
    require_nonzero(average_accounts_payable, "average_accounts_payable")

    return cost_of_goods_sold / average_accounts_payable


def receivables_turnover_ratio(
    net_credit_sales: float,
    average_accounts_receivable: float,
) -> float:
    """Calculate how many times receivables are collected in a period."""
    require_nonzero(average_accounts_receivable, "average_accounts_receivable")

    return net_credit_sales / average_accounts_receivable
