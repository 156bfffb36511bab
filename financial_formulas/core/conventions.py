"""Market conventions used as default arguments across the catalog."""

from typing import Any

DAYS_IN_YEAR = 365
MONTHS_IN_YEAR = 12
TWO_POINT_AVERAGE = 2
RULE_OF_72_NUMERATOR = 72
PERCENT = 100

CONVENTIONS: dict[str, dict[str, Any]] = {
    "day_count": {
        "days_in_year": DAYS_IN_YEAR,  # actual/365 fixed
        "used_by": (
            "average_collection_period",
            "average_inventory_period",
            "average_payment_period",
            "bond_equivalent_yield",
            "days_in_inventory",
            "days_sales_of_inventory",
            "days_sales_outstanding",
            "days_payable_outstanding",
        ),
    },
    "compounding": {
        "periods_per_year": MONTHS_IN_YEAR,
        "used_by": ("compound_interest",),
    },
    "averaging": {
        "number_of_periods": TWO_POINT_AVERAGE,  # opening + closing balance
        "used_by": ("average_inventory",),
    },
    "rule_of_thumb": {
        "doubling_numerator": RULE_OF_72_NUMERATOR,
        "used_by": ("rule_of_72",),
    },
    "presentation": {
        "percent_factor": PERCENT,
        "used_by": ("to_percentage",),
    },
}
