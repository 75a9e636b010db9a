"""Utility modules"""

from .cells import cell_value, parse_int, is_valid_name
from .months import (
    MONTH_COLUMNS,
    MONTH_LABELS,
    month_column,
    parse_month,
    default_month,
    month_options,
    ordered_months,
)

__all__ = [
    "cell_value",
    "parse_int",
    "is_valid_name",
    "MONTH_COLUMNS",
    "MONTH_LABELS",
    "month_column",
    "parse_month",
    "default_month",
    "month_options",
    "ordered_months",
]
