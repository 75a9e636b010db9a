"""Month to column mapping for the yearly rotation sheets"""

from datetime import date
from typing import Dict, List, Optional, Union

from core.enums import Month
from core.models import MonthOption


# 0-based column of each month block in the sheet (I, S, AC, ... DO)
MONTH_COLUMNS: Dict[Month, int] = {
    Month.ENERO: 8,
    Month.FEBRERO: 18,
    Month.MARZO: 28,
    Month.ABRIL: 38,
    Month.MAYO: 48,
    Month.JUNIO: 58,
    Month.JULIO: 68,
    Month.AGOSTO: 78,
    Month.SETIEMBRE: 88,
    Month.OCTUBRE: 98,
    Month.NOVIEMBRE: 108,
    Month.DICIEMBRE: 118,
}

MONTH_LABELS: Dict[Month, str] = {
    Month.ENERO: "Enero",
    Month.FEBRERO: "Febrero",
    Month.MARZO: "Marzo",
    Month.ABRIL: "Abril",
    Month.MAYO: "Mayo",
    Month.JUNIO: "Junio",
    Month.JULIO: "Julio",
    Month.AGOSTO: "Agosto",
    Month.SETIEMBRE: "Setiembre",
    Month.OCTUBRE: "Octubre",
    Month.NOVIEMBRE: "Noviembre",
    Month.DICIEMBRE: "Diciembre",
}

DEFAULT_MONTH_COLUMN = MONTH_COLUMNS[Month.ENERO]


def ordered_months() -> List[Month]:
    """Months in calendar order"""
    return list(Month)


def parse_month(value: Union[str, Month, None]) -> Optional[Month]:
    """Resolve a month token (any case); None when unknown"""
    if isinstance(value, Month):
        return value
    if not value:
        return None
    try:
        return Month(value.strip().upper())
    except ValueError:
        return None


def month_column(month: Union[str, Month, None]) -> int:
    """Column index for a month, January's column when unmapped"""
    resolved = parse_month(month)
    if resolved is None:
        return DEFAULT_MONTH_COLUMN
    return MONTH_COLUMNS.get(resolved, DEFAULT_MONTH_COLUMN)


def default_month(today: Optional[date] = None) -> Month:
    """Month matching the current calendar month"""
    today = today or date.today()
    return ordered_months()[today.month - 1]


def month_options() -> List[MonthOption]:
    """Ordered month selector entries"""
    return [
        MonthOption(value=month, label=MONTH_LABELS[month], column=MONTH_COLUMNS[month])
        for month in ordered_months()
    ]
