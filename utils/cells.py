"""Cell value utilities"""

import math
import re
from typing import Any


_LEADING_INT = re.compile(r"^\s*([+-]?\d+)")

# Values that show up in the month columns but are not resident names
INVALID_NAME_VALUES = frozenset({
    "ENERO", "FEBRERO", "MARZO", "ABRIL", "MAYO", "JUNIO",
    "JULIO", "AGOSTO", "SETIEMBRE", "SEPTIEMBRE", "OCTUBRE", "NOVIEMBRE", "DICIEMBRE",
    "MES", "NOMBRE", "RESIDENTE", "N°", "REQUISITOS", "",
})

MIN_NAME_LENGTH = 3


def cell_value(cell: Any) -> str:
    """
    Normalize a raw cell into a trimmed string

    Accepts either a bare value or a visualization cell dict ({"v": ..., "f": ...}).

    Args:
        cell: Raw cell, possibly None

    Returns:
        Canonical string, "" for absent values
    """
    if isinstance(cell, dict):
        cell = cell.get("v")
    if cell is None:
        return ""
    if isinstance(cell, str):
        return cell.strip()
    if isinstance(cell, bool):
        return "true" if cell else "false"
    if isinstance(cell, int):
        return str(cell)
    if isinstance(cell, float):
        if math.isnan(cell):
            return ""
        if cell.is_integer():
            return str(int(cell))
        return repr(cell)
    return str(cell).strip()


def parse_int(value: str) -> int:
    """Parse the leading integer of a string, 0 when there is none"""
    match = _LEADING_INT.match(value or "")
    if not match:
        return 0
    return int(match.group(1))


def is_valid_name(value: Any) -> bool:
    """Check if a month cell looks like a resident name rather than a header"""
    if not isinstance(value, str):
        return False
    normalized = value.strip().upper()
    if normalized in INVALID_NAME_VALUES:
        return False
    return len(normalized) >= MIN_NAME_LENGTH
