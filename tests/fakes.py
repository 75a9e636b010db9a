"""Test doubles shared by the test modules"""

import asyncio
from typing import Dict, List, Optional

from core.enums import Month
from core.exceptions import SheetFetchError
from core.interfaces import SheetSource
from core.models import RawRow, SheetRows
from utils.months import MONTH_COLUMNS


ROW_WIDTH = MONTH_COLUMNS[Month.DICIEMBRE] + 1


def make_row(
    unidad="",
    sub_unidad="",
    servicio="",
    tutor="",
    campos="",
    occupant="",
    month: Month = Month.ENERO,
    occupants: Optional[Dict[Month, str]] = None,
) -> list:
    """Build a full-width sheet row"""
    row = [None] * ROW_WIDTH
    row[0] = unidad or None
    row[1] = sub_unidad or None
    row[2] = servicio or None
    row[3] = tutor or None
    row[4] = campos if campos != "" else None
    if occupant:
        row[MONTH_COLUMNS[month]] = occupant
    for other_month, name in (occupants or {}).items():
        row[MONTH_COLUMNS[other_month]] = name
    return row


def header_row() -> list:
    row = [None] * ROW_WIDTH
    row[0] = "UNIDADES"
    row[1] = "SUB UNIDADES"
    row[2] = "SERVICIOS A ROTAR"
    row[3] = "TUTOR DE SERVICIO"
    row[4] = "N° DE CAMPOS CLÍNICOS"
    for month, col in MONTH_COLUMNS.items():
        row[col] = month.value
    return row


class FakeSheetSource(SheetSource):
    """In-memory source with optional per-year gates and failures"""

    def __init__(self, sheets: Dict[str, List[RawRow]]):
        self.sheets = sheets
        self.fail_years = set()
        self.gates: Dict[str, asyncio.Event] = {}
        self.probe_delays: Dict[str, float] = {}
        self.probe_calls: List[str] = []
        self.fetch_calls: List[str] = []
        self.active_probes = 0
        self.max_active_probes = 0
        self.closed = False

    async def sheet_exists(self, year: str) -> bool:
        self.probe_calls.append(year)
        self.active_probes += 1
        self.max_active_probes = max(self.max_active_probes, self.active_probes)
        try:
            await asyncio.sleep(self.probe_delays.get(year, 0))
            return year in self.sheets
        finally:
            self.active_probes -= 1

    async def fetch_rows(self, year: str) -> SheetRows:
        self.fetch_calls.append(year)
        gate = self.gates.get(year)
        if gate is not None:
            await gate.wait()
        if year in self.fail_years or year not in self.sheets:
            raise SheetFetchError(f"Sheet {year} unavailable", year)
        return SheetRows(year=year, rows=[list(r) if r else r for r in self.sheets[year]])

    async def aclose(self) -> None:
        self.closed = True
