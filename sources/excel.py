"""Local Excel workbook source"""

import asyncio
from pathlib import Path
from typing import List, Optional

import openpyxl

from core.interfaces import SheetSource
from core.models import RawRow, SheetRows
from core.exceptions import SheetFetchError
from config import settings


class ExcelSheetSource(SheetSource):
    """Year sheets of a local .xlsx workbook, one worksheet per year"""

    def __init__(self, file_path: Optional[str] = None):
        self.path = Path(file_path or settings.WORKBOOK_PATH or "")

    def _sheet_names(self) -> List[str]:
        workbook = openpyxl.load_workbook(self.path, read_only=True, data_only=True)
        try:
            return [name.strip() for name in workbook.sheetnames]
        finally:
            workbook.close()

    def _read_rows(self, year: str) -> List[RawRow]:
        if not self.path.is_file():
            raise SheetFetchError(f"Workbook not found: {self.path}", year)

        try:
            workbook = openpyxl.load_workbook(self.path, read_only=True, data_only=True)
        except Exception as e:
            raise SheetFetchError(f"Failed to open workbook: {e}", year) from e

        try:
            sheet_name = next(
                (name for name in workbook.sheetnames if name.strip() == year),
                None
            )
            if sheet_name is None:
                raise SheetFetchError(f"Sheet {year} not found", year)

            # Merged ranges only hold a value in their top-left cell
            return [list(row) for row in workbook[sheet_name].iter_rows(values_only=True)]
        finally:
            workbook.close()

    async def sheet_exists(self, year: str) -> bool:
        try:
            names = await asyncio.to_thread(self._sheet_names)
        except Exception:
            return False
        return year in names

    async def fetch_rows(self, year: str) -> SheetRows:
        rows = await asyncio.to_thread(self._read_rows, year)
        return SheetRows(year=year, rows=rows)
