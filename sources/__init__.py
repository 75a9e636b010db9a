"""Year-sheet sources"""

from typing import Optional

from core.interfaces import SheetSource
from core.exceptions import ConfigurationError
from config import settings
from .gviz import GvizSheetSource, parse_gviz_response, unwrap_jsonp
from .excel import ExcelSheetSource


def create_source(workbook_path: Optional[str] = None) -> SheetSource:
    """Build the configured source: local workbook first, then the spreadsheet"""
    workbook_path = workbook_path or settings.WORKBOOK_PATH
    if workbook_path:
        return ExcelSheetSource(workbook_path)
    if settings.SPREADSHEET_ID:
        return GvizSheetSource()
    raise ConfigurationError("Configure SPREADSHEET_ID or WORKBOOK_PATH")


__all__ = [
    "SheetSource",
    "GvizSheetSource",
    "ExcelSheetSource",
    "create_source",
    "parse_gviz_response",
    "unwrap_jsonp",
]
