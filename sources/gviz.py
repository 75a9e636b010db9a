"""Google Visualization query source"""

import json
from typing import Any, List, Optional

import httpx

from core.interfaces import SheetSource
from core.models import RawRow, SheetRows
from core.exceptions import ConfigurationError, SheetFetchError, SheetParseError
from config import settings


STATUS_OK = '"status":"ok"'
STATUS_ERROR = '"status":"error"'


def unwrap_jsonp(text: str, year: Optional[str] = None) -> dict:
    """
    Strip the callback wrapper from a visualization response

    The endpoint answers with `/*O_o*/\\ngoogle.visualization.Query.setResponse({...});`,
    the payload is everything between the first "(" and the last ")".

    Raises:
        SheetParseError: envelope or JSON payload is malformed
    """
    start = text.find("(")
    end = text.rfind(")")
    if start == -1 or end <= start:
        raise SheetParseError("Response is not a JSONP envelope", year)

    try:
        payload = json.loads(text[start + 1:end])
    except json.JSONDecodeError as e:
        raise SheetParseError(f"Invalid JSON payload: {e}", year) from e

    if not isinstance(payload, dict):
        raise SheetParseError("Unexpected payload type", year)
    return payload


def parse_gviz_response(text: str, year: Optional[str] = None) -> List[RawRow]:
    """
    Parse a visualization response into raw rows

    Args:
        text: Raw response body
        year: Sheet being parsed, for error reporting

    Returns:
        One entry per table row: the list of cell values, or None when the
        row carries no cell data

    Raises:
        SheetFetchError: payload reports status "error"
        SheetParseError: payload is malformed
    """
    payload = unwrap_jsonp(text, year)

    if payload.get("status") == "error":
        errors = payload.get("errors") or [{}]
        message = errors[0].get("message") or errors[0].get("detailed_message") or "Sheet query failed"
        raise SheetFetchError(message, year)

    table = payload.get("table")
    if not isinstance(table, dict):
        raise SheetParseError("Payload has no table", year)

    rows: List[RawRow] = []
    for row in table.get("rows") or []:
        cells = row.get("c") if isinstance(row, dict) else None
        if cells is None:
            rows.append(None)
            continue
        rows.append([_cell_raw_value(cell) for cell in cells])
    return rows


def _cell_raw_value(cell: Any) -> Any:
    if isinstance(cell, dict):
        return cell.get("v")
    return cell


class GvizSheetSource(SheetSource):
    """Year sheets of a published Google spreadsheet"""

    def __init__(
        self,
        spreadsheet_id: Optional[str] = None,
        client: Optional[httpx.AsyncClient] = None,
        timeout: Optional[float] = None
    ):
        self.spreadsheet_id = spreadsheet_id or settings.SPREADSHEET_ID
        if not self.spreadsheet_id:
            raise ConfigurationError("SPREADSHEET_ID is not configured")

        self._owns_client = client is None
        self.client = client or httpx.AsyncClient(
            timeout=timeout or settings.HTTP_TIMEOUT,
            follow_redirects=True
        )

    def sheet_url(self, year: str) -> str:
        return settings.get_sheet_url(year, self.spreadsheet_id)

    async def sheet_exists(self, year: str) -> bool:
        """Probe the sheet; any failure counts as missing"""
        try:
            response = await self.client.get(self.sheet_url(year))
            text = response.text
        except Exception:
            return False

        if STATUS_ERROR in text:
            return False
        return STATUS_OK in text

    async def fetch_rows(self, year: str) -> SheetRows:
        """Fetch and parse a year sheet"""
        try:
            response = await self.client.get(self.sheet_url(year))
            response.raise_for_status()
        except httpx.HTTPError as e:
            raise SheetFetchError(f"Failed to fetch sheet {year}: {e}", year) from e

        rows = parse_gviz_response(response.text, year)
        return SheetRows(year=year, rows=rows)

    async def aclose(self) -> None:
        if self._owns_client:
            await self.client.aclose()
