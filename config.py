"""Configuration and environment settings"""

from pydantic_settings import BaseSettings
from typing import Optional, List
from urllib.parse import quote


class Settings(BaseSettings):
    """Application configuration"""

    # Spreadsheet source
    SPREADSHEET_ID: Optional[str] = None
    SHEETS_BASE_URL: str = "https://docs.google.com/spreadsheets/d"
    WORKBOOK_PATH: Optional[str] = None  # Local .xlsx used instead of the spreadsheet

    # Year catalog
    START_YEAR: int = 2024
    PROBE_CONCURRENCY: int = 4

    # Network
    HTTP_TIMEOUT: float = 15.0  # seconds

    # Refresh
    REFRESH_INTERVAL_SECONDS: float = 300.0  # 5 minutes

    # Web
    HOST: str = "0.0.0.0"
    PORT: int = 8000

    class Config:
        env_file = ".env"
        env_file_encoding = "utf-8"
        case_sensitive = True
        extra = "ignore"

    def get_sheet_url(self, year: str, spreadsheet_id: Optional[str] = None) -> str:
        """Get the visualization query URL for a year sheet"""
        spreadsheet_id = spreadsheet_id or self.SPREADSHEET_ID
        return (
            f"{self.SHEETS_BASE_URL}/{spreadsheet_id}"
            f"/gviz/tq?tqx=out:json&sheet={quote(year, safe='')}"
        )

    def get_year_range(self, current_year: int) -> List[str]:
        """Candidate year tokens from START_YEAR to current_year + 1"""
        return [str(y) for y in range(self.START_YEAR, current_year + 2)]


settings = Settings()
