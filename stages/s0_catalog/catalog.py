"""Stage 0: Year catalog - discover which yearly sheets exist"""

import asyncio
from typing import List, Optional

from core.interfaces import Stage, SheetSource
from core.models import YearCatalog
from config import settings


def select_default_year(years: List[str], current_year: int) -> Optional[str]:
    """
    Pick the year shown on startup

    Prefers next year's sheet, then the latest available one.
    Returns None when no year exists.
    """
    preferred = str(current_year + 1)
    if preferred in years:
        return preferred
    if years:
        return max(years, key=int)
    return None


class YearCatalogBuilder(Stage[int, YearCatalog]):
    """Stage 0: Probe candidate years and build the ordered catalog"""

    @property
    def name(self) -> str:
        return "Year Catalog"

    @property
    def stage_number(self) -> int:
        return 0

    def __init__(self, source: SheetSource, concurrency: Optional[int] = None):
        self.source = source
        self.concurrency = max(1, concurrency or settings.PROBE_CONCURRENCY)

    def validate_input(self, input_data: int) -> bool:
        """Validate the reference calendar year"""
        return isinstance(input_data, int) and input_data >= settings.START_YEAR - 1

    async def execute(self, input_data: int) -> YearCatalog:
        """Execute catalog stage"""
        candidates = settings.get_year_range(input_data)
        semaphore = asyncio.Semaphore(self.concurrency)

        async def probe(year: str) -> bool:
            async with semaphore:
                return await self.source.sheet_exists(year)

        # gather keeps argument order, so results line up with candidates
        found = await asyncio.gather(*(probe(year) for year in candidates))
        years = sorted(
            (year for year, exists in zip(candidates, found) if exists),
            key=int
        )

        return YearCatalog(
            years=years,
            selected=select_default_year(years, input_data)
        )
