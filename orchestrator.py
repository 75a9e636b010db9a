"""Dashboard pipeline orchestrator"""

from dataclasses import dataclass, field, replace
from datetime import date, datetime
from typing import Callable, List, Optional

from core.models import *
from core.enums import DisplayState, Month
from core.exceptions import CatalogError, StageError
from core.interfaces import SheetSource
from stages import (
    YearCatalogBuilder, SheetLoader, Aggregator, ServiceFilter, StatsReducer
)
from ui.progress import ProgressTracker, SilentProgress
from ui.display import DashboardDisplay
from utils.months import default_month, parse_month


@dataclass(frozen=True)
class DashboardSession:
    """
    Selection plus the data derived from it

    Sessions are never mutated; every change builds a new one. `generation`
    identifies the year selection a session belongs to, so a fetch started
    for an older selection can be recognized and dropped.
    """
    year: Optional[str] = None
    month: Month = Month.ENERO
    rows: List[RawRow] = field(default_factory=list)
    services: List[ServiceRecord] = field(default_factory=list)
    fetched_at: Optional[datetime] = None
    generation: int = 0


class Orchestrator:
    """Pipeline coordinator: catalog → retrieval → aggregation → filtering → stats"""

    def __init__(
        self,
        source: SheetSource,
        progress: Optional[ProgressTracker] = None,
        display: Optional[DashboardDisplay] = None,
        clock: Callable[[], date] = date.today
    ):
        self.source = source
        self.progress = progress or SilentProgress()
        self.display = display
        self.clock = clock

        self.stages = {
            0: YearCatalogBuilder(source),
            1: SheetLoader(source),
            2: Aggregator(),
            3: ServiceFilter(),
            4: StatsReducer(),
        }

        self.catalog = YearCatalog()
        self.session = DashboardSession(month=default_month(self.clock()))
        self.criteria = FilterCriteria()
        self.state = DisplayState.LOADING
        self.error: Optional[str] = None
        self.view = DashboardView(state=DisplayState.LOADING)

    async def initialize(self) -> DashboardView:
        """Build the year catalog and load the default year"""
        await self._set_loading(force=True)
        try:
            self.catalog = await self._execute_stage(0, self.clock().year)
            if self.catalog.is_empty:
                raise CatalogError("No year sheets available")
        except (StageError, CatalogError) as e:
            return await self._set_error(str(e))

        print(f"📅 Years found: {', '.join(self.catalog.years)}", flush=True)
        return await self.select_year(self.catalog.selected, force=True)

    async def select_year(self, year: str, force: bool = False) -> DashboardView:
        """Switch to another year sheet and fetch it"""
        if year not in self.catalog.years:
            raise ValueError(f"Year not available: {year}")
        if year == self.session.year and self.session.fetched_at and not force:
            return self.view

        self.session = DashboardSession(
            year=year,
            month=default_month(self.clock()),
            generation=self.session.generation + 1
        )
        return await self._load(self.session.generation)

    async def refresh(self) -> DashboardView:
        """Re-fetch the current year, keeping the selected month"""
        if not self.session.year:
            return await self.initialize()
        return await self._load(self.session.generation)

    async def select_month(self, month: str) -> DashboardView:
        """Re-aggregate the cached rows for another month"""
        resolved = parse_month(month)
        if resolved is None:
            raise ValueError(f"Unknown month: {month}")

        services = await self._execute_stage(
            2, AggregationInput(rows=self.session.rows, month=resolved.value)
        )
        self.session = replace(self.session, month=resolved, services=services)
        return await self._render()

    async def apply_filters(self, search: str = "", only_available: bool = False) -> DashboardView:
        """Recompute the filtered view"""
        self.criteria = FilterCriteria(search=search or "", only_available=only_available)
        return await self._render()

    async def _load(self, generation: int) -> DashboardView:
        year = self.session.year
        await self._set_loading()

        try:
            sheet = await self._execute_stage(1, year)
        except StageError as e:
            if not self._is_current(generation, year):
                return self.view
            return await self._set_error(str(e))

        if not self._is_current(generation, sheet.year):
            print(f"⚠️ Discarding stale response for {sheet.year}", flush=True)
            return self.view

        services = await self._execute_stage(
            2, AggregationInput(rows=sheet.rows, month=self.session.month.value)
        )
        if not services:
            print(f"⚠️ No services found in sheet {year}", flush=True)

        self.session = replace(
            self.session,
            rows=sheet.rows,
            services=services,
            fetched_at=sheet.fetched_at
        )
        self.state = DisplayState.DATA
        self.error = None
        return await self._render()

    def _is_current(self, generation: int, year: str) -> bool:
        return generation == self.session.generation and year == self.session.year

    async def build_view(self, criteria: FilterCriteria) -> DashboardView:
        """Filtered view of the current session, without changing the stored filters"""
        if self.state != DisplayState.DATA:
            return self.view

        session = self.session
        filtered = await self._execute_stage(
            3, FilterInput(services=session.services, criteria=criteria)
        )
        stats = await self._execute_stage(4, filtered)

        return DashboardView(
            state=DisplayState.DATA,
            year=session.year,
            month=session.month,
            services=filtered,
            stats=stats,
            last_update=session.fetched_at
        )

    async def _render(self) -> DashboardView:
        if self.state != DisplayState.DATA:
            return self.view

        self.view = await self.build_view(self.criteria)

        complete_result = self.progress.complete()
        if hasattr(complete_result, '__await__'):
            await complete_result

        if self.display:
            self.display.show_data(self.view)
        return self.view

    async def _set_loading(self, force: bool = False):
        was_loading = self.state == DisplayState.LOADING
        self.state = DisplayState.LOADING
        self.view = DashboardView(state=DisplayState.LOADING, year=self.session.year)
        if self.display and (force or not was_loading):
            self.display.show_loading()

    async def _set_error(self, message: str) -> DashboardView:
        self.state = DisplayState.ERROR
        self.error = message
        self.view = DashboardView(
            state=DisplayState.ERROR,
            year=self.session.year,
            month=self.session.month,
            message=message
        )
        if self.display:
            self.display.show_error(message)
        return self.view

    async def _execute_stage(self, stage_num: int, input_data) -> any:
        """Execute a single stage with progress tracking"""
        stage = self.stages[stage_num]

        # Handle both sync and async progress trackers
        start_result = self.progress.start_stage(stage_num, stage.name)
        if hasattr(start_result, '__await__'):
            await start_result

        if not stage.validate_input(input_data):
            raise StageError(stage_num, "Invalid input")

        try:
            result = await stage.execute(input_data)
        except StageError as e:
            fail_result = self.progress.fail(e.stage, e.message)
            if hasattr(fail_result, '__await__'):
                await fail_result
            raise

        complete_result = self.progress.complete_stage(stage_num)
        if hasattr(complete_result, '__await__'):
            await complete_result

        return result
