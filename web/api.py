"""FastAPI application for the campos dashboard"""

from contextlib import asynccontextmanager
from typing import Callable, List, Optional

from fastapi import FastAPI, HTTPException, Request
from fastapi.middleware.cors import CORSMiddleware
from pydantic import BaseModel
import os

from core.interfaces import SheetSource
from core.models import DashboardView, FilterCriteria, MonthOption
from core.enums import Month
from orchestrator import Orchestrator
from scheduler import RefreshScheduler
from sources import create_source
from ui.progress import ConsoleProgress
from utils.months import month_options


class YearsResponse(BaseModel):
    years: List[str]
    selected: Optional[str] = None


class MonthsResponse(BaseModel):
    months: List[MonthOption]
    selected: Month


def create_app(
    source_factory: Optional[Callable[[], SheetSource]] = None,
    refresh_interval: Optional[float] = None
) -> FastAPI:
    """
    Build the API application

    Args:
        source_factory: Builds the sheet source at startup, defaults to the
            configured spreadsheet or workbook
        refresh_interval: Seconds between automatic refreshes, defaults to config
    """

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        source = (source_factory or create_source)()
        orchestrator = Orchestrator(source, progress=ConsoleProgress(verbose=False))
        scheduler = RefreshScheduler(orchestrator.refresh, refresh_interval)

        await orchestrator.initialize()
        scheduler.start()

        app.state.orchestrator = orchestrator
        app.state.scheduler = scheduler
        try:
            yield
        finally:
            await scheduler.stop()
            await source.aclose()

    app = FastAPI(
        title="Campos Clínicos API",
        description="Availability of clinical rotation fields per service",
        version="1.0.0",
        lifespan=lifespan
    )

    cors_origins_str = os.getenv("CORS_ORIGINS", "http://localhost:5173,http://localhost:3000")
    app.add_middleware(
        CORSMiddleware,
        allow_origins=[origin.strip() for origin in cors_origins_str.split(",")],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    def get_orchestrator(request: Request) -> Orchestrator:
        return request.app.state.orchestrator

    @app.get("/health")
    async def health():
        """Health check endpoint"""
        return {"status": "ok"}

    @app.get("/api/years", response_model=YearsResponse)
    async def list_years(request: Request):
        orchestrator = get_orchestrator(request)
        return YearsResponse(
            years=orchestrator.catalog.years,
            selected=orchestrator.session.year
        )

    @app.get("/api/months", response_model=MonthsResponse)
    async def list_months(request: Request):
        orchestrator = get_orchestrator(request)
        return MonthsResponse(months=month_options(), selected=orchestrator.session.month)

    @app.get("/api/dashboard", response_model=DashboardView)
    async def dashboard(request: Request, search: str = "", only_available: bool = False):
        """Filtered services and summary counters"""
        orchestrator = get_orchestrator(request)
        return await orchestrator.build_view(
            FilterCriteria(search=search, only_available=only_available)
        )

    @app.post("/api/selection/year/{year}", response_model=DashboardView)
    async def select_year(year: str, request: Request):
        orchestrator = get_orchestrator(request)
        try:
            return await orchestrator.select_year(year)
        except ValueError as e:
            raise HTTPException(status_code=404, detail=str(e))

    @app.post("/api/selection/month/{month}", response_model=DashboardView)
    async def select_month(month: str, request: Request):
        orchestrator = get_orchestrator(request)
        try:
            return await orchestrator.select_month(month)
        except ValueError as e:
            raise HTTPException(status_code=422, detail=str(e))

    @app.post("/api/refresh", response_model=DashboardView)
    async def refresh(request: Request):
        print("🔄 Manual refresh requested", flush=True)
        return await get_orchestrator(request).refresh()

    return app


app = create_app()
