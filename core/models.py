"""Core data models for the campos dashboard pipeline"""

from pydantic import BaseModel, Field, computed_field
from typing import Optional, Any
from datetime import datetime
from .enums import Month, AvailabilityLevel, DisplayState


# A raw row is an ordered list of cell values, or None when the sheet
# reports no cell data for it.
RawRow = Optional[list[Any]]


# ─────────────────────────────────────────────────────────────
# Stage 0: Year catalog
# ─────────────────────────────────────────────────────────────

class YearCatalog(BaseModel):
    """Output of Stage 0"""
    years: list[str] = []  # Ascending
    selected: Optional[str] = None

    @property
    def is_empty(self) -> bool:
        return not self.years


# ─────────────────────────────────────────────────────────────
# Stage 1: Retrieval
# ─────────────────────────────────────────────────────────────

class SheetRows(BaseModel):
    """Raw rows of one year sheet"""
    year: str
    rows: list[RawRow] = []
    fetched_at: datetime = Field(default_factory=datetime.now)


# ─────────────────────────────────────────────────────────────
# Stage 2: Aggregation
# ─────────────────────────────────────────────────────────────

class AggregationInput(BaseModel):
    """Rows to aggregate plus the selected month"""
    rows: list[RawRow] = []
    month: Optional[str] = None


class ServiceRecord(BaseModel):
    """Availability of one clinical service for the selected month"""
    unidad: str = "-"
    sub_unidad: str = "-"
    servicio: str
    tutor: str = "-"
    total_campos: int = Field(ge=0, default=0)
    ocupados: int = Field(ge=0, default=0)

    @computed_field
    @property
    def disponibles(self) -> int:
        return max(0, self.total_campos - self.ocupados)

    @computed_field
    @property
    def availability_level(self) -> AvailabilityLevel:
        if self.disponibles >= 3:
            return AvailabilityLevel.HIGH
        if self.disponibles >= 1:
            return AvailabilityLevel.MEDIUM
        if self.total_campos > 0:
            return AvailabilityLevel.LOW
        return AvailabilityLevel.ZERO


# ─────────────────────────────────────────────────────────────
# Stages 3-4: Filtering and stats
# ─────────────────────────────────────────────────────────────

class FilterCriteria(BaseModel):
    """User-supplied view filters"""
    search: str = ""
    only_available: bool = False


class FilterInput(BaseModel):
    """Services to filter plus the criteria"""
    services: list[ServiceRecord] = []
    criteria: FilterCriteria = Field(default_factory=FilterCriteria)


class DashboardStats(BaseModel):
    """Summary counters over the filtered services"""
    total_disponibles: int = 0
    total_ocupados: int = 0
    total_campos: int = 0
    total_servicios: int = 0


# ─────────────────────────────────────────────────────────────
# Presentation
# ─────────────────────────────────────────────────────────────

class MonthOption(BaseModel):
    """Entry of the month selector"""
    value: Month
    label: str
    column: int


class DashboardView(BaseModel):
    """Everything the rendering collaborator needs"""
    state: DisplayState
    year: Optional[str] = None
    month: Optional[Month] = None
    services: list[ServiceRecord] = []
    stats: DashboardStats = Field(default_factory=DashboardStats)
    last_update: Optional[datetime] = None
    message: Optional[str] = None
