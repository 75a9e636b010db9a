"""Core abstractions for the campos dashboard pipeline"""

from .models import *
from .enums import *
from .exceptions import *
from .interfaces import *

__all__ = [
    # Models
    "RawRow",
    "YearCatalog",
    "SheetRows",
    "AggregationInput",
    "ServiceRecord",
    "FilterCriteria",
    "FilterInput",
    "DashboardStats",
    "MonthOption",
    "DashboardView",
    # Enums
    "Month",
    "AvailabilityLevel",
    "DisplayState",
    # Exceptions
    "CamposError",
    "PipelineError",
    "StageError",
    "SheetFetchError",
    "SheetParseError",
    "CatalogError",
    "ConfigurationError",
    # Interfaces
    "Stage",
    "SheetSource",
]
