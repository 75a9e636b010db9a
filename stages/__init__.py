"""Pipeline stages"""

from .s0_catalog import YearCatalogBuilder
from .s1_retrieval import SheetLoader
from .s2_aggregation import Aggregator
from .s3_filtering import ServiceFilter
from .s4_stats import StatsReducer

__all__ = [
    "YearCatalogBuilder",
    "SheetLoader",
    "Aggregator",
    "ServiceFilter",
    "StatsReducer",
]
