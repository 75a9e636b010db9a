"""Stage 2: Row aggregation"""

from .aggregator import Aggregator, CarryState, aggregate_rows

__all__ = ["Aggregator", "CarryState", "aggregate_rows"]
