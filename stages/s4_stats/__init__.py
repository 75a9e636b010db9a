"""Stage 4: Summary statistics"""

from .reducer import StatsReducer, reduce_stats

__all__ = ["StatsReducer", "reduce_stats"]
