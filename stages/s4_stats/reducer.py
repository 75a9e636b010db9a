"""Stage 4: Stats - summary counters over the filtered services"""

from typing import List

from core.interfaces import Stage
from core.models import DashboardStats, ServiceRecord


def reduce_stats(services: List[ServiceRecord]) -> DashboardStats:
    return DashboardStats(
        total_disponibles=sum(s.disponibles for s in services),
        total_ocupados=sum(s.ocupados for s in services),
        total_campos=sum(s.total_campos for s in services),
        total_servicios=len(services),
    )


class StatsReducer(Stage[List[ServiceRecord], DashboardStats]):
    """Stage 4: Sum the filtered records"""

    @property
    def name(self) -> str:
        return "Stats"

    @property
    def stage_number(self) -> int:
        return 4

    def validate_input(self, input_data: List[ServiceRecord]) -> bool:
        return isinstance(input_data, list)

    async def execute(self, input_data: List[ServiceRecord]) -> DashboardStats:
        return reduce_stats(input_data)
