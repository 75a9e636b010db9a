"""Stage 3: Filtering - availability toggle and text search"""

from typing import List

from core.interfaces import Stage
from core.models import FilterCriteria, FilterInput, ServiceRecord


def _matches_search(service: ServiceRecord, term: str) -> bool:
    fields = [service.servicio, service.tutor]
    return any(term in (field or "").lower() for field in fields)


def filter_services(services: List[ServiceRecord], criteria: FilterCriteria) -> List[ServiceRecord]:
    """
    Keep services passing both the availability and the search filter

    Search matches servicio or tutor, case-insensitive substring.
    Input order is preserved.
    """
    term = (criteria.search or "").strip().lower()

    result = []
    for service in services:
        if criteria.only_available and service.disponibles <= 0:
            continue
        if term and not _matches_search(service, term):
            continue
        result.append(service)
    return result


class ServiceFilter(Stage[FilterInput, List[ServiceRecord]]):
    """Stage 3: Derive the filtered view"""

    @property
    def name(self) -> str:
        return "Filtering"

    @property
    def stage_number(self) -> int:
        return 3

    def validate_input(self, input_data: FilterInput) -> bool:
        return isinstance(input_data, FilterInput)

    async def execute(self, input_data: FilterInput) -> List[ServiceRecord]:
        return filter_services(input_data.services, input_data.criteria)
