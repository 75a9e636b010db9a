"""Stage 3: Availability filter and search"""

from .service_filter import ServiceFilter, filter_services

__all__ = ["ServiceFilter", "filter_services"]
