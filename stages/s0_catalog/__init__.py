"""Stage 0: Year catalog"""

from .catalog import YearCatalogBuilder, select_default_year

__all__ = ["YearCatalogBuilder", "select_default_year"]
