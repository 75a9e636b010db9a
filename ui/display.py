"""Dashboard rendering"""

from abc import ABC, abstractmethod
from typing import List

from core.models import DashboardView, ServiceRecord
from core.enums import AvailabilityLevel
from utils.months import MONTH_LABELS


NO_RESULTS_MESSAGE = "No se encontraron resultados para su búsqueda."
ERROR_MESSAGE = "No se pudieron cargar los datos."


class DashboardDisplay(ABC):
    """Abstract rendering collaborator"""

    @abstractmethod
    def show_loading(self):
        """Show the loading state"""
        pass

    @abstractmethod
    def show_error(self, message: str):
        """Show the error state"""
        pass

    @abstractmethod
    def show_data(self, view: DashboardView):
        """Render services and stats"""
        pass


class ConsoleDisplay(DashboardDisplay):
    """Plain-text table renderer"""

    COLUMNS = [
        ("Unidad", 18),
        ("Sub Unidad", 18),
        ("Servicio", 28),
        ("Tutor", 24),
        ("Total", 6),
        ("Ocup.", 6),
        ("Disp.", 6),
    ]

    LEVEL_MARKS = {
        AvailabilityLevel.HIGH: "++",
        AvailabilityLevel.MEDIUM: "+",
        AvailabilityLevel.LOW: "-",
        AvailabilityLevel.ZERO: "",
    }

    def show_loading(self):
        print("⏳ Cargando datos...", flush=True)

    def show_error(self, message: str):
        print(f"❌ {ERROR_MESSAGE} {message}".rstrip(), flush=True)

    def show_data(self, view: DashboardView):
        month_label = MONTH_LABELS.get(view.month, "-") if view.month else "-"
        print(f"\n📋 Campos clínicos {view.year or '-'} · {month_label}")
        print(self._format_line([name for name, _ in self.COLUMNS]))
        print("-" * (sum(width for _, width in self.COLUMNS) + len(self.COLUMNS) - 1))

        if not view.services:
            print(NO_RESULTS_MESSAGE)
        for service in view.services:
            print(self._format_service(service))

        stats = view.stats
        print(
            f"\nDisponibles: {stats.total_disponibles}  "
            f"Ocupados: {stats.total_ocupados}  "
            f"Total campos: {stats.total_campos}  "
            f"Servicios: {stats.total_servicios}"
        )
        if view.last_update:
            print(f"Última actualización: {view.last_update.strftime('%d/%m/%Y %H:%M')}", flush=True)

    def _format_service(self, service: ServiceRecord) -> str:
        mark = self.LEVEL_MARKS.get(service.availability_level, "")
        return self._format_line([
            service.unidad,
            service.sub_unidad,
            service.servicio,
            service.tutor,
            str(service.total_campos),
            str(service.ocupados),
            f"{service.disponibles}{mark}",
        ])

    def _format_line(self, values: List[str]) -> str:
        cells = []
        for value, (_, width) in zip(values, self.COLUMNS):
            text = value or "-"
            if len(text) > width:
                text = text[:width - 1] + "…"
            cells.append(text.ljust(width))
        return " ".join(cells).rstrip()
