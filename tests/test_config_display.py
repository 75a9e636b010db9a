from datetime import datetime

from config import Settings
from core.enums import DisplayState, Month
from core.models import DashboardStats, DashboardView, ServiceRecord
from ui.display import ConsoleDisplay, NO_RESULTS_MESSAGE


def test_sheet_url_encodes_year():
    config = Settings(SPREADSHEET_ID="abc123")

    url = config.get_sheet_url("2025")

    assert url == "https://docs.google.com/spreadsheets/d/abc123/gviz/tq?tqx=out:json&sheet=2025"
    assert config.get_sheet_url("Hoja 1").endswith("sheet=Hoja%201")


def test_year_range_runs_through_next_year():
    config = Settings(START_YEAR=2024)

    assert config.get_year_range(2025) == ["2024", "2025", "2026"]


def test_console_display_renders_table_and_stats(capsys):
    view = DashboardView(
        state=DisplayState.DATA,
        year="2025",
        month=Month.MARZO,
        services=[ServiceRecord(unidad="Medicina", servicio="Cardiología", tutor="Dr Ruiz", total_campos=3, ocupados=1)],
        stats=DashboardStats(total_disponibles=2, total_ocupados=1, total_campos=3, total_servicios=1),
        last_update=datetime(2025, 3, 15, 9, 30),
    )

    ConsoleDisplay().show_data(view)
    out = capsys.readouterr().out

    assert "Campos clínicos 2025 · Marzo" in out
    assert "Cardiología" in out
    assert "Disponibles: 2" in out
    assert "15/03/2025 09:30" in out


def test_console_display_empty_view(capsys):
    ConsoleDisplay().show_data(DashboardView(state=DisplayState.DATA, year="2025", month=Month.ENERO))

    assert NO_RESULTS_MESSAGE in capsys.readouterr().out
