import asyncio
from datetime import date

import pytest

from core.enums import DisplayState, Month
from core.models import FilterCriteria
from orchestrator import Orchestrator
from ui.display import DashboardDisplay
from fakes import FakeSheetSource, make_row, header_row


def today():
    return date(2025, 3, 15)


def sheet_2025():
    return [
        header_row(),
        make_row(
            unidad="Medicina",
            servicio="Cardiología",
            tutor="Dr Ruiz",
            campos="3",
            occupants={Month.MARZO: "ANA LOPEZ", Month.ABRIL: "LUIS PAZ"},
        ),
        make_row(campos="1", occupants={Month.ABRIL: "EVA SOTO"}),
        make_row(servicio="Neuro", tutor="Dr Vega", campos="1", occupants={Month.MARZO: "JOSE RIOS"}),
    ]


def sheet_2024():
    return [make_row(unidad="Cirugía", servicio="Trauma", campos="4")]


class RecordingDisplay(DashboardDisplay):
    def __init__(self):
        self.calls = []

    def show_loading(self):
        self.calls.append("loading")

    def show_error(self, message: str):
        self.calls.append("error")

    def show_data(self, view):
        self.calls.append("data")


@pytest.fixture
def source():
    return FakeSheetSource({"2024": sheet_2024(), "2025": sheet_2025()})


@pytest.mark.asyncio
async def test_initialize_loads_default_year_and_month(source):
    display = RecordingDisplay()
    orchestrator = Orchestrator(source, display=display, clock=today)

    view = await orchestrator.initialize()

    assert orchestrator.catalog.years == ["2024", "2025"]
    assert view.state == DisplayState.DATA
    assert view.year == "2025"
    assert view.month == Month.MARZO
    assert [(s.servicio, s.total_campos, s.ocupados) for s in view.services] == [
        ("Cardiología", 4, 1),
        ("Neuro", 1, 1),
    ]
    assert view.stats.total_disponibles == 3
    assert view.stats.total_servicios == 2
    assert view.last_update is not None
    assert display.calls == ["loading", "data"]


@pytest.mark.asyncio
async def test_month_change_reaggregates_without_fetching(source):
    orchestrator = Orchestrator(source, clock=today)
    await orchestrator.initialize()

    view = await orchestrator.select_month("abril")

    assert source.fetch_calls == ["2025"]
    assert view.month == Month.ABRIL
    assert [(s.servicio, s.ocupados, s.disponibles) for s in view.services] == [
        ("Cardiología", 2, 2),
        ("Neuro", 0, 1),
    ]


@pytest.mark.asyncio
async def test_unknown_selection_is_rejected(source):
    orchestrator = Orchestrator(source, clock=today)
    await orchestrator.initialize()

    with pytest.raises(ValueError):
        await orchestrator.select_month("SEPTIEMBRE")
    with pytest.raises(ValueError):
        await orchestrator.select_year("2019")


@pytest.mark.asyncio
async def test_year_change_fetches_and_resets_month(source):
    orchestrator = Orchestrator(source, clock=today)
    await orchestrator.initialize()
    await orchestrator.select_month("ABRIL")

    view = await orchestrator.select_year("2024")

    assert source.fetch_calls == ["2025", "2024"]
    assert view.year == "2024"
    assert view.month == Month.MARZO
    assert [s.servicio for s in view.services] == ["Trauma"]


@pytest.mark.asyncio
async def test_reselecting_current_year_does_not_refetch(source):
    orchestrator = Orchestrator(source, clock=today)
    await orchestrator.initialize()

    await orchestrator.select_year("2025")

    assert source.fetch_calls == ["2025"]


@pytest.mark.asyncio
async def test_refresh_refetches_and_keeps_month(source):
    orchestrator = Orchestrator(source, clock=today)
    await orchestrator.initialize()
    await orchestrator.select_month("ABRIL")

    view = await orchestrator.refresh()

    assert source.fetch_calls == ["2025", "2025"]
    assert view.month == Month.ABRIL


@pytest.mark.asyncio
async def test_filters_apply_to_view(source):
    orchestrator = Orchestrator(source, clock=today)
    await orchestrator.initialize()

    view = await orchestrator.apply_filters(search="vega")
    assert [s.servicio for s in view.services] == ["Neuro"]
    assert view.stats.total_servicios == 1

    other = await orchestrator.build_view(FilterCriteria())
    assert len(other.services) == 2
    assert orchestrator.criteria.search == "vega"


@pytest.mark.asyncio
async def test_fetch_failure_shows_error_without_data(source):
    source.fail_years.add("2025")
    display = RecordingDisplay()
    orchestrator = Orchestrator(source, display=display, clock=today)

    view = await orchestrator.initialize()

    assert view.state == DisplayState.ERROR
    assert view.services == []
    assert "2025" in view.message
    assert display.calls == ["loading", "error"]

    source.fail_years.clear()
    view = await orchestrator.refresh()
    assert view.state == DisplayState.DATA


@pytest.mark.asyncio
async def test_no_years_is_an_error():
    orchestrator = Orchestrator(FakeSheetSource({}), clock=today)

    view = await orchestrator.initialize()

    assert view.state == DisplayState.ERROR
    assert orchestrator.catalog.is_empty


@pytest.mark.asyncio
async def test_stale_response_does_not_clobber_newer_selection(source):
    orchestrator = Orchestrator(source, clock=today)
    await orchestrator.initialize()

    gate = asyncio.Event()
    source.gates["2024"] = gate
    slow = asyncio.create_task(orchestrator.select_year("2024"))
    await asyncio.sleep(0)

    view = await orchestrator.select_year("2025")
    gate.set()
    await slow

    assert orchestrator.session.year == "2025"
    assert orchestrator.view.year == "2025"
    assert [s.servicio for s in orchestrator.view.services] == ["Cardiología", "Neuro"]
    assert view.state == DisplayState.DATA


@pytest.mark.asyncio
async def test_stale_failure_does_not_set_error(source):
    orchestrator = Orchestrator(source, clock=today)
    await orchestrator.initialize()

    gate = asyncio.Event()
    source.gates["2024"] = gate
    source.fail_years.add("2024")
    slow = asyncio.create_task(orchestrator.select_year("2024"))
    await asyncio.sleep(0)

    await orchestrator.select_year("2025")
    gate.set()
    await slow

    assert orchestrator.state == DisplayState.DATA
    assert orchestrator.view.year == "2025"
