"""Stage 2: Aggregation - group sheet rows into per-service availability"""

from dataclasses import dataclass, replace
from typing import Dict, Iterable, List, Optional, Tuple

from core.interfaces import Stage
from core.models import AggregationInput, RawRow, ServiceRecord
from utils.cells import cell_value, parse_int, is_valid_name
from utils.months import month_column


# Fixed column layout
COL_UNIDAD = 0
COL_SUB_UNIDAD = 1
COL_SERVICIO = 2
COL_TUTOR = 3
COL_CAMPOS = 4

HEADER_UNIDAD_VALUES = frozenset({"UNIDADES", "N°"})
HEADER_SERVICIO_VALUE = "SERVICIOS A ROTAR"
SUMMARY_KEYWORDS = ("TOTAL", "RESIDENTES", "PROGRAMADOS", "ASISTIERON", "FALTARON")

ServiceKey = Tuple[str, str, str]


@dataclass(frozen=True)
class CarryState:
    """
    Values carried down from merged cells

    A merged cell only holds its value in the first row of the span, so each
    field keeps the latest non-empty value seen in its column.
    """
    unidad: str = ""
    sub_unidad: str = ""
    servicio: str = ""
    tutor: str = ""

    def advance(self, unidad: str, sub_unidad: str, servicio: str, tutor: str) -> "CarryState":
        return replace(
            self,
            unidad=unidad or self.unidad,
            sub_unidad=sub_unidad or self.sub_unidad,
            servicio=servicio or self.servicio,
            tutor=tutor or self.tutor,
        )

    @property
    def key(self) -> ServiceKey:
        return (self.unidad, self.sub_unidad, self.servicio)


@dataclass
class _Tally:
    unidad: str
    sub_unidad: str
    servicio: str
    tutor: str
    total_campos: int = 0
    ocupados: int = 0

    def to_record(self) -> ServiceRecord:
        return ServiceRecord(
            unidad=self.unidad,
            sub_unidad=self.sub_unidad,
            servicio=self.servicio,
            tutor=self.tutor,
            total_campos=self.total_campos,
            ocupados=self.ocupados,
        )


def _cell(row: List, index: int) -> str:
    if index < len(row):
        return cell_value(row[index])
    return ""


def _is_header(unidad: str, servicio: str) -> bool:
    return unidad in HEADER_UNIDAD_VALUES or servicio == HEADER_SERVICIO_VALUE


def _is_summary(unidad: str, sub_unidad: str, servicio: str, tutor: str) -> bool:
    text = f"{unidad} {sub_unidad} {servicio} {tutor}".upper()
    return any(keyword in text for keyword in SUMMARY_KEYWORDS)


def aggregate_rows(rows: Iterable[RawRow], month: Optional[str] = None) -> List[ServiceRecord]:
    """
    Aggregate sheet rows into one record per service

    Args:
        rows: Raw rows in sheet order
        month: Selected month token; January's column is used when unmapped

    Returns:
        Service records in order of first appearance
    """
    month_col = month_column(month)
    state = CarryState()
    tallies: Dict[ServiceKey, _Tally] = {}

    for row in rows:
        if not row:
            continue

        unidad = _cell(row, COL_UNIDAD)
        sub_unidad = _cell(row, COL_SUB_UNIDAD)
        servicio = _cell(row, COL_SERVICIO)
        tutor = _cell(row, COL_TUTOR)
        campos = _cell(row, COL_CAMPOS)
        occupant = _cell(row, month_col)

        if _is_header(unidad, servicio):
            continue
        if _is_summary(unidad, sub_unidad, servicio, tutor):
            continue
        if not any((unidad, sub_unidad, servicio, tutor, campos, occupant)):
            continue

        state = state.advance(unidad, sub_unidad, servicio, tutor)
        if not state.servicio:
            continue

        tally = tallies.get(state.key)
        if tally is None:
            tally = _Tally(
                unidad=state.unidad or "-",
                sub_unidad=state.sub_unidad or "-",
                servicio=state.servicio,
                tutor=state.tutor or "-",
            )
            tallies[state.key] = tally

        if tutor:
            tally.tutor = tutor

        num_campos = parse_int(campos)
        if num_campos > 0:
            tally.total_campos += num_campos

        if is_valid_name(occupant):
            tally.ocupados += 1

    return [tally.to_record() for tally in tallies.values()]


class Aggregator(Stage[AggregationInput, List[ServiceRecord]]):
    """Stage 2: Aggregate rows for the selected month"""

    @property
    def name(self) -> str:
        return "Aggregation"

    @property
    def stage_number(self) -> int:
        return 2

    def validate_input(self, input_data: AggregationInput) -> bool:
        """Validate aggregation input"""
        return isinstance(input_data, AggregationInput)

    async def execute(self, input_data: AggregationInput) -> List[ServiceRecord]:
        """Execute aggregation stage"""
        return aggregate_rows(input_data.rows, input_data.month)
