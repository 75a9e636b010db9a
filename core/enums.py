"""Core enumerations for the campos dashboard"""

from enum import Enum


class Month(str, Enum):
    """Canonical month tokens, in calendar order"""
    ENERO = "ENERO"
    FEBRERO = "FEBRERO"
    MARZO = "MARZO"
    ABRIL = "ABRIL"
    MAYO = "MAYO"
    JUNIO = "JUNIO"
    JULIO = "JULIO"
    AGOSTO = "AGOSTO"
    SETIEMBRE = "SETIEMBRE"
    OCTUBRE = "OCTUBRE"
    NOVIEMBRE = "NOVIEMBRE"
    DICIEMBRE = "DICIEMBRE"


class AvailabilityLevel(str, Enum):
    """Availability badge for a service"""
    HIGH = "high"
    MEDIUM = "medium"
    LOW = "low"
    ZERO = "zero"


class DisplayState(str, Enum):
    """What the dashboard is currently showing"""
    LOADING = "loading"
    ERROR = "error"
    DATA = "data"
