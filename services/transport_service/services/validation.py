"""Business rules for transport submissions.

Rules run in a fixed order and stop at the first violation: required
fields, then date ordering, then a positive tariff, then text-typed fields.
"""

import math
import re
from dataclasses import dataclass
from datetime import date, datetime
from typing import Any

from libs.common.errors import InvalidInput
from services.transport_service.schemas import TransportCandidate

MISSING_FIELDS_MESSAGE = "Todos los campos son obligatorios"
TEXT_FIELDS_MESSAGE = "numeroViaje, origen, destino y transportista deben ser texto"
INVALID_DATE_MESSAGE = "Las fechas deben tener el formato YYYY-MM-DD"
DATE_ORDER_MESSAGE = "La fecha de entrega debe ser posterior a la fecha de salida"
NON_POSITIVE_TARIFF_MESSAGE = "La tarifa acordada debe ser un número positivo"

REQUIRED_FIELDS = (
    "numero_viaje",
    "origen",
    "destino",
    "transportista",
    "tarifa_acordada",
    "fecha_salida",
    "fecha_entrega",
)
TEXT_FIELDS = ("numero_viaje", "origen", "destino", "transportista")
_DATE_PREFIX = re.compile(r"\d{4}-\d{2}-\d{2}")


@dataclass(frozen=True)
class ValidatedTransport:
    """Coerced field values of a candidate that passed every rule."""

    numero_viaje: str
    origen: str
    destino: str
    transportista: str
    tarifa_acordada: float
    fecha_salida: date
    fecha_entrega: date


def is_missing(value: Any) -> bool:
    """True for absent or falsy values: None, False, "", 0 and NaN."""
    if value is None or value is False:
        return True
    if isinstance(value, str):
        return value == ""
    if isinstance(value, (int, float)):
        return value == 0 or math.isnan(value)
    return False


def parse_calendar_date(value: Any) -> date:
    """
    Parse ``YYYY-MM-DD``, optionally followed by an ISO-8601 time, into a date.

    Raises ValueError for anything else.
    """
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    if not isinstance(value, str):
        raise ValueError(f"not a date: {value!r}")
    text = value.strip()
    if not _DATE_PREFIX.match(text):
        raise ValueError(f"not YYYY-MM-DD: {value!r}")
    if len(text) == 10:
        return datetime.strptime(text, "%Y-%m-%d").date()
    if text[10] not in "T ":
        raise ValueError(f"not YYYY-MM-DD: {value!r}")
    return datetime.fromisoformat(text).date()


def parse_tariff(value: Any) -> float:
    """Parse a tariff from a number or numeric string. Raises ValueError."""
    if isinstance(value, bool):
        raise ValueError("booleans are not tariffs")
    if isinstance(value, (int, float)):
        return float(value)
    if isinstance(value, str):
        return float(value.strip())
    raise ValueError(f"not a number: {value!r}")


def validate_transport(candidate: TransportCandidate) -> ValidatedTransport:
    """Apply every rule to ``candidate``; raise InvalidInput on the first failure."""
    if any(is_missing(getattr(candidate, name)) for name in REQUIRED_FIELDS):
        raise InvalidInput(MISSING_FIELDS_MESSAGE)

    try:
        fecha_salida = parse_calendar_date(candidate.fecha_salida)
        fecha_entrega = parse_calendar_date(candidate.fecha_entrega)
    except ValueError:
        raise InvalidInput(INVALID_DATE_MESSAGE)

    if fecha_entrega <= fecha_salida:
        raise InvalidInput(DATE_ORDER_MESSAGE)

    try:
        tarifa = parse_tariff(candidate.tarifa_acordada)
    except ValueError:
        raise InvalidInput(NON_POSITIVE_TARIFF_MESSAGE)

    if not math.isfinite(tarifa) or tarifa <= 0:
        raise InvalidInput(NON_POSITIVE_TARIFF_MESSAGE)

    if not all(isinstance(getattr(candidate, name), str) for name in TEXT_FIELDS):
        raise InvalidInput(TEXT_FIELDS_MESSAGE)

    return ValidatedTransport(
        numero_viaje=candidate.numero_viaje,
        origen=candidate.origen,
        destino=candidate.destino,
        transportista=candidate.transportista,
        tarifa_acordada=tarifa,
        fecha_salida=fecha_salida,
        fecha_entrega=fecha_entrega,
    )
