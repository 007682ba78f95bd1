"""Unit tests for transport business rules.

Tests call validate_transport directly; no HTTP layer involved.
"""

from datetime import date

import pytest
from libs.common.errors import InvalidInput
from services.transport_service.services.validation import (
    DATE_ORDER_MESSAGE,
    INVALID_DATE_MESSAGE,
    MISSING_FIELDS_MESSAGE,
    NON_POSITIVE_TARIFF_MESSAGE,
    TEXT_FIELDS_MESSAGE,
    is_missing,
    parse_calendar_date,
    validate_transport,
)
from tests.factories import TransportPayloadFactory


def _rejected_with(message, **overrides):
    with pytest.raises(InvalidInput) as exc_info:
        validate_transport(TransportPayloadFactory.candidate(**overrides))
    assert exc_info.value.message == message


# ---------------------------------------------------------------------------
# Happy path
# ---------------------------------------------------------------------------


@pytest.mark.unit
def test_valid_candidate_is_coerced():
    validated = validate_transport(
        TransportPayloadFactory.candidate(numeroViaje="T1", tarifaAcordada="150.5")
    )

    assert validated.numero_viaje == "T1"
    assert validated.tarifa_acordada == 150.5
    assert validated.fecha_salida == date(2024, 1, 1)
    assert validated.fecha_entrega == date(2024, 1, 5)


@pytest.mark.unit
def test_numeric_tariff_and_datetime_strings_are_accepted():
    validated = validate_transport(
        TransportPayloadFactory.candidate(
            tarifaAcordada=99,
            fechaSalida="2024-03-01T08:00:00Z",
            fechaEntrega="2024-03-02T07:00:00+00:00",
        )
    )

    assert validated.tarifa_acordada == 99.0
    assert validated.fecha_salida == date(2024, 3, 1)
    assert validated.fecha_entrega == date(2024, 3, 2)


# ---------------------------------------------------------------------------
# Rule 1: presence
# ---------------------------------------------------------------------------


@pytest.mark.unit
@pytest.mark.parametrize(
    "field",
    [
        "numeroViaje",
        "origen",
        "destino",
        "transportista",
        "tarifaAcordada",
        "fechaSalida",
        "fechaEntrega",
    ],
)
@pytest.mark.parametrize("blank", [None, ""])
def test_each_field_is_required(field, blank):
    _rejected_with(MISSING_FIELDS_MESSAGE, **{field: blank})


@pytest.mark.unit
def test_numeric_zero_tariff_counts_as_missing():
    _rejected_with(MISSING_FIELDS_MESSAGE, tarifaAcordada=0)


@pytest.mark.unit
def test_presence_is_checked_before_dates():
    _rejected_with(
        MISSING_FIELDS_MESSAGE,
        origen="",
        fechaSalida="2024-02-01",
        fechaEntrega="2024-01-01",
    )


@pytest.mark.unit
@pytest.mark.parametrize(
    "value,expected",
    [
        (None, True),
        (False, True),
        ("", True),
        (0, True),
        (0.0, True),
        (float("nan"), True),
        ("0", False),
        (" ", False),
        (1, False),
        (True, False),
    ],
)
def test_is_missing(value, expected):
    assert is_missing(value) is expected


# ---------------------------------------------------------------------------
# Rule 2: dates
# ---------------------------------------------------------------------------


@pytest.mark.unit
def test_delivery_on_departure_day_is_rejected():
    _rejected_with(DATE_ORDER_MESSAGE, fechaSalida="2024-01-05", fechaEntrega="2024-01-05")


@pytest.mark.unit
def test_delivery_before_departure_is_rejected():
    _rejected_with(DATE_ORDER_MESSAGE, fechaSalida="2024-01-05", fechaEntrega="2024-01-01")


@pytest.mark.unit
@pytest.mark.parametrize(
    "bad",
    [
        "mañana",
        "2024-13-01",
        "01/05/2024",
        20240105,
        "20240105",
        "2024-W02-1",
        "2024-01-05x",
    ],
)
def test_unparseable_dates_are_rejected(bad):
    _rejected_with(INVALID_DATE_MESSAGE, fechaEntrega=bad)


@pytest.mark.unit
def test_date_order_is_checked_before_tariff():
    _rejected_with(
        DATE_ORDER_MESSAGE,
        tarifaAcordada="-5",
        fechaSalida="2024-01-05",
        fechaEntrega="2024-01-01",
    )


@pytest.mark.unit
def test_parse_calendar_date_passes_dates_through():
    assert parse_calendar_date(date(2024, 1, 1)) == date(2024, 1, 1)


# ---------------------------------------------------------------------------
# Rule 3: tariff
# ---------------------------------------------------------------------------


@pytest.mark.unit
@pytest.mark.parametrize("tariff", ["0", "-1", -0.01, "0.0"])
def test_non_positive_tariff_is_rejected(tariff):
    _rejected_with(NON_POSITIVE_TARIFF_MESSAGE, tarifaAcordada=tariff)


@pytest.mark.unit
@pytest.mark.parametrize("tariff", ["abc", "nan", "inf", "1e400", True, [150]])
def test_non_numeric_tariff_is_rejected(tariff):
    _rejected_with(NON_POSITIVE_TARIFF_MESSAGE, tarifaAcordada=tariff)


@pytest.mark.unit
@pytest.mark.parametrize(
    "text,expected",
    [
        ("2024-01-05", date(2024, 1, 5)),
        (" 2024-01-05 ", date(2024, 1, 5)),
        ("2024-01-05T08:30:00", date(2024, 1, 5)),
        ("2024-01-05 08:30", date(2024, 1, 5)),
    ],
)
def test_parse_calendar_date_accepts_dashed_dates(text, expected):
    assert parse_calendar_date(text) == expected


# ---------------------------------------------------------------------------
# Rule 4: text fields
# ---------------------------------------------------------------------------


@pytest.mark.unit
@pytest.mark.parametrize("field", ["numeroViaje", "origen", "destino", "transportista"])
def test_text_fields_must_be_strings(field):
    _rejected_with(TEXT_FIELDS_MESSAGE, **{field: 123})


@pytest.mark.unit
def test_date_order_is_checked_before_text_fields():
    _rejected_with(
        DATE_ORDER_MESSAGE,
        numeroViaje=42,
        fechaSalida="2024-02-01",
        fechaEntrega="2024-01-01",
    )


@pytest.mark.unit
def test_tariff_is_checked_before_text_fields():
    _rejected_with(NON_POSITIVE_TARIFF_MESSAGE, numeroViaje=42, tarifaAcordada="0.0")
