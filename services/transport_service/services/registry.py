"""In-memory transport registry."""

import threading
from typing import List, Optional

from libs.common.logging import get_logger
from services.transport_service.models import Transport
from services.transport_service.schemas import TransportCandidate
from services.transport_service.services.ids import TimestampIdGenerator
from services.transport_service.services.validation import validate_transport

logger = get_logger(__name__)


class TransportRegistry:
    """
    Append-only store of validated transports, listed in insertion order.

    The lock covers validate, id assignment and append, so a registration is
    atomic with respect to other registrations.
    """

    def __init__(self, id_generator: Optional[TimestampIdGenerator] = None):
        self._records: List[Transport] = []
        self._next_id = id_generator or TimestampIdGenerator()
        self._lock = threading.Lock()

    def __len__(self) -> int:
        with self._lock:
            return len(self._records)

    def register(self, candidate: TransportCandidate) -> Transport:
        """Validate ``candidate`` and store it. Raises InvalidInput."""
        with self._lock:
            validated = validate_transport(candidate)
            transport = Transport(
                id=self._next_id(),
                numero_viaje=validated.numero_viaje,
                origen=validated.origen,
                destino=validated.destino,
                transportista=validated.transportista,
                tarifa_acordada=validated.tarifa_acordada,
                fecha_salida=validated.fecha_salida,
                fecha_entrega=validated.fecha_entrega,
            )
            self._records.append(transport)

        logger.info(
            "Registered transport %s (viaje=%s, %s -> %s)",
            transport.id,
            transport.numero_viaje,
            transport.origen,
            transport.destino,
        )
        return transport

    def list_all(self) -> List[Transport]:
        with self._lock:
            return list(self._records)
