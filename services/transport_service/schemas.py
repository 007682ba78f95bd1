"""Request and response schemas for the transport service."""

from typing import Any

from pydantic import BaseModel, ConfigDict, Field

from services.transport_service.models import Transport


class TransportCandidate(BaseModel):
    """
    Raw transport submission.

    Fields accept any JSON value; the registry applies the business rules in
    order and reports the first one broken.
    """

    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    numero_viaje: Any = Field(default=None, alias="numeroViaje")
    origen: Any = None
    destino: Any = None
    transportista: Any = None
    tarifa_acordada: Any = Field(default=None, alias="tarifaAcordada")
    fecha_salida: Any = Field(default=None, alias="fechaSalida")
    fecha_entrega: Any = Field(default=None, alias="fechaEntrega")

    @classmethod
    def from_body(cls, body: Any) -> "TransportCandidate":
        """Build a candidate from a request body; a non-object counts as empty."""
        return cls.model_validate(body if isinstance(body, dict) else {})


class TransportCreatedResponse(BaseModel):
    message: str = "Transporte registrado exitosamente"
    transporte: Transport
