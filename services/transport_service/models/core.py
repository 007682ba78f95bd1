"""Core transport service models."""

from datetime import date

from pydantic import BaseModel, ConfigDict, Field


class Transport(BaseModel):
    """A validated freight shipment held by the registry."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    id: int
    numero_viaje: str = Field(alias="numeroViaje")
    origen: str
    destino: str
    transportista: str
    tarifa_acordada: float = Field(alias="tarifaAcordada")
    fecha_salida: date = Field(alias="fechaSalida")
    fecha_entrega: date = Field(alias="fechaEntrega")
