"""Transport registration and listing routes."""

from typing import Any, List

from fastapi import APIRouter, Body, Depends

from libs.auth.dependencies import require_gestor_logistico
from libs.auth.models import Account
from services.transport_service.models import Transport
from services.transport_service.routers._helpers import get_transport_registry
from services.transport_service.schemas import (
    TransportCandidate,
    TransportCreatedResponse,
)
from services.transport_service.services.registry import TransportRegistry

router = APIRouter(prefix="/transportes", tags=["transportes"])


@router.post(
    "",
    status_code=201,
    response_model=TransportCreatedResponse,
    responses={
        400: {"description": "Datos inválidos"},
        403: {"description": "Acceso no autorizado"},
    },
)
async def register_transport(
    body: Any = Body(default=None),
    account: Account = Depends(require_gestor_logistico),
    registry: TransportRegistry = Depends(get_transport_registry),
):
    """Validate and register a new transport."""
    transport = registry.register(TransportCandidate.from_body(body))
    return TransportCreatedResponse(transporte=transport)


@router.get(
    "",
    response_model=List[Transport],
    responses={403: {"description": "Acceso no autorizado"}},
)
async def list_transports(
    account: Account = Depends(require_gestor_logistico),
    registry: TransportRegistry = Depends(get_transport_registry),
):
    """List every registered transport in registration order."""
    return registry.list_all()
