"""Transport service routers package."""

from services.transport_service.routers.auth import router as auth_router
from services.transport_service.routers.items import router as items_router
from services.transport_service.routers.transports import router as transports_router

__all__ = ["auth_router", "items_router", "transports_router"]
