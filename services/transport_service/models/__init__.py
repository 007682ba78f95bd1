"""Transport Service models package."""

from services.transport_service.models.core import Transport

__all__ = ["Transport"]
