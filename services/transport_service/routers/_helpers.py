"""Shared dependencies for transport service routers."""

from fastapi import Request

from services.transport_service.services.items import ItemStore
from services.transport_service.services.registry import TransportRegistry


def get_transport_registry(request: Request) -> TransportRegistry:
    """Return the registry owned by the running app."""
    return request.app.state.transport_registry


def get_item_store(request: Request) -> ItemStore:
    return request.app.state.item_store
