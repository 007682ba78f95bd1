"""Unauthenticated item echo routes."""

from typing import Any, Dict, List

from fastapi import APIRouter, Body, Depends

from services.transport_service.routers._helpers import get_item_store
from services.transport_service.services.items import ItemStore

router = APIRouter(prefix="/items", tags=["items"])


@router.get("", response_model=List[Dict[str, Any]])
async def list_items(store: ItemStore = Depends(get_item_store)):
    return store.list_all()


@router.post("", status_code=201, response_model=Dict[str, Any])
async def create_item(
    payload: Dict[str, Any] = Body(...),
    store: ItemStore = Depends(get_item_store),
):
    """Store the posted object and echo it back with its assigned id."""
    return store.create(payload)


@router.get(
    "/{item_id}",
    response_model=Dict[str, Any],
    responses={404: {"description": "Item no encontrado"}},
)
async def get_item(item_id: int, store: ItemStore = Depends(get_item_store)):
    return store.get(item_id)
