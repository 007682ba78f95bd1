"""Schemaless item collection backing the /items routes."""

import threading
from typing import Any, Dict, List, Optional

from libs.common.errors import NotFound
from services.transport_service.services.ids import TimestampIdGenerator

ITEM_NOT_FOUND_MESSAGE = "Item no encontrado"


class ItemStore:
    """Stores arbitrary JSON objects under an assigned integer ``id``."""

    def __init__(self, id_generator: Optional[TimestampIdGenerator] = None):
        self._items: List[Dict[str, Any]] = []
        self._next_id = id_generator or TimestampIdGenerator()
        self._lock = threading.Lock()

    def list_all(self) -> List[Dict[str, Any]]:
        with self._lock:
            return [dict(item) for item in self._items]

    def create(self, payload: Dict[str, Any]) -> Dict[str, Any]:
        # A client-supplied "id" is overwritten
        with self._lock:
            item = {**payload, "id": self._next_id()}
            self._items.append(item)
            return dict(item)

    def get(self, item_id: int) -> Dict[str, Any]:
        with self._lock:
            for item in self._items:
                if item["id"] == item_id:
                    return dict(item)
        raise NotFound(ITEM_NOT_FOUND_MESSAGE)
