import threading
from typing import Any

from app.repositories.base import Repository, T


class MemoryRepository(Repository[T]):
    """Ordered in-process list with its own id counter."""

    def __init__(self) -> None:
        self._items: list[T] = []
        self._next_id = 1
        self._lock = threading.Lock()

    def _find(self, entity_id: int) -> T | None:
        return next((item for item in self._items if item.id == entity_id), None)

    async def page(self, skip: int, take: int) -> tuple[list[T], int]:
        with self._lock:
            return self._items[skip:skip + take], len(self._items)

    async def get(self, entity_id: int) -> T | None:
        with self._lock:
            return self._find(entity_id)

    async def add(self, entity: T) -> T:
        with self._lock:
            entity.id = self._next_id
            self._next_id += 1
            self._items.append(entity)
        return entity

    async def update(self, entity_id: int, changes: dict[str, Any]) -> T | None:
        with self._lock:
            entity = self._find(entity_id)
            if entity is None:
                return None
            for field, value in changes.items():
                setattr(entity, field, value)
            return entity

    async def delete(self, entity_id: int) -> bool:
        with self._lock:
            entity = self._find(entity_id)
            if entity is None:
                return False
            self._items.remove(entity)
            return True
