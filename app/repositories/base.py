from abc import ABC, abstractmethod
from typing import Any, Generic, TypeVar

T = TypeVar("T")


class Repository(ABC, Generic[T]):
    """Storage for one entity collection.

    Ids are assigned by the repository on ``add``, start at 1 and are never
    handed out twice, even after the entity holding them is deleted.
    Lookups that may race with a mutation (update, delete) take the id and
    resolve it inside the same critical section as the write.
    """

    @abstractmethod
    async def page(self, skip: int, take: int) -> tuple[list[T], int]:
        """Return ``take`` items after ``skip`` in id order, plus the collection size."""

    @abstractmethod
    async def get(self, entity_id: int) -> T | None: ...

    async def exists(self, entity_id: int) -> bool:
        return await self.get(entity_id) is not None

    @abstractmethod
    async def add(self, entity: T) -> T: ...

    @abstractmethod
    async def update(self, entity_id: int, changes: dict[str, Any]) -> T | None:
        """Overwrite the given attributes. Returns None when the id is unknown."""

    @abstractmethod
    async def delete(self, entity_id: int) -> bool:
        """Remove the entity. Returns False when the id is unknown."""
