import asyncio
from typing import Any

from sqlalchemy import func, select
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from app.repositories.base import Repository, T


class SqlRepository(Repository[T]):
    """Table-backed collection. Tables use AUTOINCREMENT so ids are not recycled."""

    def __init__(self, session_factory: async_sessionmaker[AsyncSession], model: type[T], lock: asyncio.Lock):
        self._session_factory = session_factory
        self._model = model
        # Shared by every repository on the same engine: an in-memory
        # database is a single connection and cannot interleave transactions.
        self._lock = lock

    async def page(self, skip: int, take: int) -> tuple[list[T], int]:
        async with self._lock, self._session_factory() as session:
            total = await session.scalar(select(func.count()).select_from(self._model))
            result = await session.execute(
                select(self._model).order_by(self._model.id).offset(skip).limit(take)
            )
            return list(result.scalars().all()), total or 0

    async def get(self, entity_id: int) -> T | None:
        async with self._lock, self._session_factory() as session:
            return await session.get(self._model, entity_id)

    async def add(self, entity: T) -> T:
        async with self._lock, self._session_factory() as session:
            session.add(entity)
            await session.commit()
            await session.refresh(entity)
        return entity

    async def update(self, entity_id: int, changes: dict[str, Any]) -> T | None:
        async with self._lock, self._session_factory() as session:
            entity = await session.get(self._model, entity_id)
            if entity is None:
                return None
            for field, value in changes.items():
                setattr(entity, field, value)
            await session.commit()
            return entity

    async def delete(self, entity_id: int) -> bool:
        async with self._lock, self._session_factory() as session:
            entity = await session.get(self._model, entity_id)
            if entity is None:
                return False
            await session.delete(entity)
            await session.commit()
            return True
