import asyncio
import logging
from dataclasses import dataclass, field
from typing import Annotated

from fastapi import Path
from sqlalchemy.ext.asyncio import AsyncEngine

from app.config import settings
from app.database import create_engine, create_session_factory, create_tables
from app.models import Alerta, Colaborador, Moto
from app.repositories import MemoryRepository, Repository, SqlRepository
from app.schemas.common import INT32_MAX, INT32_MIN

logger = logging.getLogger(__name__)

EntityId = Annotated[int, Path(ge=INT32_MIN, le=INT32_MAX)]


@dataclass
class Store:
    motos: Repository[Moto]
    colaboradores: Repository[Colaborador]
    alertas: Repository[Alerta]
    engine: AsyncEngine | None = None
    # Held across "moto exists -> write alerta" and across moto deletes so an
    # alerta can never be stored for a moto that is being removed.
    moto_refs_lock: asyncio.Lock = field(default_factory=asyncio.Lock)


def build_memory_store() -> Store:
    return Store(
        motos=MemoryRepository(),
        colaboradores=MemoryRepository(),
        alertas=MemoryRepository(),
    )


async def build_sql_store(database_url: str) -> Store:
    engine = create_engine(database_url)
    await create_tables(engine)
    session_factory = create_session_factory(engine)
    lock = asyncio.Lock()
    return Store(
        motos=SqlRepository(session_factory, Moto, lock),
        colaboradores=SqlRepository(session_factory, Colaborador, lock),
        alertas=SqlRepository(session_factory, Alerta, lock),
        engine=engine,
    )


_store: Store | None = None


async def init_store() -> Store:
    global _store
    if settings.storage_backend == "sqlite":
        _store = await build_sql_store(settings.database_url)
    else:
        _store = build_memory_store()
    logger.info("Storage backend ready: %s", settings.storage_backend)
    return _store


async def close_store() -> None:
    global _store
    if _store is not None and _store.engine is not None:
        await _store.engine.dispose()
    _store = None


def reset_store() -> Store:
    """Replace the current store with an empty in-memory one."""
    global _store
    _store = build_memory_store()
    return _store


def get_store() -> Store:
    if _store is None:
        return reset_store()
    return _store
