from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, async_sessionmaker, create_async_engine
from sqlalchemy.orm import DeclarativeBase
from sqlalchemy.pool import StaticPool


class Base(DeclarativeBase):
    pass


def _is_memory_url(url: str) -> bool:
    return url.endswith("://") or url.endswith(":memory:")


def create_engine(url: str) -> AsyncEngine:
    engine_kwargs: dict = {"echo": False}
    if _is_memory_url(url):
        # Every session must see the same in-memory database.
        engine_kwargs.update(poolclass=StaticPool, connect_args={"check_same_thread": False})
    return create_async_engine(url, **engine_kwargs)


def create_session_factory(engine: AsyncEngine) -> async_sessionmaker[AsyncSession]:
    return async_sessionmaker(engine, class_=AsyncSession, expire_on_commit=False)


async def create_tables(engine: AsyncEngine) -> None:
    async with engine.begin() as conn:
        from app.models import moto, colaborador, alerta  # noqa: F401
        await conn.run_sync(Base.metadata.create_all)
