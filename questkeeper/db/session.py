"""Async engine, session factory and the per-request `get_db` dependency."""
from collections.abc import AsyncIterator

from fastapi import Request
from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, async_sessionmaker, create_async_engine
from sqlalchemy.orm import DeclarativeBase

from questkeeper.core.config import get_settings


class Base(DeclarativeBase):
    pass


def make_engine(url: str, echo: bool = False) -> AsyncEngine:
    connect_args = {"check_same_thread": False} if url.startswith("sqlite") else {}
    return create_async_engine(url, echo=echo, connect_args=connect_args)


def make_sessionmaker(bind: AsyncEngine) -> async_sessionmaker[AsyncSession]:
    return async_sessionmaker(bind=bind, expire_on_commit=False, autoflush=False)


settings = get_settings()
engine = make_engine(settings.database_url, echo=settings.debug)
AsyncSessionLocal = make_sessionmaker(engine)


async def get_db(request: Request) -> AsyncIterator[AsyncSession]:
    """One session per request, from the factory the app was built with."""
    session_factory = getattr(request.app.state, "session_factory", AsyncSessionLocal)
    async with session_factory() as db:
        yield db
