from contextlib import asynccontextmanager
from pathlib import Path
from typing import Any
import logging

from sqlalchemy import Result, CursorResult
from sqlalchemy.engine.url import make_url
from sqlalchemy.ext.asyncio import create_async_engine, async_sessionmaker, AsyncSession, AsyncEngine
from sqlalchemy.orm import Session

import config
# Imports all models so Base.metadata knows every configuration table
from models import Base

logger = logging.getLogger(__name__)

# HARD DISABLE SQL echo - statements would flood the checkout logs
sql_echo = False

_engine: AsyncEngine | None = None
_session_maker: async_sessionmaker | None = None


def get_engine() -> AsyncEngine:
    """
    Return the process-wide async engine, creating it on first use.

    Engine creation is deferred so importing repositories (e.g. in tests that use
    their own in-memory session) has no side effects on the filesystem.
    """
    global _engine, _session_maker

    if _engine is None:
        url = make_url(config.DB_URL)
        if url.get_backend_name() == "sqlite" and url.database and url.database != ":memory:":
            Path(url.database).parent.mkdir(parents=True, exist_ok=True)

        _engine = create_async_engine(url, echo=sql_echo)
        _session_maker = async_sessionmaker(_engine, class_=AsyncSession, expire_on_commit=False)
        logger.info(f"[DB] Engine created for backend '{url.get_backend_name()}'")

    return _engine


async def create_db_and_tables() -> None:
    async with get_engine().begin() as conn:
        await conn.run_sync(Base.metadata.create_all)


@asynccontextmanager
async def get_db_session() -> AsyncSession:
    get_engine()
    async with _session_maker() as session:
        try:
            yield session
        finally:
            await session.close()


async def session_execute(stmt, session: AsyncSession | Session) -> Result[Any] | CursorResult[Any]:
    if isinstance(session, AsyncSession):
        query_result = await session.execute(stmt)
        return query_result
    else:
        query_result = session.execute(stmt)
        return query_result


async def session_flush(session: AsyncSession | Session) -> None:
    if isinstance(session, AsyncSession):
        await session.flush()
    else:
        session.flush()


async def session_commit(session: AsyncSession | Session) -> None:
    if isinstance(session, AsyncSession):
        await session.commit()
    else:
        session.commit()
