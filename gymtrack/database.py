from sqlalchemy import event
from sqlalchemy.ext.asyncio import AsyncEngine, create_async_engine
from sqlalchemy.pool import NullPool
from sqlmodel import SQLModel

import gymtrack.models as _models  # noqa: F401 - registers tables with SQLModel metadata
from gymtrack.config import DATABASE_URL


def make_engine(url: str = DATABASE_URL) -> AsyncEngine:
    # NullPool: every AsyncSession opens and closes its own aiosqlite connection,
    # so no connection outlives the event loop that created it.
    engine = create_async_engine(url, poolclass=NullPool)

    if url.startswith("sqlite"):
        # Enable WAL mode for better read performance
        @event.listens_for(engine.sync_engine, "connect")
        def _set_sqlite_pragma(dbapi_connection, _connection_record):
            cursor = dbapi_connection.cursor()
            cursor.execute("PRAGMA journal_mode=WAL")
            cursor.close()

    return engine


async def create_db_and_tables(engine: AsyncEngine) -> None:
    async with engine.begin() as conn:
        await conn.run_sync(SQLModel.metadata.create_all)
