import logging
from pathlib import Path

from sqlalchemy import func, select
from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, async_sessionmaker, create_async_engine

from players_api.data.players_data import SEED_PLAYERS
from players_api.models import Base, Player

logger = logging.getLogger(__name__)


def build_engine(database_url: str) -> AsyncEngine:
    return create_async_engine(
        database_url,
        pool_pre_ping=True,
        echo=False,
    )


def build_session_factory(engine: AsyncEngine) -> async_sessionmaker[AsyncSession]:
    return async_sessionmaker(engine, expire_on_commit=False)


def _ensure_sqlite_directory(engine: AsyncEngine) -> None:
    url = engine.url
    if url.get_backend_name() != "sqlite" or not url.database or url.database == ":memory:":
        return
    Path(url.database).parent.mkdir(parents=True, exist_ok=True)


async def init_db(
    engine: AsyncEngine,
    session_factory: async_sessionmaker[AsyncSession],
    seed: bool = True,
) -> None:
    """Create the schema and, when the table is empty, load the seed players."""
    _ensure_sqlite_directory(engine)
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    if not seed:
        return

    async with session_factory() as session, session.begin():
        count = (await session.execute(select(func.count(Player.id)))).scalar() or 0
        if count:
            logger.info("Players table already holds %d rows, skipping seed", count)
            return
        session.add_all([Player(**data) for data in SEED_PLAYERS])
    logger.info("Seeded %d players", len(SEED_PLAYERS))
