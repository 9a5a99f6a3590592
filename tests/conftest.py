from contextlib import asynccontextmanager
from datetime import date

import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient

from players_api.config import Settings
from players_api.database import build_engine, build_session_factory, init_db
from players_api.main import create_app
from players_api.schemas.players import PlayerSchema
from players_api.services.cache_manager import CacheManager
from players_api.services.player_database import PlayerDatabase
from players_api.services.player_service import PlayerService


class FakeClock:
    def __init__(self, now: float = 1000.0) -> None:
        self.now = now

    def __call__(self) -> float:
        return self.now

    def advance(self, seconds: float) -> None:
        self.now += seconds


@pytest.fixture
def settings(tmp_path) -> Settings:
    return Settings(
        database_url=f"sqlite+aiosqlite:///{tmp_path / 'players.db'}",
        rate_limit_enabled=False,
    )


@pytest_asyncio.fixture
async def session_factory(settings):
    engine = build_engine(settings.database_url)
    factory = build_session_factory(engine)
    await init_db(engine, factory)
    yield factory
    await engine.dispose()


@pytest.fixture
def player_database(session_factory) -> PlayerDatabase:
    return PlayerDatabase(session_factory)


@pytest.fixture
def clock() -> FakeClock:
    return FakeClock()


@pytest.fixture
def cache(clock) -> CacheManager:
    return CacheManager(default_ttl=3600, max_size=100, timer=clock)


@pytest.fixture
def player_service(player_database, cache) -> PlayerService:
    return PlayerService(player_database, cache, ttl=3600)


@asynccontextmanager
async def running_client(settings: Settings):
    app = create_app(settings)
    async with app.router.lifespan_context(app):
        transport = ASGITransport(app=app)
        async with AsyncClient(transport=transport, base_url="http://testserver") as async_client:
            async_client.app = app
            yield async_client


@pytest_asyncio.fixture
async def client(settings):
    async with running_client(settings) as async_client:
        yield async_client


@pytest.fixture
def messi() -> PlayerSchema:
    return PlayerSchema(
        id=10,
        first_name="Lionel",
        middle_name="Andrés",
        last_name="Messi",
        date_of_birth=date(1987, 6, 24),
        squad_number=10,
        position="Right Winger",
        abbr_position="RW",
        team="Inter Miami CF",
        league="Major League Soccer",
        starting11=True,
    )


@pytest.fixture
def new_player() -> PlayerSchema:
    return PlayerSchema(
        id=12,
        first_name="Leandro",
        middle_name="Daniel",
        last_name="Paredes",
        date_of_birth=date(1994, 6, 29),
        squad_number=5,
        position="Defensive Midfield",
        abbr_position="DM",
        team="AS Roma",
        league="Serie A",
        starting11=False,
    )


@pytest.fixture
def make_client():
    return running_client
