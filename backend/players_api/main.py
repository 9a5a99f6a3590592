import logging
import time
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.encoders import jsonable_encoder
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from players_api.config import Settings, settings as default_settings
from players_api.database import build_engine, build_session_factory, init_db
from players_api.errors import ConstraintViolation, StorageFailure
from players_api.middleware.rate_limiter import RateLimitMiddleware
from players_api.routers import health, players
from players_api.services.cache_manager import CacheManager
from players_api.services.player_database import PlayerDatabase
from players_api.services.player_service import PlayerService

logging.basicConfig(
    level=default_settings.log_level.upper(),
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
)

logger = logging.getLogger(__name__)


async def validation_error_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    return JSONResponse(status_code=400, content={"errors": jsonable_encoder(exc.errors())})


async def constraint_violation_handler(request: Request, exc: ConstraintViolation) -> JSONResponse:
    return JSONResponse(status_code=409, content={"detail": exc.message})


async def storage_failure_handler(request: Request, exc: StorageFailure) -> JSONResponse:
    logger.error(
        "Storage failure on %s %s: %s",
        request.method,
        request.url.path,
        exc.message,
        exc_info=exc,
    )
    return JSONResponse(status_code=500, content={"detail": "Internal server error"})


def create_app(settings: Settings | None = None) -> FastAPI:
    settings = settings or default_settings

    engine = build_engine(settings.database_url)
    session_factory = build_session_factory(engine)
    cache = CacheManager(default_ttl=settings.cache_ttl_seconds, max_size=settings.cache_max_size)
    service = PlayerService(PlayerDatabase(session_factory), cache, ttl=settings.cache_ttl_seconds)

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        await init_db(engine, session_factory, seed=settings.seed_on_startup)
        logger.info("Database ready at %s", engine.url.render_as_string(hide_password=True))
        yield
        await engine.dispose()
        logger.info("Database connections closed")

    app = FastAPI(
        title="Players API",
        version="1.0.0",
        description="CRUD over football players with a read-through cache",
        docs_url="/swagger",
        lifespan=lifespan,
    )
    app.state.settings = settings
    app.state.engine = engine
    app.state.player_service = service
    app.state.started_at = time.monotonic()

    app.add_middleware(
        RateLimitMiddleware,
        window_seconds=settings.rate_limit_window_seconds,
        max_general=settings.rate_limit_max_general,
        max_strict=settings.rate_limit_max_strict,
        enabled=settings.rate_limit_enabled,
    )
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origin_list,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.add_exception_handler(RequestValidationError, validation_error_handler)
    app.add_exception_handler(ConstraintViolation, constraint_violation_handler)
    app.add_exception_handler(StorageFailure, storage_failure_handler)

    app.include_router(players.router)
    app.include_router(health.router)
    return app


app = create_app()
