import logging

from sqlalchemy import delete, select, update
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from players_api.errors import ConstraintViolation, StorageFailure
from players_api.interfaces import PlayerStorage
from players_api.models import Player
from players_api.schemas.players import SQL_INTEGER_MAX, SQL_INTEGER_MIN, PlayerSchema

logger = logging.getLogger(__name__)


def _fits_integer_column(value: int) -> bool:
    return SQL_INTEGER_MIN <= value <= SQL_INTEGER_MAX


class PlayerDatabase(PlayerStorage):
    """SQLAlchemy adapter between ``PlayerSchema`` records and ``players`` rows.

    Each call runs in its own session and transaction. Integrity errors become
    ``ConstraintViolation``; every other SQLAlchemy error becomes
    ``StorageFailure``, as does a value too large for an INTEGER column.
    Lookups, updates and deletes keyed by an out-of-range value match no row.
    """

    def __init__(self, session_factory: async_sessionmaker[AsyncSession]) -> None:
        self._session_factory = session_factory

    async def select_all(self) -> list[PlayerSchema]:
        try:
            async with self._session_factory() as session:
                result = await session.execute(select(Player).order_by(Player.id))
                rows = result.scalars().all()
        except SQLAlchemyError as exc:
            raise StorageFailure(f"Failed to select players: {exc}") from exc
        return [PlayerSchema.model_validate(row) for row in rows]

    async def select_by_id(self, player_id: int) -> PlayerSchema | None:
        if not _fits_integer_column(player_id):
            return None
        return await self._select_one(Player.id == player_id)

    async def select_by_squad_number(self, squad_number: int) -> PlayerSchema | None:
        if not _fits_integer_column(squad_number):
            return None
        return await self._select_one(Player.squad_number == squad_number)

    async def insert(self, player: PlayerSchema) -> PlayerSchema:
        values = player.model_dump()
        if values["id"] is None:
            del values["id"]
        row = Player(**values)
        try:
            async with self._session_factory() as session, session.begin():
                session.add(row)
                await session.flush()
                stored = PlayerSchema.model_validate(row)
        except IntegrityError as exc:
            logger.info(
                "Rejected player id=%s squad_number=%d: %s",
                player.id,
                player.squad_number,
                exc.orig,
            )
            raise ConstraintViolation(
                f"Player with id {player.id} or squad number {player.squad_number} already exists"
            ) from exc
        except (SQLAlchemyError, OverflowError) as exc:
            raise StorageFailure(f"Failed to insert player: {exc}") from exc
        logger.info("Inserted player id=%d squad_number=%d", stored.id, stored.squad_number)
        return stored

    async def update(self, player: PlayerSchema) -> None:
        if player.id is None or not _fits_integer_column(player.id):
            logger.info("Skipped update of player id=%s: no such row", player.id)
            return
        values = player.model_dump(exclude={"id"})
        try:
            async with self._session_factory() as session, session.begin():
                result = await session.execute(
                    update(Player).where(Player.id == player.id).values(**values)
                )
        except IntegrityError as exc:
            raise ConstraintViolation(
                f"Squad number {player.squad_number} is already taken"
            ) from exc
        except (SQLAlchemyError, OverflowError) as exc:
            raise StorageFailure(f"Failed to update player {player.id}: {exc}") from exc
        logger.info("Updated player id=%s (rows=%d)", player.id, result.rowcount)

    async def delete(self, player_id: int) -> None:
        if not _fits_integer_column(player_id):
            logger.info("Skipped delete of player id=%s: no such row", player_id)
            return
        try:
            async with self._session_factory() as session, session.begin():
                result = await session.execute(delete(Player).where(Player.id == player_id))
        except SQLAlchemyError as exc:
            raise StorageFailure(f"Failed to delete player {player_id}: {exc}") from exc
        logger.info("Deleted player id=%d (rows=%d)", player_id, result.rowcount)

    async def _select_one(self, criterion) -> PlayerSchema | None:
        try:
            async with self._session_factory() as session:
                result = await session.execute(select(Player).where(criterion))
                row = result.scalar_one_or_none()
        except SQLAlchemyError as exc:
            raise StorageFailure(f"Failed to select player: {exc}") from exc
        if row is None:
            return None
        return PlayerSchema.model_validate(row)
