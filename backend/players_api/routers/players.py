import logging
from typing import Annotated

from fastapi import APIRouter, Depends, HTTPException, Path, Response, status

from players_api.dependencies import get_player_service
from players_api.schemas.players import SQL_INTEGER_MAX, PlayerRequest, PlayerSchema
from players_api.services.player_service import PlayerService

router = APIRouter(prefix="/players", tags=["players"])
logger = logging.getLogger(__name__)

PlayerId = Annotated[int, Path(ge=1, le=SQL_INTEGER_MAX)]


@router.get("", response_model=list[PlayerSchema])
async def list_players(service: PlayerService = Depends(get_player_service)):
    return await service.retrieve_all()


@router.get(
    "/squadNumber/{squad_number}",
    response_model=PlayerSchema,
    responses={404: {"description": "No player wears this squad number"}},
)
async def get_player_by_squad_number(
    squad_number: int,
    service: PlayerService = Depends(get_player_service),
):
    player = await service.retrieve_by_squad_number(squad_number)
    if player is None:
        raise HTTPException(status_code=404, detail="Player not found")
    return player


@router.get(
    "/{player_id}",
    response_model=PlayerSchema,
    responses={404: {"description": "Player not found"}},
)
async def get_player(player_id: PlayerId, service: PlayerService = Depends(get_player_service)):
    player = await service.retrieve_by_id(player_id)
    if player is None:
        raise HTTPException(status_code=404, detail="Player not found")
    return player


@router.post(
    "",
    response_model=PlayerSchema,
    status_code=status.HTTP_201_CREATED,
    responses={409: {"description": "Id or squad number already taken"}},
)
async def create_player(
    body: PlayerRequest,
    response: Response,
    service: PlayerService = Depends(get_player_service),
):
    # Not atomic with the insert: a concurrent create can still lose the race
    # and surface as ConstraintViolation (409) from storage.
    if body.id is not None and await service.retrieve_by_id(body.id) is not None:
        raise HTTPException(status_code=409, detail="Player already exists")
    if await service.retrieve_by_squad_number(body.squad_number) is not None:
        raise HTTPException(status_code=409, detail="Squad number already taken")

    player = await service.create(body.to_schema())
    response.headers["Location"] = f"{router.prefix}/{player.id}"
    return player


@router.put(
    "/{player_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    responses={404: {"description": "Player not found"}, 409: {"description": "Squad number already taken"}},
)
async def update_player(
    player_id: PlayerId,
    body: PlayerRequest,
    service: PlayerService = Depends(get_player_service),
):
    if await service.retrieve_by_id(player_id) is None:
        raise HTTPException(status_code=404, detail="Player not found")
    await service.update(body.to_schema(player_id))
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.delete(
    "/{player_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    responses={404: {"description": "Player not found"}},
)
async def delete_player(player_id: PlayerId, service: PlayerService = Depends(get_player_service)):
    if await service.retrieve_by_id(player_id) is None:
        raise HTTPException(status_code=404, detail="Player not found")
    await service.delete(player_id)
    logger.info("Player %d deleted", player_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
