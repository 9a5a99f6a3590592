from fastapi import Request

from players_api.services.player_service import PlayerService


def get_player_service(request: Request) -> PlayerService:
    return request.app.state.player_service
