from players_api.models.base import Base
from players_api.models.player import Player

__all__ = [
    "Base",
    "Player",
]
