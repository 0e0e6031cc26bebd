"""
Schemas package
"""
from game_service.schemas.game import (
    GameBase,
    GameCreate,
    GameUpdate,
    GameResponse
)

__all__ = [
    "GameBase",
    "GameCreate",
    "GameUpdate",
    "GameResponse"
]
