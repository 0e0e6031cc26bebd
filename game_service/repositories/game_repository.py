"""
Game Repository - Data Access Layer
"""
import logging
from typing import List, Optional

from sqlalchemy import desc
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from game_service.errors import PersistenceError
from game_service.models.game import Game
from game_service.schemas.game import GameCreate, GameUpdate

logger = logging.getLogger(__name__)


class GameRepository:
    """Repository for Game CRUD operations"""

    def __init__(self, db: Session):
        self.db = db

    def get_all(self) -> List[Game]:
        """Get all games, newest first"""
        return self.db.query(Game).order_by(desc(Game.created_at), desc(Game.id)).all()

    def get_by_id(self, game_id: int) -> Optional[Game]:
        """Get game by ID"""
        return self.db.query(Game).filter(Game.id == game_id).first()

    def create(self, game_data: GameCreate) -> Game:
        """Create new game"""
        game = Game(**game_data.model_dump())
        self.db.add(game)
        self._commit("create game")
        self.db.refresh(game)
        return game

    def update(self, game_id: int, game_data: GameUpdate) -> Optional[Game]:
        """Overwrite all fields of an existing game"""
        game = self.get_by_id(game_id)
        if not game:
            return None

        for field, value in game_data.model_dump().items():
            setattr(game, field, value)

        self._commit(f"update game {game_id}")
        self.db.refresh(game)
        return game

    def delete(self, game_id: int) -> bool:
        """Delete game"""
        game = self.get_by_id(game_id)
        if not game:
            return False

        self.db.delete(game)
        self._commit(f"delete game {game_id}")
        return True

    def _commit(self, action: str) -> None:
        try:
            self.db.commit()
        except SQLAlchemyError as e:
            self.db.rollback()
            logger.error("Failed to %s: %s", action, e)
            raise PersistenceError(f"Failed to {action}") from e
