"""
Game Service - Business Logic Layer
"""
import logging
from typing import List, Optional

from sqlalchemy.orm import Session

from game_service.repositories.game_repository import GameRepository
from game_service.schemas.game import GameCreate, GameUpdate, GameResponse

logger = logging.getLogger(__name__)


class GameService:
    """Service layer for game catalog logic"""

    def __init__(self, db: Session):
        self.repository = GameRepository(db)

    def get_all_games(self) -> List[GameResponse]:
        """Get all games, newest first"""
        return [GameResponse.model_validate(g) for g in self.repository.get_all()]

    def get_game_by_id(self, game_id: int) -> Optional[GameResponse]:
        """Get game by ID"""
        game = self.repository.get_by_id(game_id)
        if not game:
            return None
        return GameResponse.model_validate(game)

    def create_game(self, game_data: GameCreate) -> GameResponse:
        """Create new game"""
        game = self.repository.create(game_data)
        logger.info("Game %s created: %s", game.id, game.name)
        return GameResponse.model_validate(game)

    def update_game(self, game_id: int, game_data: GameUpdate) -> Optional[GameResponse]:
        """Update existing game"""
        game = self.repository.update(game_id, game_data)
        if not game:
            return None
        return GameResponse.model_validate(game)

    def delete_game(self, game_id: int) -> bool:
        """Delete game"""
        deleted = self.repository.delete(game_id)
        if deleted:
            logger.info("Game %s deleted", game_id)
        return deleted
