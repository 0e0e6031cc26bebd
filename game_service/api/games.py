"""
Game API endpoints
"""
from fastapi import APIRouter, Depends, HTTPException, Path, status
from sqlalchemy.orm import Session
from typing import List

from game_service.database import get_db
from game_service.services.game_service import GameService
from game_service.schemas.game import GameCreate, GameUpdate, GameResponse

router = APIRouter(prefix="/games", tags=["games"])

# Largest value an INTEGER primary key holds
MAX_ID = 2147483647


def get_game_service(db: Session = Depends(get_db)) -> GameService:
    """Dependency to get GameService instance"""
    return GameService(db)


def _not_found() -> HTTPException:
    return HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Game not found")


@router.get("", response_model=List[GameResponse], summary="Get all games")
def get_games(service: GameService = Depends(get_game_service)):
    """
    Retrieve all games, newest first
    """
    return service.get_all_games()


@router.get("/{game_id}", response_model=GameResponse, summary="Get game by ID")
def get_game(
    game_id: int = Path(..., ge=1, le=MAX_ID, description="Game ID"),
    service: GameService = Depends(get_game_service)
):
    """
    Retrieve a specific game by ID

    - **game_id**: Game ID
    """
    game = service.get_game_by_id(game_id)
    if not game:
        raise _not_found()
    return game


@router.post("", response_model=GameResponse, status_code=status.HTTP_201_CREATED, summary="Create game")
def create_game(
    game_data: GameCreate,
    service: GameService = Depends(get_game_service)
):
    """
    Create a new game

    - **name**: Game name (required)
    - **category**: Game category (required)
    - **release_date**: Release date, YYYY-MM-DD (required)
    - **price**: Game price (required, non-negative)
    """
    return service.create_game(game_data)


@router.put("/{game_id}", response_model=GameResponse, summary="Update game")
def update_game(
    game_data: GameUpdate,
    game_id: int = Path(..., ge=1, le=MAX_ID, description="Game ID"),
    service: GameService = Depends(get_game_service)
):
    """
    Replace all fields of an existing game

    - **game_id**: Game ID
    """
    game = service.update_game(game_id, game_data)
    if not game:
        raise _not_found()
    return game


@router.delete("/{game_id}", summary="Delete game")
def delete_game(
    game_id: int = Path(..., ge=1, le=MAX_ID, description="Game ID"),
    service: GameService = Depends(get_game_service)
):
    """
    Delete a game

    - **game_id**: Game ID
    """
    if not service.delete_game(game_id):
        raise _not_found()
    return {"message": "Game deleted successfully"}
