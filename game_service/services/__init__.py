"""
Services package
"""
from game_service.services.game_service import GameService

__all__ = ["GameService"]
