"""
Models package
"""
from game_service.models.game import Game

__all__ = ["Game"]
