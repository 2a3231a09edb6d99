"""
Neon Boost: a one-button arcade game.
Headless simulation in game_engine, pygame front end in client.
"""

from .data_models import GameSession, GameStatus
from .game_engine import GameEngine

__all__ = ["GameEngine", "GameSession", "GameStatus"]
