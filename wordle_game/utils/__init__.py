"""
Utilities Package

Contains utility functions, decorators, and helper modules.
"""

from .decorators import get_game_service, require_game, websocket_game_required
from .game_logger import game_logger

__all__ = ['get_game_service', 'require_game', 'websocket_game_required', 'game_logger']
