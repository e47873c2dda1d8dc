"""
Services Package

Contains the game logic: lexicon, difficulty profiles, scoring, keyboard
hints and the game state machine.
"""

from .difficulty import apply_level, available_profiles
from .game_service import GameEngine, GameService
from .hints import KeyboardHints
from .lexicon import Lexicon, load_lexicon
from .scoring import is_winning_result, score_guess

__all__ = [
    'apply_level', 'available_profiles', 'GameEngine', 'GameService', 'KeyboardHints',
    'Lexicon', 'load_lexicon', 'is_winning_result', 'score_guess'
]
