"""
Data Models Package

Contains all data models and error types used throughout the application.
"""

from .errors import (
    ConfigError, GameError, GameNotFound, IncompleteGuess, InvalidInput, UnknownWord
)
from .game import (
    DifficultyLevel, DifficultyProfile, GameSnapshot, GameState, GuessResult, LetterVerdict
)

__all__ = [
    'DifficultyLevel', 'DifficultyProfile', 'GameSnapshot', 'GameState', 'GuessResult',
    'LetterVerdict',
    'ConfigError', 'GameError', 'GameNotFound', 'IncompleteGuess', 'InvalidInput', 'UnknownWord'
]
