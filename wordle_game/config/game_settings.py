"""
Game Configuration Constants Module

This module defines the game rules that do not change at runtime: word
length, guess budget per difficulty level and the location of the bundled
word pools.
"""

import os
from typing import Dict, Final

WORD_LENGTH: Final[int] = 5
"""
Number of letters in every target and every guess.
Type: Final[int] - Immutable to prevent accidental modification
"""

MAX_GUESSES_BY_LEVEL: Final[Dict[str, int]] = {
    'easy': 6,
    'medium': 5,
    'hard': 4,
}
"""
Maximum number of guess attempts allowed per game, keyed by difficulty level.
"""

DEFAULT_WORD_POOLS_PATH: Final[str] = os.path.join(
    os.path.dirname(os.path.abspath(__file__)), 'word_pools.json'
)

VOWELS: Final[frozenset] = frozenset('aeiou')
