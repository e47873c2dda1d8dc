"""
Difficulty Profiles

Maps a difficulty level to its word pool, guess budget and word length.
"""

from typing import List

from ..config.game_settings import MAX_GUESSES_BY_LEVEL, WORD_LENGTH
from ..models.game import DifficultyLevel, DifficultyProfile
from .lexicon import Lexicon


def apply_level(level, lexicon: Lexicon) -> DifficultyProfile:
    """
    Builds the profile for a level.

    Args:
        level: DifficultyLevel or its name
        lexicon: Source of the level's word pool

    Returns:
        DifficultyProfile with word_length, max_guesses and pool

    Raises:
        ConfigError: If the level is unknown
    """
    level = DifficultyLevel.parse(level)
    return DifficultyProfile(
        level=level,
        word_length=WORD_LENGTH,
        max_guesses=MAX_GUESSES_BY_LEVEL[level.value],
        pool=lexicon.pool_for(level),
    )


def available_profiles(lexicon: Lexicon) -> List[DifficultyProfile]:
    return [apply_level(level, lexicon) for level in lexicon.levels]
