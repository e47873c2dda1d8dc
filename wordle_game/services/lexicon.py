"""
Lexicon Service

Holds the per-difficulty word pools and the validation dictionary.
"""

import json
import logging
from typing import Dict, FrozenSet, Iterable, Optional

from ..config.game_settings import DEFAULT_WORD_POOLS_PATH, VOWELS, WORD_LENGTH
from ..models.errors import ConfigError
from ..models.game import DifficultyLevel

logger = logging.getLogger(__name__)


def _normalize_entries(words: Iterable, source: str) -> FrozenSet[str]:
    """Lowercase and validate a list of words; raises ConfigError on bad entries."""
    if not isinstance(words, (list, tuple, set, frozenset)):
        raise ConfigError(f"{source} must be a list of words, got {type(words).__name__}")
    entries = set()
    for index, word in enumerate(words):
        if not isinstance(word, str):
            raise ConfigError(f"Entry {index} in {source} is not a string: {word!r}")
        normalized = word.strip().lower()
        if len(normalized) != WORD_LENGTH:
            raise ConfigError(f"Word '{word}' in {source} is not {WORD_LENGTH} characters long")
        if not (normalized.isascii() and normalized.isalpha()):
            raise ConfigError(f"Word '{word}' in {source} contains non-alphabetic characters")
        entries.add(normalized)
    return frozenset(entries)


class Lexicon:
    """
    Word pools per difficulty level plus the dictionary of valid guesses.

    The dictionary is the union of every pool and the extra valid guesses,
    so any target drawn from a pool is always a valid guess.
    """

    def __init__(self, pools: Dict, extra_valid: Iterable[str] = ()):
        self._pools: Dict[DifficultyLevel, FrozenSet[str]] = {}
        for name, words in pools.items():
            level = DifficultyLevel.parse(name)
            entries = _normalize_entries(words, f"pool '{level.value}'")
            if not entries:
                raise ConfigError(f"Word pool '{level.value}' cannot be empty")
            self._pools[level] = entries

        missing = [level.value for level in DifficultyLevel if level not in self._pools]
        if missing:
            raise ConfigError(f"Missing word pools for levels: {missing}")

        self._extra_valid = _normalize_entries(extra_valid, 'extra_valid')
        self._dictionary: FrozenSet[str] = frozenset().union(
            self._extra_valid, *self._pools.values()
        )

    @classmethod
    def from_json(cls, path: str) -> "Lexicon":
        """
        Load pools from a JSON file shaped like the bundled word_pools.json.

        Raises:
            ConfigError: If the file is missing, malformed or holds invalid words
        """
        try:
            with open(path, 'r', encoding='utf-8') as f:
                data = json.load(f)
        except FileNotFoundError:
            raise ConfigError(f"Word pool file not found: {path}")
        except json.JSONDecodeError as e:
            raise ConfigError(f"Invalid JSON in {path}: {e}")

        if not isinstance(data, dict) or not isinstance(data.get('pools'), dict):
            raise ConfigError(f"{path} must contain a 'pools' object")

        lexicon = cls(data['pools'], data.get('extra_valid', []))
        logger.debug("Loaded lexicon from %s (%d dictionary words)", path, len(lexicon.dictionary))
        return lexicon

    @property
    def dictionary(self) -> FrozenSet[str]:
        return self._dictionary

    @property
    def levels(self):
        return [level for level in DifficultyLevel if level in self._pools]

    def pool_for(self, level) -> FrozenSet[str]:
        """
        Returns the non-empty word pool for a level.

        Raises:
            ConfigError: If the level is unknown
        """
        return self._pools[DifficultyLevel.parse(level)]

    def is_valid_guess(self, word: str) -> bool:
        """Case-insensitive dictionary membership."""
        if not isinstance(word, str):
            return False
        return word.strip().lower() in self._dictionary

    def word_statistics(self) -> Dict:
        """
        Analyzes the dictionary and returns statistical information for game balancing.

        Returns:
            dict: total_words, pool_sizes, avg_vowel_count and most_common_letters
        """
        letter_frequency: Dict[str, int] = {}
        for word in self._dictionary:
            for char in word:
                letter_frequency[char] = letter_frequency.get(char, 0) + 1

        total_vowels = sum(len([char for char in word if char in VOWELS]) for word in self._dictionary)

        return {
            "total_words": len(self._dictionary),
            "pool_sizes": {level.value: len(pool) for level, pool in self._pools.items()},
            "avg_vowel_count": round(total_vowels / len(self._dictionary), 2),
            "most_common_letters": sorted(letter_frequency.items(), key=lambda x: (-x[1], x[0]))[:5]
        }


def load_lexicon(path: Optional[str] = None) -> Lexicon:
    """Load the lexicon from `path`, or from the bundled word pools."""
    return Lexicon.from_json(path or DEFAULT_WORD_POOLS_PATH)
