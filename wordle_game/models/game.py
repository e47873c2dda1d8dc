"""
Game Data Models

Contains all game-related data structures and enums.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Dict, FrozenSet, List, Optional, Tuple

from .errors import ConfigError


class LetterVerdict(Enum):
    """Per-position scoring result."""
    CORRECT = "correct"
    PRESENT = "present"
    ABSENT = "absent"

    @property
    def rank(self) -> int:
        """Precedence used for keyboard hints: CORRECT > PRESENT > ABSENT."""
        return _VERDICT_RANK[self]


_VERDICT_RANK = {
    LetterVerdict.ABSENT: 1,
    LetterVerdict.PRESENT: 2,
    LetterVerdict.CORRECT: 3,
}


GuessResult = Tuple[LetterVerdict, ...]


class DifficultyLevel(Enum):
    """Closed set of difficulty levels."""
    EASY = "easy"
    MEDIUM = "medium"
    HARD = "hard"

    @classmethod
    def parse(cls, value) -> "DifficultyLevel":
        """
        Accepts a DifficultyLevel or its (case-insensitive) name.

        Raises:
            ConfigError: If the value names no known level
        """
        if isinstance(value, cls):
            return value
        if isinstance(value, str):
            try:
                return cls(value.strip().lower())
            except ValueError:
                pass
        raise ConfigError(f"Unknown difficulty level: {value!r}")


@dataclass(frozen=True)
class DifficultyProfile:
    """Configuration bundle selecting word pool and guess budget."""
    level: DifficultyLevel
    word_length: int
    max_guesses: int
    pool: FrozenSet[str]

    def to_dict(self) -> Dict:
        return {
            'level': self.level.value,
            'word_length': self.word_length,
            'max_guesses': self.max_guesses,
            'pool_size': len(self.pool),
        }


@dataclass
class GameState:
    """Mutable engine-side state; owned by a single GameEngine."""
    target: str
    row: int = 0
    col: int = 0
    letters: List[str] = field(default_factory=list)
    guesses: List[Tuple[str, GuessResult]] = field(default_factory=list)
    over: bool = False
    won: bool = False


@dataclass(frozen=True)
class GameSnapshot:
    """Read-only view of a game published after every mutating operation."""
    game_id: Optional[str]
    level: str
    word_length: int
    max_guesses: int
    row: int
    col: int
    current_letters: Tuple[str, ...]
    over: bool
    won: bool
    guesses: Tuple[Tuple[str, GuessResult], ...]
    last_guess_result: Optional[GuessResult]
    keyboard_hints: Dict[str, LetterVerdict]
    target: Optional[str] = None  # Only included when game is over

    @property
    def status(self) -> str:
        if not self.over:
            return 'playing'
        return 'won' if self.won else 'lost'

    def to_dict(self) -> Dict:
        """JSON-ready representation for the HTTP and WebSocket layers."""
        return {
            'game_id': self.game_id,
            'level': self.level,
            'word_length': self.word_length,
            'max_guesses': self.max_guesses,
            'row': self.row,
            'col': self.col,
            'current_letters': list(self.current_letters),
            'over': self.over,
            'won': self.won,
            'status': self.status,
            'target': self.target,
            'guesses': [
                {'guess': guess, 'result': [verdict.value for verdict in result]}
                for guess, result in self.guesses
            ],
            'last_guess_result': (
                [verdict.value for verdict in self.last_guess_result]
                if self.last_guess_result is not None else None
            ),
            'keyboard_hints': {
                letter: verdict.value for letter, verdict in sorted(self.keyboard_hints.items())
            },
        }
