"""
Game Service

Contains the game state machine and the registry of live game sessions.
"""

import logging
import random
import uuid
from typing import Callable, Dict, List, Optional, Sequence

from ..models.errors import ConfigError, GameNotFound, IncompleteGuess, InvalidInput, UnknownWord
from ..models.game import DifficultyProfile, GameSnapshot, GameState, GuessResult
from .difficulty import apply_level
from .hints import KeyboardHints
from .lexicon import Lexicon
from .scoring import score_guess

logger = logging.getLogger(__name__)

Observer = Callable[[GameSnapshot], None]
TargetChooser = Callable[[Sequence[str]], str]

LETTERS = frozenset('abcdefghijklmnopqrstuvwxyz')


class GameEngine:
    """
    Single-game state machine.

    This class handles:
    - Target selection from the active difficulty profile
    - Letter entry and deletion on the current row
    - Guess validation, scoring and keyboard hint tracking
    - Win/loss determination and snapshot publication to observers

    Operations either complete or raise before touching any state.
    """

    def __init__(self,
                 lexicon: Lexicon,
                 level='easy',
                 game_id: Optional[str] = None,
                 rng: Optional[random.Random] = None,
                 choose_target: Optional[TargetChooser] = None):
        """
        Args:
            lexicon: Word pools and dictionary
            level: Initial difficulty level
            game_id: Identifier reported in snapshots
            rng: Random source for target selection
            choose_target: Overrides target selection; receives the sorted pool
        """
        self.lexicon = lexicon
        self.game_id = game_id
        self._rng = rng or random.Random()
        self._choose_target = choose_target or self._rng.choice
        self._observers: List[Observer] = []
        self.hints = KeyboardHints()
        self.profile: DifficultyProfile = apply_level(level, lexicon)
        self._state = self._fresh_state(self.profile)

    # Lifecycle

    def new_game(self, profile: Optional[DifficultyProfile] = None) -> GameSnapshot:
        """
        Replaces the game state with a fresh one under `profile`
        (or the current profile).
        """
        profile = profile or self.profile
        state = self._fresh_state(profile)
        self.profile = profile
        self._state = state
        self.hints.clear()
        logger.debug("Game %s started at level %s", self.game_id, profile.level.value)
        return self._publish()

    def reset(self, profile: Optional[DifficultyProfile] = None) -> GameSnapshot:
        return self.new_game(profile)

    def change_level(self, level) -> GameSnapshot:
        """Discards the current game and starts a new one under `level`."""
        return self.new_game(apply_level(level, self.lexicon))

    def _fresh_state(self, profile: DifficultyProfile) -> GameState:
        target = self._choose_target(sorted(profile.pool))
        if target not in profile.pool:
            raise ConfigError(f"Chosen target '{target}' is not in the {profile.level.value} pool")
        return GameState(target=target)

    # Input operations

    def add_letter(self, ch: str) -> bool:
        """
        Places a letter at the cursor.

        Returns:
            bool: True if the state changed

        Raises:
            InvalidInput: If ch is not a single letter a-z
        """
        letter = self._normalize_letter(ch)
        state = self._state
        if state.over or state.col >= self.profile.word_length:
            return False
        state.letters.append(letter)
        state.col += 1
        self._publish()
        return True

    def delete_letter(self) -> bool:
        state = self._state
        if state.over or state.col == 0:
            return False
        state.letters.pop()
        state.col -= 1
        self._publish()
        return True

    def submit_guess(self) -> Optional[GuessResult]:
        """
        Scores the current row.

        Returns:
            GuessResult, or None if the game is already over

        Raises:
            IncompleteGuess: If the row is not full
            UnknownWord: If the word is not in the dictionary
        """
        state = self._state
        if state.over:
            return None
        if state.col != self.profile.word_length:
            raise IncompleteGuess()

        guess = ''.join(state.letters)
        if not self.lexicon.is_valid_guess(guess):
            raise UnknownWord(f"not in word list: {guess}")

        result = score_guess(guess, state.target)
        state.guesses.append((guess, result))
        self.hints.fold(guess, result)

        # Win check comes before row advancement, including on the last row
        if guess == state.target:
            state.over = True
            state.won = True
            logger.debug("Game %s won on row %d", self.game_id, state.row)
        else:
            state.row += 1
            state.col = 0
            state.letters = []
            if state.row == self.profile.max_guesses:
                state.over = True
                state.won = False
                logger.debug("Game %s lost", self.game_id)

        self._publish()
        return result

    def enter_word(self, word: str) -> Optional[GuessResult]:
        """
        Types a whole word and submits it.

        The current row is only replaced when the word is well-formed; an
        IncompleteGuess or UnknownWord still leaves the previous row intact.
        """
        if self._state.over:
            return None
        if not isinstance(word, str):
            raise InvalidInput()
        letters = [self._normalize_letter(ch) for ch in word.strip()]
        if len(letters) < self.profile.word_length:
            raise IncompleteGuess()
        if len(letters) > self.profile.word_length:
            raise IncompleteGuess(f"word must be {self.profile.word_length} letters")
        if not self.lexicon.is_valid_guess(''.join(letters)):
            raise UnknownWord(f"not in word list: {''.join(letters)}")
        self._state.letters = letters
        self._state.col = len(letters)
        return self.submit_guess()

    @staticmethod
    def _normalize_letter(ch) -> str:
        if not isinstance(ch, str) or len(ch) != 1 or ch.lower() not in LETTERS:
            raise InvalidInput(f"Invalid letter: {ch!r}")
        return ch.lower()

    # Observation

    @property
    def over(self) -> bool:
        return self._state.over

    @property
    def won(self) -> bool:
        return self._state.won

    @property
    def status(self) -> str:
        if not self._state.over:
            return 'playing'
        return 'won' if self._state.won else 'lost'

    def subscribe(self, observer: Observer) -> None:
        if observer not in self._observers:
            self._observers.append(observer)

    def unsubscribe(self, observer: Observer) -> None:
        if observer in self._observers:
            self._observers.remove(observer)

    def snapshot(self) -> GameSnapshot:
        """Returns the current state (without revealing the target unless over)."""
        state = self._state
        return GameSnapshot(
            game_id=self.game_id,
            level=self.profile.level.value,
            word_length=self.profile.word_length,
            max_guesses=self.profile.max_guesses,
            row=state.row,
            col=state.col,
            current_letters=tuple(state.letters),
            over=state.over,
            won=state.won,
            guesses=tuple(state.guesses),
            last_guess_result=state.guesses[-1][1] if state.guesses else None,
            keyboard_hints=self.hints.as_dict(),
            target=state.target if state.over else None,
        )

    def _publish(self) -> GameSnapshot:
        snapshot = self.snapshot()
        for observer in list(self._observers):
            # State is already committed here; observer failures are logged, not raised
            try:
                observer(snapshot)
            except Exception:
                logger.exception("Observer %r failed for game %s", observer, self.game_id)
        return snapshot


class GameService:
    """
    Registry of live game sessions keyed by game id.

    One instance is created per application and stored on the Flask app.
    """

    def __init__(self,
                 lexicon: Lexicon,
                 default_level='easy',
                 rng: Optional[random.Random] = None,
                 choose_target: Optional[TargetChooser] = None):
        self.lexicon = lexicon
        self.default_level = apply_level(default_level, lexicon).level
        self._rng = rng
        self._choose_target = choose_target
        self.games: Dict[str, GameEngine] = {}

    def create_game(self, level=None) -> GameEngine:
        """
        Creates a new game session.

        Args:
            level: Difficulty level; defaults to the configured level

        Returns:
            GameEngine registered under a fresh game id

        Raises:
            ConfigError: If the level is unknown
        """
        game_id = str(uuid.uuid4())
        engine = GameEngine(
            self.lexicon,
            level=level or self.default_level,
            game_id=game_id,
            rng=self._rng,
            choose_target=self._choose_target,
        )
        self.games[game_id] = engine
        return engine

    def get_game(self, game_id: str) -> GameEngine:
        """
        Raises:
            GameNotFound: If no session has this id
        """
        engine = self.games.get(game_id)
        if engine is None:
            raise GameNotFound()
        return engine

    def delete_game(self, game_id: str) -> bool:
        """
        Removes a game session from memory.

        Returns:
            bool: True if game was deleted, False if not found
        """
        if game_id in self.games:
            del self.games[game_id]
            return True
        return False
