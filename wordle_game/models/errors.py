"""
Game Errors

Recoverable error kinds raised by the engine and reported back to the
player as transient feedback. Every one of them is raised before any state
is touched.
"""


class GameError(Exception):
    """Base class for all game errors."""

    kind = 'game_error'
    default_message = 'game error'

    def __init__(self, message: str = None):
        super().__init__(message or self.default_message)
        self.message = message or self.default_message

    def to_dict(self) -> dict:
        return {'error': self.message, 'error_kind': self.kind}


class IncompleteGuess(GameError):
    """Submit attempted before the row is full."""
    kind = 'incomplete_guess'
    default_message = 'word too short'


class UnknownWord(GameError):
    """Submitted word is not in the dictionary."""
    kind = 'unknown_word'
    default_message = 'not in word list'


class InvalidInput(GameError):
    """Input that is not a single letter a-z."""
    kind = 'invalid_input'
    default_message = 'input must be a single letter a-z'


class ConfigError(GameError):
    """Unknown difficulty level or malformed word pools."""
    kind = 'config_error'
    default_message = 'invalid game configuration'


class GameNotFound(GameError):
    kind = 'game_not_found'
    default_message = 'Game not found'
