import pytest

from wordle_game import create_app
from wordle_game.config import TestingConfig
from wordle_game.models import LetterVerdict
from wordle_game.services import GameEngine, GameService, load_lexicon

C = LetterVerdict.CORRECT
P = LetterVerdict.PRESENT
A = LetterVerdict.ABSENT


def pattern(text):
    """'GY-' shorthand -> verdict tuple (G=correct, Y=present, -=absent)."""
    return tuple({'G': C, 'Y': P, '-': A}[ch] for ch in text)


def fixed_target(word):
    """Target chooser returning `word` when the pool has it, else the first pool entry."""
    def choose(pool):
        return word if word in pool else pool[0]
    return choose


@pytest.fixture(scope='session')
def lexicon():
    return load_lexicon()


@pytest.fixture
def make_engine(lexicon):
    def factory(level='easy', target=None, **kwargs):
        if target is not None:
            kwargs['choose_target'] = fixed_target(target)
        return GameEngine(lexicon, level=level, game_id='test-game', **kwargs)
    return factory


def type_word(engine, word):
    for ch in word:
        engine.add_letter(ch)


def play(engine, word):
    type_word(engine, word)
    return engine.submit_guess()


@pytest.fixture
def app_and_socketio(lexicon):
    service = GameService(lexicon, default_level='easy', choose_target=fixed_target('ivory'))
    return create_app(TestingConfig, game_service=service)


@pytest.fixture
def client(app_and_socketio):
    app, _ = app_and_socketio
    return app.test_client()


@pytest.fixture
def socket_client(app_and_socketio):
    app, socketio = app_and_socketio
    return socketio.test_client(app)
