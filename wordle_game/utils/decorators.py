"""
Game Lookup Decorators

Contains decorators resolving a game id to its engine for HTTP and WebSocket
handlers.
"""

from functools import wraps
from flask import current_app, jsonify
from flask_socketio import emit

from ..models.errors import GameNotFound


def get_game_service():
    """The GameService owned by the current app."""
    return current_app.extensions['wordle_game']


def require_game(f):
    """
    Decorator resolving the `game_id` URL argument into a `game` keyword
    argument, answering 404 when the session does not exist.
    """
    @wraps(f)
    def decorated_function(game_id, *args, **kwargs):
        try:
            game = get_game_service().get_game(game_id)
        except GameNotFound as e:
            return jsonify({'success': False, **e.to_dict()}), 404

        kwargs['game'] = game
        return f(game_id, *args, **kwargs)

    return decorated_function


def websocket_game_required(f):
    """Decorator for WebSocket events carrying a `game_id` in their payload."""
    @wraps(f)
    def decorated_function(*args, **kwargs):
        data = args[0] if args and isinstance(args[0], dict) else {}
        game_id = data.get('game_id')
        if not game_id:
            emit('error', {'error': 'game_id required'})
            return

        try:
            game = get_game_service().get_game(game_id)
        except GameNotFound as e:
            emit('error', e.to_dict())
            return

        kwargs['game'] = game
        return f(*args, **kwargs)

    return decorated_function
