"""
Wordle Game Server Application Package

This package contains the Wordle game engine (lexicon, difficulty profiles,
scoring, keyboard hints, game state machine) and the Flask / Socket.IO
layer exposing it.
"""

from flask import Flask
from flask_cors import CORS
from flask_socketio import SocketIO
from .config import Config


def create_app(config_class=Config, game_service=None):
    """
    Application factory pattern for creating Flask app instances.

    Args:
        config_class: Configuration class to use
        game_service: Prebuilt GameService (tests inject one with a fixed target)

    Returns:
        Flask application instance with all extensions initialized
    """
    app = Flask(__name__)
    app.config.from_object(config_class)

    from .utils.game_logger import game_logger
    game_logger.configure(app.config.get('LOG_DIR'), app.config.get('LOG_LEVEL', 'INFO'))

    if game_service is None:
        from .services.game_service import GameService
        from .services.lexicon import load_lexicon
        game_service = GameService(
            load_lexicon(app.config.get('WORD_POOLS_PATH')),
            default_level=app.config.get('DEFAULT_LEVEL', 'easy')
        )
    app.extensions['wordle_game'] = game_service

    # Initialize extensions
    CORS(app)
    socketio = SocketIO(app, cors_allowed_origins="*", logger=False, engineio_logger=False)

    # Register blueprints
    from .controllers.game_controller import game_bp
    app.register_blueprint(game_bp, url_prefix='/api')

    # Register WebSocket handlers
    from .websocket.handlers import register_websocket_handlers
    register_websocket_handlers(socketio)

    # Store socketio instance for use in other modules
    app.socketio = socketio

    return app, socketio
