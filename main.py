"""
Wordle Game Server - Main Entry Point

This is the main entry point for the Wordle game server.
It builds the application and starts the Flask-SocketIO server.
"""

from wordle_game import create_app
from wordle_game.config import get_config
from wordle_game.utils.game_logger import game_logger


def main():
    """Main function to create the app and start the server."""
    try:
        app_config = get_config()
        print(f"Creating Flask application ({app_config.__name__})...")
        app, socketio = create_app(app_config)
        print("✓ Flask application created successfully")

        stats = app.extensions['wordle_game'].lexicon.word_statistics()
        print(f"✓ Word pools loaded: {stats['pool_sizes']} ({stats['total_words']} valid guesses)")

        game_logger.logger.info("Wordle Server Starting")

        print(f"\nStarting Wordle Game Server on {app_config.HOST}:{app_config.PORT}")
        print(f"Debug mode: {app_config.DEBUG}")
        print(f"Default level: {app_config.DEFAULT_LEVEL}")
        print("=" * 50)

        socketio.run(app, host=app_config.HOST, port=app_config.PORT, debug=app_config.DEBUG)

    except KeyboardInterrupt:
        print("\nServer shutting down...")
        game_logger.logger.info("Wordle Server shutting down (KeyboardInterrupt)")
    except Exception as e:
        print(f"Error starting server: {e}")
        game_logger.logger.error(f"Error starting server: {e}")
        raise


if __name__ == '__main__':
    main()
