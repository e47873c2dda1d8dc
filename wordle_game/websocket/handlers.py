"""
WebSocket Event Handlers

Maps client input events onto engine operations and pushes a `state` event
to the game's room after every change.
"""

from flask import request
from flask_socketio import emit, join_room, leave_room
from ..models.errors import GameError
from ..utils.decorators import get_game_service, websocket_game_required
from ..utils.game_logger import game_logger


def register_websocket_handlers(socketio):
    """Register all WebSocket event handlers."""

    # Games each connected session created or watches: sid -> {'created': set, 'joined': set}
    sessions = {}

    def track(game_id, created=False):
        session = sessions.setdefault(request.sid, {'created': set(), 'joined': set()})
        session['joined'].add(game_id)
        if created:
            session['created'].add(game_id)

    def broadcast_state(snapshot):
        socketio.emit('state', {'state': snapshot.to_dict()}, to=snapshot.game_id)

    def report_error(action, error: GameError, game_id=None):
        game_logger.log_server_response(request, action, False, error.to_dict(), game_id)
        emit('guess_error', error.to_dict())

    @socketio.on('connect')
    def handle_connect():
        """Handle WebSocket connection."""
        pass

    @socketio.on('disconnect')
    def handle_disconnect(reason=None):
        """Release the games this session created and stop streaming the ones it joined."""
        session = sessions.pop(request.sid, None)
        if not session:
            return

        game_service = get_game_service()
        for game_id in session['joined'] | session['created']:
            leave_room(game_id)
            watchers = [other for other in sessions.values() if game_id in other['joined']]
            if watchers:
                # Another session still plays this game; it inherits ownership
                if game_id in session['created']:
                    watchers[0]['created'].add(game_id)
                continue

            if game_id in session['created']:
                if game_service.delete_game(game_id):
                    game_logger.log_game_event(game_id, 'game_released', request.remote_addr, reason='disconnect')
            else:
                game = game_service.games.get(game_id)
                if game is not None:
                    game.unsubscribe(broadcast_state)

    @socketio.on('new_game')
    def handle_new_game(data=None):
        """Create a game, join its room and start streaming its state."""
        data = data if isinstance(data, dict) else {}
        level = data.get('level')
        game_logger.log_user_action(request, 'new_game', level=level)

        try:
            game = get_game_service().create_game(level)
        except GameError as e:
            report_error('new_game', e)
            return

        game.subscribe(broadcast_state)
        track(game.game_id, created=True)
        join_room(game.game_id)
        emit('game_created', {'game_id': game.game_id, 'state': game.snapshot().to_dict()})

    @socketio.on('join_game')
    @websocket_game_required
    def handle_join_game(data, game=None):
        game.subscribe(broadcast_state)
        track(game.game_id)
        join_room(game.game_id)
        emit('state', {'state': game.snapshot().to_dict()})

    @socketio.on('leave_game')
    @websocket_game_required
    def handle_leave_game(data, game=None):
        leave_room(game.game_id)
        session = sessions.get(request.sid)
        if session:
            session['joined'].discard(game.game_id)

    @socketio.on('letter_input')
    @websocket_game_required
    def handle_letter_input(data, game=None):
        letter = data.get('letter')
        game_logger.log_user_action(request, 'letter_input', game.game_id, letter=letter)
        try:
            game.add_letter(letter)
        except GameError as e:
            report_error('letter_input', e, game.game_id)

    @socketio.on('delete_input')
    @websocket_game_required
    def handle_delete_input(data, game=None):
        game_logger.log_user_action(request, 'delete_input', game.game_id)
        game.delete_letter()

    @socketio.on('submit_input')
    @websocket_game_required
    def handle_submit_input(data, game=None):
        game_logger.log_user_action(request, 'submit_input', game.game_id)
        try:
            result = game.submit_guess()
        except GameError as e:
            report_error('submit_input', e, game.game_id)
            return

        if result is not None and game.over:
            snapshot = game.snapshot()
            game_logger.log_game_event(
                game.game_id, 'game_won' if snapshot.won else 'game_lost', request.remote_addr,
                level=snapshot.level, rounds_used=len(snapshot.guesses), target_word=snapshot.target
            )

    @socketio.on('level_change')
    @websocket_game_required
    def handle_level_change(data, game=None):
        level = data.get('level')
        game_logger.log_user_action(request, 'level_change', game.game_id, level=level)
        try:
            snapshot = game.change_level(level)
        except GameError as e:
            report_error('level_change', e, game.game_id)
            return
        game_logger.log_game_event(game.game_id, 'level_changed', request.remote_addr, level=snapshot.level)

    @socketio.on('reset_game')
    @websocket_game_required
    def handle_reset_game(data, game=None):
        game_logger.log_user_action(request, 'reset_game', game.game_id)
        game.reset()
