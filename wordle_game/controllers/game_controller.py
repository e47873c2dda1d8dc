"""
Game Controller

Handles all game-related HTTP endpoints. Each input endpoint maps to one
engine operation and answers with the resulting state snapshot.
"""

from flask import Blueprint, request, jsonify
from ..models.errors import GameError
from ..services.difficulty import available_profiles
from ..utils.decorators import get_game_service, require_game
from ..utils.game_logger import game_logger

game_bp = Blueprint('game', __name__)


def _error_response(request_obj, action, error: GameError, game_id=None, status=400):
    error_response = {'success': False, **error.to_dict()}
    game_logger.log_server_response(request_obj, action, False, error_response, game_id)
    return jsonify(error_response), status


def _internal_error(request_obj, action, error: Exception, game_id=None):
    game_logger.log_error(request_obj, error, action, game_id)
    error_response = {'success': False, 'error': str(error)}
    game_logger.log_server_response(request_obj, action, False, error_response, game_id)
    return jsonify(error_response), 500


def _log_outcome(game, guess):
    """Log win/loss events once a guess ends the game."""
    if not game.over:
        return
    snapshot = game.snapshot()
    event = 'game_won' if snapshot.won else 'game_lost'
    game_logger.log_game_event(
        game.game_id, event, request.remote_addr,
        level=snapshot.level, rounds_used=len(snapshot.guesses),
        target_word=snapshot.target, final_guess=guess
    )


@game_bp.route('/levels', methods=['GET'])
def list_levels():
    """List the difficulty profiles a game can be started with."""
    game_service = get_game_service()
    return jsonify({
        'success': True,
        'default_level': game_service.default_level.value,
        'levels': [profile.to_dict() for profile in available_profiles(game_service.lexicon)]
    })


@game_bp.route('/new_game', methods=['POST'])
def new_game():
    """Create a new game session."""
    try:
        data = request.get_json(silent=True) or {}
        level = data.get('level')

        game_logger.log_user_action(request, 'new_game', level=level)

        game = get_game_service().create_game(level)
        state = game.snapshot()

        response_data = {
            'success': True,
            'game_id': game.game_id,
            'state': state.to_dict()
        }
        game_logger.log_server_response(
            request, 'new_game', True, response_data, game.game_id,
            word_length=state.word_length, max_guesses=state.max_guesses
        )
        return jsonify(response_data)

    except GameError as e:
        return _error_response(request, 'new_game', e)
    except Exception as e:
        return _internal_error(request, 'new_game', e)


@game_bp.route('/game/<game_id>/state', methods=['GET'])
@require_game
def get_state(game_id, game):
    """Get current game state."""
    return jsonify({'success': True, 'state': game.snapshot().to_dict()})


@game_bp.route('/game/<game_id>/letter', methods=['POST'])
@require_game
def letter_input(game_id, game):
    """Place one letter at the cursor."""
    try:
        data = request.get_json(silent=True) or {}
        letter = data.get('letter')

        game_logger.log_user_action(request, 'letter_input', game_id, letter=letter)

        changed = game.add_letter(letter)
        return jsonify({'success': True, 'changed': changed, 'state': game.snapshot().to_dict()})

    except GameError as e:
        return _error_response(request, 'letter_input', e, game_id)
    except Exception as e:
        return _internal_error(request, 'letter_input', e, game_id)


@game_bp.route('/game/<game_id>/delete', methods=['POST'])
@require_game
def delete_input(game_id, game):
    """Remove the last letter of the current row."""
    game_logger.log_user_action(request, 'delete_input', game_id)
    changed = game.delete_letter()
    return jsonify({'success': True, 'changed': changed, 'state': game.snapshot().to_dict()})


@game_bp.route('/game/<game_id>/submit', methods=['POST'])
@require_game
def submit_input(game_id, game):
    """Submit the current row for scoring."""
    try:
        game_logger.log_user_action(request, 'submit_input', game_id)

        guess = ''.join(game.snapshot().current_letters)
        result = game.submit_guess()
        response_data = {
            'success': True,
            'result': [verdict.value for verdict in result] if result is not None else None,
            'state': game.snapshot().to_dict()
        }
        game_logger.log_server_response(request, 'submit_input', True, response_data, game_id, guess=guess)

        if result is not None:
            _log_outcome(game, guess)
        return jsonify(response_data)

    except GameError as e:
        return _error_response(request, 'submit_input', e, game_id)
    except Exception as e:
        return _internal_error(request, 'submit_input', e, game_id)


@game_bp.route('/game/<game_id>/guess', methods=['POST'])
@require_game
def make_guess(game_id, game):
    """Type and submit a whole word in one request."""
    try:
        data = request.get_json(silent=True) or {}
        if 'guess' not in data:
            return _error_response(request, 'submit_guess', GameError('Guess is required'), game_id)

        guess = data['guess']
        game_logger.log_user_action(request, 'submit_guess', game_id, guess=guess)

        result = game.enter_word(guess)
        response_data = {
            'success': True,
            'result': [verdict.value for verdict in result] if result is not None else None,
            'state': game.snapshot().to_dict()
        }
        game_logger.log_server_response(request, 'submit_guess', True, response_data, game_id, guess=guess)

        if result is not None:
            _log_outcome(game, guess)
        return jsonify(response_data)

    except GameError as e:
        return _error_response(request, 'submit_guess', e, game_id)
    except Exception as e:
        return _internal_error(request, 'submit_guess', e, game_id)


@game_bp.route('/game/<game_id>/level', methods=['POST'])
@require_game
def level_change(game_id, game):
    """Switch difficulty; discards the current game."""
    try:
        data = request.get_json(silent=True) or {}
        level = data.get('level')

        game_logger.log_user_action(request, 'level_change', game_id, level=level)

        state = game.change_level(level)
        game_logger.log_game_event(game_id, 'level_changed', request.remote_addr, level=state.level)
        return jsonify({'success': True, 'message': f'level: {state.level}', 'state': state.to_dict()})

    except GameError as e:
        return _error_response(request, 'level_change', e, game_id)
    except Exception as e:
        return _internal_error(request, 'level_change', e, game_id)


@game_bp.route('/game/<game_id>/reset', methods=['POST'])
@require_game
def reset_game(game_id, game):
    """Start over under the current difficulty."""
    game_logger.log_user_action(request, 'reset_game', game_id)
    state = game.reset()
    return jsonify({'success': True, 'state': state.to_dict()})


@game_bp.route('/game/<game_id>', methods=['DELETE'])
def delete_game(game_id):
    """Delete a game session."""
    game_logger.log_user_action(request, 'delete_game', game_id)

    success = get_game_service().delete_game(game_id)
    response_data = {'success': success}
    game_logger.log_server_response(request, 'delete_game', success, response_data, game_id)

    if success:
        game_logger.log_game_event(game_id, 'game_deleted', request.remote_addr)

    return jsonify(response_data), (200 if success else 404)


@game_bp.route('/health', methods=['GET'])
def health_check():
    """Health check endpoint."""
    try:
        game_service = get_game_service()
        response_data = {
            'status': 'healthy',
            'active_games': len(game_service.games),
            'word_stats': game_service.lexicon.word_statistics(),
            'log_stats': game_logger.get_log_stats()
        }
        return jsonify(response_data)

    except Exception as e:
        game_logger.log_error(request, e, 'health_check')
        return jsonify({'status': 'error', 'error': str(e)}), 500
