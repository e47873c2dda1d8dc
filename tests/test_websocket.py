def _events(socket_client, name):
    return [event['args'][0] for event in socket_client.get_received() if event['name'] == name]


def _create(socket_client, level='hard'):
    socket_client.emit('new_game', {'level': level})
    created = _events(socket_client, 'game_created')
    assert len(created) == 1
    return created[0]


def test_new_game_event(socket_client):
    created = _create(socket_client)
    assert created['state']['level'] == 'hard'
    assert created['state']['row'] == 0


def test_inputs_stream_state(socket_client):
    game_id = _create(socket_client)['game_id']

    for ch in 'rhino':
        socket_client.emit('letter_input', {'game_id': game_id, 'letter': ch})
    socket_client.emit('submit_input', {'game_id': game_id})

    states = [event['state'] for event in _events(socket_client, 'state')]
    assert len(states) == 6
    assert states[4]['current_letters'] == list('rhino')
    assert states[-1]['row'] == 1
    assert states[-1]['last_guess_result'] == ['present', 'absent', 'present', 'absent', 'present']

    socket_client.emit('delete_input', {'game_id': game_id})
    assert _events(socket_client, 'state') == []


def test_submit_errors_are_reported(socket_client):
    game_id = _create(socket_client)['game_id']
    socket_client.emit('letter_input', {'game_id': game_id, 'letter': 'a'})
    socket_client.get_received()

    socket_client.emit('submit_input', {'game_id': game_id})
    errors = _events(socket_client, 'guess_error')
    assert errors == [{'error': 'word too short', 'error_kind': 'incomplete_guess'}]


def test_win_over_socket(socket_client):
    game_id = _create(socket_client)['game_id']
    for ch in 'ivory':
        socket_client.emit('letter_input', {'game_id': game_id, 'letter': ch})
    socket_client.emit('submit_input', {'game_id': game_id})

    final = _events(socket_client, 'state')[-1]['state']
    assert final['won'] is True
    assert final['target'] == 'ivory'


def test_level_change_and_reset(socket_client):
    game_id = _create(socket_client)['game_id']
    socket_client.emit('level_change', {'game_id': game_id, 'level': 'easy'})
    assert _events(socket_client, 'state')[-1]['state']['max_guesses'] == 6

    socket_client.emit('level_change', {'game_id': game_id, 'level': 'nightmare'})
    assert _events(socket_client, 'guess_error')[0]['error_kind'] == 'config_error'

    socket_client.emit('reset_game', {'game_id': game_id})
    assert _events(socket_client, 'state')[-1]['state']['level'] == 'easy'


def test_join_game_created_over_http(app_and_socketio, client, socket_client):
    game_id = client.post('/api/new_game', json={'level': 'medium'}).get_json()['game_id']
    socket_client.get_received()

    socket_client.emit('join_game', {'game_id': game_id})
    assert _events(socket_client, 'state')[0]['state']['game_id'] == game_id

    client.post(f'/api/game/{game_id}/letter', json={'letter': 'a'})
    assert _events(socket_client, 'state')[-1]['state']['current_letters'] == ['a']


def test_unknown_game_id(socket_client):
    socket_client.emit('letter_input', {'game_id': 'missing', 'letter': 'a'})
    assert _events(socket_client, 'error')[0]['error_kind'] == 'game_not_found'

    socket_client.emit('submit_input', {})
    assert _events(socket_client, 'error') == [{'error': 'game_id required'}]


def test_disconnect_releases_created_games(app_and_socketio, socket_client):
    app, _ = app_and_socketio
    _create(socket_client)
    _create(socket_client, 'easy')
    assert len(app.extensions['wordle_game'].games) == 2

    socket_client.disconnect()
    assert app.extensions['wordle_game'].games == {}


def test_disconnect_keeps_game_another_session_plays(app_and_socketio, socket_client):
    app, socketio = app_and_socketio
    game_id = _create(socket_client)['game_id']

    other = socketio.test_client(app)
    other.emit('join_game', {'game_id': game_id})
    other.get_received()

    socket_client.disconnect()
    assert game_id in app.extensions['wordle_game'].games

    other.emit('letter_input', {'game_id': game_id, 'letter': 'r'})
    assert _events(other, 'state')[-1]['state']['current_letters'] == ['r']

    other.disconnect()
    assert app.extensions['wordle_game'].games == {}


def test_disconnect_stops_streaming_joined_http_game(app_and_socketio, client, socket_client):
    app, _ = app_and_socketio
    game_id = client.post('/api/new_game', json={'level': 'hard'}).get_json()['game_id']
    socket_client.emit('join_game', {'game_id': game_id})

    socket_client.disconnect()
    game = app.extensions['wordle_game'].games[game_id]
    assert game._observers == []

    response = client.post(f'/api/game/{game_id}/letter', json={'letter': 'a'})
    assert response.get_json()['state']['current_letters'] == ['a']
