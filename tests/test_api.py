def _new_game(client, level='hard'):
    response = client.post('/api/new_game', json={'level': level})
    assert response.status_code == 200
    return response.get_json()


def _type(client, game_id, word):
    for ch in word:
        response = client.post(f'/api/game/{game_id}/letter', json={'letter': ch})
        assert response.status_code == 200
    return response.get_json()


def test_list_levels(client):
    data = client.get('/api/levels').get_json()
    assert data['default_level'] == 'easy'
    assert {lvl['level']: lvl['max_guesses'] for lvl in data['levels']} == {
        'easy': 6, 'medium': 5, 'hard': 4
    }


def test_new_game_defaults_to_configured_level(client):
    response = client.post('/api/new_game')
    data = response.get_json()
    assert data['success']
    assert data['state']['level'] == 'easy'
    assert data['state']['target'] is None


def test_new_game_unknown_level(client):
    response = client.post('/api/new_game', json={'level': 'nightmare'})
    assert response.status_code == 400
    assert response.get_json()['error_kind'] == 'config_error'


def test_letter_delete_and_submit_flow(client):
    game_id = _new_game(client)['game_id']

    data = _type(client, game_id, 'rhin')
    assert data['state']['col'] == 4

    response = client.post(f'/api/game/{game_id}/submit')
    assert response.status_code == 400
    assert response.get_json() == {
        'success': False, 'error': 'word too short', 'error_kind': 'incomplete_guess'
    }

    data = _type(client, game_id, 'o')
    assert data['state']['current_letters'] == list('rhino')
    data = client.post(f'/api/game/{game_id}/letter', json={'letter': 'x'}).get_json()
    assert data['changed'] is False

    data = client.post(f'/api/game/{game_id}/submit').get_json()
    assert data['result'] == ['present', 'absent', 'present', 'absent', 'present']
    assert data['state']['row'] == 1

    data = client.post(f'/api/game/{game_id}/delete').get_json()
    assert data['changed'] is False


def test_invalid_letter(client):
    game_id = _new_game(client)['game_id']
    response = client.post(f'/api/game/{game_id}/letter', json={'letter': '7'})
    assert response.status_code == 400
    assert response.get_json()['error_kind'] == 'invalid_input'


def test_guess_endpoint_plays_to_win(client):
    game_id = _new_game(client)['game_id']

    response = client.post(f'/api/game/{game_id}/guess', json={'guess': 'zzzzz'})
    assert response.status_code == 400
    assert response.get_json()['error_kind'] == 'unknown_word'

    client.post(f'/api/game/{game_id}/guess', json={'guess': 'adieu'})
    client.post(f'/api/game/{game_id}/guess', json={'guess': 'rhino'})
    data = client.post(f'/api/game/{game_id}/guess', json={'guess': 'ivory'}).get_json()
    assert data['state']['won'] is True
    assert data['state']['row'] == 2
    assert data['state']['target'] == 'ivory'

    data = client.post(f'/api/game/{game_id}/guess', json={'guess': 'rhino'}).get_json()
    assert data['result'] is None


def test_guess_required(client):
    game_id = _new_game(client)['game_id']
    response = client.post(f'/api/game/{game_id}/guess', json={})
    assert response.status_code == 400


def test_level_change_and_reset(client):
    game_id = _new_game(client, 'easy')['game_id']
    _type(client, game_id, 'app')

    data = client.post(f'/api/game/{game_id}/level', json={'level': 'medium'}).get_json()
    assert data['message'] == 'level: medium'
    assert data['state']['max_guesses'] == 5
    assert data['state']['col'] == 0

    response = client.post(f'/api/game/{game_id}/level', json={'level': 'impossible'})
    assert response.status_code == 400

    _type(client, game_id, 'ab')
    data = client.post(f'/api/game/{game_id}/reset').get_json()
    assert data['state']['level'] == 'medium'
    assert data['state']['col'] == 0


def test_get_state_and_delete(client):
    game_id = _new_game(client)['game_id']
    assert client.get(f'/api/game/{game_id}/state').get_json()['state']['game_id'] == game_id

    assert client.delete(f'/api/game/{game_id}').get_json() == {'success': True}
    assert client.get(f'/api/game/{game_id}/state').status_code == 404
    assert client.delete(f'/api/game/{game_id}').status_code == 404


def test_unknown_game(client):
    response = client.post('/api/game/nope/letter', json={'letter': 'a'})
    assert response.status_code == 404
    assert response.get_json()['error_kind'] == 'game_not_found'


def test_health(client):
    _new_game(client)
    data = client.get('/api/health').get_json()
    assert data['status'] == 'healthy'
    assert data['active_games'] == 1
    assert data['word_stats']['pool_sizes']['hard'] == 24
