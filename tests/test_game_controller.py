from wordle_engine.services.game_engine import Game


def _start_game(client, game_service, secret="DYSON"):
    response = client.post('/api/new_game')
    assert response.status_code == 200
    game_id = response.get_json()['game_id']
    game_service.games[game_id].game = Game(secret)
    return game_id


def test_new_game(client):
    response = client.post('/api/new_game')
    data = response.get_json()

    assert response.status_code == 200
    assert data['success'] is True
    assert data['state']['remaining_attempts'] == 6
    assert data['state']['answer'] is None
    assert len(data['state']['keyboard']) == 26


def test_get_state(client, game_service):
    game_id = _start_game(client, game_service)
    response = client.get(f'/api/game/{game_id}/state')

    assert response.status_code == 200
    assert response.get_json()['state']['game_id'] == game_id


def test_unknown_game_is_404(client):
    assert client.get('/api/game/nope/state').status_code == 404
    assert client.post('/api/game/nope/guess', json={'guess': 'crane'}).status_code == 404
    assert client.delete('/api/game/nope').status_code == 404


def test_guess(client, game_service):
    game_id = _start_game(client, game_service)
    response = client.post(f'/api/game/{game_id}/guess', json={'guess': 'daddy'})
    state = response.get_json()['state']

    assert response.status_code == 200
    assert state['guess_results'][0] == [
        ['D', 'CORRECT'], ['A', 'NOT_IN_WORD'], ['D', 'NOT_IN_WORD'],
        ['D', 'NOT_IN_WORD'], ['Y', 'WRONG_POSITION'],
    ]
    assert state['keyboard']['D'] == 'CORRECT'
    assert state['remaining_attempts'] == 5


def test_invalid_guess_reports_reason(client, game_service):
    game_id = _start_game(client, game_service)

    for guess, reason in [('Öster', 'NOT_ASCII'), ('hi', 'WRONG_LENGTH'), ('olleh', 'NOT_A_WORD')]:
        response = client.post(f'/api/game/{game_id}/guess', json={'guess': guess})
        data = response.get_json()
        assert response.status_code == 400
        assert data['success'] is False
        assert data['reason'] == reason

    state = client.get(f'/api/game/{game_id}/state').get_json()['state']
    assert state['remaining_attempts'] == 6


def test_missing_guess_is_400(client, game_service):
    game_id = _start_game(client, game_service)
    assert client.post(f'/api/game/{game_id}/guess', json={}).status_code == 400
    assert client.post(f'/api/game/{game_id}/guess', json={'guess': 12345}).status_code == 400


def test_win_then_further_guesses_rejected(client, game_service):
    game_id = _start_game(client, game_service)
    state = client.post(f'/api/game/{game_id}/guess', json={'guess': 'dyson'}).get_json()['state']

    assert state['won'] is True
    assert state['answer'] == 'DYSON'

    response = client.post(f'/api/game/{game_id}/guess', json={'guess': 'crane'})
    assert response.status_code == 400
    assert response.get_json()['error'] == 'Game is already over'


def test_validate_endpoint(client):
    ok = client.post('/api/validate', json={'guess': 'Crane'}).get_json()
    assert ok['valid'] is True

    bad = client.post('/api/validate', json={'guess': 'Öster'}).get_json()
    assert bad['valid'] is False
    assert bad['reason'] == 'NOT_ASCII'

    assert client.post('/api/validate', json={}).status_code == 400


def test_delete_game(client, game_service):
    game_id = _start_game(client, game_service)
    response = client.delete(f'/api/game/{game_id}')

    assert response.get_json()['success'] is True
    assert game_id not in game_service.games


def test_health(client, game_service):
    _start_game(client, game_service)
    data = client.get('/api/health').get_json()

    assert data['status'] == 'healthy'
    assert data['games'] == 1
    assert data['active_games'] == 1

    stats = data['log_stats']
    assert stats['log_file'] is None
    assert stats['user_actions'] >= 2
    assert set(stats) >= {'total_entries', 'server_responses', 'game_events', 'errors'}
