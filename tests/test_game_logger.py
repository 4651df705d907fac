import json
import logging
import os
from types import SimpleNamespace

import pytest

from wordle_engine.utils.game_logger import GameLogger, game_logger


@pytest.fixture
def fake_request():
    return SimpleNamespace(remote_addr='10.0.0.7', endpoint='game.submit_guess', method='POST')


@pytest.fixture
def restore_logger():
    yield
    shared = logging.getLogger('wordle_game')
    for handler in list(shared.handlers):
        handler.close()
    game_logger.logger = game_logger._setup_logger()


def _raise_and_log(logger, request):
    try:
        raise RuntimeError("boom")
    except RuntimeError as e:
        logger.log_error(request, e, 'submit_guess', 'game-1')


def test_stats_count_entries_by_kind(fake_request, restore_logger):
    logger = GameLogger(to_file=False)

    logger.log_user_action(fake_request, 'submit_guess', 'game-1', guess='CRANE')
    logger.log_server_response(fake_request, 'submit_guess', True, {'success': True}, 'game-1')
    logger.log_server_response(fake_request, 'submit_guess', False, {'success': False}, 'game-1')
    logger.log_game_event('game-1', 'game_won', '10.0.0.7', attempts_used=3)
    logger.log_game_event('game-2', 'game_lost', '10.0.0.7')
    logger.log_game_event('game-3', 'game_won', '10.0.0.7')

    stats = logger.get_log_stats()
    assert stats['log_file'] is None
    assert stats['total_entries'] == 6
    assert stats['user_actions'] == 1
    assert stats['server_responses'] == 2
    assert stats['game_events'] == 3
    assert stats['errors'] == 0
    assert stats['game_outcomes'] == {'game_won': 2, 'game_lost': 1}


def test_error_with_traceback_counts_once(tmp_path, fake_request, restore_logger):
    logger = GameLogger(log_dir=str(tmp_path), to_file=True)
    _raise_and_log(logger, fake_request)

    for handler in logger.logger.handlers:
        handler.flush()
    lines = logger.log_file.read_text(encoding='utf-8').splitlines()
    assert len(lines) > 1
    assert 'Traceback' in '\n'.join(lines)

    stats = logger.get_log_stats()
    assert stats['total_entries'] == 1
    assert stats['errors'] == 1


def test_stats_do_not_read_the_log_file(tmp_path, fake_request, restore_logger):
    logger = GameLogger(log_dir=str(tmp_path), to_file=True)
    log_file = logger.log_file
    logger.log_user_action(fake_request, 'new_game')

    for handler in logger.logger.handlers:
        handler.close()
    log_file.unlink()

    stats = logger.get_log_stats()
    assert stats['log_file'] == str(log_file)
    assert stats['user_actions'] == 1


def test_log_file_is_fixed_at_setup(tmp_path, restore_logger):
    logger = GameLogger(log_dir=str(tmp_path), to_file=True)
    handler_paths = [h.baseFilename for h in logger.logger.handlers if isinstance(h, logging.FileHandler)]

    assert handler_paths == [os.path.abspath(logger.log_file)]
    assert logger.log_file == tmp_path / f"wordle_server_{logger.started_at.strftime('%Y-%m-%d')}.log"


def test_entries_are_json_without_the_answer(fake_request, restore_logger, caplog):
    logger = GameLogger(to_file=False)
    state = {'current_round': 2, 'remaining_attempts': 4, 'game_over': True, 'won': True, 'answer': 'DYSON'}

    with caplog.at_level(logging.INFO, logger='wordle_game'):
        logger.log_server_response(fake_request, 'submit_guess', True, {'state': state}, 'game-1')

    entry = json.loads(caplog.records[-1].getMessage())
    assert entry['event_type'] == 'SERVER_RESPONSE_SUCCESS'
    assert entry['user'] == {'user_ip': '10.0.0.7'}
    assert entry['details']['response_data']['state']['answer_revealed'] is True
    assert 'DYSON' not in caplog.records[-1].getMessage()
