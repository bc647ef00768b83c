import logging
from pathlib import Path

import pytest
from pydantic import ValidationError

from desk_widgets.config import DEFAULT_STORAGE, Config, setupLogging

ENV_KEYS = (
    'DESK_WIDGETS_STORAGE', 'DESK_WIDGETS_TICK_SECONDS',
    'DESK_WIDGETS_LOG_LEVEL', 'DESK_WIDGETS_LOG_FILE',
)

@pytest.fixture(autouse=True)
def clean_env(monkeypatch, tmp_path):
    for key in ENV_KEYS:
        # set first so teardown also undoes whatever .env loading adds
        monkeypatch.setenv(key, '')
        monkeypatch.delenv(key)
    monkeypatch.chdir(tmp_path)  # no stray .env

def test_defaults():
    config = Config.load()
    assert config.storage_path == DEFAULT_STORAGE
    assert config.tick_seconds == 1.0
    assert config.log_level == 'WARNING'
    assert config.log_file is None

def test_environment(monkeypatch, tmp_path):
    monkeypatch.setenv('DESK_WIDGETS_STORAGE', str(tmp_path / 's.json'))
    monkeypatch.setenv('DESK_WIDGETS_TICK_SECONDS', '0.5')
    monkeypatch.setenv('DESK_WIDGETS_LOG_LEVEL', 'debug')
    config = Config.load()
    assert config.storage_path == tmp_path / 's.json'
    assert config.tick_seconds == 0.5
    assert config.log_level == 'DEBUG'

def test_dotenv_file(tmp_path):
    (tmp_path / '.env').write_text('DESK_WIDGETS_TICK_SECONDS=2\n', encoding='utf-8')
    assert Config.load().tick_seconds == 2.0

@pytest.mark.parametrize('key', ENV_KEYS)
@pytest.mark.parametrize('blank', ['', '  '])
def test_blank_environment_values_fall_back_to_defaults(monkeypatch, key, blank):
    monkeypatch.setenv(key, blank)
    assert Config.load() == Config()

def test_blank_dotenv_lines_fall_back_to_defaults(tmp_path):
    (tmp_path / '.env').write_text(
        ''.join(f'{key}=\n' for key in ENV_KEYS), encoding='utf-8',
    )
    config = Config.load()
    assert config.storage_path == DEFAULT_STORAGE
    assert config.log_level == 'WARNING'

def test_overrides_beat_environment(monkeypatch):
    monkeypatch.setenv('DESK_WIDGETS_TICK_SECONDS', '0.5')
    assert Config.load(tick_seconds=3.0).tick_seconds == 3.0
    assert Config.load(tick_seconds=None).tick_seconds == 0.5

@pytest.mark.parametrize('key, value', [
    ('DESK_WIDGETS_TICK_SECONDS', '0'),
    ('DESK_WIDGETS_TICK_SECONDS', 'soon'),
    ('DESK_WIDGETS_LOG_LEVEL', 'LOUD'),
])
def test_invalid_values(monkeypatch, key, value):
    monkeypatch.setenv(key, value)
    with pytest.raises(ValidationError):
        Config.load()

def test_setup_logging_to_file(tmp_path):
    root = logging.getLogger()
    saved = root.handlers[:], root.level
    log_file = tmp_path / 'logs' / 'desk.log'
    try:
        setupLogging(Config(log_file=log_file, log_level='INFO'))
        logging.getLogger('desk_widgets.test').info('hello there')
        for h in root.handlers:
            h.flush()
        assert 'hello there' in log_file.read_text(encoding='utf-8')
    finally:
        for h in root.handlers:
            h.close()
        root.handlers[:], level = saved
        root.setLevel(level)
