from pathlib import Path

import pytest

from scrabble_api.config import DEFAULT_WORDS_PATH, Settings


def test_defaults(monkeypatch):
    for name in ('WORDS_PATH', 'MAX_ANAGRAM_LENGTH', 'CORS_ORIGINS', 'LOG_LEVEL', 'HOST', 'PORT'):
        monkeypatch.delenv(name, raising=False)
    settings = Settings.from_env()
    assert settings.words_path == DEFAULT_WORDS_PATH
    assert settings.max_anagram_length == 15
    assert settings.cors_origins == ['*']
    assert settings.port == 3000


def test_from_env(monkeypatch):
    monkeypatch.setenv('WORDS_PATH', '/srv/words.json')
    monkeypatch.setenv('MAX_ANAGRAM_LENGTH', '8')
    monkeypatch.setenv('CORS_ORIGINS', 'http://a.test, http://b.test,')
    monkeypatch.setenv('LOG_LEVEL', 'debug')
    monkeypatch.setenv('PORT', '8080')
    settings = Settings.from_env()
    assert settings.words_path == Path('/srv/words.json')
    assert settings.max_anagram_length == 8
    assert settings.cors_origins == ['http://a.test', 'http://b.test']
    assert settings.log_level == 'DEBUG'
    assert settings.port == 8080


def test_invalid_integer(monkeypatch):
    monkeypatch.setenv('MAX_ANAGRAM_LENGTH', 'lots')
    with pytest.raises(ValueError):
        Settings.from_env()
