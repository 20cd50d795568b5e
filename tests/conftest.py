import pytest
from fastapi.testclient import TestClient

from scrabble_api.anagrams import AnagramIndex
from scrabble_api.config import Settings
from scrabble_api.dictionary import DictionaryService
from scrabble_api.main import create_app

WORDS = ['cat', 'act', 'tac', 'dog', 'god', 'at', 'ta', 'a', 'hello', 'listen', 'silent', 'enlist', 'tinsel']


@pytest.fixture
def words():
    return list(WORDS)


@pytest.fixture
def dictionary(words):
    return DictionaryService.from_words(words)


@pytest.fixture
def index(dictionary):
    return AnagramIndex.from_dictionary(dictionary, max_length=10)


@pytest.fixture
def settings():
    return Settings(max_anagram_length=10)


@pytest.fixture
def app(settings, dictionary):
    return create_app(settings, dictionary=dictionary)


@pytest.fixture
def client(app):
    # 500 handler responses are asserted on instead of re-raised
    with TestClient(app, raise_server_exceptions=False) as c:
        yield c
