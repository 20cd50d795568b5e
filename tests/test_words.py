import pytest

from scrabble_api.words import normalize, signature


@pytest.mark.parametrize('raw, expected', [
    ('Hello ', 'hello'),
    ('  CAT\t', 'cat'),
    ('dog', 'dog'),
    ('   ', ''),
    ('', ''),
    ('Éclair', 'éclair'),
])
def test_normalize(raw, expected):
    assert normalize(raw) == expected


@pytest.mark.parametrize('raw', ['Hello ', ' MiXeD cAsE ', '', 'zoo'])
def test_normalize_is_idempotent(raw):
    once = normalize(raw)
    assert normalize(once) == once


def test_signature_groups_anagrams():
    assert signature('listen') == signature('silent') == 'eilnst'
    assert signature('cat') != signature('dog')
