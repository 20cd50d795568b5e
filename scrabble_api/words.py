from __future__ import annotations


def normalize(word: str) -> str:
    """Canonical form of a word: surrounding whitespace trimmed, lowercased."""
    return word.strip().lower()


def signature(word: str) -> str:
    # letters in code point order; anagram-equivalent words share it
    return ''.join(sorted(word))
