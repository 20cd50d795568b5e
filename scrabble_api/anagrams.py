"""Anagram search over a sorted-letter-key index.

The index groups dictionary words by their signature (letters sorted into a
fixed order). A search walks every distinct sub-multiset of the input's
letters, builds that subset's signature directly and looks it up, so the cost
is bounded by the number of letter subsets rather than by permutations.
"""

from __future__ import annotations
import logging
from collections import Counter, defaultdict
from dataclasses import dataclass
from itertools import product
from typing import Dict, Iterable, List, Optional, Tuple

from .dictionary import DictionaryService
from .words import signature

logger = logging.getLogger(__name__)

DEFAULT_MAX_LENGTH = 15


class WordTooLongError(ValueError):
    def __init__(self, word: str, max_length: int):
        super().__init__(f"Word is too long for an anagram search (max {max_length} characters)")
        self.word = word
        self.max_length = max_length


@dataclass(frozen=True)
class AnagramResult:
    word: str
    matches: Tuple[str, ...] = ()

    @classmethod
    def empty(cls, word: str = '') -> 'AnagramResult':
        return cls(word=word)

    @property
    def is_empty(self) -> bool:
        return not self.matches

    def true_anagrams(self) -> List[str]:
        """Matches using every letter of the word, excluding the word itself."""
        return [m for m in self.matches if len(m) == len(self.word) and m != self.word]

    def subwords(self) -> List[str]:
        """Every match except the word itself, shorter ones included."""
        return [m for m in self.matches if m != self.word]

    def __len__(self) -> int:
        return len(self.matches)


class AnagramIndex:
    def __init__(self, words: Iterable[str], max_length: int = DEFAULT_MAX_LENGTH):
        groups: Dict[str, List[str]] = defaultdict(list)
        for w in words:
            groups[signature(w)].append(w)
        self._groups: Dict[str, Tuple[str, ...]] = {k: tuple(sorted(v)) for k, v in groups.items()}
        self._longest = max((len(k) for k in self._groups), default=0)
        self.max_length = max_length
        logger.info("Built anagram index: %d signatures", len(self._groups))

    @classmethod
    def from_dictionary(cls, dictionary: DictionaryService, max_length: int = DEFAULT_MAX_LENGTH) -> 'AnagramIndex':
        return cls(dictionary.words(), max_length=max_length)

    def lookup(self, key: str) -> Tuple[str, ...]:
        return self._groups.get(key, ())

    def anagrams_of(self, word: str, max_length: Optional[int] = None) -> AnagramResult:
        """All dictionary words formable from a sub-multiset of ``word``'s letters.

        ``word`` must already be normalized. Raises ``WordTooLongError`` above
        the configured length bound.
        """
        if not word:
            return AnagramResult.empty(word)
        limit = self.max_length if max_length is None else max_length
        if len(word) > limit:
            logger.debug("Rejecting anagram search for %d-character input", len(word))
            raise WordTooLongError(word, limit)

        letters = sorted(Counter(word).items())
        matches: List[str] = []
        # one choice of 0..count per distinct letter; each combination is a distinct subset
        for picks in product(*(range(count + 1) for _, count in letters)):
            size = sum(picks)
            if size == 0 or size > self._longest:
                continue
            key = ''.join(ch * n for (ch, _), n in zip(letters, picks))
            matches.extend(self._groups.get(key, ()))

        if not matches:
            return AnagramResult.empty(word)
        return AnagramResult(word=word, matches=tuple(sorted(matches)))

    def __len__(self) -> int:
        return len(self._groups)
