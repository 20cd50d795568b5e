from __future__ import annotations
import json
import logging
from pathlib import Path
from typing import Any, Dict, Iterable, Iterator, Mapping, Union

logger = logging.getLogger(__name__)

# Scrabble dictionary service backed by a flat JSON object: { "word": marker, ... }.
# Only key existence matters; markers are kept as loaded.

# Below this many words the source is a sample list, not a playable dictionary
SMALL_DICTIONARY_WORDS = 1000


class DictionaryLoadError(RuntimeError):
    """The dictionary source is missing or malformed."""


class DictionaryService:
    def __init__(self, entries: Mapping[str, Any]):
        # Keys are expected in canonical (lowercase) form already
        self._entries: Dict[str, Any] = dict(entries)

    @classmethod
    def from_words(cls, words: Iterable[str]) -> 'DictionaryService':
        return cls({w: 1 for w in words})

    @classmethod
    def load(cls, path: Union[str, Path]) -> 'DictionaryService':
        """Read the dictionary file, refusing anything that would serve a partial dictionary."""
        path = Path(path)
        try:
            with path.open(encoding='utf-8') as fh:
                data = json.load(fh)
        except FileNotFoundError as exc:
            raise DictionaryLoadError(f"Dictionary file not found: {path}") from exc
        except (OSError, UnicodeDecodeError) as exc:
            raise DictionaryLoadError(f"Could not read dictionary file {path}: {exc}") from exc
        except json.JSONDecodeError as exc:
            raise DictionaryLoadError(f"Dictionary file {path} is not valid JSON: {exc}") from exc

        if not isinstance(data, dict):
            raise DictionaryLoadError(
                f"Dictionary file {path} must hold a JSON object, got {type(data).__name__}"
            )
        if not data:
            raise DictionaryLoadError(f"Dictionary file {path} is empty")

        service = cls(data)
        logger.info("Loaded %d words from %s", len(service), path)
        if len(service) < SMALL_DICTIONARY_WORDS:
            logger.warning(
                "Dictionary %s holds only %d words; most real words will be reported invalid. "
                "Set WORDS_PATH to a full word list.", path, len(service)
            )
        return service

    def contains(self, word: str) -> bool:
        if not word:
            return False
        return word in self._entries

    def words(self) -> Iterator[str]:
        return iter(self._entries)

    @property
    def word_count(self) -> int:
        return len(self._entries)

    def __len__(self) -> int:
        return len(self._entries)

    def __contains__(self, word: object) -> bool:
        return isinstance(word, str) and self.contains(word)
