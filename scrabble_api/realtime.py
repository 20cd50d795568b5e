from __future__ import annotations
from typing import Any, Optional

from .anagrams import AnagramIndex, WordTooLongError
from .dictionary import DictionaryService
from .words import normalize


def _extract_word(payload: Any) -> Optional[str]:
    # Clients send either { word: '...' } or the bare string
    if isinstance(payload, dict):
        payload = payload.get('word')
    if isinstance(payload, str) and payload.strip():
        return normalize(payload)
    return None


class WordEvents:
    """Socket.IO handlers answering word lookups for connected clients."""

    def __init__(self, sio, dictionary: DictionaryService, anagrams: AnagramIndex):
        self.sio = sio
        self.dictionary = dictionary
        self.anagrams = anagrams

    def register(self):
        self.sio.on('search', handler=self.search)
        self.sio.on('anagrams', handler=self.find_anagrams)

    async def search(self, sid, payload=None):
        word = _extract_word(payload)
        if word is None:
            await self.sio.emit('search:error', { 'error': 'Word is required' }, to=sid)
            return
        await self.sio.emit('search:result', { 'word': word, 'valid': self.dictionary.contains(word) }, to=sid)

    async def find_anagrams(self, sid, payload=None):
        word = _extract_word(payload)
        if word is None:
            await self.sio.emit('anagrams:error', { 'error': 'Word is required' }, to=sid)
            return
        try:
            found = self.anagrams.anagrams_of(word).true_anagrams()
        except WordTooLongError as exc:
            await self.sio.emit('anagrams:error', { 'error': str(exc) }, to=sid)
            return
        await self.sio.emit('anagrams:result', { 'word': word, 'anagrams': found, 'count': len(found) }, to=sid)
