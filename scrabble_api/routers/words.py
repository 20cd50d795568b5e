from __future__ import annotations
from typing import Any, Dict

from fastapi import APIRouter, HTTPException, Query, Request
from pydantic import ValidationError

from ..anagrams import AnagramIndex, WordTooLongError
from ..dictionary import DictionaryService
from ..schemas import AnagramsResult, SearchRequest, SearchResult, ServiceInfo
from ..words import normalize

router = APIRouter()

ENDPOINTS: Dict[str, str] = {
    'GET /': 'API information',
    'GET /search/{word}': 'Check word validity',
    'POST /search': 'Check word validity (POST)',
    'GET /anagrams/{word}': 'List anagrams of a word',
}


def get_dictionary(request: Request) -> DictionaryService:
    return request.app.state.dictionary


def get_anagram_index(request: Request) -> AnagramIndex:
    return request.app.state.anagrams


def lookup(dictionary: DictionaryService, raw: str) -> SearchResult:
    word = normalize(raw)
    return SearchResult(word=word, valid=dictionary.contains(word))


@router.get('/', response_model=ServiceInfo)
async def service_info(request: Request):
    return ServiceInfo(
        message='Scrabble Word Validation API',
        endpoints=ENDPOINTS,
        wordCount=get_dictionary(request).word_count,
    )


@router.get('/search/{word}', response_model=SearchResult)
async def search_word(word: str, request: Request):
    if not normalize(word):
        raise HTTPException(status_code=400, detail='Word parameter is required')
    return lookup(get_dictionary(request), word)


@router.get('/search', include_in_schema=False)
@router.get('/search/', include_in_schema=False)
async def search_word_missing():
    raise HTTPException(status_code=400, detail='Word parameter is required')


FORM_TYPES = ('application/x-www-form-urlencoded', 'multipart/form-data')


async def read_search_body(request: Request) -> Any:
    """The `word` field of a JSON or form-encoded body, or None when absent."""
    content_type = request.headers.get('content-type', '').split(';')[0].strip().lower()
    if content_type in FORM_TYPES:
        form = await request.form()
        return form.get('word')
    raw = await request.body()
    if not raw.strip():
        return None
    try:
        return SearchRequest.model_validate_json(raw).word
    except ValidationError:
        raise HTTPException(status_code=400, detail='Request body must be a JSON object with a string word')


@router.post('/search', response_model=SearchResult)
async def search_word_body(request: Request):
    word = await read_search_body(request)
    if not isinstance(word, str) or not normalize(word):
        raise HTTPException(status_code=400, detail='Word is required in request body')
    return lookup(get_dictionary(request), word)


@router.get('/anagrams', include_in_schema=False)
@router.get('/anagrams/', include_in_schema=False)
async def anagrams_missing():
    raise HTTPException(status_code=400, detail='Word parameter is required')

@router.get('/anagrams/{word}', response_model=AnagramsResult)
async def anagrams(
    word: str,
    request: Request,
    subwords: bool = Query(False, description='Include shorter words built from the same letters'),
):
    clean = normalize(word)
    if not clean:
        raise HTTPException(status_code=400, detail='Word parameter is required')
    try:
        result = get_anagram_index(request).anagrams_of(clean)
    except WordTooLongError as exc:
        raise HTTPException(status_code=400, detail=str(exc))
    found = result.subwords() if subwords else result.true_anagrams()
    return AnagramsResult(word=clean, anagrams=found, count=len(found))
