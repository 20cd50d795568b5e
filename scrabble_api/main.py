"""FastAPI app wiring for the Scrabble word API.

`create_app` loads the dictionary and builds the anagram index before the app
exists, so a missing or malformed dictionary stops startup instead of serving
every word as invalid. `create_application` wraps the HTTP app with the
Socket.IO server for uvicorn.
"""

from __future__ import annotations
import logging
from typing import Optional

import socketio
from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from . import __version__
from .anagrams import AnagramIndex
from .config import Settings
from .dictionary import DictionaryService
from .realtime import WordEvents
from .routers.words import ENDPOINTS, router as words_router
from .schemas import ErrorResponse, NotFoundResponse

logger = logging.getLogger(__name__)


async def http_error_handler(request: Request, exc: StarletteHTTPException):
    # a path served only under other methods is an unknown endpoint too
    if exc.status_code in (404, 405):
        body = NotFoundResponse(error='Endpoint not found', availableEndpoints=ENDPOINTS)
        return JSONResponse(status_code=404, content=body.model_dump())
    body = ErrorResponse(error=str(exc.detail))
    return JSONResponse(status_code=exc.status_code, content=body.model_dump(), headers=getattr(exc, 'headers', None))


async def validation_error_handler(request: Request, exc: RequestValidationError):
    errors = exc.errors()
    message = 'Invalid request'
    if errors and errors[0].get('msg'):
        message = f"{message}: {errors[0]['msg']}"
    return JSONResponse(status_code=400, content=ErrorResponse(error=message).model_dump())


async def unhandled_error_handler(request: Request, exc: Exception):
    logger.exception("Unhandled error on %s %s", request.method, request.url.path)
    return JSONResponse(status_code=500, content=ErrorResponse(error='Something went wrong!').model_dump())


def create_app(settings: Optional[Settings] = None, dictionary: Optional[DictionaryService] = None) -> FastAPI:
    settings = settings or Settings.from_env()
    if dictionary is None:
        dictionary = DictionaryService.load(settings.words_path)
    anagrams = AnagramIndex.from_dictionary(dictionary, max_length=settings.max_anagram_length)

    app = FastAPI(title="Scrabble Word API", version=__version__)
    app.state.settings = settings
    app.state.dictionary = dictionary
    app.state.anagrams = anagrams

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_methods=['GET', 'POST', 'PUT', 'DELETE'],
        allow_headers=['Content-Type'],
    )
    app.add_exception_handler(StarletteHTTPException, http_error_handler)
    app.add_exception_handler(RequestValidationError, validation_error_handler)
    app.add_exception_handler(Exception, unhandled_error_handler)

    app.include_router(words_router)
    return app


def create_application(settings: Optional[Settings] = None) -> socketio.ASGIApp:
    """Return the HTTP app mounted behind the Socket.IO ASGI server."""
    settings = settings or Settings.from_env()
    app = create_app(settings)
    origins = '*' if '*' in settings.cors_origins else settings.cors_origins
    sio = socketio.AsyncServer(async_mode='asgi', cors_allowed_origins=origins)
    WordEvents(sio, app.state.dictionary, app.state.anagrams).register()
    return socketio.ASGIApp(sio, other_asgi_app=app)

# For local running: uvicorn scrabble_api.main:create_application --factory --port 3000
