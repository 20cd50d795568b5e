from __future__ import annotations
import logging
import sys

import uvicorn

from .config import Settings
from .dictionary import DictionaryLoadError
from .main import create_application

logger = logging.getLogger('scrabble_api')


def main() -> int:
    settings = Settings.from_env()
    logging.basicConfig(level=settings.log_level)
    try:
        application = create_application(settings)
    except DictionaryLoadError as exc:
        logger.error("Refusing to start: %s", exc)
        return 1
    logger.info("Scrabble API server running on %s:%d", settings.host, settings.port)
    uvicorn.run(application, host=settings.host, port=settings.port, log_level=settings.log_level.lower())
    return 0


if __name__ == '__main__':
    sys.exit(main())
