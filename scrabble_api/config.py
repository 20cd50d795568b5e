from __future__ import annotations
import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import List

DATA_DIR = Path(__file__).resolve().parent / 'data'
# Bundled sample list for development; deployments set WORDS_PATH to a full word list
DEFAULT_WORDS_PATH = DATA_DIR / 'words.json'


def _split_origins(raw: str) -> List[str]:
    origins = [o.strip() for o in raw.split(',') if o.strip()]
    return origins or ['*']


@dataclass
class Settings:
    words_path: Path = DEFAULT_WORDS_PATH
    max_anagram_length: int = 15
    cors_origins: List[str] = field(default_factory=lambda: ['*'])
    log_level: str = 'INFO'
    host: str = '0.0.0.0'
    port: int = 3000

    @classmethod
    def from_env(cls) -> 'Settings':
        return cls(
            words_path=Path(os.getenv('WORDS_PATH', str(DEFAULT_WORDS_PATH))),
            max_anagram_length=int(os.getenv('MAX_ANAGRAM_LENGTH', '15')),
            cors_origins=_split_origins(os.getenv('CORS_ORIGINS', '*')),
            log_level=os.getenv('LOG_LEVEL', 'INFO').upper(),
            host=os.getenv('HOST', '0.0.0.0'),
            port=int(os.getenv('PORT', '3000')),
        )
