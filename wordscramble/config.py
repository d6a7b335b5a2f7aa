from __future__ import annotations
import os
from typing import List, Optional

from pydantic import BaseModel

from .dictionary import DEFAULT_LANGUAGE

class Settings(BaseModel):
    # Root word list; None uses the bundled start.txt
    wordlist_path: Optional[str] = None
    # Dictionary word list; None uses the built-in demo words
    dictionary_path: Optional[str] = None
    language: str = DEFAULT_LANGUAGE
    # Seconds to wait for the dictionary. 0 disables the limit.
    oracle_timeout_sec: float = 5.0
    log_level: str = 'INFO'
    cors_origins: List[str] = ['*']

    @classmethod
    def from_env(cls) -> 'Settings':
        origins = os.environ.get('WORDSCRAMBLE_CORS_ORIGINS', '*')
        return cls(
            wordlist_path=os.environ.get('WORDSCRAMBLE_WORDLIST_PATH') or None,
            dictionary_path=os.environ.get('WORDSCRAMBLE_DICTIONARY_PATH') or None,
            language=os.environ.get('WORDSCRAMBLE_LANGUAGE', DEFAULT_LANGUAGE),
            oracle_timeout_sec=float(os.environ.get('WORDSCRAMBLE_ORACLE_TIMEOUT_SEC', '5.0')),
            log_level=os.environ.get('WORDSCRAMBLE_LOG_LEVEL', 'INFO').upper(),
            cors_origins=[o.strip() for o in origins.split(',') if o.strip()],
        )
