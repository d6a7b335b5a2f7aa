from __future__ import annotations
import logging
import random
from pathlib import Path
from typing import List, Optional, Sequence

logger = logging.getLogger(__name__)

FALLBACK_ROOT_WORD = 'silkworm'
DEFAULT_WORDLIST_PATH = Path(__file__).parent / 'data' / 'start.txt'

def load_root_words(path: Optional[Path | str] = None) -> List[str]:
    """
    Read a newline-separated root word list, lowercased, blank lines dropped.
    A missing or unreadable file yields an empty list so callers fall back.
    """
    p = Path(path) if path is not None else DEFAULT_WORDLIST_PATH
    try:
        text = p.read_text(encoding='utf-8')
    except (OSError, UnicodeDecodeError) as e:
        logger.warning("Root word list %s unavailable: %s", p, e)
        return []
    words = [w.strip().lower() for w in text.splitlines() if w.strip()]
    logger.info("Loaded %s root words from %s", len(words), p)
    return words

def select_root_word(source: Optional[Sequence[str]], rng: Optional[random.Random] = None) -> str:
    if not source:
        logger.warning("No root words available, using %r", FALLBACK_ROOT_WORD)
        return FALLBACK_ROOT_WORD
    return (rng or random).choice(source)
