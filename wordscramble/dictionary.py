from __future__ import annotations
import asyncio
import logging
from pathlib import Path
from typing import Iterable, Optional, Protocol, Set

logger = logging.getLogger(__name__)

DEFAULT_LANGUAGE = 'en'

# Small English word set for development/demo.
# In production, point WORDSCRAMBLE_DICTIONARY_PATH at a full word list.
DEFAULT_WORDS = {
    # silkworm
    'silk', 'worm', 'worms', 'milk', 'mil', 'owl', 'owls', 'low', 'slow', 'slim', 'soil',
    'oil', 'oils', 'rim', 'rims', 'mow', 'mows', 'row', 'rows', 'sow', 'sir', 'ski', 'skim',
    'skirl', 'swirl', 'work', 'works', 'milks', 'ilk', 'ilks', 'kilo', 'kilos', 'smirk',
    'wok', 'woks', 'lows',
    # blizzard
    'lizard', 'bar', 'bard', 'bird', 'brad', 'braid', 'lair', 'laird', 'liar',
    'raid', 'rail', 'lard', 'drab', 'bald', 'lid', 'rid', 'dab', 'dial', 'arid',
    # airplane
    'plane', 'plain', 'plan', 'pain', 'pail', 'pair', 'pale', 'paper', 'pearl', 'panel',
    'alien', 'nail', 'lane', 'lean', 'leap', 'real', 'rain', 'rein', 'ripe', 'pine', 'line',
    'liner', 'linear', 'learn', 'earn', 'near', 'airline', 'repaint', 'ape', 'pen', 'pin',
    # painting
    'paint', 'giant', 'gain', 'gait', 'tang', 'ting', 'nag', 'nap', 'pig', 'pit', 'tap', 'tin',
    'pint', 'pita', 'paining', 'anting',
    # notebook
    'note', 'book', 'boot', 'bone', 'tone', 'token', 'knot', 'boon', 'took',
    'bent', 'beet', 'ten', 'net', 'not', 'one', 'toe', 'bet', 'knob',
}

class DictionaryOracle(Protocol):
    async def is_real_word(self, word: str, language: str) -> bool: ...

class DictionaryUnavailableError(Exception):
    """Raised when the dictionary did not answer in time."""

class DictionaryService:
    def __init__(self, words: Optional[Iterable[str]] = None, language: str = DEFAULT_LANGUAGE):
        # Store lowercase words
        self._words: Set[str] = {w.strip().lower() for w in (words if words is not None else DEFAULT_WORDS) if w.strip()}
        self.language = language

    @classmethod
    def from_file(cls, path: Path | str, language: str = DEFAULT_LANGUAGE) -> 'DictionaryService':
        p = Path(path)
        # undecodable bytes raise UnicodeDecodeError
        with p.open('r', encoding='utf-8') as f:
            words = [line for line in f]
        service = cls(words, language=language)
        logger.info("Loaded %s dictionary words from %s", len(service), p)
        return service

    def __len__(self) -> int:
        return len(self._words)

    def is_valid(self, word: str) -> bool:
        if not word:
            return False
        return word.lower() in self._words

    async def is_real_word(self, word: str, language: str) -> bool:
        if language != self.language:
            return False
        return self.is_valid(word)

async def check_word(oracle: DictionaryOracle, word: str, language: str, timeout: Optional[float] = None) -> bool:
    """Ask the oracle about `word`, bounded by `timeout` seconds (None or 0 waits forever)."""
    if not timeout:
        return await oracle.is_real_word(word, language)
    try:
        return await asyncio.wait_for(oracle.is_real_word(word, language), timeout)
    except asyncio.TimeoutError as e:
        logger.warning("Dictionary lookup for %r timed out after %.1fs", word, timeout)
        raise DictionaryUnavailableError(f"dictionary did not answer within {timeout}s") from e
