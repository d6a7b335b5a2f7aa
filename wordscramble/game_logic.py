from __future__ import annotations
import logging
from collections import Counter
from typing import List, Optional

from .dictionary import DEFAULT_LANGUAGE, DictionaryOracle, check_word
from .schemas import Accepted, Outcome, Rejected

logger = logging.getLogger(__name__)

MIN_WORD_LENGTH = 3

class GameSession:
    def __init__(self, root_word: str):
        if not root_word:
            raise ValueError("root word must be non-empty")
        self.root_word = root_word.lower()
        # most recently accepted first
        self.used_words: List[str] = []
        self.score = 0

    def apply(self, word: str, outcome: Outcome) -> None:
        if not isinstance(outcome, Accepted):
            return
        self.used_words.insert(0, word)
        self.score += outcome.points

def normalize(raw: str) -> str:
    return raw.strip().lower()

def is_original(word: str, session: GameSession) -> bool:
    return word not in session.used_words

def is_composable(word: str, root_word: str) -> bool:
    # each letter of the root may be spent once
    available = Counter(root_word)
    for letter in word:
        if available[letter] <= 0:
            return False
        available[letter] -= 1
    return True

def is_long_enough(word: str) -> bool:
    return len(word) >= MIN_WORD_LENGTH

def is_not_root(word: str, session: GameSession) -> bool:
    return word != session.root_word

async def validate(
        candidate: str,
        session: GameSession,
        oracle: DictionaryOracle,
        *,
        language: str = DEFAULT_LANGUAGE,
        timeout: Optional[float] = None,
) -> Outcome:
    """
    Run the rule chain for `candidate` against `session`.

    Checks run in a fixed order and the first failure decides the reason:
    already used, not composable from the root, too short, equal to the
    root, not a real word. The session is never modified here; the caller
    applies an Accepted outcome.

    Raises DictionaryUnavailableError if the oracle times out.
    """
    if not is_original(candidate, session):
        return Rejected(reason='already_used')
    if not is_composable(candidate, session.root_word):
        return Rejected(reason='not_composable')
    if not is_long_enough(candidate):
        return Rejected(reason='too_short')
    if not is_not_root(candidate, session):
        return Rejected(reason='equal_to_root')
    if not await check_word(oracle, candidate, language, timeout):
        return Rejected(reason='not_a_real_word')
    return Accepted(points=len(candidate))
