from __future__ import annotations
import asyncio
import logging
import random
import uuid
from typing import Dict, List, Optional, Sequence

from ..dictionary import DEFAULT_LANGUAGE, DictionaryOracle
from ..game_logic import GameSession, normalize, validate
from ..schemas import Accepted, Outcome, SessionState
from ..wordlist import select_root_word

logger = logging.getLogger(__name__)

class SessionNotStartedError(Exception):
    """Raised when a word is submitted before start_session()."""

class Game:
    def __init__(
            self,
            game_id: str,
            root_words: Sequence[str],
            oracle: DictionaryOracle,
            *,
            language: str = DEFAULT_LANGUAGE,
            oracle_timeout: Optional[float] = None,
            rng: Optional[random.Random] = None,
    ):
        self.id = game_id
        self.root_words = root_words
        self.oracle = oracle
        self.language = language
        self.oracle_timeout = oracle_timeout
        self.rng = rng
        self.session: Optional[GameSession] = None
        # one submission in flight per game
        self._lock = asyncio.Lock()

    @property
    def status(self) -> str:
        return 'uninitialized' if self.session is None else 'active'

    def start_session(self) -> str:
        self.session = GameSession(select_root_word(self.root_words, self.rng))
        logger.info("game=%s new root word %r", self.id, self.session.root_word)
        return self.session.root_word

    async def submit(self, raw_input: str) -> Optional[Outcome]:
        """
        Normalize and validate one submission, applying it if accepted.
        Blank input is ignored and returns None.
        """
        word = normalize(raw_input)
        if not word:
            return None
        async with self._lock:
            session = self.session
            if session is None:
                raise SessionNotStartedError(f"game {self.id} has not been started")
            outcome = await validate(
                word, session, self.oracle,
                language=self.language, timeout=self.oracle_timeout,
            )
            session.apply(word, outcome)
        if isinstance(outcome, Accepted):
            logger.info("game=%s accepted %r (+%s, score=%s)", self.id, word, outcome.points, session.score)
        else:
            logger.debug("game=%s rejected %r: %s", self.id, word, outcome.reason)
        return outcome

    def current_score(self) -> int:
        return self.session.score if self.session else 0

    def used_words(self) -> List[str]:
        return list(self.session.used_words) if self.session else []

    def to_state(self) -> SessionState:
        return SessionState(
            id=self.id,
            rootWord=self.session.root_word if self.session else None,
            score=self.current_score(),
            usedWords=self.used_words(),
            status=self.status,  # type: ignore
        )

class GameManager:
    def __init__(
            self,
            root_words: Sequence[str],
            oracle: DictionaryOracle,
            *,
            language: str = DEFAULT_LANGUAGE,
            oracle_timeout: Optional[float] = None,
    ):
        self.root_words = list(root_words)
        self.oracle = oracle
        self.language = language
        self.oracle_timeout = oracle_timeout
        # REST sessions live until DELETE /sessions/{id}; websocket sessions end with the connection
        self.games: Dict[str, Game] = {}

    def create(self, game_id: Optional[str] = None) -> Game:
        game_id = game_id or uuid.uuid4().hex
        game = Game(
            game_id, self.root_words, self.oracle,
            language=self.language, oracle_timeout=self.oracle_timeout,
        )
        self.games[game_id] = game
        return game

    def get(self, game_id: str) -> Optional[Game]:
        return self.games.get(game_id)

    def remove(self, game_id: str) -> bool:
        return self.games.pop(game_id, None) is not None
