import asyncio

import pytest

from wordscramble.game_logic import GameSession
from wordscramble.managers.game import Game

SILKWORM_WORDS = {"silk", "sworm", "low", "silkworm"}


class FakeOracle:
    """Deterministic dictionary: knows exactly `words`, optionally slow."""

    def __init__(self, words, delay: float = 0.0, language: str = "en"):
        self.words = set(words)
        self.delay = delay
        self.language = language
        self.calls = []
        self.in_flight = 0
        self.max_in_flight = 0

    async def is_real_word(self, word: str, language: str) -> bool:
        self.calls.append(word)
        self.in_flight += 1
        self.max_in_flight = max(self.max_in_flight, self.in_flight)
        try:
            if self.delay:
                await asyncio.sleep(self.delay)
            return language == self.language and word in self.words
        finally:
            self.in_flight -= 1


@pytest.fixture()
def oracle():
    return FakeOracle(SILKWORM_WORDS)


@pytest.fixture()
def session():
    return GameSession("silkworm")


@pytest.fixture()
def game(oracle):
    g = Game("test", ["silkworm"], oracle)
    g.start_session()
    return g
