import random
from pathlib import Path

from wordscramble.wordlist import (
    DEFAULT_WORDLIST_PATH,
    FALLBACK_ROOT_WORD,
    load_root_words,
    select_root_word,
)


def test_load_root_words_drops_blank_lines(tmp_path: Path):
    p = tmp_path / "start.txt"
    p.write_text("Silkworm\n\n  blizzard \n\nairplane\n", encoding="utf-8")
    assert load_root_words(p) == ["silkworm", "blizzard", "airplane"]


def test_load_root_words_missing_file(tmp_path: Path):
    assert load_root_words(tmp_path / "nope.txt") == []


def test_bundled_word_list_loads():
    words = load_root_words()
    assert DEFAULT_WORDLIST_PATH.exists()
    assert "silkworm" in words
    assert all(w and w == w.lower() for w in words)


def test_select_root_word_stays_in_source():
    source = ["blizzard", "airplane", "notebook"]
    snapshot = list(source)
    rng = random.Random(0)
    picks = {select_root_word(source, rng) for _ in range(100)}
    assert picks <= set(source)
    assert source == snapshot


def test_select_root_word_fallback():
    assert select_root_word([]) == FALLBACK_ROOT_WORD
    assert select_root_word(None) == FALLBACK_ROOT_WORD
