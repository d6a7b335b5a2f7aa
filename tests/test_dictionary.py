import asyncio
from pathlib import Path

import pytest

from conftest import FakeOracle
from wordscramble.dictionary import DictionaryService, DictionaryUnavailableError, check_word


def test_default_service_knows_demo_words():
    service = DictionaryService()
    assert service.is_valid("silk")
    assert service.is_valid("SILK")
    assert not service.is_valid("")
    assert not service.is_valid("qqqq")


def test_service_checks_language():
    service = DictionaryService({"silk"}, language="en")
    assert asyncio.run(service.is_real_word("silk", "en")) is True
    assert asyncio.run(service.is_real_word("silk", "fr")) is False


def test_service_from_file(tmp_path: Path):
    p = tmp_path / "words.txt"
    p.write_text("Apple\n\nbanana\n", encoding="utf-8")
    service = DictionaryService.from_file(p)
    assert len(service) == 2
    assert service.is_valid("apple")
    assert not service.is_valid("cherry")


def test_check_word_without_timeout():
    oracle = FakeOracle({"silk"})
    assert asyncio.run(check_word(oracle, "silk", "en")) is True
    assert asyncio.run(check_word(oracle, "milk", "en", timeout=0)) is False


def test_check_word_times_out():
    oracle = FakeOracle({"silk"}, delay=1.0)
    with pytest.raises(DictionaryUnavailableError):
        asyncio.run(check_word(oracle, "silk", "en", timeout=0.01))


def test_service_from_file_rejects_undecodable_bytes(tmp_path: Path):
    p = tmp_path / "words.txt"
    p.write_bytes(b"apple\nsi\xfflk\n")
    with pytest.raises(UnicodeDecodeError):
        DictionaryService.from_file(p)
