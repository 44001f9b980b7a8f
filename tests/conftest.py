# tests/conftest.py
"""Shared test fixtures."""

from __future__ import annotations

from collections.abc import Callable

import pytest

from charprobe.charsetprober import CharSetProber
from charprobe.enums import ProbingState

FeedChunks = Callable[[CharSetProber, bytes, int], ProbingState]


@pytest.fixture
def feed_chunks() -> FeedChunks:
    """Feed *data* to *prober* in slices of *size* bytes.

    Slices are passed as ``(buffer, offset, length)`` ranges over the one
    buffer, the way a caller reading into a fixed buffer would.
    """

    def _feed(prober: CharSetProber, data: bytes, size: int) -> ProbingState:
        state = prober.state
        for offset in range(0, len(data), size):
            state = prober.feed(data, offset, min(size, len(data) - offset))
        return state

    return _feed


@pytest.fixture(scope="session")
def samples() -> dict[str, str]:
    """Short everyday texts, keyed by language."""
    return {
        "english": (
            "The quick brown fox jumps over the lazy dog. "
            "Pack my box with five dozen liquor jugs."
        ),
        "russian": (
            "Сегодня хорошая погода, и мы решили пойти гулять в парк. "
            "Там было много людей, которые читали книги и играли с детьми. "
            "Я очень люблю такие тихие вечера в нашем старом городе."
        ),
        "greek": (
            "Η γρήγορη καφέ αλεπού πηδάει πάνω από τον τεμπέλη σκύλο. "
            "Καλημέρα σας, τι κάνετε σήμερα; Ο καιρός είναι πολύ ωραίος "
            "και τα παιδιά παίζουν στην αυλή του σχολείου."
        ),
        "french": (
            "Les élèves étaient très contents de la fête organisée à l'école. "
            "Après le déjeuner, ils ont joué dans la forêt près du château "
            "et ont goûté une crème brûlée préparée par leur maître."
        ),
        "czech": (
            "Příliš žluťoučký kůň úpěl ďábelské ódy. Dnes je krásný den "
            "a děti si hrají na zahradě. Večer půjdeme společně do divadla "
            "a potom si dáme večeři v malé restauraci."
        ),
        "japanese": (
            "これは日本語のテキストです。今日はいい天気ですね。"
            "わたしはまいにちがっこうにいきます。"
        ),
        "korean": (
            "안녕하세요. 이것은 한국어 텍스트입니다. "
            "오늘은 날씨가 좋습니다. 우리는 학교에 갑니다."
        ),
        "chinese_simplified": "这是中文测试文本，用于并发检测。我们正在学习中文。",
        "chinese_traditional": "這是繁體中文的測試文字，我們正在檢查編碼。",
    }
