# tests/test_sbcs.py
"""Tests for single-byte language models and their prober."""

from __future__ import annotations

import pytest

from charprobe import detect
from charprobe.charsets import get_charset
from charprobe.enums import CharacterCategory, ProbingState, SequenceLikelihood
from charprobe.langmodels import HEBREW_MODEL, LANGUAGE_MODELS, LanguageModel
from charprobe.sbcharsetprober import SequenceStats, SingleByteCharSetProber
from charprobe.sbcsgroupprober import SBCSGroupProber

RUSSIAN_1251 = next(
    model
    for model in LANGUAGE_MODELS
    if model.language == "Russian" and model.charset_name == "Windows-1251"
)

# Ten letters: the first three are frequent, the first seven common.
TOY_MODEL = LanguageModel(
    charset_name="Windows-1251",
    language="Toy",
    codec="cp1251",
    alphabet="абвгдежзик",
)


def _run(model: LanguageModel, data: bytes) -> SingleByteCharSetProber:
    prober = SingleByteCharSetProber(model)
    prober.feed(data)
    return prober


# ---------------------------------------------------------------------------
# Language models
# ---------------------------------------------------------------------------


def test_alphabets_have_no_duplicate_letters() -> None:
    for model in LANGUAGE_MODELS:
        assert len(set(model.alphabet)) == len(model.alphabet), model


def test_every_model_codec_round_trips_its_alphabet() -> None:
    for model in LANGUAGE_MODELS:
        categories = model.char_to_category
        for index, letter in enumerate(model.alphabet):
            try:
                encoded = letter.encode(model.codec)
            except UnicodeEncodeError:
                continue
            assert categories[encoded[0]] == index, (model, letter)


def test_frequent_and_common_counts() -> None:
    assert TOY_MODEL.frequent_count == 3
    assert TOY_MODEL.common_count == 7
    assert RUSSIAN_1251.frequent_count == 11
    assert RUSSIAN_1251.common_count == 24


@pytest.mark.parametrize(
    ("byte", "category", "upper"),
    [
        (0xEE, 0, False),  # о
        (0xCE, 0, True),  # О
        (0x41, CharacterCategory.ASCII_LETTER, False),
        (0x20, CharacterCategory.MARKER, False),
        (0x2E, CharacterCategory.MARKER, False),
        (0x31, CharacterCategory.MARKER, False),
        (0x01, CharacterCategory.CONTROL, False),
        (0xB1, CharacterCategory.SYMBOL, False),  # ±
        (0xB3, CharacterCategory.FOREIGN, False),  # і
        (0x98, CharacterCategory.UNDEFINED, False),
    ],
)
def test_russian_categories(byte: int, category: int, upper: bool) -> None:
    assert RUSSIAN_1251.char_to_category[byte] == category
    assert RUSSIAN_1251.is_upper[byte] is upper


def test_latin_alphabets_claim_ascii_letters() -> None:
    french = next(model for model in LANGUAGE_MODELS if model.language == "French")
    assert french.char_to_category[ord("e")] == 0
    assert french.char_to_category[ord("E")] == 0
    assert french.is_upper[ord("E")]


def test_combining_marks_are_transparent() -> None:
    # HEBREW POINT SHEVA
    assert HEBREW_MODEL.char_to_category[0xC0] == CharacterCategory.TRANSPARENT


def _model(language: str, charset_name: str) -> LanguageModel:
    return next(
        model
        for model in LANGUAGE_MODELS
        if model.language == language and model.charset_name == charset_name
    )


def test_every_model_charset_is_registered() -> None:
    for model in (*LANGUAGE_MODELS, HEBREW_MODEL):
        assert get_charset(model.charset_name).python_codec == model.codec, model


@pytest.mark.parametrize(
    ("language", "charset_name"),
    [
        ("Croatian", "Windows-1250"),
        ("Slovak", "ISO-8859-2"),
        ("Slovene", "ISO-8859-2"),
        ("Romanian", "ISO-8859-16"),
        ("Latvian", "ISO-8859-10"),
        ("Lithuanian", "ISO-8859-10"),
        ("Irish", "ISO-8859-1"),
        ("Finnish", "ISO-8859-15"),
        ("Maltese", "ISO-8859-3"),
        ("Vietnamese", "Windows-1258"),
        ("Polish", "MacCentralEurope"),
    ],
)
def test_model_exists(language: str, charset_name: str) -> None:
    assert _model(language, charset_name).language == language


def test_romanian_s_comma_and_s_cedilla() -> None:
    # ISO-8859-16 has the comma-below forms, Windows-1250 only the cedilla
    iso = _model("Romanian", "ISO-8859-16")
    windows = _model("Romanian", "Windows-1250")
    assert iso.char_to_category["ș".encode("iso8859_16")[0]] == iso.alphabet.index("ș")
    assert windows.char_to_category["ş".encode("cp1250")[0]] == windows.alphabet.index(
        "ş"
    )


def test_vietnamese_tone_marks_are_transparent() -> None:
    vietnamese = _model("Vietnamese", "Windows-1258")
    # COMBINING GRAVE ACCENT and COMBINING DOT BELOW
    assert vietnamese.char_to_category[0xCC] == CharacterCategory.TRANSPARENT
    assert vietnamese.char_to_category[0xF2] == CharacterCategory.TRANSPARENT
    marked = _run(vietnamese, "Viê\u0323t Nam ngươ\u0300i ".encode("cp1258"))
    plain = _run(vietnamese, "Viêt Nam ngươi ".encode("cp1258"))
    assert marked.get_confidence() == plain.get_confidence()


def test_polish_fits_mac_central_europe() -> None:
    data = "Zażółć gęślą jaźń. Pchnąć w tę łódź jeża lub ośm skrzyń fig.".encode(
        "mac_latin2"
    )
    fit = _run(_model("Polish", "MacCentralEurope"), data).get_confidence()
    misfit = _run(_model("Polish", "ISO-8859-2"), data).get_confidence()
    assert fit > misfit


# ---------------------------------------------------------------------------
# Pair ratings
# ---------------------------------------------------------------------------


@pytest.mark.parametrize(
    ("prev", "prev_upper", "order", "upper", "expected"),
    [
        (0, False, 1, False, SequenceLikelihood.POSITIVE),
        (0, True, 4, False, SequenceLikelihood.POSITIVE),
        (3, False, 5, False, SequenceLikelihood.LIKELY),
        (0, False, 8, False, SequenceLikelihood.LIKELY),
        (3, False, 8, False, SequenceLikelihood.UNLIKELY),
        (8, False, 9, False, SequenceLikelihood.UNLIKELY),
        (0, False, 1, True, SequenceLikelihood.UNLIKELY),
        (0, True, 1, True, SequenceLikelihood.LIKELY),
        (3, True, 4, True, SequenceLikelihood.UNLIKELY),
        (0, False, CharacterCategory.FOREIGN, False, SequenceLikelihood.NEGATIVE),
        (CharacterCategory.SYMBOL, False, 0, False, SequenceLikelihood.NEGATIVE),
        (CharacterCategory.ASCII_LETTER, False, 0, False, SequenceLikelihood.UNLIKELY),
        (CharacterCategory.ASCII_LETTER, False, CharacterCategory.ASCII_LETTER, False, None),
    ],
)
def test_rate(prev, prev_upper, order, upper, expected) -> None:
    prober = SingleByteCharSetProber(TOY_MODEL)
    assert prober._rate(prev, prev_upper, order, upper) == expected


def test_sequence_stats_confidence() -> None:
    stats = SequenceStats()
    assert stats.confidence() == 0.01
    stats.seq_counters[SequenceLikelihood.POSITIVE] = 3
    stats.seq_counters[SequenceLikelihood.LIKELY] = 4
    stats.total_seqs = 8
    stats.total_chars = 10
    stats.ctrl_chars = 1
    stats.common_chars = 5
    assert stats.confidence() == pytest.approx((3 + 1) / 8 * 0.9 * 0.5)


# ---------------------------------------------------------------------------
# Prober behaviour
# ---------------------------------------------------------------------------


def test_ascii_words_are_skipped() -> None:
    prober = _run(RUSSIAN_1251, b"plain english words only")
    assert prober.state == ProbingState.DETECTING
    assert prober.get_confidence() == 0.01


def test_undefined_byte_is_not_me() -> None:
    prober = _run(RUSSIAN_1251, "мир".encode("cp1251") + b"\x98")
    assert prober.state == ProbingState.NOT_ME
    assert prober.get_confidence() == 0.01


def test_pending_word_counts_toward_confidence() -> None:
    prober = _run(TOY_MODEL, "аба".encode("cp1251"))
    assert prober.get_confidence() == 0.99


def test_chunk_invariance(samples, feed_chunks) -> None:
    data = samples["russian"].encode("cp1251")
    whole = _run(RUSSIAN_1251, data)
    for size in (1, 2, 7, 64):
        chunked = SingleByteCharSetProber(RUSSIAN_1251)
        feed_chunks(chunked, data, size)
        assert chunked.get_confidence() == whole.get_confidence(), size


def test_positive_shortcut() -> None:
    prober = _run(TOY_MODEL, "аба ".encode("cp1251") * 600)
    assert prober.state == ProbingState.FOUND_IT


def test_negative_shortcut() -> None:
    prober = _run(TOY_MODEL, "ёёё ".encode("cp1251") * 600)
    assert prober.state == ProbingState.NOT_ME


def test_no_shortcut_before_enough_sequences() -> None:
    prober = _run(TOY_MODEL, "аба ".encode("cp1251") * 100)
    assert prober.state == ProbingState.DETECTING


def test_russian_text_fits_russian_better_than_koi8(samples) -> None:
    data = samples["russian"].encode("cp1251")
    koi8 = next(model for model in LANGUAGE_MODELS if model.codec == "koi8_r")
    fit = _run(RUSSIAN_1251, data).get_confidence()
    misfit = _run(koi8, data).get_confidence()
    assert fit > 0.5
    assert fit > misfit


def test_reset() -> None:
    prober = _run(RUSSIAN_1251, b"\x98")
    prober.reset()
    assert prober.state == ProbingState.DETECTING
    assert prober.get_confidence() == 0.01


def test_status_lines() -> None:
    prober = _run(TOY_MODEL, "аба ".encode("cp1251"))
    status: list[str] = []
    prober.get_confidence(status)
    assert status == ["Windows-1251 Toy confidence = 0.99 (2 sequences)"]


# ---------------------------------------------------------------------------
# Group prober and end-to-end detection
# ---------------------------------------------------------------------------


def test_group_has_one_prober_per_model() -> None:
    group = SBCSGroupProber()
    # plus the Hebrew prober, which covers both orders of one model
    assert len(group.probers) == len(LANGUAGE_MODELS) + 1


def test_group_reports_russian(samples) -> None:
    group = SBCSGroupProber()
    group.feed(samples["russian"].encode("cp1251"))
    group.get_confidence()
    assert group.charset_name == "Windows-1251"
    assert group.language == "Russian"


@pytest.mark.parametrize(
    ("sample", "codec", "expected"),
    [
        ("russian", "cp1251", {"Windows-1251"}),
        ("russian", "koi8_r", {"KOI8-R"}),
        ("greek", "iso8859_7", {"ISO-8859-7", "Windows-1253"}),
        ("french", "cp1252", {"Windows-1252"}),
        ("czech", "cp1250", {"Windows-1250"}),
    ],
)
def test_detect_single_byte_text(samples, sample: str, codec: str, expected) -> None:
    result = detect(samples[sample].encode(codec))
    assert result["encoding"] in expected
    assert result["confidence"] > 0.2
