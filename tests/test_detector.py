# tests/test_detector.py
from __future__ import annotations

import logging

import pytest

from charprobe.detector import UniversalDetector
from charprobe.enums import LanguageFilter
from charprobe.latin1prober import Latin1Prober
from charprobe.pureprober import PureAsciiProber
from charprobe.sbcsgroupprober import SBCSGroupProber

NONE_RESULT = {"encoding": None, "confidence": 0.0, "language": None}


def test_basic_lifecycle():
    detector = UniversalDetector()
    detector.feed(b"Hello world")
    result = detector.close()
    assert result == {"encoding": "ascii", "confidence": 1.0, "language": None}
    assert detector.result == result


def test_result_before_close():
    detector = UniversalDetector()
    detector.feed(b"Hello world")
    assert detector.result == NONE_RESULT


def test_close_without_data():
    detector = UniversalDetector()
    assert detector.close() == NONE_RESULT


def test_empty_chunk_is_not_data():
    detector = UniversalDetector()
    detector.feed(b"")
    assert detector.close() == NONE_RESULT


def test_reset():
    detector = UniversalDetector()
    detector.feed(b"Hello world")
    detector.close()
    detector.reset()
    assert detector.result == NONE_RESULT
    assert detector.done is False


def test_done_property():
    detector = UniversalDetector()
    assert detector.done is False


def test_feed_after_close_raises():
    detector = UniversalDetector()
    detector.feed(b"Hello")
    detector.close()
    with pytest.raises(ValueError):
        detector.feed(b"more data")


def test_reset_allows_new_detection():
    detector = UniversalDetector()
    detector.feed(b"Hello \x1b$B$3$s$K$A$O\x1b(B World")
    assert detector.close()["encoding"] == "ISO-2022-JP"

    detector.reset()
    detector.feed("Привет, мир! Это проверка.".encode())
    assert detector.close()["encoding"] == "utf-8"


def test_found_it_ends_detection():
    detector = UniversalDetector()
    detector.feed("Привет, мир! Это проверка.".encode())
    assert detector.done is True
    detector.feed(b"\xff\xfe more bytes that are ignored")
    assert detector.close() == {
        "encoding": "utf-8",
        "confidence": 1.0,
        "language": None,
    }


def test_escape_encoding_result():
    detector = UniversalDetector()
    detector.feed(b"Hello \x1b$B$3$s$K$A$O\x1b(B World")
    assert detector.done is True
    assert detector.close() == {
        "encoding": "ISO-2022-JP",
        "confidence": 1.0,
        "language": "Japanese",
    }


def test_hz_result():
    detector = UniversalDetector()
    detector.feed(b"Hello ~{<:Ky2;S{#,NpJ)!#~} World")
    assert detector.close()["encoding"] == "HZ-GB-2312"


def test_utf16_without_bom():
    detector = UniversalDetector()
    detector.feed("A plain sentence, long enough to count.".encode("utf-16-le"))
    assert detector.close() == {
        "encoding": "UTF-16LE",
        "confidence": 0.85,
        "language": None,
    }


def test_multiple_feeds():
    detector = UniversalDetector()
    data = "Héllo wörld café àéîõü".encode()
    chunk_size = 5
    for i in range(0, len(data), chunk_size):
        detector.feed(data[i : i + chunk_size])
    assert detector.close()["encoding"] == "utf-8"


def test_close_idempotent():
    detector = UniversalDetector()
    detector.feed(b"Hello world, this is enough text. " * 3)
    result1 = detector.close()
    result2 = detector.close()
    assert result1 == result2


# -- max_bytes --


def test_done_when_max_bytes_reached():
    """Done is set to True when max_bytes have been fed."""
    detector = UniversalDetector(max_bytes=50)
    detector.feed(b"x" * 30)
    assert detector.done is False
    detector.feed(b"x" * 20)
    assert detector.done is True


def test_done_not_set_before_max_bytes():
    detector = UniversalDetector(max_bytes=100)
    detector.feed(b"Hello world")
    assert detector.done is False


def test_bytes_past_max_bytes_are_not_examined():
    detector = UniversalDetector(max_bytes=5)
    detector.feed(b"Hello\xff\xfe\xfd")
    assert detector.close()["encoding"] == "ascii"


def test_max_bytes_across_feeds():
    detector = UniversalDetector(max_bytes=8)
    detector.feed(b"Hello")
    detector.feed(b"abc\x1b")
    assert detector.close()["encoding"] == "ascii"


@pytest.mark.parametrize("value", [0, -1, 2.5, True])
def test_invalid_max_bytes_raises(value):
    with pytest.raises(ValueError, match="max_bytes"):
        UniversalDetector(max_bytes=value)


@pytest.mark.parametrize("value", [-0.1, 1.1, "0.5"])
def test_invalid_threshold_raises(value):
    with pytest.raises(ValueError, match="minimum_threshold"):
        UniversalDetector(minimum_threshold=value)


def test_properties():
    detector = UniversalDetector(max_bytes=10, minimum_threshold=0.5)
    assert detector.max_bytes == 10
    assert detector.minimum_threshold == 0.5


# -- thresholds --


def test_nothing_above_threshold():
    detector = UniversalDetector(minimum_threshold=1.0)
    detector.feed(b"Hello world")
    assert detector.close() == NONE_RESULT


def test_shortcut_result_ignores_threshold():
    detector = UniversalDetector(minimum_threshold=0.9)
    detector.feed("A plain sentence, long enough to count.".encode("utf-16-le"))
    assert detector.close()["encoding"] == "UTF-16LE"


# -- ranges --


def test_feed_range():
    detector = UniversalDetector()
    detector.feed(b"\xff\xffHello\xff", 2, 5)
    assert detector.close()["encoding"] == "ascii"


@pytest.mark.parametrize(("offset", "length"), [(-1, None), (0, 100), (10, 0)])
def test_feed_range_out_of_bounds(offset, length):
    detector = UniversalDetector()
    with pytest.raises(ValueError):
        detector.feed(b"Hello", offset, length)


@pytest.mark.parametrize("wrap", [bytearray, memoryview])
def test_bytes_like_input(wrap):
    detector = UniversalDetector()
    detector.feed(wrap(b"Hello world"))
    assert detector.close()["encoding"] == "ascii"


# -- probers --


def test_not_me_probers_are_dropped():
    detector = UniversalDetector()
    detector.feed(b"caf\xe9")
    assert not any(
        isinstance(prober, PureAsciiProber) for prober in detector.charset_probers
    )


def test_cjk_filter_skips_single_byte_probers():
    detector = UniversalDetector(lang_filter=LanguageFilter.CJK)
    assert not any(
        isinstance(prober, (SBCSGroupProber, Latin1Prober))
        for prober in detector.charset_probers
    )


def test_non_cjk_filter_never_reports_cjk(samples):
    detector = UniversalDetector(lang_filter=LanguageFilter.NON_CJK)
    detector.feed(samples["japanese"].encode("shift_jis"))
    assert detector.close()["encoding"] != "SHIFT_JIS"


def test_leaf_results():
    detector = UniversalDetector()
    assert detector.leaf_results() == []
    detector.feed(b"Hello world")
    encodings = [result.encoding for result in detector.leaf_results()]
    assert encodings[0] == "ascii"
    assert "utf-8" in encodings
    assert "Windows-1252" in encodings


@pytest.mark.parametrize(
    ("sample", "codec"),
    [
        ("english", "ascii"),
        ("russian", "utf-8"),
        ("russian", "cp1251"),
        ("russian", "koi8_r"),
        ("greek", "iso8859_7"),
        ("french", "cp1252"),
        ("japanese", "shift_jis"),
        ("korean", "euc_kr"),
        ("english", "utf-16-be"),
    ],
)
@pytest.mark.parametrize("chunk_size", [1, 7, 64])
def test_chunked_feed_matches_single_feed(samples, sample, codec, chunk_size):
    data = samples[sample].encode(codec)
    expected = UniversalDetector()
    expected.feed(data)
    expected.close()

    detector = UniversalDetector()
    for i in range(0, len(data), chunk_size):
        detector.feed(data[i : i + chunk_size])
    assert detector.close() == expected.result


# -- logging --


def test_logs_when_no_data(caplog):
    with caplog.at_level(logging.DEBUG, logger="charprobe"):
        UniversalDetector().close()
    assert "no data received!" in caplog.text


def test_logs_prober_status_below_threshold(caplog):
    detector = UniversalDetector(minimum_threshold=1.0)
    detector.feed(b"Hello world")
    with caplog.at_level(logging.DEBUG, logger="charprobe"):
        detector.close()
    assert "no probers hit minimum threshold" in caplog.text
    assert "ascii confidence = 1.0" in caplog.text


def test_logs_shortcut(caplog):
    with caplog.at_level(logging.DEBUG, logger="charprobe"):
        detector = UniversalDetector()
        detector.feed(b"\x1b$B$3$s")
    assert "prober hit the shortcut" in caplog.text


def test_found_it_flag():
    detector = UniversalDetector()
    detector.feed(b"Hello world")
    detector.close()
    assert detector.found_it is False

    detector.reset()
    detector.feed(b"\x1b$B$3$s")
    assert detector.found_it is True
    detector.reset()
    assert detector.found_it is False
