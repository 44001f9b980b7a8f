"""Streaming character encoding detection built from independent probers."""

from __future__ import annotations

from charprobe._utils import (
    DEFAULT_MAX_BYTES,
    MINIMUM_THRESHOLD,
    _validate_max_bytes,
    _validate_threshold,
)
from charprobe.charsetprober import CharSetProber
from charprobe.detector import UniversalDetector
from charprobe.enums import LanguageFilter, ProbingState
from charprobe.pureprober import PureAsciiProber

__version__ = "1.0.0"
__all__ = [
    "CharSetProber",
    "LanguageFilter",
    "ProbingState",
    "PureAsciiProber",
    "UniversalDetector",
    "detect",
    "detect_all",
]


def _run_detector(
    byte_str: bytes | bytearray | memoryview,
    lang_filter: LanguageFilter,
    max_bytes: int,
    minimum_threshold: float,
) -> UniversalDetector:
    detector = UniversalDetector(
        lang_filter=lang_filter,
        max_bytes=max_bytes,
        minimum_threshold=minimum_threshold,
    )
    detector.feed(byte_str)
    detector.close()
    return detector


def detect(
    byte_str: bytes | bytearray | memoryview,
    lang_filter: LanguageFilter = LanguageFilter.ALL,
    max_bytes: int = DEFAULT_MAX_BYTES,
) -> dict[str, str | float | None]:
    """Detect the encoding of the given byte string.

    :param byte_str: The complete document to examine.
    :param lang_filter: Which families of probers to run.
    :param max_bytes: Maximum number of bytes to examine.
    :returns: A dictionary with keys ``"encoding"``, ``"confidence"``, and
        ``"language"``.  ``encoding`` is ``None`` when no prober is confident
        enough.
    """
    _validate_max_bytes(max_bytes)
    return _run_detector(byte_str, lang_filter, max_bytes, MINIMUM_THRESHOLD).result


def detect_all(
    byte_str: bytes | bytearray | memoryview,
    ignore_threshold: bool = False,
    lang_filter: LanguageFilter = LanguageFilter.ALL,
    max_bytes: int = DEFAULT_MAX_BYTES,
    minimum_threshold: float = MINIMUM_THRESHOLD,
) -> list[dict[str, str | float | None]]:
    """Detect all possible encodings of the given byte string.

    Every prober that was not eliminated contributes one candidate, best
    first; an encoding reported by several probers is listed once, with its
    highest confidence.

    When *ignore_threshold* is False (the default), candidates with
    confidence <= *minimum_threshold* are filtered out.  If all candidates
    are below the threshold, the full unfiltered list is returned as a
    fallback so the caller always receives at least one result.

    When a prober ended detection early with a definitive match, that match
    is the only candidate, exactly as :func:`detect` reports it.
    """
    _validate_max_bytes(max_bytes)
    _validate_threshold(minimum_threshold)
    detector = _run_detector(byte_str, lang_filter, max_bytes, minimum_threshold)
    if detector.found_it:
        return [detector.result]
    results = sorted(detector.leaf_results(), key=lambda r: -r.confidence)

    dicts = []
    seen: set[str | None] = set()
    for result in results:
        if result.encoding in seen:
            continue
        seen.add(result.encoding)
        dicts.append(result.to_dict())
    if not ignore_threshold:
        filtered = [d for d in dicts if d["confidence"] > minimum_threshold]
        if filtered:
            dicts = filtered
    return dicts or [detector.result]
