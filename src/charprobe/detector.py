"""UniversalDetector: streaming charset detection over a set of probers."""

from __future__ import annotations

import logging

from charprobe._utils import (
    DEFAULT_MAX_BYTES,
    MINIMUM_THRESHOLD,
    _slice_range,
    _validate_max_bytes,
    _validate_threshold,
)
from charprobe.charsetgroupprober import CharSetGroupProber
from charprobe.charsetprober import CharSetProber
from charprobe.enums import LanguageFilter, ProbingState
from charprobe.escprober import EscCharSetProber
from charprobe.latin1prober import Latin1Prober
from charprobe.mbcsgroupprober import MBCSGroupProber
from charprobe.pureprober import PureAsciiProber
from charprobe.result import NONE_RESULT, DetectionResult
from charprobe.sbcsgroupprober import SBCSGroupProber
from charprobe.utf1632prober import UTF1632Prober

#: Confidence at or above which a result is reported as certain.
SURE_CONFIDENCE = 0.99


def _reported_confidence(confidence: float) -> float:
    return 1.0 if confidence >= SURE_CONFIDENCE else confidence


def result_for(prober: CharSetProber) -> DetectionResult:
    """Build the :class:`DetectionResult` a prober currently stands for."""
    return DetectionResult(
        encoding=prober.charset_name,
        confidence=_reported_confidence(prober.get_confidence()),
        language=prober.language,
    )


class UniversalDetector:
    """Streaming character encoding detector.

    Feeds every chunk to each live prober in a fixed order.  A prober that
    reports ``NOT_ME`` is dropped; the first prober to report ``FOUND_IT``
    ends detection.  Otherwise :meth:`close` picks the most confident
    survivor above the minimum threshold.

    Typical usage::

        detector = UniversalDetector()
        for chunk in chunks:
            detector.feed(chunk)
            if detector.done:
                break
        result = detector.close()
    """

    MINIMUM_THRESHOLD = MINIMUM_THRESHOLD

    def __init__(
        self,
        lang_filter: LanguageFilter = LanguageFilter.ALL,
        max_bytes: int = DEFAULT_MAX_BYTES,
        minimum_threshold: float = MINIMUM_THRESHOLD,
    ) -> None:
        """Initialize the detector.

        :param lang_filter: Which families of probers to run.  Single-byte
            probers only run when :attr:`LanguageFilter.NON_CJK` is included.
        :param max_bytes: Maximum number of bytes passed on to the probers
            across all :meth:`feed` calls.
        :param minimum_threshold: Confidence a prober must exceed to be
            reported by :meth:`close`.
        :raises ValueError: If *max_bytes* or *minimum_threshold* is invalid.
        """
        _validate_max_bytes(max_bytes)
        _validate_threshold(minimum_threshold)
        self.lang_filter = lang_filter
        self._max_bytes = max_bytes
        self._minimum_threshold = minimum_threshold
        self.logger = logging.getLogger(__name__)
        self._all_probers = self._build_probers()
        self._probers: list[CharSetProber] = []
        self._bytes_fed = 0
        self._got_data = False
        self._done = False
        self._closed = False
        self._found_it = False
        self._result: DetectionResult | None = None
        self.reset()

    def _build_probers(self) -> list[CharSetProber]:
        probers: list[CharSetProber] = [
            PureAsciiProber(),
            EscCharSetProber(self.lang_filter),
            UTF1632Prober(),
            MBCSGroupProber(self.lang_filter),
        ]
        if self.lang_filter & LanguageFilter.NON_CJK:
            probers.append(SBCSGroupProber())
            probers.append(Latin1Prober())
        return probers

    def reset(self) -> None:
        """Reset the detector to its initial state for reuse."""
        for prober in self._all_probers:
            prober.reset()
        self._probers = list(self._all_probers)
        self._bytes_fed = 0
        self._got_data = False
        self._done = False
        self._closed = False
        self._found_it = False
        self._result = None

    def feed(
        self,
        byte_str: bytes | bytearray | memoryview,
        offset: int = 0,
        length: int | None = None,
    ) -> None:
        """Feed ``byte_str[offset:offset + length]`` to the live probers.

        :param byte_str: The next chunk of bytes to examine.
        :param offset: Index of the first byte of the chunk.
        :param length: Number of bytes in the chunk; ``None`` means up to the
            end of *byte_str*.
        :raises ValueError: If the range does not lie within *byte_str*, or
            if called after :meth:`close` without a :meth:`reset`.
        """
        if self._closed:
            msg = "feed() called after close() without reset()"
            raise ValueError(msg)
        data = _slice_range(byte_str, offset, length)
        if self._done:
            return

        remaining = self._max_bytes - self._bytes_fed
        if remaining <= 0:
            return
        data = data[:remaining]
        if not data:
            return
        self._got_data = True
        self._bytes_fed += len(data)

        for prober in list(self._probers):
            state = prober.feed(data)
            if state == ProbingState.FOUND_IT:
                self._result = result_for(prober)
                self._found_it = True
                self._done = True
                self.logger.debug(
                    "%s prober hit the shortcut: %s",
                    prober.charset_name,
                    self._result,
                )
                return
            if state == ProbingState.NOT_ME:
                self._probers.remove(prober)

        if self._bytes_fed >= self._max_bytes:
            self.logger.debug("max_bytes of %d reached", self._max_bytes)
            self._done = True

    def close(self) -> dict[str, str | float | None]:
        """Stop analyzing the current document and come up with a final
        prediction.

        :returns: A dictionary with keys ``"encoding"``, ``"confidence"``,
            and ``"language"``.
        """
        if self._closed:
            return self.result
        self._closed = True
        self._done = True

        if self._result is not None:
            return self.result

        if not self._got_data:
            self.logger.debug("no data received!")
            return self.result

        best_prober = None
        max_prober_confidence = self._minimum_threshold
        for prober in self._probers:
            confidence = prober.get_confidence()
            if confidence > max_prober_confidence:
                max_prober_confidence = confidence
                best_prober = prober
        if best_prober is not None:
            self._result = result_for(best_prober)
        elif self.logger.getEffectiveLevel() <= logging.DEBUG:
            self.logger.debug("no probers hit minimum threshold")
            for prober in self._probers:
                status: list[str] = []
                confidence = prober.get_confidence(status)
                self.logger.debug(
                    "%s %s confidence = %s",
                    prober.charset_name,
                    prober.language,
                    confidence,
                )
                for line in status:
                    self.logger.debug("    %s", line)
        return self.result

    def leaf_results(self) -> list[DetectionResult]:
        """Return the current result of every surviving leaf prober.

        Group probers are expanded into their active children.  Nothing is
        returned before the first non-empty :meth:`feed`.
        """
        if not self._got_data:
            return []
        results = []
        stack = list(reversed(self._probers))
        while stack:
            prober = stack.pop()
            if isinstance(prober, CharSetGroupProber):
                stack.extend(reversed(prober.active_probers))
                continue
            if prober.state == ProbingState.NOT_ME or prober.charset_name is None:
                continue
            results.append(result_for(prober))
        return results

    @property
    def done(self) -> bool:
        """Whether detection is complete and no more data is needed."""
        return self._done

    @property
    def found_it(self) -> bool:
        """Whether a prober reported ``FOUND_IT`` and ended detection early."""
        return self._found_it

    @property
    def result(self) -> dict[str, str | float | None]:
        """The current best detection result."""
        if self._result is not None:
            return self._result.to_dict()
        return NONE_RESULT.to_dict()

    @property
    def charset_probers(self) -> list[CharSetProber]:
        """The top-level probers that have not been eliminated."""
        return list(self._probers)

    @property
    def max_bytes(self) -> int:
        return self._max_bytes

    @property
    def minimum_threshold(self) -> float:
        return self._minimum_threshold
