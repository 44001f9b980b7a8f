"""
The capability contract shared by every prober in charprobe.
"""

from __future__ import annotations

import abc
import logging

from charprobe._utils import SHORTCUT_THRESHOLD, _slice_range
from charprobe.charsets import Charset, get_charset
from charprobe.enums import LanguageFilter, ProbingState


class CharSetProber(abc.ABC):
    """A stateful, single-pass judge of whether a byte stream is one charset.

    Subclasses implement :meth:`_feed` over an already validated chunk;
    :meth:`feed` takes care of range checking and of keeping the terminal
    states (``NOT_ME`` and ``FOUND_IT``) sticky until :meth:`reset`.
    """

    SHORTCUT_THRESHOLD = SHORTCUT_THRESHOLD

    def __init__(self, *, lang_filter: LanguageFilter = LanguageFilter.ALL) -> None:
        self._state = ProbingState.DETECTING
        self.lang_filter = lang_filter
        self.logger = logging.getLogger(__name__)

    def reset(self) -> None:
        self._state = ProbingState.DETECTING

    @property
    @abc.abstractmethod
    def charset_name(self) -> str | None:
        """Name of the charset this prober tests for."""

    @property
    def charset(self) -> Charset | None:
        """Return the Charset metadata for this prober's encoding."""
        name = self.charset_name
        if name is None:
            return None
        return get_charset(name)

    @property
    def language(self) -> str | None:
        return None

    @property
    def state(self) -> ProbingState:
        return self._state

    def feed(
        self,
        byte_str: bytes | bytearray | memoryview,
        offset: int = 0,
        length: int | None = None,
    ) -> ProbingState:
        """Consume ``byte_str[offset:offset + length]`` and return the new state.

        :param byte_str: Buffer holding the next chunk of the stream.
        :param offset: Index of the first byte of the chunk.
        :param length: Number of bytes in the chunk; ``None`` means up to the
            end of *byte_str*.
        :raises ValueError: If the range does not lie within *byte_str*.
        """
        data = _slice_range(byte_str, offset, length)
        if self._state != ProbingState.DETECTING or not data:
            return self._state
        return self._feed(data)

    @abc.abstractmethod
    def _feed(self, data: bytes) -> ProbingState:
        """Update running statistics with *data* and return the new state."""

    @abc.abstractmethod
    def get_confidence(self, status: list[str] | None = None) -> float:
        """Return how well everything fed so far fits this prober's charset.

        :param status: Optional list that receives human-readable diagnostic
            lines.  It has no effect on the returned value.
        """
