from __future__ import annotations

from dataclasses import dataclass, field

from charprobe.charsetprober import CharSetProber
from charprobe.enums import CharacterCategory, ProbingState, SequenceLikelihood
from charprobe.langmodels import LanguageModel

# ASCII letters and every high byte make up words; anything else ends one.
_WORD_BYTES = frozenset([*range(0x41, 0x5B), *range(0x61, 0x7B), *range(0x80, 0x100)])

_NEGATIVE_CATEGORIES = (CharacterCategory.FOREIGN, CharacterCategory.SYMBOL)


@dataclass
class SequenceStats:
    """Running counts behind a single-byte prober's confidence."""

    seq_counters: list[int] = field(default_factory=lambda: [0] * 4)
    total_seqs: int = 0
    total_chars: int = 0
    ctrl_chars: int = 0
    common_chars: int = 0

    def add(self, other: SequenceStats) -> None:
        for likelihood, count in enumerate(other.seq_counters):
            self.seq_counters[likelihood] += count
        self.total_seqs += other.total_seqs
        self.total_chars += other.total_chars
        self.ctrl_chars += other.ctrl_chars
        self.common_chars += other.common_chars

    def confidence(self) -> float:
        if self.total_seqs <= 0 or self.total_chars <= 0:
            return 0.01
        r = (
            self.seq_counters[SequenceLikelihood.POSITIVE]
            + self.seq_counters[SequenceLikelihood.LIKELY] / 4
        ) / self.total_seqs
        r = r * (self.total_chars - self.ctrl_chars) / self.total_chars
        r = r * self.common_chars / self.total_chars
        return min(r, 0.99)


class SingleByteCharSetProber(CharSetProber):
    """Rates adjacent letter pairs against one :class:`LanguageModel`.

    Input is split into words: runs of ASCII letters and high bytes.  Words
    made only of ASCII letters say nothing about the code page and are
    skipped.  A word is scored once it is complete, so a word split across
    two chunks is scored exactly as if it had arrived in one.
    """

    SB_ENOUGH_REL_THRESHOLD = 1024  # 0.25 * SAMPLE_SIZE^2
    POSITIVE_SHORTCUT_THRESHOLD = 0.95
    NEGATIVE_SHORTCUT_THRESHOLD = 0.05

    def __init__(self, model: LanguageModel) -> None:
        super().__init__()
        self._model = model
        self._char_to_category = model.char_to_category
        self._is_upper = model.is_upper
        self._frequent_count = model.frequent_count
        self._common_count = model.common_count
        self._stats = SequenceStats()
        self._word = bytearray()
        self._word_has_high_byte = False
        self.reset()

    def reset(self) -> None:
        super().reset()
        self._stats = SequenceStats()
        self._word.clear()
        self._word_has_high_byte = False

    @property
    def charset_name(self) -> str:
        return self._model.charset_name

    @property
    def language(self) -> str:
        return self._model.language

    @property
    def model(self) -> LanguageModel:
        return self._model

    def _feed(self, data: bytes) -> ProbingState:
        char_to_category = self._char_to_category
        for byte in data:
            if byte in _WORD_BYTES:
                if char_to_category[byte] == CharacterCategory.UNDEFINED:
                    self.logger.debug(
                        "%s has no character for byte 0x%02X",
                        self.charset_name,
                        byte,
                    )
                    self._state = ProbingState.NOT_ME
                    break
                self._word.append(byte)
                if byte >= 0x80:
                    self._word_has_high_byte = True
                continue
            if self._end_word() != ProbingState.DETECTING:
                break

        return self._state

    def _end_word(self) -> ProbingState:
        if self._word_has_high_byte:
            self._stats.add(self._score_word(self._word))
        self._word.clear()
        self._word_has_high_byte = False

        if self._stats.total_seqs > self.SB_ENOUGH_REL_THRESHOLD:
            confidence = self._stats.confidence()
            if confidence > self.POSITIVE_SHORTCUT_THRESHOLD:
                self.logger.debug(
                    "%s confidence = %s, we have a winner",
                    self.charset_name,
                    confidence,
                )
                self._state = ProbingState.FOUND_IT
            elif confidence < self.NEGATIVE_SHORTCUT_THRESHOLD:
                self.logger.debug(
                    "%s confidence = %s, below negative shortcut threshold %s",
                    self.charset_name,
                    confidence,
                    self.NEGATIVE_SHORTCUT_THRESHOLD,
                )
                self._state = ProbingState.NOT_ME
        return self._state

    def _score_word(self, word: bytes | bytearray) -> SequenceStats:
        stats = SequenceStats()
        prev_order: int | None = None
        prev_upper = False
        for byte in word:
            order = self._char_to_category[byte]
            if order == CharacterCategory.TRANSPARENT:
                continue
            if order == CharacterCategory.MARKER:
                prev_order = None
                continue
            stats.total_chars += 1
            if order == CharacterCategory.CONTROL:
                stats.ctrl_chars += 1
                prev_order = None
                continue
            if order < self._common_count:
                stats.common_chars += 1
            upper = self._is_upper[byte]
            if prev_order is not None:
                likelihood = self._rate(prev_order, prev_upper, order, upper)
                if likelihood is not None:
                    stats.seq_counters[likelihood] += 1
                    stats.total_seqs += 1
            prev_order, prev_upper = order, upper
        return stats

    def _rate(
        self, prev_order: int, prev_upper: bool, order: int, upper: bool
    ) -> SequenceLikelihood | None:
        if prev_order in _NEGATIVE_CATEGORIES or order in _NEGATIVE_CATEGORIES:
            return SequenceLikelihood.NEGATIVE
        prev_ascii = prev_order == CharacterCategory.ASCII_LETTER
        curr_ascii = order == CharacterCategory.ASCII_LETTER
        if prev_ascii and curr_ascii:
            return None
        if prev_ascii or curr_ascii:
            return SequenceLikelihood.UNLIKELY
        if upper and not prev_upper:
            return SequenceLikelihood.UNLIKELY
        weight = self._weight(prev_order) + self._weight(order)
        if upper and prev_upper:
            if weight >= 3:
                return SequenceLikelihood.LIKELY
            return SequenceLikelihood.UNLIKELY
        if weight >= 3:
            return SequenceLikelihood.POSITIVE
        if weight == 2:
            return SequenceLikelihood.LIKELY
        return SequenceLikelihood.UNLIKELY

    def _weight(self, order: int) -> int:
        # 2 for frequent letters, 1 for common ones, 0 for the rest
        return (order < self._frequent_count) + (order < self._common_count)

    def get_confidence(self, status: list[str] | None = None) -> float:
        stats = self._stats
        if self._word_has_high_byte and self._state != ProbingState.NOT_ME:
            stats = SequenceStats()
            stats.add(self._stats)
            stats.add(self._score_word(self._word))
        if self._state == ProbingState.NOT_ME:
            confidence = 0.01
        else:
            confidence = stats.confidence()
        if status is not None:
            status.append(
                f"{self.charset_name} {self.language} confidence = {confidence} "
                f"({stats.total_seqs} sequences)"
            )
        return confidence
