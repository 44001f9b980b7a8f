"""
Hebrew in logical and visual order.

Logical Hebrew (Windows-1255, ISO-8859-8-I) stores text in reading order, so
the five letters with a final form (kaf, mem, nun, pe, tsadi) take that form
at the end of a word.  Visual Hebrew (ISO-8859-8) stores each line in display
order, which reverses every word: final forms turn up at the start of words
and the regular forms at the end.  Both orders share the same letters, so the
letters are rated once against the Windows-1255 model and the charset name
is chosen from where the final forms fall.
"""

from __future__ import annotations

from charprobe.charsetprober import CharSetProber
from charprobe.enums import ProbingState
from charprobe.langmodels import HEBREW_MODEL
from charprobe.sbcharsetprober import SingleByteCharSetProber

# Windows-1255 and ISO-8859-8 place the letters at the same byte values.
FINAL_KAF = 0xEA
NORMAL_KAF = 0xEB
FINAL_MEM = 0xED
NORMAL_MEM = 0xEE
FINAL_NUN = 0xEF
NORMAL_NUN = 0xF0
FINAL_PE = 0xF3
NORMAL_PE = 0xF4
FINAL_TSADI = 0xF5
NORMAL_TSADI = 0xF6

_FINAL_LETTERS = frozenset([FINAL_KAF, FINAL_MEM, FINAL_NUN, FINAL_PE, FINAL_TSADI])
# Words ending in a regular pe or tsadi are common loanwords, so only
# kaf, mem and nun count as evidence of visual order.
_NON_FINAL_LETTERS = frozenset([NORMAL_KAF, NORMAL_MEM, NORMAL_NUN])

_LETTERS = range(0xE0, 0xFB)

LOGICAL_HEBREW_NAME = "Windows-1255"
VISUAL_HEBREW_NAME = "ISO-8859-8"


class HebrewProber(CharSetProber):
    # Score difference needed before final letters alone settle the order.
    MIN_FINAL_CHAR_DISTANCE = 5

    def __init__(self) -> None:
        super().__init__()
        self._model_prober = SingleByteCharSetProber(HEBREW_MODEL)
        self._final_char_logical_score = 0
        self._final_char_visual_score = 0
        self._prev = 0x20
        self._before_prev = 0x20
        self.reset()

    def reset(self) -> None:
        super().reset()
        self._model_prober.reset()
        self._final_char_logical_score = 0
        self._final_char_visual_score = 0
        # both start as word boundaries
        self._prev = 0x20
        self._before_prev = 0x20

    @property
    def charset_name(self) -> str:
        finalsub = self._final_char_logical_score - self._final_char_visual_score
        if finalsub >= self.MIN_FINAL_CHAR_DISTANCE:
            return LOGICAL_HEBREW_NAME
        if finalsub <= -self.MIN_FINAL_CHAR_DISTANCE:
            return VISUAL_HEBREW_NAME
        # a close call is logical unless visual is ahead at all
        if finalsub < 0:
            return VISUAL_HEBREW_NAME
        return LOGICAL_HEBREW_NAME

    @property
    def language(self) -> str:
        return HEBREW_MODEL.language

    @property
    def final_char_scores(self) -> tuple[int, int]:
        """``(logical, visual)`` evidence gathered from final letters."""
        return self._final_char_logical_score, self._final_char_visual_score

    def _feed(self, data: bytes) -> ProbingState:
        for cur in data:
            if cur not in _LETTERS:
                # a word ends when a non-letter follows at least two letters
                if self._before_prev in _LETTERS:
                    if self._prev in _FINAL_LETTERS:
                        self._final_char_logical_score += 1
                    elif self._prev in _NON_FINAL_LETTERS:
                        self._final_char_visual_score += 1
            elif (
                self._before_prev not in _LETTERS
                and self._prev in _FINAL_LETTERS
            ):
                # a final form opening a word of two or more letters
                self._final_char_visual_score += 1
            self._before_prev = self._prev
            self._prev = cur

        self._state = self._model_prober.feed(data)
        return self._state

    def get_confidence(self, status: list[str] | None = None) -> float:
        confidence = self._model_prober.get_confidence()
        if status is not None:
            logical, visual = self.final_char_scores
            status.append(
                f"{self.charset_name} {self.language} confidence = {confidence} "
                f"(final letters: {logical} logical, {visual} visual)"
            )
        return confidence
