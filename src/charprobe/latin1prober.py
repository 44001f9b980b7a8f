"""
A last-resort Windows-1252 prober that rates pairs of character classes.
"""

from __future__ import annotations

import unicodedata

from charprobe.charsetprober import CharSetProber
from charprobe.enums import ProbingState

FREQ_CAT_NUM = 4

UDF = 0  # undefined
OTH = 1  # other
ASC = 2  # ascii capital letter
ASS = 3  # ascii small letter
ACV = 4  # accent capital vowel
ACO = 5  # accent capital other
ASV = 6  # accent small vowel
ASO = 7  # accent small other
CLASS_NUM = 8  # total classes

_VOWELS = frozenset("aeiouyøAEIOUYØ")


def _latin1_class(byte: int) -> int:
    try:
        char = bytes([byte]).decode("cp1252")
    except UnicodeDecodeError:
        return UDF
    if "A" <= char <= "Z":
        return ASC
    if "a" <= char <= "z":
        return ASS
    category = unicodedata.category(char)
    if category not in ("Lu", "Ll"):
        return OTH
    vowel = unicodedata.normalize("NFD", char)[0] in _VOWELS
    if category == "Lu":
        return ACV if vowel else ACO
    return ASV if vowel else ASO


Latin1_CharToClass = tuple(_latin1_class(byte) for byte in range(256))

# 0 : illegal
# 1 : very unlikely
# 2 : normal
# 3 : very likely
# fmt: off
Latin1ClassModel = (
    # UDF OTH ASC ASS ACV ACO ASV ASO
    0,  0,  0,  0,  0,  0,  0,  0,  # UDF
    0,  3,  3,  3,  3,  3,  3,  3,  # OTH
    0,  3,  3,  3,  3,  3,  3,  3,  # ASC
    0,  3,  3,  3,  1,  1,  3,  3,  # ASS
    0,  3,  3,  3,  1,  2,  1,  2,  # ACV
    0,  3,  3,  3,  3,  3,  3,  3,  # ACO
    0,  3,  1,  3,  1,  1,  1,  3,  # ASV
    0,  3,  1,  3,  1,  1,  3,  3,  # ASO
)
# fmt: on


class Latin1Prober(CharSetProber):
    """Generic Windows-1252 fallback for Western European text.

    Text inside ``<...>`` markup is ignored; the flag that tracks whether the
    stream is inside a tag carries over from one chunk to the next.
    """

    def __init__(self) -> None:
        super().__init__()
        self._last_char_class = OTH
        self._freq_counter: list[int] = []
        self._in_tag = False
        self.reset()

    def reset(self) -> None:
        self._last_char_class = OTH
        self._freq_counter = [0] * FREQ_CAT_NUM
        self._in_tag = False
        super().reset()

    @property
    def charset_name(self) -> str:
        return "Windows-1252"

    def _feed(self, data: bytes) -> ProbingState:
        for c in data:
            if c == 0x3E:  # >
                self._in_tag = False
                continue
            if self._in_tag:
                continue
            if c == 0x3C:  # <
                # the tag separates the text on either side of it
                self._in_tag = True
                char_class = OTH
            else:
                char_class = Latin1_CharToClass[c]
            freq = Latin1ClassModel[(self._last_char_class * CLASS_NUM) + char_class]
            if freq == 0:
                self.logger.debug("Windows-1252 rejected byte 0x%02X", c)
                self._state = ProbingState.NOT_ME
                break
            self._freq_counter[freq] += 1
            self._last_char_class = char_class

        return self._state

    def get_confidence(self, status: list[str] | None = None) -> float:
        if self._state == ProbingState.NOT_ME:
            confidence = 0.01
        else:
            total = sum(self._freq_counter)
            if total < 0.01:
                confidence = 0.0
            else:
                confidence = (
                    self._freq_counter[3] - self._freq_counter[1] * 20.0
                ) / total
            confidence = max(confidence, 0.0)
            # lower the confidence of latin1 so that other more accurate
            # detector can take priority.
            confidence = confidence * 0.73
        if status is not None:
            status.append(f"{self.charset_name} confidence = {confidence}")
        return confidence
