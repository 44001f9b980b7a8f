"""
Hiragana context analysis for the Japanese multi-byte probers.

Running Japanese text strings hiragana together by a handful of spelling
rules: the small ya, yu and yo only follow an i-row kana, and the small tsu
doubles the consonant that comes after it.  Pairs that break those rules are
rare in real text and common when bytes are read in the wrong encoding.
"""

from __future__ import annotations

# ぁ (U+3041) is order 0, ん (U+3093) is order 82.
_FIRST_HIRAGANA = 0x3041

_SMALL_Y = frozenset("ゃゅょ")
_I_ROW = frozenset("きぎしじちぢにひびぴみり")
_SMALL_TSU = "っ"
# Nothing doubles before these.
_NOT_AFTER_SMALL_TSU = frozenset("んっぁぃぅぇぉゃゅょゎあいうえお")
_ARCHAIC = frozenset("ゐゑゎ")


def _is_unlikely(prev: str, cur: str) -> bool:
    if prev in _ARCHAIC or cur in _ARCHAIC:
        return True
    if cur in _SMALL_Y and prev not in _I_ROW:
        return True
    return prev == _SMALL_TSU and cur in _NOT_AFTER_SMALL_TSU


class JapaneseContextAnalysis:
    ENOUGH_REL_THRESHOLD = 100
    MAX_REL_THRESHOLD = 1000
    MINIMUM_DATA_THRESHOLD = 4
    DONT_KNOW = -1.0
    SURE_YES = 0.99

    def __init__(self) -> None:
        self._total_rel = 0
        self._unlikely_rel = 0
        self._last_char_order = -1
        self._done = False
        self.reset()

    def reset(self) -> None:
        self._total_rel = 0  # total sequences received
        self._unlikely_rel = 0  # sequences that break a kana spelling rule
        # order of the previous character, -1 when it was not hiragana
        self._last_char_order = -1
        # stop counting once there is plenty of data
        self._done = False

    @property
    def total_rel(self) -> int:
        return self._total_rel

    @property
    def unlikely_rel(self) -> int:
        return self._unlikely_rel

    def feed(self, char: bytes) -> None:
        """feed one complete character, single-byte ones included"""
        if self._done:
            return
        order = self.get_order(char)
        if order != -1 and self._last_char_order != -1:
            self._total_rel += 1
            if self._total_rel > self.MAX_REL_THRESHOLD:
                self._done = True
                return
            prev = chr(_FIRST_HIRAGANA + self._last_char_order)
            if _is_unlikely(prev, chr(_FIRST_HIRAGANA + order)):
                self._unlikely_rel += 1
        self._last_char_order = order

    def got_enough_data(self) -> bool:
        return self._total_rel > self.ENOUGH_REL_THRESHOLD

    def get_confidence(self) -> float:
        if self._total_rel > self.MINIMUM_DATA_THRESHOLD:
            confidence = (self._total_rel - self._unlikely_rel) / self._total_rel
            return min(confidence, self.SURE_YES)
        return self.DONT_KNOW

    def get_order(self, char: bytes) -> int:
        return -1


class SJISContextAnalysis(JapaneseContextAnalysis):
    def get_order(self, char: bytes) -> int:
        # hiragana 829F-82F1
        if len(char) == 2 and char[0] == 0x82 and 0x9F <= char[1] <= 0xF1:
            return char[1] - 0x9F
        return -1


class EUCJPContextAnalysis(JapaneseContextAnalysis):
    def get_order(self, char: bytes) -> int:
        # hiragana A4A1-A4F3
        if len(char) == 2 and char[0] == 0xA4 and 0xA1 <= char[1] <= 0xF3:
            return char[1] - 0xA1
        return -1
