"""
The group of multi-byte probers: UTF-8 and the CJK encodings, filtered by
language.
"""

from __future__ import annotations

from charprobe.charsetgroupprober import CharSetGroupProber
from charprobe.enums import LanguageFilter
from charprobe.mbcsprobers import (
    Big5Prober,
    CP949Prober,
    EUCJPProber,
    EUCKRProber,
    EUCTWProber,
    GB18030Prober,
    SJISProber,
)
from charprobe.utf8prober import UTF8Prober


class MBCSGroupProber(CharSetGroupProber):
    def __init__(self, lang_filter: LanguageFilter = LanguageFilter.ALL) -> None:
        super().__init__(lang_filter=lang_filter)
        candidates = [
            UTF8Prober(),
            SJISProber(),
            EUCJPProber(),
            GB18030Prober(),
            EUCKRProber(),
            CP949Prober(),
            Big5Prober(),
            EUCTWProber(),
        ]
        self.probers = [
            prober
            for prober in candidates
            if prober.lang_filter & self.lang_filter
        ]
        self.reset()
