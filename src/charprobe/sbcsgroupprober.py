from __future__ import annotations

from charprobe.charsetgroupprober import CharSetGroupProber
from charprobe.enums import LanguageFilter
from charprobe.hebrewprober import HebrewProber
from charprobe.langmodels import LANGUAGE_MODELS
from charprobe.sbcharsetprober import SingleByteCharSetProber


class SBCSGroupProber(CharSetGroupProber):
    def __init__(self) -> None:
        super().__init__(lang_filter=LanguageFilter.NON_CJK)
        # Order matters: a language's most common code page comes first so
        # that it wins ties against code pages that share its letters.
        self.probers = [SingleByteCharSetProber(model) for model in LANGUAGE_MODELS]
        self.probers.append(HebrewProber())
        self.reset()
