"""
Concrete multi-byte probers: one state machine and one distribution analyser
per CJK encoding.  The Japanese probers also run a hiragana context analyser.
"""

from __future__ import annotations

from charprobe.chardistribution import (
    Big5DistributionAnalysis,
    CharDistributionAnalysis,
    CP949DistributionAnalysis,
    EUCJPDistributionAnalysis,
    EUCKRDistributionAnalysis,
    EUCTWDistributionAnalysis,
    GB2312DistributionAnalysis,
    SJISDistributionAnalysis,
)
from charprobe.codingstatemachine import StateMachineModel
from charprobe.enums import LanguageFilter
from charprobe.jpcntx import (
    EUCJPContextAnalysis,
    JapaneseContextAnalysis,
    SJISContextAnalysis,
)
from charprobe.mbcharsetprober import MultiByteCharSetProber
from charprobe.mbcssm import (
    BIG5_SM_MODEL,
    CP949_SM_MODEL,
    EUCJP_SM_MODEL,
    EUCKR_SM_MODEL,
    EUCTW_SM_MODEL,
    GB18030_SM_MODEL,
    SJIS_SM_MODEL,
)


class _JapaneseProber(MultiByteCharSetProber):
    """Adds hiragana context analysis; the more confident measure wins."""

    def __init__(
        self,
        sm_model: StateMachineModel,
        distribution_analyzer: CharDistributionAnalysis,
        context_analyzer: JapaneseContextAnalysis,
    ) -> None:
        self.context_analyzer = context_analyzer
        super().__init__(sm_model, distribution_analyzer, LanguageFilter.JAPANESE)

    def reset(self) -> None:
        super().reset()
        self.context_analyzer.reset()

    def _feed_char(self, char: bytes) -> None:
        self.context_analyzer.feed(char)

    def get_confidence(self, status: list[str] | None = None) -> float:
        context_conf = self.context_analyzer.get_confidence()
        distrib_conf = self.distribution_analyzer.get_confidence()
        confidence = max(context_conf, distrib_conf)
        if status is not None:
            status.append(
                f"{self.charset_name} {self.language} confidence = {confidence} "
                f"({self.distribution_analyzer.freq_chars} of "
                f"{self.distribution_analyzer.total_chars} characters frequent, "
                f"{self.context_analyzer.unlikely_rel} of "
                f"{self.context_analyzer.total_rel} kana pairs unlikely)"
            )
        return confidence


class SJISProber(_JapaneseProber):
    def __init__(self) -> None:
        super().__init__(
            SJIS_SM_MODEL, SJISDistributionAnalysis(), SJISContextAnalysis()
        )


class EUCJPProber(_JapaneseProber):
    def __init__(self) -> None:
        super().__init__(
            EUCJP_SM_MODEL, EUCJPDistributionAnalysis(), EUCJPContextAnalysis()
        )


class EUCKRProber(MultiByteCharSetProber):
    def __init__(self) -> None:
        super().__init__(
            EUCKR_SM_MODEL, EUCKRDistributionAnalysis(), LanguageFilter.KOREAN
        )


class CP949Prober(MultiByteCharSetProber):
    def __init__(self) -> None:
        super().__init__(
            CP949_SM_MODEL, CP949DistributionAnalysis(), LanguageFilter.KOREAN
        )


class GB18030Prober(MultiByteCharSetProber):
    def __init__(self) -> None:
        super().__init__(
            GB18030_SM_MODEL,
            GB2312DistributionAnalysis(),
            LanguageFilter.CHINESE_SIMPLIFIED,
        )


class Big5Prober(MultiByteCharSetProber):
    def __init__(self) -> None:
        super().__init__(
            BIG5_SM_MODEL,
            Big5DistributionAnalysis(),
            LanguageFilter.CHINESE_TRADITIONAL,
        )


class EUCTWProber(MultiByteCharSetProber):
    def __init__(self) -> None:
        super().__init__(
            EUCTW_SM_MODEL,
            EUCTWDistributionAnalysis(),
            LanguageFilter.CHINESE_TRADITIONAL,
        )
