"""
The base class shared by the CJK multi-byte probers.
"""

from __future__ import annotations

from charprobe.chardistribution import CharDistributionAnalysis
from charprobe.charsetprober import CharSetProber
from charprobe.codingstatemachine import CodingStateMachine, StateMachineModel
from charprobe.enums import LanguageFilter, MachineState, ProbingState


class MultiByteCharSetProber(CharSetProber):
    """Structural validation plus character distribution for one CJK encoding.

    The coding state machine rejects streams that break the encoding's byte
    grammar; every complete multi-byte character it accepts is handed to the
    distribution analyser, which supplies the confidence.
    """

    def __init__(
        self,
        sm_model: StateMachineModel,
        distribution_analyzer: CharDistributionAnalysis,
        lang_filter: LanguageFilter = LanguageFilter.ALL,
    ) -> None:
        super().__init__(lang_filter=lang_filter)
        self.coding_sm = CodingStateMachine(sm_model)
        self.distribution_analyzer = distribution_analyzer
        self._char_bytes = bytearray()
        self.reset()

    def reset(self) -> None:
        super().reset()
        self.coding_sm.reset()
        self.distribution_analyzer.reset()
        self._char_bytes.clear()

    @property
    def charset_name(self) -> str:
        return self.coding_sm.charset_name

    @property
    def language(self) -> str | None:
        return self.coding_sm.language

    def _feed(self, data: bytes) -> ProbingState:
        for byte in data:
            coding_state = self.coding_sm.next_state(byte)
            if coding_state == MachineState.ERROR:
                self.logger.debug(
                    "%s %s prober hit error at byte 0x%02X",
                    self.charset_name,
                    self.language,
                    byte,
                )
                self._state = ProbingState.NOT_ME
                break
            self._char_bytes.append(byte)
            if coding_state != MachineState.START:
                continue
            char = bytes(self._char_bytes)
            self._char_bytes.clear()
            self._feed_char(char)
            if len(char) > 1:
                self.distribution_analyzer.feed(char)
                if (
                    self.distribution_analyzer.got_enough_data()
                    and self.get_confidence() > self.SHORTCUT_THRESHOLD
                ):
                    self._state = ProbingState.FOUND_IT
                    break

        return self._state

    def _feed_char(self, char: bytes) -> None:
        """Called with every complete character, single bytes included."""

    def get_confidence(self, status: list[str] | None = None) -> float:
        confidence = self.distribution_analyzer.get_confidence()
        if status is not None:
            status.append(
                f"{self.charset_name} {self.language} confidence = {confidence} "
                f"({self.distribution_analyzer.freq_chars} of "
                f"{self.distribution_analyzer.total_chars} characters frequent)"
            )
        return confidence
