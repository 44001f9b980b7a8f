from __future__ import annotations

from charprobe.charsetprober import CharSetProber
from charprobe.codingstatemachine import CodingStateMachine
from charprobe.enums import LanguageFilter, MachineState, ProbingState
from charprobe.escsm import (
    HZ_SM_MODEL,
    ISO2022CN_SM_MODEL,
    ISO2022JP_SM_MODEL,
    ISO2022KR_SM_MODEL,
)


class EscCharSetProber(CharSetProber):
    """
    This CharSetProber uses a "code scheme" approach for detecting encodings,
    whereby easily recognizable escape or shift sequences are relied on to
    identify these encodings.
    """

    def __init__(self, lang_filter: LanguageFilter = LanguageFilter.ALL) -> None:
        super().__init__(lang_filter=lang_filter)
        self.coding_sm: list[CodingStateMachine] = []
        if self.lang_filter & LanguageFilter.CHINESE_SIMPLIFIED:
            self.coding_sm.append(CodingStateMachine(HZ_SM_MODEL))
            self.coding_sm.append(CodingStateMachine(ISO2022CN_SM_MODEL))
        if self.lang_filter & LanguageFilter.JAPANESE:
            self.coding_sm.append(CodingStateMachine(ISO2022JP_SM_MODEL))
        if self.lang_filter & LanguageFilter.KOREAN:
            self.coding_sm.append(CodingStateMachine(ISO2022KR_SM_MODEL))
        self.active_sm_count = 0
        self._detected_charset: str | None = None
        self._detected_language: str | None = None
        self.reset()

    def reset(self) -> None:
        super().reset()
        for coding_sm in self.coding_sm:
            coding_sm.reset()
        self.active_sm_count = len(self.coding_sm)
        self._detected_charset = None
        self._detected_language = None
        if not self.coding_sm:
            self._state = ProbingState.NOT_ME

    @property
    def charset_name(self) -> str | None:
        return self._detected_charset

    @property
    def language(self) -> str | None:
        return self._detected_language

    def get_confidence(self, status: list[str] | None = None) -> float:
        confidence = 0.99 if self._detected_charset else 0.00
        if status is not None:
            status.append(
                f"{self._detected_charset or 'escape'} confidence = {confidence}"
            )
        return confidence

    def _feed(self, data: bytes) -> ProbingState:
        for byte in data:
            for coding_sm in self.coding_sm:
                if not coding_sm.active:
                    continue
                coding_state = coding_sm.next_state(byte)
                if coding_state == MachineState.ERROR:
                    coding_sm.active = False
                    self.active_sm_count -= 1
                    self.logger.debug(
                        "%s state machine rejected byte 0x%02X",
                        coding_sm.charset_name,
                        byte,
                    )
                    if self.active_sm_count <= 0:
                        self._state = ProbingState.NOT_ME
                        return self._state
                elif coding_state == MachineState.ITS_ME:
                    self._state = ProbingState.FOUND_IT
                    self._detected_charset = coding_sm.charset_name
                    self._detected_language = coding_sm.language
                    return self._state

        return self._state
