"""
UTF-8, judged by its byte grammar and the number of multi-byte characters.
"""

from __future__ import annotations

from charprobe.charsetprober import CharSetProber
from charprobe.codingstatemachine import CodingStateMachine
from charprobe.enums import MachineState, ProbingState
from charprobe.mbcssm import UTF8_SM_MODEL


class UTF8Prober(CharSetProber):
    """Validates the RFC 3629 grammar and grows more confident with every
    multi-byte character it sees."""

    ONE_CHAR_PROB = 0.5

    def __init__(self) -> None:
        super().__init__()
        self.coding_sm = CodingStateMachine(UTF8_SM_MODEL)
        self._num_mb_chars = 0
        self._char_len = 0
        self.reset()

    def reset(self) -> None:
        super().reset()
        self.coding_sm.reset()
        self._num_mb_chars = 0
        self._char_len = 0

    @property
    def charset_name(self) -> str:
        return "utf-8"

    def _feed(self, data: bytes) -> ProbingState:
        for byte in data:
            coding_state = self.coding_sm.next_state(byte)
            if coding_state == MachineState.ERROR:
                self.logger.debug("utf-8 state machine rejected byte 0x%02X", byte)
                self._state = ProbingState.NOT_ME
                break
            self._char_len += 1
            if coding_state != MachineState.START:
                continue
            if self._char_len > 1:
                self._num_mb_chars += 1
                if self.get_confidence() > self.SHORTCUT_THRESHOLD:
                    self._state = ProbingState.FOUND_IT
                    break
            self._char_len = 0

        return self._state

    def get_confidence(self, status: list[str] | None = None) -> float:
        unlike = 0.99
        if self._num_mb_chars < 6:
            unlike *= self.ONE_CHAR_PROB**self._num_mb_chars
            confidence = 1.0 - unlike
        else:
            confidence = unlike
        if status is not None:
            status.append(
                f"utf-8 confidence = {confidence} "
                f"({self._num_mb_chars} multi-byte characters)"
            )
        return confidence
