"""
The plain ASCII prober.

Any escape byte, HZ shift-in or high byte other than a no-break space rules
the stream out.
"""

from __future__ import annotations

from charprobe.charsetprober import CharSetProber
from charprobe.enums import ProbingState

#: Non-breaking space in ISO-8859-1 and friends; tolerated in "ASCII" text.
_NBSP = 0xA0
_ESC = 0x1B
_TILDE = 0x7E
_LEFT_BRACE = 0x7B


class PureAsciiProber(CharSetProber):
    """Accepts 7-bit text that is not also an escape-based encoding.

    Any byte with the high bit set (other than ``0xA0``) disqualifies the
    stream, and so do ``ESC`` (ISO-2022 designators) and the ``~{`` pair that
    opens a GB block in HZ-GB-2312.  The prober never reports ``FOUND_IT``;
    ASCII wins only at end-of-stream, when nothing more specific survived.
    """

    def __init__(self) -> None:
        super().__init__()
        self._not_ascii = False
        self._last_byte: int | None = None

    def reset(self) -> None:
        super().reset()
        self._not_ascii = False
        self._last_byte = None

    @property
    def charset_name(self) -> str:
        return "ascii"

    def _feed(self, data: bytes) -> ProbingState:
        last_byte = self._last_byte
        for byte in data:
            if (byte & 0x80 and byte != _NBSP) or byte == _ESC:
                self._not_ascii = True
                break
            if byte == _LEFT_BRACE and last_byte == _TILDE:
                self._not_ascii = True
                break
            last_byte = byte
        self._last_byte = last_byte

        if self._not_ascii:
            self._state = ProbingState.NOT_ME
        return self._state

    def get_confidence(self, status: list[str] | None = None) -> float:
        confidence = 0.0 if self._not_ascii else 1.0
        if status is not None:
            status.append(f"{self.charset_name} confidence = {confidence}")
        return confidence
