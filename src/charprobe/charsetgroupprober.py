"""
A prober that runs several child probers and reports the best of them.
"""

from __future__ import annotations

from charprobe.charsetprober import CharSetProber
from charprobe.enums import LanguageFilter, ProbingState


class CharSetGroupProber(CharSetProber):
    """A prober that owns child probers and reports the best of them.

    Children are fed and consulted in registration order, so when two
    children are equally confident the earlier one wins.
    """

    def __init__(self, lang_filter: LanguageFilter = LanguageFilter.ALL) -> None:
        super().__init__(lang_filter=lang_filter)
        self._active_num = 0
        self.probers: list[CharSetProber] = []
        self._active: list[bool] = []
        self._best_guess_prober: CharSetProber | None = None

    def reset(self) -> None:
        super().reset()
        self._active_num = 0
        self._active = []
        for prober in self.probers:
            prober.reset()
            self._active.append(True)
            self._active_num += 1
        self._best_guess_prober = None

    @property
    def active_probers(self) -> list[CharSetProber]:
        return [
            prober
            for prober, active in zip(self.probers, self._active)
            if active
        ]

    @property
    def charset_name(self) -> str | None:
        if not self._best_guess_prober:
            self.get_confidence()
            if not self._best_guess_prober:
                return None
        return self._best_guess_prober.charset_name

    @property
    def language(self) -> str | None:
        if not self._best_guess_prober:
            self.get_confidence()
            if not self._best_guess_prober:
                return None
        return self._best_guess_prober.language

    def _feed(self, data: bytes) -> ProbingState:
        for index, prober in enumerate(self.probers):
            if not self._active[index]:
                continue
            state = prober.feed(data)
            if not state:
                continue
            if state == ProbingState.FOUND_IT:
                self._best_guess_prober = prober
                self._state = ProbingState.FOUND_IT
                return self.state
            if state == ProbingState.NOT_ME:
                self._active[index] = False
                self._active_num -= 1
                self.logger.debug(
                    "%s %s not active", prober.charset_name, prober.language
                )
                if self._active_num <= 0:
                    self._state = ProbingState.NOT_ME
                    return self.state
        return self.state

    def get_confidence(self, status: list[str] | None = None) -> float:
        state = self.state
        if state == ProbingState.FOUND_IT:
            return 0.99
        if state == ProbingState.NOT_ME:
            return 0.01
        best_conf = 0.0
        self._best_guess_prober = None
        for index, prober in enumerate(self.probers):
            if not self._active[index]:
                if status is not None:
                    status.append(
                        f"{prober.charset_name} {prober.language} not active"
                    )
                continue
            conf = prober.get_confidence(status)
            if best_conf < conf:
                best_conf = conf
                self._best_guess_prober = prober
                if status is not None:
                    status.append(
                        f"-- new match found: {prober.charset_name} "
                        f"{prober.language} confidence = {conf}"
                    )
        if not self._best_guess_prober:
            return 0.0
        return best_conf
