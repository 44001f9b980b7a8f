"""
Byte-class driven state machines for multi-byte and escape-based encodings.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Mapping
from dataclasses import dataclass

from charprobe.enums import MachineState


@dataclass(frozen=True)
class StateMachineModel:
    """Transition tables for one encoding grammar.

    ``class_table`` maps each of the 256 byte values to a byte class.  The
    next state for ``(state, byte_class)`` is
    ``state_table[state * class_factor + byte_class]``.
    """

    name: str
    language: str | None
    class_table: tuple[int, ...]
    class_factor: int
    state_table: tuple[int, ...]

    def __post_init__(self) -> None:
        if len(self.class_table) != 256:
            msg = f"{self.name}: class_table must have 256 entries"
            raise ValueError(msg)
        if len(self.state_table) % self.class_factor:
            msg = f"{self.name}: state_table is not a whole number of rows"
            raise ValueError(msg)


def build_class_table(
    default: int, ranges: Mapping[int, Iterable[tuple[int, int]]]
) -> tuple[int, ...]:
    """Build a 256-entry class table.

    :param default: Class for any byte not covered by *ranges*.
    :param ranges: Byte class -> inclusive ``(low, high)`` byte ranges.
    """
    table = [default] * 256
    for byte_class, spans in ranges.items():
        for low, high in spans:
            for byte in range(low, high + 1):
                table[byte] = byte_class
    return tuple(table)


def build_state_table(
    class_factor: int, start: Mapping[int, int], *rows: Mapping[int, int]
) -> tuple[int, ...]:
    """Flatten sparse transition rows into a ``state_table``.

    *start* gives the transitions out of ``START``; each of *rows* gives the
    transitions out of the model-specific states 3, 4, ... in order.  Byte
    classes missing from a row lead to ``ERROR``.  ``ERROR`` and ``ITS_ME``
    are absorbing.
    """
    table: list[int] = []
    absorbing = (
        {},
        dict.fromkeys(range(class_factor), MachineState.ITS_ME),
    )
    for row in (start, *absorbing, *rows):
        if any(byte_class >= class_factor for byte_class in row):
            msg = f"byte class out of range for class_factor {class_factor}"
            raise ValueError(msg)
        table.extend(
            int(row.get(byte_class, MachineState.ERROR))
            for byte_class in range(class_factor)
        )
    return tuple(table)


def fill(class_factor: int, state: int) -> dict[int, int]:
    """Return a row sending every byte class to *state*."""
    return dict.fromkeys(range(class_factor), state)


class CodingStateMachine:
    """
    A state machine to verify a byte sequence for a particular encoding. For
    each byte the detector receives, it will feed that byte to every active
    state machine available, one byte at a time. The state machine changes its
    state based on its previous state and the byte it receives. There are 3
    states in a state machine that are of interest to an auto-detector:

    START state: This is the state to start with, or a legal byte sequence
                 (i.e. a valid code point) for character has been identified.

    ME state:  This indicates that the state machine identified a byte sequence
               that is specific to the charset it is designed for and that
               there is no other possible encoding which can contain this byte
               sequence. This will to lead to an immediate positive answer for
               the detector.

    ERROR state: This indicates the state machine identified an illegal byte
                 sequence for that encoding. This will lead to an immediate
                 negative answer for this encoding. Detector will exclude this
                 encoding from consideration from here on.
    """

    def __init__(self, model: StateMachineModel) -> None:
        self._model = model
        self._curr_state = MachineState.START
        self.active = True
        self.logger = logging.getLogger(__name__)
        self.reset()

    def reset(self) -> None:
        self._curr_state = MachineState.START
        self.active = True

    def next_state(self, byte: int) -> int:
        byte_class = self._model.class_table[byte]
        self._curr_state = self._model.state_table[
            self._curr_state * self._model.class_factor + byte_class
        ]
        return self._curr_state

    @property
    def current_state(self) -> int:
        return self._curr_state

    @property
    def charset_name(self) -> str:
        return self._model.name

    @property
    def language(self) -> str | None:
        return self._model.language
