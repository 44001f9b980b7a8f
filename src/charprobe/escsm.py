"""
State machine models for the escape-based (7-bit) CJK encodings.

Each machine only reaches ``ITS_ME`` on a sequence that no other supported
encoding would contain: a complete ISO-2022 designator, or a non-empty HZ
GB block closed by ``~}``.
"""

from charprobe.codingstatemachine import (
    StateMachineModel,
    build_class_table,
    build_state_table,
    fill,
)
from charprobe.enums import MachineState

_S = MachineState.START
_E = MachineState.ERROR
_M = MachineState.ITS_ME

# HZ-GB-2312 (RFC 1843)

HZ_CLS = build_class_table(
    1,
    {
        0: [(0x00, 0x09), (0x0B, 0x20), (0x7F, 0x7F)],
        2: [(0x7B, 0x7B)],
        3: [(0x7D, 0x7D)],
        4: [(0x7E, 0x7E)],
        5: [(0x80, 0xFF)],
        6: [(0x0A, 0x0A)],
    },
)

HZ_ST = build_state_table(
    7,
    {0: _S, 1: _S, 2: _S, 3: _S, 6: _S, 4: 3},
    {4: _S, 6: _S, 2: 4},  # 3: "~" in ASCII mode
    {1: 5, 2: 5, 3: 5, 4: 6},  # 4: inside "~{", no pair yet
    {1: 7, 2: 7, 3: 7, 4: 7},  # 5: trail of the first pair
    {3: _S},  # 6: "~" before any pair; "~{~}" is an empty block
    {1: 8, 2: 8, 3: 8, 4: 9},  # 7: inside "~{" after at least one pair
    {1: 7, 2: 7, 3: 7, 4: 7},  # 8: trail byte, which may be "~"
    {3: _M},  # 9: "~" after pairs; "~}" closes the block
)

HZ_SM_MODEL = StateMachineModel(
    name="HZ-GB-2312",
    language="Chinese",
    class_table=HZ_CLS,
    class_factor=7,
    state_table=HZ_ST,
)

# ISO-2022 designators share one byte classification.

ISO2022_CLS = build_class_table(
    0,
    {
        1: [(0x1B, 0x1B)],  # ESC
        2: [(0x24, 0x24)],  # $
        3: [(0x28, 0x28)],  # (
        4: [(0x29, 0x29)],  # )
        5: [(0x2A, 0x2A)],  # *
        6: [(0x2B, 0x2B)],  # +
        7: [(0x40, 0x40)],  # @
        8: [(0x41, 0x41)],  # A
        9: [(0x42, 0x42)],  # B
        10: [(0x43, 0x43)],  # C
        11: [(0x44, 0x44)],  # D
        12: [(0x47, 0x47)],  # G
        13: [(0x48, 0x48)],  # H
        14: [(0x49, 0x49)],  # I
        15: [(0x4A, 0x4A)],  # J
        16: [(0x4B, 0x4D)],  # K L M
        17: [(0x80, 0xFF)],
    },
)

_ISO2022_START = {**fill(18, _S), 1: 3, 17: _E}

# ISO-2022-JP (RFC 1468)

ISO2022JP_ST = build_state_table(
    18,
    _ISO2022_START,
    {2: 4, 3: 5},  # 3: ESC
    {7: _M, 9: _M, 3: 6},  # 4: ESC $
    {9: _S, 14: _M, 15: _M},  # 5: ESC (
    {11: _M},  # 6: ESC $ (
)

ISO2022JP_SM_MODEL = StateMachineModel(
    name="ISO-2022-JP",
    language="Japanese",
    class_table=ISO2022_CLS,
    class_factor=18,
    state_table=ISO2022JP_ST,
)

# ISO-2022-KR (RFC 1557)

ISO2022KR_ST = build_state_table(
    18,
    _ISO2022_START,
    {2: 4},  # 3: ESC
    {4: 5},  # 4: ESC $
    {10: _M},  # 5: ESC $ )
)

ISO2022KR_SM_MODEL = StateMachineModel(
    name="ISO-2022-KR",
    language="Korean",
    class_table=ISO2022_CLS,
    class_factor=18,
    state_table=ISO2022KR_ST,
)

# ISO-2022-CN (RFC 1922)

ISO2022CN_ST = build_state_table(
    18,
    _ISO2022_START,
    {2: 4},  # 3: ESC
    {4: 5, 5: 6, 6: 7},  # 4: ESC $
    {8: _M, 12: _M},  # 5: ESC $ )
    {13: _M},  # 6: ESC $ *
    {14: _M, 15: _M, 16: _M},  # 7: ESC $ +
)

ISO2022CN_SM_MODEL = StateMachineModel(
    name="ISO-2022-CN",
    language="Chinese",
    class_table=ISO2022_CLS,
    class_factor=18,
    state_table=ISO2022CN_ST,
)
