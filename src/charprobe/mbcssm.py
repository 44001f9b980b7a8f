"""
State machine models for UTF-8 and the CJK multi-byte encodings.

States 0-2 are the shared ``MachineState`` values; higher numbers are
"inside a character" states local to each model.
"""

from charprobe.codingstatemachine import (
    StateMachineModel,
    build_class_table,
    build_state_table,
)
from charprobe.enums import MachineState

_S = MachineState.START

# UTF-8

UTF8_CLS = build_class_table(
    0,
    {
        1: [(0x00, 0x7F)],
        2: [(0x80, 0x8F)],
        3: [(0x90, 0x9F)],
        4: [(0xA0, 0xBF)],
        5: [(0xC2, 0xDF)],
        6: [(0xE0, 0xE0)],
        7: [(0xE1, 0xEC), (0xEE, 0xEF)],
        8: [(0xED, 0xED)],
        9: [(0xF0, 0xF0)],
        10: [(0xF1, 0xF3)],
        11: [(0xF4, 0xF4)],
    },
)

UTF8_ST = build_state_table(
    12,
    {1: _S, 5: 3, 6: 4, 7: 6, 8: 5, 9: 7, 10: 9, 11: 8},
    {2: _S, 3: _S, 4: _S},  # 3: one continuation byte left
    {4: 3},  # 4: after E0, no overlong forms
    {2: 3, 3: 3},  # 5: after ED, no surrogates
    {2: 3, 3: 3, 4: 3},  # 6: two continuation bytes left
    {3: 6, 4: 6},  # 7: after F0, no overlong forms
    {2: 6},  # 8: after F4, nothing above U+10FFFF
    {2: 6, 3: 6, 4: 6},  # 9: three continuation bytes left
)

UTF8_SM_MODEL = StateMachineModel(
    name="utf-8",
    language=None,
    class_table=UTF8_CLS,
    class_factor=12,
    state_table=UTF8_ST,
)

# Shift_JIS

SJIS_CLS = build_class_table(
    0,
    {
        1: [(0x00, 0x3F), (0x7F, 0x7F)],
        2: [(0x40, 0x7E)],
        3: [(0x81, 0x9F)],
        4: [(0xA1, 0xDF)],
        5: [(0xE0, 0xFC)],
        6: [(0x80, 0x80), (0xA0, 0xA0)],
    },
)

SJIS_ST = build_state_table(
    7,
    {1: _S, 2: _S, 4: _S, 3: 3, 5: 3},
    {2: _S, 3: _S, 4: _S, 5: _S, 6: _S},
)

SJIS_SM_MODEL = StateMachineModel(
    name="SHIFT_JIS",
    language="Japanese",
    class_table=SJIS_CLS,
    class_factor=7,
    state_table=SJIS_ST,
)

# EUC-JP

EUCJP_CLS = build_class_table(
    0,
    {
        1: [(0x00, 0x7F)],
        2: [(0x8E, 0x8E)],
        3: [(0x8F, 0x8F)],
        4: [(0xA1, 0xDF)],
        5: [(0xE0, 0xFE)],
    },
)

EUCJP_ST = build_state_table(
    6,
    {1: _S, 2: 3, 3: 4, 4: 5, 5: 5},
    {4: _S},  # 3: SS2, half-width katakana
    {4: 5, 5: 5},  # 4: SS3, JIS X 0212 pair follows
    {4: _S, 5: _S},  # 5: trail byte
)

EUCJP_SM_MODEL = StateMachineModel(
    name="EUC-JP",
    language="Japanese",
    class_table=EUCJP_CLS,
    class_factor=6,
    state_table=EUCJP_ST,
)

# EUC-KR

EUCKR_CLS = build_class_table(
    0,
    {
        1: [(0x00, 0x7F)],
        2: [(0xA1, 0xFE)],
    },
)

EUCKR_ST = build_state_table(
    3,
    {1: _S, 2: 3},
    {2: _S},
)

EUCKR_SM_MODEL = StateMachineModel(
    name="EUC-KR",
    language="Korean",
    class_table=EUCKR_CLS,
    class_factor=3,
    state_table=EUCKR_ST,
)

# CP949

CP949_CLS = build_class_table(
    0,
    {
        1: [(0x00, 0x40), (0x5B, 0x60), (0x7B, 0x7F)],
        2: [(0x41, 0x5A), (0x61, 0x7A)],
        3: [(0x81, 0xA0)],
        4: [(0xA1, 0xC6)],
        5: [(0xC7, 0xFE)],
    },
)

CP949_ST = build_state_table(
    6,
    {1: _S, 2: _S, 3: 3, 4: 3, 5: 4},
    {2: _S, 3: _S, 4: _S, 5: _S},  # 3: after an extended (UHC) lead
    {4: _S, 5: _S},  # 4: after a KS X 1001 only lead
)

CP949_SM_MODEL = StateMachineModel(
    name="CP949",
    language="Korean",
    class_table=CP949_CLS,
    class_factor=6,
    state_table=CP949_ST,
)

# GB18030

GB18030_CLS = build_class_table(
    0,
    {
        1: [(0x00, 0x2F), (0x3A, 0x3F), (0x7F, 0x7F)],
        2: [(0x30, 0x39)],
        3: [(0x40, 0x7E)],
        4: [(0x81, 0xFE)],
        5: [(0x80, 0x80)],
    },
)

GB18030_ST = build_state_table(
    6,
    {1: _S, 2: _S, 3: _S, 4: 3},
    {3: _S, 4: _S, 5: _S, 2: 4},  # 3: second byte, or digit of a four-byte form
    {4: 5},  # 4: third byte of a four-byte form
    {2: _S},  # 5: last digit of a four-byte form
)

GB18030_SM_MODEL = StateMachineModel(
    name="GB18030",
    language="Chinese",
    class_table=GB18030_CLS,
    class_factor=6,
    state_table=GB18030_ST,
)

# Big5

BIG5_CLS = build_class_table(
    0,
    {
        1: [(0x00, 0x3F), (0x7F, 0x7F)],
        2: [(0x40, 0x7E)],
        3: [(0xA1, 0xF9)],
        4: [(0xFA, 0xFE)],
    },
)

BIG5_ST = build_state_table(
    5,
    {1: _S, 2: _S, 3: 3},
    {2: _S, 3: _S, 4: _S},
)

BIG5_SM_MODEL = StateMachineModel(
    name="Big5",
    language="Chinese",
    class_table=BIG5_CLS,
    class_factor=5,
    state_table=BIG5_ST,
)

# EUC-TW

EUCTW_CLS = build_class_table(
    0,
    {
        1: [(0x00, 0x7F)],
        2: [(0x8E, 0x8E)],
        3: [(0xA1, 0xB0)],
        4: [(0xB1, 0xFE)],
    },
)

EUCTW_ST = build_state_table(
    5,
    {1: _S, 2: 3, 3: 5, 4: 5},
    {3: 4},  # 3: SS2, CNS 11643 plane number follows
    {3: 5, 4: 5},  # 4: first byte of the plane's pair
    {3: _S, 4: _S},  # 5: trail byte
)

EUCTW_SM_MODEL = StateMachineModel(
    name="EUC-TW",
    language="Taiwan",
    class_table=EUCTW_CLS,
    class_factor=5,
    state_table=EUCTW_ST,
)
