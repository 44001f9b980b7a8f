# tests/test_codingstatemachine.py
"""Tests for the table-driven coding state machines."""

from __future__ import annotations

import pytest

from charprobe.codingstatemachine import (
    CodingStateMachine,
    StateMachineModel,
    build_class_table,
    build_state_table,
)
from charprobe.enums import MachineState
from charprobe.mbcssm import (
    BIG5_SM_MODEL,
    CP949_SM_MODEL,
    EUCJP_SM_MODEL,
    EUCKR_SM_MODEL,
    GB18030_SM_MODEL,
    SJIS_SM_MODEL,
    UTF8_SM_MODEL,
)


def _run(model: StateMachineModel, data: bytes) -> list[int]:
    machine = CodingStateMachine(model)
    return [machine.next_state(byte) for byte in data]


def test_build_class_table():
    table = build_class_table(1, {2: [(0x41, 0x43)], 3: [(0xFF, 0xFF)]})
    assert len(table) == 256
    assert table[0x40] == 1
    assert table[0x41] == table[0x43] == 2
    assert table[0xFF] == 3


def test_build_state_table_fills_errors_and_absorbing_rows():
    table = build_state_table(2, {0: MachineState.START, 1: 3}, {0: MachineState.ITS_ME})
    assert table == (
        MachineState.START, 3,  # START
        MachineState.ERROR, MachineState.ERROR,  # ERROR
        MachineState.ITS_ME, MachineState.ITS_ME,  # ITS_ME
        MachineState.ITS_ME, MachineState.ERROR,  # 3
    )  # fmt: skip


def test_build_state_table_rejects_unknown_class():
    with pytest.raises(ValueError):
        build_state_table(2, {2: MachineState.START})


def test_model_rejects_short_class_table():
    with pytest.raises(ValueError):
        StateMachineModel(
            name="broken",
            language=None,
            class_table=(0,) * 255,
            class_factor=1,
            state_table=(0,),
        )


def test_machine_reports_model_metadata():
    machine = CodingStateMachine(SJIS_SM_MODEL)
    assert machine.charset_name == "SHIFT_JIS"
    assert machine.language == "Japanese"
    assert machine.current_state == MachineState.START
    assert machine.active


def test_reset_returns_to_start():
    machine = CodingStateMachine(UTF8_SM_MODEL)
    machine.next_state(0xFF)
    assert machine.current_state == MachineState.ERROR
    machine.active = False
    machine.reset()
    assert machine.current_state == MachineState.START
    assert machine.active


@pytest.mark.parametrize(
    "text", ["plain", "é", "€", "中文", "😀", "߿ࠀ￿\U00010000\U0010ffff"]
)
def test_utf8_accepts_valid_text(text: str):
    states = _run(UTF8_SM_MODEL, text.encode("utf-8"))
    assert MachineState.ERROR not in states
    assert states[-1] == MachineState.START


@pytest.mark.parametrize(
    "data",
    [
        b"\xc0\xaf",  # overlong "/"
        b"\xe0\x80\xaf",  # overlong three-byte form
        b"\xed\xa0\x80",  # surrogate
        b"\xf4\x90\x80\x80",  # above U+10FFFF
        b"\xf5\x80\x80\x80",
        b"\x80",  # stray continuation byte
        b"\xc3A",  # truncated sequence
    ],
)
def test_utf8_rejects_invalid_sequences(data: bytes):
    assert _run(UTF8_SM_MODEL, data)[-1] == MachineState.ERROR


@pytest.mark.parametrize(
    ("model", "codec", "text"),
    [
        (SJIS_SM_MODEL, "shift_jis", "これは日本語のテキストです。ｶﾀｶﾅ"),
        (EUCJP_SM_MODEL, "euc_jp", "これは日本語のテキストです。"),
        (EUCKR_SM_MODEL, "euc_kr", "안녕하세요 한국어"),
        (CP949_SM_MODEL, "cp949", "안녕하세요 똠방각하"),
        (GB18030_SM_MODEL, "gb18030", "这是中文测试文本"),
        (BIG5_SM_MODEL, "big5", "這是繁體中文"),
    ],
)
def test_cjk_machines_accept_their_encoding(model, codec: str, text: str):
    states = _run(model, text.encode(codec))
    assert MachineState.ERROR not in states
    assert states[-1] == MachineState.START


def test_gb18030_four_byte_sequence():
    # characters beyond the BMP always take the four-byte form
    states = _run(GB18030_SM_MODEL, "😀".encode("gb18030"))
    assert len(states) == 4
    assert states[-1] == MachineState.START
    assert MachineState.ERROR not in states


def test_euckr_rejects_cp949_extension():
    # "똠" is only in the CP949 extension block
    states = _run(EUCKR_SM_MODEL, "똠".encode("cp949"))
    assert MachineState.ERROR in states


def test_sjis_rejects_bad_trail_byte():
    assert _run(SJIS_SM_MODEL, b"\x82\x20")[-1] == MachineState.ERROR
