"""Tests for hex text parsing and rendering."""

import pytest

from scapy_can_ids import hexcodec
from scapy_can_ids.config import SETTINGS
from scapy_can_ids.errors import (
    EmptyHexString,
    HexTooLong,
    IdentifierError,
    InvalidHexCharacter,
    ValueOutOfRange,
)
from scapy_can_ids.protocol import CAN2A, J1939

requires_rendering = pytest.mark.skipif(not SETTINGS.text_rendering, reason="text rendering disabled")


def test_parse_is_case_insensitive() -> None:
    assert hexcodec.parse_hex("0CF00400", J1939) == 0x0CF00400
    assert hexcodec.parse_hex("0cf00400", J1939) == 0x0CF00400
    assert hexcodec.parse_hex("7Ff", CAN2A) == 0x7FF


def test_short_strings_are_read_as_their_value() -> None:
    assert hexcodec.parse_hex("F", J1939) == 15
    assert hexcodec.parse_hex("0", CAN2A) == 0
    assert hexcodec.parse_hex("07FF", CAN2A) == 0x7FF


def test_empty_string_is_rejected() -> None:
    with pytest.raises(EmptyHexString) as excinfo:
        hexcodec.parse_hex("", J1939)
    assert isinstance(excinfo.value, InvalidHexCharacter)


@pytest.mark.parametrize("text, char, position", [
    ("0x1F", "x", 1),
    ("0CF0 0400", " ", 4),
    ("-1", "-", 0),
    ("12G", "G", 2),
    ("1_0", "_", 1),
])
def test_non_hex_characters_are_rejected(text: str, char: str, position: int) -> None:
    with pytest.raises(InvalidHexCharacter) as excinfo:
        hexcodec.parse_hex(text, J1939)
    assert excinfo.value.char == char
    assert excinfo.value.position == position


def test_non_ascii_digits_are_rejected() -> None:
    with pytest.raises(InvalidHexCharacter):
        hexcodec.parse_hex("１", J1939)


def test_too_many_digits() -> None:
    with pytest.raises(HexTooLong) as excinfo:
        hexcodec.parse_hex("123456789", J1939)
    assert excinfo.value.length == 9
    assert excinfo.value.limit == 8

    with pytest.raises(HexTooLong):
        hexcodec.parse_hex("00000", CAN2A)


def test_value_out_of_range() -> None:
    with pytest.raises(ValueOutOfRange):
        hexcodec.parse_hex("20000000", J1939)
    with pytest.raises(ValueOutOfRange):
        hexcodec.parse_hex("FFF", CAN2A)
    with pytest.raises(ValueOutOfRange) as excinfo:
        hexcodec.parse_hex("0800", CAN2A)
    assert excinfo.value.value == 0x800
    assert excinfo.value.limit == 0x7FF


def test_errors_share_a_value_error_base() -> None:
    for text in ("", "zz", "123456789", "FFFFFFFF"):
        with pytest.raises(IdentifierError):
            hexcodec.parse_hex(text, J1939)
        with pytest.raises(ValueError):
            hexcodec.parse_hex(text, J1939)


@requires_rendering
def test_render_is_fixed_width_upper_case() -> None:
    assert hexcodec.to_hex_string(15, J1939) == "0000000F"
    assert hexcodec.to_hex_string(0x0CF00400, J1939) == "0CF00400"
    assert hexcodec.to_hex_string(0xAB, CAN2A) == "0AB"
    assert hexcodec.to_hex_string(0x7FF, CAN2A) == "7FF"


@requires_rendering
def test_render_rejects_out_of_range_values() -> None:
    with pytest.raises(ValueOutOfRange):
        hexcodec.to_hex_string(0x800, CAN2A)


@requires_rendering
def test_parse_render_round_trip() -> None:
    for protocol in (CAN2A, J1939):
        step = max(1, protocol.max_value // 4099)
        for value in list(range(0, protocol.max_value, step)) + [protocol.max_value]:
            text = hexcodec.to_hex_string(value, protocol)
            assert len(text) == protocol.hex_digits
            assert text == text.upper()
            assert hexcodec.parse_hex(text, protocol) == value
