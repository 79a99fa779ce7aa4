"""Tests for PGN composition and PDU classification."""

import pytest

from scapy_can_ids.config import SETTINGS
from scapy_can_ids.errors import ValueOutOfRange
from scapy_can_ids.pgn import (
    AssignmentKind,
    CommunicationMode,
    Pdu1,
    Pdu2,
    PduAssignment,
    Pgn,
    classify,
    classify_pdu_format,
)


def test_pdu_format_boundary() -> None:
    assert classify_pdu_format(0) == Pdu1(0)
    assert classify_pdu_format(239) == Pdu1(239)
    assert classify_pdu_format(240) == Pdu2(240)
    assert classify_pdu_format(255) == Pdu2(255)


def test_pdu_format_classification_is_monotonic() -> None:
    for pf in range(256):
        expected = Pdu1 if pf <= 239 else Pdu2
        assert classify_pdu_format(pf) == expected(pf)

    with pytest.raises(ValueOutOfRange):
        classify_pdu_format(256)


def test_classify_broadcast_identifier() -> None:
    fields = classify(0x18FEF200)

    assert fields.priority == 6
    assert fields.pdu_format == Pdu2(0xFE)
    assert fields.communication_mode is CommunicationMode.BROADCAST
    assert fields.group_extension == 242
    assert fields.destination_address is None
    assert fields.source_address == 0
    assert fields.pgn == 65266


def test_classify_peer_to_peer_identifier() -> None:
    fields = classify(0x0C00290B)

    assert fields.priority == 3
    assert fields.pdu_format == Pdu1(0)
    assert fields.communication_mode is CommunicationMode.P2P
    assert fields.destination_address == 41
    assert fields.group_extension is None
    assert fields.source_address == 11
    assert fields.pgn == 0


def test_pdu1_pgn_drops_the_destination_byte() -> None:
    assert classify(0x18EA00F9).pgn == 0xEA00
    assert classify(0x18EAFFF9).pgn == 0xEA00


def test_classifier_is_total_and_exclusive() -> None:
    for pf in range(256):
        bits = (pf << 16) | (0xAA << 8) | 0x55
        fields = classify(bits)
        if isinstance(fields.pdu_format, Pdu1):
            assert fields.destination_address == 0xAA
            assert fields.group_extension is None
        else:
            assert fields.destination_address is None
            assert fields.group_extension == 0xAA

    for bits in range(0, 0x20000000, 104729):
        fields = classify(bits)
        assert (fields.destination_address is None) != (fields.group_extension is None)
        assert 0 <= fields.priority <= 7
        assert 0 <= fields.pgn <= 0x3FFFF


def test_reserved_and_data_page_bits_enter_the_pgn() -> None:
    assert classify(0x1FFFFFFF).pgn == 0x3FFFF
    assert classify(0x01FEF200).pgn == 0x1FEF2
    assert classify(0x02FEF200).pgn == 0x2FEF2


def test_pgn_properties() -> None:
    pgn = Pgn(65266)

    assert pgn.pdu_format == Pdu2(0xFE)
    assert pgn.pdu_specific == 0xF2
    assert pgn.group_extension == 242
    assert pgn.is_broadcast
    assert not pgn.is_p2p
    assert not pgn.reserved
    assert not pgn.data_page

    request = Pgn(0xEA00)
    assert request.group_extension is None
    assert request.communication_mode is CommunicationMode.P2P
    assert request.is_p2p


def test_pgn_from_parts() -> None:
    assert Pgn.from_parts(False, False, 0xFE, 0xF2) == 0xFEF2
    assert Pgn.from_parts(False, False, 0xEA, 0x12) == 0xEA00
    assert Pgn.from_parts(True, True, 0xFF, 0xFF) == 0x3FFFF

    with pytest.raises(ValueOutOfRange):
        Pgn.from_parts(False, False, 0x100, 0)


def test_pgn_range() -> None:
    with pytest.raises(ValueOutOfRange):
        Pgn(0x40000)
    with pytest.raises(ValueOutOfRange):
        Pgn(-1)
    assert repr(Pgn(61444)) == "Pgn(61444)"


def test_pdu_assignment() -> None:
    assert classify(0x18FEF200).pgn.pdu_assignment == PduAssignment(AssignmentKind.SAE, 65266)
    assert classify(0x1CFE9201).pgn.pdu_assignment == PduAssignment(AssignmentKind.SAE, 65170)
    assert classify(0x10FF2121).pgn.pdu_assignment == PduAssignment(AssignmentKind.MANUFACTURER, 65313)
    assert classify(0x0C00290B).pgn.pdu_assignment == PduAssignment(AssignmentKind.SAE, 0)


def test_pdu_assignment_ranges() -> None:
    assert Pgn(0xEF00).pdu_assignment.kind is AssignmentKind.MANUFACTURER
    assert Pgn(0x1EF00).pdu_assignment.kind is AssignmentKind.MANUFACTURER
    assert Pgn(0x1FF42).pdu_assignment.kind is AssignmentKind.MANUFACTURER
    assert Pgn(0x1FEF2).pdu_assignment.kind is AssignmentKind.SAE
    assert Pgn(0x2FEF2).pdu_assignment.kind is AssignmentKind.UNKNOWN


@pytest.mark.skipif(not SETTINGS.text_rendering, reason="text rendering disabled")
def test_pgn_to_hex() -> None:
    assert Pgn(65266).to_hex() == "0FEF2"
    assert Pgn(0x3FFFF).to_hex() == "3FFFF"


def test_pgn_rejects_pdu1_with_specific_byte() -> None:
    with pytest.raises(ValueError):
        Pgn(0xEA12)
    with pytest.raises(ValueError):
        Pgn(0x1EA12)
    assert Pgn(0xEA00).pdu_specific == 0
    assert Pgn(0x1FE12).group_extension == 0x12


def test_pgn_rejects_non_integers() -> None:
    with pytest.raises(TypeError):
        Pgn(65266.0)  # type: ignore[arg-type]
