"""Scapy layers for the big-endian byte image of CAN identifiers."""
from __future__ import annotations

from scapy.fields import BitField, ByteEnumField, ByteField
from scapy.packet import Packet

from ..identifier import IdCan2A, IdJ1939
from ..protocol import CAN2A, J1939
from ..registry.addresses import address_names

__all__ = ["CAN2AIdentifier", "J1939Identifier"]


class _IdentifierBase(Packet):
    """Base packet shared by identifier layers."""

    def extract_padding(self, s: bytes) -> tuple[bytes, bytes]:  # pragma: no cover - scapy API hook
        return b"", s


class CAN2AIdentifier(_IdentifierBase):
    """11-bit identifier stored in two bytes."""

    name = "CAN 2.0A Identifier"
    fields_desc = [
        BitField("pad", 0, 16 - CAN2A.bit_width),
        BitField("identifier", 0, CAN2A.bit_width),
    ]

    def to_can_id(self) -> int:
        return int.from_bytes(bytes(self)[:2], "big")

    def to_identifier(self) -> IdCan2A:
        """Convert to :class:`IdCan2A`; non-zero padding raises ``ValueOutOfRange``."""

        return IdCan2A(self.to_can_id())

    @classmethod
    def from_identifier(cls, identifier: IdCan2A) -> "CAN2AIdentifier":
        return cls(identifier.bits.to_bytes(2, "big"))

    @classmethod
    def from_can_id(cls, can_id: int) -> "CAN2AIdentifier":
        return cls.from_identifier(IdCan2A(can_id))


class J1939Identifier(_IdentifierBase):
    """29-bit J1939 identifier stored in four bytes."""

    name = "J1939 Identifier"
    fields_desc = [
        BitField("pad", 0, 32 - J1939.bit_width),
        BitField("priority", 6, 3),
        BitField("reserved", 0, 1),
        BitField("data_page", 0, 1),
        ByteField("pdu_format", 0),
        ByteField("pdu_specific", 0),
        ByteEnumField("source_address", 0, address_names()),
    ]

    @property
    def pgn(self) -> int:
        return int(self.to_identifier().pgn)

    def to_can_id(self) -> int:
        return int.from_bytes(bytes(self)[:4], "big")

    def to_identifier(self) -> IdJ1939:
        """Convert to :class:`IdJ1939`; non-zero padding raises ``ValueOutOfRange``."""

        return IdJ1939(self.to_can_id())

    @classmethod
    def from_identifier(cls, identifier: IdJ1939) -> "J1939Identifier":
        return cls(identifier.bits.to_bytes(4, "big"))

    @classmethod
    def from_can_id(cls, can_id: int) -> "J1939Identifier":
        return cls.from_identifier(IdJ1939(can_id))
