"""Protocol descriptors for the supported CAN identifier schemes."""
from __future__ import annotations

from dataclasses import dataclass

__all__ = ["CAN2A", "J1939", "PROTOCOLS", "ProtocolDescriptor"]


@dataclass(frozen=True, slots=True)
class ProtocolDescriptor:
    """Fixed parameters of one identifier scheme.

    Attributes:
        name: Short lower-case protocol tag.
        bit_width: Number of significant identifier bits.
        hex_digits: Width of rendered hex text.
        max_hex_digits: Most digits accepted when parsing, i.e. the digit
            count of the storage container the identifier is read into.
    """

    name: str
    bit_width: int
    hex_digits: int
    max_hex_digits: int

    @property
    def max_value(self) -> int:
        return (1 << self.bit_width) - 1


CAN2A = ProtocolDescriptor(name="can2a", bit_width=11, hex_digits=3, max_hex_digits=4)
J1939 = ProtocolDescriptor(name="j1939", bit_width=29, hex_digits=8, max_hex_digits=8)

PROTOCOLS = {p.name: p for p in (CAN2A, J1939)}
