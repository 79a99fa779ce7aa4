"""The 64-bit J1939 NAME used to identify a controller application.

Layout, most significant bit first::

    Arbitrary address capable(1) | Industry group(3) |
    Vehicle system instance(4) | Vehicle system(7) | Reserved(1) |
    Function(8) | Function instance(5) | ECU instance(3) |
    Manufacturer code(11) | Identity number(21)
"""
from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum

from . import bitfield, hexcodec
from .config import SETTINGS
from .errors import ValueOutOfRange, require_int

__all__ = ["IndustryGroup", "Name"]

NAME_BITS = 64
NAME_MAX = (1 << NAME_BITS) - 1

# (bit_offset, bit_width) within the 64-bit NAME
_FIELDS = {
    "arbitrary_address_capable": (63, 1),
    "industry_group": (60, 3),
    "vehicle_system_instance": (56, 4),
    "vehicle_system": (49, 7),
    "reserved": (48, 1),
    "function": (40, 8),
    "function_instance": (35, 5),
    "ecu_instance": (32, 3),
    "manufacturer_code": (21, 11),
    "identity_number": (0, 21),
}


class IndustryGroup(IntEnum):
    """Predefined J1939 industry groups."""

    GLOBAL = 0
    ON_HIGHWAY = 1
    AGRICULTURAL_AND_FORESTRY = 2
    CONSTRUCTION = 3
    MARINE = 4
    INDUSTRIAL = 5


def _field(bits: int, name: str) -> int:
    return bitfield.extract(bits, *_FIELDS[name], capacity=NAME_BITS)


@dataclass(frozen=True, slots=True)
class Name:
    """An immutable J1939 NAME value."""

    bits: int

    def __post_init__(self) -> None:
        require_int(self.bits, "NAME")
        if not 0 <= self.bits <= NAME_MAX:
            raise ValueOutOfRange(self.bits, NAME_MAX, "NAME")

    @classmethod
    def from_bits(cls, bits: int) -> "Name":
        return cls(bits)

    @classmethod
    def from_hex(cls, text: str) -> "Name":
        return cls(hexcodec.parse_hex_value(text, max_digits=16, max_value=NAME_MAX, what="NAME"))

    @classmethod
    def from_parts(
        cls,
        *,
        arbitrary_address_capable: bool = False,
        industry_group: int = IndustryGroup.GLOBAL,
        vehicle_system_instance: int = 0,
        vehicle_system: int = 0,
        reserved: bool = False,
        function: int = 0,
        function_instance: int = 0,
        ecu_instance: int = 0,
        manufacturer_code: int = 0,
        identity_number: int = 0,
    ) -> "Name":
        """Pack NAME fields, rejecting any value wider than its field."""

        values = {
            "arbitrary_address_capable": int(bool(arbitrary_address_capable)),
            "industry_group": int(industry_group),
            "vehicle_system_instance": vehicle_system_instance,
            "vehicle_system": vehicle_system,
            "reserved": int(bool(reserved)),
            "function": function,
            "function_instance": function_instance,
            "ecu_instance": ecu_instance,
            "manufacturer_code": manufacturer_code,
            "identity_number": identity_number,
        }
        bits = 0
        for name, value in values.items():
            offset, width = _FIELDS[name]
            limit = bitfield.mask(width)
            if not 0 <= value <= limit:
                raise ValueOutOfRange(value, limit, name.replace("_", " ").capitalize())
            bits = bitfield.pack(bits, offset, width, value, capacity=NAME_BITS)
        return cls(bits)

    @classmethod
    def from_bytes(cls, data: bytes) -> "Name":
        """Decode the 8-byte little-endian form carried in Address Claimed."""

        if len(data) != 8:
            raise ValueError("NAME must be exactly 8 bytes")
        return cls(int.from_bytes(data, "little"))

    def to_bytes(self) -> bytes:
        return self.bits.to_bytes(8, "little")

    def into_bits(self) -> int:
        return self.bits

    @property
    def arbitrary_address_capable(self) -> bool:
        return bool(_field(self.bits, "arbitrary_address_capable"))

    @property
    def industry_group(self) -> int:
        return _field(self.bits, "industry_group")

    @property
    def vehicle_system_instance(self) -> int:
        return _field(self.bits, "vehicle_system_instance")

    @property
    def vehicle_system(self) -> int:
        return _field(self.bits, "vehicle_system")

    @property
    def reserved(self) -> bool:
        return bool(_field(self.bits, "reserved"))

    @property
    def function(self) -> int:
        return _field(self.bits, "function")

    @property
    def function_instance(self) -> int:
        return _field(self.bits, "function_instance")

    @property
    def ecu_instance(self) -> int:
        return _field(self.bits, "ecu_instance")

    @property
    def manufacturer_code(self) -> int:
        return _field(self.bits, "manufacturer_code")

    @property
    def identity_number(self) -> int:
        return _field(self.bits, "identity_number")

    if SETTINGS.text_rendering:

        def to_hex(self) -> str:
            return f"{self.bits:016X}"
