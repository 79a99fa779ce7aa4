"""Typed views over raw CAN identifiers.

There is one concrete class per protocol descriptor. :class:`IdCan2A` only
exposes the 11-bit identifier value; :class:`IdJ1939` adds the J1939 accessors
(priority, PGN, addresses, PDU format). Both are immutable, hashable and
compare by raw value within their own class.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import ClassVar, Optional, Type, Union

from . import bitfield, hexcodec
from .config import SETTINGS
from .errors import ValueOutOfRange, require_int
from .pgn import (
    DATA_PAGE,
    PDU_FORMAT,
    PDU_SPECIFIC,
    PRIORITY,
    RESERVED,
    SOURCE_ADDRESS,
    CommunicationMode,
    J1939Fields,
    Pdu1,
    PduFormat,
    Pgn,
    classify,
)
from .protocol import CAN2A, J1939, ProtocolDescriptor
from .registry.addresses import Address

__all__ = ["IdCan2A", "IdJ1939", "Identifier", "identifier_class", "parse_identifier"]

DEFAULT_PRIORITY = 6
GLOBAL_ADDRESS = 0xFF


def _check_range(bits: int, protocol: ProtocolDescriptor) -> None:
    require_int(bits)
    if not 0 <= bits <= protocol.max_value:
        raise ValueOutOfRange(bits, protocol.max_value)


@dataclass(frozen=True, order=True, slots=True)
class IdCan2A:
    """An 11-bit classical CAN (CAN 2.0A) identifier."""

    PROTOCOL: ClassVar[ProtocolDescriptor] = CAN2A

    bits: int

    def __post_init__(self) -> None:
        _check_range(self.bits, CAN2A)

    @classmethod
    def from_bits(cls, bits: int) -> "IdCan2A":
        return cls(bits)

    @classmethod
    def from_hex(cls, text: str) -> "IdCan2A":
        """Parse up to four hex digits (value at most ``0x7FF``).

        The identifier is held in a 16-bit container, so one leading digit
        beyond the three significant ones is allowed; ``"07FF"`` parses while
        ``"0800"`` fails with ``ValueOutOfRange`` rather than ``HexTooLong``.
        """

        return cls(hexcodec.parse_hex(text, CAN2A))

    def into_bits(self) -> int:
        return self.bits

    @property
    def id(self) -> int:
        """Return the 11-bit identifier value."""

        return bitfield.extract(self.bits, 0, CAN2A.bit_width)

    if SETTINGS.text_rendering:

        def to_hex(self) -> str:
            """Render as three upper-case hex digits."""

            return hexcodec.to_hex_string(self.bits, CAN2A)


@dataclass(frozen=True, order=True, slots=True)
class IdJ1939:
    """A 29-bit SAE J1939 identifier."""

    PROTOCOL: ClassVar[ProtocolDescriptor] = J1939

    bits: int

    def __post_init__(self) -> None:
        _check_range(self.bits, J1939)

    # ---------------------------------------------------------------- builders
    @classmethod
    def from_bits(cls, bits: int) -> "IdJ1939":
        return cls(bits)

    @classmethod
    def from_hex(cls, text: str) -> "IdJ1939":
        """Parse up to eight hex digits (value at most ``0x1FFFFFFF``)."""

        return cls(hexcodec.parse_hex(text, J1939))

    @classmethod
    def from_raw_parts(
        cls,
        priority: int,
        reserved: bool,
        data_page: bool,
        pdu_format: int,
        pdu_specific: int,
        source_address: int,
    ) -> "IdJ1939":
        """Pack individual fields into an identifier."""

        if not 0 <= priority <= 0x7:
            raise ValueOutOfRange(priority, 0x7, "Priority")
        for label, byte in (
            ("PDU format", pdu_format),
            ("PDU specific", pdu_specific),
            ("Source address", source_address),
        ):
            if not 0 <= byte <= 0xFF:
                raise ValueOutOfRange(byte, 0xFF, label)

        bits = bitfield.pack(0, *PRIORITY, priority)
        bits = bitfield.pack(bits, *RESERVED, int(bool(reserved)))
        bits = bitfield.pack(bits, *DATA_PAGE, int(bool(data_page)))
        bits = bitfield.pack(bits, *PDU_FORMAT, pdu_format)
        bits = bitfield.pack(bits, *PDU_SPECIFIC, pdu_specific)
        bits = bitfield.pack(bits, *SOURCE_ADDRESS, source_address)
        return cls(bits)

    @classmethod
    def from_pgn(
        cls,
        pgn: int,
        source_address: int,
        *,
        priority: int = DEFAULT_PRIORITY,
        destination_address: Optional[int] = None,
    ) -> "IdJ1939":
        """Build an identifier carrying ``pgn``.

        PDU1 PGNs take their PS byte from ``destination_address`` (global
        ``0xFF`` when omitted) and must have a zero low byte. PDU2 PGNs carry
        their own group extension and reject a destination address.
        """

        pgn = Pgn(pgn)
        if isinstance(pgn.pdu_format, Pdu1):
            ps = GLOBAL_ADDRESS if destination_address is None else destination_address
        else:
            if destination_address is not None:
                raise ValueError("PDU2 PGNs are broadcast and take no destination address")
            ps = pgn.pdu_specific
        return cls.from_raw_parts(
            priority,
            pgn.reserved,
            pgn.data_page,
            pgn.pdu_format.value,
            ps,
            source_address,
        )

    # ---------------------------------------------------------------- accessors
    def into_bits(self) -> int:
        return self.bits

    def into_raw_parts(self) -> tuple[int, bool, bool, int, int, int]:
        """Return ``(priority, reserved, data_page, pf, ps, sa)``."""

        fields = self.fields()
        return (
            fields.priority,
            fields.reserved,
            fields.data_page,
            fields.pdu_format.value,
            fields.pdu_specific,
            int(fields.source_address),
        )

    def fields(self) -> J1939Fields:
        """Decode every field at once."""

        return classify(self.bits)

    @property
    def priority(self) -> int:
        """Return the 3-bit priority; 0 is the highest."""

        return bitfield.extract(self.bits, *PRIORITY)

    @property
    def reserved(self) -> bool:
        return bool(bitfield.extract(self.bits, *RESERVED))

    @property
    def data_page(self) -> bool:
        return bool(bitfield.extract(self.bits, *DATA_PAGE))

    @property
    def pdu_format(self) -> PduFormat:
        return self.fields().pdu_format

    @property
    def pdu_specific(self) -> int:
        return bitfield.extract(self.bits, *PDU_SPECIFIC)

    @property
    def source_address(self) -> Address:
        return Address(bitfield.extract(self.bits, *SOURCE_ADDRESS))

    @property
    def destination_address(self) -> Optional[Address]:
        """Return the destination for PDU1 identifiers, ``None`` for PDU2."""

        return self.fields().destination_address

    @property
    def group_extension(self) -> Optional[int]:
        """Return the group extension for PDU2 identifiers, ``None`` for PDU1."""

        return self.fields().group_extension

    @property
    def communication_mode(self) -> CommunicationMode:
        return self.fields().communication_mode

    @property
    def pgn(self) -> Pgn:
        return self.fields().pgn

    if SETTINGS.text_rendering:

        def to_hex(self) -> str:
            """Render as eight upper-case hex digits."""

            return hexcodec.to_hex_string(self.bits, J1939)


Identifier = Union[IdCan2A, IdJ1939]

_CLASSES: dict[ProtocolDescriptor, Type[Identifier]] = {CAN2A: IdCan2A, J1939: IdJ1939}


def identifier_class(protocol: ProtocolDescriptor) -> Type[Identifier]:
    """Return the identifier class implementing ``protocol``."""

    try:
        return _CLASSES[protocol]
    except KeyError:
        raise ValueError(f"Unsupported protocol: {protocol!r}") from None


def parse_identifier(text: str, protocol: ProtocolDescriptor) -> Identifier:
    """Parse hex ``text`` into the identifier class for ``protocol``."""

    return identifier_class(protocol).from_hex(text)
