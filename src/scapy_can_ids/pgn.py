"""Parameter Group Number classification for 29-bit J1939 identifiers.

Identifier layout, most significant bit first::

    Priority(3) | Reserved(1) | DataPage(1) | PF(8) | PS(8) | SA(8)

The PDU Format byte (PF) decides everything else: ``PF <= 239`` is a PDU1
(peer-to-peer) identifier whose PS byte is a destination address, ``PF >= 240``
is a PDU2 (broadcast) identifier whose PS byte is a group extension and part of
the PGN.
"""
from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import NamedTuple, Optional, Union

from . import bitfield
from .config import SETTINGS
from .errors import ValueOutOfRange, require_int
from .registry.addresses import Address

__all__ = [
    "AssignmentKind",
    "CommunicationMode",
    "DATA_PAGE",
    "J1939Fields",
    "PDU2_MIN",
    "PDU_FORMAT",
    "PDU_SPECIFIC",
    "PRIORITY",
    "Pdu1",
    "Pdu2",
    "PduAssignment",
    "PduFormat",
    "Pgn",
    "RESERVED",
    "SOURCE_ADDRESS",
    "classify",
    "classify_pdu_format",
]

# (bit_offset, bit_width) within the 29-bit identifier
PRIORITY = (26, 3)
RESERVED = (25, 1)
DATA_PAGE = (24, 1)
PDU_FORMAT = (16, 8)
PDU_SPECIFIC = (8, 8)
SOURCE_ADDRESS = (0, 8)

# (bit_offset, bit_width) within the 18-bit PGN
_PGN_RESERVED = (17, 1)
_PGN_DATA_PAGE = (16, 1)
_PGN_PDU_FORMAT = (8, 8)
_PGN_PDU_SPECIFIC = (0, 8)

PDU2_MIN = 240
PGN_MAX = 0x3FFFF


class CommunicationMode(Enum):
    """How a parameter group is addressed on the bus."""

    P2P = "p2p"
    BROADCAST = "broadcast"


@dataclass(frozen=True, slots=True)
class Pdu1:
    """Destination specific PDU format (PF 0..239)."""

    value: int


@dataclass(frozen=True, slots=True)
class Pdu2:
    """Broadcast PDU format (PF 240..255)."""

    value: int


PduFormat = Union[Pdu1, Pdu2]


class AssignmentKind(Enum):
    """Who allocates a PGN."""

    SAE = "sae"
    MANUFACTURER = "manufacturer"
    UNKNOWN = "unknown"


@dataclass(frozen=True, slots=True)
class PduAssignment:
    """Allocating body of a PGN (SAE, manufacturer or unknown) with the PGN itself."""

    kind: AssignmentKind
    pgn: int


def classify_pdu_format(pf: int) -> PduFormat:
    """Classify a PDU Format byte as :class:`Pdu1` or :class:`Pdu2`."""

    if not 0 <= pf <= 0xFF:
        raise ValueOutOfRange(pf, 0xFF, "PDU format")
    if pf < PDU2_MIN:
        return Pdu1(pf)
    return Pdu2(pf)


def _communication_mode(pdu_format: PduFormat) -> CommunicationMode:
    if isinstance(pdu_format, Pdu1):
        return CommunicationMode.P2P
    return CommunicationMode.BROADCAST


_SAE_RANGES = (
    (0x00000, 0x0EE00),
    (0x0F000, 0x0FEFF),
    (0x10000, 0x1EE00),
    (0x1F000, 0x1FEFF),
)
_MANUFACTURER_RANGES = (
    (0x0EF00, 0x0EF00),
    (0x0FF00, 0x0FFFF),
    (0x1EF00, 0x1EF00),
    (0x1FF00, 0x1FFFF),
)


class Pgn(int):
    """An 18-bit Parameter Group Number.

    PDU1 PGNs (PF below 240) always have a zero low byte; the destination
    address lives in the identifier, not the PGN.
    """

    def __new__(cls, value: int) -> "Pgn":
        require_int(value, "PGN")
        if not 0 <= value <= PGN_MAX:
            raise ValueOutOfRange(value, PGN_MAX, "PGN")
        if (value >> 8) & 0xFF < PDU2_MIN and value & 0xFF:
            raise ValueError(f"PDU1 PGN {value:#X} must have the PS byte cleared to zero")
        return super().__new__(cls, value)

    @classmethod
    def from_parts(cls, reserved: bool, data_page: bool, pdu_format: int, pdu_specific: int) -> "Pgn":
        """Compose a PGN; ``pdu_specific`` is dropped for PDU1 formats."""

        for label, byte in (("PDU format", pdu_format), ("PDU specific", pdu_specific)):
            if not 0 <= byte <= 0xFF:
                raise ValueOutOfRange(byte, 0xFF, label)
        if pdu_format < PDU2_MIN:
            pdu_specific = 0
        value = bitfield.pack(0, *_PGN_RESERVED, int(bool(reserved)))
        value = bitfield.pack(value, *_PGN_DATA_PAGE, int(bool(data_page)))
        value = bitfield.pack(value, *_PGN_PDU_FORMAT, pdu_format)
        value = bitfield.pack(value, *_PGN_PDU_SPECIFIC, pdu_specific)
        return cls(value)

    @property
    def reserved(self) -> bool:
        return bool(bitfield.extract(self, *_PGN_RESERVED))

    @property
    def data_page(self) -> bool:
        return bool(bitfield.extract(self, *_PGN_DATA_PAGE))

    @property
    def pdu_format(self) -> PduFormat:
        return classify_pdu_format(bitfield.extract(self, *_PGN_PDU_FORMAT))

    @property
    def pdu_specific(self) -> int:
        return bitfield.extract(self, *_PGN_PDU_SPECIFIC)

    @property
    def group_extension(self) -> Optional[int]:
        """Return the group extension for PDU2 PGNs, otherwise ``None``."""

        if isinstance(self.pdu_format, Pdu2):
            return self.pdu_specific
        return None

    @property
    def communication_mode(self) -> CommunicationMode:
        return _communication_mode(self.pdu_format)

    @property
    def is_p2p(self) -> bool:
        return self.communication_mode is CommunicationMode.P2P

    @property
    def is_broadcast(self) -> bool:
        return self.communication_mode is CommunicationMode.BROADCAST

    @property
    def pdu_assignment(self) -> PduAssignment:
        """Classify the PGN as SAE assigned, manufacturer assigned, or unknown."""

        value = int(self)
        if any(low <= value <= high for low, high in _SAE_RANGES):
            return PduAssignment(AssignmentKind.SAE, value)
        if any(low <= value <= high for low, high in _MANUFACTURER_RANGES):
            return PduAssignment(AssignmentKind.MANUFACTURER, value)
        return PduAssignment(AssignmentKind.UNKNOWN, value)

    def __repr__(self) -> str:
        return f"Pgn({int(self)})"

    if SETTINGS.text_rendering:

        def to_hex(self) -> str:
            """Render the PGN as five upper-case hex digits."""

            return f"{int(self):05X}"


class J1939Fields(NamedTuple):
    """Every field decoded from a 29-bit J1939 identifier."""

    priority: int
    reserved: bool
    data_page: bool
    pdu_format: PduFormat
    pdu_specific: int
    source_address: Address
    destination_address: Optional[Address]
    group_extension: Optional[int]
    communication_mode: CommunicationMode
    pgn: Pgn


def classify(bits: int) -> J1939Fields:
    """Decode a validated 29-bit identifier.

    Total over ``0..0x1FFFFFFF``: exactly one of ``destination_address`` and
    ``group_extension`` is set, chosen by the PDU format alone.
    """

    reserved = bool(bitfield.extract(bits, *RESERVED))
    data_page = bool(bitfield.extract(bits, *DATA_PAGE))
    pf = bitfield.extract(bits, *PDU_FORMAT)
    ps = bitfield.extract(bits, *PDU_SPECIFIC)
    pdu_format = classify_pdu_format(pf)

    if isinstance(pdu_format, Pdu1):
        destination_address: Optional[Address] = Address(ps)
        group_extension: Optional[int] = None
    else:
        destination_address = None
        group_extension = ps

    return J1939Fields(
        priority=bitfield.extract(bits, *PRIORITY),
        reserved=reserved,
        data_page=data_page,
        pdu_format=pdu_format,
        pdu_specific=ps,
        source_address=Address(bitfield.extract(bits, *SOURCE_ADDRESS)),
        destination_address=destination_address,
        group_extension=group_extension,
        communication_mode=_communication_mode(pdu_format),
        pgn=Pgn.from_parts(reserved, data_page, pf, ps),
    )
