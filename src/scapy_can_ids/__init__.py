"""Decoding and encoding of CAN 2.0A and SAE J1939 identifier fields.

Hex text is parsed into protocol specific identifier values whose accessors
expose priority, PGN, PDU format, communication mode and addresses. Address
bytes resolve to named network components through a static table.
"""
from __future__ import annotations

__version__ = "0.1.0"

from .config import SETTINGS, CapabilityMode, Settings
from .errors import (
    BitLayoutError,
    ConfigurationError,
    EmptyHexString,
    HexTooLong,
    IdentifierError,
    InvalidHexCharacter,
    ValueOutOfRange,
)
from .identifier import IdCan2A, IdJ1939, Identifier, identifier_class, parse_identifier
from .layers import CAN2AIdentifier, J1939Identifier
from .name import IndustryGroup, Name
from .pgn import (
    AssignmentKind,
    CommunicationMode,
    J1939Fields,
    Pdu1,
    Pdu2,
    PduAssignment,
    PduFormat,
    Pgn,
    classify,
    classify_pdu_format,
)
from .protocol import CAN2A, J1939, ProtocolDescriptor
from .registry import Addr, Address, lookup

__all__ = [
    "Addr",
    "Address",
    "AssignmentKind",
    "BitLayoutError",
    "CAN2A",
    "CAN2AIdentifier",
    "CapabilityMode",
    "CommunicationMode",
    "ConfigurationError",
    "EmptyHexString",
    "HexTooLong",
    "IdCan2A",
    "IdJ1939",
    "Identifier",
    "IdentifierError",
    "IndustryGroup",
    "InvalidHexCharacter",
    "J1939",
    "J1939Fields",
    "J1939Identifier",
    "Name",
    "Pdu1",
    "Pdu2",
    "PduAssignment",
    "PduFormat",
    "Pgn",
    "ProtocolDescriptor",
    "SETTINGS",
    "Settings",
    "ValueOutOfRange",
    "classify",
    "classify_pdu_format",
    "identifier_class",
    "lookup",
    "parse_identifier",
]
