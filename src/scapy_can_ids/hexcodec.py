"""Hex text parsing and rendering for raw identifier values."""
from __future__ import annotations

import logging

from .config import SETTINGS
from .errors import EmptyHexString, HexTooLong, InvalidHexCharacter, ValueOutOfRange
from .protocol import ProtocolDescriptor

__all__ = ["parse_hex", "parse_hex_value"]

logger = logging.getLogger(__name__)

_HEX_DIGITS = frozenset("0123456789abcdefABCDEF")


def parse_hex_value(text: str, *, max_digits: int, max_value: int, what: str = "Identifier") -> int:
    """Parse unprefixed hex ``text`` of at most ``max_digits`` digits.

    Raises:
        EmptyHexString: ``text`` is empty.
        InvalidHexCharacter: ``text`` contains a non-hex character.
        HexTooLong: ``text`` has more than ``max_digits`` digits.
        ValueOutOfRange: the parsed value is greater than ``max_value``.
    """

    if not text:
        logger.debug("Rejected empty hex string")
        raise EmptyHexString()
    for position, char in enumerate(text):
        if char not in _HEX_DIGITS:
            logger.debug("Rejected hex string %r: bad character at %d", text, position)
            raise InvalidHexCharacter(char, position)
    if len(text) > max_digits:
        logger.debug("Rejected hex string %r: %d digits > %d", text, len(text), max_digits)
        raise HexTooLong(len(text), max_digits)

    value = int(text, 16)
    if value > max_value:
        logger.debug("Rejected hex string %r: value above %#x", text, max_value)
        raise ValueOutOfRange(value, max_value, what)
    return value


def parse_hex(text: str, protocol: ProtocolDescriptor) -> int:
    """Parse hex ``text`` into a raw identifier valid for ``protocol``."""

    return parse_hex_value(text, max_digits=protocol.max_hex_digits, max_value=protocol.max_value)


if SETTINGS.text_rendering:

    def to_hex_string(bits: int, protocol: ProtocolDescriptor) -> str:
        """Render ``bits`` as fixed-width, zero-padded, upper-case hex."""

        if not 0 <= bits <= protocol.max_value:
            raise ValueOutOfRange(bits, protocol.max_value)
        return f"{bits:0{protocol.hex_digits}X}"

    __all__.append("to_hex_string")
