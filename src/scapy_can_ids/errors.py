"""Exception types raised by the identifier codecs."""
from __future__ import annotations

__all__ = [
    "BitLayoutError",
    "ConfigurationError",
    "EmptyHexString",
    "HexTooLong",
    "IdentifierError",
    "InvalidHexCharacter",
    "ValueOutOfRange",
    "require_int",
]


class IdentifierError(ValueError):
    """Base class for rejected identifier input."""


class InvalidHexCharacter(IdentifierError):
    """A character outside ``[0-9a-fA-F]`` was found in hex text."""

    def __init__(self, char: str, position: int) -> None:
        super().__init__(f"Invalid hex character {char!r} at position {position}")
        self.char = char
        self.position = position


class EmptyHexString(InvalidHexCharacter):
    """Hex text contained no digits at all."""

    def __init__(self) -> None:
        IdentifierError.__init__(self, "Hex string must contain at least one digit")
        self.char = ""
        self.position = 0


class HexTooLong(IdentifierError):
    """Hex text has more digits than the target container can hold."""

    def __init__(self, length: int, limit: int) -> None:
        super().__init__(f"Hex string has {length} digits; at most {limit} allowed")
        self.length = length
        self.limit = limit


class ValueOutOfRange(IdentifierError):
    """A numeric value exceeds the bit width of its field or protocol."""

    def __init__(self, value: int, limit: int, what: str = "Identifier") -> None:
        super().__init__(f"{what} out of range! Valid range is 0..{limit:#X} - got {value:#X}")
        self.value = value
        self.limit = limit


class BitLayoutError(Exception):
    """A bit field layout does not fit its container.

    Raised for programming errors in field definitions, never for bad input.
    """


class ConfigurationError(ValueError):
    """An unrecognised capability option was supplied."""


def require_int(value: object, what: str = "Identifier") -> None:
    """Raise ``TypeError`` unless ``value`` is a plain integer (``bool`` excluded)."""

    if isinstance(value, bool) or not isinstance(value, int):
        raise TypeError(f"{what} must be an int, got {type(value).__name__}")
