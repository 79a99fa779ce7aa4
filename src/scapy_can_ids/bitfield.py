"""Bit extraction and packing on fixed-width unsigned containers.

Offsets are counted from the least significant bit. Both helpers are pure and
operate on plain ``int`` values; callers enforce protocol width limits before
calling in.
"""
from __future__ import annotations

from .errors import BitLayoutError

__all__ = ["CONTAINER_BITS", "extract", "mask", "pack"]

CONTAINER_BITS = 32


def mask(bit_width: int) -> int:
    """Return an all-ones mask ``bit_width`` bits wide."""

    return (1 << bit_width) - 1


def _check_layout(bit_offset: int, bit_width: int, capacity: int) -> None:
    if bit_offset < 0 or bit_width <= 0:
        raise BitLayoutError(f"Invalid bit field offset={bit_offset} width={bit_width}")
    if bit_offset + bit_width > capacity:
        raise BitLayoutError(
            f"Bit field [{bit_offset}:{bit_offset + bit_width}] exceeds {capacity}-bit container"
        )


def extract(container: int, bit_offset: int, bit_width: int, *, capacity: int = CONTAINER_BITS) -> int:
    """Return the unsigned field of ``bit_width`` bits starting at ``bit_offset``."""

    _check_layout(bit_offset, bit_width, capacity)
    return (container >> bit_offset) & mask(bit_width)


def pack(
    container: int,
    bit_offset: int,
    bit_width: int,
    value: int,
    *,
    capacity: int = CONTAINER_BITS,
) -> int:
    """Return ``container`` with the field at ``bit_offset`` replaced by ``value``."""

    _check_layout(bit_offset, bit_width, capacity)
    field_mask = mask(bit_width)
    assert 0 <= value <= field_mask, f"value {value:#x} does not fit in {bit_width} bits"
    cleared = container & ~(field_mask << bit_offset)
    return cleared | ((value & field_mask) << bit_offset)
