"""Validation helpers for the address table."""
from __future__ import annotations

from typing import Iterable, Mapping, Sequence

from .addresses import ADDRESS_TABLE, Addr, address_names


class AddressTableValidator:
    """Runs sanity checks on address table content."""

    def __init__(
        self,
        table: Sequence[tuple[int, Addr]] = ADDRESS_TABLE,
        names: Mapping[int, str] | None = None,
    ) -> None:
        self._table = table
        self._names = address_names() if names is None else names

    def validate(self) -> Iterable[str]:
        """Yield validation error strings."""

        previous = -1
        for code, addr in self._table:
            if not 0 <= code <= 0xFF:
                yield f"Address {code} does not fit in one byte"
            if code <= previous:
                yield f"Address {code} is out of order or duplicated"
            if int(addr) != code:
                yield f"Address {code} is mapped to {addr.name} ({int(addr)})"
            yield from self.validate_name(code)
            previous = code

    def validate_name(self, code: int) -> Iterable[str]:
        """Validate the display name registered for a single code."""

        name = self._names.get(code)
        if name is None:
            yield f"Address {code} has no display name"
        elif not name.strip():
            yield f"Address {code} has a blank display name"
