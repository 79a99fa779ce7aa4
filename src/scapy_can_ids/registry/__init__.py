"""Static address assignments and their validation."""

from .addresses import ADDRESS_TABLE, Addr, Address, address_names, lookup
from .validation import AddressTableValidator

__all__ = ["ADDRESS_TABLE", "Addr", "Address", "AddressTableValidator", "address_names", "lookup"]
