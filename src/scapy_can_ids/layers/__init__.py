"""Scapy layer definitions for CAN identifiers."""

from .identifier import CAN2AIdentifier, J1939Identifier

__all__ = ["CAN2AIdentifier", "J1939Identifier"]
