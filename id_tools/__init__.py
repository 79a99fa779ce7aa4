"""Command line tools for decoding captured CAN identifiers."""

from .ingest import normalize_identifier_log

__all__ = ["normalize_identifier_log"]
