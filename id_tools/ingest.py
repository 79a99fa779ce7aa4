"""CSV → JSON decoding pipeline for captured CAN identifiers."""
from __future__ import annotations

import argparse
import csv
import json
import logging
from pathlib import Path
from typing import Any, Iterable, Optional, Sequence

from scapy_can_ids import __version__
from scapy_can_ids.config import SETTINGS
from scapy_can_ids.errors import IdentifierError
from scapy_can_ids.identifier import IdCan2A, IdJ1939, Identifier, parse_identifier
from scapy_can_ids.logging_config import get_log_level, setup_logging
from scapy_can_ids.pgn import Pdu1
from scapy_can_ids.protocol import J1939, PROTOCOLS, ProtocolDescriptor
from scapy_can_ids.registry.addresses import Address

logger = logging.getLogger(__name__)


def normalize_identifier_log(
    csv_path: Path,
    output_path: Path,
    protocol: ProtocolDescriptor = J1939,
) -> int:
    """Decode every identifier in a capture CSV into structured JSON.

    The CSV needs an ``ID`` column of unprefixed hex identifiers and may carry
    a ``Label`` column. Returns the number of records written.
    """

    records = [describe(identifier, label) for identifier, label in _read_csv(csv_path, protocol)]
    output_path.write_text(json.dumps(records, indent=2), encoding="utf-8")
    logger.info("Decoded %d %s identifiers from %s", len(records), protocol.name, csv_path)
    return len(records)


def describe(identifier: Identifier, label: str = "") -> dict[str, Any]:
    """Flatten an identifier into a JSON-friendly record."""

    if not isinstance(identifier, (IdCan2A, IdJ1939)):
        raise TypeError(f"Unsupported identifier type: {type(identifier).__name__}")

    record: dict[str, Any] = {"label": label, "bits": identifier.bits}
    if SETTINGS.text_rendering:
        record["hex"] = identifier.to_hex()

    if isinstance(identifier, IdCan2A):
        record["identifier"] = identifier.id
        return record

    fields = identifier.fields()
    record.update(
        priority=fields.priority,
        pgn=int(fields.pgn),
        pdu_format="PDU1" if isinstance(fields.pdu_format, Pdu1) else "PDU2",
        pf=fields.pdu_format.value,
        communication_mode=fields.communication_mode.value,
        source_address=int(fields.source_address),
        source_name=_address_name(fields.source_address),
        destination_address=None if fields.destination_address is None else int(fields.destination_address),
        destination_name=_address_name(fields.destination_address),
        group_extension=fields.group_extension,
    )
    return record


def _address_name(address: Optional[Address]) -> Optional[str]:
    if address is None:
        return None
    addr = address.lookup()
    return None if addr is None else addr.display_name


def _read_csv(csv_path: Path, protocol: ProtocolDescriptor) -> Iterable[tuple[Identifier, str]]:
    with csv_path.open(newline="", encoding="utf-8") as handle:
        reader = csv.DictReader(handle)
        for raw in reader:
            try:
                identifier = parse_identifier(raw["ID"].strip(), protocol)
            except (KeyError, AttributeError, IdentifierError) as exc:
                raise ValueError(f"Invalid identifier row: {raw!r}") from exc
            yield identifier, (raw.get("Label") or "").strip()


def create_parser() -> argparse.ArgumentParser:
    """Create and configure argument parser."""
    parser = argparse.ArgumentParser(
        prog="can-ids-ingest",
        description="Decode a CSV of captured CAN identifiers into JSON",
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    parser.add_argument("csv_path", type=Path, help="Input CSV with an ID column")
    parser.add_argument("output_path", type=Path, help="Destination JSON file")
    parser.add_argument(
        "--protocol",
        choices=sorted(PROTOCOLS),
        default=J1939.name,
        help="Identifier scheme of the capture (default: j1939)",
    )
    parser.add_argument("-v", "--verbose", action="count", default=0, help="Increase log verbosity")
    parser.add_argument("--log-file", help="Also write logs to this file")
    return parser


def main(argv: Optional[Sequence[str]] = None) -> int:
    args = create_parser().parse_args(argv)
    setup_logging(level=get_log_level(args.verbose), verbose=args.verbose > 1, log_file=args.log_file)

    try:
        normalize_identifier_log(args.csv_path, args.output_path, PROTOCOLS[args.protocol])
    except (OSError, ValueError) as exc:
        logger.error("%s", exc)
        return 1
    return 0


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
