"""Reservation export loading.

The reservation API exports bookings as JSON, either a bare list of
objects or ``{"reservations": [...]}``. Each object needs ``id``,
``user_id``, ``start_time`` and ``end_time``; ``status`` defaults to
``active``.

Pure booking rules live in :mod:`dstctl.domain.reservations`; this module
only handles reading and decoding files.
"""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any

from dstctl.domain.errors import ParseError
from dstctl.domain.reservations import Reservation
from dstctl.domain.types import ReservationStatus
from dstctl.domain.values import Instant

logger = logging.getLogger(__name__)

_REQUIRED_KEYS = ("id", "user_id", "start_time", "end_time")


def parse_reservation(record: dict[str, Any]) -> Reservation:
    """Decode one exported booking."""
    missing = [key for key in _REQUIRED_KEYS if key not in record]
    if missing:
        msg = f"missing field(s): {', '.join(missing)}"
        raise ParseError(msg)
    try:
        status = ReservationStatus(record.get("status", ReservationStatus.ACTIVE))
    except ValueError as exc:
        msg = f"unknown status {record.get('status')!r}"
        raise ParseError(msg) from exc
    try:
        reservation_id = int(record["id"])
        user_id = int(record["user_id"])
    except (TypeError, ValueError) as exc:
        msg = f"invalid id or user_id: {exc}"
        raise ParseError(msg) from exc
    return Reservation(
        id=reservation_id,
        user_id=user_id,
        start_time=Instant.parse(record["start_time"]),
        end_time=Instant.parse(record["end_time"]),
        status=status,
    )


def load_reservations(path: Path) -> list[Reservation]:
    """Read every booking from the JSON export at *path*.

    Raises:
        FileNotFoundError: *path* does not exist.
        ParseError: The document or one of its records is malformed.
    """
    raw = path.read_text(encoding="utf-8")
    try:
        document = json.loads(raw)
    except json.JSONDecodeError as exc:
        msg = f"Invalid JSON in {path}: {exc}"
        raise ParseError(msg) from exc

    if isinstance(document, dict):
        document = document.get("reservations")
    if not isinstance(document, list):
        msg = f"{path}: expected a list of reservations"
        raise ParseError(msg)

    reservations: list[Reservation] = []
    for index, record in enumerate(document):
        if not isinstance(record, dict):
            msg = f"{path}: record {index} is not an object"
            raise ParseError(msg)
        try:
            reservations.append(parse_reservation(record))
        except ParseError as exc:
            msg = f"{path}: record {index}: {exc}"
            raise ParseError(msg) from exc

    logger.debug("Loaded %d reservations from %s", len(reservations), path)
    return reservations
