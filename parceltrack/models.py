"""Parcel records and the status lifecycle."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class ParcelStatus(str, Enum):
    """Lifecycle states a parcel moves through."""

    REGISTERED = "registered"
    SENT = "sent"
    DELIVERED = "delivered"


@dataclass
class Parcel:
    """A single parcel as stored in the tracker."""

    client: int
    address: str
    status: str = ParcelStatus.REGISTERED.value
    created_at: str = ""
    number: int = 0


_TRANSITIONS: dict[str, str | None] = {
    ParcelStatus.REGISTERED.value: ParcelStatus.SENT.value,
    ParcelStatus.SENT.value: ParcelStatus.DELIVERED.value,
    ParcelStatus.DELIVERED.value: None,
}


def next_status(status: str) -> str | None:
    """Return the status that follows ``status``, or None once delivered.

    Raises ValueError for a status outside the lifecycle.
    """
    key = status.value if isinstance(status, ParcelStatus) else status
    try:
        return _TRANSITIONS[key]
    except KeyError:
        raise ValueError(f"unknown parcel status: {status!r}") from None