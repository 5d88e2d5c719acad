"""Parcel tracking service and its demonstration command."""

from __future__ import annotations

import argparse
import sqlite3
import sys
from contextlib import closing
from datetime import datetime, timezone
from typing import TextIO

from .models import Parcel, ParcelStatus
from .models import next_status as _following_status
from .store import ParcelNotFoundError, ParcelStore


def _utc_now() -> str:
    return datetime.now(timezone.utc).strftime("%Y-%m-%dT%H:%M:%SZ")


class ParcelService:
    """Business operations on parcels, reporting progress to a text stream."""

    def __init__(self, store: ParcelStore, out: TextIO | None = None) -> None:
        self._store = store
        self._out = out

    def _print(self, *args: object) -> None:
        print(*args, file=self._out if self._out is not None else sys.stdout)

    def register(self, client: int, address: str) -> Parcel:
        """Register a new parcel for a client and return it."""
        parcel = Parcel(
            client=client,
            status=ParcelStatus.REGISTERED.value,
            address=address,
            created_at=_utc_now(),
        )
        parcel.number = self._store.add(parcel)
        self._print(
            f"Новая посылка № {parcel.number} на адрес {parcel.address} "
            f"от клиента с идентификатором {parcel.client} "
            f"зарегистрирована {parcel.created_at}"
        )
        return parcel

    def print_client_parcels(self, client: int) -> None:
        """Print every parcel of a client followed by a blank line."""
        parcels = self._store.get_by_client(client)
        self._print(f"Посылки клиента {client}:")
        for parcel in parcels:
            self._print(
                f"Посылка № {parcel.number} на адрес {parcel.address} "
                f"от клиента с идентификатором {parcel.client} "
                f"зарегистрирована {parcel.created_at}, статус {parcel.status}"
            )
        self._print()

    def next_status(self, number: int) -> None:
        """Advance a parcel to its next status; delivered parcels stay put."""
        parcel = self._store.get(number)
        following = _following_status(parcel.status)
        if following is None:
            return
        self._print(f"У посылки № {number} новый статус: {following}")
        self._store.set_status(number, following)

    def change_address(self, number: int, address: str) -> None:
        """Change the delivery address of a registered parcel."""
        self._store.set_address(number, address)

    def delete(self, number: int) -> None:
        """Delete a parcel if it is still registered."""
        self._store.delete(number)


def main(argv: list[str] | None = None) -> int:
    """Run the demonstration scenario against a SQLite database."""
    parser = argparse.ArgumentParser(description="Parcel tracker demo")
    parser.add_argument("database", nargs="?", default="tracker.db")
    args = parser.parse_args(argv)

    with closing(sqlite3.connect(args.database)) as connection:
        store = ParcelStore(connection)
        service = ParcelService(store)
        client = 1
        address = "Псков, д. Пушкина, ул. Колотушкина, д. 5"
        try:
            store.create_table()
            parcel = service.register(client, address)
            service.change_address(
                parcel.number, "Саратов, д. Верхние Зори, ул. Козлова, д. 25"
            )
            service.next_status(parcel.number)
            service.print_client_parcels(client)
            # a sent parcel must survive deletion
            service.delete(parcel.number)
            service.print_client_parcels(client)
            parcel = service.register(client, address)
            service.delete(parcel.number)
            service.print_client_parcels(client)
        except (sqlite3.Error, ParcelNotFoundError, ValueError) as exc:
            print(exc)
            return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())