"""SQLite-backed storage for parcels."""

from __future__ import annotations

import sqlite3

from .models import Parcel, ParcelStatus

_COLUMNS = "number, client, status, address, created_at"


class ParcelNotFoundError(LookupError):
    """Raised when no parcel has the requested number."""

    def __init__(self, number: int) -> None:
        super().__init__(f"parcel {number} not found")
        self.number = number


def _row_to_parcel(row: tuple) -> Parcel:
    number, client, status, address, created_at = row
    return Parcel(
        number=number,
        client=client,
        status=status,
        address=address,
        created_at=created_at,
    )


class ParcelStore:
    """Reads and writes parcels in the ``parcel`` table."""

    def __init__(self, connection: sqlite3.Connection) -> None:
        self._conn = connection

    def create_table(self) -> None:
        """Create the parcel table if it does not exist yet."""
        with self._conn:
            self._conn.execute(
                "CREATE TABLE IF NOT EXISTS parcel ("
                "number INTEGER PRIMARY KEY AUTOINCREMENT, "
                "client INTEGER NOT NULL DEFAULT 0, "
                "status VARCHAR(128) NOT NULL DEFAULT '', "
                "address VARCHAR(256) NOT NULL DEFAULT '', "
                "created_at VARCHAR(256) NOT NULL DEFAULT '')"
            )

    def add(self, parcel: Parcel) -> int:
        """Insert a parcel and return the number assigned to it."""
        with self._conn:
            cursor = self._conn.execute(
                "INSERT INTO parcel (client, status, address, created_at) "
                "VALUES (:client, :status, :address, :created_at)",
                {
                    "client": parcel.client,
                    "status": str(ParcelStatus(parcel.status).value)
                    if isinstance(parcel.status, ParcelStatus)
                    else parcel.status,
                    "address": parcel.address,
                    "created_at": parcel.created_at,
                },
            )
        return int(cursor.lastrowid)

    def get(self, number: int) -> Parcel:
        """Return the parcel with the given number."""
        row = self._conn.execute(
            f"SELECT {_COLUMNS} FROM parcel WHERE number = :number",
            {"number": number},
        ).fetchone()
        if row is None:
            raise ParcelNotFoundError(number)
        return _row_to_parcel(row)

    def get_by_client(self, client: int) -> list[Parcel]:
        """Return every parcel belonging to a client."""
        rows = self._conn.execute(
            f"SELECT {_COLUMNS} FROM parcel WHERE client = :client",
            {"client": client},
        )
        return [_row_to_parcel(row) for row in rows]

    def set_status(self, number: int, status: str) -> None:
        """Overwrite the status of a parcel."""
        if isinstance(status, ParcelStatus):
            status = status.value
        with self._conn:
            self._conn.execute(
                "UPDATE parcel SET status = :status WHERE number = :number",
                {"status": status, "number": number},
            )

    def set_address(self, number: int, address: str) -> None:
        """Change the address; only registered parcels are changed."""
        if self._is_registered(number):
            with self._conn:
                self._conn.execute(
                    "UPDATE parcel SET address = :address WHERE number = :number",
                    {"address": address, "number": number},
                )

    def delete(self, number: int) -> None:
        """Delete a parcel; only registered parcels are removed."""
        if self._is_registered(number):
            with self._conn:
                self._conn.execute(
                    "DELETE FROM parcel WHERE number = :number",
                    {"number": number},
                )

    def _is_registered(self, number: int) -> bool:
        row = self._conn.execute(
            "SELECT status FROM parcel WHERE number = :number",
            {"number": number},
        ).fetchone()
        if row is None:
            raise ParcelNotFoundError(number)
        return row[0] == ParcelStatus.REGISTERED.value