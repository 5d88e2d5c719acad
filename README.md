# parceltrack

parceltrack records parcels in an SQLite database and tracks each one from
registration to delivery.

A parcel has a number, a client identifier, a status, a delivery address and
the time it was registered (UTC, in the form `2024-01-31T12:00:00Z`). Its
status moves forward one step at a time:

    registered -> sent -> delivered

A parcel's address can be changed, and the parcel can be deleted, only while
its status is still `registered`. For a parcel in any other status these
requests leave it unchanged.

## Installation

    pip install .

To run the tests:

    pip install ".[test]"
    pytest

## Command line

    parceltrack [DATABASE]

The command opens (or creates) the SQLite file `DATABASE`, `tracker.db` in
the current directory by default, creates the `parcel` table if needed, and
runs a short demonstration. It registers a parcel for client 1, changes its
address, moves it to `sent`, lists the client's parcels, and shows that a sent
parcel is not deleted. Then it registers a second parcel, deletes it, and lists
the client's parcels again. Messages are printed in Russian.

If a database error occurs or a parcel is missing, the command prints the
error and exits with status 1; otherwise it exits with status 0.

## Library use

```python
import sqlite3

from parceltrack.store import ParcelStore
from parceltrack.service import ParcelService

connection = sqlite3.connect("tracker.db")
store = ParcelStore(connection)
store.create_table()

service = ParcelService(store)
parcel = service.register(1, "12 Example Street")
service.change_address(parcel.number, "34 Sample Road")
service.next_status(parcel.number)      # registered -> sent
service.print_client_parcels(1)
```

### `parceltrack.service`

`ParcelService(store, out=None)` writes its messages to the text stream `out`,
or to standard output when none is given.

- `register(client, address)` stores a new `registered` parcel stamped with
  the current UTC time, prints a message and returns the `Parcel` with its
  assigned number.
- `print_client_parcels(client)` prints every parcel of the client, followed
  by a blank line.
- `next_status(number)` advances the parcel one step and prints its new
  status; a delivered parcel is left as it is.
- `change_address(number, address)` and `delete(number)` act only on
  registered parcels.

`main(argv=None)` is the function behind the `parceltrack` command.

### `parceltrack.store`

`ParcelStore(connection)` works on an `sqlite3` connection and gives direct
access to the `parcel` table through `create_table`, `add`, `get`,
`get_by_client`, `set_status`, `set_address` and `delete`. `add` returns the
number given to the new parcel. `set_status` stores any status string it is
given. Asking `get`, `set_address` or `delete` for a parcel number that does
not exist raises `ParcelNotFoundError`, a `LookupError`.

### `parceltrack.models`

`Parcel` is a dataclass with the fields `client`, `address`, `status`,
`created_at` and `number`. `ParcelStatus` holds the values `registered`,
`sent` and `delivered`. `next_status(status)` returns the status that follows
the given one, `None` after `delivered`, and raises `ValueError` for any other
string.

## What it does not do

The `parceltrack` command only runs the demonstration described above; it has
no options for registering, listing, updating or deleting individual parcels.
Those operations are available through the library.