import io
import re
import sqlite3

import pytest

from parceltrack.service import ParcelService, main
from parceltrack.store import ParcelNotFoundError, ParcelStore


@pytest.fixture
def store():
    connection = sqlite3.connect(":memory:")
    parcel_store = ParcelStore(connection)
    parcel_store.create_table()
    yield parcel_store
    connection.close()


@pytest.fixture
def out():
    return io.StringIO()


@pytest.fixture
def service(store, out):
    return ParcelService(store, out)


def test_register_stores_parcel(service, store, out):
    parcel = service.register(7, "some street")
    assert parcel.number > 0
    assert parcel.status == "registered"
    assert re.fullmatch(r"\d{4}-\d{2}-\d{2}T\d{2}:\d{2}:\d{2}Z", parcel.created_at)
    assert store.get(parcel.number) == parcel
    assert "some street" in out.getvalue()
    assert str(parcel.number) in out.getvalue()


def test_next_status_walks_lifecycle(service, store, out):
    parcel = service.register(7, "some street")
    service.next_status(parcel.number)
    assert store.get(parcel.number).status == "sent"
    service.next_status(parcel.number)
    assert store.get(parcel.number).status == "delivered"
    before = out.getvalue()
    service.next_status(parcel.number)
    assert store.get(parcel.number).status == "delivered"
    assert out.getvalue() == before


def test_next_status_of_missing_parcel(service):
    with pytest.raises(ParcelNotFoundError):
        service.next_status(12345)


def test_change_address_only_while_registered(service, store):
    parcel = service.register(7, "old")
    service.change_address(parcel.number, "new")
    assert store.get(parcel.number).address == "new"
    service.next_status(parcel.number)
    service.change_address(parcel.number, "newer")
    assert store.get(parcel.number).address == "new"


def test_delete_only_while_registered(service, store):
    kept = service.register(7, "a")
    service.next_status(kept.number)
    removed = service.register(7, "b")
    service.delete(kept.number)
    service.delete(removed.number)
    assert [p.number for p in store.get_by_client(7)] == [kept.number]


def test_print_client_parcels(service, out):
    first = service.register(9, "first place")
    second = service.register(9, "second place")
    service.register(10, "elsewhere")
    out.seek(0)
    out.truncate()
    service.print_client_parcels(9)
    lines = out.getvalue().split("\n")
    assert lines[0] == "Посылки клиента 9:"
    assert len(lines) == 5
    assert lines[-2:] == ["", ""]
    assert "first place" in lines[1] and str(first.number) in lines[1]
    assert "second place" in lines[2] and str(second.number) in lines[2]


def test_main_runs_scenario(tmp_path, capsys):
    db_path = tmp_path / "tracker.db"
    assert main([str(db_path)]) == 0
    with sqlite3.connect(db_path) as connection:
        parcels = ParcelStore(connection).get_by_client(1)
    assert len(parcels) == 1
    assert parcels[0].status == "sent"
    assert parcels[0].address == "Саратов, д. Верхние Зори, ул. Козлова, д. 25"
    assert capsys.readouterr().out.count("Посылки клиента 1:") == 3