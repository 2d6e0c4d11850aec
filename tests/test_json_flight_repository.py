import json
import threading

import pytest

from flightbook.domain.entities.flight import FlightData
from flightbook.domain.interfaces.flight_repository import FlightStoreError
from flightbook.infrastructure.repositories import json_flight_repository
from flightbook.infrastructure.repositories.json_flight_repository import JsonFlightRepository
from tests.payloads import CHI_MIA, NYC_LAX


def _read_file(repository):
    with open(repository.file_path, encoding="utf-8") as f:
        return f.read()


def test_find_all_creates_directory_and_empty_file(tmp_path):
    data_dir = tmp_path / "nested" / "data"
    repository = JsonFlightRepository(str(data_dir))

    assert repository.find_all() == []
    assert data_dir.is_dir()
    assert _read_file(repository) == "[]"


def test_find_all_returns_records_in_file_order(data_dir, sample_flights):
    data_dir.mkdir()
    (data_dir / "flights.json").write_text(json.dumps([f.to_dict() for f in sample_flights]))
    repository = JsonFlightRepository(str(data_dir))

    assert repository.find_all() == sample_flights
    assert repository.find_all() == repository.find_all()


def test_find_all_returns_empty_list_on_corrupt_file(data_dir):
    data_dir.mkdir()
    (data_dir / "flights.json").write_text("{not json")
    repository = JsonFlightRepository(str(data_dir))

    assert repository.find_all() == []


def test_find_all_returns_empty_list_when_file_is_not_an_array(data_dir):
    data_dir.mkdir()
    (data_dir / "flights.json").write_text(json.dumps({"id": "1"}))
    repository = JsonFlightRepository(str(data_dir))

    assert repository.find_all() == []


def test_legacy_record_does_not_hide_the_rest_of_the_store(data_dir, nyc_lax_data):
    legacy = {"id": "1", "origin": "NYC", "destination": "", "departureTime": "2023-05-15T08:00:00Z",
              "arrivalTime": "2023-05-15T11:00:00Z", "price": None}
    data_dir.mkdir()
    (data_dir / "flights.json").write_text(json.dumps([legacy, {"id": "2", **CHI_MIA}, "junk", {"origin": "BOS"}]))
    repository = JsonFlightRepository(str(data_dir), clock=lambda: 5.0)

    assert [flight.to_dict() for flight in repository.find_all()] == [legacy, {"id": "2", **CHI_MIA}]
    assert repository.ping() is True

    created = repository.create(nyc_lax_data)
    assert created is not None
    assert repository.delete("2").to_dict() == {"id": "2", **CHI_MIA}
    assert json.loads(_read_file(repository)) == [legacy, {"id": "5000", **NYC_LAX}]


def test_find_by_id(data_dir, sample_flights):
    data_dir.mkdir()
    (data_dir / "flights.json").write_text(json.dumps([f.to_dict() for f in sample_flights]))
    repository = JsonFlightRepository(str(data_dir))

    assert repository.find_by_id("2") == sample_flights[1]
    assert repository.find_by_id("999") is None


def test_create_assigns_timestamp_id_and_persists(data_dir, nyc_lax_data):
    repository = JsonFlightRepository(str(data_dir), clock=lambda: 1234567.890)

    created = repository.create(nyc_lax_data)

    assert created.id == "1234567890"
    assert created.data() == nyc_lax_data
    assert json.loads(_read_file(repository)) == [{"id": "1234567890", **NYC_LAX}]


def test_create_saves_pretty_printed_json(repository, nyc_lax_data):
    repository.create(nyc_lax_data)
    assert _read_file(repository).startswith("[\n  {\n")


def test_create_bumps_id_when_clock_repeats(data_dir, nyc_lax_data):
    repository = JsonFlightRepository(str(data_dir), clock=lambda: 1000.0)

    first = repository.create(nyc_lax_data)
    second = repository.create(FlightData.from_dict(CHI_MIA))

    assert first.id == "1000000"
    assert second.id == "1000001"
    assert len(repository.find_all()) == 2


def test_create_then_find_by_id_round_trips(repository, nyc_lax_data):
    created = repository.create(nyc_lax_data)
    assert repository.find_by_id(created.id) == created


def test_create_returns_none_when_write_fails(repository, nyc_lax_data, monkeypatch):
    repository.find_all()

    def fail(*args, **kwargs):
        raise OSError("disk full")

    monkeypatch.setattr(json_flight_repository.tempfile, "mkstemp", fail)

    assert repository.create(nyc_lax_data) is None
    assert _read_file(repository) == "[]"


def test_mutations_refuse_to_overwrite_unreadable_file(data_dir, nyc_lax_data):
    data_dir.mkdir()
    (data_dir / "flights.json").write_text("{not json")
    repository = JsonFlightRepository(str(data_dir))

    with pytest.raises(FlightStoreError):
        repository.create(nyc_lax_data)
    with pytest.raises(FlightStoreError):
        repository.update("1", nyc_lax_data)
    with pytest.raises(FlightStoreError):
        repository.delete("1")
    assert _read_file(repository) == "{not json"


def test_update_replaces_fields_and_keeps_id(repository, nyc_lax_data):
    created = repository.create(nyc_lax_data)
    other = repository.create(FlightData.from_dict(CHI_MIA))
    replacement = FlightData.from_dict({**CHI_MIA, "origin": "Boston", "price": 399.99})

    updated = repository.update(created.id, replacement)

    assert updated.id == created.id
    assert updated.data() == replacement
    assert repository.find_all() == [updated, other]


def test_update_raises_when_write_fails(repository, nyc_lax_data, monkeypatch):
    created = repository.create(nyc_lax_data)
    monkeypatch.setattr(json_flight_repository.os, "replace", _raise_os_error)

    with pytest.raises(FlightStoreError):
        repository.update(created.id, nyc_lax_data)


def test_delete_returns_removed_record(repository, nyc_lax_data):
    first = repository.create(nyc_lax_data)
    second = repository.create(FlightData.from_dict(CHI_MIA))

    assert repository.delete(first.id) == first
    assert repository.find_all() == [second]


def test_delete_raises_when_write_fails(repository, nyc_lax_data, monkeypatch):
    created = repository.create(nyc_lax_data)
    monkeypatch.setattr(json_flight_repository.os, "replace", _raise_os_error)

    with pytest.raises(FlightStoreError):
        repository.delete(created.id)
    assert repository.find_all() == [created]


def test_unknown_id_leaves_file_untouched(repository, nyc_lax_data):
    repository.create(nyc_lax_data)
    before = _read_file(repository)

    assert repository.update("missing", nyc_lax_data) is None
    assert repository.delete("missing") is None
    assert _read_file(repository) == before


def test_concurrent_creates_do_not_lose_records(repository, nyc_lax_data):
    threads = [threading.Thread(target=repository.create, args=(nyc_lax_data,)) for _ in range(20)]
    for thread in threads:
        thread.start()
    for thread in threads:
        thread.join()

    flights = repository.find_all()
    assert len(flights) == 20
    assert len({flight.id for flight in flights}) == 20


def test_ping(data_dir):
    repository = JsonFlightRepository(str(data_dir))
    assert repository.ping() is True

    (data_dir / "flights.json").write_text("oops")
    assert repository.ping() is False


def _raise_os_error(*args, **kwargs):
    raise OSError("read-only file system")
