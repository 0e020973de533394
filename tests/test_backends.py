import pytest

from shipment_tracker.storage.backends import (
    JsonFileBackend,
    MemoryBackend,
    StorageCorruptError,
    open_backend,
)
from shipment_tracker.storage.shipment_store import ShipmentStore

from tests.helpers import NEW_SHIPMENT, TWO_SHIPMENTS


def test_file_backend_round_trip(tmp_path):
    backend = JsonFileBackend(tmp_path / "data")

    assert backend.read("shipments-db") is None
    assert not backend.has("shipments-db")

    backend.write("shipments-db", {"shipments": TWO_SHIPMENTS})

    assert backend.has("shipments-db")
    assert (tmp_path / "data" / "shipments-db.json").exists()
    assert backend.read("shipments-db") == {"shipments": TWO_SHIPMENTS}


def test_file_backend_leaves_no_temp_files(tmp_path):
    backend = JsonFileBackend(tmp_path)
    for i in range(3):
        backend.write("shipments-db", {"shipments": [], "n": i})

    assert sorted(p.name for p in tmp_path.iterdir()) == ["shipments-db.json"]
    assert backend.read("shipments-db")["n"] == 2


def test_file_backend_corrupt_document_raises(tmp_path):
    (tmp_path / "shipments-db.json").write_text("{not json", encoding="utf-8")
    backend = JsonFileBackend(tmp_path)

    with pytest.raises(StorageCorruptError):
        backend.read("shipments-db")


def test_file_backend_remove(tmp_path):
    backend = JsonFileBackend(tmp_path)
    backend.write("k", [1])
    backend.remove("k")
    backend.remove("k")
    assert backend.read("k") is None


def test_memory_backend_copies_values():
    backend = MemoryBackend()
    value = {"shipments": [{"id": 1}]}
    backend.write("k", value)

    value["shipments"].append({"id": 2})
    backend.read("k")["shipments"].append({"id": 3})

    assert backend.read("k") == {"shipments": [{"id": 1}]}


def test_open_backend_falls_back_to_memory(tmp_path):
    blocker = tmp_path / "not-a-dir"
    blocker.write_text("x", encoding="utf-8")

    backend = open_backend(blocker / "data")

    assert isinstance(backend, MemoryBackend)


def test_store_persists_across_instances(tmp_path):
    first = ShipmentStore(JsonFileBackend(tmp_path), seed_loader=lambda: TWO_SHIPMENTS)
    created = first.add(NEW_SHIPMENT)

    second = ShipmentStore(JsonFileBackend(tmp_path), seed_loader=lambda: [])
    assert [s.id for s in second.get_all()] == [1, 2, created.id]


def test_file_backend_wraps_undecodable_bytes(tmp_path):
    (tmp_path / "shipments-db.json").write_bytes(b'{"shipments": ["\xff\xfe"]}')

    with pytest.raises(StorageCorruptError):
        JsonFileBackend(tmp_path).read("shipments-db")
