import json

import pytest

from shipment_tracker.config import SEED_FILE
from shipment_tracker.core.models import ShipmentRecord
from shipment_tracker.storage.backends import MemoryBackend, StorageCorruptError
from shipment_tracker.storage.shipment_store import ShipmentStore, load_seed_shipments, next_shipment_id

from tests.helpers import NEW_SHIPMENT, TWO_SHIPMENTS, make_store


def test_get_all_is_idempotent(store):
    assert store.get_all() == store.get_all()


def test_first_read_seeds_and_persists():
    backend = MemoryBackend()
    store = make_store(TWO_SHIPMENTS, backend=backend)

    assert not backend.has("shipments-db")
    shipments = store.get_all()

    assert [s.id for s in shipments] == [1, 2]
    assert backend.read("shipments-db") == {"shipments": TWO_SHIPMENTS}


def test_existing_collection_is_not_reseeded():
    backend = MemoryBackend({"shipments-db": {"shipments": []}})
    store = make_store(TWO_SHIPMENTS, backend=backend)

    assert store.get_all() == []


def test_add_to_empty_store_starts_at_one(empty_store):
    created = empty_store.add(NEW_SHIPMENT)

    assert created.id == 1
    assert created.origin_state == "Texas"
    assert len(empty_store.get_all()) == 1


def test_add_uses_max_plus_one(store):
    created = store.add(NEW_SHIPMENT)
    assert created.id == 3


def test_add_ids_unique_and_sequential(empty_store):
    ids = []
    for _ in range(5):
        previous = [s.id for s in empty_store.get_all()]
        created = empty_store.add(NEW_SHIPMENT)
        assert created.id == (max(previous) + 1 if previous else 1)
        ids.append(created.id)
    assert len(set(ids)) == len(ids)


def test_add_ignores_incoming_id(store):
    created = store.add({**NEW_SHIPMENT, "id": 1})
    assert created.id == 3
    assert [s.id for s in store.get_all()] == [1, 2, 3]


def test_add_accepts_record():
    store = make_store([{**TWO_SHIPMENTS[0], "id": 7}])
    created = store.add(ShipmentRecord.from_dict(NEW_SHIPMENT))
    assert created.id == 8


def test_next_id_after_gap():
    records = [ShipmentRecord.from_dict({**NEW_SHIPMENT, "id": i}) for i in (1, 5, 3)]
    assert next_shipment_id(records) == 6
    assert next_shipment_id([]) == 1


def test_update_replaces_only_target_and_keeps_order():
    seed = [{**NEW_SHIPMENT, "id": i, "description": f"Load {i}"} for i in (1, 2, 3, 4)]
    store = make_store(seed)

    updated = store.update({**NEW_SHIPMENT, "id": 3, "description": "Changed", "vehicleType": "Ship"})

    shipments = store.get_all()
    assert updated.description == "Changed"
    assert [s.id for s in shipments] == [1, 2, 3, 4]
    assert shipments[2].description == "Changed"
    assert shipments[2].vehicle_type == "Ship"
    assert [s.description for s in shipments if s.id != 3] == ["Load 1", "Load 2", "Load 4"]


def test_update_unknown_id_returns_none_without_write():
    backend = MemoryBackend()
    store = make_store(TWO_SHIPMENTS, backend=backend)
    before = store.get_all()
    writes = []
    original_write = backend.write
    backend.write = lambda key, value: writes.append(key) or original_write(key, value)

    assert store.update({**NEW_SHIPMENT, "id": 99}) is None
    assert store.get_all() == before
    assert writes == []


def test_delete_removes_exactly_one(store):
    before = store.get_all()
    store.delete(1)
    after = store.get_all()
    assert after == [s for s in before if s.id != 1]


def test_delete_absent_id_is_noop(store):
    before = store.get_all()
    store.delete(42)
    assert store.get_all() == before


def test_other_document_keys_survive_mutations():
    backend = MemoryBackend({"shipments-db": {"shipments": TWO_SHIPMENTS, "meta": {"v": 1}}})
    store = make_store([], backend=backend)

    store.add(NEW_SHIPMENT)
    store.delete(1)

    assert backend.read("shipments-db")["meta"] == {"v": 1}


def test_reset_to_seed_and_to_records(store):
    store.delete(1)
    store.delete(2)
    assert [s.id for s in store.reset()] == [1, 2]

    store.reset([{**NEW_SHIPMENT, "id": 10}])
    assert [s.id for s in store.get_all()] == [10]


def test_get_by_id(store):
    assert store.get(2).origin_state == "Ohio"
    assert store.get(5) is None


def test_bundled_seed_file_is_well_formed():
    seed = load_seed_shipments(SEED_FILE)
    ids = [s["id"] for s in seed]

    assert seed
    assert len(set(ids)) == len(ids)
    for raw in seed:
        record = ShipmentRecord.from_dict(raw)
        assert record.container_quantity > 0
        assert record.vehicle_type in ("Truck", "Ship", "Airplane")

    with open(SEED_FILE, encoding="utf-8") as f:
        assert "shipments" in json.load(f)


def test_default_seed_loader_used_when_none_given():
    store = ShipmentStore(MemoryBackend())
    assert len(store.get_all()) == len(load_seed_shipments())


def test_non_object_document_raises_and_is_left_alone():
    backend = MemoryBackend({"shipments-db": TWO_SHIPMENTS})
    store = make_store([NEW_SHIPMENT], backend=backend)

    with pytest.raises(StorageCorruptError):
        store.get_all()

    assert backend.read("shipments-db") == TWO_SHIPMENTS


def test_non_list_collection_raises():
    backend = MemoryBackend({"shipments-db": {"shipments": None}})
    store = make_store([NEW_SHIPMENT], backend=backend)

    with pytest.raises(StorageCorruptError):
        store.get_all()
    with pytest.raises(StorageCorruptError):
        store.add(NEW_SHIPMENT)

    assert backend.read("shipments-db") == {"shipments": None}
