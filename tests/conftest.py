import pytest

from shipment_tracker.core.repository_view import ShipmentRepositoryView

from tests.helpers import TWO_SHIPMENTS, make_store


@pytest.fixture
def empty_store():
    return make_store([])


@pytest.fixture
def store():
    return make_store(TWO_SHIPMENTS)


@pytest.fixture
def view(store):
    v = ShipmentRepositoryView(store)
    v.load()
    return v
