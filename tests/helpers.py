from shipment_tracker.storage.backends import MemoryBackend
from shipment_tracker.storage.shipment_store import ShipmentStore

TWO_SHIPMENTS = [
    {"id": 1, "originState": "Texas", "destinationState": "Ohio",
     "description": "Parts", "containerQuantity": 4, "vehicleType": "Truck"},
    {"id": 2, "originState": "Ohio", "destinationState": "Texas",
     "description": "Steel", "containerQuantity": 2, "vehicleType": "Ship"},
]

NEW_SHIPMENT = {
    "originState": "Texas",
    "destinationState": "Ohio",
    "description": "Parts",
    "containerQuantity": 4,
    "vehicleType": "Truck",
}


def make_store(seed=None, backend=None):
    seed = list(seed or [])
    return ShipmentStore(backend or MemoryBackend(), key="shipments-db", seed_loader=lambda: seed)
