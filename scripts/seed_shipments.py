"""
Reset the local shipment store.

    python scripts/seed_shipments.py              # restore bundled seed data
    python scripts/seed_shipments.py --random 200 # replace with 200 random shipments
"""
import argparse
import random
import sys
from pathlib import Path

sys.path.insert(0, str(Path(__file__).resolve().parents[1]))

from shipment_tracker.config import DATA_DIR, STORAGE_KEY, configure_logging
from shipment_tracker.core.models import VEHICLE_TYPES, ShipmentRecord
from shipment_tracker.core.us_states import US_STATES
from shipment_tracker.storage.backends import open_backend
from shipment_tracker.storage.shipment_store import ShipmentStore

CARGO = [
    "Auto parts", "Consumer electronics", "Grain", "Lumber", "Steel coils",
    "Pharmaceuticals", "Frozen food", "Textiles", "Furniture", "Machinery",
]


def random_shipments(count, seed=None):
    rng = random.Random(seed)
    shipments = []
    for i in range(count):
        src = rng.choice(US_STATES)
        dst = rng.choice([s for s in US_STATES if s != src])
        shipments.append(ShipmentRecord(
            id=i + 1,
            origin_state=src,
            destination_state=dst,
            description=rng.choice(CARGO),
            container_quantity=rng.randint(1, 30),
            vehicle_type=rng.choice(VEHICLE_TYPES),
        ))
    return shipments


def main(argv=None):
    parser = argparse.ArgumentParser(description="Reset the local shipment store")
    parser.add_argument("--random", type=int, metavar="N", help="generate N random shipments")
    parser.add_argument("--seed", type=int, default=None, help="random seed")
    parser.add_argument("--data-dir", default=str(DATA_DIR), help="storage directory")
    args = parser.parse_args(argv)

    configure_logging()
    store = ShipmentStore(open_backend(args.data_dir), key=STORAGE_KEY)

    print("🚀 Seeding shipments...")
    if args.random:
        records = store.reset(random_shipments(args.random, seed=args.seed))
    else:
        records = store.reset()
    print(f"✅ Seeding complete: {len(records)} shipments in {args.data_dir}")


if __name__ == "__main__":
    main()
