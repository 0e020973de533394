"""
SHIPMENT STORE

Single persisted collection of shipments.

Document layout under the storage key:
    { "shipments": [ {id, originState, destinationState, description,
                      containerQuantity, vehicleType}, ... ] }

Persistence discipline:
- Every mutation reads the whole collection, builds the new list, and writes
  the whole document back in one call
- The collection is seeded from the bundled dataset the first time it is
  read and found missing
- update/delete of an unknown id are silent no-ops
"""

import json
import logging
from pathlib import Path
from typing import Any, Callable, Dict, List, Optional, Union

from shipment_tracker.config import SEED_FILE, STORAGE_KEY
from shipment_tracker.core.models import ShipmentRecord
from shipment_tracker.storage.backends import StorageBackend, StorageCorruptError

logger = logging.getLogger(__name__)

COLLECTION = "shipments"
FIRST_ID = 1

ShipmentInput = Union[ShipmentRecord, Dict[str, Any]]


def load_seed_shipments(path: Union[str, Path] = SEED_FILE) -> List[Dict[str, Any]]:
    """Read the bundled default dataset ({"shipments": [...]})."""
    with open(path, "r", encoding="utf-8") as f:
        data = json.load(f)
    return list(data.get(COLLECTION, []))


def _as_record(shipment: ShipmentInput) -> ShipmentRecord:
    if isinstance(shipment, ShipmentRecord):
        return shipment
    return ShipmentRecord.from_dict(shipment)


def next_shipment_id(shipments: List[ShipmentRecord]) -> int:
    """max(existing ids) + 1, or FIRST_ID for an empty collection."""
    ids = [s.id for s in shipments if s.id is not None]
    if not ids:
        return FIRST_ID
    return max(ids) + 1


class ShipmentStore:
    """
    Persistence boundary for the shipment collection.

    Args:
        backend: Key-value backend holding the document
        key: Storage key of the document
        seed_loader: Returns the default shipments (as dicts) used on first run
    """

    def __init__(
        self,
        backend: StorageBackend,
        key: str = STORAGE_KEY,
        seed_loader: Optional[Callable[[], List[Dict[str, Any]]]] = None,
    ):
        self.backend = backend
        self.key = key
        self.seed_loader = seed_loader or load_seed_shipments

    # ══════════════════════════════════════════════════════════════
    # INTERNAL READ / WRITE
    # ══════════════════════════════════════════════════════════════

    def _read_document(self) -> Dict[str, Any]:
        """
        Stored document, or {} when the key is absent.

        Raises StorageCorruptError for a document of the wrong shape instead
        of letting seeding or a save overwrite it.
        """
        document = self.backend.read(self.key)
        if document is None:
            return {}
        if not isinstance(document, dict):
            raise StorageCorruptError(
                f"Stored document '{self.key}' must be an object, got {type(document).__name__}"
            )
        if COLLECTION in document and not isinstance(document[COLLECTION], list):
            raise StorageCorruptError(
                f"'{COLLECTION}' in '{self.key}' must be a list, "
                f"got {type(document[COLLECTION]).__name__}"
            )
        return document

    def _ensure_seeded(self) -> Dict[str, Any]:
        document = self._read_document()
        if COLLECTION not in document:
            seed = [dict(s) for s in self.seed_loader()]
            document = {**document, COLLECTION: seed}
            self.backend.write(self.key, document)
            logger.info(f"Seeded '{self.key}' with {len(seed)} default shipments")
        return document

    def _load(self) -> List[ShipmentRecord]:
        document = self._ensure_seeded()
        return [ShipmentRecord.from_dict(s) for s in document[COLLECTION]]

    def _save(self, shipments: List[ShipmentRecord]) -> None:
        document = self._read_document()
        document[COLLECTION] = [s.to_dict() for s in shipments]
        self.backend.write(self.key, document)

    # ══════════════════════════════════════════════════════════════
    # PUBLIC API
    # ══════════════════════════════════════════════════════════════

    def get_all(self) -> List[ShipmentRecord]:
        """Return the full collection (a fresh list on every call)."""
        return self._load()

    def get(self, shipment_id: int) -> Optional[ShipmentRecord]:
        for shipment in self._load():
            if shipment.id == shipment_id:
                return shipment
        return None

    def add(self, shipment: ShipmentInput) -> ShipmentRecord:
        """
        Assign the next id, append, persist.

        Any id carried by the input is ignored.
        """
        shipments = self._load()
        new_shipment = _as_record(shipment).with_id(next_shipment_id(shipments))
        self._save(shipments + [new_shipment])
        logger.info(f"Added shipment {new_shipment.id}")
        return new_shipment

    def update(self, shipment: ShipmentInput) -> Optional[ShipmentRecord]:
        """
        Replace the record with the same id, keeping collection order.

        Returns None (and writes nothing) when the id is not stored.
        """
        updated = _as_record(shipment)
        shipments = self._load()
        for index, existing in enumerate(shipments):
            if existing.id == updated.id:
                shipments[index] = updated
                self._save(shipments)
                logger.info(f"Updated shipment {updated.id}")
                return updated
        logger.debug(f"Update skipped: shipment {updated.id} not found")
        return None

    def delete(self, shipment_id: int) -> None:
        """Remove the record with ``shipment_id`` if present."""
        shipments = self._load()
        remaining = [s for s in shipments if s.id != shipment_id]
        if len(remaining) == len(shipments):
            logger.debug(f"Delete skipped: shipment {shipment_id} not found")
        self._save(remaining)

    def reset(self, shipments: Optional[List[ShipmentInput]] = None) -> List[ShipmentRecord]:
        """Replace the collection with ``shipments``, or the bundled seed if omitted."""
        if shipments is None:
            records = [ShipmentRecord.from_dict(s) for s in self.seed_loader()]
        else:
            records = [_as_record(s) for s in shipments]
        self._save(records)
        logger.info(f"Reset '{self.key}' to {len(records)} shipments")
        return records
