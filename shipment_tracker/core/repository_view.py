"""
SHIPMENT REPOSITORY VIEW (DERIVED STATE)

Holds:
- all: mirror of ShipmentStore.get_all()
- filtered: subset of `all` matching the selected map state on the active axis

Rule: every mutation re-fetches `all` from the store and re-derives
`filtered` from it. `filtered` is never patched on its own.
"""

import logging
from typing import Any, Dict, List, Optional, Union

from shipment_tracker.core.models import FilterMode, ShipmentRecord
from shipment_tracker.storage.shipment_store import ShipmentStore

logger = logging.getLogger(__name__)


# ==================================================
# PURE DERIVATION
# ==================================================
def matches_selection(
    shipment: ShipmentRecord,
    mode: FilterMode,
    selected_state: Optional[str],
) -> bool:
    """True when ``shipment`` belongs in the filtered view."""
    if selected_state is None:
        return True
    if mode == FilterMode.ORIGIN:
        return shipment.origin_state == selected_state
    return shipment.destination_state == selected_state


def derive_filtered(
    shipments: List[ShipmentRecord],
    selected_state: Optional[str],
    mode: FilterMode,
) -> List[ShipmentRecord]:
    return [s for s in shipments if matches_selection(s, mode, selected_state)]


# ==================================================
# STATEFUL VIEW
# ==================================================
class ShipmentRepositoryView:
    """In-memory full and filtered shipment lists backed by a ShipmentStore."""

    def __init__(self, store: ShipmentStore, mode: FilterMode = FilterMode.ORIGIN):
        self.store = store
        self.mode = mode
        self.selected_state: Optional[str] = None
        self.all: List[ShipmentRecord] = []
        self.filtered: List[ShipmentRecord] = []

    def _rederive(self) -> None:
        self.filtered = derive_filtered(self.all, self.selected_state, self.mode)

    def _refresh(self) -> None:
        self.all = self.store.get_all()
        self._rederive()

    def load(self) -> List[ShipmentRecord]:
        self._refresh()
        return self.filtered

    # --------------------------------------------------
    # Mutations
    # --------------------------------------------------
    def save(self, draft: Union[ShipmentRecord, Dict[str, Any]]) -> Optional[ShipmentRecord]:
        """
        Persist a draft coming from the form.

        A draft with an id is an update, otherwise a create. Returns the
        persisted record, or None when updating an id that no longer exists.
        """
        record = draft if isinstance(draft, ShipmentRecord) else ShipmentRecord.from_dict(draft)
        if record.id:
            result = self.store.update(record)
        else:
            result = self.store.add(record)
        self._refresh()
        return result

    def delete(self, shipment_id: int) -> None:
        self.store.delete(shipment_id)
        self._refresh()

    def edit_field(self, shipment_id: int, field_name: str, value: Any) -> Optional[ShipmentRecord]:
        """
        Apply a single-field grid edit.

        The store replaces whole records, so the edit is merged into the
        current full record first.
        """
        current = next((s for s in self.all if s.id == shipment_id), None)
        if current is None:
            current = self.store.get(shipment_id)
        if current is None:
            logger.debug(f"Edit skipped: shipment {shipment_id} not found")
            self._refresh()
            return None
        result = self.store.update(current.with_field(field_name, value))
        self._refresh()
        return result

    # --------------------------------------------------
    # Selection
    # --------------------------------------------------
    def select_state(self, state_name: str) -> List[ShipmentRecord]:
        """Map click. Selecting the already-selected state clears the selection."""
        if state_name == self.selected_state:
            self.selected_state = None
        else:
            self.selected_state = state_name
        self._rederive()
        return self.filtered

    def set_mode(self, mode: Union[FilterMode, str]) -> None:
        """Switch the filter axis; any previous selection is dropped."""
        self.mode = FilterMode(mode)
        self.selected_state = None
        self.filtered = list(self.all)

    def draft_for_new(self) -> Optional[Dict[str, Any]]:
        """Initial form values when adding from a filtered context."""
        if not self.selected_state:
            return None
        if self.mode == FilterMode.ORIGIN:
            return {"originState": self.selected_state}
        return {"destinationState": self.selected_state}
