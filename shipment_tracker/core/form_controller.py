"""
SHIPMENT FORM CONTROLLER

Purpose:
- Track whether the add/edit form is open and what it is editing
- Check required fields before anything reaches the store
- Hand the completed draft to the repository view, then reset

The only validation is required-field presence; the store accepts any
well-shaped record.
"""

import logging
from typing import Any, Dict, List, Optional

from shipment_tracker.core.models import REQUIRED_FIELDS, ShipmentRecord
from shipment_tracker.core.repository_view import ShipmentRepositoryView

logger = logging.getLogger(__name__)

EMPTY_DRAFT = {
    "originState": "",
    "destinationState": "",
    "description": "",
    "containerQuantity": "",
    "vehicleType": "",
}

FIELD_LABELS = {
    "originState": "Origin State",
    "destinationState": "Destination State",
    "description": "Description",
    "containerQuantity": "Container Quantity",
    "vehicleType": "Vehicle Type",
}


class MissingFieldsError(ValueError):
    """Raised when a form is submitted without every required field."""

    def __init__(self, fields: List[str]):
        self.fields = fields
        labels = ", ".join(FIELD_LABELS.get(f, f) for f in fields)
        super().__init__(f"Please fill in: {labels}")


def missing_fields(values: Dict[str, Any]) -> List[str]:
    missing = []
    for name in REQUIRED_FIELDS:
        value = values.get(name)
        if value is None or (isinstance(value, str) and not value.strip()):
            missing.append(name)
    return missing


class ShipmentFormController:
    """Draft state for the add/edit dialog."""

    def __init__(self, view: ShipmentRepositoryView):
        self.view = view
        self.is_open = False
        self.draft: Dict[str, Any] = dict(EMPTY_DRAFT)
        self.editing_id: Optional[int] = None

    @property
    def is_edit(self) -> bool:
        return self.editing_id is not None

    @property
    def title(self) -> str:
        return "Edit Shipment" if self.is_edit else "Add New Shipment"

    def open_for_add(self, initial: Optional[Dict[str, Any]] = None) -> None:
        self.draft = {**EMPTY_DRAFT, **(initial or {})}
        self.editing_id = None
        self.is_open = True

    def open_for_edit(self, shipment: ShipmentRecord) -> None:
        self.draft = shipment.to_dict()
        self.editing_id = shipment.id
        self.is_open = True

    def cancel(self) -> None:
        self.is_open = False
        self.draft = dict(EMPTY_DRAFT)
        self.editing_id = None

    def submit(self, values: Dict[str, Any]) -> Optional[ShipmentRecord]:
        """
        Persist the submitted values through the repository view.

        Raises MissingFieldsError when a required field is blank; the form
        stays open in that case.
        """
        values = {**self.draft, **values}
        missing = missing_fields(values)
        if missing:
            raise MissingFieldsError(missing)

        draft = {name: values[name] for name in REQUIRED_FIELDS}
        draft["description"] = str(draft["description"]).strip()
        draft["containerQuantity"] = int(draft["containerQuantity"])
        if self.editing_id is not None:
            draft["id"] = self.editing_id

        saved = self.view.save(draft)
        if saved is None:
            logger.warning(f"Shipment {self.editing_id} no longer exists; edit discarded")
        self.cancel()
        return saved
