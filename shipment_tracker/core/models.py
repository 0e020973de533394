"""
SHIPMENT DATA MODEL

ShipmentRecord is the unit persisted by the store. On disk the fields use
camelCase names (originState, containerQuantity, ...); in Python they are
snake_case attributes.
"""

from dataclasses import dataclass, replace
from enum import Enum
from typing import Any, Dict, Optional


class VehicleType(Enum):
    """Transport used for a shipment"""
    TRUCK = "Truck"
    SHIP = "Ship"
    AIRPLANE = "Airplane"


class FilterMode(Enum):
    """Axis the selected map state is matched against"""
    ORIGIN = "origin"
    DESTINATION = "destination"


VEHICLE_TYPES = [v.value for v in VehicleType]

# Persisted name -> attribute name
FIELD_NAMES = {
    "originState": "origin_state",
    "destinationState": "destination_state",
    "description": "description",
    "containerQuantity": "container_quantity",
    "vehicleType": "vehicle_type",
}

REQUIRED_FIELDS = list(FIELD_NAMES)


@dataclass(frozen=True)
class ShipmentRecord:
    """
    A single tracked shipment.

    Attributes:
        id: Unique positive id assigned by the store (None before creation)
        origin_state: State/territory the shipment leaves from
        destination_state: State/territory the shipment goes to
        description: Free-text cargo description
        container_quantity: Number of containers
        vehicle_type: One of VEHICLE_TYPES
    """
    origin_state: str
    destination_state: str
    description: str
    container_quantity: int
    vehicle_type: str
    id: Optional[int] = None

    def to_dict(self) -> Dict[str, Any]:
        """Convert to the persisted (camelCase) representation."""
        data: Dict[str, Any] = {}
        if self.id is not None:
            data["id"] = self.id
        data.update({
            "originState": self.origin_state,
            "destinationState": self.destination_state,
            "description": self.description,
            "containerQuantity": self.container_quantity,
            "vehicleType": self.vehicle_type,
        })
        return data

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "ShipmentRecord":
        """Create from the persisted representation."""
        raw_id = data.get("id")
        return cls(
            id=int(raw_id) if raw_id not in (None, "") else None,
            origin_state=data["originState"],
            destination_state=data["destinationState"],
            description=data["description"],
            container_quantity=data["containerQuantity"],
            vehicle_type=data["vehicleType"],
        )

    def with_id(self, new_id: int) -> "ShipmentRecord":
        return replace(self, id=new_id)

    def with_field(self, field_name: str, value: Any) -> "ShipmentRecord":
        """Return a copy with one field changed (persisted or attribute name)."""
        attr = FIELD_NAMES.get(field_name, field_name)
        if attr not in FIELD_NAMES.values():
            raise KeyError(f"Unknown shipment field: {field_name}")
        return replace(self, **{attr: value})
