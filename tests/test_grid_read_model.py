from shipment_tracker.core.grid_read_model import (
    changed_cells,
    page_count,
    paginate,
    shipments_frame,
)
from shipment_tracker.core.models import ShipmentRecord

from tests.helpers import NEW_SHIPMENT

RECORDS = [ShipmentRecord.from_dict({**NEW_SHIPMENT, "id": i}) for i in range(1, 13)]


def test_frame_columns_and_order():
    frame = shipments_frame(RECORDS)
    assert list(frame.columns) == [
        "id", "originState", "destinationState", "description", "containerQuantity", "vehicleType",
    ]
    assert frame["id"].tolist() == list(range(1, 13))


def test_empty_frame():
    assert shipments_frame([]).empty


def test_paging():
    frame = shipments_frame(RECORDS)

    assert page_count(len(frame), 10) == 2
    assert page_count(0, 10) == 1
    assert paginate(frame, 1, 10)["id"].tolist() == list(range(1, 11))
    assert paginate(frame, 2, 10)["id"].tolist() == [11, 12]
    assert paginate(frame, 9, 5)["id"].tolist() == [11, 12]


def test_changed_cells_detects_vehicle_edit():
    before = shipments_frame(RECORDS[:3])
    after = before.copy()
    after.loc[after["id"] == 2, "vehicleType"] = "Ship"
    after.loc[after["id"] == 3, "description"] = "ignored"

    assert changed_cells(before, after) == [(2, "vehicleType", "Ship")]
    assert changed_cells(before, before.copy()) == []
