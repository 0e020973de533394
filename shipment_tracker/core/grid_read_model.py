"""
Grid rows for the shipment table: dataframe shaping, client-side paging,
and detection of inline vehicle-type edits.
"""

import math
from typing import List, Tuple

import pandas as pd

from shipment_tracker.core.models import ShipmentRecord

GRID_COLUMNS = {
    "id": "ID",
    "originState": "Origin State",
    "destinationState": "Destination State",
    "description": "Description",
    "containerQuantity": "Containers",
    "vehicleType": "Vehicle Type",
}

EDITABLE_COLUMNS = ["vehicleType"]


def shipments_frame(shipments: List[ShipmentRecord]) -> pd.DataFrame:
    rows = [s.to_dict() for s in shipments]
    frame = pd.DataFrame(rows, columns=list(GRID_COLUMNS))
    return frame.astype({"id": "int64", "containerQuantity": "int64"}) if not frame.empty else frame


def page_count(total_rows: int, page_size: int) -> int:
    return max(1, math.ceil(total_rows / page_size))


def paginate(frame: pd.DataFrame, page: int, page_size: int) -> pd.DataFrame:
    """
    Rows for 1-based ``page``. Out-of-range pages are clamped so a page that
    disappeared after a delete or a new filter shows the last page instead.
    """
    page = min(max(page, 1), page_count(len(frame), page_size))
    start = (page - 1) * page_size
    return frame.iloc[start:start + page_size]


def changed_cells(
    before: pd.DataFrame,
    after: pd.DataFrame,
    columns: List[str] = EDITABLE_COLUMNS,
) -> List[Tuple[int, str, object]]:
    """
    (shipment id, column, new value) for every edited cell in ``columns``.

    Rows are matched by id, not position.
    """
    if before.empty or after.empty:
        return []
    old = before.set_index("id")
    new = after.set_index("id")
    changes = []
    for shipment_id in new.index.intersection(old.index):
        for column in columns:
            value = new.at[shipment_id, column]
            if value != old.at[shipment_id, column]:
                changes.append((int(shipment_id), column, value))
    return changes
