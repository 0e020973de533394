from collections import Counter
from typing import Any, Dict, List, Optional

import numpy as np
import pandas as pd

from shipment_tracker.core.models import FilterMode, ShipmentRecord
from shipment_tracker.core.us_states import STATE_CODES, US_STATES, state_for_code

SELECTED_COLOR = "#1976d2"
EMPTY_COLOR = "#FFFFFF"
DENSITY_RGB = (46, 125, 50)

BASE_OPACITY = 0.1
OPACITY_STEP = 0.15
MAX_OPACITY = 0.9


# ==================================================
# STATE-WISE COUNTS
# ==================================================
def state_counts(shipments: List[ShipmentRecord], mode: FilterMode) -> Dict[str, int]:
    """
    Shipment count per state on the active axis.

    Example (origin mode):
    {
        "Texas": 3,
        "Ohio": 1
    }
    """
    if mode == FilterMode.ORIGIN:
        return dict(Counter(s.origin_state for s in shipments))
    return dict(Counter(s.destination_state for s in shipments))


def fill_opacity(count):
    """min(0.1 + count * 0.15, 0.9). Works on scalars and numpy arrays."""
    return np.minimum(BASE_OPACITY + np.asarray(count) * OPACITY_STEP, MAX_OPACITY)


def density_color(opacity: float) -> str:
    r, g, b = DENSITY_RGB
    return f"rgba({r}, {g}, {b}, {round(float(opacity), 2)})"


def state_color(state_name: str, counts: Dict[str, int], selected_state: Optional[str]) -> str:
    if state_name == selected_state:
        return SELECTED_COLOR
    count = counts.get(state_name, 0)
    if count == 0:
        return EMPTY_COLOR
    return density_color(fill_opacity(count))


def hover_label(state_name: str, count: int) -> str:
    return f"{state_name}: {count} shipment{'' if count == 1 else 's'}"


# ==================================================
# MAP FRAME
# ==================================================
def map_frame(
    shipments: List[ShipmentRecord],
    mode: FilterMode,
    selected_state: Optional[str],
) -> pd.DataFrame:
    """
    One row per mappable state: state, code, count, opacity, color, label.

    Counts always come from the full list so unselected regions keep their
    density while a state is selected.
    """
    counts = state_counts(shipments, mode)

    frame = pd.DataFrame({"state": US_STATES})
    frame["code"] = frame["state"].map(STATE_CODES)
    frame["count"] = frame["state"].map(lambda s: counts.get(s, 0)).astype(int)
    frame["opacity"] = np.where(frame["count"] > 0, fill_opacity(frame["count"].to_numpy()), 0.0)
    frame["color"] = [state_color(s, counts, selected_state) for s in frame["state"]]
    frame["label"] = [hover_label(s, c) for s, c in zip(frame["state"], frame["count"])]
    frame["selected"] = frame["state"] == selected_state
    return frame


# ==================================================
# CLICK EVENTS
# ==================================================
def state_from_selection(event: Any, frame: Optional[pd.DataFrame] = None) -> Optional[str]:
    """
    Extract the clicked state name from a Streamlit plotly selection event.

    Tries, in order: the USPS code in "location", the state name in
    "customdata", then "point_index" into ``frame``.
    """
    if event is None:
        return None
    selection = event.get("selection") if isinstance(event, dict) else getattr(event, "selection", None)
    if not selection:
        return None
    points = selection.get("points") if isinstance(selection, dict) else getattr(selection, "points", None)
    if not points or not isinstance(points[0], dict):
        return None
    point = points[0]

    location = point.get("location")
    if location:
        return state_for_code(location)

    customdata = point.get("customdata")
    if isinstance(customdata, (list, tuple)) and customdata:
        customdata = customdata[0]
    if isinstance(customdata, str) and customdata in STATE_CODES:
        return customdata

    index = point.get("point_index")
    if frame is not None and isinstance(index, int) and 0 <= index < len(frame):
        return frame.iloc[index]["state"]
    return None
